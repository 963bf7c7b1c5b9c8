# ============================================================================
# FILE: access_careers/__init__.py
# ============================================================================
"""ACCESS Careers API - Application Factory"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from motor.motor_asyncio import AsyncIOMotorClient
import logging

from access_careers.core.config import settings
from access_careers.core.cache import CatalogCache
from access_careers.core import globals as app_globals
from access_careers.api.routes import router as api_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown"""
    # Startup
    try:
        logger.info(f"Starting application (catalog source: {settings.CATALOG_SOURCE})...")
        if settings.CATALOG_SOURCE == "mongo":
            app_globals.client = AsyncIOMotorClient(settings.MONGO_URI)

        # Load and validate the catalog; a CatalogIntegrityError aborts startup
        app_globals.cache = CatalogCache(app_globals.client, ttl_hours=settings.CACHE_TTL_HOURS)
        await app_globals.cache.initialize()

        logger.info("✓ Catalog cache initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize catalog: {e}")
        raise

    yield

    # Shutdown
    try:
        if app_globals.client is not None:
            app_globals.client.close()
            logger.info("✓ Database client closed")
    except Exception as e:
        logger.error(f"Error closing database client: {e}")
    finally:
        app_globals.client = None
        app_globals.cache = None

def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title=settings.API_TITLE,
        description="KUCCPS cluster points calculator and course eligibility matcher",
        version=settings.API_VERSION,
        docs_url="/api/docs",
        openapi_url="/api/openapi.json",
        lifespan=lifespan
    )

    # CORS Configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(api_router, prefix="/api")

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        from datetime import datetime
        cache = app_globals.cache
        return {
            "status": "healthy",
            "timestamp": datetime.utcnow().isoformat(),
            "version": settings.API_VERSION,
            "catalog_courses": len(cache.catalog) if cache and cache.catalog is not None else 0
        }

    logger.info("FastAPI application created")
    return app

# Create app instance
app = create_app()
