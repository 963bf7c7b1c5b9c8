# ============================================================================
# FILE: access_careers/core/dependencies.py
# ============================================================================
"""Dependency injection for FastAPI routes"""

from fastapi import HTTPException, status
import logging

from access_careers.catalog import CourseCatalog
from access_careers.core import globals as app_globals

logger = logging.getLogger(__name__)

async def get_catalog() -> CourseCatalog:
    """Get the current course catalog

    Reloads from the database first when the cached copy has expired.
    """
    cache = app_globals.cache
    if cache is None:
        logger.error("Catalog cache is not available")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Catalog unavailable"
        )

    if cache.should_refresh():
        try:
            await cache.refresh_all()
        except Exception as e:
            # Keep serving the last good catalog
            logger.error(f"Catalog refresh failed: {e}")
            if cache.catalog is None:
                raise HTTPException(
                    status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                    detail="Catalog unavailable"
                )

    return cache.get_catalog()
