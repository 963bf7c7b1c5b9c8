# ============================================================================
# FILE: access_careers/core/cache.py
# ============================================================================
"""Course catalog caching system"""

from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional
import logging
from motor.motor_asyncio import AsyncIOMotorClient

from access_careers.catalog import (
    PROGRAMME_CATEGORIES, SUBJECTS, CourseCatalog, build_catalog, default_catalog
)
from access_careers.core.config import settings
from access_careers.core.exceptions import CatalogIntegrityError
from access_careers.schemas.education import CourseCutoff

logger = logging.getLogger(__name__)

class CatalogCache:
    """Holds the validated course catalog, optionally reloaded from Mongo with a TTL

    Without a client the embedded catalog is served and never expires.
    """

    def __init__(self, client: Optional[AsyncIOMotorClient] = None, ttl_hours: int = 6):
        """Initialize cache with an optional Mongo client"""
        self.client = client
        self.ttl = timedelta(hours=ttl_hours)
        self.cache_timestamp: datetime = None  # type: ignore
        self.catalog: Optional[CourseCatalog] = None

        logger.debug(f"CatalogCache initialized (source={'embedded' if client is None else 'mongo'})")

    async def initialize(self) -> None:
        """Load the catalog on startup; integrity errors stop the application"""
        try:
            await self.refresh_all()
            logger.info("✓ Catalog cache initialized successfully")
        except Exception as e:
            logger.error(f"Failed to initialize catalog cache: {e}")
            raise

    async def refresh_all(self) -> None:
        """Rebuild the catalog and swap it in once it has validated"""
        logger.info("Starting catalog refresh...")

        try:
            if self.client is None:
                catalog = default_catalog()
            else:
                cutoffs = await self._load_cutoffs()
                if cutoffs:
                    catalog = build_catalog(SUBJECTS, cutoffs, PROGRAMME_CATEGORIES)
                else:
                    logger.warning(
                        f"No documents in {settings.CATALOG_DB}.{settings.CUTOFFS_COLLECTION}, "
                        "using embedded catalog"
                    )
                    catalog = default_catalog()
        except Exception:
            # Serving the previous catalog: wait a full TTL before retrying
            if self.catalog is not None:
                self.cache_timestamp = datetime.utcnow()
            raise

        self.catalog = catalog
        self.cache_timestamp = datetime.utcnow()
        logger.info(f"  ✓ Loaded {len(catalog)} course cutoffs")

    async def _load_cutoffs(self) -> List[CourseCutoff]:
        """Load course cutoff documents from CATALOG_DB"""
        db = self.client[settings.CATALOG_DB]
        docs = await db[settings.CUTOFFS_COLLECTION].find({}).to_list(None)

        cutoffs = []
        problems = []
        for doc in docs or []:
            try:
                cutoffs.append(self._to_cutoff(doc))
            except (KeyError, TypeError, ValueError) as e:
                problems.append(f"{doc.get('course_id', '<no course_id>')}: malformed document ({e})")
        if problems:
            raise CatalogIntegrityError(problems)
        return cutoffs

    @staticmethod
    def _to_cutoff(doc: Dict[str, Any]) -> CourseCutoff:
        """Convert a Mongo document, dropping _id"""
        return CourseCutoff(
            course_id=str(doc["course_id"]),
            course_name=str(doc["course_name"]),
            programme_level=doc["programme_level"],
            category=str(doc["category"]),
            cluster_subject_ids=tuple(doc["cluster_subject_ids"]),
            cutoff_high=int(doc["cutoff_high"]),
            cutoff_mid=int(doc["cutoff_mid"]),
            cutoff_low=int(doc["cutoff_low"]),
        )

    def should_refresh(self) -> bool:
        """Check if cache needs refresh based on TTL (never for the embedded catalog)"""
        if not self.cache_timestamp:
            return True
        if self.client is None:
            return False
        return datetime.utcnow() - self.cache_timestamp > self.ttl

    def get_catalog(self) -> CourseCatalog:
        """Get the cached catalog"""
        if self.catalog is None:
            raise RuntimeError("Catalog cache has not been initialized")
        return self.catalog
