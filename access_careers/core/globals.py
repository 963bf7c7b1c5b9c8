# ============================================================================
# FILE: access_careers/core/globals.py
# ============================================================================
"""Global application instances - client and cache"""

from typing import Optional
from motor.motor_asyncio import AsyncIOMotorClient
from access_careers.core.cache import CatalogCache

# Global instances
client: Optional[AsyncIOMotorClient] = None
cache: Optional[CatalogCache] = None
