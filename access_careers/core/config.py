# access_careers/core/config.py

"""Application configuration from environment variables"""

from pydantic_settings import BaseSettings # type: ignore
from typing import List, Literal
import os

class Settings(BaseSettings):
    """Application settings from environment variables"""

    # Catalog source: 'embedded' uses the built-in tables, 'mongo' loads cutoffs from MONGO_URI
    CATALOG_SOURCE: Literal['embedded', 'mongo'] = 'embedded'

    # Database
    MONGO_URI: str = os.getenv(
        'MONGO_URI',
        'mongodb://localhost:27017'
    )
    CATALOG_DB: str = 'access_careers'
    CUTOFFS_COLLECTION: str = 'course_cutoffs'

    # API
    API_TITLE: str = 'ACCESS Careers API'
    API_VERSION: str = '1.0.0'

    # CORS
    CORS_ORIGINS: List[str] = [
        'http://localhost:3000',
        'http://localhost:5173',
        'http://127.0.0.1:3000',
        'http://127.0.0.1:5173',
    ]

    # Cache - in hours (only used when the catalog comes from Mongo)
    CACHE_TTL_HOURS: int = 6

    # Logging
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    class Config:
        env_file = '.env'
        case_sensitive = True

settings = Settings()
