"""Static reference data: subjects, course cutoffs, programme taxonomy, mentors"""

from functools import lru_cache

from access_careers.catalog.course_catalog import CourseCatalog, build_catalog
from access_careers.catalog.cutoffs import COURSE_CUTOFFS
from access_careers.catalog.mentors import MENTORS, mentors_for_category
from access_careers.catalog.programmes import PROGRAMME_CATEGORIES, PROGRAMME_LEVELS
from access_careers.catalog.subjects import SUBJECTS

@lru_cache(maxsize=None)
def default_catalog() -> CourseCatalog:
    """The embedded catalog, built and validated once per process"""
    return build_catalog(SUBJECTS, COURSE_CUTOFFS, PROGRAMME_CATEGORIES)

__all__ = [
    "COURSE_CUTOFFS",
    "CourseCatalog",
    "MENTORS",
    "PROGRAMME_CATEGORIES",
    "PROGRAMME_LEVELS",
    "SUBJECTS",
    "build_catalog",
    "default_catalog",
    "mentors_for_category",
]
