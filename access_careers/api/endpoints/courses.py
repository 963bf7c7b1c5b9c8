# ============================================================================
# FILE: access_careers/api/endpoints/courses.py
# ============================================================================
"""Course catalog browsing endpoints"""

from fastapi import APIRouter, HTTPException, status, Depends
import logging
from typing import List, Optional

from access_careers.catalog import CourseCatalog
from access_careers.core.dependencies import get_catalog
from access_careers.schemas.education import CourseCutoff, CourseListResponse, ProgrammeLevel

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("", response_model=CourseListResponse)
async def list_courses(
    level: Optional[ProgrammeLevel] = None,
    category: Optional[str] = None,
    q: Optional[str] = None,
    catalog: CourseCatalog = Depends(get_catalog)
) -> CourseListResponse:
    """List course cutoffs

    A search term takes precedence over the level/category filters, the same
    way the careers page behaves.
    """
    if q and q.strip():
        courses = catalog.search(q)
    elif level is not None and category:
        courses = catalog.cutoffs_for_category(level, category)
    elif level is not None:
        courses = catalog.cutoffs_for_level(level)
    elif category:
        courses = [c for c in catalog.cutoffs() if c.category == category]
    else:
        courses = catalog.cutoffs()

    logger.debug(f"Course listing level={level} category={category} q={q}: {len(courses)} results")
    return CourseListResponse(
        count=len(courses),
        courses=courses,
        level=level,
        category=category,
        query=q
    )

@router.get("/levels", response_model=List[ProgrammeLevel])
async def list_levels(catalog: CourseCatalog = Depends(get_catalog)) -> List[ProgrammeLevel]:
    return catalog.programme_levels()

@router.get("/levels/{level}/categories", response_model=List[str])
async def list_categories(
    level: ProgrammeLevel,
    catalog: CourseCatalog = Depends(get_catalog)
) -> List[str]:
    """Browse categories for a programme level"""
    return catalog.categories_for_level(level)

@router.get("/{course_id}", response_model=CourseCutoff)
async def get_course(
    course_id: str,
    catalog: CourseCatalog = Depends(get_catalog)
) -> CourseCutoff:
    cutoff = catalog.cutoff(course_id)
    if cutoff is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Course not found: {course_id}"
        )
    return cutoff
