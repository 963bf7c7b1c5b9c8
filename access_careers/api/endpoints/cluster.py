# ============================================================================
# FILE: access_careers/api/endpoints/cluster.py
# ============================================================================
"""Cluster points calculator and course matching endpoints"""

from fastapi import APIRouter, HTTPException, status, Depends
from datetime import datetime
import logging
from typing import List, Optional

from access_careers.catalog import CourseCatalog
from access_careers.core.dependencies import get_catalog
from access_careers.core.exceptions import DuplicateSubjectError, InvalidGradeError
from access_careers.schemas.education import (
    ClusterRequest, GradePoints, MatchResponse, PointsResponse, Subject, SubjectGroup
)
from access_careers.utils.cluster_calculator import CLUSTER_SIZE, compute_top_four_total
from access_careers.utils.course_matcher import ClusterMatcher
from access_careers.utils.grades import ALL_GRADES, GRADE_POINTS
from access_careers.utils.validators import to_grade_map, validate_subjects

logger = logging.getLogger(__name__)
router = APIRouter()

def _grades_from_request(request: ClusterRequest, catalog: CourseCatalog) -> dict:
    """Validate submitted grades, raising 400 on bad input"""
    is_valid, error_msg = validate_subjects(request.subjects, catalog)
    if not is_valid:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=error_msg
        )
    return to_grade_map(request.subjects)

# ==================== REFERENCE DATA ====================

@router.get("/grades", response_model=List[GradePoints])
async def list_grades() -> List[GradePoints]:
    """KCSE grade scale, best grade first"""
    return [GradePoints(grade=g, points=GRADE_POINTS[g]) for g in ALL_GRADES]

@router.get("/subjects", response_model=List[Subject])
async def list_subjects(
    group: Optional[SubjectGroup] = None,
    catalog: CourseCatalog = Depends(get_catalog)
) -> List[Subject]:
    """Subjects for the grade entry form, optionally one group"""
    if group is None:
        return catalog.subjects()
    return catalog.subjects_in_group(group)

# ==================== POINTS PREVIEW ====================

@router.post("/points", response_model=PointsResponse)
async def cluster_points(
    request: ClusterRequest,
    catalog: CourseCatalog = Depends(get_catalog)
) -> PointsResponse:
    """Best-four cluster points over every graded subject"""
    grades = _grades_from_request(request, catalog)

    try:
        total = compute_top_four_total(grades)
    except (InvalidGradeError, DuplicateSubjectError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return PointsResponse(
        total_points=total,
        subjects_entered=len(grades),
        minimum_required=CLUSTER_SIZE,
        can_match=len(grades) >= CLUSTER_SIZE
    )

# ==================== COURSE MATCH ====================

@router.post("/match", response_model=MatchResponse)
async def match_courses(
    request: ClusterRequest,
    catalog: CourseCatalog = Depends(get_catalog)
) -> MatchResponse:
    """Classify every catalog course into highly competitive, moderate and stretch

    Courses whose four cluster subjects are not all graded are left out, as
    are courses below their stretch threshold.
    """
    grades = _grades_from_request(request, catalog)

    try:
        logger.info(f"🔍 Matching courses for {len(grades)} graded subjects")

        total = compute_top_four_total(grades)
        results = ClusterMatcher(catalog).match(grades)

        logger.info(
            f"✅ Found {results.total_matches} matches "
            f"(highly competitive={len(results.highly_competitive)}, "
            f"moderate={len(results.moderate_chance)}, stretch={len(results.stretch_options)})"
        )

        return MatchResponse(
            total_points=total,
            subjects_entered=len(grades),
            total_matches=results.total_matches,
            results=results,
            timestamp=datetime.utcnow().isoformat()
        )

    except (InvalidGradeError, DuplicateSubjectError) as e:
        logger.warning(f"Rejected match request: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logger.error(f"❌ Error matching courses: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to match courses"
        )
