# ============================================================================
# FILE: access_careers/utils/validators.py
# ============================================================================
"""Input validation utilities"""

from typing import Dict, List, Tuple
import logging

from access_careers.catalog import CourseCatalog
from access_careers.schemas.education import Grade, SubjectGrade
from access_careers.utils.grades import normalize_grade

logger = logging.getLogger(__name__)

VALID_GRADES = {g.value for g in Grade}

def validate_subjects(subjects: List[SubjectGrade], catalog: CourseCatalog) -> Tuple[bool, str]:
    """Validate subject input

    Args:
        subjects: List of SubjectGrade objects
        catalog: Catalog whose subjects are accepted

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not subjects:
        return False, "At least one subject is required"

    max_subjects = len(catalog.subjects())
    if len(subjects) > max_subjects:
        return False, f"Maximum {max_subjects} subjects allowed"

    seen = set()
    for subject in subjects:
        subject_id = subject.subject.strip().lower()
        if not catalog.has_subject(subject_id):
            error_msg = f"Unknown subject: {subject.subject}"
            logger.warning(error_msg)
            return False, error_msg

        if subject_id in seen:
            error_msg = f"Duplicate subject: {subject_id}"
            logger.warning(error_msg)
            return False, error_msg
        seen.add(subject_id)

        if normalize_grade(subject.grade) not in VALID_GRADES:
            error_msg = f"Invalid grade: {subject.grade}. Valid grades are: {', '.join(g.value for g in Grade)}"
            logger.warning(error_msg)
            return False, error_msg

    logger.debug(f"Validated {len(subjects)} subjects successfully")
    return True, ""

def to_grade_map(subjects: List[SubjectGrade]) -> Dict[str, str]:
    """Subject -> normalized grade for subjects that passed validate_subjects"""
    return {s.subject.strip().lower(): normalize_grade(s.grade) for s in subjects}
