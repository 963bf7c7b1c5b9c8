# ============================================================================
# FILE: access_careers/utils/grades.py
# ============================================================================
"""KCSE grade scale and grade-to-points lookup

Scale (12-point): A=12, A-=11, B+=10, B=9, B-=8, C+=7, C=6, C-=5, D+=4, D=3, D-=2, E=1
"""

from typing import Dict, List, Union

from access_careers.core.exceptions import InvalidGradeError
from access_careers.schemas.education import Grade

# Best to worst; this order is the grade ordering
ALL_GRADES: List[Grade] = list(Grade)

GRADE_POINTS: Dict[Grade, int] = {
    Grade.A: 12, Grade.A_MINUS: 11, Grade.B_PLUS: 10, Grade.B: 9, Grade.B_MINUS: 8,
    Grade.C_PLUS: 7, Grade.C: 6, Grade.C_MINUS: 5, Grade.D_PLUS: 4, Grade.D: 3,
    Grade.D_MINUS: 2, Grade.E: 1,
}

MIN_POINTS = GRADE_POINTS[Grade.E]
MAX_POINTS = GRADE_POINTS[Grade.A]

def to_grade(grade: Union[Grade, str]) -> Grade:
    """Return the Grade for an enum member or its exact letter token"""
    if isinstance(grade, Grade):
        return grade
    if isinstance(grade, str):
        try:
            return Grade(grade)
        except ValueError:
            pass
    raise InvalidGradeError(grade)

def points_of(grade: Union[Grade, str]) -> int:
    """Point value of a KCSE grade; raises InvalidGradeError for anything else"""
    return GRADE_POINTS[to_grade(grade)]

def normalize_grade(raw: str) -> str:
    """Trim and upper-case user input, e.g. ' b+ ' -> 'B+'"""
    if not isinstance(raw, str):
        return raw
    return raw.strip().upper().replace(" ", "")
