"""Cluster points calculation

KUCCPS scores a cluster from four subjects. The calculator implements the
"best 4 of N" rule: map each grade to points, keep the four highest, sum them.
Fewer than four grades give 0, meaning there is not enough data yet.
"""

from collections.abc import Mapping as MappingABC
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union
import logging

from access_careers.core.exceptions import DuplicateSubjectError
from access_careers.schemas.education import Grade
from access_careers.utils.grades import points_of, to_grade

logger = logging.getLogger(__name__)

CLUSTER_SIZE = 4

GradeValue = Union[Grade, str]
GradeInput = Union[Mapping[str, Optional[GradeValue]], Iterable[Tuple[str, Optional[GradeValue]]]]

def _iter_pairs(grades: GradeInput) -> Iterator[Tuple[str, Optional[GradeValue]]]:
    if isinstance(grades, MappingABC):
        return iter(grades.items())
    return iter(grades)

def collect_grades(grades: GradeInput) -> Dict[str, Grade]:
    """Normalize learner input into a subject -> Grade dict

    Accepts a mapping or a sequence of (subject_id, grade) pairs. Entries with
    no grade (None or "") are treated as not filled in and dropped. A subject
    graded twice raises DuplicateSubjectError; an unknown grade symbol raises
    InvalidGradeError.
    """
    collected: Dict[str, Grade] = {}
    for subject_id, grade in _iter_pairs(grades):
        if grade is None or grade == "":
            continue
        if subject_id in collected:
            raise DuplicateSubjectError(subject_id)
        collected[subject_id] = to_grade(grade)
    return collected

def top_four_sum(points: Iterable[int]) -> int:
    """Sum of the four largest values, or 0 when there are fewer than four"""
    ranked = sorted(points, reverse=True)
    if len(ranked) < CLUSTER_SIZE:
        return 0
    return sum(ranked[:CLUSTER_SIZE])

def calculate_cluster_points(pairs: GradeInput) -> int:
    """Best-four point total over (subject_id, grade) pairs"""
    grades = collect_grades(pairs)
    total = top_four_sum(points_of(g) for g in grades.values())
    logger.debug(f"Cluster points for {len(grades)} subjects: {total}")
    return total

def compute_top_four_total(grades_by_subject: GradeInput) -> int:
    """Standalone best-four preview over every subject the learner has graded

    This is independent of any one course's cluster; see
    access_careers.utils.course_matcher for per-course totals.
    """
    return calculate_cluster_points(grades_by_subject)
