# ============================================================================
# FILE: access_careers/utils/course_matcher.py
# ============================================================================
"""Course matching: classify catalog courses by the learner's cluster totals"""

from typing import Dict, List, Optional
import logging

from access_careers.catalog import CourseCatalog, default_catalog
from access_careers.schemas.education import CourseCutoff, CourseMatch, Grade, MatchResult
from access_careers.utils.cluster_calculator import GradeInput, collect_grades, top_four_sum
from access_careers.utils.grades import points_of

logger = logging.getLogger(__name__)

HIGHLY_COMPETITIVE = "highly_competitive"
MODERATE_CHANCE = "moderate_chance"
STRETCH_OPTIONS = "stretch_options"

def classify(student_points: int, cutoff: CourseCutoff) -> Optional[str]:
    """Tier for a cluster total, or None when it falls below the stretch threshold"""
    if student_points >= cutoff.cutoff_high:
        return HIGHLY_COMPETITIVE
    if student_points >= cutoff.cutoff_mid:
        return MODERATE_CHANCE
    if student_points >= cutoff.cutoff_low:
        return STRETCH_OPTIONS
    return None

class ClusterMatcher:
    """Matches a learner's grades against every course in a catalog"""

    def __init__(self, catalog: CourseCatalog):
        self.catalog = catalog

    def cluster_points(self, cutoff: CourseCutoff, grades: Dict[str, Grade]) -> Optional[int]:
        """Total over the course's own four subjects; None if any is ungraded"""
        points = []
        for subject_id in cutoff.cluster_subject_ids:
            grade = grades.get(subject_id)
            if grade is None:
                return None
            points.append(points_of(grade))
        return top_four_sum(points)

    def match(self, grades_by_subject: GradeInput) -> MatchResult:
        """Bucket every course the learner can be scored for

        A course is only scored when all four of its cluster subjects are
        graded. Buckets are ordered by points, highest first; equal totals keep
        catalog order.
        """
        grades = collect_grades(grades_by_subject)
        buckets: Dict[str, List[CourseMatch]] = {
            HIGHLY_COMPETITIVE: [],
            MODERATE_CHANCE: [],
            STRETCH_OPTIONS: [],
        }

        skipped = 0
        for cutoff in self.catalog.cutoffs():
            student_points = self.cluster_points(cutoff, grades)
            if student_points is None:
                skipped += 1
                continue

            tier = classify(student_points, cutoff)
            if tier is None:
                continue
            buckets[tier].append(
                CourseMatch(**cutoff.model_dump(), student_points=student_points)
            )

        for entries in buckets.values():
            entries.sort(key=lambda m: m.student_points, reverse=True)

        result = MatchResult(**buckets)
        logger.debug(
            f"Matched {len(grades)} grades: {result.total_matches} courses "
            f"({len(buckets[HIGHLY_COMPETITIVE])}/{len(buckets[MODERATE_CHANCE])}/"
            f"{len(buckets[STRETCH_OPTIONS])}), {skipped} skipped for missing subjects"
        )
        return result

def match_courses(grades_by_subject: GradeInput, catalog: Optional[CourseCatalog] = None) -> MatchResult:
    """Match against the given catalog, or the embedded one"""
    if catalog is None:
        catalog = default_catalog()
    return ClusterMatcher(catalog).match(grades_by_subject)
