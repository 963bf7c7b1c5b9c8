# ============================================================================
# FILE: access_careers/catalog/course_catalog.py
# ============================================================================
"""Validated, indexed, read-only catalog of subjects and course cutoffs"""

from typing import Dict, Iterable, List, Optional, Sequence, Tuple
import logging

from access_careers.core.exceptions import CatalogIntegrityError
from access_careers.schemas.education import (
    CourseCutoff, ProgrammeCategories, ProgrammeLevel, Subject, SubjectGroup
)
from access_careers.utils.cluster_calculator import CLUSTER_SIZE
from access_careers.utils.grades import MAX_POINTS, MIN_POINTS

logger = logging.getLogger(__name__)

# Feasible cluster totals: 4 subjects x 1..12 points
MIN_CUTOFF = CLUSTER_SIZE * MIN_POINTS
MAX_CUTOFF = CLUSTER_SIZE * MAX_POINTS

class CourseCatalog:
    """Subjects and course cutoffs, checked once on construction

    Every lookup returns entries in declaration order. The catalog never
    changes after construction; build a new one to reload.
    """

    def __init__(
        self,
        subjects: Iterable[Subject],
        cutoffs: Iterable[CourseCutoff],
        programme_categories: Iterable[ProgrammeCategories] = (),
    ):
        self._subjects: Tuple[Subject, ...] = tuple(subjects)
        self._cutoffs: Tuple[CourseCutoff, ...] = tuple(cutoffs)
        self._categories: Dict[ProgrammeLevel, Tuple[str, ...]] = {
            pc.level: tuple(pc.categories) for pc in programme_categories
        }

        self.validate()

        self._subject_index: Dict[str, Subject] = {s.id: s for s in self._subjects}
        self._cutoff_index: Dict[str, CourseCutoff] = {c.course_id: c for c in self._cutoffs}
        logger.debug(f"CourseCatalog built: subjects={len(self._subjects)}, cutoffs={len(self._cutoffs)}")

    def validate(self) -> None:
        """Raise CatalogIntegrityError listing every problem in the reference data"""
        problems: List[str] = []

        subject_ids = set()
        for subject in self._subjects:
            if subject.id in subject_ids:
                problems.append(f"duplicate subject id '{subject.id}'")
            subject_ids.add(subject.id)
            if not isinstance(subject.group, SubjectGroup):
                problems.append(f"subject '{subject.id}' has unknown group {subject.group!r}")

        course_ids = set()
        for cutoff in self._cutoffs:
            cid = cutoff.course_id
            if cid in course_ids:
                problems.append(f"duplicate course id '{cid}'")
            course_ids.add(cid)

            cluster = cutoff.cluster_subject_ids
            if len(cluster) != CLUSTER_SIZE or len(set(cluster)) != CLUSTER_SIZE:
                problems.append(f"{cid}: cluster must name {CLUSTER_SIZE} distinct subjects, got {list(cluster)}")
            unknown = [s for s in cluster if s not in subject_ids]
            if unknown:
                problems.append(f"{cid}: unknown cluster subjects {unknown}")

            for name in ("cutoff_high", "cutoff_mid", "cutoff_low"):
                value = getattr(cutoff, name)
                if not MIN_CUTOFF <= value <= MAX_CUTOFF:
                    problems.append(f"{cid}: {name}={value} outside [{MIN_CUTOFF}, {MAX_CUTOFF}]")

            if not cutoff.cutoff_high >= cutoff.cutoff_mid >= cutoff.cutoff_low:
                problems.append(
                    f"{cid}: thresholds must satisfy high >= mid >= low "
                    f"(got {cutoff.cutoff_high}/{cutoff.cutoff_mid}/{cutoff.cutoff_low})"
                )

        if problems:
            for problem in problems:
                logger.error(f"Catalog integrity: {problem}")
            raise CatalogIntegrityError(problems)

    # ==================== SUBJECTS ====================

    def subjects(self) -> List[Subject]:
        return list(self._subjects)

    def subject(self, subject_id: str) -> Optional[Subject]:
        return self._subject_index.get(subject_id)

    def has_subject(self, subject_id: str) -> bool:
        return subject_id in self._subject_index

    def subjects_in_group(self, group: SubjectGroup) -> List[Subject]:
        """Subjects tagged with a group, in declaration order"""
        return [s for s in self._subjects if s.group == group]

    # ==================== COURSE CUTOFFS ====================

    def cutoffs(self) -> List[CourseCutoff]:
        return list(self._cutoffs)

    def cutoff(self, course_id: str) -> Optional[CourseCutoff]:
        return self._cutoff_index.get(course_id)

    def cutoffs_for_level(self, level: ProgrammeLevel) -> List[CourseCutoff]:
        return [c for c in self._cutoffs if c.programme_level == level]

    def cutoffs_for_category(self, level: ProgrammeLevel, category: str) -> List[CourseCutoff]:
        return [
            c for c in self._cutoffs
            if c.programme_level == level and c.category == category
        ]

    def search(self, query: str) -> List[CourseCutoff]:
        """Case-insensitive match on course name or category"""
        q = (query or "").strip().lower()
        if not q:
            return []
        return [
            c for c in self._cutoffs
            if q in c.course_name.lower() or q in c.category.lower()
        ]

    # ==================== PROGRAMME TAXONOMY ====================

    def programme_levels(self) -> List[ProgrammeLevel]:
        return list(ProgrammeLevel)

    def categories_for_level(self, level: ProgrammeLevel) -> List[str]:
        return list(self._categories.get(level, ()))

    def __len__(self) -> int:
        return len(self._cutoffs)

def build_catalog(
    subjects: Sequence[Subject],
    cutoffs: Sequence[CourseCutoff],
    programme_categories: Sequence[ProgrammeCategories] = (),
) -> CourseCatalog:
    """Build and validate a catalog, logging a summary"""
    catalog = CourseCatalog(subjects, cutoffs, programme_categories)
    logger.info(f"✓ Catalog loaded: {len(subjects)} subjects, {len(cutoffs)} course cutoffs")
    return catalog
