"""
Tests for utils/course_matcher.py — tier classification against course cutoffs.
"""

import pytest

from access_careers.catalog import SUBJECTS, CourseCatalog, default_catalog
from access_careers.utils.course_matcher import ClusterMatcher, classify, match_courses

from conftest import ENGINEERING_CLUSTER, make_cutoff


def _ids(entries):
    return [e.course_id for e in entries]


def _all_ids(result):
    return _ids(result.highly_competitive) + _ids(result.moderate_chance) + _ids(result.stretch_options)


class TestConcreteScenario:
    """Course x: cluster maths/physics/chemistry/english, cutoffs 44/40/37."""

    def test_moderate_chance_at_42(self, single_course_catalog):
        grades = {"maths": "A", "physics": "A-", "chemistry": "B+", "english": "B"}
        result = match_courses(grades, catalog=single_course_catalog)
        assert _ids(result.moderate_chance) == ["x"]
        assert result.moderate_chance[0].student_points == 42
        assert result.highly_competitive == []
        assert result.stretch_options == []

    def test_highly_competitive_at_45(self, single_course_catalog):
        grades = {"maths": "A", "physics": "A-", "chemistry": "B+", "english": "A"}
        result = match_courses(grades, catalog=single_course_catalog)
        assert _ids(result.highly_competitive) == ["x"]
        assert result.highly_competitive[0].student_points == 45

    def test_absent_without_english(self, single_course_catalog):
        grades = {"maths": "A", "physics": "A", "chemistry": "A", "biology": "A", "kiswahili": "A"}
        result = match_courses(grades, catalog=single_course_catalog)
        assert _all_ids(result) == []
        assert result.total_matches == 0

    def test_entry_carries_cutoff_fields(self, single_course_catalog, course_x):
        grades = {"maths": "A", "physics": "A-", "chemistry": "B+", "english": "B"}
        entry = match_courses(grades, catalog=single_course_catalog).moderate_chance[0]
        assert entry.course_name == course_x.course_name
        assert entry.cluster_subject_ids == course_x.cluster_subject_ids
        assert (entry.cutoff_high, entry.cutoff_mid, entry.cutoff_low) == (44, 40, 37)


class TestTierBoundaries:

    @pytest.fixture
    def boundary_catalog(self):
        # all-equal grades give 4 x points, so thresholds are multiples of 4
        return CourseCatalog(SUBJECTS, [make_cutoff("b", ENGINEERING_CLUSTER, 40, 36, 32)])

    @pytest.mark.parametrize(
        "grade, bucket",
        [
            ("A-", "highly_competitive"),   # 44
            ("B+", "highly_competitive"),   # 40 == high
            ("B", "moderate_chance"),       # 36 == mid
            ("B-", "stretch_options"),      # 32 == low
            ("C+", None),                   # 28 < low
        ],
    )
    def test_inclusive_lower_bounds(self, boundary_catalog, grade, bucket):
        grades = {s: grade for s in ENGINEERING_CLUSTER}
        result = match_courses(grades, catalog=boundary_catalog)
        for name in ("highly_competitive", "moderate_chance", "stretch_options"):
            expected = ["b"] if name == bucket else []
            assert _ids(getattr(result, name)) == expected

    def test_one_below_low_is_excluded(self):
        cutoff = make_cutoff("c", ENGINEERING_CLUSTER, 44, 40, 37)
        assert classify(37, cutoff) == "stretch_options"
        assert classify(36, cutoff) is None
        assert classify(40, cutoff) == "moderate_chance"
        assert classify(44, cutoff) == "highly_competitive"


class TestClusterCompletenessGate:

    def test_only_fully_covered_courses_are_scored(self):
        catalog = CourseCatalog(SUBJECTS, [
            make_cutoff("eng", ENGINEERING_CLUSTER, 20, 10, 4),
            make_cutoff("arts", ("english", "kiswahili", "history", "geography"), 20, 10, 4),
        ])
        grades = {"maths": "C", "physics": "C", "chemistry": "C", "english": "C", "history": "A"}
        result = match_courses(grades, catalog=catalog)
        assert _all_ids(result) == ["eng"]

    def test_high_grades_do_not_compensate_for_missing_subject(self, single_course_catalog):
        grades = {"maths": "A", "physics": "A", "chemistry": "A"}
        assert match_courses(grades, catalog=single_course_catalog).total_matches == 0

    def test_extra_subjects_do_not_change_cluster_total(self, single_course_catalog):
        base = {"maths": "B", "physics": "B", "chemistry": "B", "english": "B"}
        extra = dict(base, biology="A", history="A", geography="A")
        with_extra = match_courses(extra, catalog=single_course_catalog)
        without = match_courses(base, catalog=single_course_catalog)
        assert with_extra == without
        assert with_extra.moderate_chance == [] and with_extra.stretch_options == []

    def test_empty_input_gives_empty_buckets(self):
        result = match_courses({})
        assert result.highly_competitive == []
        assert result.moderate_chance == []
        assert result.stretch_options == []


class TestOrdering:

    def test_bucket_sorted_by_points_descending_with_stable_ties(self):
        catalog = CourseCatalog(SUBJECTS, [
            make_cutoff("low", ("maths", "english", "kiswahili", "history"), 10, 8, 4),
            make_cutoff("high", ENGINEERING_CLUSTER, 10, 8, 4),
            make_cutoff("tie-a", ("maths", "english", "kiswahili", "geography"), 10, 8, 4),
            make_cutoff("tie-b", ("maths", "english", "kiswahili", "cre"), 10, 8, 4),
        ])
        grades = {
            "maths": "A", "english": "A", "kiswahili": "A",
            "physics": "A", "chemistry": "A",
            "history": "E", "geography": "B", "cre": "B",
        }
        result = match_courses(grades, catalog=catalog)
        assert _ids(result.highly_competitive) == ["high", "tie-a", "tie-b", "low"]
        points = [e.student_points for e in result.highly_competitive]
        assert points == sorted(points, reverse=True)


class TestPurity:

    def test_idempotent(self):
        grades = {"maths": "B+", "english": "B", "kiswahili": "B-", "physics": "C+", "chemistry": "B", "biology": "A-"}
        first = match_courses(grades)
        second = match_courses(grades)
        assert first == second
        assert first.model_dump() == second.model_dump()

    def test_catalog_not_mutated(self, single_course_catalog, course_x):
        before = single_course_catalog.cutoffs()
        match_courses({"maths": "A", "physics": "A", "chemistry": "A", "english": "A"}, catalog=single_course_catalog)
        assert single_course_catalog.cutoffs() == before
        assert single_course_catalog.cutoff("x") == course_x

    def test_matcher_uses_injected_catalog(self, single_course_catalog):
        grades = {s: "A" for s in ENGINEERING_CLUSTER}
        result = ClusterMatcher(single_course_catalog).match(grades)
        assert _all_ids(result) == ["x"]


class TestEmbeddedCatalog:

    def test_strong_science_student(self):
        grades = {"maths": "A", "physics": "A", "chemistry": "A", "biology": "A", "english": "A-"}
        result = match_courses(grades)
        assert "d-mhs-001" in _ids(result.highly_competitive)
        assert "d-lg-001" not in _all_ids(result)  # needs kiswahili, history, cre

    def test_every_match_is_fully_graded(self):
        grades = {"maths": "B", "english": "B+", "kiswahili": "B", "business": "A-", "geography": "C+"}
        result = match_courses(grades)
        catalog = default_catalog()
        for course_id in _all_ids(result):
            cluster = catalog.cutoff(course_id).cluster_subject_ids
            assert all(s in grades for s in cluster)
