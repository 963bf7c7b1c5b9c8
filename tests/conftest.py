"""Shared fixtures: a small synthetic catalog and an API client"""

import pytest
from fastapi.testclient import TestClient

from access_careers import create_app
from access_careers.catalog import SUBJECTS, CourseCatalog
from access_careers.schemas.education import CourseCutoff, ProgrammeLevel


def make_cutoff(course_id, cluster, high, mid, low, level=ProgrammeLevel.DEGREE, category="Engineering & Technology"):
    return CourseCutoff(
        course_id=course_id,
        course_name=f"Course {course_id}",
        programme_level=level,
        category=category,
        cluster_subject_ids=tuple(cluster),
        cutoff_high=high,
        cutoff_mid=mid,
        cutoff_low=low,
    )


ENGINEERING_CLUSTER = ("maths", "physics", "chemistry", "english")


@pytest.fixture
def course_x():
    return make_cutoff("x", ENGINEERING_CLUSTER, 44, 40, 37)


@pytest.fixture
def single_course_catalog(course_x):
    return CourseCatalog(SUBJECTS, [course_x])


@pytest.fixture
def client():
    with TestClient(create_app()) as test_client:
        yield test_client
