"""Main API router"""

from fastapi import APIRouter

from access_careers.api.endpoints import cluster, courses, mentors

router = APIRouter()


router.include_router(cluster.router, prefix="/cluster", tags=["Cluster Calculator"])
router.include_router(courses.router, prefix="/courses", tags=["Courses"])
router.include_router(mentors.router, prefix="/mentors", tags=["Mentors"])
