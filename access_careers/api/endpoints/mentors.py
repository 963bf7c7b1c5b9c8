"""Mentor directory endpoints"""

from fastapi import APIRouter
from typing import List, Optional

from access_careers.catalog import MENTORS, mentors_for_category
from access_careers.schemas.education import Mentor

router = APIRouter()

@router.get("", response_model=List[Mentor])
async def list_mentors(category: Optional[str] = None) -> List[Mentor]:
    """All mentors, or those tagged with a course category"""
    if category:
        return mentors_for_category(category)
    return list(MENTORS)
