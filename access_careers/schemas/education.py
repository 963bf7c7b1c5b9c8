# ============================================================================
# FILE: access_careers/schemas/education.py
# ============================================================================
"""Education-related schemas: grades, subjects, course cutoffs and match results"""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Tuple
from enum import Enum

class Grade(str, Enum):
    """KCSE letter grades, best to worst"""
    A = "A"
    A_MINUS = "A-"
    B_PLUS = "B+"
    B = "B"
    B_MINUS = "B-"
    C_PLUS = "C+"
    C = "C"
    C_MINUS = "C-"
    D_PLUS = "D+"
    D = "D"
    D_MINUS = "D-"
    E = "E"

class SubjectGroup(str, Enum):
    """Subject groups used to lay out the grade entry form"""
    COMPULSORY = "compulsory"
    SCIENCES = "sciences"
    HUMANITIES = "humanities"
    TECHNICAL = "technical"

class ProgrammeLevel(str, Enum):
    """Programme levels offered through KUCCPS"""
    DEGREE = "Degree"
    DIPLOMA = "Diploma"
    CERTIFICATE = "Certificate"
    ARTISAN = "Artisan"

class Subject(BaseModel):
    """A KCSE subject the learner can grade"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    group: SubjectGroup

class CourseCutoff(BaseModel):
    """Admission thresholds of one programme for its four cluster subjects"""
    model_config = ConfigDict(frozen=True)

    course_id: str
    course_name: str
    programme_level: ProgrammeLevel
    category: str
    cluster_subject_ids: Tuple[str, ...]
    cutoff_high: int  # highly competitive threshold
    cutoff_mid: int   # moderate chance threshold
    cutoff_low: int   # stretch threshold

class CourseMatch(CourseCutoff):
    """A course cutoff together with the learner's cluster total for it"""
    student_points: int

class MatchResult(BaseModel):
    """Courses grouped by admission likelihood"""
    highly_competitive: List[CourseMatch] = Field(default_factory=list)
    moderate_chance: List[CourseMatch] = Field(default_factory=list)
    stretch_options: List[CourseMatch] = Field(default_factory=list)

    @property
    def total_matches(self) -> int:
        return len(self.highly_competitive) + len(self.moderate_chance) + len(self.stretch_options)

class ProgrammeCategories(BaseModel):
    """Browse categories for one programme level"""
    model_config = ConfigDict(frozen=True)

    level: ProgrammeLevel
    categories: Tuple[str, ...]

class Mentor(BaseModel):
    """Mentor profile surfaced on course pages"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    title: str
    industry: str
    bio: str
    guidance_areas: Tuple[str, ...]
    category_tags: Tuple[str, ...]

# ==================== REQUEST / RESPONSE SCHEMAS ====================

class SubjectGrade(BaseModel):
    """Subject and grade pair"""
    subject: str = Field(..., min_length=1)
    grade: str = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={"example": {"subject": "maths", "grade": "A"}}
    )

class ClusterRequest(BaseModel):
    """Learner grades submitted for a points preview or a course match"""
    subjects: List[SubjectGrade] = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "subjects": [
                    {"subject": "maths", "grade": "A"},
                    {"subject": "physics", "grade": "A-"},
                    {"subject": "chemistry", "grade": "B+"},
                    {"subject": "english", "grade": "B"},
                ]
            }
        }
    )

class GradePoints(BaseModel):
    """One row of the grade scale"""
    grade: Grade
    points: int

class PointsResponse(BaseModel):
    """Best-four points preview"""
    total_points: int
    subjects_entered: int
    minimum_required: int
    can_match: bool

class MatchResponse(BaseModel):
    """Response with course match results"""
    total_points: int
    subjects_entered: int
    total_matches: int
    results: MatchResult
    timestamp: str

class CourseListResponse(BaseModel):
    """Course cutoffs matching a browse or search query"""
    count: int
    courses: List[CourseCutoff]
    level: Optional[ProgrammeLevel] = None
    category: Optional[str] = None
    query: Optional[str] = None
