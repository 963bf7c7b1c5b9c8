"""Errors raised by the grade model, the calculator and the catalog"""

from typing import Iterable, List


class CatalogError(Exception):
    """Base class for cluster matching and catalog errors"""


class InvalidGradeError(CatalogError, ValueError):
    """A grade symbol outside the 12-point KCSE scale"""

    def __init__(self, grade: object):
        self.grade = grade
        super().__init__(f"Invalid grade: {grade!r}")


class DuplicateSubjectError(CatalogError, ValueError):
    """The same subject was graded twice in one request"""

    def __init__(self, subject_id: str):
        self.subject_id = subject_id
        super().__init__(f"Duplicate grade for subject: {subject_id}")


class CatalogIntegrityError(CatalogError):
    """Reference data failed validation at load time"""

    def __init__(self, problems: Iterable[str]):
        self.problems: List[str] = list(problems)
        super().__init__(
            f"Catalog failed integrity check ({len(self.problems)} problems): "
            + "; ".join(self.problems)
        )
