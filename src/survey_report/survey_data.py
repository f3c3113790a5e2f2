from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class SurveyRecord:
    """One learner's answers to a course survey.

    Attribute names match the export keys (hyphens removed), so a decoded
    flat record maps onto the constructor directly. Rated questions are
    ``None`` when the respondent skipped them, the export format did not
    carry them, or the value could not be decoded.
    """

    country: str = ""
    course: str = ""
    course_ver: str = ""
    email: str = ""
    found_ver: str = ""
    instructor: str = ""
    language: str = ""
    modality: str = ""
    name: str = ""
    progress: str = ""

    Q1508: str = ""  # contact opt-in

    # Curriculum (0-5)
    Q207: Optional[int] = None
    Q208: Optional[int] = None
    Q209: Optional[int] = None
    Q210: Optional[int] = None
    Q508: str = ""  # comments

    # Instructor (0-5)
    Q306: Optional[int] = None
    Q307: Optional[int] = None
    Q308: Optional[int] = None
    Q320: Optional[int] = None
    Q310: Optional[int] = None
    Q318: str = ""  # comments

    # Learning environment (0-5)
    Q1901: str = ""
    Q1002: Optional[int] = None
    Q1003: Optional[int] = None
    Q1004: Optional[int] = None
    Q1005: Optional[int] = None
    Q1907: str = ""  # comments

    # Overall rating (0-5) and recommendation likelihood (0-10)
    Q311: Optional[int] = None
    Q410: Optional[int] = None
    Q403: str = ""  # comments

    Q109: str = ""
    Q105: str = ""
    Q111: str = ""
    Q112: str = ""
    Q113: str = ""
    Q101: str = ""

    Q1101: str = ""
    Q1201: str = ""
    Q1801: str = ""
    Q1401: str = ""
    Q1701: str = ""

    start_date: str = ""
    subscript: str = ""
    survey_date: str = ""
    survey_ver: str = ""

    def score(self, field: str) -> int:
        """Return rated *field* for aggregation, with absent answers as 0."""
        value = getattr(self, field)
        return value if value is not None else 0

    @property
    def respondent(self) -> str:
        """Identity used to key comments: name, then email, then ``unknown``."""
        return self.name or self.email or "unknown"
