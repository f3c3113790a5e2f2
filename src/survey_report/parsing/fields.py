"""Static field table for the training survey export.

Maps every known export key (after hyphen removal) to its decode rule. The
decoder consults :data:`FIELDS` only; adding a question means adding a row
here and an attribute on :class:`~survey_report.survey_data.SurveyRecord`.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

__all__ = [
    "FieldKind",
    "FieldSpec",
    "FIELDS",
    "CATEGORY_FIELDS",
    "OVERALL_FIELD",
    "RECOMMENDATION_FIELD",
    "COMMENT_FIELDS",
]


class FieldKind(str, Enum):
    STRING = "string"
    INTEGER = "integer"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Decode rule for one export key."""

    kind: FieldKind
    # Inclusive (low, high) bounds for INTEGER fields.
    scale: Optional[Tuple[int, int]] = None

    @property
    def is_rated(self) -> bool:
        return self.kind is FieldKind.INTEGER


_TEXT = FieldSpec(FieldKind.STRING)
# 5 = strongly agree, 1 = strongly disagree, N/A
_AGREE = FieldSpec(FieldKind.INTEGER, (0, 5))
# 10 = extremely likely, 1 = extremely unlikely, N/A
_LIKELY = FieldSpec(FieldKind.INTEGER, (0, 10))


FIELDS: Dict[str, FieldSpec] = {
    # Identification
    "country": _TEXT,
    "course": _TEXT,
    "course_ver": _TEXT,
    "email": _TEXT,
    "found_ver": _TEXT,
    "instructor": _TEXT,
    "language": _TEXT,
    "modality": _TEXT,
    "name": _TEXT,
    "progress": _TEXT,
    "start_date": _TEXT,
    "subscript": _TEXT,
    "survey_date": _TEXT,
    "survey_ver": _TEXT,
    # Contact opt-in
    "Q1508": _TEXT,
    # Curriculum
    "Q207": _AGREE,  # student guide accurate, right amount of detail
    "Q208": _AGREE,  # logical structure, relevant subject matter
    "Q209": _AGREE,  # labs reinforced the topics
    "Q210": _AGREE,  # sufficient time to cover the material
    "Q508": _TEXT,
    # Instructor
    "Q306": _AGREE,  # expertise
    "Q307": _AGREE,  # preparation
    "Q308": _AGREE,  # concepts and tasks made clear
    "Q320": _AGREE,  # classroom interaction
    "Q310": _AGREE,  # accurate and helpful answers
    "Q318": _TEXT,
    # Learning environment
    "Q1901": _TEXT,  # tested connection before the course
    "Q1002": _AGREE,  # pre-class support
    "Q1003": _AGREE,  # audio conferencing
    "Q1004": _AGREE,  # web conferencing
    "Q1005": _AGREE,  # lab performance
    "Q1907": _TEXT,
    # Overall
    "Q311": _AGREE,
    "Q410": _LIKELY,
    "Q403": _TEXT,
    # Additional questions (Yes / No)
    "Q109": _TEXT,
    "Q105": _TEXT,
    "Q111": _TEXT,
    "Q112": _TEXT,
    "Q113": _TEXT,
    "Q101": _TEXT,
    # You and your company
    "Q1101": _TEXT,
    "Q1201": _TEXT,
    "Q1801": _TEXT,
    "Q1401": _TEXT,
    "Q1701": _TEXT,
}

# Sub-scores averaged per record for each category. Q310 is recorded but
# not part of the instructor average.
CATEGORY_FIELDS: Dict[str, Tuple[str, ...]] = {
    "curriculum": ("Q207", "Q208", "Q209", "Q210"),
    "instructor": ("Q306", "Q307", "Q308", "Q320"),
    "environment": ("Q1002", "Q1003", "Q1004", "Q1005"),
}

OVERALL_FIELD = "Q311"
RECOMMENDATION_FIELD = "Q410"

COMMENT_FIELDS: Dict[str, str] = {
    "curriculum": "Q508",
    "instructor": "Q318",
    "environment": "Q1907",
    "overall": "Q403",
}
