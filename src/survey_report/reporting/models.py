"""Data structures for reporting pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

# Read-only after construction: respondent -> comments in input order
CommentMap = Mapping[str, Tuple[str, ...]]

COMMENT_MAP_FIELDS: Tuple[str, ...] = (
    "curriculum_comments",
    "instructor_comments",
    "environment_comments",
    "overall_comments",
)


def _freeze_comments(comments: Mapping[str, Any]) -> CommentMap:
    return MappingProxyType({who: tuple(texts) for who, texts in comments.items()})


@dataclass(frozen=True, slots=True)
class Report:
    """Average scores, NPS and comments computed over a batch of surveys.

    Comment maps passed in as plain ``dict``/``list`` values are copied into
    read-only views, so a built report cannot be changed.
    """

    responses: int
    curriculum_avg: float = 0.0
    instructor_avg: float = 0.0
    environment_avg: float = 0.0
    overall_avg: float = 0.0
    # None when no recommendation answer could be classified
    nps: Optional[float] = None

    promoters: int = 0
    passives: int = 0
    detractors: int = 0
    unclassified: int = 0

    curriculum_comments: CommentMap = field(default_factory=dict)
    instructor_comments: CommentMap = field(default_factory=dict)
    environment_comments: CommentMap = field(default_factory=dict)
    overall_comments: CommentMap = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in COMMENT_MAP_FIELDS:
            object.__setattr__(self, name, _freeze_comments(getattr(self, name)))

    @property
    def has_data(self) -> bool:
        return self.responses > 0

    def comments(self, category: str) -> CommentMap:
        """Return the comment map for *category* (e.g. ``"instructor"``)."""
        return getattr(self, f"{category}_comments")

    def to_dict(self) -> Dict[str, Any]:
        """Return a *plain* ``dict`` representation (JSON friendly)."""
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        for name in COMMENT_MAP_FIELDS:
            data[name] = {who: list(texts) for who, texts in data[name].items()}
        return data
