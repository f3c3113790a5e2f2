"""Context dataclass for rendering survey reports.

This module defines `ReportContext`, a typed container that holds all
values expected by the text template located in
`survey_report/reporting/templates/report.txt.j2`.

All number formatting happens here, so the template only lays out
pre-formatted strings and the same :class:`Report` always renders to the
same bytes.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from survey_report.parsing.fields import COMMENT_FIELDS
from survey_report.reporting import config
from survey_report.reporting.models import Report

__all__ = [
    "MetricLine",
    "CommentSection",
    "ReportContext",
    "build_report_context",
]

_CATEGORY_TITLES: Dict[str, str] = {
    "curriculum": "Curriculum",
    "instructor": "Instructor",
    "environment": "Environment",
    "overall": "Overall",
}

_NO_DATA = "n/a"


@dataclass(slots=True)
class MetricLine:
    """One row of the metrics block: label and right-justified value."""

    label: str
    value: str


@dataclass(slots=True)
class CommentSection:
    """Comments for a single category, already flattened to ``who: text``."""

    title: str
    entries: List[str] = field(default_factory=list)


@dataclass(slots=True)
class ReportContext:
    """Container with all fields used by the text report template."""

    metrics: List[MetricLine]
    label_width: int = 11
    sections: List[CommentSection] = field(default_factory=list)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        """Return a *plain* ``dict`` (recursively) for Jinja rendering."""
        return asdict(self)


def _format_count(value: int) -> str:
    return "%3d" % value


def _format_score(value: Optional[float]) -> str:
    if value is None:
        return "%6s" % _NO_DATA
    return "%6.2f" % value


def _comment_sections(report: Report, *, max_each: int) -> List[CommentSection]:
    sections: List[CommentSection] = []
    for category in COMMENT_FIELDS:
        entries = [
            f"{who}: {text}"
            for who, texts in report.comments(category).items()
            for text in texts
        ]
        sections.append(
            CommentSection(title=_CATEGORY_TITLES[category], entries=entries[:max_each])
        )
    return sections


# ---------------------------------------------------------------------------
# Conversion helper
# ---------------------------------------------------------------------------
def build_report_context(
    report: Report, *, include_comments: bool = False
) -> ReportContext:
    """Convert :class:`Report` into :class:`ReportContext`.

    The function is *pure* – it does not mutate *report*.
    """

    metrics = [
        MetricLine("Responses", _format_count(report.responses)),
        MetricLine("Curriculum", _format_score(report.curriculum_avg)),
        MetricLine("Instructor", _format_score(report.instructor_avg)),
        MetricLine("Environment", _format_score(report.environment_avg)),
        MetricLine("Overall", _format_score(report.overall_avg)),
        MetricLine("NPS", _format_score(report.nps)),
    ]

    sections: List[CommentSection] = []
    if include_comments:
        sections = _comment_sections(report, max_each=config.MAX_COMMENTS)

    return ReportContext(
        metrics=metrics,
        label_width=config.LABEL_WIDTH,
        sections=sections,
    )
