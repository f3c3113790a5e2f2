"""Unit tests for ReportContext dataclass."""
from __future__ import annotations

from survey_report.reporting.context import (
    CommentSection,
    MetricLine,
    ReportContext,
    build_report_context,
)
from survey_report.reporting.models import Report


def _sample_report(**overrides) -> Report:
    values = dict(
        responses=5,
        curriculum_avg=3.75,
        instructor_avg=4.25,
        environment_avg=0.0,
        overall_avg=4.0,
        nps=100.0,
    )
    values.update(overrides)
    return Report(**values)


def test_metric_lines_are_preformatted():
    ctx = build_report_context(_sample_report())

    assert ctx.metrics == [
        MetricLine("Responses", "  5"),
        MetricLine("Curriculum", "  3.75"),
        MetricLine("Instructor", "  4.25"),
        MetricLine("Environment", "  0.00"),
        MetricLine("Overall", "  4.00"),
        MetricLine("NPS", "100.00"),
    ]
    assert ctx.label_width == 11
    assert ctx.sections == []


def test_negative_and_missing_nps():
    assert build_report_context(_sample_report(nps=-33.333)).metrics[-1].value == "-33.33"
    assert build_report_context(_sample_report(nps=None)).metrics[-1].value == "   n/a"


def test_to_dict_roundtrip() -> None:
    """`to_dict` should faithfully convert to a nested dict."""
    ctx = ReportContext(
        metrics=[MetricLine("Responses", "  1")],
        sections=[CommentSection("Overall", ["Jane: fine"])],
    )
    as_dict = ctx.to_dict()

    assert as_dict["metrics"] == [{"label": "Responses", "value": "  1"}]
    assert as_dict["sections"] == [{"title": "Overall", "entries": ["Jane: fine"]}]


def test_comment_sections_cover_every_category():
    report = _sample_report(
        curriculum_comments={"Jane": ["More labs"]},
        overall_comments={"unknown": ["Good", "Fast"]},
    )

    ctx = build_report_context(report, include_comments=True)

    assert [s.title for s in ctx.sections] == [
        "Curriculum",
        "Instructor",
        "Environment",
        "Overall",
    ]
    assert ctx.sections[0].entries == ["Jane: More labs"]
    assert ctx.sections[1].entries == []
    assert ctx.sections[3].entries == ["unknown: Good", "unknown: Fast"]


def test_comment_cap_respected(monkeypatch):
    from survey_report.reporting import config as _cfg

    monkeypatch.setattr(_cfg, "MAX_COMMENTS", 2)
    report = _sample_report(
        instructor_comments={f"user{i}": [f"comment {i}"] for i in range(5)}
    )

    ctx = build_report_context(report, include_comments=True)

    assert ctx.sections[1].entries == ["user0: comment 0", "user1: comment 1"]


def test_label_width_from_config(monkeypatch):
    from survey_report.reporting import config as _cfg

    monkeypatch.setattr(_cfg, "LABEL_WIDTH", 14)

    assert build_report_context(_sample_report()).label_width == 14
