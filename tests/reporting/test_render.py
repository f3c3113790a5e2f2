"""Unit tests for text and JSON report rendering."""
from __future__ import annotations

import json

import pytest

from survey_report.reporting.models import Report
from survey_report.reporting.render import render_json, render_report

EXPECTED_METRICS = (
    "Responses     5\n"
    "Curriculum    3.75\n"
    "Instructor    4.25\n"
    "Environment   0.00\n"
    "Overall       4.00\n"
    "NPS         100.00\n"
)


@pytest.fixture()
def report() -> Report:
    return Report(
        responses=5,
        curriculum_avg=3.75,
        instructor_avg=4.25,
        environment_avg=0.0,
        overall_avg=4.0,
        nps=100.0,
        promoters=5,
        curriculum_comments={"Jane": ["More labs please"]},
    )


def test_render_report_snapshot(report: Report):
    assert render_report(report) == EXPECTED_METRICS


def test_render_is_deterministic(report: Report):
    assert render_report(report).encode() == render_report(report).encode()


def test_render_has_six_lines(report: Report):
    lines = render_report(report).splitlines()

    assert len(lines) == 6
    assert [line.split()[0] for line in lines] == [
        "Responses",
        "Curriculum",
        "Instructor",
        "Environment",
        "Overall",
        "NPS",
    ]


def test_render_empty_report():
    out = render_report(Report(responses=0))

    assert out.splitlines()[0] == "Responses     0"
    assert out.splitlines()[-1] == "NPS            n/a"


def test_render_with_comments(report: Report):
    out = render_report(report, include_comments=True)

    assert out.startswith(EXPECTED_METRICS)
    tail = out[len(EXPECTED_METRICS):]
    assert tail == (
        "\n"
        "Curriculum comments:\n"
        "  - Jane: More labs please\n"
        "\n"
        "Instructor comments:\n"
        "  (none)\n"
        "\n"
        "Environment comments:\n"
        "  (none)\n"
        "\n"
        "Overall comments:\n"
        "  (none)\n"
    )


def test_render_json(report: Report):
    out = render_json(report)
    data = json.loads(out)

    assert data["responses"] == 5
    assert data["nps"] == 100.0
    assert data["curriculum_comments"] == {"Jane": ["More labs please"]}
    assert out == render_json(report)
