"""Render survey reports using Jinja2 templates."""
from __future__ import annotations

import json
import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from survey_report.reporting.context import build_report_context
from survey_report.reporting.models import Report

logger = logging.getLogger(__name__)

_TEMPLATE_DIR = Path(__file__).parent / "templates"

# Plain-text output; HTML escaping would mangle comments.
_env = Environment(
    loader=FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def render_report(report: Report, *, include_comments: bool = False) -> str:
    """Render the fixed-width text report for *report*.

    The first six lines are always the metrics block; comment sections
    follow only when *include_comments* is set.
    """

    context = build_report_context(report, include_comments=include_comments)

    template = _env.get_template("report.txt.j2")
    text = template.render(**context.to_dict())
    logger.debug("Rendered report for %d responses (len=%d)", report.responses, len(text))
    return text


def render_json(report: Report) -> str:
    """Return *report* as stable, pretty-printed JSON."""
    return json.dumps(report.to_dict(), indent=2, sort_keys=True) + "\n"
