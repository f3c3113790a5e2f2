"""Command-line entry point: survey export files in, text report out.

Reads one or more survey export files (stdin when none are given) as a
single stream, runs them through the parse -> decode -> aggregate pipeline
and prints the report. Diagnostics go to stderr through :mod:`logging`.
"""
from __future__ import annotations

import argparse
import fileinput
import logging
import os
import sys
from typing import Iterable, List, Optional

from dotenv import load_dotenv

from survey_report.exceptions import StructuralParseError
from survey_report.parsing.decoder import DecodeDiagnostics, decode_records
from survey_report.parsing.records import parse_flat_records
from survey_report.reporting.models import Report

logger = logging.getLogger("survey_report")

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def generate_report(
    lines: Iterable[str], *, diagnostics: Optional[DecodeDiagnostics] = None
) -> Report:
    """Run *lines* through the whole pipeline and return the :class:`Report`.

    Raises
    ------
    StructuralParseError
        If any line lacks the ``=`` delimiter.
    """
    from survey_report.reporting.aggregator import build_report  # local import

    flat_records = parse_flat_records(lines)
    surveys = decode_records(flat_records, diagnostics=diagnostics)
    return build_report(surveys)


def _configure_logging(debug: bool) -> None:
    level = "DEBUG" if debug else os.environ.get("SURVEY_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(format=_LOG_FORMAT, level=level)
    logging.getLogger().setLevel(level)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="survey-report",
        description="Generate a satisfaction report from training survey export files.",
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Survey export file(s); read from stdin when omitted",
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", help="print debugging output"
    )
    parser.add_argument(
        "--comments",
        action="store_true",
        help="append per-category comments to the text report",
    )
    parser.add_argument(
        "--json", action="store_true", help="print the report as JSON"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse *argv*, print the report and return the process exit code."""

    load_dotenv()
    args = _build_parser().parse_args(argv)
    _configure_logging(args.debug)

    # Imported after load_dotenv() so .env values reach the config module.
    from survey_report.reporting.render import render_json, render_report

    files = args.files or ["-"]
    try:
        # Undecodable bytes become U+FFFD rather than aborting the run.
        with fileinput.input(files=files, encoding="utf-8", errors="replace") as stream:
            report = generate_report(stream)
    except StructuralParseError as exc:
        logger.error("Error converting survey text: %s", exc)
        return 1
    except OSError as exc:
        logger.error("Error opening file: %s", exc)
        return 1

    if args.json:
        sys.stdout.write(render_json(report))
    else:
        sys.stdout.write(render_report(report, include_comments=args.comments))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
