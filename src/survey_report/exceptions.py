"""Project-wide custom exception types."""
from __future__ import annotations

from typing import Dict, List, Optional


class SurveyReportError(RuntimeError):
    """Base class for errors raised while building a survey report."""


class StructuralParseError(SurveyReportError):
    """Raised when a survey export line lacks the ``=`` delimiter.

    Parsing stops at the offending line. ``records`` holds whatever complete
    records were produced before the failure so callers can decide whether
    to use them.
    """

    def __init__(
        self,
        line_number: int,
        line: str,
        records: Optional[List[Dict[str, str]]] = None,
    ) -> None:
        self.line_number = line_number
        self.line = line
        self.records: List[Dict[str, str]] = list(records or [])
        super().__init__(f"invalid input on line {line_number}: {line!r}")


class FieldDecodeError(SurveyReportError):
    """Diagnostic for a rated field whose value could not be used.

    Instances are collected and logged by the decoder rather than raised;
    the field falls back to ``None`` and decoding continues.
    """

    def __init__(self, record_index: int, field: str, value: str, reason: str) -> None:
        self.record_index = record_index
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(
            f"record {record_index}: field {field}={value!r} ignored ({reason})"
        )
