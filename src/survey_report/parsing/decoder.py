"""Decode flat string records into typed :class:`SurveyRecord` objects."""
from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, Iterator, List, Mapping, Optional

from survey_report.exceptions import FieldDecodeError
from survey_report.parsing.fields import FIELDS, FieldSpec
from survey_report.survey_data import SurveyRecord

__all__ = [
    "DecodeDiagnostics",
    "decode_record",
    "decode_records",
]

logger = logging.getLogger(__name__)

# Plain ASCII digits; rejects "1_0" and non-ASCII digits that int() accepts.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# Export keys match case-insensitively ("Country" fills "country").
_FIELD_NAMES: Dict[str, str] = {name.casefold(): name for name in FIELDS}


class DecodeDiagnostics:
    """Collects the non-fatal field errors seen during one decode run."""

    def __init__(self) -> None:
        self._errors: List[FieldDecodeError] = []

    def add(self, error: FieldDecodeError) -> None:
        self._errors.append(error)

    def for_record(self, record_index: int) -> List[FieldDecodeError]:
        return [e for e in self._errors if e.record_index == record_index]

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[FieldDecodeError]:
        return iter(self._errors)

    def __repr__(self) -> str:
        return f"DecodeDiagnostics(errors={len(self._errors)})"


def _decode_int(
    name: str, raw: str, spec: FieldSpec, record_index: int
) -> tuple[Optional[int], Optional[FieldDecodeError]]:
    text = raw.strip()
    if not text:
        return None, None

    if not _INTEGER_RE.fullmatch(text):
        return None, FieldDecodeError(record_index, name, raw, "not a base-10 integer")
    value = int(text)

    if spec.scale is not None:
        low, high = spec.scale
        if not low <= value <= high:
            return None, FieldDecodeError(
                record_index, name, raw, f"outside scale {low}-{high}"
            )
    return value, None


def decode_record(
    flat: Mapping[str, str],
    *,
    record_index: int = 0,
    diagnostics: Optional[DecodeDiagnostics] = None,
) -> SurveyRecord:
    """Map *flat* onto a :class:`SurveyRecord`.

    String fields pass through unchanged. Rated fields are parsed as
    base-10 integers; a value that does not parse or falls outside its
    scale becomes ``None`` and is reported through *diagnostics* (and the
    debug log) instead of raising. Keys are matched case-insensitively and
    keys not in the field table are ignored; when two keys differ only in
    case, the later one wins.
    """

    values: Dict[str, object] = {}
    for key, raw in flat.items():
        name = _FIELD_NAMES.get(key.casefold())
        if name is None:
            continue
        spec = FIELDS[name]
        if not spec.is_rated:
            values[name] = raw
            continue

        value, error = _decode_int(name, raw, spec, record_index)
        if error is not None:
            logger.debug("Decode error: %s", error)
            if diagnostics is not None:
                diagnostics.add(error)
        values[name] = value

    return SurveyRecord(**values)


def decode_records(
    flat_records: Iterable[Mapping[str, str]],
    *,
    diagnostics: Optional[DecodeDiagnostics] = None,
) -> List[SurveyRecord]:
    """Decode every record independently; field errors never abort the batch."""

    diagnostics = diagnostics if diagnostics is not None else DecodeDiagnostics()
    surveys = [
        decode_record(flat, record_index=i, diagnostics=diagnostics)
        for i, flat in enumerate(flat_records)
    ]
    if len(diagnostics):
        logger.info(
            "Decoded %d surveys with %d field error(s)", len(surveys), len(diagnostics)
        )
    return surveys
