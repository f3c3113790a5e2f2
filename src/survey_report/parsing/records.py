"""Split the line-oriented survey export into flat key/value records.

The export holds one ``KEY=VALUE`` pair per line. A line holding a single
``=`` separates two survey responses::

    name=Jane
    Q12-15=4
    survey_ver=3
    =
    name=John
    ...

Compound question keys such as ``Q12-15`` are normalized to ``Q1215``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional

from survey_report.exceptions import StructuralParseError

__all__ = [
    "DELIMITER",
    "RECORD_SEPARATOR",
    "ParseContext",
    "normalize_key",
    "iter_flat_records",
    "parse_flat_records",
]

logger = logging.getLogger(__name__)

DELIMITER = "="
RECORD_SEPARATOR = "="
_COMPOUND_KEY_JOINER = "-"


@dataclass
class ParseContext:
    """Per-parse state: position in the input and the record being built."""

    line_number: int = 0
    records_emitted: int = 0
    current: Dict[str, str] = field(default_factory=dict)

    def flush(self) -> Optional[Dict[str, str]]:
        """Return the accumulated record (or ``None`` if empty) and reset."""
        if not self.current:
            return None
        record, self.current = self.current, {}
        self.records_emitted += 1
        logger.debug("Parsed record #%d: %s", self.records_emitted, record)
        return record


def normalize_key(key: str) -> str:
    """Strip compound-question punctuation (``Q12-15`` -> ``Q1215``)."""
    return key.replace(_COMPOUND_KEY_JOINER, "")


def iter_flat_records(
    lines: Iterable[str], *, context: Optional[ParseContext] = None
) -> Iterator[Dict[str, str]]:
    """Yield one ``dict`` per survey response found in *lines*.

    Raises
    ------
    StructuralParseError
        On the first line without a ``=``. Records already yielded stay
        valid; nothing after the offending line is read.
    """

    ctx = context if context is not None else ParseContext()

    for raw in lines:
        ctx.line_number += 1
        line = raw.rstrip("\r\n")

        if DELIMITER not in line:
            raise StructuralParseError(ctx.line_number, line)

        if line == RECORD_SEPARATOR:
            record = ctx.flush()
            if record is not None:
                yield record
            continue

        key, _, value = line.partition(DELIMITER)
        # Last write wins when two keys collapse onto one.
        ctx.current[normalize_key(key)] = value

    record = ctx.flush()
    if record is not None:
        yield record


def parse_flat_records(lines: Iterable[str]) -> List[Dict[str, str]]:
    """Eagerly parse *lines* into a list of flat records.

    On a structural error the raised :class:`StructuralParseError` carries
    the records completed before the bad line in ``exc.records``.
    """

    records: List[Dict[str, str]] = []
    try:
        for record in iter_flat_records(lines):
            records.append(record)
    except StructuralParseError as exc:
        exc.records = records
        raise
    return records
