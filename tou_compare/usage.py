"""Ingestion of interval usage exports ("Green Button" CSV downloads).

The export starts with a variable number of metadata lines before the real
header, so the file is scanned for the header line first and only the header
plus the remaining content is handed to the CSV reader.
"""

from __future__ import annotations

import csv
import logging
from datetime import time
from decimal import Decimal, InvalidOperation
from itertools import chain
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence

from .models import UsageEntry

logger = logging.getLogger(__name__)

HEADER_PREFIX = "TYPE,DATE,"
EXPECTED_HEADERS = [
    "TYPE",
    "DATE",
    "START TIME",
    "END TIME",
    "IMPORT (kWh)",
    "EXPORT (kWh)",
    "NOTES",
]
ELECTRIC_USAGE = "Electric usage"

START_TIME_COLUMN = 2
END_TIME_COLUMN = 3
IMPORT_COLUMN = 4
EXPORT_COLUMN = 5


class UsageFileError(ValueError):
    """The usage export could not be read or does not match the expected layout."""

    def __init__(self, message: str, line: int | None = None) -> None:
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


def read_usage_from_csv(path: str | Path) -> List[UsageEntry]:
    """Read usage entries from an exported usage CSV file."""

    try:
        with Path(path).open(newline="", encoding="utf-8-sig") as handle:
            return read_usage_from_lines(handle)
    except FileNotFoundError as exc:
        raise UsageFileError(f"Usage file not found: {path}") from exc
    except OSError as exc:
        raise UsageFileError(f"Usage file could not be read: {path} ({exc})") from exc
    except UnicodeDecodeError as exc:
        raise UsageFileError(f"Usage file is not valid UTF-8: {path} ({exc})") from exc


def read_usage_from_lines(lines: Iterable[str]) -> List[UsageEntry]:
    """Read usage entries from the lines of a usage export, preamble included."""

    iterator = iter(lines)
    skipped = 0
    for line in iterator:
        if line.startswith(HEADER_PREFIX):
            header_line = line
            break
        skipped += 1
    else:
        raise UsageFileError("Usage file is empty or malformed: header row not found.")
    logger.debug("Skipped %d preamble lines before the header", skipped)

    reader = csv.reader(chain([header_line], iterator))
    rows = _rows(reader)
    headers = next(rows)
    if headers != EXPECTED_HEADERS:
        raise UsageFileError(
            f"Unexpected headers in usage CSV: {headers!r}. Expected: {EXPECTED_HEADERS!r}",
            line=skipped + 1,
        )

    entries: List[UsageEntry] = []
    dropped = 0
    for row in rows:
        if not row or row[0] != ELECTRIC_USAGE:
            dropped += 1
            continue
        entries.append(_parse_entry(row, skipped + reader.line_num))
    logger.debug("Read %d usage entries, dropped %d other rows", len(entries), dropped)
    return entries


def _rows(reader: Iterator[List[str]]) -> Iterator[List[str]]:
    try:
        yield from reader
    except csv.Error as exc:
        raise UsageFileError(f"Usage file could not be parsed: {exc}") from exc


def _parse_entry(row: Sequence[str], line: int) -> UsageEntry:
    if len(row) <= EXPORT_COLUMN:
        raise UsageFileError(
            f"Expected at least {EXPORT_COLUMN + 1} fields, found {len(row)}.",
            line=line,
        )
    return UsageEntry(
        start_time=_parse_time(row[START_TIME_COLUMN], "start time", line),
        end_time=_parse_time(row[END_TIME_COLUMN], "end time", line),
        imported=_parse_kwh(row[IMPORT_COLUMN], "imported kWh", line),
        exported=_parse_kwh(row[EXPORT_COLUMN], "exported kWh", line),
    )


def _parse_time(raw: str, label: str, line: int) -> time:
    try:
        parsed = time.fromisoformat(raw.strip())
    except ValueError as exc:
        raise UsageFileError(f"Invalid {label} format: {raw!r}.", line=line) from exc
    if parsed.tzinfo is not None:
        raise UsageFileError(f"Invalid {label} format: {raw!r}.", line=line)
    return parsed


def _parse_kwh(raw: str, label: str, line: int) -> Decimal:
    try:
        value = Decimal(raw.strip())
    except InvalidOperation as exc:
        raise UsageFileError(f"Invalid {label} value: {raw!r}.", line=line) from exc
    if not value.is_finite() or value < 0:
        raise UsageFileError(
            f"Invalid {label} value: {raw!r}. Expected a non-negative number.",
            line=line,
        )
    return value
