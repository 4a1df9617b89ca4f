"""Reading backup CSV text into raw records."""

from __future__ import annotations

import csv
import io
import logging
import sys
from typing import Sequence

from tick2paper.models import FIELD_NAMES, RawRecord

log = logging.getLogger(__name__)


def _raise_field_limit() -> None:
    """Let notes of any length through; the default cap is 128 KiB."""
    limit = sys.maxsize
    while True:
        try:
            csv.field_size_limit(limit)
            return
        except OverflowError:
            # C long is 32 bits on some platforms
            limit //= 2


_raise_field_limit()


def parse_rows(
    text: str, fieldnames: Sequence[str] = FIELD_NAMES
) -> tuple[list[RawRecord], str | None]:
    """Parse CSV *text* into dicts keyed by *fieldnames*.

    Every line is data, header lines included. Blank lines are skipped,
    short rows are padded with "" and surplus cells are dropped.

    Returns (rows, error). On malformed CSV, rows holds everything read
    before the bad line and error describes the problem.
    """
    rows = []
    try:
        for cells in csv.reader(io.StringIO(text)):
            if not cells:
                continue
            cells = cells + [""] * (len(fieldnames) - len(cells))
            rows.append(dict(zip(fieldnames, cells)))
    except csv.Error as e:
        log.warning("CSV parsing stopped after %d rows: %s", len(rows), e)
        return rows, str(e)
    return rows, None
