"""Locating the column header row inside a TickTick backup.

A backup starts with a few preamble lines (export date, version, status
legend) before the header row whose cells are human-readable labels
such as "Folder Name". Because rows are read against fixed field names,
the header shows up as an ordinary row whose every cell is the label of
its own column.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from tick2paper.models import RawRecord

log = logging.getLogger(__name__)


def camel_case(label: str) -> str:
    """'Is Check list' -> 'isCheckList'."""
    words = label.lower().split(" ")
    return words[0] + "".join(w[:1].upper() + w[1:] for w in words[1:])


def is_header_row(row: RawRecord) -> bool:
    return all(key == camel_case(value) for key, value in row.items())


@dataclass(frozen=True)
class HeaderMatch:
    index: int | None = None

    @property
    def found(self) -> bool:
        return self.index is not None


def find_header(rows: Sequence[RawRecord]) -> HeaderMatch:
    """Return the position of the first header row, if any."""
    for i, row in enumerate(rows):
        if is_header_row(row):
            return HeaderMatch(index=i)
    return HeaderMatch()


def data_rows(rows: Sequence[RawRecord]) -> tuple[list[RawRecord], HeaderMatch]:
    """Split off the preamble and header.

    Without a header every row is kept; the caller decides whether that
    best-effort result is acceptable.
    """
    match = find_header(rows)
    if not match.found:
        log.warning("No header row among %d rows; keeping all of them", len(rows))
        return list(rows), match
    log.debug("Header row at index %d", match.index)
    return list(rows[match.index + 1 :]), match
