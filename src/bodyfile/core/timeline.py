"""Turn body file records into a mactime-style timeline.

Each record contributes one entry per distinct timestamp. The ``macb`` column
marks which of the record's times fall on that instant, e.g. ``m.c.`` when the
file was modified and its metadata changed at the same second.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime

from bodyfile.models import Bodyfile3Line

# mtime, atime, ctime, crtime -> m, a, c, b
_MACB = (("mtime", "m"), ("atime", "a"), ("ctime", "c"), ("crtime", "b"))


@dataclass(frozen=True)
class TimelineEntry:
    timestamp: int
    macb: str
    record: Bodyfile3Line


def _macb_for(record: Bodyfile3Line, timestamp: int) -> str:
    return "".join(flag if getattr(record, field) == timestamp else "." for field, flag in _MACB)


def build_timeline(
    records: Iterable[Bodyfile3Line],
    *,
    start: int | None = None,
    end: int | None = None,
) -> list[TimelineEntry]:
    """Expand records into timeline entries sorted by time, then name.

    Times ``<= 0`` count as unset, so both the ``-1`` sentinel and the ``0``
    that older tools emit are left out. ``start``/``end`` are inclusive.
    """
    entries: list[TimelineEntry] = []
    for record in records:
        for ts in sorted({t for t in record.timestamps().values() if t > 0}):
            if start is not None and ts < start:
                continue
            if end is not None and ts > end:
                continue
            entries.append(TimelineEntry(timestamp=ts, macb=_macb_for(record, ts), record=record))
    entries.sort(key=lambda e: (e.timestamp, e.record.name))
    return entries


def format_timestamp(timestamp: int, *, utc: bool = True) -> str:
    if utc:
        return datetime.fromtimestamp(timestamp, tz=UTC).isoformat()
    return datetime.fromtimestamp(timestamp).astimezone().isoformat()


def format_entry(entry: TimelineEntry, *, utc: bool = True) -> str:
    """Render an entry as a mactime ``-d`` style comma separated row."""
    r = entry.record
    return ",".join(
        [
            format_timestamp(entry.timestamp, utc=utc),
            str(r.size),
            entry.macb,
            r.mode_as_string,
            str(r.uid),
            str(r.gid),
            r.inode,
            r.name,
        ]
    )
