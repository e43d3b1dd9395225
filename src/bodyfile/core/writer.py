import logging
import threading
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from bodyfile.models import Bodyfile3Line

logger = logging.getLogger(__name__)


class BodyfileWriter:
    """Append records to a text stream.

    A single writer may be shared by several producer threads; each line is
    written under a lock so lines never interleave.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._lock = threading.Lock()
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    def write(self, record: Bodyfile3Line) -> None:
        line = record.to_text()
        with self._lock:
            self._stream.write(line)
            self._count += 1

    def write_many(self, records: Iterable[Bodyfile3Line]) -> int:
        written = 0
        for record in records:
            self.write(record)
            written += 1
        return written

    def write_comment(self, text: str) -> None:
        with self._lock:
            for comment_line in text.splitlines() or [""]:
                self._stream.write(f"# {comment_line}\n")

    def flush(self) -> None:
        with self._lock:
            self._stream.flush()


def write_bodyfile(path: str | Path, records: Iterable[Bodyfile3Line], *, append: bool = False) -> int:
    mode = "a" if append else "w"
    with Path(path).open(mode, encoding="utf-8", errors="surrogateescape", newline="") as fh:
        written = BodyfileWriter(fh).write_many(records)
    logger.info("Wrote %d record(s) to %s", written, path)
    return written
