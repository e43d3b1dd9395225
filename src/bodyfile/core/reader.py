import logging
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from bodyfile.errors import BodyfileParseError
from bodyfile.models import FIELD_SEPARATOR, Bodyfile3Line

logger = logging.getLogger(__name__)

_FIELD_COUNT = 11
_INT_TOKEN = re.compile(r"-?[0-9]+")
_INT_FIELDS = ("uid", "gid", "size", "atime", "mtime", "ctime", "crtime")


def is_comment(line: str) -> bool:
    return line.startswith("#")


def parse_line(line: str) -> Bodyfile3Line:
    """Parse a single body file line into a record.

    The line is split on every ``|``; names containing a pipe therefore fail
    the field count check rather than being guessed at.
    """
    text = line.rstrip("\n").rstrip("\r")
    tokens = text.split(FIELD_SEPARATOR)
    if len(tokens) != _FIELD_COUNT:
        raise BodyfileParseError(f"expected {_FIELD_COUNT} fields, got {len(tokens)}", line=line)

    md5, name, inode, mode_as_string, *numeric = tokens
    values: dict[str, int] = {}
    for field_name, token in zip(_INT_FIELDS, numeric, strict=True):
        # int() alone would also take "+5", " 5", "1_000" and non-ASCII digits
        if not _INT_TOKEN.fullmatch(token):
            raise BodyfileParseError(f"{field_name} is not an integer: {token!r}", line=line)
        values[field_name] = int(token)

    return Bodyfile3Line(md5=md5, name=name, inode=inode, mode_as_string=mode_as_string, **values)


def iter_records(lines: Iterable[str], *, skip_invalid: bool = False) -> Iterator[Bodyfile3Line]:
    """Yield records from body file lines, skipping comments and blank lines."""
    for line_no, line in enumerate(lines, start=1):
        if is_comment(line) or not line.strip():
            continue
        try:
            yield parse_line(line)
        except BodyfileParseError as exc:
            if not skip_invalid:
                raise BodyfileParseError(str(exc), line_no=line_no, line=line) from None
            logger.warning("Skipping invalid line %d: %s", line_no, exc)


def read_bodyfile(path: str | Path, *, skip_invalid: bool = False) -> list[Bodyfile3Line]:
    with Path(path).open(encoding="utf-8", errors="surrogateescape", newline="") as fh:
        records = list(iter_records(fh, skip_invalid=skip_invalid))
    logger.info("Read %d record(s) from %s", len(records), path)
    return records
