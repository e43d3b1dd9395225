"""Unit tests for writing body files."""

import io
import threading
from pathlib import Path

from bodyfile import Bodyfile3Line
from bodyfile.core.reader import read_bodyfile
from bodyfile.core.writer import BodyfileWriter, write_bodyfile


def test_write_emits_canonical_line(passwd_line: str, passwd_record: Bodyfile3Line) -> None:
    buf = io.StringIO()
    writer = BodyfileWriter(buf)
    writer.write(passwd_record)
    assert buf.getvalue() == passwd_line
    assert writer.count == 1


def test_write_many_returns_count() -> None:
    buf = io.StringIO()
    writer = BodyfileWriter(buf)
    records = [Bodyfile3Line.new().with_name(f"/f{i}") for i in range(3)]
    assert writer.write_many(records) == 3
    assert buf.getvalue().splitlines() == [
        "0|/f0|0||0|0|0|-1|-1|-1|-1",
        "0|/f1|0||0|0|0|-1|-1|-1|-1",
        "0|/f2|0||0|0|0|-1|-1|-1|-1",
    ]


def test_write_comment_prefixes_each_line() -> None:
    buf = io.StringIO()
    writer = BodyfileWriter(buf)
    writer.write_comment("collected from /mnt/evidence\nhost: ws01")
    assert buf.getvalue() == "# collected from /mnt/evidence\n# host: ws01\n"
    assert writer.count == 0


def test_concurrent_writers_never_interleave_lines() -> None:
    buf = io.StringIO()
    writer = BodyfileWriter(buf)

    def _produce(n: int) -> None:
        writer.write_many(Bodyfile3Line.new().with_name(f"/t{n}/{i}").with_mtime(i + 1) for i in range(200))

    threads = [threading.Thread(target=_produce, args=(n,)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    lines = buf.getvalue().splitlines()
    assert len(lines) == 800
    assert writer.count == 800
    assert all(line.count("|") == 10 for line in lines)


def test_write_bodyfile_then_append(tmp_path: Path, passwd_record: Bodyfile3Line) -> None:
    path = tmp_path / "out.body"
    assert write_bodyfile(path, [passwd_record]) == 1
    assert write_bodyfile(path, [Bodyfile3Line.new().with_name("/etc/group")], append=True) == 1

    records = read_bodyfile(path)
    assert [r.name for r in records] == ["/etc/passwd", "/etc/group"]


def test_write_bodyfile_truncates_by_default(
    tmp_path: Path, passwd_line: str, passwd_record: Bodyfile3Line
) -> None:
    path = tmp_path / "out.body"
    write_bodyfile(path, [passwd_record, passwd_record])
    write_bodyfile(path, [passwd_record])
    assert path.read_text(encoding="utf-8") == passwd_line
