import hashlib
import logging
import os
import stat
from collections.abc import Iterator, Sequence
from fnmatch import fnmatch
from pathlib import Path, PurePosixPath

from bodyfile.models import Bodyfile3Line

logger = logging.getLogger(__name__)

_HASH_CHUNK_SIZE = 64 * 1024

# stat.filemode() type character -> TSK name/meta type character
_TYPE_CHARS = {
    "-": "r",
    "d": "d",
    "l": "l",
    "c": "c",
    "b": "b",
    "p": "p",
    "s": "s",
}


def mode_to_string(st_mode: int) -> str:
    """Render ``st_mode`` the way fls does, e.g. ``r/rrw-r--r--``."""
    filemode = stat.filemode(st_mode)
    type_char = _TYPE_CHARS.get(filemode[0], "-")
    return f"{type_char}/{type_char}{filemode[1:]}"


def md5_file(path: str | Path) -> str:
    h = hashlib.md5()
    with Path(path).open("rb") as fh:
        while chunk := fh.read(_HASH_CHUNK_SIZE):
            h.update(chunk)
    return h.hexdigest()


def record_from_path(path: str | Path, *, hash_files: bool = False) -> Bodyfile3Line:
    """Build a record from the ``lstat`` metadata of a single path."""
    path = Path(path)
    st = path.lstat()

    record = Bodyfile3Line(
        name=str(path),
        inode=str(st.st_ino),
        mode_as_string=mode_to_string(st.st_mode),
        uid=st.st_uid,
        gid=st.st_gid,
        size=st.st_size,
        atime=int(st.st_atime),
        mtime=int(st.st_mtime),
        ctime=int(st.st_ctime),
    )

    birthtime = getattr(st, "st_birthtime", None)
    if birthtime is not None:
        record = record.with_crtime(int(birthtime))

    if hash_files and stat.S_ISREG(st.st_mode):
        record = record.with_md5(md5_file(path))

    return record


def is_excluded(rel_path: str, exclude: Sequence[str]) -> bool:
    """Match ``rel_path`` and each of its parent directories against the globs."""
    parts = PurePosixPath(rel_path).parts
    candidates = ["/".join(parts[: i + 1]) for i in range(len(parts))]
    return any(fnmatch(candidate, pattern) for candidate in candidates for pattern in exclude)


def _walk(root: Path, follow_symlinks: bool, exclude: Sequence[str]) -> Iterator[Path]:
    yield root
    if not root.is_dir() or (root.is_symlink() and not follow_symlinks):
        return

    def _on_error(err: OSError) -> None:
        logger.warning("Cannot list %s: %s", err.filename, err.strerror)

    for dirpath, dirnames, filenames in os.walk(root, followlinks=follow_symlinks, onerror=_on_error):
        base = Path(dirpath)
        dirnames[:] = sorted(
            d for d in dirnames if not is_excluded((base / d).relative_to(root).as_posix(), exclude)
        )
        for name in sorted([*dirnames, *filenames]):
            entry = base / name
            if name in filenames and is_excluded(entry.relative_to(root).as_posix(), exclude):
                continue
            yield entry


def collect(
    root: str | Path,
    *,
    hash_files: bool = False,
    follow_symlinks: bool = False,
    exclude: Sequence[str] = (),
) -> Iterator[Bodyfile3Line]:
    """Yield a record for ``root`` and every entry below it.

    Entries that disappear or cannot be stat'ed mid-walk are logged and skipped.
    """
    root = Path(root)
    seen = 0
    for path in _walk(root, follow_symlinks, exclude):
        try:
            record = record_from_path(path, hash_files=hash_files)
        except OSError as exc:
            logger.warning("Skipping %s: %s", path, exc.strerror or exc)
            continue
        seen += 1
        yield record
    logger.info("Collected %d record(s) under %s", seen, root)
