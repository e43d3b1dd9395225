"""The TSK 3.x body file record.

From the Sleuthkit wiki: the body file is an intermediate file when creating a
timeline of file activity. It is a pipe ("|") delimited text file that contains
one line for each file (or other event type, such as a log or registry key).
The fls, ils, and mac-robber tools all output this data format, and mactime
reads and sorts it. The 3.x layout is::

    MD5|name|inode|mode_as_string|UID|GID|size|atime|mtime|ctime|crtime

Times are UNIX timestamps. Lines starting with ``#`` are comments. mactime only
requires that at least one of the time values is non-zero; that rule is left to
callers and is not checked here.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

FIELD_SEPARATOR = "|"

UNSET_TIMESTAMP = -1

TIMESTAMP_FIELDS = ("mtime", "atime", "ctime", "crtime")


class Bodyfile3Line(BaseModel):
    """One body file line. Frozen: every ``with_*`` call returns a new record."""

    model_config = ConfigDict(frozen=True, strict=True)

    md5: str = "0"
    name: str = ""
    inode: str = "0"
    mode_as_string: str = ""
    uid: int = 0
    gid: int = 0
    size: int = 0
    atime: int = UNSET_TIMESTAMP
    mtime: int = UNSET_TIMESTAMP
    ctime: int = UNSET_TIMESTAMP
    crtime: int = UNSET_TIMESTAMP

    @classmethod
    def new(cls) -> Bodyfile3Line:
        """Return an empty record with every field at its sentinel."""
        return cls()

    @classmethod
    def from_values(
        cls,
        md5: str,
        name: str,
        inode: str,
        mode_as_string: str,
        uid: int,
        gid: int,
        size: int,
        atime: int,
        mtime: int,
        ctime: int,
        crtime: int,
    ) -> Bodyfile3Line:
        return cls(
            md5=md5,
            name=name,
            inode=inode,
            mode_as_string=mode_as_string,
            uid=uid,
            gid=gid,
            size=size,
            atime=atime,
            mtime=mtime,
            ctime=ctime,
            crtime=crtime,
        )

    def _with(self, field: str, value: str | int) -> Bodyfile3Line:
        # model_copy skips validation, so re-validate to keep strict types.
        return self.__class__.model_validate({**self.model_dump(), field: value})

    def with_md5(self, md5: str) -> Bodyfile3Line:
        return self._with("md5", md5)

    def with_name(self, name: str) -> Bodyfile3Line:
        return self._with("name", name)

    def with_inode(self, inode: str) -> Bodyfile3Line:
        return self._with("inode", inode)

    def with_mode(self, mode_as_string: str) -> Bodyfile3Line:
        return self._with("mode_as_string", mode_as_string)

    def with_uid(self, uid: int) -> Bodyfile3Line:
        return self._with("uid", uid)

    def with_gid(self, gid: int) -> Bodyfile3Line:
        return self._with("gid", gid)

    def with_size(self, size: int) -> Bodyfile3Line:
        return self._with("size", size)

    def with_atime(self, atime: int) -> Bodyfile3Line:
        return self._with("atime", atime)

    def with_mtime(self, mtime: int) -> Bodyfile3Line:
        return self._with("mtime", mtime)

    def with_ctime(self, ctime: int) -> Bodyfile3Line:
        return self._with("ctime", ctime)

    def with_crtime(self, crtime: int) -> Bodyfile3Line:
        return self._with("crtime", crtime)

    def get_md5(self) -> str:
        return self.md5

    def get_name(self) -> str:
        return self.name

    def get_inode(self) -> str:
        return self.inode

    def get_mode(self) -> str:
        return self.mode_as_string

    def get_uid(self) -> int:
        return self.uid

    def get_gid(self) -> int:
        return self.gid

    def get_size(self) -> int:
        return self.size

    def get_atime(self) -> int:
        return self.atime

    def get_mtime(self) -> int:
        return self.mtime

    def get_ctime(self) -> int:
        return self.ctime

    def get_crtime(self) -> int:
        return self.crtime

    def timestamps(self) -> dict[str, int]:
        """Return the four time fields keyed by name, in MACB order."""
        return {name: getattr(self, name) for name in TIMESTAMP_FIELDS}

    def to_text(self) -> str:
        """Render the canonical newline-terminated body file line."""
        values = (
            self.md5,
            self.name,
            self.inode,
            self.mode_as_string,
            self.uid,
            self.gid,
            self.size,
            self.atime,
            self.mtime,
            self.ctime,
            self.crtime,
        )
        return FIELD_SEPARATOR.join(str(v) for v in values) + "\n"

    def __str__(self) -> str:
        return self.to_text()
