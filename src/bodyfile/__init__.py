"""Build, read and write TSK 3.x body files.

A body file holds one pipe-delimited line per filesystem object::

    MD5|name|inode|mode_as_string|UID|GID|size|atime|mtime|ctime|crtime

``Bodyfile3Line`` is the record; ``bodyfile.core`` holds the reader, writer,
filesystem collector and timeline builder that produce and consume it.
"""

from bodyfile.errors import BodyfileError, BodyfileParseError
from bodyfile.models import Bodyfile3Line

__all__ = ["Bodyfile3Line", "BodyfileError", "BodyfileParseError"]
