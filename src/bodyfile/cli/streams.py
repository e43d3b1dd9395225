import io
import sys
from typing import TextIO


def stdout_stream() -> TextIO:
    """Return stdout set up to pass undecodable filename bytes through.

    Names from ``os.walk`` or from a body file read with ``surrogateescape``
    carry lone surrogates for bytes that are not valid UTF-8; they are written
    back out as the original bytes, the same as the ``--output`` files.
    """
    stream = sys.stdout
    if isinstance(stream, io.TextIOWrapper):
        stream.reconfigure(errors="surrogateescape")
    return stream
