from bodyfile.core.collect import collect, md5_file, mode_to_string, record_from_path
from bodyfile.core.reader import is_comment, iter_records, parse_line, read_bodyfile
from bodyfile.core.timeline import TimelineEntry, build_timeline, format_entry
from bodyfile.core.writer import BodyfileWriter, write_bodyfile

__all__ = [
    "BodyfileWriter",
    "TimelineEntry",
    "build_timeline",
    "collect",
    "format_entry",
    "is_comment",
    "iter_records",
    "md5_file",
    "mode_to_string",
    "parse_line",
    "read_bodyfile",
    "record_from_path",
    "write_bodyfile",
]
