from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bodyfile.core.reader import is_comment, parse_line
from bodyfile.errors import BodyfileParseError

console = Console()

_MAX_REPORTED = 20


def check(
    file: Annotated[Path, typer.Argument(help="Body file to check.")],
    require_timestamp: Annotated[
        bool, typer.Option(help="Flag records whose four times are all zero or unset.")
    ] = False,
) -> None:
    """Parse a body file and report malformed lines."""
    if not file.is_file():
        console.print(f"[red]Not a file:[/red] {file}")
        raise typer.Exit(1)

    records = comments = blank = 0
    problems: list[tuple[int, str]] = []
    with file.open(encoding="utf-8", errors="surrogateescape", newline="") as fh:
        for line_no, line in enumerate(fh, start=1):
            if is_comment(line):
                comments += 1
                continue
            if not line.strip():
                blank += 1
                continue
            try:
                record = parse_line(line)
            except BodyfileParseError as exc:
                problems.append((line_no, str(exc)))
                continue
            records += 1
            if require_timestamp and all(t <= 0 for t in record.timestamps().values()):
                problems.append((line_no, "no non-zero timestamp"))

    summary = Table(title=str(file), show_header=False)
    summary.add_column("metric")
    summary.add_column("value", justify="right")
    summary.add_row("records", str(records))
    summary.add_row("comments", str(comments))
    summary.add_row("blank", str(blank))
    summary.add_row("problems", str(len(problems)))
    console.print(summary)

    if problems:
        for line_no, message in problems[:_MAX_REPORTED]:
            console.print(f"[red]line {line_no}:[/red] {escape(message)}", highlight=False)
        if len(problems) > _MAX_REPORTED:
            console.print(f"... and {len(problems) - _MAX_REPORTED} more")
        raise typer.Exit(1)
