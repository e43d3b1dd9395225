from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from bodyfile.cli.streams import stdout_stream
from bodyfile.core.reader import read_bodyfile
from bodyfile.core.timeline import build_timeline, format_entry
from bodyfile.errors import BodyfileParseError

console = Console(soft_wrap=True, highlight=False)

_HEADER = "Date,Size,Type,Mode,UID,GID,Meta,File Name"


def timeline(
    file: Annotated[Path, typer.Argument(help="Body file to sort.")],
    start: Annotated[int | None, typer.Option(help="Earliest UNIX time to include.")] = None,
    end: Annotated[int | None, typer.Option(help="Latest UNIX time to include.")] = None,
    local: Annotated[bool, typer.Option("--local", help="Print local time instead of UTC.")] = False,
    skip_invalid: Annotated[bool, typer.Option(help="Skip malformed lines instead of failing.")] = False,
) -> None:
    """Print a mactime-style comma separated timeline."""
    try:
        records = read_bodyfile(file, skip_invalid=skip_invalid)
    except FileNotFoundError:
        console.print(f"[red]No such file:[/red] {file}")
        raise typer.Exit(1) from None
    except BodyfileParseError as exc:
        console.print(f"[red]Invalid body file:[/red] {escape(str(exc))}")
        raise typer.Exit(1) from None

    stdout_stream()
    console.print(_HEADER, markup=False)
    for entry in build_timeline(records, start=start, end=end):
        console.print(format_entry(entry, utc=not local), markup=False)
