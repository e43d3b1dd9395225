from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from bodyfile.cli.streams import stdout_stream
from bodyfile.config import load_settings
from bodyfile.core.collect import collect as _collect
from bodyfile.core.writer import BodyfileWriter

console = Console(stderr=True)


def collect(
    path: Annotated[Path, typer.Argument(help="File or directory to describe.")],
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Write to FILE instead of stdout.")] = None,
    append: Annotated[bool, typer.Option(help="Append to --output instead of truncating it.")] = False,
    md5: Annotated[bool | None, typer.Option("--md5/--no-md5", help="Hash regular files.")] = None,
    exclude: Annotated[
        list[str] | None, typer.Option("--exclude", "-e", help="Glob of relative paths to skip (repeatable).")
    ] = None,
    follow_symlinks: Annotated[bool, typer.Option(help="Descend into symlinked directories.")] = False,
) -> None:
    """Write one body file line per filesystem object under PATH."""
    if not path.exists() and not path.is_symlink():
        console.print(f"[red]No such file or directory:[/red] {path}")
        raise typer.Exit(1)

    settings = load_settings()
    hash_files = settings.hash_files if md5 is None else md5
    patterns = [*settings.exclude, *(exclude or [])]
    records = _collect(path, hash_files=hash_files, follow_symlinks=follow_symlinks, exclude=patterns)

    if output is None:
        stream = stdout_stream()
        written = BodyfileWriter(stream).write_many(records)
        stream.flush()
    else:
        mode = "a" if append else "w"
        with output.open(mode, encoding="utf-8", errors="surrogateescape", newline="") as fh:
            written = BodyfileWriter(fh).write_many(records)
        console.print(f"[green]Wrote[/green] {written} line(s) to {output}")
