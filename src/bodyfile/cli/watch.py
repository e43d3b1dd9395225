import asyncio
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from bodyfile.cli.streams import stdout_stream
from bodyfile.config import load_settings
from bodyfile.core.ports.watcher import RecordWatcherPort
from bodyfile.core.writer import BodyfileWriter
from bodyfile.models import Bodyfile3Line
from bodyfile.watcher.watchfiles_adapter import BodyfileWatcher

console = Console(stderr=True)


async def _watch_until_cancelled(watcher: RecordWatcherPort) -> None:
    await watcher.start()
    try:
        await asyncio.Event().wait()
    finally:
        await watcher.stop()


def watch(
    directory: Annotated[Path, typer.Argument(help="Directory to watch.")],
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Append to FILE instead of stdout.")] = None,
    md5: Annotated[bool | None, typer.Option("--md5/--no-md5", help="Hash regular files.")] = None,
    exclude: Annotated[
        list[str] | None, typer.Option("--exclude", "-e", help="Glob of relative paths to skip (repeatable).")
    ] = None,
) -> None:
    """Append a body file line for every file that changes under DIRECTORY."""
    if not directory.is_dir():
        console.print(f"[red]Not a directory:[/red] {directory}")
        raise typer.Exit(1)

    settings = load_settings()
    hash_files = settings.hash_files if md5 is None else md5
    patterns = [*settings.exclude, *(exclude or [])]

    if output is None:
        stream = stdout_stream()
    else:
        stream = output.open("a", encoding="utf-8", errors="surrogateescape", newline="")
    writer = BodyfileWriter(stream)

    async def _on_records(records: list[Bodyfile3Line]) -> None:
        writer.write_many(records)
        writer.flush()

    watcher: RecordWatcherPort = BodyfileWatcher(
        directory,
        _on_records,
        hash_files=hash_files,
        exclude=patterns,
        ignore_paths=[] if output is None else [output],
    )
    console.print(f"[green]Watching[/green] {directory} (Ctrl+C to stop)")
    try:
        asyncio.run(_watch_until_cancelled(watcher))
    except KeyboardInterrupt:
        console.print(f"[yellow]Stopped[/yellow] after {writer.count} line(s)")
    finally:
        if output is not None:
            stream.close()
