from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable, Coroutine, Iterable, Sequence
from pathlib import Path
from typing import Any

from watchfiles import awatch

from bodyfile.core.collect import is_excluded, record_from_path
from bodyfile.models import Bodyfile3Line

logger = logging.getLogger(__name__)


class BodyfileWatcher:
    """Watch a directory and turn every changed path into a body file record.

    Implements the ``RecordWatcherPort`` protocol. Paths in ``ignore_paths``
    (typically the body file being appended to) never produce records.
    """

    def __init__(
        self,
        directory: str | Path,
        on_records: Callable[[list[Bodyfile3Line]], Coroutine[Any, Any, None]],
        *,
        hash_files: bool = False,
        exclude: Sequence[str] = (),
        ignore_paths: Iterable[str | Path] = (),
    ) -> None:
        self._directory = Path(directory)
        self._on_records = on_records
        self._hash_files = hash_files
        self._exclude = tuple(exclude)
        self._ignore = frozenset(Path(p).resolve() for p in ignore_paths)
        self._task: asyncio.Task[None] | None = None

    async def start(self) -> None:
        if self._task is not None:
            return
        self._task = asyncio.create_task(self._watch())
        logger.info("Watcher started for %s", self._directory)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Watcher stopped for %s", self._directory)

    def _relative(self, path: Path) -> str:
        for base in (self._directory, self._directory.resolve()):
            with contextlib.suppress(ValueError):
                return path.relative_to(base).as_posix()
        return path.name

    def _is_ignored(self, path: Path) -> bool:
        if self._ignore and path.resolve() in self._ignore:
            return True
        return bool(self._exclude) and is_excluded(self._relative(path), self._exclude)

    def _records_for(self, paths: set[Path]) -> list[Bodyfile3Line]:
        records = []
        for path in sorted(paths):
            if self._is_ignored(path):
                continue
            try:
                records.append(record_from_path(path, hash_files=self._hash_files))
            except FileNotFoundError:
                logger.debug("%s vanished before it could be stat'ed", path)
            except OSError as exc:
                logger.warning("Skipping %s: %s", path, exc.strerror or exc)
        return records

    async def _watch(self) -> None:
        async for changes in awatch(self._directory):
            # lstat and hashing block, keep them off the event loop
            records = await asyncio.to_thread(self._records_for, {Path(p) for _, p in changes})
            if records:
                logger.info("Detected changes in %d file(s)", len(records))
                try:
                    await self._on_records(records)
                except Exception:
                    logger.exception("Error in watcher callback")
