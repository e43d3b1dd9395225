from typing import Protocol


class RecordWatcherPort(Protocol):
    async def start(self) -> None: ...

    async def stop(self) -> None: ...
