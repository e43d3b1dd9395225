import os
from dataclasses import dataclass, field

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
_DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    log_level: str = _DEFAULT_LOG_LEVEL
    hash_files: bool = False
    exclude: tuple[str, ...] = field(default_factory=tuple)


def _parse_bool(value: str | None) -> bool:
    return value is not None and value.strip().lower() in _TRUE_VALUES


def _parse_list(value: str | None) -> tuple[str, ...]:
    if not value:
        return ()
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _parse_log_level(value: str | None) -> str:
    level = (value or _DEFAULT_LOG_LEVEL).strip().upper()
    return level if level in _LOG_LEVELS else _DEFAULT_LOG_LEVEL


def load_settings() -> Settings:
    """Read defaults from ``BODYFILE_*`` environment variables."""
    return Settings(
        log_level=_parse_log_level(os.getenv("BODYFILE_LOG_LEVEL")),
        hash_files=_parse_bool(os.getenv("BODYFILE_HASH")),
        exclude=_parse_list(os.getenv("BODYFILE_EXCLUDE")),
    )
