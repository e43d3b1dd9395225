import pytest

from bodyfile.config import Settings, load_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("BODYFILE_LOG_LEVEL", "BODYFILE_HASH", "BODYFILE_EXCLUDE"):
        monkeypatch.delenv(name, raising=False)
    assert load_settings() == Settings()


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BODYFILE_LOG_LEVEL", "debug")
    monkeypatch.setenv("BODYFILE_HASH", "yes")
    monkeypatch.setenv("BODYFILE_EXCLUDE", "*.tmp, .git ,,")
    settings = load_settings()
    assert settings.log_level == "DEBUG"
    assert settings.hash_files is True
    assert settings.exclude == ("*.tmp", ".git")


def test_unknown_log_level_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BODYFILE_LOG_LEVEL", "chatty")
    assert load_settings().log_level == "WARNING"
