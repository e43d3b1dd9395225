"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest

from bodyfile import Bodyfile3Line

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------

_PASSWD_LINE = "d41d8cd98f00b204e9800998ecf8427e|/etc/passwd|1234|r/rrwxr-xr-x|0|0|1234|1000|1001|1002|1003\n"


@pytest.fixture
def passwd_line() -> str:
    """Return the canonical body file line for the /etc/passwd record."""
    return _PASSWD_LINE


@pytest.fixture
def passwd_record() -> Bodyfile3Line:
    """Return the /etc/passwd record used across tests."""
    return Bodyfile3Line.from_values(
        "d41d8cd98f00b204e9800998ecf8427e",
        "/etc/passwd",
        "1234",
        "r/rrwxr-xr-x",
        0,
        0,
        1234,
        1000,
        1001,
        1002,
        1003,
    )


@pytest.fixture
def sample_bodyfile(tmp_path: Path) -> Path:
    """Write a small body file with a comment, a blank line and three records."""
    path = tmp_path / "sample.body"
    path.write_text(
        "# generated by tests\n"
        + _PASSWD_LINE
        + "\n"
        + "0|/etc/hosts|77|r/rrw-r--r--|0|0|12|2000|1500|1500|-1\n"
        + "0|/tmp|2|d/drwxrwxrwt|0|0|4096|-1|900|-1|-1\n",
        encoding="utf-8",
    )
    return path
