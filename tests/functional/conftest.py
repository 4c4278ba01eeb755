"""Default marks and logging isolation for tests under `tests/functional/`."""

import logging
from pathlib import Path

import pytest

# pylint: disable=unused-argument

FUNCTIONAL_ROOT = Path(__file__).parent.resolve()
REPO_ROOT = FUNCTIONAL_ROOT.parents[1]


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark every item collected from `tests/functional/` as `functional`."""
    for item in items:
        if FUNCTIONAL_ROOT in item.path.resolve().parents and not item.get_closest_marker(
            "functional"
        ):
            item.add_marker(pytest.mark.functional)


@pytest.fixture(autouse=True)
def _isolated_logging(monkeypatch, tmp_path):
    """Keep the CLI's root-logger setup and flight recorder out of other tests."""
    monkeypatch.setenv("UNITTUTOR_LOG_PATH", str(tmp_path / "flight.log"))
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def repo_docs() -> Path:
    """The lesson documents shipped in this repository."""
    return REPO_ROOT / "docs"
