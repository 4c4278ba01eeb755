"""Configuration utilities for UNITTUTOR.

This module centralizes small helpers and constants related to locating the
lesson documents and the flight-recorder log file.
"""

import os
from pathlib import Path

from platformdirs import user_log_dir

ROOT = Path(__file__).resolve().parents[2]

DOCS_ROOT_ENV = "UNITTUTOR_DOCS_ROOT"  # pragma: no mutate
INDEX_FILENAME = "README.md"  # pragma: no mutate
LESSONS_DIRNAME = "lessons"  # pragma: no mutate
LOG_FILENAME = "latest.log"  # pragma: no mutate


class DocsRootNotFoundError(Exception):
    """Raised when the docs root does not exist or is not a directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Docs root not found: {path}")
        self.path = path


def get_docs_root() -> Path:
    """Get the directory holding the lesson documents.

    Returns:
        The value of the `UNITTUTOR_DOCS_ROOT` environment variable if set,
        otherwise the `docs/` directory of the source checkout.

    Raises:
        DocsRootNotFoundError: If the directory does not exist.
    """
    root = Path(os.environ.get(DOCS_ROOT_ENV) or ROOT / "docs")
    if not root.is_dir():
        raise DocsRootNotFoundError(root)
    return root


def get_index_path(docs_root: Path) -> Path:
    """Return the table-of-contents document for ``docs_root``.

    The index lives beside the docs directory (the repository README); a
    `README.md` inside the docs root is used when there is none beside it.
    """
    beside = docs_root.parent / INDEX_FILENAME
    return beside if beside.is_file() else docs_root / INDEX_FILENAME


def get_lessons_dir(docs_root: Path) -> Path:
    """Return the directory holding the numbered lesson documents."""
    return docs_root / LESSONS_DIRNAME


def get_default_log_path() -> Path:
    """Return the flight-recorder file in the per-user log directory.

    The directory is created if needed; the file itself is only written when
    the flight recorder flushes.
    """
    return Path(user_log_dir("unittutor", appauthor=False, ensure_exists=True)) / LOG_FILENAME
