"""Global pytest fixtures for UNITTUTOR."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from textwrap import dedent

import pytest

MakeDocs = Callable[[dict[str, str]], Path]


@pytest.fixture
def make_docs(tmp_path: Path) -> MakeDocs:
    """Factory writing a tree of Markdown files under ``tmp_path``.

    Keys are paths relative to the returned root; values are dedented.

    Example:
        ```py
        def test_something(make_docs):
            root = make_docs({"README.md": "# Title\\n", "docs/a.md": "# A\\n"})
        ```
    """

    def _make(files: dict[str, str]) -> Path:
        for rel, content in files.items():
            path = tmp_path / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(dedent(content).lstrip("\n"), encoding="utf-8")
        return tmp_path

    return _make
