"""Run the documentation checks over a set of files or directories."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from .checks import CHECKS, DEFAULT_CHECKS, LINKS, PYTHON_BLOCKS, TOC
from .checks import check_links, check_python_blocks, check_toc
from .errors import DocsPathNotFoundError, UnknownCheckError
from .findings import Report
from .markdown import Document, parse_document

logger = logging.getLogger(__name__)


def collect_markdown(paths: Iterable[Path]) -> list[Path]:
    """Expand ``paths`` into a sorted, de-duplicated list of Markdown files.

    Directories are searched recursively for ``*.md``; files are taken as
    given regardless of suffix.

    Raises:
        DocsPathNotFoundError: If any path does not exist.
    """
    found: set[Path] = set()
    for path in paths:
        if not path.exists():
            raise DocsPathNotFoundError(path)
        if path.is_dir():
            found.update(p.resolve() for p in path.rglob("*.md") if p.is_file())
        else:
            found.add(path.resolve())
    return sorted(found)


class _DocumentCache:  # pylint: disable=too-few-public-methods
    """Parses each Markdown file at most once per run."""

    def __init__(self) -> None:
        self._docs: dict[Path, Document] = {}

    def __call__(self, path: Path) -> Document:
        key = path.resolve()
        if key not in self._docs:
            logger.debug("Parsing %s", key)
            self._docs[key] = parse_document(key)
        return self._docs[key]


def _validate_checks(checks: Sequence[str]) -> tuple[str, ...]:
    for name in checks:
        if name not in CHECKS:
            raise UnknownCheckError(name, CHECKS)
    return tuple(dict.fromkeys(checks))


def run_checks(
    paths: Iterable[Path],
    root: Path,
    checks: Sequence[str] = DEFAULT_CHECKS,
    index: Path | None = None,
) -> Report:
    """Check every Markdown file under ``paths``.

    Args:
        paths: Files and/or directories to check.
        root: Docs root used by the ``links`` check.
        checks: Names from :data:`CHECKS` to run.
        index: Table-of-contents document for the ``toc`` check. The ``toc``
            check is skipped (with a debug message) when it is None.

    Returns:
        Report: Findings plus the list of files checked.

    Raises:
        UnknownCheckError: If ``checks`` names an unregistered check.
        DocsPathNotFoundError: If a path (or ``index``) does not exist.
        DocsDecodeError: If a Markdown file is not valid UTF-8.
    """
    selected = _validate_checks(checks)
    files = collect_markdown(paths)
    load = _DocumentCache()
    report = Report(files=files)
    logger.debug("Running %s on %d file(s)", ", ".join(selected), len(files))

    documents = [load(path) for path in files]
    for doc in documents:
        if LINKS in selected:
            report.extend(check_links(doc, root, load=load))
        if PYTHON_BLOCKS in selected:
            report.extend(check_python_blocks(doc))

    if TOC in selected:
        if index is None:
            logger.debug("No index document given; skipping %s check", TOC)
        else:
            if not index.exists():
                raise DocsPathNotFoundError(index)
            report.extend(check_toc(load(index), documents, root))

    logger.info(
        "Checked %d file(s): %d error(s), %d warning(s)",
        len(files),
        len(report.errors),
        len(report.warnings),
    )
    return report
