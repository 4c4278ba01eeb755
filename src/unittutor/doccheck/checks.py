"""The documentation checks.

Each check takes parsed documents and returns a list of :class:`Finding`.
Checks never raise for problems in the documents themselves; only a broken
invocation (e.g. an unknown check name) raises.

- ``links``: internal links resolve to an existing file under the docs root and,
  when they carry a ``#fragment`` into a Markdown file, to an existing heading.
  External links (``https:``, ``mailto:`` ...) are skipped; nothing touches the
  network.
- ``python-blocks``: every fenced block tagged ``python``/``py``/``pycon``
  parses with :func:`ast.parse`. ``pycon`` blocks and blocks whose first line
  is a ``>>>`` prompt are interactive sessions, checked with prompts removed
  and output lines ignored; doctests inside an ordinary block are plain code.
  A block whose first line is exactly ``# notest`` is skipped. Unterminated
  fences are reported for any language.
- ``toc``: every lesson document is linked from the index document.
"""

from __future__ import annotations

import ast
import logging
import re
import textwrap
from collections.abc import Callable, Iterable
from pathlib import Path
from urllib.parse import unquote

from .findings import Finding, Severity
from .markdown import CodeBlock, Document, parse_document

logger = logging.getLogger(__name__)

LINKS = "links"
PYTHON_BLOCKS = "python-blocks"
TOC = "toc"

CHECKS: tuple[str, ...] = (LINKS, PYTHON_BLOCKS, TOC)
DEFAULT_CHECKS: tuple[str, ...] = CHECKS

PYTHON_LANGUAGES = frozenset({"python", "py", "python3", "pycon"})
SKIP_MARKER = "# notest"

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")

DocumentLoader = Callable[[Path], Document]


# ============================================================================
#                               links
# ============================================================================


def _is_external(target: str) -> bool:
    return bool(_SCHEME_RE.match(target)) or target.startswith("//")


def _split_target(target: str) -> tuple[str, str]:
    path_part, _, fragment = target.partition("#")
    path_part = path_part.partition("?")[0]
    return unquote(path_part), unquote(fragment)


def _resolve(doc: Document, path_part: str, root: Path) -> Path:
    if path_part.startswith("/"):
        return (root / path_part.lstrip("/")).resolve()
    return (doc.path.parent / path_part).resolve()


def check_links(
    doc: Document, root: Path, load: DocumentLoader = parse_document
) -> list[Finding]:
    """Verify that every internal link in ``doc`` resolves.

    Args:
        doc: The document whose links are checked.
        root: Docs root; absolute link paths resolve against it and links may
            not point outside it.
        load: Returns the parsed document for a Markdown path; used to look up
            heading anchors in other files. Callers checking many files pass a
            caching loader.

    Returns:
        list[Finding]: One error per broken link.
    """
    findings: list[Finding] = []
    root = root.resolve()

    def error(line: int, message: str) -> None:
        findings.append(Finding(doc.path, line, LINKS, Severity.ERROR, message))

    for link in doc.links:
        target = link.target.strip()
        if not target:
            error(link.line, f"empty link target for [{link.text}]")
            continue
        if _is_external(target):
            continue

        path_part, fragment = _split_target(target)

        if not path_part:
            if fragment and fragment not in doc.anchors:
                error(link.line, f"no heading for anchor #{fragment}")
            continue

        resolved = _resolve(doc, path_part, root)
        if not resolved.is_relative_to(root):
            error(link.line, f"link target {target!r} is outside the docs root")
            continue
        if not resolved.exists():
            error(link.line, f"link target {target!r} does not exist")
            continue
        if fragment and resolved.is_file() and resolved.suffix.lower() == ".md":
            if fragment not in load(resolved).anchors:
                error(link.line, f"no heading for anchor #{fragment} in {path_part}")

    return findings


# ============================================================================
#                               python-blocks
# ============================================================================


def _session_to_source(source: str) -> str:
    """Turn a ``>>>`` session into plain source, keeping line numbers aligned."""
    out: list[str] = []
    for line in source.splitlines():
        stripped = line.lstrip()
        if stripped.startswith((">>> ", "... ")):
            out.append(stripped[4:])
        elif stripped in (">>>", "..."):
            out.append("")
        else:
            out.append("")  # output line
    return "\n".join(out) + "\n"


def _python_source(block: CodeBlock) -> str | None:
    """Return the code to compile for ``block``, or None if it is not checked."""
    if block.language not in PYTHON_LANGUAGES:
        return None
    first = next((ln.strip() for ln in block.source.splitlines() if ln.strip()), "")
    if first == SKIP_MARKER:
        return None
    source = textwrap.dedent(block.source)
    if block.language == "pycon" or first.startswith(">>>"):
        source = _session_to_source(source)
    return source


def check_python_blocks(doc: Document) -> list[Finding]:
    """Verify that every Python code block in ``doc`` is syntactically valid.

    Returns:
        list[Finding]: One error per block that fails to parse, at the
        offending line of the Markdown file, plus one error per unterminated
        fence.
    """
    findings: list[Finding] = []
    for block in doc.code_blocks:
        if not block.closed:
            findings.append(
                Finding(
                    doc.path,
                    block.start_line,
                    PYTHON_BLOCKS,
                    Severity.ERROR,
                    "unterminated code fence",
                )
            )
        if (source := _python_source(block)) is None:
            continue
        try:
            ast.parse(source, filename=str(doc.path))
        except SyntaxError as e:
            offset = (e.lineno or 1) - 1
            findings.append(
                Finding(
                    doc.path,
                    block.first_source_line + offset,
                    PYTHON_BLOCKS,
                    Severity.ERROR,
                    f"invalid Python: {e.msg}",
                )
            )
    return findings


# ============================================================================
#                               toc
# ============================================================================


def _linked_paths(index: Document, root: Path) -> set[Path]:
    linked: set[Path] = set()
    for link in index.links:
        target = link.target.strip()
        if not target or _is_external(target):
            continue
        path_part, _ = _split_target(target)
        if path_part:
            linked.add(_resolve(index, path_part, root))
    return linked


def check_toc(
    index: Document, lessons: Iterable[Document], root: Path | None = None
) -> list[Finding]:
    """Warn about lesson documents that the index does not link to.

    Args:
        index: The table-of-contents document (usually ``README.md``).
        lessons: Documents that should be reachable from ``index``. The index
            itself is ignored if it appears here.
        root: Docs root that absolute ``/path`` links resolve against, as in
            :func:`check_links`. Defaults to the index's directory.

    Returns:
        list[Finding]: One warning per unlisted lesson.
    """
    linked = _linked_paths(index, (root or index.path.parent).resolve())
    index_path = index.path.resolve()
    findings: list[Finding] = []
    for lesson in lessons:
        path = lesson.path.resolve()
        if path == index_path or path in linked:
            continue
        findings.append(
            Finding(
                lesson.path,
                1,
                TOC,
                Severity.WARNING,
                f"not linked from the table of contents in {index.path.name}",
            )
        )
    return findings
