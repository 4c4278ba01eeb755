"""Markdown reader built on markdown-it-py.

Extracts the three things the checks need from a Markdown file:

- **Headings** (ATX and setext) with their GitHub-style anchor slugs.
- **Links**: inline ``[text](target)``, reference-style ``[text][label]`` and
  image links, each with the line it appears on.
- **Fenced code blocks** opened by three or more backticks or tildes, at any
  nesting depth (list items, block quotes).

The text is tokenised with the CommonMark preset, so fences nested in list
items, code spans and indented code are handled the way GitHub renders them.
Autolinks (``<https://...>``) are always external and are not collected.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from markdown_it import MarkdownIt

from .errors import DocsDecodeError

if TYPE_CHECKING:
    from markdown_it.token import Token

# pylint: disable=too-many-instance-attributes

_INLINE_LINK_RE = re.compile(r"!?\[(?P<text>[^\]]*)\]\([^)]*\)")
_SLUG_STRIP_RE = re.compile(r"[^\w\- ]")
_LINE_BREAKS = frozenset({"softbreak", "hardbreak"})

_md = MarkdownIt("commonmark")


@dataclass(frozen=True)
class Heading:
    """A heading and the anchor GitHub generates for it."""

    level: int
    text: str
    line: int
    anchor: str


@dataclass(frozen=True)
class Link:
    """A link target found in the document."""

    text: str
    target: str
    line: int
    image: bool = False


@dataclass(frozen=True)
class CodeBlock:
    """A fenced code block.

    Attributes:
        language: First word of the info string, lower-cased ("" if none).
        info: The full info string after the fence.
        start_line: Line number of the opening fence (1-based).
        source: The block content, with container indentation removed.
        closed: False if the file (or the enclosing list item or quote) ended
            before a closing fence.
    """

    language: str
    info: str
    start_line: int
    source: str
    closed: bool = True

    @property
    def first_source_line(self) -> int:
        """Line number of the first content line."""
        return self.start_line + 1


@dataclass
class Document:
    """A parsed Markdown file."""

    path: Path
    headings: list[Heading] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)
    code_blocks: list[CodeBlock] = field(default_factory=list)

    @property
    def anchors(self) -> set[str]:
        """All heading anchors defined in the document."""
        return {h.anchor for h in self.headings}

    @property
    def title(self) -> str | None:
        """Text of the first heading, if any."""
        return self.headings[0].text if self.headings else None


def slugify(text: str) -> str:
    """Return the GitHub-style anchor for a heading text.

    Link markup is reduced to its text, the result is lower-cased, punctuation
    other than ``-`` and ``_`` is dropped and spaces become hyphens.

    Example:
        ```py
        >>> slugify("The AAA Pattern: Arrange, Act, Assert")
        'the-aaa-pattern-arrange-act-assert'
        ```
    """
    text = _INLINE_LINK_RE.sub(lambda m: m.group("text"), text)
    text = _SLUG_STRIP_RE.sub("", text.strip().lower())
    return text.replace(" ", "-")


class _AnchorRegistry:  # pylint: disable=too-few-public-methods
    """Hands out unique anchors the way GitHub does (``foo``, ``foo-1``, ...)."""

    def __init__(self) -> None:
        self._seen: dict[str, int] = {}

    def unique(self, slug: str) -> str:
        if slug not in self._seen:
            self._seen[slug] = 0
            return slug
        while True:
            self._seen[slug] += 1
            candidate = f"{slug}-{self._seen[slug]}"
            if candidate not in self._seen:
                self._seen[candidate] = 0
                return candidate


def _is_closing_fence(line: str, markup: str) -> bool:
    # container prefixes (list indentation, "> ") come before the fence
    stripped = line.lstrip(" \t>")
    run = len(stripped) - len(stripped.lstrip(markup[0]))
    return run >= len(markup) and not stripped[run:].strip()


def _code_block(token: Token, lines: list[str]) -> CodeBlock:
    start, end = token.map or (0, 0)
    last = end - 1
    closed = last > start and last < len(lines) and _is_closing_fence(lines[last], token.markup)
    info = token.info.strip()
    return CodeBlock(
        language=info.split()[0].lower() if info else "",
        info=info,
        start_line=start + 1,
        source=token.content,
        closed=closed,
    )


def _inline_links(inline: Token) -> list[Link]:
    """Links in one inline token, with line numbers counted from its block."""
    links: list[Link] = []
    line = (inline.map[0] if inline.map else 0) + 1
    # (target, line) of the link being read, and its text so far
    opened: tuple[str, int] | None = None
    text: list[str] = []
    for child in inline.children or []:
        if child.type in _LINE_BREAKS:
            line += 1
        elif child.type == "link_open":
            if child.markup != "autolink":
                opened, text = (str(child.attrGet("href") or ""), line), []
        elif child.type == "link_close":
            if opened is not None:
                links.append(Link("".join(text), opened[0], opened[1]))
            opened = None
        elif child.type == "image":
            links.append(
                Link(child.content, str(child.attrGet("src") or ""), line, image=True)
            )
            if opened is not None:
                text.append(child.content)
        elif opened is not None:
            text.append(child.content)
    return links


def parse_markdown(path: Path, text: str) -> Document:
    """Parse Markdown ``text`` belonging to ``path`` into a :class:`Document`."""
    doc = Document(path=path)
    anchors = _AnchorRegistry()
    lines = text.splitlines()
    tokens = _md.parse(text)

    for i, token in enumerate(tokens):
        if token.type == "fence":
            doc.code_blocks.append(_code_block(token, lines))
        elif token.type == "heading_open":
            heading_text = tokens[i + 1].content.strip()
            doc.headings.append(
                Heading(
                    level=int(token.tag[1]),
                    text=heading_text,
                    line=(token.map[0] if token.map else 0) + 1,
                    anchor=anchors.unique(slugify(heading_text)),
                )
            )
        elif token.type == "inline":
            doc.links.extend(_inline_links(token))

    return doc


def parse_document(path: Path, text: str | None = None) -> Document:
    """Read and parse the Markdown file at ``path``.

    Args:
        path: File to parse; also recorded on the returned document.
        text: Pre-loaded content. When omitted the file is read as UTF-8.

    Returns:
        Document: The parsed headings, links and code blocks.

    Raises:
        DocsDecodeError: If the file is not valid UTF-8.
    """
    if text is None:
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise DocsDecodeError(path, e.reason) from e
    return parse_markdown(path, text)


def render_toc(doc: Document, min_level: int = 2, max_level: int = 3) -> str:
    """Render a nested Markdown list linking to the document's headings.

    Headings outside ``min_level..max_level`` are left out; nesting is two
    spaces per level below ``min_level``.
    """
    lines = [
        f"{'  ' * (h.level - min_level)}- [{h.text}](#{h.anchor})"
        for h in doc.headings
        if min_level <= h.level <= max_level
    ]
    return "\n".join(lines) + ("\n" if lines else "")
