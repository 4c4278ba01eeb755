"""Documentation checks for the lesson set.

Parses Markdown files with markdown-it-py (headings, links and fenced code
blocks) and verifies the properties the lessons depend on:
internal links resolve, Python snippets parse, and every lesson is reachable
from the table of contents.
"""

from .checks import CHECKS, DEFAULT_CHECKS, check_links, check_python_blocks, check_toc
from .findings import Finding, Report, Severity
from .markdown import CodeBlock, Document, Heading, Link, parse_document, slugify
from .runner import collect_markdown, run_checks

__all__ = [
    "CHECKS",
    "DEFAULT_CHECKS",
    "CodeBlock",
    "Document",
    "Finding",
    "Heading",
    "Link",
    "Report",
    "Severity",
    "check_links",
    "check_python_blocks",
    "check_toc",
    "collect_markdown",
    "parse_document",
    "run_checks",
    "slugify",
]
