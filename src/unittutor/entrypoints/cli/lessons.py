"""UNITTUTOR lessons CLI: list the lesson documents."""

from __future__ import annotations

import logging
from pathlib import Path

import click
import click_extra as clickx

from unittutor import config
from unittutor.doccheck import parse_document
from unittutor.doccheck.errors import DocCheckError

from .helpers import hyperlink, warn
from .helpers.docs_root import resolve_docs_root

logger = logging.getLogger(__name__)


@click.group(cls=clickx.ExtraGroup)
def lessons() -> None:
    """Lesson catalog commands."""


@lessons.command(name="list")
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help=f"Docs root containing lessons/. Defaults to ${config.DOCS_ROOT_ENV}, then the bundled docs.",
)
def list_lessons(root: Path | None) -> None:
    """List lessons in reading order with their titles."""
    lessons_dir = config.get_lessons_dir(resolve_docs_root(root))
    files = sorted(lessons_dir.glob("*.md")) if lessons_dir.is_dir() else []
    if not files:
        warn(f"No lessons found in {lessons_dir}")
        return
    for number, path in enumerate(files, start=1):
        try:
            title = parse_document(path).title or path.stem
        except DocCheckError as e:
            raise click.ClickException(str(e)) from e
        logger.debug("Lesson %d: %s (%s)", number, title, path)
        click.echo(f"{number:>2}. {hyperlink(path, title)}  ({path.name})")
