"""Docs root lookup for CLI commands.

Wraps `unittutor.config.get_docs_root` so commands get a `click.ClickException`
with guidance instead of a traceback when the docs cannot be found.
"""

from pathlib import Path

import click

from unittutor import config


def resolve_docs_root(root: Path | None) -> Path:
    """Return ``root`` if given, otherwise the configured docs root.

    Raises:
        click.ClickException: If no root was given and the configured one is missing.
    """
    if root is not None:
        return root
    try:
        return config.get_docs_root()
    except config.DocsRootNotFoundError as e:
        raise click.ClickException(
            f"{e}\n\nPass --root or set {config.DOCS_ROOT_ENV} to the lesson docs directory."
        ) from e
