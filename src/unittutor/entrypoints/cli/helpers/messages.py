"""Terminal message helpers for the UNITTUTOR CLI.

Status lines go to stderr so stdout can carry findings or JSON. Emoji glyphs
fall back to ASCII when stderr cannot encode them.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    Decides between an emoji and its ASCII fallback, so a learner on a
    non-UTF-8 console (e.g. a legacy Windows code page) never hits a
    ``UnicodeEncodeError`` just because a check passed.

    Args:
        character: The glyph to test (e.g. "⚠️", "✅").

    Returns:
        bool: True if stderr's encoding can represent it; False otherwise.
    """
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(emoji: str, fallback: str) -> str:
    return emoji if _supports_character(emoji) else fallback


def caution_glyph() -> str:
    """Marker for warning lines.

    Returns:
        str: "⚠️" when stderr can encode it; otherwise "[!]".
    """
    return _glyph("⚠️", "[!]")


def success_glyph() -> str:
    """Marker for success lines.

    Returns:
        str: "✅" when stderr can encode it; otherwise "[OK]".
    """
    return _glyph("✅", "[OK]")


def error_glyph() -> str:
    """Marker for error lines.

    Returns:
        str: "❌" when stderr can encode it; otherwise "[X]".
    """
    return _glyph("❌", "[X]")


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr** with a caution glyph.

    Args:
        msg: The message to display.

    Note:
        Warnings stay off stdout so ``docs check --format json`` can be piped
        into another tool even when lessons are missing from the index.

    Example:
        ``⚠️  2 warning(s) in 8 file(s).``
    """
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr** with a success glyph.

    Args:
        msg: The message to display.

    Note:
        Written to stderr like the other status lines; stdout holds only the
        command's data (findings, JSON, tables of contents).

    Example:
        ``✅  8 file(s) checked, no problems found.``
    """
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to **stderr** with an error glyph.

    Args:
        msg: The message to display.

    Note:
        The caller decides the exit status; this only prints.

    Example:
        ``❌  3 error(s), 0 warning(s) in 8 file(s).``
    """
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
