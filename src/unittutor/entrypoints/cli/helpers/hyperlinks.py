"""OSC-8 terminal hyperlinks.

Used for the "See Also" links in ``--help`` and for lesson titles in
``unittutor lessons list``, which link to the lesson file itself. Falls back to
plain text when the stream does not look like a hyperlink-capable terminal.
"""

import os
import sys
from pathlib import Path
from typing import TextIO

# terminals known to render OSC-8 (TERM_PROGRAM values, lower-cased)
_OSC8_PROGRAMS = frozenset({"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"})


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Heuristically detect whether ``stream`` (default stdout) renders OSC-8.

    Returns False for anything that is not a TTY, so piped output and
    ``CliRunner`` captures always get plain text.
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    return bool(
        (os.getenv("TERM_PROGRAM") or "").lower() in _OSC8_PROGRAMS
        or os.getenv("WT_SESSION")  # Windows Terminal
        or os.getenv("VTE_VERSION")  # GNOME Terminal, Tilix, etc.
        or os.getenv("TERM", "").startswith(("alacritty", "konsole"))
    )


def hyperlink(target: str | Path, label: str | None = None) -> str:
    """Return ``label`` linked to ``target`` when the terminal supports it.

    Args:
        target: URL, or a filesystem path which is turned into a ``file://`` URI.
        label: Text to show; defaults to the URL itself.

    Returns:
        str: The OSC-8 wrapped label (BEL-terminated), or just the label when
        hyperlinks are not supported.
    """
    url = target.resolve().as_uri() if isinstance(target, Path) else target
    text = label if label is not None else url
    if not supports_osc8():
        return text
    return f"\x1b]8;;{url}\x07{text}\x1b]8;;\x07"
