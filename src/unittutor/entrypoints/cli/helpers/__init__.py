"""Helpers shared by the CLI commands."""

from .hyperlinks import hyperlink, supports_osc8
from .messages import error, success, warn

__all__ = ["error", "hyperlink", "success", "supports_osc8", "warn"]
