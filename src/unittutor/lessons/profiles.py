"""Async profile lookup, the subject of the async testing lesson."""

from __future__ import annotations

from typing import Any, Protocol


class ProfileClient(Protocol):  # pylint: disable=too-few-public-methods
    """Async source of user profiles."""

    async def fetch(self, user_id: int) -> dict[str, Any]:
        """Return the profile record for ``user_id``."""


async def display_name(client: ProfileClient, user_id: int) -> str:
    """Return the name to show for ``user_id``.

    Prefers ``"first last"``, then ``username``, then ``"user-<id>"``.
    """
    profile = await client.fetch(user_id)
    full = " ".join(
        part.strip()
        for part in (profile.get("first_name") or "", profile.get("last_name") or "")
        if part and part.strip()
    )
    if full:
        return full
    if username := (profile.get("username") or "").strip():
        return username
    return f"user-{user_id}"
