"""A book-title catalog used in the best-practices lesson."""

from __future__ import annotations

from collections.abc import Iterable

from .errors import EmptyTitleError


def _normalize(title: str) -> str:
    return title.strip()


class Library:
    """Set of book titles that remembers insertion order.

    Titles are compared exactly (case-sensitive) after stripping surrounding
    whitespace; :meth:`search` is the case-insensitive lookup.
    """

    def __init__(self, titles: Iterable[str] = ()) -> None:
        # dict keeps insertion order and gives O(1) membership
        self._books: dict[str, None] = {}
        for title in titles:
            self.add_book(title)

    @property
    def books(self) -> list[str]:
        """Titles in the order they were added."""
        return list(self._books)

    def add_book(self, title: str) -> None:
        """Add ``title`` to the catalog; adding a title twice is a no-op.

        Raises:
            EmptyTitleError: If ``title`` is blank.
        """
        if not (key := _normalize(title)):
            raise EmptyTitleError
        self._books.setdefault(key, None)

    def remove_book(self, title: str) -> None:
        """Remove ``title``; do nothing if it is not in the catalog."""
        self._books.pop(_normalize(title), None)

    def has_book(self, title: str) -> bool:
        """Return True if ``title`` is in the catalog."""
        return _normalize(title) in self._books

    def search(self, fragment: str) -> list[str]:
        """Return titles containing ``fragment``, ignoring case."""
        needle = fragment.strip().casefold()
        return [title for title in self._books if needle in title.casefold()]

    def __len__(self) -> int:
        return len(self._books)
