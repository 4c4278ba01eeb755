"""A todo list wrapping an ordered sequence of task strings."""

from __future__ import annotations

from collections.abc import Iterable

from .errors import EmptyTaskError, TaskNotFoundError


class TodoList:
    """Ordered list of tasks.

    Tasks are plain strings; duplicates are allowed and ``update``/``remove``
    act on the first occurrence.
    """

    def __init__(self, tasks: Iterable[str] = ()) -> None:
        self._tasks: list[str] = []
        for task in tasks:
            self.add(task)

    @property
    def tasks(self) -> list[str]:
        """A copy of the tasks in insertion order."""
        return list(self._tasks)

    def add(self, task: str) -> None:
        """Append ``task``.

        Raises:
            EmptyTaskError: If ``task`` is blank.
        """
        if not task.strip():
            raise EmptyTaskError
        self._tasks.append(task)

    def update(self, old: str, new: str) -> None:
        """Replace the first occurrence of ``old`` with ``new``.

        Raises:
            TaskNotFoundError: If ``old`` is not in the list.
            EmptyTaskError: If ``new`` is blank.
        """
        if not new.strip():
            raise EmptyTaskError
        try:
            index = self._tasks.index(old)
        except ValueError as e:
            raise TaskNotFoundError(old) from e
        self._tasks[index] = new

    def remove(self, task: str) -> None:
        """Remove the first occurrence of ``task``; do nothing if it is absent."""
        if task in self._tasks:
            self._tasks.remove(task)

    def clear(self) -> None:
        """Remove every task."""
        self._tasks.clear()

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, task: object) -> bool:
        return task in self._tasks

    def __repr__(self) -> str:
        return f"TodoList({self._tasks!r})"
