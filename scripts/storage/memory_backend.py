"""In-memory cache for todo-cli.

Keeps the todo list for the lifetime of the process only. Useful as a
throwaway session store and as a stand-in for the file cache in tests.
"""

from __future__ import annotations

from dataclasses import replace

from storage.protocol import Todo


class InMemoryCache:
    """Process-local cache holding the last saved todo list.

    Todos are copied on the way in and out, so later changes to the caller's
    objects don't alter the stored snapshot.

    Example:
        cache = InMemoryCache()
        cache.load()  # []
        cache.save([Todo("Buy milk")])
    """

    def __init__(self) -> None:
        self._todos: list[Todo] = []

    def save(self, todos: list[Todo]) -> None:
        """Replace the stored todos with copies of the given ones."""
        self._todos = [replace(todo) for todo in todos]

    def load(self) -> list[Todo] | None:
        """Return copies of the stored todos; empty if nothing was saved."""
        return [replace(todo) for todo in self._todos]
