"""Todo list manager.

Owns the in-memory todo list and writes the full list back through its cache
after every change.
"""
from __future__ import annotations

import logging

from storage.protocol import Cache, Todo

logger = logging.getLogger(__name__)


class TodoManager:
    """Mediates all changes to the todo list.

    Attributes:
        cache: The cache the list is loaded from and saved to.
        todos: The authoritative list, in insertion order.
    """

    def __init__(self, cache: Cache) -> None:
        self.cache = cache
        loaded = cache.load()
        self.todos: list[Todo] = loaded if loaded is not None else []

    @property
    def is_empty(self) -> bool:
        return not self.todos

    def _is_valid_index(self, index: int) -> bool:
        return 0 <= index < len(self.todos)

    def list_todos(self) -> list[str]:
        """Return one display line per todo, numbered from 1."""
        return [f"{position}. {todo}" for position, todo in enumerate(self.todos, 1)]

    def add_todo(self, title: str) -> Todo:
        """Append a new todo with the given title and save."""
        todo = Todo(title)
        self.todos.append(todo)
        self.cache.save(self.todos)
        return todo

    def toggle_completion(self, index: int) -> bool:
        """Flip the completion flag of the todo at index.

        Returns:
            True if the todo was toggled, False if index is out of range.
        """
        if not self._is_valid_index(index):
            logger.debug(
                "Toggle ignored, index %d out of range (%d todos)", index, len(self.todos)
            )
            return False

        todo = self.todos[index]
        todo.is_completed = not todo.is_completed
        self.cache.save(self.todos)
        return True

    def delete_todo(self, index: int) -> bool:
        """Remove the todo at index; later todos move up one position.

        Returns:
            True if the todo was deleted, False if index is out of range.
        """
        if not self._is_valid_index(index):
            logger.debug(
                "Delete ignored, index %d out of range (%d todos)", index, len(self.todos)
            )
            return False

        del self.todos[index]
        self.cache.save(self.todos)
        return True
