"""Protocols and type definitions for todo caches.

This module defines the Todo entity, its serialized form, and the Cache
interface. All cache implementations must satisfy the Cache protocol.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Protocol, TypedDict

COMPLETED_GLYPH: str = "✅"
PENDING_GLYPH: str = "❌"


class TodoRecord(TypedDict):
    """Serialized structure for a single todo.

    Attributes:
        id: Canonical UUID string (e.g., "1b4e28ba-2fa1-11d2-883f-0016d3cca427").
        title: The task description.
        isCompleted: Whether the task has been done.
    """

    id: str
    title: str
    isCompleted: bool


@dataclass
class Todo:
    """A single task with a stable identity.

    Attributes:
        title: The task description, set at creation.
        is_completed: Completion flag, False for new todos.
        id: Unique identifier generated at creation.

    Example:
        todo = Todo("Buy milk")
        str(todo)  # "❌ Buy milk"
    """

    title: str
    is_completed: bool = False
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @property
    def glyph(self) -> str:
        """Return the completion marker shown next to the title."""
        return COMPLETED_GLYPH if self.is_completed else PENDING_GLYPH

    def __str__(self) -> str:
        return f"{self.glyph} {self.title}"

    def to_dict(self) -> TodoRecord:
        """Serialize this todo to its JSON-compatible record."""
        return {
            "id": str(self.id),
            "title": self.title,
            "isCompleted": self.is_completed,
        }

    @classmethod
    def from_dict(cls, record: TodoRecord) -> Todo:
        """Build a todo from a serialized record.

        Args:
            record: A TodoRecord, typically decoded from JSON.

        Returns:
            The Todo with the record's id, title and completion flag.

        Raises:
            KeyError: If a required key is missing.
            TypeError: If a field has the wrong type.
            ValueError: If the id is not a valid UUID.
        """
        todo_id = record["id"]
        title = record["title"]
        is_completed = record["isCompleted"]
        if not isinstance(todo_id, str):
            raise TypeError(f"id must be a string, got {type(todo_id).__name__}")
        if not isinstance(title, str):
            raise TypeError(f"title must be a string, got {type(title).__name__}")
        if not isinstance(is_completed, bool):
            raise TypeError(
                f"isCompleted must be a boolean, got {type(is_completed).__name__}"
            )
        return cls(
            title=title,
            is_completed=is_completed,
            id=uuid.UUID(todo_id),
        )


class Cache(Protocol):
    """Protocol for todo caches.

    A cache persists and retrieves the whole todo collection. Every save
    replaces whatever was stored before.
    """

    def save(self, todos: list[Todo]) -> None:
        """Persist the given todos, replacing any previously stored ones.

        Implementations must not raise. Failures are logged and the caller's
        in-memory list remains the source of truth.

        Args:
            todos: The complete current collection.
        """
        ...

    def load(self) -> list[Todo] | None:
        """Retrieve the most recently saved todos.

        Returns:
            The saved todos in their original order, or None if nothing was
            saved or the stored data could not be read.
        """
        ...
