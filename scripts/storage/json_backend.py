"""JSON file-based cache for todo-cli.

This module provides a cache that persists the todo list to a JSON file.
It uses atomic writes (temp file + os.replace) so a failed save never leaves
a half-written file behind.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from storage.protocol import Todo, TodoRecord

logger = logging.getLogger(__name__)

APP_DIR_NAME: str = "todo-cli"
CACHE_FILE_NAME: str = "todos.json"


def default_cache_path() -> Path:
    """Return the per-user location of the todo file."""
    return Path.home() / ".config" / APP_DIR_NAME / CACHE_FILE_NAME


class FileSystemCache:
    """JSON file-based cache for the todo list.

    Stores the whole collection in a single JSON file, rewritten on every
    save. Save failures are logged and swallowed; load failures are reported
    as None.

    Attributes:
        cache_file: The Path to the JSON file.

    Example:
        cache = FileSystemCache()
        todos = cache.load() or []
        cache.save(todos)
    """

    def __init__(self, cache_file: Path | None = None) -> None:
        """Initialize the file system cache.

        Args:
            cache_file: The path to the JSON file. Defaults to
                default_cache_path().
        """
        self.cache_file = cache_file if cache_file is not None else default_cache_path()

    def load(self) -> list[Todo] | None:
        """Load the todo list from the JSON file.

        Returns None if the file doesn't exist. If the file is unreadable,
        not valid JSON, not an array, or holds a malformed todo, also returns
        None so the caller can start fresh.

        Returns:
            The list of Todo objects, or None if nothing usable is stored.
        """
        try:
            with open(self.cache_file, "r", encoding="utf-8") as f:
                records = json.load(f)
            if not isinstance(records, list):
                logger.warning(
                    "Ignoring %s: expected a JSON array, got %s",
                    self.cache_file,
                    type(records).__name__,
                )
                return None
            return [Todo.from_dict(record) for record in records]
        except FileNotFoundError:
            logger.debug("No todo file at %s", self.cache_file)
            return None
        except (OSError, KeyError, TypeError, ValueError, RecursionError) as e:
            # json.JSONDecodeError is a ValueError; deep nesting is a RecursionError
            logger.warning("Failed to load todos from %s: %r", self.cache_file, e)
            return None

    def save(self, todos: list[Todo]) -> None:
        """Atomically replace the JSON file with the given todos.

        Creates the parent directory if needed and writes to a temporary file
        before moving it over the final location. Errors are logged, not
        raised.

        Args:
            todos: The complete todo list to store.
        """
        try:
            self.cache_file.parent.mkdir(parents=True, exist_ok=True)
            self._write_atomic([todo.to_dict() for todo in todos])
        except (OSError, TypeError, ValueError) as e:
            logger.warning("Failed to save todos to %s: %r", self.cache_file, e)
            return

        logger.debug("Saved %d todos to %s", len(todos), self.cache_file)

    def _write_atomic(self, records: list[TodoRecord]) -> None:
        """Write records to a temp file, then rename it over cache_file.

        Raises:
            OSError: If the temp file can't be written or renamed.
            TypeError: If a record can't be serialized.
            ValueError: If a record can't be serialized.
        """
        temp_fd, temp_path = tempfile.mkstemp(
            dir=self.cache_file.parent, suffix=".tmp"
        )
        try:
            with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
            os.replace(temp_path, self.cache_file)  # Atomic on POSIX
        except (OSError, TypeError, ValueError):
            # Clean up temp file on failure
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise

