"""Cache factory and exports for todo-cli.

This module provides a factory function to get the appropriate cache based on
the TODO_CACHE environment variable.

Supported caches:
    - "file" (default): JSON file in the user's config directory
    - "memory": In-process only, lost when the program exits

Environment Variables:
    TODO_CACHE: "file" (default) or "memory"

Example:
    from storage import get_cache

    cache = get_cache()
    todos = cache.load() or []
    cache.save(todos)
"""

from __future__ import annotations

import os

from storage.json_backend import FileSystemCache, default_cache_path
from storage.memory_backend import InMemoryCache
from storage.protocol import Cache, Todo, TodoRecord

__all__ = [
    "Cache",
    "Todo",
    "TodoRecord",
    "FileSystemCache",
    "InMemoryCache",
    "default_cache_path",
    "get_cache",
]


def get_cache() -> Cache:
    """Get the configured cache for todo storage.

    Reads the TODO_CACHE environment variable to determine which cache to
    use. Defaults to the file cache if not set.

    Returns:
        An instance of the configured Cache.

    Raises:
        ValueError: If TODO_CACHE names an unknown cache.
    """
    cache_type = os.environ.get("TODO_CACHE", "file").strip().lower() or "file"

    if cache_type == "file":
        return FileSystemCache()
    elif cache_type == "memory":
        return InMemoryCache()
    else:
        raise ValueError(
            f"Unknown cache: {cache_type!r}. Expected 'file' or 'memory'."
        )
