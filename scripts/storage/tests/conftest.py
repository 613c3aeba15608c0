"""Shared fixtures and utilities for cache tests.

This module provides common test fixtures used across all cache tests,
including sample todos, temporary directories, and parameterized cache
instances.
"""

from __future__ import annotations

import uuid
from pathlib import Path

import pytest

from storage.json_backend import FileSystemCache
from storage.memory_backend import InMemoryCache
from storage.protocol import Cache, Todo, TodoRecord


@pytest.fixture
def tmp_project(tmp_path: Path) -> Path:
    """Create a temporary directory standing in for the user's config dir.

    Returns:
        Path to a clean temporary directory.
    """
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture
def sample_todo() -> Todo:
    """Create a sample todo with a fixed id.

    Returns:
        A pending Todo.
    """
    return Todo(
        title="Sample task",
        id=uuid.UUID("1b4e28ba-2fa1-11d2-883f-0016d3cca427"),
    )


@pytest.fixture
def sample_record() -> TodoRecord:
    """Create the serialized form of sample_todo.

    Returns:
        A valid TodoRecord.
    """
    return {
        "id": "1b4e28ba-2fa1-11d2-883f-0016d3cca427",
        "title": "Sample task",
        "isCompleted": False,
    }


@pytest.fixture
def sample_todos() -> list[Todo]:
    """Create a list of sample todos for testing.

    Returns:
        Three todos, the middle one completed.
    """
    return [
        Todo("Task 1"),
        Todo("Task 2", is_completed=True),
        Todo("Task 3"),
    ]


@pytest.fixture(params=["file", "memory"])
def cache(request, tmp_project: Path) -> Cache:
    """Parameterized fixture providing both cache types.

    This fixture enables cross-cache compliance testing by running the same
    tests against the file and in-memory implementations.

    Args:
        request: Pytest request object with param.
        tmp_project: Temporary project directory.

    Returns:
        An instance of either FileSystemCache or InMemoryCache.
    """
    if request.param == "file":
        return FileSystemCache(tmp_project / "todos.json")
    else:
        return InMemoryCache()


@pytest.fixture
def file_cache(tmp_project: Path) -> FileSystemCache:
    """Create a file cache for file-specific tests.

    Args:
        tmp_project: Temporary project directory.

    Returns:
        An instance of FileSystemCache.
    """
    return FileSystemCache(tmp_project / "todos.json")


@pytest.fixture
def memory_cache() -> InMemoryCache:
    """Create an in-memory cache for memory-specific tests.

    Returns:
        An instance of InMemoryCache.
    """
    return InMemoryCache()
