"""Tests for InMemoryCache."""

from __future__ import annotations

import pytest

from storage.memory_backend import InMemoryCache
from storage.protocol import Todo


class TestInMemoryCache:
    """Tests for InMemoryCache save and load."""

    def test_should_load_empty_list_before_any_save(
        self, memory_cache: InMemoryCache
    ) -> None:
        """Verify a fresh cache loads [] rather than None."""
        assert memory_cache.load() == []

    def test_should_load_saved_todo(self, memory_cache: InMemoryCache) -> None:
        """Verify a saved todo comes back with the same title."""
        todo = Todo("Test")
        memory_cache.save([todo])

        result = memory_cache.load()
        assert result is not None
        assert len(result) == 1
        assert result[0].title == "Test"
        assert result[0].id == todo.id

    def test_should_return_copies(self, memory_cache: InMemoryCache) -> None:
        """Verify loaded todos are not the stored objects."""
        memory_cache.save([Todo("Test")])

        first = memory_cache.load()
        assert first is not None
        first[0].is_completed = True

        second = memory_cache.load()
        assert second is not None
        assert second[0].is_completed is False

    def test_should_not_alias_caller_list(self, memory_cache: InMemoryCache) -> None:
        """Verify appending to the saved list doesn't change the cache."""
        todos = [Todo("A")]
        memory_cache.save(todos)
        todos.append(Todo("B"))

        result = memory_cache.load()
        assert result is not None
        assert len(result) == 1

    def test_instances_do_not_share_state(self) -> None:
        """Verify two caches are independent."""
        first, second = InMemoryCache(), InMemoryCache()
        first.save([Todo("Only in first")])

        assert second.load() == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
