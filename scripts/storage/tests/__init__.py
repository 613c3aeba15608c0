"""Test suite for todo-cli caches.

This package contains tests for the storage layer of todo-cli, covering the
Todo entity, the file and in-memory caches, and cache protocol compliance.
"""
