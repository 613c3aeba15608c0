#!/usr/bin/env python3
"""
Todo CLI - interactive todo list manager.

Reads commands from stdin in a loop and applies them to a todo list that is
saved after every change.

Commands:
    add:    Prompt for a title and add a todo.
    list:   Show all todos with their completion status.
    toggle: Prompt for a todo number and flip its completion status.
    delete: Prompt for a todo number and remove it.
    exit:   Leave the program (end of input does the same).

Environment Variables:
    TODO_CACHE (optional): Cache to use ("file" or "memory").
                           Default: "file" (~/.config/todo-cli/todos.json)
    DEBUG (optional): If set, enables debug logging to stderr.

Exit Codes:
    0: Normal exit
    1: Error (unknown TODO_CACHE, etc.)
"""
from __future__ import annotations

import logging
import os
import sys
import traceback
from enum import Enum

from storage import get_cache
from todo_manager import TodoManager

# Version check
if sys.version_info < (3, 10):
    print("Error: Python 3.10+ required", file=sys.stderr)
    sys.exit(1)

LOG_FORMAT: str = "%(levelname)s %(name)s: %(message)s"
PROMPT: str = "\nWhat would you like to do? (add, list, toggle, delete, exit): "


def configure_logging() -> None:
    """Send log records to stderr, at DEBUG level when DEBUG is set."""
    level = logging.DEBUG if os.environ.get("DEBUG") else logging.WARNING
    logging.basicConfig(stream=sys.stderr, level=level, format=LOG_FORMAT)


class App:
    """Read-eval loop driving a TodoManager."""

    class Command(Enum):
        ADD = "add"
        LIST = "list"
        TOGGLE = "toggle"
        DELETE = "delete"
        EXIT = "exit"

    def __init__(self, manager: TodoManager) -> None:
        self.manager = manager

    def run(self) -> None:
        """Prompt for commands until exit or end of input."""
        running = True
        while running:
            try:
                raw = input(PROMPT)
            except EOFError:
                raw = App.Command.EXIT.value
            running = self.handle(raw)

    def handle(self, raw: str) -> bool:
        """Execute one command line.

        Returns:
            False when the loop should stop, True otherwise.
        """
        try:
            command = App.Command(raw.strip().lower())
        except ValueError:
            print("\n❗ Unknown command!")
            return True

        if command is App.Command.ADD:
            title = self._read("\nEnter Todo title: ")
            if title is not None:
                self.manager.add_todo(title)
                print("\n📌 Todo added!")
        elif command is App.Command.LIST:
            self.show_todos()
        elif command is App.Command.TOGGLE:
            index = self._select("\nEnter the number of the todo to toggle: ")
            if index is not None:
                if self.manager.toggle_completion(index):
                    print("\n🔄 Todo completion status toggled!")
                else:
                    print("\n❗ Invalid index!")
        elif command is App.Command.DELETE:
            index = self._select("\nEnter the number of the todo to delete: ")
            if index is not None:
                if self.manager.delete_todo(index):
                    print("\n🗑️  Todo deleted!")
                else:
                    print("\n❗ Invalid index!")
        elif command is App.Command.EXIT:
            print("\n👋 Exiting the app!\n")
            return False
        return True

    def show_todos(self) -> None:
        if self.manager.is_empty:
            print("\n❗ No todos!")
            return
        print("\n📝 Your Todos:\n")
        for line in self.manager.list_todos():
            print(f"\t{line}")

    def _read(self, prompt: str) -> str | None:
        try:
            return input(prompt)
        except EOFError:
            return None

    def _select(self, prompt: str) -> int | None:
        """List todos and ask for a 1-based number.

        Returns:
            The 0-based index, or None if there is nothing to select or the
            entry isn't a number.
        """
        self.show_todos()
        if self.manager.is_empty:
            return None

        raw = self._read(prompt)
        if raw is None:
            return None
        try:
            return int(raw.strip()) - 1
        except ValueError:
            print("\n❗ Invalid index!")
            return None


def main() -> None:
    """Main entry point for the todo CLI."""
    try:
        configure_logging()
        print("\n🌟 Welcome to Todo CLI! 🌟")

        # Get cache (reads TODO_CACHE env var)
        try:
            cache = get_cache()
        except ValueError as e:
            print(f"Error starting todo-cli: {e}", file=sys.stderr)
            sys.exit(1)

        App(TodoManager(cache)).run()
        sys.exit(0)

    except Exception as e:
        # Unexpected errors - preserve stack trace for debugging
        print(f"Unexpected error in todo-cli: {e!r}", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
