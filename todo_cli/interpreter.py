from __future__ import annotations

import logging
from typing import Optional, TextIO

from rich.console import Console

from .commands import (
    AddCommand,
    Command,
    DeleteCommand,
    ExitCommand,
    ListCommand,
    ToggleCommand,
    parse_command,
)
from .manager import MutationResult, TaskManager

logger = logging.getLogger(__name__)

PROMPT = "Enter a command (add, list, toggle, delete, exit):"


class TodoApp:
    """Read-parse-execute loop on top of a TaskManager.

    ``stream`` replaces stdin as the line source when given (used by tests).
    """

    def __init__(
        self,
        manager: TaskManager,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        self.manager = manager
        self.console = console if console is not None else Console()
        self.stream = stream

    def run(self) -> None:
        """Process commands until an exit command is read."""
        while True:
            command = parse_command(self._read_line())
            if not self.execute(command):
                return

    def execute(self, command: Command) -> bool:
        """Run one command. Returns False once the loop should stop."""
        if isinstance(command, AddCommand):
            result = self.manager.add_task(command.title)
            self._say(f"📌 Added todo: {command.title}", markup=False)
            self._warn_if_unsaved(result)
        elif isinstance(command, ListCommand):
            self._list()
        elif isinstance(command, ToggleCommand):
            result = self.manager.toggle_completion(command.index)
            self._say(f"Toggled completion for todo at index {command.index + 1}")
            self._warn_if_unsaved(result)
        elif isinstance(command, DeleteCommand):
            result = self.manager.delete_task(command.index)
            self._say(f"🗑️ Deleted todo at index {command.index + 1}")
            self._warn_if_unsaved(result)
        elif isinstance(command, ExitCommand):
            self._say("Exiting the app 👋")
            return False
        return True

    def _read_line(self) -> str:
        self._say(PROMPT)
        try:
            return self.console.input(stream=self.stream)
        except (EOFError, KeyboardInterrupt):
            logger.debug("Input closed")
            return ""

    def _list(self) -> None:
        tasks = self.manager.list_tasks()
        if not tasks:
            self._say("(empty)")
            return
        for position, task in tasks:
            self._say(f"📝 {position}: {task}", markup=False)

    def _warn_if_unsaved(self, result: MutationResult) -> None:
        if result.unsaved:
            self.console.print(
                "[yellow]❗ Changes could not be saved; they will be lost on exit.[/yellow]",
                highlight=False,
            )

    def _say(self, text: str, markup: bool = True) -> None:
        self.console.print(
            text, markup=markup, highlight=False, emoji=False, soft_wrap=True
        )
