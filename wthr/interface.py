"""A line-based command prompt."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TextIO


@dataclass
class Command:
    """An action run with the text after the command name, and its help."""

    action: Callable[[str], bool]
    help: Callable[[], None]


class Interface:
    """Reads command lines and dispatches them to registered commands."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self._stdin = stdin
        self._stdout = stdout
        self.commands: dict[str, Command] = {}

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def __iter__(self) -> Iterator[str]:
        return iter(self.commands)

    def register_command(self, name: str, command: Command) -> None:
        """Register ``command`` under ``name``, replacing any earlier one."""
        self.commands[name] = command

    def handle_command(self, line: str) -> None:
        """Run the command named by the first word of ``line``."""
        if not line:
            return
        name, _, argument = line.partition(" ")
        command = self.commands.get(name)
        if command is None:
            print("Available commands are:", file=self.stdout)
            for known in self.commands:
                print(known, file=self.stdout)
            return
        if not command.action(argument):
            print(f"{name} failed", file=self.stdout)
            command.help()

    def run(self, prompt: str) -> None:
        """Show ``prompt``, read one line and handle it.

        Raises EOFError when the input is exhausted.
        """
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError("end of input")
        self.handle_command(line.rstrip("\r\n"))