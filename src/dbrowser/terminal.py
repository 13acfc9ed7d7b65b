"""Operator-facing terminal surface."""

from __future__ import annotations

import sys
from typing import TextIO

import typer

ACTION_PROMPT = "debash$ "
INVALID_NUMBER_MESSAGE = "Oops! Invalid action. Try again, please."
OUT_OF_RANGE_MESSAGE = "Auch! Invalid action. Try again, please."


class InvalidActionInput(ValueError):
    """Raised for an index that does not select an action."""


class Terminal:
    """Line-based blocking I/O with the operator.

    All reads raise ``EOFError`` once the input stream is exhausted.
    """

    def __init__(self, reader: TextIO | None = None, writer: TextIO | None = None) -> None:
        self._reader = reader
        self._writer = writer

    @property
    def reader(self) -> TextIO:
        return self._reader if self._reader is not None else sys.stdin

    @property
    def writer(self) -> TextIO:
        return self._writer if self._writer is not None else sys.stdout

    def print(self, text: str = "") -> None:
        typer.echo(text, file=self.writer)

    def _read_line(self, prompt: str) -> str:
        typer.echo(prompt, file=self.writer, nl=False)
        self.writer.flush()
        line = self.reader.readline()
        if not line:
            raise EOFError
        return line

    def input(self, prefix: str) -> str:
        """Prompt with ``<prefix> > `` until a non-blank line is entered."""
        while True:
            line = self._read_line(f"{prefix} > ")
            if line.split():
                return line.strip()

    def input_lines(self, prefix: str) -> str:
        """Read lines until an empty one and return them joined."""
        lines = [self.input(prefix)]
        while True:
            line = self._read_line("")
            if not line.strip():
                return "\n".join(lines)
            lines.append(line.rstrip("\n"))

    def action_input(self, max_index: int) -> int:
        """Read one action index in ``1..max_index``."""
        self.print()
        argv: list[str] = []
        while not argv:
            argv = self._read_line(ACTION_PROMPT).split()
        token = argv[0]
        if not (token.isascii() and token.isdigit()):
            raise InvalidActionInput(INVALID_NUMBER_MESSAGE)
        index = int(token, 10)
        if index < 1 or index > max_index:
            raise InvalidActionInput(OUT_OF_RANGE_MESSAGE)
        return index

    def select_index(self, max_index: int) -> int:
        """Prompt for an action index until a valid one is entered."""
        while True:
            try:
                return self.action_input(max_index)
            except InvalidActionInput as exc:
                self.print(str(exc))
