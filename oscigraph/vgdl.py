"""Interpreter for the vector graphics description language."""

from __future__ import annotations

import re
from collections import deque

from oscigraph import commands
from oscigraph.commands import Command, Lines
from oscigraph.errors import VgdlError

_ASCII_WHITESPACE = re.compile(r"[\t\n\f\r ]+")


class State:
    """The environment of named commands a VGDL program runs in."""

    def __init__(self) -> None:
        self.env: dict[str, Command] = {
            "draw": commands.draw,
            "define": commands.define,
            "sequence": commands.sequence,
            "load": commands.load,
            "scale": commands.scale,
            "move": commands.move,
            "row": commands.row,
            "col": commands.col,
            "text": commands.text,
        }

    def run(self, program: str) -> Lines:
        """Run a whole program, which must consist of exactly one command."""
        args = deque(word for word in _ASCII_WHITESPACE.split(program) if word)
        out = self.exec(args)
        if args:
            raise VgdlError(f"Extra words after running command: {args[0]}")
        return out

    def exec(self, args: deque[str]) -> Lines:
        """Run the command named by the next word, consuming its arguments."""
        if not args:
            raise VgdlError("No command to run")
        name = args.popleft()
        command = self.env.get(name)
        if command is None:
            raise VgdlError(f"Command '{name}' not found")
        try:
            return command(self, args)
        except VgdlError as err:
            raise VgdlError(f"In command {name}") from err