"""Built-in commands of the vector graphics description language."""

from __future__ import annotations

import stat
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from oscigraph.errors import VgdlError
from oscigraph.linedraw import Point

if TYPE_CHECKING:
    from oscigraph.vgdl import State

Lines = list[list[Point]]
"""A drawable series of lines, each a list of points."""

Command = Callable[["State", "deque[str]"], Lines]
"""A command takes the interpreter state and the remaining words."""

_END = "."


def _pop(args: deque[str], message: str) -> str:
    if not args:
        raise VgdlError(message)
    return args.popleft()


def _parse_number(token: str, what: str) -> float:
    try:
        if "_" in token:
            raise ValueError(f"invalid float literal: {token!r}")
        return float(token)
    except ValueError as err:
        raise VgdlError(f"Cannot parse {what}") from err


def _translate(lines: Lines, dx: float, dy: float) -> Lines:
    return [[(x + dx, y + dy) for x, y in line] for line in lines]


def _at_end(args: deque[str]) -> bool:
    """Consume a terminating "." if it is next."""
    if args and args[0] == _END:
        args.popleft()
        return True
    return False


@dataclass(frozen=True)
class Binding:
    """A name bound to a fixed set of lines by ``define``."""

    value: Lines

    def run(self, state: State, args: deque[str]) -> Lines:
        return [list(line) for line in self.value]

    def __call__(self, state: State, args: deque[str]) -> Lines:
        return self.run(state, args)


def draw(state: State, args: deque[str]) -> Lines:
    """Read points as ``x y`` pairs; ``,`` ends a line and ``;`` ends the drawing."""
    out: Lines = []
    line: list[Point] = []
    while True:
        word = _pop(args, "Expected , ; or point")
        if word in (",", ";"):
            if len(line) < 2:
                raise VgdlError("Lines cannot have less than 2 points")
            out.append(line)
            line = []
            if word == ";":
                return out
        else:
            y_word = _pop(args, "Expected second point")
            x = _parse_number(word, "x coordinate")
            y = _parse_number(y_word, "y coordinate")
            line.append((x, y))


def define(state: State, args: deque[str]) -> Lines:
    """Bind a name to the result of the following command."""
    name = _pop(args, "Expected name to define")
    value = state.exec(args)
    state.env[name] = Binding(value)
    return []


def sequence(state: State, args: deque[str]) -> Lines:
    """Run commands until ``.`` and join their lines."""
    out: Lines = []
    while not _at_end(args):
        out.extend(state.exec(args))
    return out


def _load_path(path: Path, state: State) -> Lines:
    if stat.S_ISDIR(path.stat().st_mode):
        out: Lines = []
        for entry in sorted(path.iterdir()):
            out.extend(_load_path(entry, state))
        return out
    return state.run(path.read_text(encoding="utf-8"))


def load(state: State, args: deque[str]) -> Lines:
    """Run the program in a file, or every file below a directory."""
    path = _pop(args, "Expected path")
    try:
        return _load_path(Path(path), state)
    except (OSError, UnicodeDecodeError, VgdlError) as err:
        raise VgdlError(f"While loading {path}") from err


def scale(state: State, args: deque[str]) -> Lines:
    """Scale the result of the following command by X and Y factors."""
    xs_word = _pop(args, "Expected X scale")
    ys_word = _pop(args, "Expected Y scale")
    xs = _parse_number(xs_word, "X scale")
    ys = _parse_number(ys_word, "Y scale")
    return [[(x * xs, y * ys) for x, y in line] for line in state.exec(args)]


def move(state: State, args: deque[str]) -> Lines:
    """Translate the result of the following command by X and Y offsets."""
    xo_word = _pop(args, "Expected X translation")
    yo_word = _pop(args, "Expected Y translation")
    xo = _parse_number(xo_word, "X translation")
    yo = _parse_number(yo_word, "Y translation")
    return _translate(state.exec(args), xo, yo)


def row(state: State, args: deque[str]) -> Lines:
    """Lay out commands until ``.`` left to right, two units apart."""
    out: Lines = []
    offset = 0.5
    while not _at_end(args):
        out.extend(_translate(state.exec(args), offset, 0.0))
        offset += 2.0
    return out


def col(state: State, args: deque[str]) -> Lines:
    """Lay out commands until ``.`` bottom to top, two units apart."""
    out: Lines = []
    offset = 0.5
    while not _at_end(args):
        out.extend(_translate(state.exec(args), 0.0, offset))
        offset += 2.0
    return out


def text(state: State, args: deque[str]) -> Lines:
    """Draw words until ``.``, each character by the command of the same name."""
    out: Lines = []
    offset = 0.5
    while True:
        word = _pop(args, "Expected string or .")
        if word == _END:
            return out
        for char in word:
            glyph = state.exec(deque([char]))
            out.extend(_translate(glyph, offset, 0.0))
            offset += 2.0
        offset += 2.0