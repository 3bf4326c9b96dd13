"""Errors raised while running vector graphics description programs."""

from __future__ import annotations


class VgdlError(Exception):
    """Error raised while running a VGDL program.

    Context is added by raising a new ``VgdlError`` from the original one;
    ``str()`` shows the whole chain of causes, outermost first.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        cause = self.__cause__
        if cause is None:
            return self.message
        return f"{self.message}: {cause}"