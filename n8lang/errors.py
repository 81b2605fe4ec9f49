"""Exceptions raised while scanning, parsing and running N8 code."""

from __future__ import annotations

from typing import Any


class LexicalAnalysisError(Exception):
    """Raised when source text cannot be split into tokens."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ParserError(Exception):
    """Raised when a token sequence does not form a valid program."""

    def __init__(self, token: Any, message: str) -> None:
        super().__init__(message)
        self.token = token
        self.message = message


class ThrowSignal(Exception):
    """Raised by library functions to signal a script-level error."""

    def __init__(self, message: str, token: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.token = token