"""Tokens of the N8 language and its fixed operator and keyword sets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

OPERATORS: tuple[str, ...] = (
    "+", "-", "*", "/", "\\", "!", "!=",
    "&", "&&", "|", "||", "^", "%",
    "(", ")", "[", "]", "{", "}",
    "=", "==", ":", ";", "'", "\"",
    "<", "<<", "<=", ">", ">>", ">=",
    ",", ".", "?", "::", "!:",
)

KEYWORDS: frozenset[str] = frozenset({
    "break", "catch", "continue", "delete",
    "else", "false", "func", "halt", "handle",
    "if", "lock", "loop", "maybe", "nil",
    "parallel", "random", "render", "ret",
    "size", "test", "then", "throw", "true",
    "type", "unless", "use", "val", "wait",
    "when", "while", "with",
})


class TokenType(Enum):
    """The kind of a token."""

    DIGIT = 0
    IDENTIFIER = 1
    KEYWORD = 2
    OPERATOR = 3
    REGEX = 4
    STRING = 5

    def __str__(self) -> str:
        return self.name.lower()


@dataclass
class Token:
    """A piece of source text with its position and kind."""

    image: str
    file_name: str
    line: int
    column: int
    type: TokenType

    def append_to_image(self, text: str) -> None:
        """Extend the token's text, as for dotted names."""
        self.image += text

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        if self.type != other.type:
            return self.type.value < other.type.value
        return self.image < other.image

    def __str__(self) -> str:
        return (
            f"\u001b[1;32m{self.image}\u001b[0m "
            f"[line {self.line}, column {self.column}] "
            f"(\u001b[4;97m{self.file_name}\u001b[0m)"
        )


def is_operator_symbol(image: str) -> bool:
    """Return whether the text is one of the language's operators."""
    return image in OPERATORS


def is_keyword(image: str) -> bool:
    """Return whether the text is a reserved word."""
    return image in KEYWORDS