"""Splitting N8 source text into tokens."""

from __future__ import annotations

from collections.abc import Callable

from n8lang.errors import LexicalAnalysisError
from n8lang.tokens import OPERATORS, Token, TokenType, is_keyword

_WHITESPACE = frozenset(" \t\r\n\f")
_OPERATOR_CHARS = frozenset("!~`#%^&*()-=+[]{}|\":;<,>.?/\\")

_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "a": "\a",
    "0": "\0",
    "\\": "\\",
    '"': '"',
    "'": "'",
    "`": "`",
}


def is_whitespace(ch: str) -> bool:
    """Return whether the character separates tokens."""
    return ch in _WHITESPACE and ch != ""


def is_digit(ch: str) -> bool:
    """Return whether the character is a decimal digit."""
    return ch != "" and "0" <= ch <= "9"


def _is_binary_digit(ch: str) -> bool:
    return ch in ("0", "1")


def _is_trinary_digit(ch: str) -> bool:
    return ch in ("0", "1", "2")


def _is_octal_digit(ch: str) -> bool:
    return ch != "" and "0" <= ch <= "7"


def _is_hex_digit(ch: str) -> bool:
    return ch != "" and (is_digit(ch) or "a" <= ch <= "f" or "A" <= ch <= "F")


_RADIX_DIGITS: dict[str, Callable[[str], bool]] = {
    "b": _is_binary_digit,
    "t": _is_trinary_digit,
    "c": _is_octal_digit,
    "x": _is_hex_digit,
}


def is_operator(ch: str) -> bool:
    """Return whether the character starts an operator, string, regex or comment."""
    return ch in _OPERATOR_CHARS and ch != ""


def is_alphabet(ch: str) -> bool:
    """Return whether the character may appear in a name."""
    return not is_whitespace(ch) and not is_digit(ch) and not is_operator(ch)


def is_valid_identifier(text: str) -> bool:
    """Return whether the text can be used as a variable name."""
    if is_digit(text[:1]):
        return False
    if any(is_operator(ch) or is_whitespace(ch) for ch in text):
        return False
    return not is_keyword(text)


def _unescape(text: str) -> str:
    out: list[str] = []
    chars = iter(text)
    for ch in chars:
        if ch != "\\":
            out.append(ch)
            continue
        escape = next(chars, "")
        out.append(_ESCAPES.get(escape, "\\" + escape))
    return "".join(out)


def _where(line: int, column: int) -> str:
    return f"(line {line}, column {column})"


class Tokenizer:
    """Scans N8 source text into a list of tokens."""

    def __init__(self, source: str, file_name: str = "") -> None:
        self._source = source
        self._file_name = file_name
        self._index = 0
        self._tokens: list[Token] = []

    @classmethod
    def load_file(cls, path: str) -> "Tokenizer":
        """Create a tokenizer over the contents of a file."""
        try:
            with open(path, encoding="utf-8") as handle:
                content = handle.read()
        except OSError as exc:
            raise FileNotFoundError(f"File not found: {path}") from exc
        return cls(content, str(path))

    @property
    def tokens(self) -> list[Token]:
        """The tokens found so far."""
        return self._tokens

    def _at_end(self) -> bool:
        return self._index >= len(self._source)

    def _peek(self) -> str:
        return "" if self._at_end() else self._source[self._index]

    def _next(self) -> str:
        ch = self._peek()
        self._index += 1
        return ch

    def _emit(self, image: str, line: int, column: int, kind: TokenType) -> None:
        self._tokens.append(Token(image, self._file_name, line, column, kind))

    def scan(self) -> None:
        """Scan the whole source, appending tokens."""
        if not self._source:
            return

        line, column = 1, 0
        while not self._at_end():
            ch = self._next()
            column += 1

            if is_whitespace(ch):
                if ch == "\n":
                    line += 1
                    column = 0
            elif is_operator(ch):
                if ch == "#":
                    while not self._at_end() and self._peek() != "\n":
                        self._index += 1
                    column = 0
                elif ch in ('"', "`"):
                    column = self._scan_quoted(ch, line, column)
                else:
                    column = self._scan_operator(ch, line, column)
            elif is_digit(ch):
                column = self._scan_number(ch, line, column)
            else:
                column = self._scan_name(ch, line, column)

    def _scan_operator(self, first: str, line: int, column: int) -> int:
        start = column
        op = first
        while not self._at_end() and op + self._peek() in OPERATORS:
            op += self._next()
            column += 1
        self._emit(op, line, start, TokenType.OPERATOR)
        return column

    def _scan_quoted(self, quote: str, line: int, column: int) -> int:
        is_string = quote == '"'
        kind = "string" if is_string else "regular expression"
        start = column
        parts: list[str] = []

        while not self._at_end() and self._peek() != quote:
            ch = self._next()
            if is_string:
                column += 1

            if ch == "\n":
                raise LexicalAnalysisError(
                    f"Found new line inside {kind} literal. {_where(line, column)}"
                )
            if ch == "\\":
                parts.append(ch)
                column += 1
                if self._at_end():
                    raise LexicalAnalysisError(
                        "Expecting escape character, encountered end-of-file. "
                        + _where(line, column)
                    )
                parts.append(self._next())
                column += 1
            else:
                parts.append(ch)

        self._index = min(self._index + 1, len(self._source))
        column += 1

        self._emit(
            _unescape("".join(parts)),
            line,
            start,
            TokenType.STRING if is_string else TokenType.REGEX,
        )
        return column

    def _take_while(self, parts: list[str], accept: Callable[[str], bool], column: int) -> int:
        while not self._at_end() and accept(self._peek()):
            parts.append(self._next())
            column += 1
        return column

    def _scan_number(self, first: str, line: int, column: int) -> int:
        start = column
        parts = [first]

        if first == "0" and self._peek() in _RADIX_DIGITS and self._peek() != "":
            prefix = self._next()
            column += 1
            parts.append(prefix)
            column = self._take_while(parts, _RADIX_DIGITS[prefix], column)
        else:
            column = self._scan_decimal(parts, line, column, count_sign=first != "0")

        self._emit("".join(parts), line, start, TokenType.DIGIT)
        return column

    def _scan_decimal(self, parts: list[str], line: int, column: int, count_sign: bool) -> int:
        column = self._take_while(parts, is_digit, column)

        if self._peek() == ".":
            parts.append(self._next())
            column += 1
            if not is_digit(self._peek()):
                raise LexicalAnalysisError(
                    f"Expecting decimal digits. {_where(line, column)}"
                )
            column = self._take_while(parts, is_digit, column)

        if self._peek() == "e":
            parts.append(self._next())
            column += 1

            sign = self._next()
            if count_sign:
                column += 1
            if self._at_end() or sign not in ("+", "-") or sign == "":
                raise LexicalAnalysisError(
                    "Expecting 'e' followed by decimal digits. " + _where(line, column)
                )
            parts.append(sign)
            column = self._take_while(parts, is_digit, column)

        return column

    def _scan_name(self, first: str, line: int, column: int) -> int:
        start = column
        parts = [first]
        column = self._take_while(
            parts, lambda ch: is_digit(ch) or is_alphabet(ch), column
        )
        name = "".join(parts)
        kind = TokenType.KEYWORD if is_keyword(name) else TokenType.IDENTIFIER
        self._emit(name, line, start, kind)
        return column


def tokenize(source: str, file_name: str = "") -> list[Token]:
    """Scan source text and return its tokens."""
    tokenizer = Tokenizer(source, file_name)
    tokenizer.scan()
    return tokenizer.tokens