"""Syntax tree nodes produced by the parser."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional

from n8lang.tokens import Token


@dataclass
class Node:
    """Base of every syntax tree node; ``address`` locates it in the source."""

    address: Token


@dataclass
class ArrayExpression(Node):
    """An array literal such as ``[a, b]``."""

    elements: list[Node] = field(default_factory=list)


@dataclass
class ArrayAccessExpression(Node):
    """Indexing into an array: ``array[index]``."""

    array: Node
    index: Node


@dataclass
class BinaryExpression(Node):
    """A binary operation between two expressions."""

    left: Node
    operator: str
    right: Node


@dataclass
class BlockExpression(Node):
    """A braced sequence of statements."""

    body: list[Node] = field(default_factory=list)


@dataclass
class BooleanLiteralExpression(Node):
    """``true`` or ``false``."""

    value: bool


@dataclass
class CatchHandleExpression(Node):
    """``catch expr handle name expr [then expr]``."""

    catch_expr: Node
    handle_expr: Node
    handler: Token
    final_expr: Optional[Node] = None


@dataclass
class FunctionCallExpression(Node):
    """A call of ``callee`` with arguments."""

    callee: Node
    arguments: list[Node] = field(default_factory=list)


@dataclass
class FunctionDeclarationExpression(Node):
    """An anonymous function: ``func(a, b) body``."""

    parameters: list[Token]
    body: Node


@dataclass
class GroupedExpression(Node):
    """A parenthesised expression."""

    expression: Node


@dataclass
class IfElseExpression(Node):
    """``if (cond) then [else other]``."""

    condition: Node
    then_expr: Node
    else_expr: Optional[Node] = None


@dataclass
class LoopExpression(Node):
    """``loop (initial; condition; post) body``."""

    initial: Node
    condition: Node
    postexpr: Node
    body: Node


@dataclass
class MaybeExpression(Node):
    """The ``maybe`` literal."""


@dataclass
class NilCoalescingExpression(Node):
    """``left ? right``."""

    left: Node
    right: Node


@dataclass
class NilLiteralExpression(Node):
    """The ``nil`` literal."""


@dataclass
class NumberLiteralExpression(Node):
    """A numeric literal."""

    value: float


@dataclass
class ParallelExpression(Node):
    """``parallel expr``."""

    expression: Node


@dataclass
class RandomExpression(Node):
    """``random then [else other]``."""

    then_expr: Node
    else_expr: Optional[Node] = None


@dataclass
class RegexExpression(Node):
    """A regular expression literal."""

    pattern: str


@dataclass
class RenderExpression(Node):
    """``render[!][%] expr``: print, optionally with a newline or to stderr."""

    new_line: bool
    error_stream: bool
    expression: Node


@dataclass
class SizeExpression(Node):
    """``size expr``."""

    expression: Node


@dataclass
class StringLiteralExpression(Node):
    """A string literal."""

    value: str


@dataclass
class TypeExpression(Node):
    """``type expr``."""

    expression: Node


@dataclass
class UnaryExpression(Node):
    """A prefix operator applied to an expression."""

    operator: str
    expression: Node


@dataclass
class UnlessExpression(Node):
    """``unless (cond) then [else other]``."""

    condition: Node
    then_expr: Node
    else_expr: Optional[Node] = None


@dataclass
class VariableAccessExpression(Node):
    """A reference to a (possibly dotted) variable name held in ``address``."""


@dataclass
class VariableDeclarationExpression(Node):
    """``val name = expr, ...`` or ``val("native") name, ...``.

    Declarations are kept ordered by token (kind, then text); a later
    declaration of a name already present is ignored.
    """

    declarations: tuple[tuple[Token, Node], ...] = ()
    native_path: str = ""

    def __post_init__(self) -> None:
        self.declarations = _ordered_unique(self.declarations)


def _ordered_unique(
    pairs: Iterable[tuple[Token, Node]],
) -> tuple[tuple[Token, Node], ...]:
    kept: dict[tuple[int, str], tuple[Token, Node]] = {}
    for token, value in pairs:
        kept.setdefault((token.type.value, token.image), (token, value))
    return tuple(kept[key] for key in sorted(kept))


@dataclass
class WhenExpression(Node):
    """``when (expr) { if (case) then, ..., else default }``."""

    expression: Node
    cases: list[tuple[Node, Node]] = field(default_factory=list)
    default_case: Optional[Node] = None


@dataclass
class WhileExpression(Node):
    """``while (cond) body``."""

    condition: Node
    body: Node


@dataclass
class BreakStatement(Node):
    """``break``."""


@dataclass
class ContinueStatement(Node):
    """``continue``."""


@dataclass
class EmptyStatement(Node):
    """A lone ``;``."""


@dataclass
class HaltStatement(Node):
    """``halt``."""


@dataclass
class ReturnStatement(Node):
    """``ret expr``."""

    expression: Node


@dataclass
class TestStatement(Node):
    """``test (name) body``."""

    name: Node
    body: Node


@dataclass
class ThrowStatement(Node):
    """``throw expr``."""

    expression: Node


@dataclass
class UseStatement(Node):
    """``use lib [@ version]``."""

    library: Node
    version: Node


@dataclass
class WaitStatement(Node):
    """``wait``."""