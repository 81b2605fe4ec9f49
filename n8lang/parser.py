"""Turning a token sequence into a syntax tree."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable
from typing import Optional

from n8lang import nodes
from n8lang.convert import translate_digit
from n8lang.errors import ParserError
from n8lang.tokenizer import Tokenizer, tokenize
from n8lang.tokens import Token, TokenType

_OP = TokenType.OPERATOR
_KW = TokenType.KEYWORD


class Parser:
    """Recursive-descent parser over a list of N8 tokens."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens: list[Token] = list(tokens)
        self._index = 0
        self._statements: list[nodes.Node] = []

    @classmethod
    def from_file(cls, path: str) -> "Parser":
        """Create a parser over the tokens of a source file."""
        tokenizer = Tokenizer.load_file(path)
        tokenizer.scan()
        return cls(tokenizer.tokens)

    @classmethod
    def from_source(cls, source: str, file_name: str = "") -> "Parser":
        """Create a parser over the tokens of a source string."""
        return cls(tokenize(source, file_name))

    @property
    def global_statements(self) -> list[nodes.Node]:
        """The top-level statements parsed so far."""
        return self._statements

    def parse(self) -> list[nodes.Node]:
        """Parse every remaining statement and return the top-level statements."""
        while not self._at_end():
            self._statements.append(self.statement())
        return self._statements

    # Token cursor

    def _at_end(self) -> bool:
        return self._index >= len(self._tokens)

    def _previous(self) -> Optional[Token]:
        if not self._tokens:
            return None
        if self._index > 1:
            return self._tokens[self._index - 1]
        return self._tokens[0]

    def _peek(self) -> Token:
        if self._at_end():
            raise ParserError(self._previous(), "Encountered end-of-file.")
        return self._tokens[self._index]

    def _current(self) -> Optional[Token]:
        if self._index >= len(self._tokens):
            return self._previous()
        return self._tokens[self._index]

    def _next_type(self) -> Optional[TokenType]:
        return None if self._at_end() else self._peek().type

    def _is_next(self, image: str, kind: TokenType) -> bool:
        if self._at_end():
            return False
        token = self._peek()
        return token.image == image and token.type == kind

    def _is_next_any(self, images: Iterable[str], kind: TokenType) -> bool:
        return any(self._is_next(image, kind) for image in images)

    def _consume(self, image: str) -> Token:
        if self._at_end():
            raise ParserError(
                self._previous(),
                f'Expecting "{image}", encountered end-of-code.',
            )
        token = self._peek()
        if token.image != image:
            raise ParserError(
                self._previous(),
                f'Expecting "{image}", encountered "{token.image}"',
            )
        self._index += 1
        return token

    def _consume_type(self, kind: TokenType) -> Token:
        if self._at_end():
            raise ParserError(
                self._previous(),
                "Expecting token type, encountered end-of-code.",
            )
        token = self._peek()
        if token.type != kind:
            raise ParserError(
                self._current(),
                f"Expecting {kind}, encountered {token.type}",
            )
        self._index += 1
        return token

    def _skip_semicolon(self) -> None:
        if self._is_next(";", _OP):
            self._consume(";")

    def _dotted_name(self) -> Token:
        name = dataclasses.replace(self._consume_type(TokenType.IDENTIFIER))
        while self._is_next(".", _OP):
            self._consume(".")
            name.append_to_image("." + self._consume_type(TokenType.IDENTIFIER).image)
        return name

    def _comma_list(self, closing: str, item: Callable[[], object]) -> list:
        items: list = []
        while not self._is_next(closing, _OP):
            if items:
                self._consume(",")
            items.append(item())
        self._consume(closing)
        return items

    # Expressions

    def expression(self) -> nodes.Node:
        """Parse one expression."""
        return self._logic_or()

    def _binary(
        self,
        operators: tuple[str, ...],
        operand: Callable[[], nodes.Node],
    ) -> nodes.Node:
        expr = operand()
        while self._is_next_any(operators, _OP):
            op = self._consume_type(_OP)
            expr = nodes.BinaryExpression(op, expr, op.image, operand())
        return expr

    def _logic_or(self) -> nodes.Node:
        return self._binary(("||",), self._logic_and)

    def _logic_and(self) -> nodes.Node:
        return self._binary(("&&",), self._bitwise_or)

    def _bitwise_or(self) -> nodes.Node:
        return self._binary(("|",), self._bitwise_xor)

    def _bitwise_xor(self) -> nodes.Node:
        return self._binary(("^",), self._bitwise_and)

    def _bitwise_and(self) -> nodes.Node:
        return self._binary(("&",), self._nil_coalescing)

    def _nil_coalescing(self) -> nodes.Node:
        expr = self._equality()
        while self._is_next("?", _OP):
            address = self._consume("?")
            expr = nodes.NilCoalescingExpression(address, expr, self._equality())
        return expr

    def _equality(self) -> nodes.Node:
        return self._binary(("==", "!=", "=", "::", "!:"), self._comparison)

    def _comparison(self) -> nodes.Node:
        return self._binary(("<", "<=", ">", ">="), self._shift)

    def _shift(self) -> nodes.Node:
        return self._binary(("<<", ">>"), self._term)

    def _term(self) -> nodes.Node:
        return self._binary(("+", "-"), self._factor)

    def _factor(self) -> nodes.Node:
        return self._binary(("*", "/", "\\", "%"), self._primary)

    def _keyword_rule(self) -> Optional[Callable[[], nodes.Node]]:
        if self._next_type() is not _KW:
            return None
        rules: dict[str, Callable[[], nodes.Node]] = {
            "render": self._render,
            "catch": self._catch_handle,
            "if": self._if,
            "while": self._while,
            "loop": self._loop,
            "unless": self._unless,
            "random": self._random,
            "when": self._when,
            "func": self._function_decl,
            "type": self._type,
            "size": self._size,
            "parallel": self._parallel,
            "val": self._val,
        }
        return rules.get(self._peek().image)

    def _primary(self) -> nodes.Node:
        if self._is_next_any(("+", "-", "~", "!"), _OP):
            address = self._consume_type(_OP)
            expr: nodes.Node = nodes.UnaryExpression(
                address, address.image, self.expression()
            )
        elif self._is_next("(", _OP):
            address = self._consume("(")
            expr = nodes.GroupedExpression(address, self.expression())
            self._consume(")")
        elif self._is_next("{", _OP):
            address = self._consume_type(_OP)
            body: list[nodes.Node] = []
            while not self._is_next("}", _OP):
                body.append(self.statement())
            self._consume("}")
            expr = nodes.BlockExpression(address, body)
        elif (rule := self._keyword_rule()) is not None:
            expr = rule()
        elif self._is_next("[", _OP):
            expr = self._array()
        elif self._next_type() is TokenType.IDENTIFIER:
            expr = nodes.VariableAccessExpression(self._dotted_name())
        else:
            expr = self._literal()
        return self._postfix(expr)

    def _postfix(self, expr: nodes.Node) -> nodes.Node:
        while True:
            if self._is_next("(", _OP):
                address = self._consume("(")
                arguments = self._comma_list(")", self.expression)
                expr = nodes.FunctionCallExpression(address, expr, arguments)
            elif self._is_next("[", _OP):
                address = self._consume("[")
                index = self.expression()
                self._consume("]")
                expr = nodes.ArrayAccessExpression(address, expr, index)
            else:
                return expr

    def _literal(self) -> nodes.Node:
        if self._is_next("true", _KW):
            return nodes.BooleanLiteralExpression(self._consume("true"), True)
        if self._is_next("false", _KW):
            return nodes.BooleanLiteralExpression(self._consume("false"), False)
        if self._is_next("maybe", _KW):
            return nodes.MaybeExpression(self._consume("maybe"))
        if self._is_next("nil", _KW):
            return nodes.NilLiteralExpression(self._consume("nil"))

        kind = self._next_type()
        if kind is TokenType.STRING:
            token = self._consume_type(TokenType.STRING)
            return nodes.StringLiteralExpression(token, token.image)
        if kind is TokenType.DIGIT:
            token = self._consume_type(TokenType.DIGIT)
            return nodes.NumberLiteralExpression(token, translate_digit(token.image))
        if kind is TokenType.REGEX:
            token = self._consume_type(TokenType.REGEX)
            return nodes.RegexExpression(token, token.image)

        address = self._current()
        image = address.image if address is not None else ""
        raise ParserError(address, f"Expecting expression, encountered {image}")

    def _array(self) -> nodes.Node:
        address = self._consume("[")
        return nodes.ArrayExpression(address, self._comma_list("]", self.expression))

    def _catch_handle(self) -> nodes.Node:
        address = self._consume("catch")
        catch_expr = self.expression()
        self._consume("handle")
        handler = self._consume_type(TokenType.IDENTIFIER)
        handle_expr = self.expression()

        final_expr = None
        if self._is_next("then", _KW):
            self._consume("then")
            final_expr = self.expression()

        return nodes.CatchHandleExpression(
            address, catch_expr, handle_expr, handler, final_expr
        )

    def _function_decl(self) -> nodes.Node:
        address = self._consume("func")
        self._consume("(")
        parameters = self._comma_list(
            ")", lambda: self._consume_type(TokenType.IDENTIFIER)
        )
        return nodes.FunctionDeclarationExpression(
            address, parameters, self.expression()
        )

    def _loop(self) -> nodes.Node:
        address = self._consume("loop")
        self._consume("(")
        initial = self.expression()
        self._consume(";")
        condition = self.expression()
        self._consume(";")
        postexpr = self.expression()
        self._consume(")")
        return nodes.LoopExpression(
            address, initial, condition, postexpr, self.expression()
        )

    def _conditional(self, keyword: str) -> tuple[Token, nodes.Node, nodes.Node, Optional[nodes.Node]]:
        address = self._consume(keyword)
        self._consume("(")
        condition = self.expression()
        self._consume(")")
        then_expr = self.expression()
        return address, condition, then_expr, self._optional_else()

    def _optional_else(self) -> Optional[nodes.Node]:
        if self._is_next("else", _KW):
            self._consume("else")
            return self.expression()
        return None

    def _if(self) -> nodes.Node:
        return nodes.IfElseExpression(*self._conditional("if"))

    def _unless(self) -> nodes.Node:
        return nodes.UnlessExpression(*self._conditional("unless"))

    def _random(self) -> nodes.Node:
        address = self._consume("random")
        then_expr = self.expression()
        return nodes.RandomExpression(address, then_expr, self._optional_else())

    def _parallel(self) -> nodes.Node:
        address = self._consume("parallel")
        return nodes.ParallelExpression(address, self.expression())

    def _render(self) -> nodes.Node:
        address = self._consume("render")
        new_line = error_stream = False

        if self._is_next("!", _OP):
            self._consume("!")
            new_line = True
        if self._is_next("%", _OP):
            self._consume("%")
            error_stream = True

        return nodes.RenderExpression(
            address, new_line, error_stream, self.expression()
        )

    def _size(self) -> nodes.Node:
        address = self._consume("size")
        return nodes.SizeExpression(address, self.expression())

    def _type(self) -> nodes.Node:
        address = self._consume("type")
        return nodes.TypeExpression(address, self.expression())

    def _when(self) -> nodes.Node:
        address = self._consume("when")
        self._consume("(")
        subject = self.expression()
        self._consume(")")
        self._consume("{")

        cases: list[tuple[nodes.Node, nodes.Node]] = []
        default_case: Optional[nodes.Node] = None

        while not self._is_next("}", _OP):
            if cases:
                self._consume(",")

            if self._is_next("if", _KW):
                self._consume("if")
                self._consume("(")
                case_expr = self.expression()
                self._consume(")")
                cases.append((case_expr, self.expression()))
            elif self._is_next("else", _KW):
                if default_case is not None:
                    raise ParserError(
                        address,
                        "Cannot have more than one (1) else for when expression.",
                    )
                self._consume("else")
                default_case = self.expression()
            else:
                # Neither a case nor the default: report what was found.
                self._consume("}")

        self._consume("}")
        return nodes.WhenExpression(address, subject, cases, default_case)

    def _while(self) -> nodes.Node:
        address = self._consume("while")
        self._consume("(")
        condition = self.expression()
        self._consume(")")
        return nodes.WhileExpression(address, condition, self.expression())

    def _val(self) -> nodes.Node:
        native_path = ""
        address = self._consume("val")

        if self._is_next("(", _OP):
            self._consume("(")
            native_path = self._consume_type(TokenType.STRING).image
            self._consume(")")

        declarations: list[tuple[Token, nodes.Node]] = []
        while True:
            if declarations:
                self._consume(",")

            variable = self._dotted_name()
            if native_path == "":
                self._consume("=")
                value: nodes.Node = self.expression()
            else:
                value = nodes.NilLiteralExpression(variable)
            declarations.append((variable, value))

            if not self._is_next(",", _OP):
                break

        return nodes.VariableDeclarationExpression(
            address, tuple(declarations), native_path
        )

    # Statements

    def statement(self) -> nodes.Node:
        """Parse one statement, swallowing a trailing semicolon."""
        if self._next_type() is _KW:
            rules: dict[str, Callable[[], nodes.Node]] = {
                "break": lambda: self._simple("break", nodes.BreakStatement),
                "continue": lambda: self._simple("continue", nodes.ContinueStatement),
                "halt": lambda: self._simple("halt", nodes.HaltStatement),
                "wait": lambda: self._simple("wait", nodes.WaitStatement),
                "ret": self._ret,
                "throw": self._throw,
                "test": self._test,
                "use": self._use,
            }
            rule = rules.get(self._peek().image)
            if rule is not None:
                return rule()

        if self._is_next(";", _OP):
            return nodes.EmptyStatement(self._consume(";"))

        expr = self.expression()
        self._skip_semicolon()
        return expr

    def _simple(self, keyword: str, node_type: type) -> nodes.Node:
        address = self._consume(keyword)
        self._skip_semicolon()
        return node_type(address)

    def _ret(self) -> nodes.Node:
        address = self._consume("ret")
        expr = self.expression()
        self._skip_semicolon()
        return nodes.ReturnStatement(address, expr)

    def _throw(self) -> nodes.Node:
        address = self._consume("throw")
        expr = self.expression()
        self._skip_semicolon()
        return nodes.ThrowStatement(address, expr)

    def _test(self) -> nodes.Node:
        address = self._consume("test")
        self._consume("(")
        name = self.expression()
        self._consume(")")
        body = self.expression()
        self._skip_semicolon()
        return nodes.TestStatement(address, name, body)

    def _use(self) -> nodes.Node:
        address = self._consume("use")
        library = self.expression()

        if not self._at_end() and self._peek().image == "@":
            self._consume("@")
            version = self.expression()
        else:
            version = nodes.StringLiteralExpression(address, "1.0.0")

        self._skip_semicolon()
        return nodes.UseStatement(address, library, version)