import pytest

from n8lang import nodes
from n8lang.convert import translate_digit
from n8lang.errors import ParserError
from n8lang.parser import Parser
from n8lang.tokenizer import tokenize


def parse(source):
    return Parser.from_source(source, "test.n8").parse()


def parse_one(source):
    statements = parse(source)
    assert len(statements) == 1
    return statements[0]


def test_term_and_factor_precedence():
    expr = parse_one("1 + 2 * 3")
    assert isinstance(expr, nodes.BinaryExpression)
    assert expr.operator == "+"
    assert expr.left.value == 1.0
    assert expr.right.operator == "*"
    assert (expr.right.left.value, expr.right.right.value) == (2.0, 3.0)


def test_grouping_overrides_precedence():
    expr = parse_one("(1 + 2) * 3")
    assert expr.operator == "*"
    assert isinstance(expr.left, nodes.GroupedExpression)
    assert expr.left.expression.operator == "+"


def test_logic_or_binds_looser_than_and():
    expr = parse_one("a || b && c")
    assert expr.operator == "||"
    assert expr.left.address.image == "a"
    assert expr.right.operator == "&&"


def test_nil_coalescing_wraps_equality():
    expr = parse_one("a ? b == c")
    assert isinstance(expr, nodes.NilCoalescingExpression)
    assert expr.left.address.image == "a"
    assert expr.right.operator == "=="


def test_type_check_operator():
    expr = parse_one("a :: b")
    assert expr.operator == "::"
    assert expr.right.address.image == "b"


def test_unary_takes_whole_expression():
    expr = parse_one("-5 + 3")
    assert isinstance(expr, nodes.UnaryExpression)
    assert expr.operator == "-"
    assert expr.expression.operator == "+"
    assert expr.expression.left.value == 5.0


def test_dotted_name_does_not_change_tokens():
    tokens = tokenize("a.b.c", "test.n8")
    statements = Parser(tokens).parse()
    assert statements[0].address.image == "a.b.c"
    assert tokens[0].image == "a"


def test_postfix_calls_and_indexes():
    expr = parse_one("f(1, 2)[0](3)")
    assert isinstance(expr, nodes.FunctionCallExpression)
    assert [arg.value for arg in expr.arguments] == [3.0]
    access = expr.callee
    assert isinstance(access, nodes.ArrayAccessExpression)
    assert access.index.value == 0.0
    inner = access.array
    assert [arg.value for arg in inner.arguments] == [1.0, 2.0]
    assert inner.callee.address.image == "f"


def test_array_literal():
    expr = parse_one("[1, 2, 3]")
    assert [element.value for element in expr.elements] == [1.0, 2.0, 3.0]


def test_number_literal_uses_translation():
    expr = parse_one("0x1F")
    assert expr.value == translate_digit("0x1F")


def test_string_regex_and_keyword_literals():
    statements = parse('"hi"; `a+`; true; false; nil; maybe')
    assert statements[0].value == "hi"
    assert statements[1].pattern == "a+"
    assert statements[2].value is True
    assert statements[3].value is False
    assert isinstance(statements[4], nodes.NilLiteralExpression)
    assert isinstance(statements[5], nodes.MaybeExpression)


def test_val_declarations_are_sorted():
    expr = parse_one("val y = 2, x = 1")
    assert [token.image for token, _ in expr.declarations] == ["x", "y"]
    assert expr.declarations[0][1].value == 1.0
    assert expr.native_path == ""


def test_val_duplicate_keeps_first():
    expr = parse_one("val x = 1, x = 2")
    assert len(expr.declarations) == 1
    assert expr.declarations[0][1].value == 1.0


def test_native_val():
    expr = parse_one('val("lib") a, b')
    assert expr.native_path == "lib"
    assert [token.image for token, _ in expr.declarations] == ["a", "b"]
    assert all(
        isinstance(value, nodes.NilLiteralExpression) for _, value in expr.declarations
    )


def test_if_else():
    expr = parse_one("if (x) 1 else 2")
    assert isinstance(expr, nodes.IfElseExpression)
    assert expr.condition.address.image == "x"
    assert (expr.then_expr.value, expr.else_expr.value) == (1.0, 2.0)


def test_unless_without_else():
    expr = parse_one("unless (x) 1")
    assert isinstance(expr, nodes.UnlessExpression)
    assert expr.else_expr is None


def test_when_cases_and_default():
    expr = parse_one("when (x) { if (1) a, if (2) b, else c }")
    assert [case.value for case, _ in expr.cases] == [1.0, 2.0]
    assert [then.address.image for _, then in expr.cases] == ["a", "b"]
    assert expr.default_case.address.image == "c"


def test_when_double_else_raises():
    with pytest.raises(ParserError) as info:
        parse("when (x) { if (1) a, else b, else c }")
    assert info.value.message == "Cannot have more than one (1) else for when expression."


def test_when_unexpected_entry_raises():
    with pytest.raises(ParserError):
        parse("when (x) { else a, if (1) b }")


def test_render_flags():
    expr = parse_one("render!% x")
    assert (expr.new_line, expr.error_stream) == (True, True)
    plain = parse_one("render x")
    assert (plain.new_line, plain.error_stream) == (False, False)


def test_catch_handle_then():
    expr = parse_one("catch a handle e b then c")
    assert expr.catch_expr.address.image == "a"
    assert expr.handler.image == "e"
    assert expr.handle_expr.address.image == "b"
    assert expr.final_expr.address.image == "c"


def test_loop_and_block():
    expr = parse_one("loop (i = 0; i < 10; i = i + 1) { render i; 2 }")
    assert expr.initial.operator == "="
    assert expr.condition.operator == "<"
    assert expr.postexpr.right.operator == "+"
    assert isinstance(expr.body, nodes.BlockExpression)
    assert len(expr.body.body) == 2


def test_function_declaration():
    expr = parse_one("func(a, b) a + b")
    assert [param.image for param in expr.parameters] == ["a", "b"]
    assert expr.body.operator == "+"


def test_simple_statements():
    statements = parse("break; continue; halt; wait; ;")
    assert [type(s) for s in statements] == [
        nodes.BreakStatement,
        nodes.ContinueStatement,
        nodes.HaltStatement,
        nodes.WaitStatement,
        nodes.EmptyStatement,
    ]


def test_ret_throw_and_test_statements():
    statements = parse('ret 1; throw "bad"; test ("t") { 1 }')
    assert statements[0].expression.value == 1.0
    assert statements[1].expression.value == "bad"
    assert statements[2].name.value == "t"


def test_use_default_version():
    stmt = parse_one('use "math"')
    assert stmt.library.value == "math"
    assert stmt.version.value == "1.0.0"


def test_parse_returns_global_statements():
    parser = Parser.from_source("a; b", "test.n8")
    result = parser.parse()
    assert result == parser.global_statements
    assert [s.address.image for s in result] == ["a", "b"]


def test_consume_mismatch_message():
    with pytest.raises(ParserError) as info:
        parse("if x")
    assert info.value.message == 'Expecting "(", encountered "x"'
    assert info.value.token.image == "if"


def test_consume_type_mismatch_message():
    with pytest.raises(ParserError) as info:
        parse("func(1) x")
    assert info.value.message == "Expecting identifier, encountered digit"
    assert info.value.token.image == "1"


def test_missing_expression_at_end():
    with pytest.raises(ParserError) as info:
        parse("x =")
    assert info.value.message == "Expecting expression, encountered ="


def test_unexpected_closing_paren():
    with pytest.raises(ParserError) as info:
        parse(")")
    assert info.value.message == "Expecting expression, encountered )"


def test_unclosed_block_raises():
    with pytest.raises(ParserError):
        parse("{ 1")


def test_from_file(tmp_path):
    path = tmp_path / "main.n8"
    path.write_text('render! "hi";', encoding="utf-8")
    statements = Parser.from_file(str(path)).parse()
    assert statements[0].new_line is True
    assert statements[0].expression.value == "hi"
    assert statements[0].address.file_name == str(path)


def test_from_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Parser.from_file(str(tmp_path / "absent.n8"))