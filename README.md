# n8lang

This package is the front end and some library helpers for the N8 scripting language. It has four parts:

- a tokenizer,
- a recursive-descent parser that builds a syntax tree,
- the array, hashing and environment functions that N8 programs call,
- a few small utilities.

## Installation

```
pip install .
```

## Tokenizing

```python
from n8lang.tokenizer import tokenize

for token in tokenize('val x = 0x1F, y = "hi";', "example.n8"):
    print(token.image, token.type, token.line, token.column)
```

`tokenize(source, file_name)` returns a list of `n8lang.tokens.Token` objects.

- Each token carries its `image`, `file_name`, `line`, `column` and `type`, a `TokenType`: `DIGIT`, `IDENTIFIER`, `KEYWORD`, `OPERATOR`, `REGEX` or `STRING`.
- Comments run from `#` to the end of the line.
- Strings go in double quotes and regular expressions in backticks. Escape sequences inside both are replaced.
- Numbers are decimal, with an optional fraction and an `e+`/`e-` exponent. They can also take the prefixes `0b` (binary), `0t` (base 3), `0c` (octal) or `0x` (hexadecimal).

The `Tokenizer` class does the same work in steps:

- `Tokenizer(source, file_name)` or `Tokenizer.load_file(path)` creates it.
- `.scan()` scans the source.
- `.tokens` holds the result.

`load_file` raises `FileNotFoundError` for a file it cannot open.

Helper predicates are also available:

- `n8lang.tokenizer`: `is_valid_identifier`, `is_whitespace`, `is_digit`, `is_operator` and `is_alphabet`.
- `n8lang.tokens`: `is_operator_symbol` and `is_keyword`.

Malformed input raises `n8lang.errors.LexicalAnalysisError`. Examples are a newline inside a string, or a `.` with no digits after it.

## Parsing

```python
from n8lang.parser import Parser

parser = Parser.from_source("render! 1 + 2 * 3;", "example.n8")
for node in parser.parse():
    print(node)
```

There are three ways to create a parser:

- `Parser.from_source(source, file_name)`,
- `Parser.from_file(path)`,
- `Parser(tokens)`.

`parse()` reads every statement and returns the top-level nodes. The `global_statements` property returns those nodes too. `expression()` and `statement()` parse a single construct.

The nodes are dataclasses in `n8lang.nodes`, for example `BinaryExpression`, `IfElseExpression`, `FunctionDeclarationExpression`, `VariableDeclarationExpression` and `UseStatement`. Each node keeps the token it starts at in `address`. Numeric literals are converted with `n8lang.convert.translate_digit`.

Grammar errors raise `n8lang.errors.ParserError`. Its `token` attribute holds the offending token.

## Library helpers

### `n8lang.arrays`

N8 values map to Python values like this:

| N8 value | Python value |
| --- | --- |
| array | `list` |
| number | `int` / `float` |
| nil | `None` |
| regex | `re.Pattern` |

The module has these functions:

- building and emptying: `create`, `clear`
- size and order: `length`, `reverse`
- reading items: `first`, `last`, `at`
- adding and replacing: `add`, `push_back`, `push_front`, `assign`
- ranges: `slice_range` (both ends included)
- removing: `remove`, `remove_at` (sets the item to nil), `remove_all`, `remove_slice` (end excluded)
- searching: `contains`, `find` (returns the length when the item is absent)
- text: `join`
- type checks: `are_all_string`, `are_all_number`, `are_all_function`, `are_all_bool`, `are_all_regex`, `are_all_array`, `are_all_nil`

A wrong argument type raises `n8lang.errors.ThrowSignal`. An index outside the array raises `IndexError`.

### `n8lang.hashing`

`md5`, `sha256`, `sha384` and `sha512` return lowercase hex digests of a value's text. `validate_md5`, `validate_sha256`, `validate_sha384` and `validate_sha512` check whether a text is a hex string of the right length.

### `n8lang.env`

`get(name)` returns a variable's value and raises `KeyError` if it is unset. `set_value(name, value)` sets a variable and returns `True` only if setting it failed.

### `n8lang.vectormath`

These functions work element by element on equal-length number lists:

- arithmetic: `add`, `sub`, `mul`, `div`
- integer parts: `rem`, `bitwise_and`, `bitwise_or`, `bitwise_xor`, `shift_left`, `shift_right`

Lists of different lengths raise `ValueError`. Division by zero gives infinity or NaN. The integer operations wrap to 64 bits.

### `n8lang.convert`

- `translate_digit(image)` turns a numeric literal into a float.
- `parse_binary`, `parse_base3`, `parse_octal` and `parse_hex` each read digits in one base.
- `to_bytes(number)` converts a float to eight big-endian IEEE 754 bytes, and `to_double(data)` converts them back.

### `n8lang.semver`

`SemVer.parse(text)` returns a `SemVer` with `major`, `minor`, `patch`, `pre_release` and `build_metadata`. It returns `None` for an invalid string. `str()` formats a `SemVer` back into text. `validate_semver(text)` checks a string without building a `SemVer`.

### `n8lang.arguments`

`ArgumentParser(argv)` handles flags:

- `define_parameter(short, long, description)` declares `-short`/`--long` flags.
- `has_parameter(short)` reports whether a flag was given.
- `input_files()` returns the remaining arguments.
- `program_file_name` holds the program name.
- `help_text()` returns the flag list.

## What this package does not do

This package stops at the syntax tree. It has no evaluator for that tree, so it cannot run N8 programs. It installs no command-line program. It does not look up or load installed N8 modules or shared libraries named in `use` statements.

## Running the tests

```
pip install .[test]
pytest
```