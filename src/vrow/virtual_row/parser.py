"""Parser for virtual row call text such as ``count(DISTINCT, col1){}``."""

from __future__ import annotations

import ast
from collections.abc import Generator
from typing import cast

from parsy import ParseError, Parser, eof, forward_declaration, generate, regex, string

from vrow.virtual_row.dispatch import Invocation
from vrow.virtual_row.errors import CallSyntaxError
from vrow.virtual_row.markers import Marker


type CallTree = (
    Invocation | Marker | dict[str, object] | list[object] | str | int | float | bool | None
)


def _parse_line_and_column(line_info: str) -> tuple[int, int]:
    """Parse line and column from parsy line info string."""
    line_text, sep, column_text = line_info.partition(":")
    if sep == "":
        return (0, 0)
    if not line_text.isdigit() or not column_text.isdigit():
        return (0, 0)
    return (int(line_text), int(column_text))


def _format_parse_error(text: str, exc: ParseError) -> str:
    """Build parse error message with a pointer under the failing column."""
    line_number, column_number = _parse_line_and_column(exc.line_info())
    text_lines = text.splitlines()
    if not text_lines:
        text_lines = [text]

    error_line = text_lines[line_number] if 0 <= line_number < len(text_lines) else text
    pointer = " " * max(column_number, 0) + "^"
    return f"Invalid call syntax: {exc}\n\n{error_line}\n{pointer}"


def _decode_string(token_value: str) -> str:
    """Decode a double-quoted string literal token."""
    try:
        decoded = ast.literal_eval(token_value)
    except (SyntaxError, ValueError) as exc:
        raise CallSyntaxError(f"Invalid string literal: {token_value}") from exc
    if isinstance(decoded, str):
        return decoded
    raise CallSyntaxError("Invalid string literal")


def _keyword(name: str) -> Parser:
    """Build a keyword parser with identifier boundary."""
    return regex(rf"{name}(?![A-Za-z0-9_])").desc(name)


def _lexeme(parser: Parser) -> Parser:
    """Consume optional whitespace after parser."""
    ws = regex(r"\s*")
    return parser << ws


def _symbol(value: str) -> Parser:
    """Build a symbol token parser."""
    return _lexeme(string(value))


def _comma_separated(item: Parser) -> Parser:
    """Parse zero or more comma-separated items."""
    return item.sep_by(_symbol(","))


def _build_literal_parsers() -> tuple[Parser, Parser]:
    """Build parsers for keyword literals and token literals."""
    number_token = _lexeme(regex(r"-?\d+(?:\.\d+)?"))
    string_token = _lexeme(regex(r'"(?:[^"\\]|\\.)*"'))

    true_literal = _lexeme(_keyword("true")).result(True)
    false_literal = _lexeme(_keyword("false")).result(False)
    none_literal = _lexeme(_keyword("none")).result(None)
    number_literal = number_token.map(lambda v: float(v) if "." in v else int(v))
    string_literal = string_token.map(_decode_string)
    return (true_literal | false_literal | none_literal, number_literal | string_literal)


def _build_marker_parsers() -> tuple[Parser, Parser]:
    """Build parsers for the DISTINCT/OVER keywords and the ``*`` wildcard."""
    distinct = _lexeme(_keyword("DISTINCT")).result(Marker.DISTINCT)
    over = _lexeme(_keyword("OVER")).result(Marker.OVER)
    wildcard = _symbol("*").result(Marker.WILDCARD)
    return (distinct | over, wildcard)


def _build_call_parser(identifier: Parser, value: Parser) -> Parser:
    """Build parser for ``name``, ``name(args)`` and ``name(args){}`` calls."""
    arguments = _symbol("(") >> _comma_separated(value) << _symbol(")")
    block = (_symbol("{") >> _symbol("}")).result(True)
    operator_name = _lexeme(string(">=") | string("<=") | regex(r"[+\-*/&|~><]"))

    @generate
    def named_call() -> Generator[Parser, object, Invocation]:
        name = cast(str, (yield identifier))
        args_result = yield arguments.optional()
        block_result = yield block.optional()
        args = tuple(cast(list[object], args_result)) if args_result is not None else ()
        return Invocation(name, args, block_result is True)

    @generate
    def operator_call() -> Generator[Parser, object, Invocation]:
        name = cast(str, (yield operator_name))
        args_result = yield arguments
        block_result = yield block.optional()
        return Invocation(name, tuple(cast(list[object], args_result)), block_result is True)

    return named_call | operator_call


def _build_mapping_parser(identifier: Parser, string_key: Parser, value: Parser) -> Parser:
    """Build parser for ``{key: value, ...}`` mappings."""

    @generate
    def entry() -> Generator[Parser, object, tuple[str, object]]:
        key = yield identifier | string_key
        yield _symbol(":")
        item = yield value
        return (cast(str, key), item)

    @generate
    def mapping() -> Generator[Parser, object, dict[str, object]]:
        yield _symbol("{")
        entries = cast(list[tuple[str, object]], (yield _comma_separated(entry)))
        yield _symbol("}")
        result: dict[str, object] = {}
        for key, item in entries:
            if key in result:
                raise CallSyntaxError(f"Duplicate mapping key: {key}")
            result[key] = item
        return result

    return mapping


def _make_parser() -> Parser:
    """Create the full call text parser."""
    ws = regex(r"\s*")
    identifier = _lexeme(regex(r"[A-Za-z_][A-Za-z0-9_]*"))
    string_key = _lexeme(regex(r'"(?:[^"\\]|\\.)*"')).map(_decode_string)

    value = forward_declaration()

    keyword_literal, token_literal = _build_literal_parsers()
    keyword_marker, wildcard = _build_marker_parsers()
    call = _build_call_parser(identifier, value)
    mapping = _build_mapping_parser(identifier, string_key, value)
    sequence = _symbol("[") >> _comma_separated(value) << _symbol("]")

    # Keywords must win over identifiers, operator calls over the bare wildcard.
    value.become(
        keyword_marker | keyword_literal | call | wildcard | token_literal | mapping | sequence
    )

    program = value.sep_by(_symbol(","), min=1)
    return ws >> program << ws << eof


CALL_PARSER = _make_parser()


def parse_call_text(text: str) -> list[CallTree]:
    """Parse call text into top-level call trees.

    Calls become ``Invocation`` objects whose args hold nested trees; the
    trees are resolved by ``vrow.virtual_row.evaluator``.
    """
    try:
        result = CALL_PARSER.parse(text)
    except ParseError as exc:
        raise CallSyntaxError(_format_parse_error(text, exc)) from exc
    if isinstance(result, list):
        return cast(list[CallTree], result)
    raise CallSyntaxError("Parser did not produce a value list")
