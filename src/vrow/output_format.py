"""Output format abstraction and format-specific renderers."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, fields
from enum import StrEnum
from typing import Protocol

from rich.console import Console
from rich.syntax import Syntax
from rich.text import Text
from rich.tree import Tree

from vrow.virtual_row import Expr, Marker, WindowSpec, to_payload


DEFAULT_OUTPUT_THEME = "github-dark"

_NODE_STYLE = "bold cyan"
_FIELD_STYLE = "magenta"


class OutputFormat(StrEnum):
    """Supported output formats."""

    TREE = "tree"
    JSON = "json"
    REPR = "repr"


class OutputFormatError(RuntimeError):
    """Raised when output formatting fails."""


class ResolveOutputFormatter(Protocol):
    """Formatter interface for the resolve command."""

    def prepare(self, value: object, color_enabled: bool, out_theme: str) -> PreparedOutput:
        """Prepare a resolved value for rendering."""
        ...


@dataclass(frozen=True)
class OutputOperation:
    """One prepared output operation."""

    kind: str
    text: str | None = None
    renderable: object | None = None
    markup: bool = False


@dataclass(frozen=True)
class PreparedOutput:
    """Prepared output operations ready for console rendering."""

    operations: tuple[OutputOperation, ...]


def _write_plain_output(console: Console, text: str) -> None:
    """Write plain output directly to console stream."""
    console.file.write(f"{text}\n")
    console.file.flush()


def print_prepared_output(console: Console, prepared_output: PreparedOutput) -> None:
    """Print already prepared output operations."""
    for operation in prepared_output.operations:
        if operation.kind == "plain_write":
            if operation.text is not None:
                _write_plain_output(console, operation.text)
            continue
        if operation.renderable is not None:
            console.print(operation.renderable)
            continue
        console.print(operation.text if operation.text is not None else "", markup=operation.markup)


def _normalize_syntax_theme(out_theme: str) -> str:
    """Return a valid theme name for syntax rendering."""
    normalized_theme = out_theme.strip()
    if normalized_theme:
        return normalized_theme
    return DEFAULT_OUTPUT_THEME


def _prepare_output(
    text: str,
    color_enabled: bool,
    language: str,
    out_theme: str,
) -> PreparedOutput:
    """Prepare output with syntax highlighting when color is enabled."""
    if color_enabled:
        return PreparedOutput(
            operations=(
                OutputOperation(
                    kind="console_print",
                    renderable=Syntax(
                        text,
                        language,
                        theme=_normalize_syntax_theme(out_theme),
                        line_numbers=False,
                        word_wrap=True,
                    ),
                ),
            )
        )
    return PreparedOutput(operations=(OutputOperation(kind="plain_write", text=text),))


def _node_label(prefix: str, name: str) -> Text:
    label = Text(prefix, style=_FIELD_STYLE)
    label.append(name, style=_NODE_STYLE)
    return label


def _add_tree_value(tree: Tree, prefix: str, value: object) -> None:
    """Attach one value, and its children, below a tree node."""
    if isinstance(value, Expr | WindowSpec):
        branch = tree.add(_node_label(prefix, type(value).__name__))
        for field in fields(value):
            _add_tree_value(branch, f"{field.name}: ", getattr(value, field.name))
        return
    if isinstance(value, Mapping):
        branch = tree.add(Text(f"{prefix}{{{len(value)}}}", style=_FIELD_STYLE))
        for key, item in value.items():
            _add_tree_value(branch, f"{key!r}: ", item)
        return
    if isinstance(value, list | tuple):
        if not value:
            tree.add(Text(f"{prefix}[]", style=_FIELD_STYLE))
            return
        branch = tree.add(Text(f"{prefix}[{len(value)}]", style=_FIELD_STYLE))
        for index, item in enumerate(value):
            _add_tree_value(branch, f"{index}: ", item)
        return
    if isinstance(value, Marker):
        tree.add(_node_label(prefix, repr(value)))
        return
    label = Text(prefix, style=_FIELD_STYLE)
    label.append(repr(value))
    tree.add(label)


def build_tree(value: object) -> Tree:
    """Build a Rich tree showing the structure of a resolved value."""
    if not isinstance(value, Expr | WindowSpec):
        return Tree(Text(repr(value)))

    root = Tree(_node_label("", type(value).__name__))
    for field in fields(value):
        _add_tree_value(root, f"{field.name}: ", getattr(value, field.name))
    return root


class TreeOutputFormatter:
    """Rich tree formatter for resolved nodes."""

    def prepare(self, value: object, color_enabled: bool, out_theme: str) -> PreparedOutput:
        del color_enabled
        del out_theme
        return PreparedOutput(
            operations=(OutputOperation(kind="console_print", renderable=build_tree(value)),)
        )


class JsonOutputFormatter:
    """JSON formatter for resolved nodes."""

    def prepare(self, value: object, color_enabled: bool, out_theme: str) -> PreparedOutput:
        try:
            text = json.dumps(to_payload(value), ensure_ascii=True)
        except (TypeError, ValueError) as exc:
            raise OutputFormatError(f"Value can not be written as JSON: {exc}") from exc
        return _prepare_output(text, color_enabled, "json", out_theme)


class ReprOutputFormatter:
    """Python repr formatter for resolved nodes."""

    def prepare(self, value: object, color_enabled: bool, out_theme: str) -> PreparedOutput:
        return _prepare_output(repr(value), color_enabled, "python", out_theme)


_FORMATTERS: dict[str, ResolveOutputFormatter] = {
    OutputFormat.TREE: TreeOutputFormatter(),
    OutputFormat.JSON: JsonOutputFormatter(),
    OutputFormat.REPR: ReprOutputFormatter(),
}


def get_resolve_formatter(output_format: str) -> ResolveOutputFormatter:
    """Return formatter for selected output format."""
    normalized_output = output_format.strip().lower()
    formatter = _FORMATTERS.get(normalized_output)
    if formatter is None:
        available = ", ".join(sorted(_FORMATTERS))
        raise OutputFormatError(
            f"Unknown output format: {output_format}. Available formats: {available}"
        )
    return formatter
