from __future__ import annotations

import re
from dataclasses import dataclass

from repogen.exceptions import RepogenTemplateError

_TAG_PATTERN = re.compile(r"(\{\{.*?\}\}|\{%.*?%\})", re.DOTALL)
_STANDALONE_BLOCK_LINE = re.compile(r"^[ \t]*(\{%[^%]*%\})[ \t]*\n", re.MULTILINE)
_IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


@dataclass(frozen=True, slots=True)
class _Text:
    value: str


@dataclass(frozen=True, slots=True)
class _Variable:
    identifier: str


@dataclass(frozen=True, slots=True)
class _Conditional:
    identifier: str
    negated: bool
    truthy_nodes: tuple[_Node, ...]
    falsy_nodes: tuple[_Node, ...]


_Node = _Text | _Variable | _Conditional


class Environment:
    """Compile the small template dialect used for Java fragments.

    Supported syntax is ``{{ name }}`` interpolation and
    ``{% if name %}``/``{% if not name %}`` blocks with an optional
    ``{% else %}``. A block tag alone on its line is removed together with the
    line break, so fragments can be laid out one statement per line.
    """

    def from_string(self, text: str) -> Snippet:
        """Compile fragment text into a reusable snippet.

        Args:
            text: Fragment source text.

        """
        return Snippet(nodes=_Parser(_tokenize(text)).parse())


class Snippet:
    """Compiled fragment."""

    def __init__(self, *, nodes: tuple[_Node, ...]) -> None:
        self._nodes = nodes

    def render(self, **context: object) -> str:
        """Render the fragment with keyword-only context variables.

        Args:
            context: Values referenced by the fragment.

        """
        parts: list[str] = []
        _render_into(parts, nodes=self._nodes, context=context)
        return "".join(parts)


def _tokenize(text: str) -> list[str]:
    chunks = _TAG_PATTERN.split(_STANDALONE_BLOCK_LINE.sub(r"\1", text))
    for chunk in chunks[::2]:
        if "{{" in chunk or "{%" in chunk:
            msg = f"Unclosed template tag near {chunk.strip()[:40]!r}."
            raise RepogenTemplateError(msg)
    return [chunk for chunk in chunks if chunk]


class _Parser:
    def __init__(self, chunks: list[str]) -> None:
        self._chunks = chunks
        self._index = 0

    def parse(self) -> tuple[_Node, ...]:
        nodes, terminator = self._parse_until(frozenset())
        if terminator is not None:
            msg = f"Unexpected block tag '{terminator}'."
            raise RepogenTemplateError(msg)
        return nodes

    def _parse_until(self, terminators: frozenset[str]) -> tuple[tuple[_Node, ...], str | None]:
        nodes: list[_Node] = []
        while self._index < len(self._chunks):
            chunk = self._chunks[self._index]
            self._index += 1

            if chunk.startswith("{{"):
                nodes.append(_Variable(identifier=_identifier(chunk[2:-2].strip(), "variable")))
                continue
            if not chunk.startswith("{%"):
                nodes.append(_Text(value=chunk))
                continue

            tag = chunk[2:-2].strip()
            if tag in terminators:
                return tuple(nodes), tag
            if tag.startswith("if "):
                nodes.append(self._parse_conditional(tag[3:].strip()))
                continue
            if tag in {"else", "endif"}:
                msg = f"Unexpected block tag '{tag}'."
                raise RepogenTemplateError(msg)
            msg = f"Unsupported template tag '{tag}'."
            raise RepogenTemplateError(msg)

        return tuple(nodes), None

    def _parse_conditional(self, condition: str) -> _Conditional:
        negated = condition.startswith("not ")
        identifier = _identifier(condition[4:].strip() if negated else condition, "if condition")

        truthy_nodes, terminator = self._parse_until(frozenset({"else", "endif"}))
        falsy_nodes: tuple[_Node, ...] = ()
        if terminator == "else":
            falsy_nodes, terminator = self._parse_until(frozenset({"endif"}))
        if terminator != "endif":
            msg = f"Unclosed if block for '{condition}': missing endif."
            raise RepogenTemplateError(msg)

        return _Conditional(
            identifier=identifier,
            negated=negated,
            truthy_nodes=truthy_nodes,
            falsy_nodes=falsy_nodes,
        )


def _identifier(expression: str, expression_kind: str) -> str:
    if _IDENTIFIER_PATTERN.fullmatch(expression):
        return expression
    msg = f"Unsupported {expression_kind} expression '{expression}'."
    raise RepogenTemplateError(msg)


def _lookup(context: dict[str, object], identifier: str) -> object:
    try:
        return context[identifier]
    except KeyError:
        msg = f"Missing template variable '{identifier}'."
        raise RepogenTemplateError(msg) from None


def _render_into(parts: list[str], *, nodes: tuple[_Node, ...], context: dict[str, object]) -> None:
    for node in nodes:
        if isinstance(node, _Text):
            parts.append(node.value)
        elif isinstance(node, _Variable):
            parts.append(str(_lookup(context, node.identifier)))
        else:
            matched = bool(_lookup(context, node.identifier)) != node.negated
            branch = node.truthy_nodes if matched else node.falsy_nodes
            _render_into(parts, nodes=branch, context=context)
