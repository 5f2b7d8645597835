from __future__ import annotations

import pytest

from repogen._internal.templates.mini_template import Environment
from repogen.exceptions import RepogenTemplateError


def test_variable_interpolation_renders_context_value() -> None:
    snippet = Environment().from_string("session.{{ operation }}(book);")

    rendered = snippet.render(operation="insert")

    assert rendered == "session.insert(book);"


def test_if_condition_uses_truthy_branch() -> None:
    snippet = Environment().from_string("{% if reactive %}Uni{% endif %}")

    assert snippet.render(reactive=True) == "Uni"


def test_if_condition_uses_falsy_branch() -> None:
    snippet = Environment().from_string("{% if reactive %}Uni<Void>{% else %}void{% endif %}")

    assert snippet.render(reactive=False) == "void"


def test_negated_condition_inverts_branch() -> None:
    snippet = Environment().from_string("{% if not reactive %}try{% endif %}")

    assert snippet.render(reactive=False) == "try"
    assert snippet.render(reactive=True) == ""


def test_nested_if_blocks_render_expected_branch() -> None:
    snippet = Environment().from_string(
        "{% if outer %}A{% if inner %}B{% else %}C{% endif %}{% else %}D{% endif %}",
    )

    assert snippet.render(outer=True, inner=False) == "AC"


def test_block_tag_alone_on_line_consumes_line_break() -> None:
    snippet = Environment().from_string("first\n{% if flag %}\nsecond\n{% endif %}\nthird\n")

    assert snippet.render(flag=True) == "first\nsecond\nthird\n"
    assert snippet.render(flag=False) == "first\nthird\n"


def test_inline_block_tag_keeps_surrounding_text() -> None:
    snippet = Environment().from_string("a {% if flag %}b{% endif %}\nc")

    assert snippet.render(flag=False) == "a \nc"


def test_closing_brace_after_variable_is_plain_text() -> None:
    snippet = Environment().from_string("{{ indent }}}\n")

    assert snippet.render(indent="\t") == "\t}\n"


def test_parser_rejects_unknown_block_tag() -> None:
    with pytest.raises(RepogenTemplateError, match="Unsupported template tag"):
        Environment().from_string("{% for item in items %}{{ item }}{% endfor %}")


def test_parser_rejects_unclosed_if_block() -> None:
    with pytest.raises(RepogenTemplateError, match="missing endif"):
        Environment().from_string("{% if condition %}x")


def test_parser_rejects_unclosed_if_block_with_else_branch() -> None:
    with pytest.raises(RepogenTemplateError, match="missing endif"):
        Environment().from_string("{% if condition %}x{% else %}y")


def test_parser_rejects_unexpected_else_block() -> None:
    with pytest.raises(RepogenTemplateError, match="Unexpected block tag 'else'"):
        Environment().from_string("{% else %}")


def test_parser_rejects_unclosed_variable_tag() -> None:
    with pytest.raises(RepogenTemplateError, match="Unclosed template tag"):
        Environment().from_string("{{ value")


def test_render_raises_for_missing_variable() -> None:
    snippet = Environment().from_string("{{ value }}")

    with pytest.raises(RepogenTemplateError, match="Missing template variable 'value'"):
        snippet.render()


def test_render_raises_for_missing_if_condition_variable() -> None:
    snippet = Environment().from_string("{% if is_enabled %}yes{% endif %}")

    with pytest.raises(RepogenTemplateError, match="Missing template variable 'is_enabled'"):
        snippet.render()


def test_parser_rejects_unsupported_variable_expression() -> None:
    with pytest.raises(RepogenTemplateError, match="Unsupported variable expression"):
        Environment().from_string("{{ value.name }}")


def test_parser_rejects_unsupported_if_condition_expression() -> None:
    with pytest.raises(RepogenTemplateError, match="Unsupported if condition"):
        Environment().from_string('{% if mode == "async" %}x{% endif %}')


def test_template_error_is_value_error() -> None:
    with pytest.raises(ValueError, match="Missing template variable"):
        Environment().from_string("{{ value }}").render()
