from textwrap import dedent

METHOD_HEADER_FRAGMENT = dedent(
    """
    {% if emit_override %}
    @Override
    {% endif %}
    public {{ return_type }} {{ method_name }}({% if nonnull_annotation %}@{{ nonnull_annotation }} {% endif %}{{ parameter_type }} {{ parameter_name }}) {
    """,
)

NULL_GUARD_FRAGMENT = dedent(
    """\
    {{ indent }}if ({{ parameter_name }} == null) throw new IllegalArgumentException("Null {{ parameter_name }}");
    """,
)

BLOCKING_CALL_FRAGMENT = dedent(
    """\
    {% if generated_id_upsert %}
    {{ body_indent }}if ({{ session }}.getIdentifier({{ parameter_name }}) == null)
    {{ nested_indent }}{{ session }}.insert{{ call_tail }};
    {{ body_indent }}else
    {{ nested_indent }}{{ session }}.{{ operation }}{{ call_tail }};
    {% else %}
    {{ body_indent }}{{ session }}.{{ operation }}{{ call_tail }};
    {% endif %}
    """,
)

REACTIVE_RETURN_FRAGMENT = (
    "{{ indent }}return "
    "{% if reactive_session_access %}{{ session_name }}.chain({{ session }} -> {% endif %}"
    "{% if generated_id_upsert %}"
    "({{ session }}.getIdentifier({{ parameter_name }}) == null"
    " ? {{ session }}.insert({{ parameter_name }})"
    " : {{ session }}.{{ operation }}{{ call_tail }})"
    "{% else %}"
    "{{ session }}.{{ operation }}{{ call_tail }}"
    "{% endif %}"
    "{% if reactive_session_access %}){% endif %}"
)

CATCH_CLAUSE_FRAGMENT = dedent(
    """\
    {{ indent }}catch ({{ handled }} exception) {
    {{ body_indent }}throw new {{ rethrown }}(exception.getMessage(), exception);
    {{ indent }}}
    """,
)

RECOVERY_STAGE_FRAGMENT = (
    "\n{{ stage_indent }}.onFailure({{ handled }}.class)"
    "\n{{ transform_indent }}.transform(_ex -> new {{ rethrown }}(_ex.getMessage(), _ex))"
)
