from __future__ import annotations

from collections.abc import Callable
from dataclasses import FrozenInstanceError

import pytest

from repogen import (
    ExecutionStyle,
    LifecycleMethodDescriptor,
    LifecycleOperation,
    ParameterKind,
    RepogenInvalidDescriptorError,
)
from repogen.sessions import (
    ENTITY_MANAGER,
    MUTINY_SESSION,
    UNI_MUTINY_SESSION,
)

DescriptorFactory = Callable[..., LifecycleMethodDescriptor]


def test_operation_string_is_coerced_to_enum(make_descriptor: DescriptorFactory) -> None:
    descriptor = make_descriptor(operation="upsert")

    assert descriptor.operation is LifecycleOperation.UPSERT


def test_unknown_operation_is_rejected(make_descriptor: DescriptorFactory) -> None:
    with pytest.raises(RepogenInvalidDescriptorError, match="unknown operation 'merge'"):
        make_descriptor(operation="merge")


def test_list_parameter_with_upsert_is_rejected(make_descriptor: DescriptorFactory) -> None:
    with pytest.raises(RepogenInvalidDescriptorError, match="no bulk upsert"):
        make_descriptor(
            entity_type="java.util.List<org.example.Book>",
            operation=LifecycleOperation.UPSERT,
            parameter_kind=ParameterKind.LIST,
        )


@pytest.mark.parametrize("operation", list(LifecycleOperation))
def test_array_parameter_is_accepted_for_every_operation(
    make_descriptor: DescriptorFactory,
    operation: LifecycleOperation,
) -> None:
    descriptor = make_descriptor(
        entity_type="org.example.Book[]",
        operation=operation,
        parameter_kind=ParameterKind.ARRAY,
    )

    assert descriptor.parameter_kind is ParameterKind.ARRAY


@pytest.mark.parametrize(
    ("field_name", "value", "message"),
    [
        ("method_name", "1insert", "not a valid Java identifier"),
        ("method_name", "new", "reserved word"),
        ("parameter_name", "my book", "not a valid Java identifier"),
        ("parameter_name", "class", "reserved word"),
        ("session_name", "", "not a valid Java identifier"),
        ("session_name", 42, "must be str, got int"),
    ],
)
def test_invalid_identifiers_are_rejected(
    make_descriptor: DescriptorFactory,
    field_name: str,
    value: object,
    message: str,
) -> None:
    with pytest.raises(RepogenInvalidDescriptorError, match=message):
        make_descriptor(**{field_name: value})


def test_dollar_sign_is_a_valid_java_identifier(make_descriptor: DescriptorFactory) -> None:
    descriptor = make_descriptor(session_name="$session")

    assert descriptor.session_name == "$session"


@pytest.mark.parametrize("field_name", ["entity_type", "session_type"])
def test_empty_type_names_are_rejected(
    make_descriptor: DescriptorFactory,
    field_name: str,
) -> None:
    with pytest.raises(RepogenInvalidDescriptorError, match=f"'{field_name}' must be a non-empty"):
        make_descriptor(**{field_name: "  "})


def test_parameter_kind_must_be_enum_member(make_descriptor: DescriptorFactory) -> None:
    with pytest.raises(RepogenInvalidDescriptorError, match="parameter_kind must be ParameterKind"):
        make_descriptor(parameter_kind="array")


def test_descriptor_is_immutable(make_descriptor: DescriptorFactory) -> None:
    descriptor = make_descriptor()

    with pytest.raises(FrozenInstanceError):
        descriptor.method_name = "persist"  # type: ignore[misc]


def test_blocking_session_keeps_declared_session_name(make_descriptor: DescriptorFactory) -> None:
    descriptor = make_descriptor(session_type=ENTITY_MANAGER, session_name="entityManager")

    assert descriptor.execution_style is ExecutionStyle.BLOCKING
    assert not descriptor.is_reactive
    assert not descriptor.reactive_session_access
    assert descriptor.local_session_name == "entityManager"


def test_reactive_session_is_used_directly(make_descriptor: DescriptorFactory) -> None:
    descriptor = make_descriptor(session_type=MUTINY_SESSION)

    assert descriptor.execution_style is ExecutionStyle.REACTIVE
    assert not descriptor.reactive_session_access
    assert descriptor.local_session_name == "session"


def test_uni_wrapped_session_is_unwrapped_into_local_name(
    make_descriptor: DescriptorFactory,
) -> None:
    descriptor = make_descriptor(session_type=UNI_MUTINY_SESSION)

    assert descriptor.is_reactive
    assert descriptor.reactive_session_access
    assert descriptor.local_session_name == "_session"


@pytest.mark.parametrize(
    ("operation", "has_generated_identifier", "expected"),
    [
        (LifecycleOperation.UPSERT, True, True),
        (LifecycleOperation.UPSERT, False, False),
        (LifecycleOperation.INSERT, True, False),
        (LifecycleOperation.UPDATE, True, False),
        (LifecycleOperation.DELETE, True, False),
    ],
)
def test_generated_id_upsert_requires_both_conditions(
    make_descriptor: DescriptorFactory,
    operation: LifecycleOperation,
    has_generated_identifier: bool,
    expected: bool,
) -> None:
    descriptor = make_descriptor(
        operation=operation,
        has_generated_identifier=has_generated_identifier,
    )

    assert descriptor.is_generated_id_upsert is expected


def test_operation_renders_as_session_method_name() -> None:
    assert str(LifecycleOperation.DELETE) == "delete"


def test_invalid_descriptor_error_is_a_value_error(make_descriptor: DescriptorFactory) -> None:
    with pytest.raises(ValueError, match="reserved word"):
        make_descriptor(parameter_name="class")
