from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from repogen.exceptions import RepogenInvalidDescriptorError
from repogen.sessions import (
    REACTIVE_SESSION_LOCAL_NAME,
    ExecutionStyle,
    execution_style_for,
    is_reactive_session_access,
)

JAVA_RESERVED_WORDS = frozenset(
    {
        "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
        "class", "const", "continue", "default", "do", "double", "else", "enum",
        "extends", "false", "final", "finally", "float", "for", "goto", "if",
        "implements", "import", "instanceof", "int", "interface", "long", "native",
        "new", "null", "package", "private", "protected", "public", "return", "short",
        "static", "strictfp", "super", "switch", "synchronized", "this", "throw",
        "throws", "transient", "true", "try", "void", "volatile", "while", "_",
    },
)  # fmt: skip


class LifecycleOperation(str, Enum):
    """Session capability invoked by a generated lifecycle method."""

    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"
    UPSERT = "upsert"

    def __str__(self) -> str:
        return self.value


class ParameterKind(Enum):
    """Shape of the single argument of a lifecycle method."""

    SINGLE = "single"
    """One entity instance."""

    ARRAY = "array"
    """A Java array of entities, ``Book[]``."""

    LIST = "list"
    """An ordered ``java.util.List`` of entities."""


@dataclass(frozen=True, slots=True, kw_only=True)
class LifecycleMethodDescriptor:
    """Describe one lifecycle method of a generated repository.

    The descriptor is validated on construction so that rendering can never
    produce text for a combination the session API cannot serve.

    Args:
        entity_type: Declared parameter type, e.g. ``org.example.Book``,
            ``org.example.Book[]`` or ``java.util.List<org.example.Book>``.
        method_name: Name of the generated method.
        parameter_name: Name of the generated method parameter.
        session_name: Field holding the session in the generated class.
        session_type: Fully-qualified session type, possibly ``Uni``-wrapped.
        operation: Session operation to delegate to.
        requires_nonnull_annotation: Whether the parameter carries ``@Nonnull``.
        parameter_kind: Whether the argument is a single entity, an array or a list.
        returns_argument: Whether the generated method returns its argument.
        has_generated_identifier: Whether the entity id is assigned by the
            persistence layer.
        overrides: Whether the method is annotated with ``@Override``.

    """

    entity_type: str
    method_name: str
    parameter_name: str
    session_name: str
    session_type: str
    operation: LifecycleOperation
    requires_nonnull_annotation: bool = False
    parameter_kind: ParameterKind = ParameterKind.SINGLE
    returns_argument: bool = False
    has_generated_identifier: bool = False
    overrides: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "operation", _coerce_operation(self.operation))
        if not isinstance(self.parameter_kind, ParameterKind):
            msg = (
                "Invalid lifecycle method descriptor: parameter_kind must be ParameterKind, "
                f"got {type(self.parameter_kind).__name__}."
            )
            raise RepogenInvalidDescriptorError(msg)

        for field_name in ("method_name", "parameter_name", "session_name"):
            _validate_java_identifier(field_name=field_name, value=getattr(self, field_name))
        for field_name in ("entity_type", "session_type"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value.strip():
                msg = (
                    f"Invalid lifecycle method descriptor: '{field_name}' must be a "
                    "non-empty str."
                )
                raise RepogenInvalidDescriptorError(msg)

        if (
            self.parameter_kind is ParameterKind.LIST
            and self.operation is LifecycleOperation.UPSERT
        ):
            msg = (
                f"Invalid lifecycle method descriptor for '{self.method_name}': "
                "upsert does not accept a java.util.List parameter because the session has "
                "no bulk upsert operation for lists."
            )
            raise RepogenInvalidDescriptorError(msg)

    @property
    def execution_style(self) -> ExecutionStyle:
        return execution_style_for(self.session_type)

    @property
    def is_reactive(self) -> bool:
        return self.execution_style is ExecutionStyle.REACTIVE

    @property
    def reactive_session_access(self) -> bool:
        return is_reactive_session_access(self.session_type)

    @property
    def local_session_name(self) -> str:
        """Return the name the delegate call uses for the session."""
        if self.reactive_session_access:
            return REACTIVE_SESSION_LOCAL_NAME
        return self.session_name

    @property
    def is_generated_id_upsert(self) -> bool:
        """Return whether an identifier-presence check selects between insert and upsert."""
        return self.operation is LifecycleOperation.UPSERT and self.has_generated_identifier


def _coerce_operation(value: object) -> LifecycleOperation:
    if isinstance(value, LifecycleOperation):
        return value
    try:
        return LifecycleOperation(value)
    except ValueError:
        supported = ", ".join(operation.value for operation in LifecycleOperation)
        msg = (
            f"Invalid lifecycle method descriptor: unknown operation {value!r}, "
            f"expected one of: {supported}."
        )
        raise RepogenInvalidDescriptorError(msg) from None


def _validate_java_identifier(*, field_name: str, value: object) -> None:
    if not isinstance(value, str):
        msg = (
            f"Invalid lifecycle method descriptor: '{field_name}' must be str, "
            f"got {type(value).__name__}."
        )
        raise RepogenInvalidDescriptorError(msg)
    # Java allows '$' where Python identifiers do not.
    if not value.replace("$", "_").isidentifier():
        msg = (
            f"Invalid lifecycle method descriptor: {field_name} '{value}' is not a valid "
            "Java identifier."
        )
        raise RepogenInvalidDescriptorError(msg)
    if value in JAVA_RESERVED_WORDS:
        msg = (
            f"Invalid lifecycle method descriptor: {field_name} '{value}' is a Java "
            "reserved word."
        )
        raise RepogenInvalidDescriptorError(msg)
