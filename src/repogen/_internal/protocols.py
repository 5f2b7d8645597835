from __future__ import annotations

from typing import Literal, Protocol, runtime_checkable

from repogen.exceptions import RepogenUnsupportedOperationError

MetaAttributeQuery = Literal["attribute_name_declaration_string", "meta_type"]


@runtime_checkable
class NameResolverProtocol(Protocol):
    """Protocol for the service that prints Java type names."""

    def import_type(self, name: str) -> str:
        """Return the text to print for ``name`` and record any import it needs.

        Implementations must be idempotent: the same input always yields the
        same output.

        Args:
            name: Simple or fully-qualified Java type name.

        """


@runtime_checkable
class GeneratedMethodProtocol(Protocol):
    """Capabilities every generated repository member exposes to its host."""

    @property
    def property_name(self) -> str: ...

    @property
    def type_declaration(self) -> str: ...

    @property
    def has_typed_attribute(self) -> bool: ...

    @property
    def has_string_attribute(self) -> bool: ...

    def attribute_declaration_string(self) -> str:
        """Return the complete member declaration text."""


@runtime_checkable
class MetaAttributeProtocol(GeneratedMethodProtocol, Protocol):
    """Capabilities of field-backed metamodel attributes."""

    def attribute_name_declaration_string(self) -> str:
        """Return the declaration of the attribute-name constant."""

    def meta_type(self) -> str:
        """Return the metamodel type of the attribute."""


@runtime_checkable
class DeclarationHostProtocol(NameResolverProtocol, Protocol):
    """Protocol for the generated type that receives rendered members."""

    def add_member(self, member: GeneratedMethodProtocol) -> None:
        """Insert a finished member into the generated type body.

        Args:
            member: Member whose ``attribute_declaration_string()`` is emitted verbatim.

        """


def require_meta_attribute(
    member: GeneratedMethodProtocol,
    *,
    query: MetaAttributeQuery,
) -> MetaAttributeProtocol:
    """Return ``member`` as a field-backed attribute or fail for ``query``.

    Hosts call this before asking for attribute-name or meta-type text, which
    lifecycle methods and other non-attribute members cannot provide.

    Args:
        member: Member the host is rendering.
        query: Metamodel query the host is about to perform.

    """
    if isinstance(member, MetaAttributeProtocol):
        return member
    msg = (
        f"operation not supported: '{query}' is not available for "
        f"{type(member).__name__} '{member.property_name}'."
    )
    raise RepogenUnsupportedOperationError(msg)
