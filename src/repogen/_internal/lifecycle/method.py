from __future__ import annotations

from repogen._internal.descriptors import LifecycleMethodDescriptor
from repogen._internal.lifecycle.renderer import LifecycleMethodRenderer
from repogen._internal.protocols import NameResolverProtocol


class LifecycleMethod:
    """Repository member that inserts, updates, deletes or upserts entities.

    Implements ``GeneratedMethodProtocol`` only. Attribute-name and meta-type
    queries do not exist on this member; hosts that need them go through
    ``require_meta_attribute``, which rejects lifecycle methods.

    Args:
        descriptor: Validated description of the method.
        names: Name resolver of the enclosing generated type.
        renderer: Renderer to use. A default ``LifecycleMethodRenderer`` is
            created when omitted.

    """

    def __init__(
        self,
        descriptor: LifecycleMethodDescriptor,
        *,
        names: NameResolverProtocol,
        renderer: LifecycleMethodRenderer | None = None,
    ) -> None:
        self._descriptor = descriptor
        self._names = names
        self._renderer = renderer if renderer is not None else LifecycleMethodRenderer()

    @property
    def descriptor(self) -> LifecycleMethodDescriptor:
        return self._descriptor

    @property
    def property_name(self) -> str:
        return self._descriptor.method_name

    @property
    def type_declaration(self) -> str:
        return self._descriptor.entity_type

    @property
    def has_typed_attribute(self) -> bool:
        return True

    @property
    def has_string_attribute(self) -> bool:
        return False

    def attribute_declaration_string(self) -> str:
        """Return the complete Java method declaration."""
        return self._renderer.render(self._descriptor, names=self._names)

    def __repr__(self) -> str:
        return (
            f"LifecycleMethod({self._descriptor.method_name!r}, "
            f"operation={self._descriptor.operation.value!r})"
        )
