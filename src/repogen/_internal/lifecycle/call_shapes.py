from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from repogen._internal.descriptors import LifecycleOperation, ParameterKind
from repogen._internal.protocols import NameResolverProtocol
from repogen.exceptions import RepogenInvalidDescriptorError
from repogen.sessions import LIST, ExecutionStyle


@dataclass(frozen=True, slots=True)
class CallShape:
    """Textual tail appended to a session operation name.

    ``argument`` may reference ``{parameter}`` and ``{list_type}``; the latter
    is printed through the name resolver so ``java.util.List`` gets imported.
    """

    suffix: str
    argument: str

    @property
    def uses_list_type(self) -> bool:
        return "{list_type}" in self.argument

    def render(self, *, parameter_name: str, names: NameResolverProtocol) -> str:
        """Return the call tail, e.g. ``Multiple(List.of(books))``.

        Args:
            parameter_name: Name of the generated method parameter.
            names: Name resolver used for helper container types.

        """
        list_type = names.import_type(LIST) if self.uses_list_type else ""
        argument = self.argument.format(parameter=parameter_name, list_type=list_type)
        return f"{self.suffix}({argument})"


_SINGLE = CallShape(suffix="", argument="{parameter}")

CALL_SHAPES: Mapping[tuple[ParameterKind, ExecutionStyle], CallShape] = MappingProxyType(
    {
        (ParameterKind.SINGLE, ExecutionStyle.BLOCKING): _SINGLE,
        (ParameterKind.SINGLE, ExecutionStyle.REACTIVE): _SINGLE,
        (ParameterKind.ARRAY, ExecutionStyle.BLOCKING): CallShape(
            suffix="Multiple",
            argument="{list_type}.of({parameter})",
        ),
        (ParameterKind.ARRAY, ExecutionStyle.REACTIVE): CallShape(
            suffix="All",
            argument="{parameter}",
        ),
        (ParameterKind.LIST, ExecutionStyle.BLOCKING): CallShape(
            suffix="Multiple",
            argument="{parameter}",
        ),
        (ParameterKind.LIST, ExecutionStyle.REACTIVE): CallShape(
            suffix="All",
            argument="{parameter}.toArray()",
        ),
    },
)
"""Call shape for every parameter kind and execution style."""


def resolve_call_shape(
    *,
    parameter_kind: ParameterKind,
    execution_style: ExecutionStyle,
    operation: LifecycleOperation,
) -> CallShape:
    """Select the call shape for a delegate invocation.

    Args:
        parameter_kind: Shape of the generated method argument.
        execution_style: Execution style derived from the session type.
        operation: Session operation being invoked.

    """
    if parameter_kind is ParameterKind.LIST and operation is LifecycleOperation.UPSERT:
        msg = "No bulk upsert exists for java.util.List arguments."
        raise RepogenInvalidDescriptorError(msg)
    return CALL_SHAPES[parameter_kind, execution_style]
