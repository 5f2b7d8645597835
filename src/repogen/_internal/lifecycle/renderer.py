from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from repogen._internal.descriptors import (
    LifecycleMethodDescriptor,
    LifecycleOperation,
    ParameterKind,
)
from repogen._internal.lifecycle.call_shapes import resolve_call_shape
from repogen._internal.lifecycle.exception_translation import (
    ExceptionTranslator,
    exception_mappings,
)
from repogen._internal.lifecycle.fragments import (
    BLOCKING_CALL_FRAGMENT,
    METHOD_HEADER_FRAGMENT,
    NULL_GUARD_FRAGMENT,
    REACTIVE_RETURN_FRAGMENT,
)
from repogen._internal.naming import ImportContext
from repogen._internal.protocols import NameResolverProtocol
from repogen._internal.templates.mini_template import Environment, Snippet
from repogen.sessions import UNI, UNI_MUTINY_STATELESS_SESSION, ExecutionStyle
from repogen.settings import RepogenSettings, get_settings

logger = logging.getLogger(__name__)


class Section(Enum):
    """Sections of a lifecycle method, in emission order."""

    HEADER = "header"
    NULL_GUARD = "null_guard"
    TRY_OPEN = "try_open"
    DELEGATE = "delegate"
    RETURN = "return"
    TRY_CLOSE = "try_close"
    TRANSLATE = "translate"
    CLOSE = "close"


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Inputs shared by every section of one render call."""

    descriptor: LifecycleMethodDescriptor
    style: ExecutionStyle
    names: NameResolverProtocol
    call_tail: str

    @property
    def is_reactive(self) -> bool:
        return self.style is ExecutionStyle.REACTIVE


class LifecycleMethodRenderer:
    """Render lifecycle method declarations as Java source text.

    A method is assembled from a fixed sequence of sections. Every section is
    a pure function of the ``RenderContext`` and returns a fragment, possibly
    empty; the fragments are concatenated in ``Section`` order. Rendering the
    same descriptor twice yields identical text.

    Args:
        settings: Rendering options. Defaults to the environment-derived
            ``get_settings()`` instance.

    """

    def __init__(self, *, settings: RepogenSettings | None = None) -> None:
        self._settings = settings if settings is not None else get_settings()
        self._env = Environment()
        self._header_template = self._template(METHOD_HEADER_FRAGMENT)
        self._null_guard_template = self._template(NULL_GUARD_FRAGMENT)
        self._blocking_call_template = self._template(BLOCKING_CALL_FRAGMENT)
        self._reactive_return_template = self._template(REACTIVE_RETURN_FRAGMENT)
        self._translator = ExceptionTranslator(indent=self._settings.indent)
        self._sections: tuple[tuple[Section, Callable[[RenderContext], str]], ...] = (
            (Section.HEADER, self._render_header),
            (Section.NULL_GUARD, self._render_null_guard),
            (Section.TRY_OPEN, self._render_try_open),
            (Section.DELEGATE, self._render_delegate),
            (Section.RETURN, self._render_return),
            (Section.TRY_CLOSE, self._render_try_close),
            (Section.TRANSLATE, self._render_translate),
            (Section.CLOSE, self._render_close),
        )

    @property
    def settings(self) -> RepogenSettings:
        return self._settings

    def render(
        self,
        descriptor: LifecycleMethodDescriptor,
        *,
        names: NameResolverProtocol,
    ) -> str:
        """Render the complete method declaration for ``descriptor``.

        Args:
            descriptor: Lifecycle method to render.
            names: Name resolver that prints types and records imports.

        """
        return "".join(fragment for _, fragment in self.render_sections(descriptor, names=names))

    def render_sections(
        self,
        descriptor: LifecycleMethodDescriptor,
        *,
        names: NameResolverProtocol,
    ) -> tuple[tuple[Section, str], ...]:
        """Render every section of ``descriptor`` and return them in emission order.

        Args:
            descriptor: Lifecycle method to render.
            names: Name resolver that prints types and records imports.

        """
        context = self._build_context(descriptor=descriptor, names=names)
        self._log_strategy(context=context)
        return tuple(
            (section, render_section(context)) for section, render_section in self._sections
        )

    def _build_context(
        self,
        *,
        descriptor: LifecycleMethodDescriptor,
        names: NameResolverProtocol,
    ) -> RenderContext:
        style = descriptor.execution_style
        call_shape = resolve_call_shape(
            parameter_kind=descriptor.parameter_kind,
            execution_style=style,
            operation=descriptor.operation,
        )
        return RenderContext(
            descriptor=descriptor,
            style=style,
            names=names,
            call_tail=call_shape.render(parameter_name=descriptor.parameter_name, names=names),
        )

    def _log_strategy(self, *, context: RenderContext) -> None:
        descriptor = context.descriptor
        logger.debug(
            (
                "Lifecycle method strategy: method=%s operation=%s parameter_kind=%s style=%s "
                "returns_argument=%s generated_id_upsert=%s reactive_session_access=%s"
            ),
            descriptor.method_name,
            descriptor.operation.value,
            descriptor.parameter_kind.value,
            context.style.value,
            descriptor.returns_argument,
            descriptor.is_generated_id_upsert,
            descriptor.reactive_session_access,
        )

    def _render_header(self, context: RenderContext) -> str:
        descriptor = context.descriptor
        names = context.names
        parameter_type = names.import_type(descriptor.entity_type)
        return self._header_template.render(
            emit_override=self._settings.emit_override and descriptor.overrides,
            return_type=self._return_type(context=context, parameter_type=parameter_type),
            method_name=descriptor.method_name,
            nonnull_annotation=(
                names.import_type(self._settings.nonnull_annotation)
                if descriptor.requires_nonnull_annotation
                else ""
            ),
            parameter_type=parameter_type,
            parameter_name=descriptor.parameter_name,
        )

    def _return_type(self, *, context: RenderContext, parameter_type: str) -> str:
        returns_argument = context.descriptor.returns_argument
        if context.is_reactive:
            value_type = parameter_type if returns_argument else "Void"
            return f"{context.names.import_type(UNI)}<{value_type}>"
        return parameter_type if returns_argument else "void"

    def _render_null_guard(self, context: RenderContext) -> str:
        return self._null_guard_template.render(
            indent=self._indent(1),
            parameter_name=context.descriptor.parameter_name,
        )

    def _render_try_open(self, context: RenderContext) -> str:
        if context.is_reactive:
            return ""
        return f"{self._indent(1)}try {{\n"

    def _render_delegate(self, context: RenderContext) -> str:
        descriptor = context.descriptor
        if descriptor.is_generated_id_upsert:
            logger.debug(
                "Emitting identifier-presence branch for generated-id upsert '%s'",
                descriptor.method_name,
            )
        if context.is_reactive:
            return self._reactive_return_template.render(
                indent=self._indent(1),
                reactive_session_access=descriptor.reactive_session_access,
                session_name=descriptor.session_name,
                session=descriptor.local_session_name,
                generated_id_upsert=descriptor.is_generated_id_upsert,
                parameter_name=descriptor.parameter_name,
                operation=descriptor.operation.value,
                call_tail=context.call_tail,
            )
        return self._blocking_call_template.render(
            body_indent=self._indent(2),
            nested_indent=self._indent(3),
            session=descriptor.session_name,
            generated_id_upsert=descriptor.is_generated_id_upsert,
            parameter_name=descriptor.parameter_name,
            operation=descriptor.operation.value,
            call_tail=context.call_tail,
        )

    def _render_return(self, context: RenderContext) -> str:
        descriptor = context.descriptor
        if not descriptor.returns_argument:
            return ""
        if context.is_reactive:
            return f"\n{self._indent(3)}.replaceWith({descriptor.parameter_name})"
        return f"{self._indent(2)}return {descriptor.parameter_name};\n"

    def _render_try_close(self, context: RenderContext) -> str:
        if context.is_reactive:
            return ""
        return f"{self._indent(1)}}}\n"

    def _render_translate(self, context: RenderContext) -> str:
        mappings = exception_mappings(context.descriptor.operation)
        if not context.is_reactive:
            return self._translator.catch_clauses(mappings, names=context.names)
        if self._settings.reactive_exception_translation == "recover":
            return self._translator.recovery_stages(mappings, names=context.names)
        return ""

    def _render_close(self, context: RenderContext) -> str:
        if context.is_reactive:
            return ";\n}"
        return "}"

    def _indent(self, depth: int) -> str:
        return self._settings.indent * depth

    def _template(self, text: str) -> Snippet:
        return self._env.from_string(text)


def main() -> None:
    """Render and print sample lifecycle methods for development inspection.

    This entrypoint renders a blocking insert and a reactive generated-id
    upsert for a sample entity and prints them together with the collected
    imports. It is intended for local tooling and fragment iteration.
    """
    renderer = LifecycleMethodRenderer()
    names = ImportContext(package="org.example")
    samples = (
        LifecycleMethodDescriptor(
            entity_type="org.example.Book",
            method_name="insert",
            parameter_name="book",
            session_name="session",
            session_type="org.hibernate.StatelessSession",
            operation=LifecycleOperation.INSERT,
            requires_nonnull_annotation=True,
        ),
        LifecycleMethodDescriptor(
            entity_type="org.example.Book[]",
            method_name="save",
            parameter_name="books",
            session_name="session",
            session_type=UNI_MUTINY_STATELESS_SESSION,
            operation=LifecycleOperation.UPSERT,
            parameter_kind=ParameterKind.ARRAY,
            returns_argument=True,
            has_generated_identifier=True,
        ),
    )
    methods = [renderer.render(descriptor, names=names) for descriptor in samples]
    print(names.render_imports())  # noqa: T201
    for method in methods:
        print(method)  # noqa: T201


if __name__ == "__main__":
    main()
