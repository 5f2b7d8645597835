from __future__ import annotations

import logging
import threading

from repogen.exceptions import RepogenInvalidTypeNameError

logger = logging.getLogger(__name__)

_JAVA_LANG_PACKAGE = "java.lang"
_ARRAY_SUFFIX = "[]"
_VARARGS_SUFFIX = "..."
_WILDCARD_PREFIXES = ("? extends ", "? super ")


class ImportContext:
    """Resolve Java type names to printable text while collecting imports.

    The context mirrors what a generated compilation unit needs: every type
    passed to ``import_type`` is printed by its simple name when that is
    unambiguous, and the matching ``import`` is recorded. Resolution is
    idempotent, so rendering the same method twice yields identical text and
    an unchanged import table.

    Args:
        package: Package of the generated compilation unit. Types from this
            package are never imported.

    Examples:
        .. code-block:: python

            context = ImportContext(package="org.example")
            context.import_type("java.util.List<org.example.Book>")  # 'List<Book>'
            context.render_imports()  # 'import java.util.List;'

    """

    def __init__(self, *, package: str = "") -> None:
        self._package = package
        self._claimed_by_simple_name: dict[str, str] = {}
        self._imports: set[str] = set()
        self._lock = threading.Lock()

    @property
    def package(self) -> str:
        return self._package

    def import_type(self, name: str) -> str:
        """Return the text to print for a type, recording an import when needed.

        Args:
            name: Simple or fully-qualified type name. Generic arguments,
                array brackets, varargs and wildcards are resolved
                component-wise.

        """
        with self._lock:
            return self._resolve(name.strip())

    def imports(self) -> tuple[str, ...]:
        """Return recorded imports in sorted order."""
        with self._lock:
            return tuple(sorted(self._imports))

    def render_imports(self) -> str:
        """Render recorded imports as Java ``import`` statements."""
        return "\n".join(f"import {qualified_name};" for qualified_name in self.imports())

    def _resolve(self, name: str) -> str:
        for prefix in _WILDCARD_PREFIXES:
            if name.startswith(prefix):
                return prefix + self._resolve(name[len(prefix) :].strip())
        if name == "?":
            return name

        for suffix in (_ARRAY_SUFFIX, _VARARGS_SUFFIX):
            if name.endswith(suffix):
                return self._resolve(name[: -len(suffix)].rstrip()) + suffix

        generic_start = name.find("<")
        if generic_start != -1:
            if not name.endswith(">"):
                msg = f"Malformed generic type name '{name}'."
                raise RepogenInvalidTypeNameError(msg)
            raw_type = self._resolve(name[:generic_start].strip())
            arguments = _split_type_arguments(name[generic_start + 1 : -1])
            resolved_arguments = ", ".join(self._resolve(argument) for argument in arguments)
            return f"{raw_type}<{resolved_arguments}>"

        return self._resolve_raw(name)

    def _resolve_raw(self, name: str) -> str:
        if "." not in name:
            return name

        package, outer, nested = _split_qualified_name(name)
        if not outer:
            return name
        printed = ".".join((outer, *nested))
        qualified_outer = f"{package}.{outer}" if package else outer
        claimed = self._claimed_by_simple_name.setdefault(outer, qualified_outer)
        if claimed != qualified_outer:
            # Simple name already taken by another type.
            return name
        if package in {_JAVA_LANG_PACKAGE, self._package} or qualified_outer in self._imports:
            return printed

        self._imports.add(qualified_outer)
        logger.debug("Recorded import %s", qualified_outer)
        return printed


def _split_qualified_name(name: str) -> tuple[str, str, tuple[str, ...]]:
    segments = name.split(".")
    for index, segment in enumerate(segments):
        if segment[:1].isupper():
            return ".".join(segments[:index]), segment, tuple(segments[index + 1 :])
    return ".".join(segments[:-1]), segments[-1], ()


def _split_type_arguments(text: str) -> list[str]:
    arguments: list[str] = []
    depth = 0
    start = 0
    for index, character in enumerate(text):
        if character == "<":
            depth += 1
        elif character == ">":
            depth -= 1
        elif character == "," and depth == 0:
            arguments.append(text[start:index].strip())
            start = index + 1
    arguments.append(text[start:].strip())
    if depth != 0 or any(not argument for argument in arguments):
        msg = f"Malformed generic type arguments '{text}'."
        raise RepogenInvalidTypeNameError(msg)
    return arguments


__all__ = ["ImportContext"]
