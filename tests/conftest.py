"""Shared pytest fixtures for repogen tests."""

from collections.abc import Callable
from typing import Any

import pytest

from repogen import (
    ImportContext,
    LifecycleMethodDescriptor,
    LifecycleMethodRenderer,
    LifecycleOperation,
    RepogenSettings,
)
from repogen.sessions import HIBERNATE_STATELESS_SESSION

DescriptorFactory = Callable[..., LifecycleMethodDescriptor]


@pytest.fixture()
def settings() -> RepogenSettings:
    """Default settings, independent of REPOGEN_* environment variables."""
    return RepogenSettings(
        nonnull_annotation="jakarta.annotation.Nonnull",
        indent="\t",
        reactive_exception_translation="none",
        emit_override=True,
    )


@pytest.fixture()
def renderer(settings: RepogenSettings) -> LifecycleMethodRenderer:
    """Renderer bound to the default settings."""
    return LifecycleMethodRenderer(settings=settings)


@pytest.fixture()
def import_context() -> ImportContext:
    """Import context of a generated type in package ``org.example``."""
    return ImportContext(package="org.example")


@pytest.fixture()
def make_descriptor() -> DescriptorFactory:
    """Factory for descriptors of a blocking ``insert(Book book)`` with overrides."""

    def factory(**overrides: Any) -> LifecycleMethodDescriptor:
        values: dict[str, Any] = {
            "entity_type": "org.example.Book",
            "method_name": "insert",
            "parameter_name": "book",
            "session_name": "session",
            "session_type": HIBERNATE_STATELESS_SESSION,
            "operation": LifecycleOperation.INSERT,
        }
        values.update(overrides)
        return LifecycleMethodDescriptor(**values)

    return factory
