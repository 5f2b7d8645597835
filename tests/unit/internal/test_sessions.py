from __future__ import annotations

import pytest

from repogen.sessions import (
    ENTITY_MANAGER,
    HIBERNATE_SESSION,
    HIBERNATE_STATELESS_SESSION,
    MUTINY_SESSION,
    MUTINY_STATELESS_SESSION,
    UNI_MUTINY_SESSION,
    UNI_MUTINY_STATELESS_SESSION,
    ExecutionStyle,
    execution_style_for,
    is_reactive_session_access,
)


@pytest.mark.parametrize(
    ("session_type", "expected_style", "expected_access"),
    [
        (HIBERNATE_SESSION, ExecutionStyle.BLOCKING, False),
        (HIBERNATE_STATELESS_SESSION, ExecutionStyle.BLOCKING, False),
        (ENTITY_MANAGER, ExecutionStyle.BLOCKING, False),
        (MUTINY_SESSION, ExecutionStyle.REACTIVE, False),
        (MUTINY_STATELESS_SESSION, ExecutionStyle.REACTIVE, False),
        (UNI_MUTINY_SESSION, ExecutionStyle.REACTIVE, True),
        (UNI_MUTINY_STATELESS_SESSION, ExecutionStyle.REACTIVE, True),
    ],
)
def test_session_type_selects_style_and_access(
    session_type: str,
    expected_style: ExecutionStyle,
    expected_access: bool,
) -> None:
    assert execution_style_for(session_type) is expected_style
    assert is_reactive_session_access(session_type) is expected_access


def test_whitespace_inside_wrapped_session_type_is_ignored() -> None:
    spaced = "io.smallrye.mutiny.Uni< org.hibernate.reactive.mutiny.Mutiny.StatelessSession >"

    assert execution_style_for(spaced) is ExecutionStyle.REACTIVE
    assert is_reactive_session_access(spaced)


def test_unknown_session_type_is_blocking() -> None:
    assert execution_style_for("org.acme.CustomSession") is ExecutionStyle.BLOCKING
    assert not is_reactive_session_access("org.acme.CustomSession")
