from __future__ import annotations

from enum import Enum

UNI = "io.smallrye.mutiny.Uni"
LIST = "java.util.List"

HIBERNATE_SESSION = "org.hibernate.Session"
HIBERNATE_STATELESS_SESSION = "org.hibernate.StatelessSession"
ENTITY_MANAGER = "jakarta.persistence.EntityManager"
MUTINY_SESSION = "org.hibernate.reactive.mutiny.Mutiny.Session"
MUTINY_STATELESS_SESSION = "org.hibernate.reactive.mutiny.Mutiny.StatelessSession"
UNI_MUTINY_SESSION = f"{UNI}<{MUTINY_SESSION}>"
UNI_MUTINY_STATELESS_SESSION = f"{UNI}<{MUTINY_STATELESS_SESSION}>"

REACTIVE_SESSION_LOCAL_NAME = "_session"

_REACTIVE_SESSION_TYPES = frozenset(
    {
        MUTINY_SESSION,
        MUTINY_STATELESS_SESSION,
        UNI_MUTINY_SESSION,
        UNI_MUTINY_STATELESS_SESSION,
    },
)
_REACTIVE_SESSION_ACCESS_TYPES = frozenset({UNI_MUTINY_SESSION, UNI_MUTINY_STATELESS_SESSION})


class ExecutionStyle(Enum):
    """Select the control flow of a generated lifecycle method.

    The style is never configured directly: it is derived from the session
    type the generated repository delegates to.
    """

    BLOCKING = "blocking"
    """Synchronous calls wrapped in ``try``/``catch``; returns a direct value."""

    REACTIVE = "reactive"
    """A single ``return`` of a Mutiny ``Uni`` pipeline."""


def execution_style_for(session_type: str) -> ExecutionStyle:
    """Return the execution style implied by a session type.

    Args:
        session_type: Fully-qualified session type, optionally wrapped in ``Uni<...>``.

    """
    if _normalize(session_type) in _REACTIVE_SESSION_TYPES:
        return ExecutionStyle.REACTIVE
    return ExecutionStyle.BLOCKING


def is_reactive_session_access(session_type: str) -> bool:
    """Return whether the session must be unwrapped with ``chain`` before use.

    Args:
        session_type: Fully-qualified session type, optionally wrapped in ``Uni<...>``.

    """
    return _normalize(session_type) in _REACTIVE_SESSION_ACCESS_TYPES


def _normalize(session_type: str) -> str:
    return "".join(session_type.split())


__all__ = [
    "ENTITY_MANAGER",
    "HIBERNATE_SESSION",
    "HIBERNATE_STATELESS_SESSION",
    "LIST",
    "MUTINY_SESSION",
    "MUTINY_STATELESS_SESSION",
    "REACTIVE_SESSION_LOCAL_NAME",
    "UNI",
    "UNI_MUTINY_SESSION",
    "UNI_MUTINY_STATELESS_SESSION",
    "ExecutionStyle",
    "execution_style_for",
    "is_reactive_session_access",
]
