from __future__ import annotations

from dataclasses import dataclass

from repogen._internal.descriptors import LifecycleOperation
from repogen._internal.lifecycle.fragments import CATCH_CLAUSE_FRAGMENT, RECOVERY_STAGE_FRAGMENT
from repogen._internal.protocols import NameResolverProtocol
from repogen._internal.templates.mini_template import Environment

CONSTRAINT_VIOLATION_EXCEPTION = "org.hibernate.exception.ConstraintViolationException"
STALE_STATE_EXCEPTION = "org.hibernate.StaleStateException"
PERSISTENCE_EXCEPTION = "jakarta.persistence.PersistenceException"
ENTITY_EXISTS_EXCEPTION = "jakarta.data.exceptions.EntityExistsException"
OPTIMISTIC_LOCKING_FAILURE_EXCEPTION = "jakarta.data.exceptions.OptimisticLockingFailureException"
DATA_EXCEPTION = "jakarta.data.exceptions.DataException"


@dataclass(frozen=True, slots=True)
class ExceptionMapping:
    """Translation of one persistence-layer exception into the public vocabulary."""

    handled: str
    rethrown: str


_INSERT_MAPPING = ExceptionMapping(
    handled=CONSTRAINT_VIOLATION_EXCEPTION,
    rethrown=ENTITY_EXISTS_EXCEPTION,
)
_STALE_STATE_MAPPING = ExceptionMapping(
    handled=STALE_STATE_EXCEPTION,
    rethrown=OPTIMISTIC_LOCKING_FAILURE_EXCEPTION,
)
_GENERIC_MAPPING = ExceptionMapping(handled=PERSISTENCE_EXCEPTION, rethrown=DATA_EXCEPTION)


def exception_mappings(operation: LifecycleOperation) -> tuple[ExceptionMapping, ...]:
    """Return mappings for ``operation``, most specific first.

    The generic ``PersistenceException`` mapping is always last so it never
    shadows the specific one in a ``catch`` chain.

    Args:
        operation: Session operation the generated method delegates to.

    """
    if operation is LifecycleOperation.INSERT:
        return (_INSERT_MAPPING, _GENERIC_MAPPING)
    return (_STALE_STATE_MAPPING, _GENERIC_MAPPING)


class ExceptionTranslator:
    """Render exception mappings as catch clauses or Mutiny recovery stages."""

    def __init__(self, *, indent: str) -> None:
        environment = Environment()
        self._indent = indent
        self._catch_clause = environment.from_string(CATCH_CLAUSE_FRAGMENT)
        self._recovery_stage = environment.from_string(RECOVERY_STAGE_FRAGMENT)

    def catch_clauses(
        self,
        mappings: tuple[ExceptionMapping, ...],
        *,
        names: NameResolverProtocol,
    ) -> str:
        return "".join(
            self._catch_clause.render(
                indent=self._indent,
                body_indent=self._indent * 2,
                handled=names.import_type(mapping.handled),
                rethrown=names.import_type(mapping.rethrown),
            )
            for mapping in mappings
        )

    def recovery_stages(
        self,
        mappings: tuple[ExceptionMapping, ...],
        *,
        names: NameResolverProtocol,
    ) -> str:
        return "".join(
            self._recovery_stage.render(
                stage_indent=self._indent * 3,
                transform_indent=self._indent * 5,
                handled=names.import_type(mapping.handled),
                rethrown=names.import_type(mapping.rethrown),
            )
            for mapping in mappings
        )
