from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ReactiveExceptionTranslation = Literal["none", "recover"]


class RepogenSettings(BaseSettings):
    """Configure how lifecycle methods are rendered.

    Values are read from ``REPOGEN_``-prefixed environment variables, for
    example ``REPOGEN_REACTIVE_EXCEPTION_TRANSLATION=recover``. Renderers use
    the process-wide instance from ``get_settings()`` unless an explicit
    ``settings=`` object is passed.

    Examples:
        .. code-block:: python

            settings = RepogenSettings(indent="    ")
            renderer = LifecycleMethodRenderer(settings=settings)

    """

    model_config = SettingsConfigDict(env_prefix="REPOGEN_", frozen=True)

    nonnull_annotation: str = Field(default="jakarta.annotation.Nonnull", min_length=1)
    """Fully-qualified annotation type placed on non-null parameters."""

    indent: str = "\t"
    """Indentation unit used for generated method bodies."""

    reactive_exception_translation: ReactiveExceptionTranslation = "none"
    """Whether reactive methods get ``onFailure().transform()`` recovery stages.

    ``"none"`` leaves failures of the ``Uni`` untranslated. ``"recover"``
    appends one stage per exception mapping, mirroring the blocking catch
    clauses.
    """

    emit_override: bool = True
    """Global switch for ``@Override``; combined with the descriptor flag."""


@lru_cache(maxsize=1)
def get_settings() -> RepogenSettings:
    """Return the process-wide settings loaded from the environment."""
    return RepogenSettings()


__all__ = [
    "ReactiveExceptionTranslation",
    "RepogenSettings",
    "get_settings",
]
