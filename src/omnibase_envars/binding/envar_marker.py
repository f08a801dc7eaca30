# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""The ``Envar`` field marker.

A field opts into binding by carrying an ``Envar`` in its ``Annotated``
metadata. The marker's only payload is the environment variable name::

    class DatabaseConfig:
        host: Annotated[str, Envar("DB_HOST")] = "localhost"
        port: Annotated[Int32, Envar("DB_PORT")] = Int32(5432)
        password: Annotated[SecretStr | None, Envar("DB_PASSWORD")] = None

The same annotations work on plain classes, dataclasses and pydantic models.
An empty name is rejected when the class body is evaluated, not when the
configuration is bound.
"""

from __future__ import annotations

from dataclasses import dataclass

from omnibase_envars.errors import EnvarDeclarationError, ModelEnvarErrorContext


@dataclass(frozen=True, slots=True)
class Envar:
    """Marks a field as populated from the environment variable ``name``.

    Raises:
        EnvarDeclarationError: If ``name`` is empty or not a string.
    """

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise EnvarDeclarationError(
                "Envar name can't be None or empty",
                context=ModelEnvarErrorContext(operation="declare"),
            )


def find_envar_markers(metadata: tuple[object, ...]) -> list[Envar]:
    """Return the Envar markers found in ``Annotated`` metadata, in order."""
    return [item for item in metadata if isinstance(item, Envar)]


__all__ = ["Envar", "find_envar_markers"]
