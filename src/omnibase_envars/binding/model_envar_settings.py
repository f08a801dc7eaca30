# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Settings for one binding pass: converter strategy and culture.

Settings are immutable. The fluent ``use_*`` methods return new instances,
so one settings object can be shared between threads and binding calls.

Example:
    >>> settings = (
    ...     ModelEnvarSettings()
    ...     .use_culture("de_DE")
    ...     .use_converter(SecondsConverter())
    ... )
    >>> config = load_envars(DatabaseConfig, settings)
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from omnibase_envars.conversion.envar_type_converter import EnvarTypeConverter
from omnibase_envars.models.model_culture import ModelCulture
from omnibase_envars.protocols import ProtocolEnvarConverter


class ModelEnvarSettings(BaseModel):
    """Conversion context for a binding pass.

    Attributes:
        converter: Strategy converting raw strings to field types
        culture: Conventions for numeric and temporal parsing

    Default configuration:
        - EnvarTypeConverter for type conversion
        - Invariant culture, so parsing does not depend on the host locale
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
    )

    converter: ProtocolEnvarConverter = Field(
        default_factory=EnvarTypeConverter,
        description="Strategy converting raw strings to field types",
    )
    culture: ModelCulture = Field(
        default_factory=ModelCulture.invariant,
        description="Conventions for numeric and temporal parsing",
    )

    def use_converter(self, converter: ProtocolEnvarConverter) -> ModelEnvarSettings:
        """Return settings that convert with ``converter``."""
        return ModelEnvarSettings(converter=converter, culture=self.culture)

    def use_culture(self, culture: ModelCulture | str) -> ModelEnvarSettings:
        """Return settings that parse with ``culture`` (a model or locale id).

        Raises:
            EnvarDeclarationError: If a locale identifier is unknown.
        """
        return ModelEnvarSettings(
            converter=self.converter,
            culture=ModelCulture.resolve(culture),
        )


__all__ = ["ModelEnvarSettings"]
