# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for the converter strategy used by the binder.

The binder never parses values itself. It hands each raw string, the field's
declared type and the pass's culture to a converter strategy. The default is
EnvarTypeConverter; callers swap in their own to special-case types.

Example:
    >>> from datetime import timedelta
    >>> class SecondsConverter(EnvarTypeConverter):
    ...     def convert(self, value, target_type, culture):
    ...         if target_type is timedelta:
    ...             return timedelta(seconds=int(value))
    ...         return super().convert(value, target_type, culture)
    >>>
    >>> bind(config, converter=SecondsConverter())
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from omnibase_envars.models.model_culture import ModelCulture


@runtime_checkable
class ProtocolEnvarConverter(Protocol):
    """Converts one environment variable string into a target type.

    Implementations must be side-effect free and safe to share across
    threads. Failures are raised; the binder wraps any exception into
    EnvarConversionError.
    """

    def convert(
        self,
        value: str,
        target_type: object,
        culture: ModelCulture,
    ) -> object:
        """Convert ``value`` to an instance of ``target_type``.

        Args:
            value: Raw environment variable value (may be empty)
            target_type: Declared field type, possibly Optional[...]
            culture: Conventions for numeric and temporal parsing

        Returns:
            The converted value.
        """
        ...


__all__ = ["ProtocolEnvarConverter"]
