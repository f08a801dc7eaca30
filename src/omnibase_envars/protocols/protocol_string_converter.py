# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocol for custom string converters.

Types the converter has no built-in rule for can still be bound if they
declare a string converter, either on the type itself::

    @envar_converter(RgbColorConverter())
    class RgbColor:
        ...

or through the process-wide registry for types you do not own::

    get_converter_registry().register(IPv4Address, IPv4AddressConverter())

The converter is consulted only after every built-in rule has been tried.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from omnibase_envars.models.model_culture import ModelCulture


@runtime_checkable
class ProtocolStringConverter(Protocol):
    """Capability a type declares to become bindable from a string."""

    def can_convert_from(self, source_type: type) -> bool:
        """Return True if this converter accepts values of ``source_type``.

        The binder only ever asks about ``str``.
        """
        ...

    def convert_from_string(self, value: str, culture: ModelCulture) -> object:
        """Build an instance of the target type from ``value``."""
        ...


__all__ = ["ProtocolStringConverter"]
