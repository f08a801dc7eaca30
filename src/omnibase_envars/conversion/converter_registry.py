# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Converter Registry - process-wide lookup for custom string converters.

The type converter handles a fixed set of built-in types. Everything else is
resolved here, as a last resort, in this order:

1. A converter the type declares itself via ``__envar_converter__``
   (normally set with the ``@envar_converter(...)`` decorator).
2. A converter registered for the type, or for the nearest base class in
   its MRO, with ``ConverterRegistry.register``.

The default registry ships converters for ``pathlib.Path`` and
``pydantic.SecretStr``.

Thread Safety:
    Registration and lookup are protected by a ``threading.Lock``. Lookups
    are dictionary reads, so holding the lock costs little and keeps
    conversions from observing a half-applied registration.

Example Usage:
    ```python
    from ipaddress import IPv4Address

    from omnibase_envars.conversion import (
        FactoryStringConverter,
        get_converter_registry,
    )

    get_converter_registry().register(
        IPv4Address, FactoryStringConverter(IPv4Address)
    )
    ```
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

from pydantic import SecretStr

from omnibase_envars.protocols import ProtocolStringConverter

if TYPE_CHECKING:
    from omnibase_envars.models.model_culture import ModelCulture

logger = logging.getLogger(__name__)

_T = TypeVar("_T", bound=type)

ENVAR_CONVERTER_ATTRIBUTE = "__envar_converter__"


class FactoryStringConverter:
    """String converter backed by a one-argument factory such as a constructor.

    The culture is ignored; use a full ProtocolStringConverter implementation
    when parsing depends on it.
    """

    def __init__(self, factory: Callable[[str], object]) -> None:
        self._factory = factory

    def can_convert_from(self, source_type: type) -> bool:
        return source_type is str

    def convert_from_string(self, value: str, culture: ModelCulture) -> object:
        return self._factory(value)

    def __repr__(self) -> str:
        name = getattr(self._factory, "__name__", repr(self._factory))
        return f"FactoryStringConverter({name})"


class ConverterRegistry:
    """Thread-safe registry of custom string converters keyed by target type."""

    def __init__(self) -> None:
        self._lock: threading.Lock = threading.Lock()
        self._converters: dict[type, ProtocolStringConverter] = {}

    def register(
        self,
        target_type: type,
        converter: ProtocolStringConverter,
        *,
        replace: bool = False,
    ) -> None:
        """Register ``converter`` for ``target_type``.

        Args:
            target_type: The class values are converted to.
            converter: Object implementing ProtocolStringConverter.
            replace: Allow overwriting an existing registration.

        Raises:
            TypeError: If ``converter`` does not implement the protocol.
            ValueError: If ``target_type`` is registered and ``replace`` is False.
        """
        if not isinstance(converter, ProtocolStringConverter):
            raise TypeError(
                f"Converter for '{target_type.__name__}' must implement "
                "can_convert_from() and convert_from_string()"
            )
        with self._lock:
            if target_type in self._converters and not replace:
                raise ValueError(
                    f"A converter for '{target_type.__name__}' is already registered"
                )
            self._converters[target_type] = converter
        logger.debug("Registered string converter for %s", target_type.__name__)

    def unregister(self, target_type: type) -> bool:
        """Remove the registration for ``target_type``. Returns True if one existed."""
        with self._lock:
            return self._converters.pop(target_type, None) is not None

    def get(self, target_type: type) -> ProtocolStringConverter | None:
        """Return the converter registered for exactly ``target_type``."""
        with self._lock:
            return self._converters.get(target_type)

    def resolve(self, target_type: type) -> ProtocolStringConverter | None:
        """Find the converter for ``target_type``.

        The type's own declaration wins over registry entries. Registry
        entries are matched along the MRO, most specific class first.
        """
        declared = getattr(target_type, ENVAR_CONVERTER_ATTRIBUTE, None)
        if declared is not None:
            return declared() if isinstance(declared, type) else declared

        with self._lock:
            for candidate in target_type.__mro__:
                converter = self._converters.get(candidate)
                if converter is not None:
                    return converter
        return None

    def is_registered(self, target_type: type) -> bool:
        with self._lock:
            return target_type in self._converters

    def clear(self) -> None:
        with self._lock:
            self._converters.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._converters)

    def __contains__(self, target_type: object) -> bool:
        with self._lock:
            return target_type in self._converters


def envar_converter(
    converter: ProtocolStringConverter | type[ProtocolStringConverter],
) -> Callable[[_T], _T]:
    """Class decorator declaring the string converter for the decorated type.

    Example:
        >>> @envar_converter(FactoryStringConverter(lambda raw: RgbColor.parse(raw)))
        ... class RgbColor:
        ...     ...
    """

    def decorator(cls: _T) -> _T:
        setattr(cls, ENVAR_CONVERTER_ATTRIBUTE, converter)
        return cls

    return decorator


def _create_default_registry() -> ConverterRegistry:
    registry = ConverterRegistry()
    registry.register(Path, FactoryStringConverter(Path))
    registry.register(SecretStr, FactoryStringConverter(SecretStr))
    return registry


_registry: ConverterRegistry | None = None
_singleton_lock: threading.Lock = threading.Lock()


def get_converter_registry() -> ConverterRegistry:
    """Return the process-wide converter registry, creating it on first use."""
    global _registry
    if _registry is None:
        with _singleton_lock:
            if _registry is None:
                _registry = _create_default_registry()
    return _registry


__all__ = [
    "ENVAR_CONVERTER_ATTRIBUTE",
    "ConverterRegistry",
    "FactoryStringConverter",
    "envar_converter",
    "get_converter_registry",
]
