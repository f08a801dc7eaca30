# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Type conversion for environment variable values.

Exports:
    convert_value: Convert one raw string to a target type
    EnvarTypeConverter: Default converter strategy used by the binder
    ConverterRegistry: Thread-safe registry of custom string converters
    FactoryStringConverter: String converter backed by a one-argument factory
    envar_converter: Class decorator declaring a type's own string converter
    get_converter_registry: Process-wide registry singleton
"""

from omnibase_envars.conversion.converter_registry import (
    ENVAR_CONVERTER_ATTRIBUTE,
    ConverterRegistry,
    FactoryStringConverter,
    envar_converter,
    get_converter_registry,
)
from omnibase_envars.conversion.envar_type_converter import (
    EnvarTypeConverter,
    convert_value,
)

__all__: list[str] = [
    "ENVAR_CONVERTER_ATTRIBUTE",
    "ConverterRegistry",
    "EnvarTypeConverter",
    "FactoryStringConverter",
    "convert_value",
    "envar_converter",
    "get_converter_registry",
]
