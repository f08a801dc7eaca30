# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Scalar types and type aliases for omnibase_envars.

Exports:
    Int8, Int16, Int32, Int64: Signed fixed-width integers
    UInt8, UInt16, UInt32, UInt64: Unsigned fixed-width integers
    BoundedInt: Base class for fixed-width integers
    Float32: Single-precision float
    Char: Single-character string
    EnvironSource: Mapping of environment variable names to values
    CultureInput: ModelCulture or locale identifier
"""

from omnibase_envars.types.type_envar_aliases import CultureInput, EnvironSource
from omnibase_envars.types.type_sized_scalars import (
    SIGNED_INT_TYPES,
    UNSIGNED_INT_TYPES,
    BoundedInt,
    Char,
    Float32,
    Int8,
    Int16,
    Int32,
    Int64,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
)

__all__: list[str] = [
    "SIGNED_INT_TYPES",
    "UNSIGNED_INT_TYPES",
    "BoundedInt",
    "Char",
    "CultureInput",
    "EnvironSource",
    "Float32",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
]
