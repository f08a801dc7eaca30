# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Width-checked scalar types for configuration fields.

Python's ``int`` is unbounded and ``float`` is always double precision, so a
field declared as plain ``int`` accepts any integer. These subclasses give
configuration types the fixed-width semantics common in other ecosystems:
constructing one outside its range raises ``OverflowError``, and the type
converter reports that as a NumericOverflowError.

Example:
    >>> from typing import Annotated
    >>> from omnibase_envars import Envar
    >>> from omnibase_envars.types import UInt16
    >>>
    >>> class ServerConfig:
    ...     port: Annotated[UInt16, Envar("PORT")] = UInt16(8080)
    >>>
    >>> UInt16(70000)  # doctest: +ELLIPSIS
    Traceback (most recent call last):
    ...
    OverflowError: 70000 is outside the range of UInt16 (0..65535)

All instances compare, hash and format like their base type, and validate
as fields of pydantic models.
"""

from __future__ import annotations

import struct
from collections.abc import Callable
from typing import Any, ClassVar, Self

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema


def _range_checked(factory: Callable[[Any], Any]) -> Callable[[Any], Any]:
    # pydantic only reports ValueError and AssertionError as validation errors
    def validate(value: Any) -> Any:
        try:
            return factory(value)
        except OverflowError as e:
            raise ValueError(str(e)) from e

    return validate


class BoundedInt(int):
    """Base class for fixed-width integers. Subclasses set the bounds."""

    MIN_VALUE: ClassVar[int]
    MAX_VALUE: ClassVar[int]

    def __new__(cls, value: object = 0) -> Self:
        instance = super().__new__(cls, value)  # type: ignore[call-overload]
        if not cls.MIN_VALUE <= instance <= cls.MAX_VALUE:
            raise OverflowError(
                f"{int(instance)} is outside the range of {cls.__name__} "
                f"({cls.MIN_VALUE}..{cls.MAX_VALUE})"
            )
        return instance

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_after_validator_function(
            _range_checked(cls), core_schema.int_schema()
        )


class Int8(BoundedInt):
    MIN_VALUE = -(2**7)
    MAX_VALUE = 2**7 - 1


class Int16(BoundedInt):
    MIN_VALUE = -(2**15)
    MAX_VALUE = 2**15 - 1


class Int32(BoundedInt):
    MIN_VALUE = -(2**31)
    MAX_VALUE = 2**31 - 1


class Int64(BoundedInt):
    MIN_VALUE = -(2**63)
    MAX_VALUE = 2**63 - 1


class UInt8(BoundedInt):
    MIN_VALUE = 0
    MAX_VALUE = 2**8 - 1


class UInt16(BoundedInt):
    MIN_VALUE = 0
    MAX_VALUE = 2**16 - 1


class UInt32(BoundedInt):
    MIN_VALUE = 0
    MAX_VALUE = 2**32 - 1


class UInt64(BoundedInt):
    MIN_VALUE = 0
    MAX_VALUE = 2**64 - 1


class Float32(float):
    """Single-precision float.

    The value is rounded to the nearest IEEE 754 binary32 number. Finite
    values too large for binary32 raise ``OverflowError``; infinities and
    NaN pass through.
    """

    def __new__(cls, value: object = 0.0) -> Self:
        as_double = float(value)  # type: ignore[arg-type]
        try:
            (single,) = struct.unpack("<f", struct.pack("<f", as_double))
        except OverflowError as e:
            raise OverflowError(
                f"{as_double!r} is outside the range of {cls.__name__}"
            ) from e
        return super().__new__(cls, single)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_after_validator_function(
            _range_checked(cls), core_schema.float_schema()
        )


class Char(str):
    """A string of exactly one character."""

    def __new__(cls, value: str = "\0") -> Self:
        if len(value) != 1:
            raise ValueError(
                f"{cls.__name__} requires exactly one character, got {len(value)}"
            )
        return super().__new__(cls, value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls, core_schema.str_schema(min_length=1, max_length=1)
        )


SIGNED_INT_TYPES: tuple[type[BoundedInt], ...] = (Int8, Int16, Int32, Int64)
UNSIGNED_INT_TYPES: tuple[type[BoundedInt], ...] = (UInt8, UInt16, UInt32, UInt64)

__all__ = [
    "SIGNED_INT_TYPES",
    "UNSIGNED_INT_TYPES",
    "BoundedInt",
    "Char",
    "Float32",
    "Int16",
    "Int32",
    "Int64",
    "Int8",
    "UInt16",
    "UInt32",
    "UInt64",
    "UInt8",
]
