# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Type converter for environment variable values.

``convert_value`` maps (raw string, target type, culture) to a typed value
or raises a TypeConversionError subclass. It is a pure function of its
inputs plus the read-only converter registry. Errors raised by a custom
converter propagate unchanged; the binder wraps them like any other failure.

Resolution Order:
    1. ``Annotated`` metadata and ``Optional`` wrappers are removed
    2. Enums: member names (case-insensitive), then member values;
       ``Flag`` enums accept combinations without a membership check
    3. Built-in types, dispatched on the exact class:
       str, Char, bool, int and the fixed-width integers, float, Float32,
       Decimal, UUID, pydantic URL types, timedelta, datetime, date, time
    4. Custom converters declared by the type or found in the registry
    5. UnsupportedTypeError

Exact-class dispatch keeps ``bool`` from being parsed as ``int`` and
``datetime`` from being parsed as ``date``. A user subclass of a built-in
type goes through step 4.

Example:
    >>> convert_value("42", int, ModelCulture.invariant())
    42
    >>> convert_value("3,14", float, ModelCulture.from_locale("de_DE"))
    3.14
    >>> convert_value("value1", MyEnum, ModelCulture.invariant())
    <MyEnum.VALUE1: 1>
"""

from __future__ import annotations

import functools
import math
import re
from collections.abc import Callable
from datetime import date, datetime, time, timedelta
from decimal import Decimal, InvalidOperation
from enum import Enum, Flag
from typing import TypeAlias
from uuid import UUID

from pydantic import AnyUrl, TypeAdapter, ValidationError

from omnibase_envars.conversion.converter_registry import get_converter_registry
from omnibase_envars.errors import (
    InvalidCharLengthError,
    InvalidEnumValueError,
    InvalidFormatError,
    ModelEnvarErrorContext,
    NumericOverflowError,
    UnsupportedTypeError,
)
from omnibase_envars.models.model_culture import ModelCulture
from omnibase_envars.types import (
    SIGNED_INT_TYPES,
    UNSIGNED_INT_TYPES,
    BoundedInt,
    Char,
    Float32,
)
from omnibase_envars.utils.util_number_parsing import (
    match_special_float,
    normalize_float,
    normalize_integer,
)
from omnibase_envars.utils.util_temporal_parsing import (
    parse_date,
    parse_datetime,
    parse_duration,
    parse_time,
)
from omnibase_envars.utils.util_type_introspection import (
    describe_type,
    is_union,
    resolve_conversion_target,
)

_ENUM_NUMBER = re.compile(r"[+-]?[0-9]+")
_FLAG_SEPARATORS = re.compile(r"[,|]")

_Handler: TypeAlias = Callable[[str, type, ModelCulture], object]


def _context(target: object) -> ModelEnvarErrorContext:
    return ModelEnvarErrorContext(
        operation="convert",
        target_type_name=describe_type(target),
    )


def _invalid_format(value: str, target: type, reason: str = "") -> InvalidFormatError:
    message = f"Value '{value}' is not a valid '{describe_type(target)}'"
    if reason:
        message = f"{message}: {reason}"
    return InvalidFormatError(message, context=_context(target), value=value)


def _overflow(value: str, target: type) -> NumericOverflowError:
    message = f"Value '{value}' is outside the range of '{describe_type(target)}'"
    if issubclass(target, BoundedInt):
        message = f"{message} ({target.MIN_VALUE}..{target.MAX_VALUE})"
    return NumericOverflowError(message, context=_context(target), value=value)


# =============================================================================
# Built-in handlers
# =============================================================================


def _convert_str(value: str, target: type, culture: ModelCulture) -> object:
    return value


def _convert_char(value: str, target: type, culture: ModelCulture) -> object:
    if len(value) != 1:
        raise InvalidCharLengthError(
            f"Can't convert '{value}' to {describe_type(target)} - "
            "must be exactly one character",
            context=_context(target),
            value=value,
        )
    return Char(value)


def _convert_bool(value: str, target: type, culture: ModelCulture) -> object:
    text = value.strip().casefold()
    if text == "true":
        return True
    if text == "false":
        return False
    raise _invalid_format(value, target, "expected 'true' or 'false'")


def _convert_int(value: str, target: type, culture: ModelCulture) -> object:
    try:
        number = int(normalize_integer(value, culture))
    except ValueError as e:
        raise _invalid_format(value, target) from e
    if target is int:
        return number
    try:
        return target(number)
    except OverflowError as e:
        raise _overflow(value, target) from e


def _convert_float(value: str, target: type, culture: ModelCulture) -> object:
    number = match_special_float(value, culture)
    if number is None:
        try:
            number = float(normalize_float(value, culture))
        except ValueError as e:
            raise _invalid_format(value, target) from e
        if math.isinf(number):
            raise _overflow(value, target)
    if target is float:
        return number
    try:
        return target(number)
    except OverflowError as e:
        raise _overflow(value, target) from e


def _convert_decimal(value: str, target: type, culture: ModelCulture) -> object:
    try:
        return Decimal(normalize_float(value, culture))
    except (ValueError, InvalidOperation) as e:
        raise _invalid_format(value, target) from e


def _convert_uuid(value: str, target: type, culture: ModelCulture) -> object:
    try:
        return UUID(value.strip())
    except ValueError as e:
        raise _invalid_format(value, target) from e


def _temporal(parser: Callable[[str, ModelCulture], object]) -> _Handler:
    def handler(value: str, target: type, culture: ModelCulture) -> object:
        try:
            return parser(value, culture)
        except OverflowError as e:
            raise _overflow(value, target) from e
        except ValueError as e:
            raise _invalid_format(value, target) from e

    return handler


_BUILTIN_HANDLERS: dict[type, _Handler] = {
    str: _convert_str,
    Char: _convert_char,
    bool: _convert_bool,
    int: _convert_int,
    **{sized: _convert_int for sized in SIGNED_INT_TYPES + UNSIGNED_INT_TYPES},
    float: _convert_float,
    Float32: _convert_float,
    Decimal: _convert_decimal,
    UUID: _convert_uuid,
    timedelta: _temporal(parse_duration),
    datetime: _temporal(parse_datetime),
    date: _temporal(parse_date),
    time: _temporal(parse_time),
}


@functools.lru_cache(maxsize=32)
def _url_adapter(target: type) -> TypeAdapter[object]:
    return TypeAdapter(target)


def _convert_url(value: str, target: type, culture: ModelCulture) -> object:
    try:
        return _url_adapter(target).validate_python(value.strip())
    except ValidationError as e:
        raise _invalid_format(value, target, "expected an absolute URL") from e


# =============================================================================
# Enums
# =============================================================================


def _parse_enum_number(text: str) -> int | None:
    if _ENUM_NUMBER.fullmatch(text) is None:
        return None
    return int(text)


def _match_enum_member(text: str, enum_type: type[Enum]) -> Enum | None:
    members = enum_type.__members__
    if text in members:
        return members[text]

    folded = text.casefold()
    for name, member in members.items():
        if name.casefold() == folded:
            return member
    for member in enum_type:
        if isinstance(member.value, str) and member.value.casefold() == folded:
            return member

    number = _parse_enum_number(text)
    if number is not None:
        for member in enum_type:
            if (
                isinstance(member.value, int)
                and not isinstance(member.value, bool)
                and member.value == number
            ):
                return member
    return None


def _invalid_enum(value: str, enum_type: type[Enum]) -> InvalidEnumValueError:
    return InvalidEnumValueError(
        f"Value '{value}' is not a valid member of the '{enum_type.__name__}' enum",
        context=_context(enum_type),
        value=value,
    )


def _convert_flag(value: str, flag_type: type[Flag]) -> Flag:
    text = value.strip()
    number = _parse_enum_number(text)
    if number is not None:
        try:
            return flag_type(number)
        except ValueError as e:
            raise _invalid_enum(value, flag_type) from e

    parts = [part.strip() for part in _FLAG_SEPARATORS.split(text)]
    if not all(parts):
        raise _invalid_enum(value, flag_type)

    result = flag_type(0)
    for part in parts:
        member = _match_enum_member(part, flag_type)
        if member is None:
            raise _invalid_enum(value, flag_type)
        result |= member
    return result


def _convert_enum(value: str, enum_type: type[Enum]) -> Enum:
    # Flag detection comes first: combinations have no single matching member
    if issubclass(enum_type, Flag):
        return _convert_flag(value, enum_type)
    member = _match_enum_member(value.strip(), enum_type)
    if member is None:
        raise _invalid_enum(value, enum_type)
    return member


# =============================================================================
# Entry points
# =============================================================================


def _convert_custom(value: str, target: object, culture: ModelCulture) -> object:
    converter = get_converter_registry().resolve(target) if isinstance(target, type) else None
    if converter is None or not converter.can_convert_from(str):
        raise UnsupportedTypeError(
            f"Can't convert string to type '{describe_type(target)}'",
            context=_context(target),
            value=value,
        )
    return converter.convert_from_string(value, culture)


def convert_value(
    value: str,
    target_type: object,
    culture: ModelCulture | None = None,
) -> object:
    """Convert one environment variable string to ``target_type``.

    Args:
        value: Raw value; the empty string is a value, not an absence.
        target_type: Declared type, possibly ``Optional`` or ``Annotated``.
        culture: Parsing conventions; defaults to the invariant culture.

    Returns:
        An instance of the resolved target type.

    Raises:
        InvalidFormatError: The value does not match the type's grammar.
        NumericOverflowError: The value is outside the type's range.
        InvalidCharLengthError: A Char target got a value of length != 1.
        InvalidEnumValueError: A non-flag enum got an undeclared member.
        UnsupportedTypeError: No built-in rule and no usable custom converter.
        Exception: Whatever a custom converter's ``convert_from_string``
            raises, unchanged.
    """
    culture = ModelCulture.resolve(culture)
    target = resolve_conversion_target(target_type)

    if is_union(target):
        raise UnsupportedTypeError(
            f"Can't convert string to type '{describe_type(target)}'",
            context=_context(target),
            value=value,
        )

    if isinstance(target, type):
        if issubclass(target, Enum):
            return _convert_enum(value, target)
        handler = _BUILTIN_HANDLERS.get(target)
        if handler is not None:
            return handler(value, target, culture)
        if issubclass(target, AnyUrl):
            return _convert_url(value, target, culture)

    return _convert_custom(value, target, culture)


class EnvarTypeConverter:
    """Default converter strategy used by the binder.

    Subclass and override ``convert`` to special-case types, delegating to
    ``super().convert`` for everything else. Instances hold no state and are
    safe to share between threads.
    """

    def convert(
        self,
        value: str,
        target_type: object,
        culture: ModelCulture,
    ) -> object:
        return convert_value(value, target_type, culture)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


__all__ = [
    "EnvarTypeConverter",
    "convert_value",
]
