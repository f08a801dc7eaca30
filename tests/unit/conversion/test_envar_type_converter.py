# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for the built-in conversion rules of convert_value()."""

from __future__ import annotations

import math
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum, Flag
from typing import Annotated, Optional
from uuid import UUID

import pytest
from pydantic import AnyUrl, HttpUrl

from omnibase_envars.conversion import EnvarTypeConverter, convert_value
from omnibase_envars.enums import EnumEnvarErrorCode
from omnibase_envars.errors import (
    InvalidCharLengthError,
    InvalidEnumValueError,
    InvalidFormatError,
    NumericOverflowError,
    TypeConversionError,
    UnsupportedTypeError,
)
from omnibase_envars.models import ModelCulture
from omnibase_envars.types import Char, Float32, Int8, Int32, Int64, UInt8, UInt16


class Color(Enum):
    RED = 1
    GREEN = 2
    BLUE = 3


class LogLevel(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"


class Permission(Flag):
    READ = 1
    WRITE = 2
    EXECUTE = 4


class Unknown:
    pass


class TestStringAndChar:
    """Tests for str and Char targets."""

    def test_string_is_returned_unchanged(self) -> None:
        """Test that strings are not trimmed or altered."""
        assert convert_value("  hello  ", str) == "  hello  "

    def test_empty_string(self) -> None:
        """Test that the empty string is a valid str value."""
        assert convert_value("", str) == ""

    def test_char(self) -> None:
        """Test a single character."""
        result = convert_value("x", Char)
        assert result == "x"
        assert isinstance(result, Char)

    @pytest.mark.parametrize("value", ["", "ab"])
    def test_char_wrong_length(self, value: str) -> None:
        """Test that a Char needs exactly one character."""
        with pytest.raises(InvalidCharLengthError, match="must be exactly one character") as exc_info:
            convert_value(value, Char)
        assert exc_info.value.error_code == EnumEnvarErrorCode.INVALID_CHAR_LENGTH


class TestBool:
    """Tests for bool targets."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("true", True), ("True", True), ("TRUE", True), (" false ", False), ("False", False)],
    )
    def test_accepted(self, value: str, expected: bool) -> None:
        """Test case-insensitive true and false."""
        assert convert_value(value, bool) is expected

    @pytest.mark.parametrize("value", ["yes", "1", "0", "", "on"])
    def test_rejected(self, value: str) -> None:
        """Test that only true/false are booleans."""
        with pytest.raises(InvalidFormatError):
            convert_value(value, bool)


class TestIntegers:
    """Tests for int and the fixed-width integer targets."""

    def test_int(self) -> None:
        """Test an unbounded int."""
        assert convert_value("42", int) == 42
        assert convert_value("-17", int) == -17

    def test_int_is_unbounded(self) -> None:
        """Test that plain int never overflows."""
        assert convert_value("123456789012345678901234567890", int) == 123456789012345678901234567890

    def test_sized_type_is_preserved(self) -> None:
        """Test that the result is an instance of the requested width."""
        result = convert_value("5432", Int32)
        assert result == 5432
        assert isinstance(result, Int32)

    def test_invalid_format_message(self) -> None:
        """Test the message for a non-numeric value."""
        with pytest.raises(InvalidFormatError, match="Value 'abc' is not a valid 'Int32'") as exc_info:
            convert_value("abc", Int32)
        assert exc_info.value.value == "abc"
        assert exc_info.value.context.target_type_name == "Int32"

    @pytest.mark.parametrize(
        ("value", "int_type"),
        [
            ("2147483648", Int32),
            ("-2147483649", Int32),
            ("128", Int8),
            ("-1", UInt8),
            ("65536", UInt16),
            ("9223372036854775808", Int64),
        ],
    )
    def test_overflow(self, value: str, int_type: type) -> None:
        """Test values outside the type's range."""
        with pytest.raises(NumericOverflowError, match="outside the range") as exc_info:
            convert_value(value, int_type)
        assert exc_info.value.error_code == EnumEnvarErrorCode.OVERFLOW

    def test_overflow_message_includes_range(self) -> None:
        """Test that the range is part of the overflow message."""
        with pytest.raises(NumericOverflowError, match=r"\(0\.\.255\)"):
            convert_value("256", UInt8)

    def test_decimal_point_is_not_an_integer(self) -> None:
        """Test that a fractional value is a format error for integers."""
        with pytest.raises(InvalidFormatError):
            convert_value("1.5", int)

    def test_group_separators(self, german_culture: ModelCulture) -> None:
        """Test culture-specific thousands separators."""
        assert convert_value("1,000", int) == 1000
        assert convert_value("1.000", int, german_culture) == 1000


class TestFloats:
    """Tests for float, Float32 and Decimal targets."""

    def test_invariant(self) -> None:
        """Test a dot-decimal value under the invariant culture."""
        assert convert_value("3.14", float) == pytest.approx(3.14)

    def test_german_decimal_comma(self, german_culture: ModelCulture) -> None:
        """Test that de_DE reads '3,14' as 3.14."""
        assert convert_value("3,14", float, german_culture) == pytest.approx(3.14)

    def test_german_culture_by_identifier(self) -> None:
        """Test that a culture argument may be a locale identifier."""
        assert convert_value("3,14", float, "de_DE") == pytest.approx(3.14)

    def test_decimal_comma_fails_under_invariant(self) -> None:
        """Test that '3,14' is not a float in the invariant culture."""
        with pytest.raises(InvalidFormatError):
            convert_value("3,14", float, ModelCulture.invariant())

    def test_special_values(self) -> None:
        """Test infinity and NaN tokens."""
        assert convert_value("Infinity", float) == math.inf
        assert convert_value("-Infinity", float) == -math.inf
        assert math.isnan(convert_value("NaN", float))  # type: ignore[arg-type]

    def test_finite_overflow(self) -> None:
        """Test that a finite literal beyond double range overflows."""
        with pytest.raises(NumericOverflowError):
            convert_value("1e400", float)

    def test_float32(self) -> None:
        """Test single precision rounding and overflow."""
        result = convert_value("0.1", Float32)
        assert isinstance(result, Float32)
        assert result == pytest.approx(0.1, rel=1e-7)
        with pytest.raises(NumericOverflowError):
            convert_value("3.5e38", Float32)

    def test_decimal_keeps_precision(self) -> None:
        """Test that Decimal keeps the literal digits."""
        assert convert_value("1.10", Decimal) == Decimal("1.10")
        assert str(convert_value("0.1", Decimal)) == "0.1"

    def test_decimal_rejects_special_values(self) -> None:
        """Test that Decimal accepts finite values only."""
        with pytest.raises(InvalidFormatError):
            convert_value("NaN", Decimal)


class TestUuidAndUrls:
    """Tests for UUID and pydantic URL targets."""

    def test_uuid(self) -> None:
        """Test a canonical UUID string."""
        text = "12345678-1234-5678-1234-567812345678"
        assert convert_value(text, UUID) == UUID(text)

    def test_invalid_uuid(self) -> None:
        """Test a malformed UUID."""
        with pytest.raises(InvalidFormatError):
            convert_value("not-a-uuid", UUID)

    def test_absolute_url(self) -> None:
        """Test that an absolute URL is accepted."""
        result = convert_value("https://example.com/api", HttpUrl)
        assert isinstance(result, HttpUrl)
        assert result.host == "example.com"
        assert result.path == "/api"

    def test_any_url_scheme(self) -> None:
        """Test that AnyUrl accepts non-HTTP schemes."""
        result = convert_value("postgresql://db.internal:5432/app", AnyUrl)
        assert result.scheme == "postgresql"  # type: ignore[attr-defined]
        assert result.port == 5432  # type: ignore[attr-defined]

    @pytest.mark.parametrize("value", ["/relative/path", "not a url", ""])
    def test_invalid_url(self, value: str) -> None:
        """Test that relative and malformed URLs are rejected."""
        with pytest.raises(InvalidFormatError, match="absolute URL"):
            convert_value(value, HttpUrl)


class TestTemporal:
    """Tests for timedelta, datetime, date and time targets."""

    def test_timedelta(self) -> None:
        """Test the constant duration format."""
        assert convert_value("00:30:00", timedelta) == timedelta(minutes=30)

    def test_timedelta_component_overflow(self) -> None:
        """Test that an hour component above 23 overflows."""
        with pytest.raises(NumericOverflowError):
            convert_value("25:00:00", timedelta)

    def test_timedelta_invalid(self) -> None:
        """Test a malformed duration."""
        with pytest.raises(InvalidFormatError):
            convert_value("soon", timedelta)

    def test_datetime(self) -> None:
        """Test an ISO-8601 timestamp."""
        assert convert_value("2023-06-15T10:30:00", datetime) == datetime(2023, 6, 15, 10, 30)

    def test_datetime_german(self, german_culture: ModelCulture) -> None:
        """Test a de_DE short date as a timestamp."""
        assert convert_value("15.06.2023", datetime, german_culture) == datetime(2023, 6, 15)

    def test_date_is_not_a_datetime(self) -> None:
        """Test that a date target yields a date, not a datetime."""
        result = convert_value("2023-06-15", date)
        assert type(result) is date

    def test_time(self) -> None:
        """Test a time of day."""
        assert convert_value("08:15", time) == time(8, 15)

    def test_invalid_datetime(self) -> None:
        """Test a malformed timestamp."""
        with pytest.raises(InvalidFormatError):
            convert_value("yesterday", datetime)


class TestEnums:
    """Tests for Enum and Flag targets."""

    @pytest.mark.parametrize("value", ["RED", "red", "Red", " RED "])
    def test_member_name_case_insensitive(self, value: str) -> None:
        """Test that member names match regardless of case."""
        assert convert_value(value, Color) is Color.RED

    def test_numeric_value(self) -> None:
        """Test that an int-valued enum accepts its numeric value."""
        assert convert_value("2", Color) is Color.GREEN

    def test_string_value(self) -> None:
        """Test that a str-valued enum accepts member values."""
        assert convert_value("warning", LogLevel) is LogLevel.WARNING
        assert convert_value("INFO", LogLevel) is LogLevel.INFO

    @pytest.mark.parametrize("value", ["Purple", "99", "", "RED,GREEN"])
    def test_undefined_member(self, value: str) -> None:
        """Test that undeclared members are rejected."""
        with pytest.raises(InvalidEnumValueError):
            convert_value(value, Color)

    def test_undefined_member_message(self) -> None:
        """Test the invalid enum message."""
        with pytest.raises(
            InvalidEnumValueError,
            match="Value 'Purple' is not a valid member of the 'Color' enum",
        ):
            convert_value("Purple", Color)

    def test_flag_combination(self) -> None:
        """Test comma and pipe separated flag combinations."""
        assert convert_value("READ, WRITE", Permission) == Permission.READ | Permission.WRITE
        assert convert_value("read|execute", Permission) == Permission.READ | Permission.EXECUTE

    def test_flag_numeric_combination(self) -> None:
        """Test that a numeric flag value may combine members."""
        assert convert_value("3", Permission) == Permission.READ | Permission.WRITE

    def test_flag_single_member(self) -> None:
        """Test a single flag member."""
        assert convert_value("EXECUTE", Permission) is Permission.EXECUTE

    @pytest.mark.parametrize("value", ["READ,DELETE", "READ,", "8"])
    def test_flag_invalid(self, value: str) -> None:
        """Test unknown flag names and bits outside the declared members."""
        with pytest.raises(InvalidEnumValueError):
            convert_value(value, Permission)


class TestTargetResolution:
    """Tests for Optional, Annotated and unsupported targets."""

    def test_optional(self) -> None:
        """Test that Optional[T] converts as T."""
        assert convert_value("5", Optional[int]) == 5  # noqa: UP045
        assert convert_value("5", int | None) == 5

    def test_annotated(self) -> None:
        """Test that Annotated metadata is ignored."""
        assert convert_value("5", Annotated[int, "meta"]) == 5

    def test_union_unsupported(self) -> None:
        """Test that a union of several types is not convertible."""
        with pytest.raises(UnsupportedTypeError):
            convert_value("5", int | str)

    def test_unknown_type(self) -> None:
        """Test a type without a built-in rule or converter."""
        with pytest.raises(UnsupportedTypeError, match="Can't convert string to type 'Unknown'") as exc_info:
            convert_value("x", Unknown)
        assert exc_info.value.error_code == EnumEnvarErrorCode.UNSUPPORTED_TYPE

    def test_all_failures_are_type_conversion_errors(self) -> None:
        """Test that converter failures share one base class."""
        for value, target in [("abc", int), ("300", UInt8), ("ab", Char), ("X", Color), ("x", Unknown)]:
            with pytest.raises(TypeConversionError):
                convert_value(value, target)


class TestEnvarTypeConverter:
    """Tests for the default converter strategy class."""

    def test_delegates_to_convert_value(self, german_culture: ModelCulture) -> None:
        """Test that convert() applies the same rules."""
        converter = EnvarTypeConverter()
        assert converter.convert("3,5", float, german_culture) == pytest.approx(3.5)

    def test_subclass_override(self, invariant_culture: ModelCulture) -> None:
        """Test the documented override-and-delegate pattern."""

        class SecondsConverter(EnvarTypeConverter):
            def convert(self, value: str, target_type: object, culture: ModelCulture) -> object:
                if target_type is timedelta:
                    return timedelta(seconds=int(value))
                return super().convert(value, target_type, culture)

        converter = SecondsConverter()
        assert converter.convert("90", timedelta, invariant_culture) == timedelta(seconds=90)
        assert converter.convert("90", int, invariant_culture) == 90
