# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for the fixed-width scalar types."""

from __future__ import annotations

import math

import pytest
from pydantic import BaseModel, ValidationError

from omnibase_envars.types import (
    SIGNED_INT_TYPES,
    UNSIGNED_INT_TYPES,
    Char,
    Float32,
    Int8,
    Int32,
    Int64,
    UInt8,
    UInt16,
    UInt64,
)


class TestBoundedInt:
    """Tests for range checks on the fixed-width integers."""

    @pytest.mark.parametrize(
        ("int_type", "low", "high"),
        [
            (Int8, -128, 127),
            (Int32, -2147483648, 2147483647),
            (Int64, -(2**63), 2**63 - 1),
            (UInt8, 0, 255),
            (UInt16, 0, 65535),
            (UInt64, 0, 2**64 - 1),
        ],
    )
    def test_bounds_are_inclusive(self, int_type: type, low: int, high: int) -> None:
        """Test that both bounds construct and one past either overflows."""
        assert int_type(low) == low
        assert int_type(high) == high
        with pytest.raises(OverflowError):
            int_type(low - 1)
        with pytest.raises(OverflowError):
            int_type(high + 1)

    def test_overflow_message_names_type_and_range(self) -> None:
        """Test that the overflow message is readable."""
        with pytest.raises(OverflowError, match=r"70000 is outside the range of UInt16 \(0\.\.65535\)"):
            UInt16(70000)

    def test_behaves_like_int(self) -> None:
        """Test equality, hashing and arithmetic with plain ints."""
        port = Int32(5432)
        assert port == 5432
        assert hash(port) == hash(5432)
        assert port + 1 == 5433
        assert isinstance(port, int)

    def test_default_is_zero(self) -> None:
        """Test the no-argument constructor."""
        assert Int32() == 0

    def test_type_groups(self) -> None:
        """Test the exported signed and unsigned groupings."""
        assert Int32 in SIGNED_INT_TYPES
        assert UInt8 in UNSIGNED_INT_TYPES
        assert not set(SIGNED_INT_TYPES) & set(UNSIGNED_INT_TYPES)


class TestFloat32:
    """Tests for single-precision rounding."""

    def test_rounds_to_single_precision(self) -> None:
        """Test that 0.1 is rounded to its binary32 neighbour."""
        value = Float32(0.1)
        assert value != 0.1
        assert value == pytest.approx(0.1, rel=1e-7)

    def test_finite_overflow_raises(self) -> None:
        """Test that values beyond binary32 range raise OverflowError."""
        with pytest.raises(OverflowError, match="Float32"):
            Float32(1e39)

    def test_special_values_pass_through(self) -> None:
        """Test that infinities and NaN are representable."""
        assert Float32(math.inf) == math.inf
        assert math.isnan(Float32(math.nan))


class TestChar:
    """Tests for the single-character string type."""

    def test_single_character(self) -> None:
        """Test a valid character."""
        assert Char("x") == "x"

    @pytest.mark.parametrize("value", ["", "ab"])
    def test_wrong_length_raises(self, value: str) -> None:
        """Test that anything but one character is rejected."""
        with pytest.raises(ValueError, match="exactly one character"):
            Char(value)


class TestPydanticIntegration:
    """Tests that the scalar types validate as pydantic fields."""

    class _Limits(BaseModel):
        retries: Int8 = Int8(3)
        ratio: Float32 = Float32(0.5)
        separator: Char = Char(",")

    def test_valid_values_keep_their_types(self) -> None:
        """Test that validated values are instances of the scalar types."""
        limits = self._Limits(retries=10, ratio=0.25, separator=";")
        assert isinstance(limits.retries, Int8)
        assert isinstance(limits.ratio, Float32)
        assert isinstance(limits.separator, Char)

    def test_out_of_range_is_a_validation_error(self) -> None:
        """Test that overflow surfaces as a pydantic ValidationError."""
        with pytest.raises(ValidationError):
            self._Limits(retries=500)

    def test_wrong_char_length_is_a_validation_error(self) -> None:
        """Test that a multi-character Char is rejected."""
        with pytest.raises(ValidationError):
            self._Limits(separator="ab")
