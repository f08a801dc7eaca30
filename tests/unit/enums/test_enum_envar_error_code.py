# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Tests for EnumEnvarErrorCode."""

from omnibase_envars.enums import EnumEnvarErrorCode


class TestEnumEnvarErrorCode:
    """Tests for EnumEnvarErrorCode values."""

    def test_values_are_snake_case_strings(self) -> None:
        """Test that every member's value is its lower-cased name."""
        for member in EnumEnvarErrorCode:
            assert member.value == member.name.lower()

    def test_string_comparison(self) -> None:
        """Test that members compare equal to their string value."""
        assert EnumEnvarErrorCode.OVERFLOW == "overflow"
        assert EnumEnvarErrorCode("read_only_target") is EnumEnvarErrorCode.READ_ONLY_TARGET
