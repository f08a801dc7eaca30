# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Enumerations for omnibase_envars.

Exports:
    EnumEnvarErrorCode: Error classification for conversion and binding failures
"""

from omnibase_envars.enums.enum_envar_error_code import EnumEnvarErrorCode

__all__: list[str] = [
    "EnumEnvarErrorCode",
]
