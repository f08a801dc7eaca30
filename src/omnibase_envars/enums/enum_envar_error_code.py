# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error code enumeration for environment variable binding failures."""

from enum import Enum


class EnumEnvarErrorCode(str, Enum):
    """Classification of every failure the converter and binder can raise.

    Converter-internal codes (INVALID_FORMAT through UNSUPPORTED_TYPE) only
    reach callers of ``bind`` as the cause of a CONVERSION_ERROR.
    """

    INVALID_FORMAT = "invalid_format"
    OVERFLOW = "overflow"
    INVALID_CHAR_LENGTH = "invalid_char_length"
    INVALID_ENUM_VALUE = "invalid_enum_value"
    UNSUPPORTED_TYPE = "unsupported_type"
    READ_ONLY_TARGET = "read_only_target"
    CONVERSION_ERROR = "conversion_error"
    INVALID_DECLARATION = "invalid_declaration"
    VALIDATION_ERROR = "validation_error"
