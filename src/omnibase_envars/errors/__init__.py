# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Envar Binding Errors Module.

This module provides the error classes raised by the type converter and the
binder. All errors extend EnvarError and carry an EnumEnvarErrorCode plus a
frozen ModelEnvarErrorContext.

Exports:
    ModelEnvarErrorContext: Configuration model for bundled error context
    EnvarError: Base error class
    EnvarDeclarationError: Invalid marker or culture declaration
    TypeConversionError: Base class for single-value conversion failures
    InvalidFormatError: Raw value does not match the target grammar
    NumericOverflowError: Numeric value outside the target width
    InvalidCharLengthError: Char target given a value whose length is not 1
    InvalidEnumValueError: Non-flag enum given an undeclared member
    UnsupportedTypeError: No built-in handling and no usable custom converter
    ReadOnlyTargetError: Marked field without an accessible setter
    EnvarConversionError: Conversion failure surfaced by the binder
    EnvarValidationError: Post-binding pydantic validation failure

Error Sanitization Guidelines:
    Raw values appear only in EnvarConversionError messages, where naming
    the offending value is the point of the error. Never log raw values:
    log the variable name and the field instead.

    Example - BAD::

        logger.debug("Bound %s=%s", source_name, raw_value)

    Example - GOOD::

        logger.debug("Bound %s to %s.%s", source_name, owner, field_name)
"""

from omnibase_envars.errors.envar_errors import (
    EnvarConversionError,
    EnvarDeclarationError,
    EnvarError,
    EnvarValidationError,
    InvalidCharLengthError,
    InvalidEnumValueError,
    InvalidFormatError,
    NumericOverflowError,
    ReadOnlyTargetError,
    TypeConversionError,
    UnsupportedTypeError,
)
from omnibase_envars.errors.model_envar_error_context import ModelEnvarErrorContext

__all__: list[str] = [
    "EnvarConversionError",
    "EnvarDeclarationError",
    "EnvarError",
    "EnvarValidationError",
    "InvalidCharLengthError",
    "InvalidEnumValueError",
    "InvalidFormatError",
    "ModelEnvarErrorContext",
    "NumericOverflowError",
    "ReadOnlyTargetError",
    "TypeConversionError",
    "UnsupportedTypeError",
]
