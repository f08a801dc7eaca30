# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Envar Binding Error Classes.

Error Hierarchy:
    EnvarError (base error)
    ├── EnvarDeclarationError (also ValueError)
    ├── TypeConversionError (also ValueError)
    │   ├── InvalidFormatError
    │   ├── NumericOverflowError
    │   ├── InvalidCharLengthError
    │   ├── InvalidEnumValueError
    │   └── UnsupportedTypeError
    ├── ReadOnlyTargetError
    ├── EnvarConversionError
    └── EnvarValidationError

All errors:
    - Use EnumEnvarErrorCode for error classification
    - Support proper error chaining with `raise ... from e`
    - Include structured context for debugging
    - Accept ModelEnvarErrorContext for bundled context parameters

TypeConversionError subclasses are raised by the type converter. The binder
never lets them escape on their own: they become the ``__cause__`` of an
EnvarConversionError that names the environment variable and raw value.
"""

from typing import Optional

from omnibase_envars.enums import EnumEnvarErrorCode
from omnibase_envars.errors.model_envar_error_context import ModelEnvarErrorContext


class EnvarError(Exception):
    """Base error class for environment variable binding.

    Structured Fields (via ModelEnvarErrorContext):
        operation: Operation being performed
        owner_type_name: Configuration type being bound
        field_name: Attribute being populated
        source_name: Environment variable name
        target_type_name: Requested target type

    Example:
        >>> context = ModelEnvarErrorContext(operation="bind", field_name="port")
        >>> raise EnvarError("Binding failed", context=context)
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[EnumEnvarErrorCode] = None,
        context: Optional[ModelEnvarErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize EnvarError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to CONVERSION_ERROR)
            context: Bundled binding context (field, source variable, etc.)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or EnumEnvarErrorCode.CONVERSION_ERROR
        self.context = context if context is not None else ModelEnvarErrorContext()
        self.extra_context: dict[str, object] = dict(extra_context)

    def __str__(self) -> str:
        return self.message


class EnvarDeclarationError(EnvarError, ValueError):
    """Raised when an envar declaration is invalid.

    This is a programming error detected where the declaration is made
    (an ``Envar`` marker with an empty name, an unknown culture identifier),
    never a runtime binding failure.
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelEnvarErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumEnvarErrorCode.INVALID_DECLARATION,
            context=context,
            **extra_context,
        )


class TypeConversionError(EnvarError, ValueError):
    """Base class for failures raised while converting one string value.

    Attributes:
        value: The raw string that could not be converted
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[EnumEnvarErrorCode] = None,
        context: Optional[ModelEnvarErrorContext] = None,
        *,
        value: Optional[str] = None,
        **extra_context: object,
    ) -> None:
        """Initialize TypeConversionError.

        Args:
            message: Human-readable error message
            error_code: Specific conversion failure code
            context: Bundled context (target_type_name is the useful field here)
            value: The raw string that failed conversion
            **extra_context: Additional context information
        """
        super().__init__(
            message=message,
            error_code=error_code or EnumEnvarErrorCode.INVALID_FORMAT,
            context=context,
            **extra_context,
        )
        self.value = value


class InvalidFormatError(TypeConversionError):
    """Raised when a raw value does not match the target type's grammar."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelEnvarErrorContext] = None,
        *,
        value: Optional[str] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumEnvarErrorCode.INVALID_FORMAT,
            context=context,
            value=value,
            **extra_context,
        )


class NumericOverflowError(TypeConversionError):
    """Raised when a numeric value lies outside the target width's range.

    Example:
        >>> raise NumericOverflowError(
        ...     "Value '256' is outside the range of 'UInt8' (0..255)",
        ...     value="256",
        ... )
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelEnvarErrorContext] = None,
        *,
        value: Optional[str] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumEnvarErrorCode.OVERFLOW,
            context=context,
            value=value,
            **extra_context,
        )


class InvalidCharLengthError(TypeConversionError):
    """Raised when a single-character target receives a value of length != 1."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelEnvarErrorContext] = None,
        *,
        value: Optional[str] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumEnvarErrorCode.INVALID_CHAR_LENGTH,
            context=context,
            value=value,
            **extra_context,
        )


class InvalidEnumValueError(TypeConversionError):
    """Raised when a non-flag enum receives a value matching no declared member.

    The offending value is available as ``value`` and the enum's name as
    ``context.target_type_name``.
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelEnvarErrorContext] = None,
        *,
        value: Optional[str] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumEnvarErrorCode.INVALID_ENUM_VALUE,
            context=context,
            value=value,
            **extra_context,
        )


class UnsupportedTypeError(TypeConversionError):
    """Raised when a type has no built-in handling and no usable custom converter."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelEnvarErrorContext] = None,
        *,
        value: Optional[str] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumEnvarErrorCode.UNSUPPORTED_TYPE,
            context=context,
            value=value,
            **extra_context,
        )


class ReadOnlyTargetError(EnvarError):
    """Raised when a marked field has no accessible setter.

    Detected before any conversion is attempted, so it is raised by the
    binder directly rather than wrapped in EnvarConversionError.
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelEnvarErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumEnvarErrorCode.READ_ONLY_TARGET,
            context=context,
            **extra_context,
        )

    @property
    def field_name(self) -> Optional[str]:
        return self.context.field_name


class EnvarConversionError(EnvarError):
    """Raised by the binder when a field's value cannot be converted.

    This is the only conversion failure surfaced to callers of ``bind``. The
    underlying TypeConversionError (or whatever a custom converter raised) is
    chained as ``__cause__`` and exposed as ``cause``.

    Example:
        >>> try:
        ...     converter.convert(raw, field_type, culture)
        ... except Exception as e:
        ...     raise EnvarConversionError(
        ...         f"Failed to convert environment variable 'RETRY_COUNT' "
        ...         f"with value 'abc' to type 'Int32' for field 'retries'",
        ...         context=context,
        ...         raw_value="abc",
        ...     ) from e
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelEnvarErrorContext] = None,
        *,
        raw_value: Optional[str] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumEnvarErrorCode.CONVERSION_ERROR,
            context=context,
            **extra_context,
        )
        self.raw_value = raw_value

    @property
    def source_name(self) -> Optional[str]:
        return self.context.source_name

    @property
    def field_name(self) -> Optional[str]:
        return self.context.field_name

    @property
    def cause(self) -> Optional[BaseException]:
        return self.__cause__


class EnvarValidationError(EnvarError):
    """Raised when a bound pydantic model fails re-validation in load_envars."""

    def __init__(
        self,
        message: str,
        context: Optional[ModelEnvarErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumEnvarErrorCode.VALIDATION_ERROR,
            context=context,
            **extra_context,
        )


__all__ = [
    "EnvarConversionError",
    "EnvarDeclarationError",
    "EnvarError",
    "EnvarValidationError",
    "InvalidCharLengthError",
    "InvalidEnumValueError",
    "InvalidFormatError",
    "NumericOverflowError",
    "ReadOnlyTargetError",
    "TypeConversionError",
    "UnsupportedTypeError",
]
