# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""ONEX Envars - typed configuration objects from environment variables.

Fields opt in with an ``Envar`` marker in their ``Annotated`` metadata. The
binder reads each named variable, converts it to the field's declared type
under a chosen culture, and assigns it. Unset variables leave defaults alone.

Key Components:
    - Envar: Field marker naming the source variable
    - load_envars / bind_envars / bind: Binding entry points
    - ModelEnvarSettings: Converter and culture for a binding pass
    - EnvarTypeConverter: Built-in conversion rules for scalars, enums,
      temporal types, UUIDs and URLs
    - ModelCulture: Babel-backed numeric and date conventions
    - EnvarError hierarchy with structured ModelEnvarErrorContext

Example:
    ```python
    from typing import Annotated

    from omnibase_envars import Envar, load_envars
    from omnibase_envars.types import Int32

    class DatabaseConfig:
        host: Annotated[str, Envar("DB_HOST")] = "localhost"
        port: Annotated[Int32, Envar("DB_PORT")] = Int32(5432)
        use_ssl: Annotated[bool, Envar("DB_SSL")] = False

    config = load_envars(DatabaseConfig)
    ```
"""

from omnibase_envars.binding import (
    Envar,
    ModelEnvarSettings,
    bind,
    bind_envars,
    load_envars,
)
from omnibase_envars.conversion import (
    ConverterRegistry,
    EnvarTypeConverter,
    FactoryStringConverter,
    convert_value,
    envar_converter,
    get_converter_registry,
)
from omnibase_envars.enums import EnumEnvarErrorCode
from omnibase_envars.errors import (
    EnvarConversionError,
    EnvarDeclarationError,
    EnvarError,
    EnvarValidationError,
    InvalidCharLengthError,
    InvalidEnumValueError,
    InvalidFormatError,
    ModelEnvarErrorContext,
    NumericOverflowError,
    ReadOnlyTargetError,
    TypeConversionError,
    UnsupportedTypeError,
)
from omnibase_envars.models import ModelCulture
from omnibase_envars.protocols import ProtocolEnvarConverter, ProtocolStringConverter

__all__: list[str] = [
    "ConverterRegistry",
    "EnumEnvarErrorCode",
    "Envar",
    "EnvarConversionError",
    "EnvarDeclarationError",
    "EnvarError",
    "EnvarTypeConverter",
    "EnvarValidationError",
    "FactoryStringConverter",
    "InvalidCharLengthError",
    "InvalidEnumValueError",
    "InvalidFormatError",
    "ModelCulture",
    "ModelEnvarErrorContext",
    "ModelEnvarSettings",
    "NumericOverflowError",
    "ProtocolEnvarConverter",
    "ProtocolStringConverter",
    "ReadOnlyTargetError",
    "TypeConversionError",
    "UnsupportedTypeError",
    "bind",
    "bind_envars",
    "convert_value",
    "envar_converter",
    "get_converter_registry",
    "load_envars",
]
