# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Envar Error Context Configuration Model.

This module defines the configuration model for binding error context,
bundling the structured fields every envar error can carry so error
constructors keep a short parameter list.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ModelEnvarErrorContext(BaseModel):
    """Configuration model for envar error context.

    Attributes:
        operation: Operation being performed ("convert", "bind", "declare", ...)
        owner_type_name: Name of the configuration type being bound
        field_name: Attribute on the configuration type
        source_name: Environment variable the value was read from
        target_type_name: Human-readable name of the requested target type

    Example:
        >>> context = ModelEnvarErrorContext(
        ...     operation="bind",
        ...     owner_type_name="DatabaseConfig",
        ...     field_name="port",
        ...     source_name="DB_PORT",
        ...     target_type_name="Int32",
        ... )
        >>> raise EnvarConversionError("Failed to convert", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed (convert, bind, declare, etc.)",
    )
    owner_type_name: Optional[str] = Field(
        default=None,
        description="Name of the configuration type being bound",
    )
    field_name: Optional[str] = Field(
        default=None,
        description="Attribute on the configuration type",
    )
    source_name: Optional[str] = Field(
        default=None,
        description="Environment variable the raw value came from",
    )
    target_type_name: Optional[str] = Field(
        default=None,
        description="Human-readable name of the requested target type",
    )


__all__ = ["ModelEnvarErrorContext"]
