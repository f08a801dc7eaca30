# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Environment variable binder.

Populates the Envar-marked fields of an existing instance from the process
environment (or any ``Mapping[str, str]`` passed as ``environ``).

Per field, in discovery order:
    1. A field that cannot be assigned raises ReadOnlyTargetError, whether
       or not its variable is set.
    2. An unset variable leaves the field untouched. A variable set to the
       empty string is converted like any other value.
    3. The raw value is converted with the configured converter and culture
       and assigned with ``setattr``. Any conversion failure is wrapped in
       EnvarConversionError, chained to the original error. A pydantic model
       with ``validate_assignment`` can also reject the converted value in
       ``setattr``; that rejection is wrapped the same way.

A failure stops the pass. Fields bound before the failing one keep their
new values; there is no rollback.

Logging:
    Only variable and field names are logged, at DEBUG level. Raw values may
    hold credentials and never reach the log.

Example:
    >>> class DatabaseConfig:
    ...     host: Annotated[str, Envar("DB_HOST")] = "localhost"
    ...     port: Annotated[Int32, Envar("DB_PORT")] = Int32(5432)
    >>> config = load_envars(DatabaseConfig)
"""

from __future__ import annotations

import logging
import os
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from omnibase_envars.binding.field_binding import FieldBinding, discover_field_bindings
from omnibase_envars.binding.field_binding_cache import get_field_binding_cache
from omnibase_envars.binding.model_envar_settings import ModelEnvarSettings
from omnibase_envars.conversion.envar_type_converter import EnvarTypeConverter
from omnibase_envars.errors import (
    EnvarConversionError,
    EnvarValidationError,
    ModelEnvarErrorContext,
    ReadOnlyTargetError,
)
from omnibase_envars.models.model_culture import ModelCulture
from omnibase_envars.protocols import ProtocolEnvarConverter
from omnibase_envars.types import CultureInput, EnvironSource

logger = logging.getLogger(__name__)

_T = TypeVar("_T")

_DEFAULT_CONVERTER = EnvarTypeConverter()


def _binding_context(binding: FieldBinding, operation: str) -> ModelEnvarErrorContext:
    return ModelEnvarErrorContext(
        operation=operation,
        owner_type_name=binding.owner.__name__,
        field_name=binding.field_name,
        source_name=binding.source_name,
        target_type_name=binding.field_type_name,
    )


def _read_only(binding: FieldBinding) -> ReadOnlyTargetError:
    return ReadOnlyTargetError(
        f"Field '{binding.field_name}' on '{binding.owner.__name__}' with the "
        "Envar marker does not have an accessible setter",
        context=_binding_context(binding, "bind"),
    )


def _conversion_failed(binding: FieldBinding, raw_value: str) -> EnvarConversionError:
    return EnvarConversionError(
        f"Failed to convert environment variable '{binding.source_name}' "
        f"with value '{raw_value}' to type '{binding.field_type_name}' "
        f"for field '{binding.field_name}'",
        context=_binding_context(binding, "bind"),
        raw_value=raw_value,
    )


def _validation_input(instance: BaseModel) -> dict[str, object]:
    # Declared fields only: exclude=True fields stay in, computed fields stay out
    data: dict[str, object] = {
        (field.alias or name): getattr(instance, name)
        for name, field in type(instance).model_fields.items()
    }
    if instance.__pydantic_extra__:
        data.update(instance.__pydantic_extra__)
    return data


def bind(
    instance: object,
    converter: ProtocolEnvarConverter | None = None,
    culture: CultureInput | None = None,
    *,
    environ: EnvironSource | None = None,
) -> None:
    """Populate the Envar-marked fields of ``instance`` in place.

    Args:
        instance: Object whose class declares Envar-marked fields.
        converter: Conversion strategy; defaults to EnvarTypeConverter.
        culture: ModelCulture or locale identifier; defaults to invariant.
        environ: Variable source; defaults to ``os.environ``.

    Raises:
        ReadOnlyTargetError: A marked field cannot be assigned.
        EnvarConversionError: A present value failed to convert.
        EnvarDeclarationError: The class declarations are malformed.
    """
    if instance is None:
        raise TypeError("Cannot bind environment variables to None")

    active_converter = converter if converter is not None else _DEFAULT_CONVERTER
    active_culture = ModelCulture.resolve(culture)
    source = os.environ if environ is None else environ
    owner = type(instance)
    bindings = get_field_binding_cache().get_or_create(owner, discover_field_bindings)

    bound = 0
    for binding in bindings:
        if not binding.writable:
            raise _read_only(binding)

        raw_value = source.get(binding.source_name)
        if raw_value is None:
            logger.debug(
                "Environment variable %s is not set, keeping %s.%s",
                binding.source_name,
                owner.__name__,
                binding.field_name,
            )
            continue

        try:
            converted = active_converter.convert(
                raw_value, binding.field_type, active_culture
            )
        except Exception as e:
            raise _conversion_failed(binding, raw_value) from e

        try:
            setattr(instance, binding.field_name, converted)
        except AttributeError as e:
            raise _read_only(binding) from e
        except ValueError as e:
            # pydantic ValidationError from validate_assignment
            raise _conversion_failed(binding, raw_value) from e
        bound += 1

    logger.debug(
        "Bound %d of %d envar field(s) on %s", bound, len(bindings), owner.__name__
    )


def bind_envars(
    instance: _T,
    settings: ModelEnvarSettings | None = None,
    *,
    environ: EnvironSource | None = None,
) -> _T:
    """Bind ``instance`` with ``settings`` and return it for chaining."""
    settings = settings if settings is not None else ModelEnvarSettings()
    bind(instance, settings.converter, settings.culture, environ=environ)
    return instance


def load_envars(
    cls: type[_T],
    settings: ModelEnvarSettings | None = None,
    *,
    environ: EnvironSource | None = None,
    validate: bool = False,
) -> _T:
    """Instantiate ``cls`` with no arguments and bind it.

    Args:
        cls: Configuration class with a no-argument constructor.
        settings: Converter and culture; defaults to ModelEnvarSettings().
        environ: Variable source; defaults to ``os.environ``.
        validate: Re-validate a pydantic model after binding, so field
            constraints (``Field(gt=0)``, validators) apply to bound values.

    Raises:
        EnvarValidationError: ``validate`` is set and the bound model is invalid.
        TypeError: ``validate`` is set and ``cls`` is not a pydantic model.
    """
    if validate and not (isinstance(cls, type) and issubclass(cls, BaseModel)):
        raise TypeError(f"validate=True requires a pydantic model, got '{cls.__name__}'")

    instance = bind_envars(cls(), settings, environ=environ)
    if not validate:
        return instance

    assert isinstance(instance, BaseModel)
    try:
        return cls.model_validate(_validation_input(instance))  # type: ignore[attr-defined, no-any-return]
    except ValidationError as e:
        raise EnvarValidationError(
            f"Configuration '{cls.__name__}' failed validation with "
            f"{e.error_count()} error(s)",
            context=ModelEnvarErrorContext(
                operation="validate",
                owner_type_name=cls.__name__,
            ),
            errors=e.errors(include_input=False),
        ) from e


__all__ = [
    "bind",
    "bind_envars",
    "load_envars",
]
