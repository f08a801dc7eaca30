# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Binding of Envar-marked fields from the environment.

Exports:
    Envar: Field marker carrying the environment variable name
    bind: Populate an instance with an explicit converter and culture
    bind_envars: Populate an instance from ModelEnvarSettings
    load_envars: Construct and populate a configuration class
    ModelEnvarSettings: Immutable converter and culture selection
    FieldBinding: Descriptor of one discovered field
    FieldBindingCache: Per-class cache of discovered field bindings
    discover_field_bindings: Scan a class for Envar-marked fields
    get_field_binding_cache: Process-wide cache singleton
"""

from omnibase_envars.binding.envar_binder import bind, bind_envars, load_envars
from omnibase_envars.binding.envar_marker import Envar, find_envar_markers
from omnibase_envars.binding.field_binding import FieldBinding, discover_field_bindings
from omnibase_envars.binding.field_binding_cache import (
    FieldBindingCache,
    get_field_binding_cache,
)
from omnibase_envars.binding.model_envar_settings import ModelEnvarSettings

__all__: list[str] = [
    "Envar",
    "FieldBinding",
    "FieldBindingCache",
    "ModelEnvarSettings",
    "bind",
    "bind_envars",
    "discover_field_bindings",
    "find_envar_markers",
    "get_field_binding_cache",
    "load_envars",
]
