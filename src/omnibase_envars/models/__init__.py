# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared models for omnibase_envars.

Exports:
    ModelCulture: Locale conventions for numeric and temporal parsing

ModelEnvarSettings lives in omnibase_envars.binding because it references
the converter strategy, which itself depends on this package.
"""

from omnibase_envars.models.model_culture import ModelCulture

__all__: list[str] = [
    "ModelCulture",
]
