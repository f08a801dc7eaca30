# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Type aliases shared by the binder, converter and settings models.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from omnibase_envars.models.model_culture import ModelCulture

# Anything that answers "what is the value of variable X": os.environ or a snapshot
EnvironSource: TypeAlias = Mapping[str, str]

# A culture model or a locale identifier such as "de_DE" / "de-DE"
CultureInput: TypeAlias = "ModelCulture | str"
