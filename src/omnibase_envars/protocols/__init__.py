# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Protocols for omnibase_envars.

Exports:
    ProtocolEnvarConverter: Converter strategy used by the binder
    ProtocolStringConverter: Custom from-string capability a type can declare
"""

from omnibase_envars.protocols.protocol_envar_converter import ProtocolEnvarConverter
from omnibase_envars.protocols.protocol_string_converter import (
    ProtocolStringConverter,
)

__all__: list[str] = [
    "ProtocolEnvarConverter",
    "ProtocolStringConverter",
]
