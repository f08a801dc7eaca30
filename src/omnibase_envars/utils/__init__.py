# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Utility modules for omnibase_envars.

This package provides the grammars and annotation helpers behind the type
converter:
    - util_number_parsing: Culture-aware integer and float grammar
    - util_temporal_parsing: Duration, timestamp, date and time grammar
    - util_type_introspection: Annotated/Optional unwrapping and type naming
"""

from omnibase_envars.utils.util_number_parsing import (
    match_special_float,
    normalize_float,
    normalize_integer,
)
from omnibase_envars.utils.util_temporal_parsing import (
    parse_date,
    parse_datetime,
    parse_duration,
    parse_time,
)
from omnibase_envars.utils.util_type_introspection import (
    describe_type,
    is_read_only_qualifier,
    resolve_conversion_target,
    strip_annotated,
    unwrap_optional,
)

__all__: list[str] = [
    "describe_type",
    "is_read_only_qualifier",
    "match_special_float",
    "normalize_float",
    "normalize_integer",
    "parse_date",
    "parse_datetime",
    "parse_duration",
    "parse_time",
    "resolve_conversion_target",
    "strip_annotated",
    "unwrap_optional",
]
