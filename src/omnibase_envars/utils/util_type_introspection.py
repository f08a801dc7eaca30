# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Type annotation helpers for the converter and binder.

Field annotations reach the converter in several shapes: a bare class,
``Optional[T]`` / ``T | None``, or any of those wrapped in
``Annotated[..., metadata]``. These helpers reduce an annotation to the
class the converter dispatches on and produce readable type names for
error messages.
"""

from __future__ import annotations

import types
from typing import Annotated, ClassVar, Final, Union, get_args, get_origin

_NONE_TYPE = type(None)


def strip_annotated(annotation: object) -> tuple[object, tuple[object, ...]]:
    """Split ``Annotated[T, *metadata]`` into ``(T, metadata)``.

    Non-annotated input is returned unchanged with empty metadata.
    """
    if get_origin(annotation) is Annotated:
        return annotation.__origin__, tuple(annotation.__metadata__)  # type: ignore[attr-defined]
    return annotation, ()


def is_union(annotation: object) -> bool:
    origin = get_origin(annotation)
    return origin is Union or origin is types.UnionType


def unwrap_optional(annotation: object) -> tuple[object, bool]:
    """Unwrap ``Optional[T]`` to ``(T, True)``.

    Unions with more than one non-None member are returned unchanged with
    ``False``; the caller decides how to report them.
    """
    if not is_union(annotation):
        return annotation, False
    members = get_args(annotation)
    non_none = [member for member in members if member is not _NONE_TYPE]
    if len(non_none) == 1 and len(non_none) != len(members):
        return non_none[0], True
    return annotation, False


def resolve_conversion_target(annotation: object) -> object:
    """Reduce a declared annotation to the type the converter dispatches on.

    ``Annotated`` layers are removed on both sides of an ``Optional``, so
    ``Annotated[int | None, ...]`` and ``Optional[Annotated[int, ...]]`` both
    resolve to ``int``.
    """
    target, _ = strip_annotated(annotation)
    target, _ = unwrap_optional(target)
    target, _ = strip_annotated(target)
    return target


def is_read_only_qualifier(annotation: object) -> bool:
    """Return True for ``ClassVar[...]`` and ``Final[...]`` annotations."""
    target, _ = strip_annotated(annotation)
    return target is ClassVar or target is Final or get_origin(target) in (ClassVar, Final)


def describe_type(annotation: object) -> str:
    """Return a short human-readable name for a type annotation.

    Example:
        >>> describe_type(int)
        'int'
        >>> describe_type(int | None)
        'int | None'
    """
    if isinstance(annotation, type):
        return annotation.__name__
    return repr(annotation).replace("typing.", "")


__all__ = [
    "describe_type",
    "is_read_only_qualifier",
    "is_union",
    "resolve_conversion_target",
    "strip_annotated",
    "unwrap_optional",
]
