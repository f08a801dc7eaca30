# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Field binding descriptors and their discovery.

``discover_field_bindings`` scans a configuration class once and records,
for every field carrying an ``Envar`` marker, which variable feeds it, what
type it is declared as, and whether it can be assigned at all. The result is
cached per class by FieldBindingCache; the scan itself is never repeated for
the same class.

Annotations are evaluated class by class along the reversed MRO, so base-class
fields come first and each class contributes its fields in declaration
order. A field redeclared in a subclass keeps its base-class position and
takes the subclass annotation. Builtins and pydantic framework bases are
skipped.
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
from dataclasses import dataclass
from typing import ClassVar, Final, get_args, get_origin

from pydantic import BaseModel

from omnibase_envars.binding.envar_marker import Envar, find_envar_markers
from omnibase_envars.errors import EnvarDeclarationError, ModelEnvarErrorContext
from omnibase_envars.utils.util_type_introspection import (
    describe_type,
    is_read_only_qualifier,
    is_union,
    strip_annotated,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FieldBinding:
    """Immutable description of one marked field.

    Attributes:
        owner: The class the field was discovered on
        field_name: Attribute name used with ``setattr``
        source_name: Environment variable name (never empty)
        field_type: Declared annotation without the outer ``Annotated`` layer
        writable: False for properties without setter, frozen models and
            dataclasses, frozen pydantic fields, ``ClassVar`` and ``Final``
    """

    owner: type
    field_name: str
    source_name: str
    field_type: object
    writable: bool

    @property
    def field_type_name(self) -> str:
        return describe_type(self.field_type)


def _collect_markers(annotation: object) -> tuple[object, list[Envar]]:
    target, metadata = strip_annotated(annotation)
    markers = find_envar_markers(metadata)
    if get_origin(target) in (ClassVar, Final) and get_args(target):
        target, inner = strip_annotated(get_args(target)[0])
        markers.extend(find_envar_markers(inner))
    # Optional[Annotated[T, Envar(...)]] carries the marker inside the union
    if is_union(target):
        for member in get_args(target):
            markers.extend(find_envar_markers(strip_annotated(member)[1]))
    return target, markers


def _is_writable(owner: type, field_name: str, annotation: object) -> bool:
    if is_read_only_qualifier(annotation):
        return False
    if dataclasses.is_dataclass(owner) and owner.__dataclass_params__.frozen:  # type: ignore[attr-defined]
        return False
    if issubclass(owner, BaseModel):
        if owner.model_config.get("frozen"):
            return False
        field_info = owner.model_fields.get(field_name)
        if field_info is not None and field_info.frozen:
            return False
    attribute = inspect.getattr_static(owner, field_name, None)
    if isinstance(attribute, property):
        return attribute.fset is not None
    return True


def _is_framework_base(klass: type) -> bool:
    # BaseModel annotates with names imported only under TYPE_CHECKING
    module = klass.__module__
    return module == "builtins" or module.partition(".")[0] == "pydantic"


def _collect_annotations(owner: type) -> dict[str, object]:
    annotations: dict[str, object] = {}
    for klass in reversed(owner.__mro__):
        if _is_framework_base(klass):
            continue
        try:
            own = inspect.get_annotations(klass, eval_str=True)
        except (NameError, TypeError, AttributeError, SyntaxError) as e:
            raise EnvarDeclarationError(
                f"Unable to resolve field annotations of '{klass.__name__}'",
                context=ModelEnvarErrorContext(
                    operation="discover",
                    owner_type_name=owner.__name__,
                ),
            ) from e
        annotations.update(own)
    return annotations


def discover_field_bindings(owner: type) -> tuple[FieldBinding, ...]:
    """Scan ``owner`` for Envar-marked fields.

    String annotations (``from __future__ import annotations``) are evaluated
    against each class's module globals and class namespace only. A class
    defined inside a function cannot refer to names local to that function;
    declare such types at module level.

    Raises:
        EnvarDeclarationError: If annotations cannot be resolved or a field
            carries more than one Envar marker.
    """
    annotations = _collect_annotations(owner)

    bindings: list[FieldBinding] = []
    for field_name, annotation in annotations.items():
        field_type, markers = _collect_markers(annotation)
        if not markers:
            continue
        if len(markers) > 1:
            raise EnvarDeclarationError(
                f"Field '{field_name}' on '{owner.__name__}' declares "
                f"{len(markers)} Envar markers; exactly one is allowed",
                context=ModelEnvarErrorContext(
                    operation="discover",
                    owner_type_name=owner.__name__,
                    field_name=field_name,
                ),
            )
        bindings.append(
            FieldBinding(
                owner=owner,
                field_name=field_name,
                source_name=markers[0].name,
                field_type=field_type,
                writable=_is_writable(owner, field_name, annotation),
            )
        )

    logger.debug(
        "Discovered %d envar field(s) on %s", len(bindings), owner.__qualname__
    )
    return tuple(bindings)


__all__ = ["FieldBinding", "discover_field_bindings"]
