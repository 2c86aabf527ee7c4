"""Named field lookup on decoded response models."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel

from equinix_rest.client.errors import (
    FieldNotFoundError,
    KindMismatchError,
    ShapeError,
)


class FieldKind(str, Enum):
    """Kind of value a named field is expected to hold."""

    INTEGER = "integer"
    SEQUENCE = "sequence"
    STRUCTURE = "structure"

    def matches(self, value: Any) -> bool:
        if self is FieldKind.INTEGER:
            return isinstance(value, int) and not isinstance(value, bool)
        if self is FieldKind.SEQUENCE:
            return isinstance(value, (list, tuple))
        return isinstance(value, BaseModel)


def _kind_of(value: Any) -> str:
    if value is None:
        return "null"
    for kind in FieldKind:
        if kind.matches(value):
            return kind.value
    return type(value).__name__


def _resolve_field_name(model: type[BaseModel], field_name: str) -> str | None:
    fields = model.model_fields
    if field_name in fields:
        return field_name
    for name, info in fields.items():
        if info.alias == field_name:
            return name
    return None


def extract_field(container: Any, field_name: str, expected_kind: FieldKind) -> Any:
    """Return the value of *field_name* on *container*.

    The field is matched by its exact attribute name, falling back to its
    alias. A ``None`` value counts as a kind mismatch.
    """
    if not isinstance(container, BaseModel):
        raise ShapeError(
            f"provided target is not a structured model: {type(container).__name__}"
        )
    model = type(container)
    name = _resolve_field_name(model, field_name)
    if name is None:
        raise FieldNotFoundError(field_name, model.__name__)
    value = getattr(container, name)
    if not expected_kind.matches(value):
        raise KindMismatchError(field_name, expected_kind.value, _kind_of(value))
    return value
