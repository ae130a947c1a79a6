"""
DTO <-> domain entity copying.

The shapes are near 1:1, so mapping is a field copy: an entity takes
every DTO attribute it declares (child lists are ignored), and a DTO is
validated straight from the entity's attributes.
"""

from dataclasses import fields
from typing import Iterable, TypeVar

from pydantic import BaseModel

E = TypeVar("E")
D = TypeVar("D", bound=BaseModel)

_AUDIT_FIELDS = {"created_at", "modified_at"}


def to_entity(entity_cls: type[E], dto: BaseModel) -> E:
    """Build a fresh entity from a DTO; audit timestamps are set to now."""
    values = {
        f.name: getattr(dto, f.name)
        for f in fields(entity_cls)
        if f.name not in _AUDIT_FIELDS and hasattr(dto, f.name)
    }
    return entity_cls(**values)


def to_dto(dto_cls: type[D], entity) -> D | None:
    if entity is None:
        return None
    return dto_cls.model_validate(entity)


def to_dtos(dto_cls: type[D], entities: Iterable) -> list[D]:
    return [dto_cls.model_validate(e) for e in entities]
