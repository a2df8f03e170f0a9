"""
Entity model produced from TypeDoc reflections.

Entities are immutable. Each resolution builds a fresh tree, so no two
parents ever share a subtree.
"""

# pylint: disable=too-many-instance-attributes

from dataclasses import dataclass, field, fields
from typing import Any, List, Optional


class Entity:
    """ Base class of all entities """

    def to_json(self) -> Any:
        """ Returns the entity as a plain JSON tree tagged with the entity class name """
        return _to_json(self)


def _to_json(value: Any) -> Any:
    if isinstance(value, Entity):
        node = {'entity': type(value).__name__}
        for f in fields(value):
            node[f.name] = _to_json(getattr(value, f.name))
        return node
    if isinstance(value, (list, tuple)):
        return [_to_json(v) for v in value]
    return value


@dataclass(frozen=True)
class TypeEntity(Entity):
    """ A named type, optionally with generic arguments or element types """
    id: int
    name: str
    type_id: str
    inner_types: List[Entity] = field(default_factory=list)


@dataclass(frozen=True)
class UnionTypeEntity(Entity):
    """ A union of alternative types, in source order """
    id: int
    type_id: str
    types: List[Entity] = field(default_factory=list)


@dataclass(frozen=True)
class TypeParameterEntity(Entity):
    """ A generic type parameter. Constraints are not modeled. """
    id: int
    name: str


@dataclass(frozen=True)
class ParameterEntity(Entity):
    id: int
    name: str
    type: Entity


@dataclass(frozen=True)
class ConstructorEntity(Entity):
    id: int
    name: str
    comment: str
    modifiers: List[str]
    parameters: List[ParameterEntity]


@dataclass(frozen=True)
class PropertyEntity(Entity):
    id: int
    name: str
    comment: str
    modifiers: List[str]
    type: Entity
    with_get: bool
    with_set: bool
    is_optional: bool
    initial_value: Optional[str] = None


@dataclass(frozen=True)
class EventEntity(Entity):
    id: int
    name: str
    comment: str
    modifiers: List[str]
    is_optional: bool
    type: Entity


@dataclass(frozen=True)
class EnumMemberEntity(Entity):
    id: int
    name: str
    comment: str
    value: Optional[str] = None


@dataclass(frozen=True)
class MethodEntity(Entity):
    id: int
    name: str
    comment: str
    modifiers: List[str]
    type_parameters: List[TypeParameterEntity]
    parameters: List[ParameterEntity]
    return_type: Entity


@dataclass(frozen=True)
class EnumEntity(Entity):
    id: int
    namespace: str
    name: str
    comment: str
    modifiers: List[str]
    members: List[EnumMemberEntity]


@dataclass(frozen=True)
class ClassInterfaceEntity(Entity):
    id: int
    namespace: str
    name: str
    comment: str
    modifiers: List[str]
    members: List[Entity]
    inherited_froms: List[Entity]
    type_parameters: List[TypeParameterEntity]
    is_interface: bool


@dataclass(frozen=True)
class StringUnionEntity(Entity):
    """ A type alias over string literals, emitted as an enum """
    id: int
    namespace: str
    name: str
    comment: str
    modifiers: List[str]
    members: List[EnumMemberEntity]


@dataclass(frozen=True)
class TypealiasEntity(Entity):
    id: int
    namespace: str
    name: str
    comment: str
    aliased_type: Entity


def object_type(entity_id: int = 0, type_id: str = 'intrinsic') -> TypeEntity:
    """ The opaque 'object' placeholder """
    return TypeEntity(entity_id, 'object', type_id, [])
