"""
Reader for TypeDoc JSON reflection documents.

Only the parts of the document that the converter consumes are modeled. The
reader is tolerant: a field whose JSON shape does not match what TypeDoc
normally writes is treated as if it were absent, and list entries that are
not JSON objects are skipped.
"""

# pylint: disable=too-many-instance-attributes

import json
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Optional

JsonNode = Dict[str, Any]


class ReflectionKind(IntEnum):
    """ TypeDoc reflection kinds """
    GLOBAL = 0
    EXTERNAL_MODULE = 1
    MODULE = 2
    ENUM = 4
    ENUM_MEMBER = 16
    VARIABLE = 32
    FUNCTION = 64
    CLASS = 128
    INTERFACE = 256
    CONSTRUCTOR = 512
    PROPERTY = 1024
    METHOD = 2048
    CALL_SIGNATURE = 4096
    INDEX_SIGNATURE = 8192
    CONSTRUCTOR_SIGNATURE = 16384
    PARAMETER = 32768
    TYPE_LITERAL = 65536
    TYPE_PARAMETER = 131072
    ACCESSOR = 262144
    GET_SIGNATURE = 524288
    SET_SIGNATURE = 1048576
    OBJECT_LITERAL = 2097152
    TYPE_ALIAS = 4194304
    EVENT = 8388608


def _str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _int(value: Any, default: int = 0) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return value


def _bool(value: Any) -> Optional[bool]:
    return value if isinstance(value, bool) else None


def _objects(value: Any) -> Optional[List[JsonNode]]:
    """ Returns the JSON objects of a list, or None when value is not a list """
    if not isinstance(value, list):
        return None
    return [item for item in value if isinstance(item, dict)]


def _object(value: Any) -> Optional[JsonNode]:
    return value if isinstance(value, dict) else None


@dataclass
class Comment:
    """ Doc comment attached to a reflection """
    short_text: str = ''
    text: Optional[str] = None
    returns: Optional[str] = None

    @classmethod
    def from_json(cls, node: JsonNode) -> 'Comment':
        return cls(
            short_text=_str(node.get('shortText')) or '',
            text=_str(node.get('text')),
            returns=_str(node.get('returns')))


@dataclass
class ReflectionFlags:
    """ Modifier flags of a reflection. Absent flags are None. """
    is_public: Optional[bool] = None
    is_abstract: Optional[bool] = None
    is_private: Optional[bool] = None
    is_protected: Optional[bool] = None
    is_static: Optional[bool] = None
    is_optional: Optional[bool] = None
    is_exported: Optional[bool] = None

    @classmethod
    def from_json(cls, node: JsonNode) -> 'ReflectionFlags':
        return cls(
            is_public=_bool(node.get('isPublic')),
            is_abstract=_bool(node.get('isAbstract')),
            is_private=_bool(node.get('isPrivate')),
            is_protected=_bool(node.get('isProtected')),
            is_static=_bool(node.get('isStatic')),
            is_optional=_bool(node.get('isOptional')),
            is_exported=_bool(node.get('isExported')))


@dataclass
class TypeDescriptor:
    """ One node of a TypeDoc type tree """
    kind: str = ''
    id: int = 0
    name: Optional[str] = None
    element_type: Optional['TypeDescriptor'] = None
    types: Optional[List['TypeDescriptor']] = None
    type_arguments: Optional[List['TypeDescriptor']] = None
    declaration: Optional['Reflection'] = None
    value: Optional[str] = None

    @classmethod
    def from_json(cls, node: JsonNode) -> 'TypeDescriptor':
        kind = _str(node.get('type')) or ''
        element_type = _object(node.get('elementType'))
        types = _objects(node.get('types'))
        if types is None and kind == 'tuple':
            # TypeDoc 0.16+ writes tuple members as 'elements'
            types = _objects(node.get('elements'))
        type_arguments = _objects(node.get('typeArguments'))
        declaration = _object(node.get('declaration'))
        return cls(
            kind=kind,
            id=_int(node.get('id')),
            name=_str(node.get('name')),
            element_type=cls.from_json(element_type) if element_type is not None else None,
            types=[cls.from_json(t) for t in types] if types is not None else None,
            type_arguments=[cls.from_json(t) for t in type_arguments] if type_arguments is not None else None,
            declaration=Reflection.from_json(declaration) if declaration is not None else None,
            value=_str(node.get('value')))


def _types(value: Any) -> Optional[List[TypeDescriptor]]:
    nodes = _objects(value)
    return [TypeDescriptor.from_json(n) for n in nodes] if nodes is not None else None


def _reflections(value: Any) -> Optional[List['Reflection']]:
    nodes = _objects(value)
    return [Reflection.from_json(n) for n in nodes] if nodes is not None else None


@dataclass
class Reflection:
    """ A declaration node of the TypeDoc document """
    id: int = 0
    name: Optional[str] = None
    kind: int = ReflectionKind.GLOBAL
    kind_string: Optional[str] = None
    flags: ReflectionFlags = field(default_factory=ReflectionFlags)
    comment: Optional[Comment] = None
    type: Optional[TypeDescriptor] = None
    default_value: Optional[str] = None
    children: Optional[List['Reflection']] = None
    signatures: Optional[List['Reflection']] = None
    parameters: Optional[List['Reflection']] = None
    type_parameters: Optional[List['Reflection']] = None
    extended_types: Optional[List[TypeDescriptor]] = None
    implemented_types: Optional[List[TypeDescriptor]] = None
    get_signature: Optional[List['Reflection']] = None
    set_signature: Optional[List['Reflection']] = None

    @classmethod
    def from_json(cls, node: JsonNode) -> 'Reflection':
        flags = _object(node.get('flags'))
        comment = _object(node.get('comment'))
        type_node = _object(node.get('type'))
        return cls(
            id=_int(node.get('id')),
            name=_str(node.get('name')),
            kind=_int(node.get('kind')),
            kind_string=_str(node.get('kindString')),
            flags=ReflectionFlags.from_json(flags) if flags is not None else ReflectionFlags(),
            comment=Comment.from_json(comment) if comment is not None else None,
            type=TypeDescriptor.from_json(type_node) if type_node is not None else None,
            default_value=_str(node.get('defaultValue')),
            children=_reflections(node.get('children')),
            signatures=_reflections(node.get('signatures')),
            parameters=_reflections(node.get('parameters')),
            type_parameters=_reflections(node.get('typeParameter') if 'typeParameter' in node else node.get('typeParameters')),
            extended_types=_types(node.get('extendedTypes')),
            implemented_types=_types(node.get('implementedTypes')),
            get_signature=_signature_list(node.get('getSignature')),
            set_signature=_signature_list(node.get('setSignature')))


def _signature_list(value: Any) -> Optional[List[Reflection]]:
    """ Accessor signatures are a list in older TypeDoc output and a single object in newer """
    if isinstance(value, dict):
        return [Reflection.from_json(value)]
    return _reflections(value)


def parse_typedoc(doc: Any) -> Reflection:
    """
    Parses a loaded TypeDoc JSON document into its project reflection.

    Args:
        doc: The decoded JSON document.

    Returns:
        Reflection: The root (project) reflection.

    Raises:
        ValueError: If the document root is not a JSON object.
    """
    if not isinstance(doc, dict):
        raise ValueError('TypeDoc document root must be a JSON object')
    return Reflection.from_json(doc)


def load_typedoc(typedoc_path: str) -> Reflection:
    """ Loads a TypeDoc JSON file and returns its project reflection """
    with open(typedoc_path, 'r', encoding='utf-8') as file:
        doc = json.load(file)
    return parse_typedoc(doc)
