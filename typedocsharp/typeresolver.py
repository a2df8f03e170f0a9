""" TypeResolver class for mapping TypeDoc type descriptors to C# type entities """

from typing import Any, Dict, List, Optional, Union

from typedocsharp.config import TypedocConfig
from typedocsharp.diagnostics import ConsoleDiagnostics, Diagnostics
from typedocsharp.entity import Entity, TypeEntity, UnionTypeEntity, object_type
from typedocsharp.typedoc import Reflection, TypeDescriptor

PROMISE_TYPE = 'System.Threading.Tasks.Task'
ASYNC_ACTION_TYPE = 'Windows.Foundation.IAsyncAction'
ASYNC_OPERATION_TYPE = 'Windows.Foundation.IAsyncOperation'
ARRAY_TYPE = 'System.Array'
TUPLE_TYPE = 'System.ValueTuple'
ACTION_TYPE = 'System.Action'
FUNC_TYPE = 'System.Func'
OBJECT_TYPE = 'object'
VOID_TYPE = 'void'

# Typed arrays carry a fixed element type; Int8Array maps to char, not sbyte.
TYPED_ARRAY_ELEMENT_TYPES: Dict[str, str] = {
    'BigUint64Array': 'ulong',
    'Uint32Array': 'uint',
    'Uint16Array': 'ushort',
    'Uint8Array': 'byte',
    'BigInt64Array': 'long',
    'Int32Array': 'int',
    'Int16Array': 'short',
    'Int8Array': 'char',
}

WELL_KNOWN_TYPES: Dict[str, str] = {
    'Promise': PROMISE_TYPE,
    'Set': 'System.Collections.Generic.ISet',
    'Map': 'System.Collections.Generic.IDictionary',
    'Array': ARRAY_TYPE,
    'Date': 'System.DateTime',
    'RegExp': 'string',
    **{name: ARRAY_TYPE for name in TYPED_ARRAY_ELEMENT_TYPES},
}


class TypeResolver:
    """ Resolves TypeDoc type descriptors into C# type entities """

    def __init__(self, config: Optional[TypedocConfig] = None, diagnostics: Optional[Diagnostics] = None) -> None:
        self.config = config or TypedocConfig()
        self.diagnostics = diagnostics or ConsoleDiagnostics()

    def map_intrinsic_to_csharp(self, name: Optional[str]) -> str:
        """ Maps TypeScript intrinsic types to C# types """
        mapping = {
            'number': self.config.number_type,
            'boolean': 'bool',
            'string': 'string',
            'void': VOID_TYPE,
            'any': self.config.any_type,
        }
        return mapping.get(name, OBJECT_TYPE) if isinstance(name, str) else OBJECT_TYPE

    def get_type(self, type_info: TypeDescriptor) -> Entity:
        """ Resolves a type descriptor, then normalizes promise results """
        container_type = self.get_container_type(type_info)
        return self.handle_promise_type(container_type, type_info)

    def get_container_type(self, type_info: TypeDescriptor) -> Entity:
        """ Resolves the outer shape of a type descriptor. Generic arguments are applied afterwards. """
        kind = type_info.kind
        if kind == 'intrinsic':
            return TypeEntity(type_info.id, self.map_intrinsic_to_csharp(type_info.name), kind, [])
        elif kind in ('reference', 'typeParameter'):
            return self.get_reference_type(type_info)
        elif kind == 'array':
            if isinstance(type_info.element_type, TypeDescriptor):
                return TypeEntity(type_info.id, ARRAY_TYPE, kind, [self.get_type(type_info.element_type)])
            return TypeEntity(type_info.id, ARRAY_TYPE, kind, [object_type()])
        elif kind == 'stringLiteral':
            return TypeEntity(type_info.id, 'string', kind, [])
        elif kind == 'tuple':
            inner_types = _descriptors(type_info.types)
            if not inner_types:
                return object_type(type_info.id, kind)
            return TypeEntity(type_info.id, TUPLE_TYPE, kind, [self.get_type(t) for t in inner_types])
        elif kind == 'union':
            inner_types = _descriptors(type_info.types)
            if not inner_types:
                return object_type(type_info.id, kind)
            return UnionTypeEntity(type_info.id, kind, [self.get_type(t) for t in inner_types])
        elif kind == 'intersection':
            return self.get_intersection_type(type_info)
        elif kind == 'reflection':
            return self.get_reflection_type(type_info)
        return object_type(type_info.id, kind)

    def get_reference_type(self, type_info: TypeDescriptor) -> TypeEntity:
        """ Maps well-known TypeScript library types; other names refer to generated declarations """
        name = type_info.name
        if not isinstance(name, str):
            return object_type(type_info.id, type_info.kind)
        if name in TYPED_ARRAY_ELEMENT_TYPES:
            element_type = TypeEntity(0, TYPED_ARRAY_ELEMENT_TYPES[name], 'intrinsic', [])
            return TypeEntity(type_info.id, WELL_KNOWN_TYPES[name], type_info.kind, [element_type])
        return TypeEntity(type_info.id, WELL_KNOWN_TYPES.get(name, name), type_info.kind, [])

    def get_intersection_type(self, type_info: TypeDescriptor) -> TypeEntity:
        """ Intersections are not synthesized. Reports the constituents and falls back to object. """
        labels = []
        for inner_type in _descriptors(type_info.types):
            resolved = self.get_type(inner_type)
            if isinstance(resolved, TypeEntity):
                labels.append(resolved.name)
            elif isinstance(resolved, UnionTypeEntity):
                labels.append('union')
            else:
                labels.append(OBJECT_TYPE)
        self.diagnostics.warning(f"Intersection type {' & '.join(labels)} is not supported.")
        return object_type(type_info.id, type_info.kind)

    def get_reflection_type(self, type_info: TypeDescriptor) -> TypeEntity:
        """ Maps function type literals to delegates; other type literals fall back to object """
        declaration = type_info.declaration
        if not isinstance(declaration, Reflection):
            return object_type(type_info.id, type_info.kind)
        signatures = _reflections(declaration.signatures)
        if len(signatures) == 1:
            return self.get_delegate_type(type_info, signatures[0])
        children = _reflections(declaration.children)
        if children:
            member_names = ', '.join(child.name or '' for child in children)
            self.diagnostics.warning(f"Type literal {{ {member_names} }} is not supported.")
        return object_type(type_info.id, type_info.kind)

    def get_delegate_type(self, type_info: TypeDescriptor, signature: Reflection) -> TypeEntity:
        """ Builds System.Action or System.Func from a call signature """
        parameter_types = [self.get_type(p.type) for p in _reflections(signature.parameters)
                           if isinstance(p.type, TypeDescriptor)]
        if isinstance(signature.type, TypeDescriptor):
            return_type = self.get_type(signature.type)
        else:
            return_type = TypeEntity(0, VOID_TYPE, 'intrinsic', [])
        # a parameterless delegate is always an Action, even when it returns a value
        if not parameter_types:
            return TypeEntity(type_info.id, ACTION_TYPE, type_info.kind, [])
        if _is_void(return_type):
            return TypeEntity(type_info.id, ACTION_TYPE, type_info.kind, parameter_types)
        return TypeEntity(type_info.id, FUNC_TYPE, type_info.kind, parameter_types + [return_type])

    def handle_promise_type(self, container_type: Entity, type_info: TypeDescriptor) -> Entity:
        """
        Applies the generic arguments of a descriptor to its resolved container.

        Promise containers are rewritten into Task (or WinRT async) types; unions
        are normalized alternative by alternative against the same descriptor.
        For any other container, generic arguments given on the descriptor
        replace the inner types resolved so far.

        Args:
            container_type (Entity): The entity resolved from the descriptor's shape.
            type_info (TypeDescriptor): The descriptor the container was resolved from.

        Returns:
            Entity: The normalized entity.
        """
        if isinstance(container_type, UnionTypeEntity):
            return UnionTypeEntity(container_type.id, container_type.type_id,
                                   [self.handle_promise_type(t, type_info) for t in container_type.types])
        if not isinstance(container_type, TypeEntity):
            return object_type(type_info.id, type_info.kind)

        inner_types = self.get_generic_type_arguments(type_info.type_arguments)
        if container_type.name == PROMISE_TYPE:
            if not inner_types:
                return container_type
            result_type = inner_types[0]
            if _is_void(result_type):
                name = ASYNC_ACTION_TYPE if self.config.use_winrt_promise else PROMISE_TYPE
                return TypeEntity(container_type.id, name, container_type.type_id, [])
            if not isinstance(result_type, TypeEntity):
                # unions keep the plain Task container
                return TypeEntity(container_type.id, PROMISE_TYPE, container_type.type_id, [result_type])
            result_inner_types = list(result_type.inner_types) or [result_type]
            name = ASYNC_OPERATION_TYPE if self.config.use_winrt_promise else PROMISE_TYPE
            return TypeEntity(container_type.id, name, container_type.type_id, result_inner_types)
        if inner_types:
            return TypeEntity(container_type.id, container_type.name, container_type.type_id, inner_types)
        return container_type

    def get_generic_type_arguments(self, type_infos: Optional[List[TypeDescriptor]]) -> List[Entity]:
        """ Resolves a list of generic type arguments in order """
        return [self.get_type(t) for t in _descriptors(type_infos)]


def _descriptors(value: Any) -> List[TypeDescriptor]:
    if not isinstance(value, list):
        return []
    return [t for t in value if isinstance(t, TypeDescriptor)]


def _reflections(value: Any) -> List[Reflection]:
    if not isinstance(value, list):
        return []
    return [r for r in value if isinstance(r, Reflection)]


def _is_void(entity: Entity) -> bool:
    return isinstance(entity, TypeEntity) and entity.name == VOID_TYPE


def resolve_type(type_info: Union[TypeDescriptor, Dict[str, Any]], config: Optional[TypedocConfig] = None,
                 diagnostics: Optional[Diagnostics] = None) -> Entity:
    """
    Resolves a TypeDoc type descriptor into a C# type entity.

    Args:
        type_info: The descriptor, either parsed or as decoded TypeDoc JSON.
        config: Conversion options. Defaults apply when omitted.
        diagnostics: Sink for warnings. Warnings go to stderr when omitted.

    Returns:
        Entity: A TypeEntity or UnionTypeEntity.
    """
    if isinstance(type_info, dict):
        type_info = TypeDescriptor.from_json(type_info)
    elif not isinstance(type_info, TypeDescriptor):
        return object_type()
    return TypeResolver(config, diagnostics).get_type(type_info)
