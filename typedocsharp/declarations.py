"""
Walks a TypeDoc project and builds the top-level C# entities it declares.
"""

import re
from typing import List, Optional

from typedocsharp.comments import get_comment
from typedocsharp.common import pascal
from typedocsharp.config import TypedocConfig
from typedocsharp.diagnostics import ConsoleDiagnostics, Diagnostics
from typedocsharp.entity import (ClassInterfaceEntity, ConstructorEntity, EnumEntity, EnumMemberEntity, Entity,
                                 EventEntity, MethodEntity, PropertyEntity, StringUnionEntity, TypealiasEntity,
                                 TypeEntity, object_type)
from typedocsharp.signatures import get_generic_type_parameters, get_method_parameters, get_modifiers
from typedocsharp.typedoc import Reflection, ReflectionKind, TypeDescriptor
from typedocsharp.typeresolver import VOID_TYPE, TypeResolver

CONTAINER_KINDS = (ReflectionKind.GLOBAL, ReflectionKind.EXTERNAL_MODULE, ReflectionKind.MODULE)


class DeclarationConverter:
    """ Converts TypeDoc declarations into entities """

    def __init__(self, config: Optional[TypedocConfig] = None, diagnostics: Optional[Diagnostics] = None) -> None:
        self.config = config or TypedocConfig()
        self.diagnostics = diagnostics or ConsoleDiagnostics()
        self.resolver = TypeResolver(self.config, self.diagnostics)

    def convert(self, project: Reflection) -> List[Entity]:
        """ Returns the enums, classes, interfaces and type aliases of a project in document order """
        return self.convert_children(project, self.config.namespace)

    def convert_children(self, node: Reflection, namespace: str) -> List[Entity]:
        entities: List[Entity] = []
        for child in node.children or []:
            if child.kind in CONTAINER_KINDS:
                entities.extend(self.convert_children(child, self.module_namespace(namespace, child.name)))
            elif child.kind == ReflectionKind.ENUM:
                entities.append(self.convert_enum(child, namespace))
            elif child.kind in (ReflectionKind.CLASS, ReflectionKind.INTERFACE):
                entities.append(self.convert_class_or_interface(child, namespace))
            elif child.kind == ReflectionKind.TYPE_ALIAS:
                entities.append(self.convert_type_alias(child, namespace))
        return entities

    def module_namespace(self, namespace: str, module_name: Optional[str]) -> str:
        """ Appends a module name such as '"src/util-types"' to a namespace as 'Src.UtilTypes' """
        segments = [s for s in re.split(r'[/\\.]', (module_name or '').strip('"\'')) if s]
        segments = [re.sub(r'[^A-Za-z0-9_\-]', '_', s) for s in segments]
        if not segments:
            return namespace
        suffix = '.'.join(pascal(s) for s in segments)
        return f"{namespace}.{suffix}" if namespace else suffix

    def convert_enum(self, node: Reflection, namespace: str) -> EnumEntity:
        members = [EnumMemberEntity(c.id, c.name or '', get_comment(c), c.default_value)
                   for c in node.children or [] if c.kind == ReflectionKind.ENUM_MEMBER]
        return EnumEntity(node.id, namespace, node.name or '', get_comment(node), get_modifiers(node.flags), members)

    def convert_class_or_interface(self, node: Reflection, namespace: str) -> ClassInterfaceEntity:
        """ Converts a class or interface with its members and base types """
        members: List[Entity] = []
        for child in node.children or []:
            if child.kind == ReflectionKind.CONSTRUCTOR:
                members.extend(self.convert_constructor(node, child))
            elif child.kind == ReflectionKind.PROPERTY:
                members.append(self.convert_property(child))
            elif child.kind == ReflectionKind.METHOD:
                members.extend(self.convert_method(child))
            elif child.kind == ReflectionKind.ACCESSOR:
                members.append(self.convert_accessor(child))
            elif child.kind == ReflectionKind.EVENT:
                members.append(self.convert_event(child))
        inherited_froms = [self.resolver.get_type(t) for t in (node.extended_types or []) + (node.implemented_types or [])]
        return ClassInterfaceEntity(
            node.id, namespace, node.name or '', get_comment(node), get_modifiers(node.flags), members,
            inherited_froms, get_generic_type_parameters(node.type_parameters),
            node.kind == ReflectionKind.INTERFACE)

    def convert_constructor(self, owner: Reflection, node: Reflection) -> List[ConstructorEntity]:
        return [ConstructorEntity(s.id, owner.name or '', get_comment(s), get_modifiers(node.flags),
                                  get_method_parameters(self.config, s.parameters, self.diagnostics))
                for s in node.signatures or []]

    def convert_property(self, node: Reflection) -> PropertyEntity:
        return PropertyEntity(node.id, node.name or '', get_comment(node), get_modifiers(node.flags),
                              self.get_type_or_default(node.type, object_type()), True, True,
                              bool(node.flags.is_optional), node.default_value)

    def convert_method(self, node: Reflection) -> List[MethodEntity]:
        """ One method entity per overload signature """
        return [MethodEntity(s.id, node.name or '', get_comment(s), get_modifiers(node.flags),
                             get_generic_type_parameters(s.type_parameters),
                             get_method_parameters(self.config, s.parameters, self.diagnostics),
                             self.get_type_or_default(s.type, TypeEntity(0, VOID_TYPE, 'intrinsic', [])))
                for s in node.signatures or []]

    def convert_accessor(self, node: Reflection) -> PropertyEntity:
        """ A get/set accessor pair becomes a property with the matching accessors """
        get_signature = (node.get_signature or [None])[0]
        set_signature = (node.set_signature or [None])[0]
        property_type: Optional[TypeDescriptor] = None
        comment = ''
        if get_signature is not None:
            property_type = get_signature.type
            comment = get_comment(get_signature)
        elif set_signature is not None:
            setter_parameters = set_signature.parameters or []
            property_type = setter_parameters[0].type if setter_parameters else None
            comment = get_comment(set_signature)
        return PropertyEntity(node.id, node.name or '', comment or get_comment(node), get_modifiers(node.flags),
                              self.get_type_or_default(property_type, object_type()),
                              get_signature is not None, set_signature is not None,
                              bool(node.flags.is_optional))

    def convert_event(self, node: Reflection) -> EventEntity:
        return EventEntity(node.id, node.name or '', get_comment(node), get_modifiers(node.flags),
                           bool(node.flags.is_optional), self.get_type_or_default(node.type, object_type()))

    def convert_type_alias(self, node: Reflection, namespace: str) -> Entity:
        """ A union of string literals becomes a string union; any other alias keeps its resolved type """
        alias_type = node.type
        if alias_type is not None and alias_type.kind == 'union' and alias_type.types and \
                all(t.kind == 'stringLiteral' and t.value is not None for t in alias_type.types):
            members = [EnumMemberEntity(t.id, t.value, '', t.value) for t in alias_type.types]
            return StringUnionEntity(node.id, namespace, node.name or '', get_comment(node),
                                     get_modifiers(node.flags), members)
        return TypealiasEntity(node.id, namespace, node.name or '', get_comment(node),
                               self.get_type_or_default(alias_type, object_type()))

    def get_type_or_default(self, type_info: Optional[TypeDescriptor], default: Entity) -> Entity:
        if isinstance(type_info, TypeDescriptor):
            return self.resolver.get_type(type_info)
        return default


def convert_declarations(project: Reflection, config: Optional[TypedocConfig] = None,
                         diagnostics: Optional[Diagnostics] = None) -> List[Entity]:
    """ Builds the top-level entities of a TypeDoc project """
    return DeclarationConverter(config, diagnostics).convert(project)
