"""
Builders for the parameter, type parameter and modifier lists of a declaration.
"""

from typing import List, Optional

from typedocsharp.config import TypedocConfig
from typedocsharp.diagnostics import Diagnostics
from typedocsharp.entity import ParameterEntity, TypeParameterEntity, object_type
from typedocsharp.typedoc import Reflection, ReflectionFlags, ReflectionKind, TypeDescriptor
from typedocsharp.typeresolver import TypeResolver

MODIFIER_FLAGS = [
    ('public', 'is_public'),
    ('abstract', 'is_abstract'),
    ('private', 'is_private'),
    ('protected', 'is_protected'),
    ('static', 'is_static'),
]


def _nodes_of_kind(nodes: Optional[List[Reflection]], kind: ReflectionKind) -> List[Reflection]:
    if not isinstance(nodes, list):
        return []
    return [n for n in nodes if isinstance(n, Reflection) and n.kind == kind]


def get_method_parameters(config: TypedocConfig, parameters: Optional[List[Reflection]],
                          diagnostics: Optional[Diagnostics] = None) -> List[ParameterEntity]:
    """
    Maps the parameter nodes among a declaration's children to parameter entities.

    Nodes of other kinds are skipped. A parameter without a type becomes 'object'.

    Args:
        config (TypedocConfig): Conversion options.
        parameters (List[Reflection]): Sibling nodes of the declaration.
        diagnostics (Diagnostics): Sink for warnings raised while resolving types.

    Returns:
        List[ParameterEntity]: The parameters in declaration order.
    """
    resolver = TypeResolver(config, diagnostics)
    result = []
    for node in _nodes_of_kind(parameters, ReflectionKind.PARAMETER):
        name = node.name if isinstance(node.name, str) else ''
        if isinstance(node.type, TypeDescriptor):
            type_entity = resolver.get_type(node.type)
        else:
            type_entity = object_type()
        result.append(ParameterEntity(node.id, name, type_entity))
    return result


def get_generic_type_parameters(nodes: Optional[List[Reflection]]) -> List[TypeParameterEntity]:
    """ Maps type parameter nodes to placeholders. Constraints are dropped. """
    # TODO: carry 'extends' constraints once the emitter can render where-clauses
    return [TypeParameterEntity(n.id, n.name or '') for n in _nodes_of_kind(nodes, ReflectionKind.TYPE_PARAMETER)]


def get_modifiers(flags: Optional[ReflectionFlags]) -> List[str]:
    """ Returns the C# modifiers set on a reflection, in canonical order """
    if flags is None:
        return []
    return [keyword for keyword, attr in MODIFIER_FLAGS if getattr(flags, attr, None) is True]
