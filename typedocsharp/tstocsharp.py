# pylint: disable=line-too-long

""" TypedocToCSharp class for converting TypeDoc reflections to C# declarations """

import glob
import os
import re
from typing import Any, Dict, List, Optional

from typedocsharp.common import pascal, process_template
from typedocsharp.config import DEFAULT_NAMESPACE, TypedocConfig
from typedocsharp.declarations import DeclarationConverter
from typedocsharp.diagnostics import ConsoleDiagnostics, Diagnostics
from typedocsharp.entity import (ClassInterfaceEntity, ConstructorEntity, EnumEntity, Entity, EventEntity,
                                 MethodEntity, ParameterEntity, PropertyEntity, StringUnionEntity, TypealiasEntity,
                                 TypeEntity, TypeParameterEntity, UnionTypeEntity)
from typedocsharp.typedoc import Reflection, load_typedoc, parse_typedoc
from typedocsharp.typeresolver import ARRAY_TYPE, TUPLE_TYPE

INDENT = '    '

ACCESS_MODIFIERS = ('public', 'private', 'protected')

SIMPLE_LITERAL = re.compile(r'^(-?\d+(\.\d+)?|true|false|null|"[^"\\]*")$')


def format_type(entity: Entity) -> str:
    """ Formats a resolved type entity as a C# type expression """
    if isinstance(entity, TypeParameterEntity):
        return entity.name
    if isinstance(entity, UnionTypeEntity):
        # C# has no union types
        return 'object'
    if not isinstance(entity, TypeEntity):
        return 'object'
    if not entity.inner_types:
        return entity.name
    inner = [format_type(t) for t in entity.inner_types]
    if entity.name == ARRAY_TYPE and len(inner) == 1:
        return f"{inner[0]}[]"
    if entity.name == TUPLE_TYPE and len(inner) > 1:
        return f"({', '.join(inner)})"
    return f"{entity.name}<{', '.join(inner)}>"


def indent_lines(text: str, level: int = 1) -> str:
    return '\n'.join(f"{INDENT * level}{line}" if line else line for line in text.split('\n'))


class TypedocToCSharp:
    """ Converts TypeDoc reflections to C# source files """

    def __init__(self, config: Optional[TypedocConfig] = None, diagnostics: Optional[Diagnostics] = None) -> None:
        self.config = config or TypedocConfig()
        self.diagnostics = diagnostics or ConsoleDiagnostics()
        self.output_dir = os.getcwd()
        self.generated_files: List[str] = []

    def is_csharp_reserved_word(self, word: str) -> bool:
        """ Checks if a word is a reserved C# keyword """
        reserved_words = [
            'abstract', 'as', 'base', 'bool', 'break', 'byte', 'case', 'catch', 'char', 'checked', 'class', 'const',
            'continue', 'decimal', 'default', 'delegate', 'do', 'double', 'else', 'enum', 'event', 'explicit', 'extern',
            'false', 'finally', 'fixed', 'float', 'for', 'foreach', 'goto', 'if', 'implicit', 'in', 'int', 'interface',
            'internal', 'is', 'lock', 'long', 'namespace', 'new', 'null', 'object', 'operator', 'out', 'override',
            'params', 'private', 'protected', 'public', 'readonly', 'ref', 'return', 'sbyte', 'sealed', 'short', 'sizeof',
            'stackalloc', 'static', 'string', 'struct', 'switch', 'this', 'throw', 'true', 'try', 'typeof', 'uint', 'ulong',
            'unchecked', 'unsafe', 'ushort', 'using', 'virtual', 'void', 'volatile', 'while'
        ]
        return word in reserved_words

    def safe_identifier(self, name: str) -> str:
        """ Turns a TypeScript name into a usable C# identifier """
        name = re.sub(r'[^A-Za-z0-9_]', '_', name) or '_'
        if name[0].isdigit():
            name = '_' + name
        if self.is_csharp_reserved_word(name):
            name = '@' + name
        return name

    def member_name(self, name: str) -> str:
        return self.safe_identifier(pascal(name))

    def with_comment(self, comment: str, declaration: str) -> str:
        return f"{comment}\n{declaration}" if comment else declaration

    def member_modifiers(self, modifiers: List[str], is_interface: bool) -> str:
        """ Interface members carry no modifiers; class members default to public """
        if is_interface:
            return ''
        if not any(m in ACCESS_MODIFIERS for m in modifiers):
            modifiers = ['public'] + modifiers
        return ' '.join(modifiers) + ' '

    def format_parameters(self, parameters: List[ParameterEntity]) -> str:
        return ', '.join(f"{format_type(p.type)} {self.safe_identifier(p.name or f'arg{i}')}" for i, p in enumerate(parameters))

    def format_type_parameters(self, type_parameters: List[TypeParameterEntity]) -> str:
        if not type_parameters:
            return ''
        return '<' + ', '.join(t.name for t in type_parameters) + '>'

    def generate_member(self, member: Entity, class_name: str, is_interface: bool) -> Optional[str]:
        """ Generates the declaration of one class or interface member """
        if isinstance(member, ConstructorEntity):
            if is_interface:
                return None
            declaration = f"{self.member_modifiers(member.modifiers, False)}{class_name}({self.format_parameters(member.parameters)})\n{{\n}}"
            return self.with_comment(member.comment, declaration)
        if isinstance(member, PropertyEntity):
            property_type = format_type(member.type)
            if member.is_optional and not property_type.endswith('?'):
                property_type += '?'
            accessors = ' '.join(a for a, present in (('get;', member.with_get), ('set;', member.with_set)) if present)
            declaration = f"{self.member_modifiers(member.modifiers, is_interface)}{property_type} {self.member_name(member.name)} {{ {accessors} }}"
            if not is_interface and member.initial_value and SIMPLE_LITERAL.match(member.initial_value):
                declaration += f" = {member.initial_value};"
            return self.with_comment(member.comment, declaration)
        if isinstance(member, MethodEntity):
            signature = f"{format_type(member.return_type)} {self.member_name(member.name)}{self.format_type_parameters(member.type_parameters)}({self.format_parameters(member.parameters)})"
            if is_interface:
                declaration = f"{signature};"
            elif 'abstract' in member.modifiers:
                declaration = f"{self.member_modifiers(member.modifiers, False)}{signature};"
            else:
                declaration = f"{self.member_modifiers(member.modifiers, False)}{signature} => throw new System.NotImplementedException();"
            return self.with_comment(member.comment, declaration)
        if isinstance(member, EventEntity):
            declaration = f"{self.member_modifiers(member.modifiers, is_interface)}event {format_type(member.type)} {self.member_name(member.name)};"
            return self.with_comment(member.comment, declaration)
        return None

    def generate_class_or_interface(self, entity: ClassInterfaceEntity) -> str:
        """ Generates a class or interface definition """
        keyword = 'interface' if entity.is_interface else 'class'
        modifiers = [m for m in entity.modifiers if m in ('abstract', 'static')]
        header = ' '.join(['public'] + modifiers + ['partial', keyword, pascal(entity.name) + self.format_type_parameters(entity.type_parameters)])
        bases = [format_type(t) for t in entity.inherited_froms]
        if bases:
            header += ' : ' + ', '.join(bases)
        members = [self.generate_member(m, pascal(entity.name), entity.is_interface) for m in entity.members]
        body = '\n\n'.join(indent_lines(m) for m in members if m)
        definition = f"{header}\n{{\n{body}\n}}" if body else f"{header}\n{{\n}}"
        return self.with_comment(entity.comment, definition)

    def generate_enum(self, entity: EnumEntity) -> str:
        """ Generates an enum definition """
        members = []
        for member in entity.members:
            line = self.member_name(member.name)
            if member.value is not None and re.match(r'^-?\d+$', member.value):
                line += f" = {member.value}"
            members.append(indent_lines(self.with_comment(member.comment, line + ',')))
        definition = f"public enum {pascal(entity.name)}\n{{\n" + '\n'.join(members) + "\n}"
        return self.with_comment(entity.comment, definition)

    def generate_string_union(self, entity: StringUnionEntity) -> str:
        """ Generates an enum whose members serialize to the original string literals """
        members = []
        for member in entity.members:
            value = (member.value or '').replace('\\', '\\\\').replace('"', '\\"')
            members.append(indent_lines(f"[System.Runtime.Serialization.EnumMember(Value = \"{value}\")]\n{self.member_name(member.name)},"))
        definition = f"public enum {pascal(entity.name)}\n{{\n" + '\n'.join(members) + "\n}"
        return self.with_comment(entity.comment, definition)

    def generate_definition(self, entity: Entity) -> Optional[str]:
        if isinstance(entity, ClassInterfaceEntity):
            return self.generate_class_or_interface(entity)
        if isinstance(entity, EnumEntity):
            return self.generate_enum(entity)
        if isinstance(entity, StringUnionEntity):
            return self.generate_string_union(entity)
        return None

    def write_to_file(self, namespace: str, name: str, definition: str, usings: Optional[List[str]] = None):
        """ Writes the type definition to a file under the namespace's directory """
        directory_path = os.path.join(self.output_dir, 'src', namespace.replace('.', os.sep))
        if not os.path.exists(directory_path):
            os.makedirs(directory_path, exist_ok=True)
        file_path = os.path.join(directory_path, f"{name}.cs")
        file_content = process_template(
            "tstocsharp/file.cs.jinja",
            namespace=namespace,
            usings=usings or [],
            definition=indent_lines(definition) if namespace else definition)
        with open(file_path, 'w', encoding='utf-8') as file:
            file.write(file_content)
        self.generated_files.append(file_path)

    def write_project_file(self, output_dir: str) -> None:
        """ Writes a project file unless the output already has one """
        if glob.glob(os.path.join(output_dir, "src", "*.csproj")):
            return
        csproj_file = os.path.join(output_dir, "src", f"{pascal(self.config.namespace or DEFAULT_NAMESPACE)}.csproj")
        os.makedirs(os.path.dirname(csproj_file), exist_ok=True)
        with open(csproj_file, 'w', encoding='utf-8') as file:
            file.write(process_template("tstocsharp/project.csproj.jinja", namespace=self.config.namespace))

    def convert_project(self, project: Reflection, output_dir: str) -> List[str]:
        """ Converts a parsed TypeDoc project and returns the paths of the generated files """
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)
        self.write_project_file(output_dir)
        entities = DeclarationConverter(self.config, self.diagnostics).convert(project)
        aliases: Dict[str, List[str]] = {}
        for entity in entities:
            if isinstance(entity, TypealiasEntity):
                aliases.setdefault(entity.namespace, []).append(f"{pascal(entity.name)} = {format_type(entity.aliased_type)}")
        for entity in entities:
            definition = self.generate_definition(entity)
            if definition is None:
                continue
            namespace = getattr(entity, 'namespace', '')
            self.write_to_file(namespace, pascal(entity.name), definition, aliases.get(namespace))
        return self.generated_files

    def convert_schema(self, typedoc_doc: Any, output_dir: str) -> List[str]:
        """ Converts a decoded TypeDoc JSON document """
        return self.convert_project(parse_typedoc(typedoc_doc), output_dir)

    def convert(self, typedoc_path: str, output_dir: str) -> List[str]:
        """ Converts a TypeDoc JSON file """
        return self.convert_project(load_typedoc(typedoc_path), output_dir)


def convert_typedoc_to_csharp(typedoc_path, cs_file_path, namespace='', number_type='double', any_type='object', use_winrt_promise=False):
    """
    Converts a TypeDoc JSON file to C# source files

    Args:
        typedoc_path (str): TypeDoc JSON input path
        cs_file_path (str): Output directory
        namespace (str): Root namespace, derived from the output directory name when empty
        number_type (str): C# type used for TypeScript 'number'
        any_type (str): C# type used for TypeScript 'any'
        use_winrt_promise (bool): Map promises to WinRT async types instead of tasks
    """
    if not namespace:
        namespace = pascal(os.path.splitext(os.path.basename(os.path.normpath(cs_file_path)))[0].replace('-', '_')) or DEFAULT_NAMESPACE
    config = TypedocConfig(number_type=number_type, any_type=any_type, use_winrt_promise=use_winrt_promise, namespace=namespace)
    return TypedocToCSharp(config).convert(typedoc_path, cs_file_path)


def convert_typedoc_schema_to_csharp(typedoc_doc: Any, output_dir: str, namespace: str = DEFAULT_NAMESPACE, number_type: str = 'double', any_type: str = 'object', use_winrt_promise: bool = False, diagnostics: Optional[Diagnostics] = None):
    """
    Converts a decoded TypeDoc JSON document to C# source files

    Args:
        typedoc_doc (dict): The TypeDoc document
        output_dir (str): Output directory
        namespace (str): Root namespace for the generated types
        number_type (str): C# type used for TypeScript 'number'
        any_type (str): C# type used for TypeScript 'any'
        use_winrt_promise (bool): Map promises to WinRT async types instead of tasks
        diagnostics (Diagnostics): Sink for warnings, stderr when omitted
    """
    config = TypedocConfig(number_type=number_type, any_type=any_type, use_winrt_promise=use_winrt_promise, namespace=namespace)
    return TypedocToCSharp(config, diagnostics).convert_schema(typedoc_doc, output_dir)
