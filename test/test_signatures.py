import os
import sys
import unittest

current_script_path = os.path.abspath(__file__)
project_root = os.path.dirname(os.path.dirname(current_script_path))
sys.path.append(project_root)

from typedocsharp.config import TypedocConfig
from typedocsharp.diagnostics import CollectingDiagnostics
from typedocsharp.entity import ParameterEntity, TypeEntity, TypeParameterEntity
from typedocsharp.signatures import get_generic_type_parameters, get_method_parameters, get_modifiers
from typedocsharp.typedoc import Reflection, ReflectionFlags


def node(json_node):
    return Reflection.from_json(json_node)


class TestMethodParameters(unittest.TestCase):

    def test_parameters_keep_order_and_skip_other_kinds(self):
        nodes = [
            node({"id": 1, "name": "first", "kind": 32768, "type": {"type": "intrinsic", "name": "number"}}),
            node({"id": 2, "name": "T", "kind": 131072}),
            node({"id": 3, "name": "second", "kind": 32768, "type": {"type": "reference", "name": "Widget"}}),
        ]
        parameters = get_method_parameters(TypedocConfig(number_type="int"), nodes, CollectingDiagnostics())
        self.assertEqual(parameters, [
            ParameterEntity(1, "first", TypeEntity(0, "int", "intrinsic", [])),
            ParameterEntity(3, "second", TypeEntity(0, "Widget", "reference", [])),
        ])

    def test_untyped_parameter_is_object(self):
        parameters = get_method_parameters(TypedocConfig(), [node({"id": 5, "name": "value", "kind": 32768})])
        self.assertEqual(parameters, [ParameterEntity(5, "value", TypeEntity(0, "object", "intrinsic", []))])

    def test_missing_name_is_empty(self):
        parameters = get_method_parameters(TypedocConfig(), [node({"id": 6, "kind": 32768, "type": {"type": "intrinsic", "name": "string"}})])
        self.assertEqual(parameters[0].name, "")

    def test_warnings_go_to_the_given_sink(self):
        diagnostics = CollectingDiagnostics()
        intersection = {"type": "intersection", "types": [{"type": "reference", "name": "A"}, {"type": "reference", "name": "B"}]}
        get_method_parameters(TypedocConfig(), [node({"id": 7, "name": "ab", "kind": 32768, "type": intersection})], diagnostics)
        self.assertEqual(diagnostics.warnings, ["Intersection type A & B is not supported."])

    def test_no_nodes(self):
        self.assertEqual(get_method_parameters(TypedocConfig(), None), [])
        self.assertEqual(get_method_parameters(TypedocConfig(), []), [])


class TestGenericTypeParameters(unittest.TestCase):

    def test_type_parameters_keep_order(self):
        nodes = [
            node({"id": 10, "name": "TKey", "kind": 131072, "type": {"type": "intrinsic", "name": "string"}}),
            node({"id": 11, "name": "arg", "kind": 32768}),
            node({"id": 12, "name": "TValue", "kind": 131072}),
        ]
        self.assertEqual(get_generic_type_parameters(nodes),
                         [TypeParameterEntity(10, "TKey"), TypeParameterEntity(12, "TValue")])

    def test_no_type_parameters(self):
        self.assertEqual(get_generic_type_parameters(None), [])


class TestModifiers(unittest.TestCase):

    def test_canonical_order(self):
        flags = ReflectionFlags(is_static=True, is_protected=True, is_abstract=True, is_public=True, is_private=True)
        self.assertEqual(get_modifiers(flags), ["public", "abstract", "private", "protected", "static"])

    def test_false_and_absent_flags_contribute_nothing(self):
        self.assertEqual(get_modifiers(ReflectionFlags(is_public=False, is_static=True)), ["static"])
        self.assertEqual(get_modifiers(ReflectionFlags()), [])
        self.assertEqual(get_modifiers(None), [])

    def test_flags_from_json(self):
        flags = ReflectionFlags.from_json({"isProtected": True, "isStatic": "yes", "isExported": True})
        self.assertEqual(get_modifiers(flags), ["protected"])


if __name__ == '__main__':
    unittest.main()
