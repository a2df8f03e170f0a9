import json
import os
import sys
import tempfile
import unittest

current_script_path = os.path.abspath(__file__)
project_root = os.path.dirname(os.path.dirname(current_script_path))
sys.path.append(project_root)

from typedocsharp.typedoc import Reflection, ReflectionKind, TypeDescriptor, load_typedoc, parse_typedoc


def get_shapes():
    """Provides the TypeDoc input file path."""
    return os.path.join(os.path.dirname(__file__), 'typedoc', 'shapes.json')


class TestTypeDescriptor(unittest.TestCase):

    def test_reference_with_arguments(self):
        descriptor = TypeDescriptor.from_json({"type": "reference", "name": "Map", "id": 7,
                                               "typeArguments": [{"type": "intrinsic", "name": "string"}]})
        self.assertEqual(descriptor.kind, "reference")
        self.assertEqual(descriptor.name, "Map")
        self.assertEqual(descriptor.id, 7)
        self.assertEqual([t.name for t in descriptor.type_arguments], ["string"])

    def test_tuple_elements(self):
        descriptor = TypeDescriptor.from_json({"type": "tuple", "elements": [{"type": "intrinsic", "name": "number"}]})
        self.assertEqual(len(descriptor.types), 1)

    def test_malformed_fields_are_absent(self):
        descriptor = TypeDescriptor.from_json({"type": "union", "name": 3, "id": "x", "types": {"a": 1},
                                               "typeArguments": "T", "elementType": [], "declaration": 5})
        self.assertEqual(descriptor, TypeDescriptor(kind="union"))

    def test_non_object_list_items_are_skipped(self):
        descriptor = TypeDescriptor.from_json({"type": "union", "types": ["string", {"type": "intrinsic", "name": "string"}, None]})
        self.assertEqual([t.name for t in descriptor.types], ["string"])

    def test_reflection_declaration(self):
        descriptor = TypeDescriptor.from_json({"type": "reflection", "declaration": {"id": 4, "name": "__type", "kind": 65536,
                                                                                     "children": [{"name": "x", "kind": 1024}]}})
        self.assertEqual(descriptor.declaration.kind, ReflectionKind.TYPE_LITERAL)
        self.assertEqual([c.name for c in descriptor.declaration.children], ["x"])


class TestReflection(unittest.TestCase):

    def test_accessor_signature_as_object(self):
        node = Reflection.from_json({"name": "size", "kind": 262144,
                                     "getSignature": {"name": "__get", "type": {"type": "intrinsic", "name": "number"}}})
        self.assertEqual(len(node.get_signature), 1)
        self.assertIsNone(node.set_signature)

    def test_flags_and_comment(self):
        node = Reflection.from_json({"name": "x", "kind": 1024, "flags": {"isOptional": True},
                                     "comment": {"shortText": "X.", "returns": 4}})
        self.assertTrue(node.flags.is_optional)
        self.assertEqual(node.comment.short_text, "X.")
        self.assertIsNone(node.comment.returns)

    def test_parse_rejects_non_object_root(self):
        with self.assertRaises(ValueError):
            parse_typedoc([])

    def test_load_typedoc(self):
        project = load_typedoc(get_shapes())
        module = project.children[0]
        self.assertEqual(module.kind, ReflectionKind.EXTERNAL_MODULE)
        self.assertEqual([c.name for c in module.children],
                         ["Color", "Shape", "Circle", "Box", "direction", "Point", "VERSION"])
        box = module.children[3]
        self.assertEqual([t.name for t in box.type_parameters], ["T"])

    def test_load_invalid_json(self):
        with tempfile.NamedTemporaryFile('w', suffix='.json', delete=False, encoding='utf-8') as f:
            f.write('{ not json')
        try:
            with self.assertRaises(json.JSONDecodeError):
                load_typedoc(f.name)
        finally:
            os.remove(f.name)


if __name__ == '__main__':
    unittest.main()
