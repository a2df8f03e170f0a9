import io
import os
import sys
import unittest

current_script_path = os.path.abspath(__file__)
project_root = os.path.dirname(os.path.dirname(current_script_path))
sys.path.append(project_root)

from typedocsharp.diagnostics import CollectingDiagnostics, ConsoleDiagnostics, format_diagnostic
from typedocsharp.typeresolver import resolve_type


class TestDiagnostics(unittest.TestCase):

    def test_console_lines_have_severity_prefix(self):
        stream = io.StringIO()
        diagnostics = ConsoleDiagnostics(stream)
        diagnostics.warning("Intersection type A & B is not supported.")
        diagnostics.error("Cannot read input.")
        self.assertEqual(stream.getvalue().splitlines(), [
            "[Warning] Intersection type A & B is not supported.",
            "[Error] Cannot read input.",
        ])

    def test_collecting(self):
        diagnostics = CollectingDiagnostics()
        diagnostics.warning("w")
        diagnostics.error("e")
        self.assertEqual(diagnostics.records, [("Warning", "w"), ("Error", "e")])
        self.assertEqual(diagnostics.warnings, ["w"])
        self.assertEqual(diagnostics.errors, ["e"])

    def test_format(self):
        self.assertEqual(format_diagnostic("Warning", "x"), "[Warning] x")

    def test_resolver_never_reports_errors(self):
        diagnostics = CollectingDiagnostics()
        resolve_type({"type": "intersection"}, diagnostics=diagnostics)
        resolve_type({"type": "reflection", "declaration": {"children": [{"name": "a"}]}}, diagnostics=diagnostics)
        self.assertEqual(diagnostics.errors, [])
        self.assertEqual(diagnostics.warnings, ["Intersection type  is not supported.", "Type literal { a } is not supported."])


if __name__ == '__main__':
    unittest.main()
