import os
import sys
import unittest

current_script_path = os.path.abspath(__file__)
project_root = os.path.dirname(os.path.dirname(current_script_path))
sys.path.append(project_root)

from typedocsharp.comments import get_comment, get_xml_doc_comment, to_comment_text
from typedocsharp.common import escape_symbols, pascal
from typedocsharp.typedoc import Comment, Reflection


class TestPascal(unittest.TestCase):

    def test_pascal(self):
        self.assertEqual(pascal("fooBar"), "FooBar")
        self.assertEqual(pascal("foo-bar_baz"), "FooBarBaz")
        self.assertEqual(pascal("my.module-name"), "My.ModuleName")
        self.assertEqual(pascal("__init"), "Init")
        self.assertEqual(pascal("HTTPClient"), "HTTPClient")
        self.assertEqual(pascal(""), "")


class TestComments(unittest.TestCase):

    def test_escape_symbols(self):
        self.assertEqual(escape_symbols("a < b && c > d"), "a &lt; b &amp;&amp; c &gt; d")
        self.assertEqual(escape_symbols(None), "")

    def test_comment_text(self):
        self.assertEqual(to_comment_text("one\ntwo <T>"), "/// one\n/// two &lt;T&gt;")
        self.assertEqual(to_comment_text(None), "")

    def test_summary_from_short_text(self):
        self.assertEqual(get_xml_doc_comment(Comment(short_text="Creates a widget.")),
                         "/// <summary>\n/// Creates a widget.\n/// </summary>")

    def test_summary_with_text_and_returns(self):
        comment = Comment(short_text="Loads data.", text="Reads the file\nfrom disk.\n", returns="The data.\n")
        self.assertEqual(get_xml_doc_comment(comment),
                         "/// <summary>\n/// Loads data.\n/// Reads the file\n/// from disk.\n/// </summary>"
                         "\n/// <returns>\n/// The data.\n/// </returns>")

    def test_empty_comment(self):
        self.assertEqual(get_xml_doc_comment(Comment()), "")
        self.assertEqual(get_xml_doc_comment(Comment(returns="Nothing.")), "\n/// <returns>\n/// Nothing.\n/// </returns>")

    def test_get_comment(self):
        self.assertEqual(get_comment(Reflection(name="x")), "")
        node = Reflection.from_json({"name": "x", "comment": {"shortText": "The x coordinate."}})
        self.assertEqual(get_comment(node), "/// <summary>\n/// The x coordinate.\n/// </summary>")


if __name__ == '__main__':
    unittest.main()
