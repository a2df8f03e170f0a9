import argparse
import os
import shutil
import tempfile
import unittest
from unittest.mock import patch
import sys

current_script_path = os.path.abspath(__file__)
project_root = os.path.dirname(os.path.dirname(current_script_path))
sys.path.append(project_root)


from typedocsharp.typedocsharp import create_subparsers, load_commands, main


def get_typedoc():
    """Provides the TypeDoc input file path."""
    return os.path.join(os.path.dirname(__file__), 'typedoc', 'shapes.json')


def get_output():
    return os.path.join(tempfile.gettempdir(), 'typedocsharp', 'main-cs')


class TestMain(unittest.TestCase):

    def setUp(self):
        shutil.rmtree(get_output(), ignore_errors=True)

    @patch('argparse.ArgumentParser.parse_args', return_value=argparse.Namespace(command=None, version=False))
    def test_main_no_command(self, mock_parse_args):
        """Test main function with no command."""
        with patch('builtins.print'):
            main()

    @patch('argparse.ArgumentParser.parse_args', return_value=argparse.Namespace(command=None, version=True))
    def test_main_version(self, mock_parse_args):
        """Test main function printing the version."""
        with patch('builtins.print') as mock_print:
            main()
        self.assertTrue(mock_print.call_args[0][0].startswith('typedocsharp '))

    @patch('argparse.ArgumentParser.parse_args', return_value=argparse.Namespace(
        command='ts2cs', version=False, input=get_typedoc(), out=get_output(), namespace='Geo',
        number_type='int', any_type='object', use_winrt_promise=False))
    def test_main_ts2cs_command(self, mock_parse_args):
        """Test main function with ts2cs command."""
        main()
        circle = os.path.join(get_output(), 'src', 'Geo', 'Geometry', 'Shapes', 'Circle.cs')
        assert os.path.exists(circle)
        with open(circle, 'r', encoding='utf-8') as file:
            self.assertIn('Scale(int factor)', file.read())

    @patch('argparse.ArgumentParser.parse_args', return_value=argparse.Namespace(
        command='ts2cs', version=False, input=os.path.join(tempfile.gettempdir(), 'does-not-exist.json'), out=get_output(),
        namespace='', number_type='double', any_type='object', use_winrt_promise=False))
    def test_main_missing_input(self, mock_parse_args):
        """Test main function exits when the input cannot be read."""
        with patch('builtins.print'):
            with self.assertRaises(SystemExit) as context:
                main()
        self.assertEqual(context.exception.code, 1)

    def test_ts2cs_takes_positional_input(self):
        """Test the input document is an optional positional argument."""
        parser = argparse.ArgumentParser()
        create_subparsers(parser.add_subparsers(dest='command'), load_commands())
        args = parser.parse_args(['ts2cs', 'doc.json', '--out', 'out'])
        self.assertEqual(args.input, 'doc.json')
        args = parser.parse_args(['ts2cs', '--out', 'out'])
        self.assertIsNone(args.input)


if __name__ == '__main__':
    unittest.main()
