"""

Command line utility to convert TypeDoc JSON documents into C# declarations.

"""


import argparse
import json
import os
import sys
import tempfile

from typedocsharp import _version

ARG_TYPES = {'str': str, 'int': int}


def load_commands():
    """Load the commands from the commands.json file."""
    commands_path = os.path.join(os.path.dirname(__file__), 'commands.json')
    with open(commands_path, 'r', encoding='utf-8') as f:
        return json.load(f)


def create_subparsers(subparsers, commands):
    """Create subparsers for the commands."""
    for command in commands:
        cmd_parser = subparsers.add_parser(command['command'], help=command['description'])
        for arg in command['args']:
            kwargs = {
                'help': arg['help'],
            }
            if 'nargs' in arg:
                kwargs['nargs'] = arg['nargs']
            if 'choices' in arg:
                kwargs['choices'] = arg['choices']
            if 'default' in arg:
                kwargs['default'] = arg['default']
            if arg['type'] == 'bool':
                kwargs['action'] = 'store_true'
            else:
                kwargs['type'] = ARG_TYPES[arg['type']]
            carg = cmd_parser.add_argument(arg['name'], **kwargs)
            if arg['name'].startswith('--'):
                carg.required = arg.get('required', True)


def dynamic_import(module, func):
    """Dynamically import a module and function."""
    mod = __import__(module, fromlist=[func])
    return getattr(mod, func)


def read_stdin_to_file() -> str:
    """Copies stdin into a temporary file and returns its path."""
    with tempfile.NamedTemporaryFile(delete=False, mode='w', encoding='utf-8', suffix='.json') as temp_input:
        s = sys.stdin.read()
        while s:
            temp_input.write(s)
            s = sys.stdin.read()
        return temp_input.name


def main():
    """Main function for the command line utility."""
    commands = load_commands()
    parser = argparse.ArgumentParser(description='Convert TypeDoc JSON documents into C# declarations.')
    parser.add_argument('--version', action='store_true', help='Print the version of typedocsharp.')

    subparsers = parser.add_subparsers(dest='command')
    create_subparsers(subparsers, commands)

    args = parser.parse_args()

    if getattr(args, 'version', False):
        print(f'typedocsharp {_version.version}')
        return

    if args.command is None:
        parser.print_help()
        return

    temp_input_path = None
    try:
        command = next((cmd for cmd in commands if cmd['command'] == args.command), None)
        if not command:
            print(f"Error: Command {args.command} not found.")
            sys.exit(1)

        input_file_path = getattr(args, 'input', None)
        if input_file_path is None:
            temp_input_path = read_stdin_to_file()
            input_file_path = temp_input_path
        output_file_path = getattr(args, 'out', None)

        module_name, func_name = command['function']['name'].rsplit('.', 1)
        func = dynamic_import(module_name, func_name)
        func_args = {}
        for arg, val in command['function']['args'].items():
            if val == 'input_file_path':
                func_args[arg] = input_file_path
            elif val == 'output_file_path':
                func_args[arg] = output_file_path
            elif val.startswith('args.'):
                if hasattr(args, val[5:]):
                    func_args[arg] = getattr(args, val[5:])
            else:
                func_args[arg] = val
        print(f'Executing {command["description"]} with input {input_file_path} and output {output_file_path}')
        func(**func_args)

    except Exception as e:  # pylint: disable=broad-except
        print("Error: ", str(e))
        sys.exit(1)
    finally:
        if temp_input_path:
            try:
                os.remove(temp_input_path)
            except OSError as e:
                print(f"Error: Could not delete temporary input file {temp_input_path}. {e}")


if __name__ == "__main__":
    main()
