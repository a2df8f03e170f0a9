"""
Common utility functions for typedocsharp.
"""

import os
import re
from typing import Optional

import jinja2


def pascal(string: str) -> str:
    """
    Convert a TypeScript identifier to PascalCase.
    Dotted names are converted segment by segment and keep their dots.
    Dashes and underscores separate words and are removed; only the first
    character of each word is changed.

    Args:
        string (str): The string to convert.

    Returns:
        str: The string in PascalCase.
    """
    if not string:
        return string
    if '.' in string:
        return '.'.join(pascal(s) for s in string.split('.'))
    words = [w for w in re.split(r'[-_]', string) if w]
    return ''.join(w[0].upper() + w[1:] for w in words)


def escape_symbols(text: Optional[str]) -> str:
    """ Escapes XML special characters for use in doc comments """
    if text is None:
        return ''
    return text.replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')


def process_template(file_path: str, **kvargs) -> str:
    """
    Process a file as a Jinja2 template with the given object as input.

    Args:
        file_path (str): The path to the template, relative to the package.
        **kvargs: The variables to pass to the template.

    Returns:
        str: The processed template as a string.
    """
    file_dir = os.path.dirname(__file__)
    template_loader = jinja2.FileSystemLoader(searchpath=file_dir)
    template_env = jinja2.Environment(loader=template_loader, keep_trailing_newline=True,
                                      trim_blocks=True, lstrip_blocks=True)

    template = template_env.get_template(file_path)
    return template.render(**kvargs)

