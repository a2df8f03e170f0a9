"""
XML documentation comments for generated C# code.
"""

from typing import Optional

from typedocsharp.common import escape_symbols
from typedocsharp.typedoc import Comment, Reflection


def to_comment_text(text: Optional[str]) -> str:
    """ Prefixes every line of text with '/// ' after escaping it """
    if text is None:
        return ''
    return '\n'.join('/// ' + escape_symbols(line) for line in text.split('\n'))


def get_xml_doc_comment(comment: Comment) -> str:
    """
    Renders a TypeDoc comment as a C# XML doc comment.

    The summary holds the short text followed by the long text, each on its
    own lines; it is omitted when both are empty. A returns block is appended
    when the comment documents one.
    """
    prefix = '/// <summary>\n'
    suffix = '\n/// </summary>'
    texts = [(text or '').strip('\n') for text in (comment.short_text, comment.text)]
    lines = [to_comment_text(text) for text in texts if text]
    summary = prefix + '\n'.join(lines) + suffix if lines else ''
    if comment.returns:
        returns = '\n/// <returns>\n' + to_comment_text(comment.returns.strip('\n')) + '\n/// </returns>'
    else:
        returns = ''
    return summary + returns


def get_comment(node: Reflection) -> str:
    """ The rendered comment of a reflection, or an empty string """
    if node.comment is None:
        return ''
    return get_xml_doc_comment(node.comment)
