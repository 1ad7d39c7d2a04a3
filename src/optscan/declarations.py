## optscan — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# Compact option declarations, e.g. `-v, --verbose -o=FILE --output=FILE`.
#

import lark

from .types import OptionDescriptor, LONG, SHORT, NONE, REQUIRED
from .errors import DeclarationSyntaxError


GRAMMAR = r"""?start: declaration*
declaration: (SHORT_NAME | LONG_NAME) ARGUMENT?

// TOKENS
LONG_NAME.2: /--[^\s,=\-][^\s,=]*/
SHORT_NAME.1: /-[^\s,=\-]/
ARGUMENT: /=[^\s,]*/

// SEPARATORS
SEPARATOR: /[\s,]+/
%ignore SEPARATOR
"""

_PARSER = None

def _get_parser() -> lark.Lark:
    global _PARSER
    if _PARSER is None:
        _PARSER = lark.Lark(GRAMMAR, start='start', parser="lalr", lexer="contextual", propagate_positions=True)
    return _PARSER


def _to_descriptor(node: lark.Tree) -> OptionDescriptor:
    name_token, *rest = node.children
    argument_type = REQUIRED if rest else NONE
    if name_token.type == 'LONG_NAME':
        return OptionDescriptor(name_token.value[2:], LONG, argument_type)
    return OptionDescriptor(name_token.value[1:], SHORT, argument_type)


def parse_declarations(text: str) -> list[OptionDescriptor]:
    """Parse option declarations into descriptors, keeping their order.

    A trailing `=` (optionally followed by a metavar such as `FILE`) marks a required argument.
    """
    try:
        tree = _get_parser().parse(text)
    except (lark.exceptions.ParseError, lark.exceptions.UnexpectedCharacters) as exc:
        def attr(k): return getattr(exc, k, None)
        token = attr('token')
        token_val = getattr(token, 'value', '') if token is not None else (attr('char') or '')
        raise DeclarationSyntaxError(f"Invalid option declaration: {str(exc).strip()}",
                                     line=attr('line'), column=attr('column'), token=token_val) from None

    # `?start` inlines a lone declaration, so the root may be either node type.
    nodes = [tree] if tree.data == 'declaration' else tree.children
    return [_to_descriptor(n) for n in nodes]


def format_declaration_error_context(text: str, line, column, token_value: str) -> str:
    lines = text.splitlines() or ['']
    line = line if line and line > 0 else 1
    line_content = lines[min(line, len(lines)) - 1]
    if column and 0 < column <= len(line_content):
        width = max(1, len(token_value or ''))
        line_content = (line_content[:column-1] +
                        f"\033[48;5;30m\033[1;97m{line_content[column-1:column+width-1]}\033[0m" +
                        line_content[column+width-1:])
    return f"\033[97m  Declaration, line {line}\033[0m\n\033[97m{line:>5} |\033[0m {line_content}\n"
