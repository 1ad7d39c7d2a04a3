## optscan — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
import sys

from .types import ParsedOption, ScanResult


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))


def _quote(text: str) -> str:
    return '"' + text.replace('"', '\\"') + '"'

def format_outcome(outcome: ParsedOption) -> str:
    if outcome.error:
        return f'\033[30;43m {outcome.reason.upper()} \033[0m {outcome}'
    if outcome.argument is None:
        return f'\033[1;97m{outcome.prefixed_name}\033[0m'
    return f'\033[1;97m{outcome.prefixed_name}\033[0m \033[36m=\033[0m {_quote(outcome.argument)}'

def format_remaining(remaining: tuple[str, ...], width=None) -> str:
    if not remaining: return '∅'
    text = ' '.join(_quote(r) for r in remaining)
    if width is not None and len(text) > width:
        text = text[:width-2] + ' …'
    return text

def show_result(result: ScanResult, width=72, file=None):
    for outcome in result.options:
        print(format_outcome(outcome), file=file)
    print(f"\033[90mremaining:\033[0m {format_remaining(result.remaining, width=width)}", file=file)

def show_trace(index: int, label: str, token: str, cursor: int, pending: int, file=None):
    print(f"\033[90m{index:>3} :\033[0m  {label:<7} {_quote(token):<24} \033[90mcursor={cursor} skip={pending}\033[0m",
          file=file or sys.stdout)
