## optscan — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# optscan — GNU-style and DOS-style command-line option scanner.
#

import sys
from dataclasses import dataclass

import click

from .errors import DeclarationSyntaxError, OptionDeclarationError
from .options import Options
from .registry import describe
from .declarations import format_declaration_error_context
from .formatting import write_without_ansi, show_result


@dataclass(frozen=True)
class ScanConfig:
    verbose: int
    dos: bool
    ignore: bool
    plain: bool


class ScanRunner:
    def __init__(self, config: ScanConfig):
        self.verbose = config.verbose
        self.ignore = config.ignore
        self.plain = config.plain

        if self.plain:
            writer = write_without_ansi(sys.stdout.write)
            sys.stdout.write, sys.stderr.write = writer, writer

        self.options = Options(dos_mode=config.dos)
        self.failure = False

    def _maybe_fatal_error(self, message: str, detail: str, exc_type: str = None, context: str = '') -> None:
        header = detail if not exc_type else f"{detail} (Exception: \033[33m{exc_type}\033[0m)"
        print(f'\033[30;43m {message} \033[0m {header}\n{context}', file=sys.stderr)
        self.failure = True
        if not self.ignore: sys.exit(1)

    def declare(self, declarations: tuple[str, ...]) -> None:
        for text in declarations:
            try:
                self.options.declare(text)
            except DeclarationSyntaxError as exc:
                context = format_declaration_error_context(text, exc.line, exc.column, exc.token)
                context += f"\n\033[90m{str(exc).replace(chr(10), ' ').replace(chr(9), ' ')}\033[0m\n"
                self._maybe_fatal_error("SYNTAX ERROR.", f"Declaring options `\033[97m{text}\033[0m` caused a problem!", type(exc).__name__, context)
            except OptionDeclarationError as exc:
                self._maybe_fatal_error("DECLARATION ERROR.", str(exc), type(exc).__name__)

        if self.verbose > 1:
            convention = 'DOS' if self.options.dos_mode else 'GNU'
            print(f"\033[90m{convention} options:\033[0m", ' '.join(describe(self.options.registry)) or '∅')

    def scan(self, tokens: tuple[str, ...]) -> None:
        result = self.options.parse(tokens, verbosity=self.verbose)
        show_result(result)
        if not result.ok:
            self.failure = True

    def finalize(self) -> int:
        return 1 if self.failure and not self.ignore else 0


@click.command(context_settings={'ignore_unknown_options': True, 'allow_extra_args': True})
@click.option('--declare', '-d', 'declarations', multiple=True, metavar='TEXT', help='Declare options, e.g. "-v, --verbose -o=FILE --out=FILE".')
@click.option('--dos/--gnu', default=False, envvar='OPTSCAN_DOS', show_envvar=True, help='Scan DOS-style `/x` and `/name:value` options.')
@click.option('--verbose', '-v', default=0, count=True, help='Trace how each token is classified.')
@click.option('--ignore', '-i', is_flag=True, help='Exit successfully even when options fail to scan.')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes and redirect stderr to stdout.')
@click.argument('tokens', nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, declarations: tuple[str, ...], dos: bool, verbose: int, ignore: bool, plain: bool, tokens: tuple[str, ...]) -> None:
    """Scan TOKENS against the declared options; pass them after `--`."""
    runner = ScanRunner(ScanConfig(verbose=verbose, dos=dos, ignore=ignore, plain=plain))
    runner.declare(declarations)
    runner.scan(tokens)
    ctx.exit(runner.finalize())


def main(argv: list[str] | None = None) -> None:
    cli.main(args=list(sys.argv[1:] if argv is None else argv), prog_name='optscan')


if __name__ == "__main__":
    main()
