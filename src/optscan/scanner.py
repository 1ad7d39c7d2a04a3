## optscan — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Sequence

from .types import OptionDescriptor, ParsedOption, ParsedValue, ScanResult, LONG, SHORT, NONE, REQUIRED
from .errors import UnknownOptionError, MissingArgumentError, ExtraneousArgumentError
from .registry import Registry
from .formatting import show_trace


def is_dos_long_option(text: str) -> bool:
    """Classify text after a DOS `/`; anything that isn't a long option is a short cluster.

    Two-character names without a colon (e.g. `/ab`) count as a short cluster.
    """
    return not (len(text) == 1 or text[1] == ':' or ':' not in text)


class ScanEngine:
    """Single forward pass over `tokens`, with the result memoized once complete.

    The engine keeps two independent skip counters: `pending_skip` counts upcoming *tokens*
    already claimed as an option's argument, while the short-option walk keeps its own count
    of *characters* within one cluster.
    """

    UNSTARTED = 'unstarted'
    RUNNING = 'running'
    COMPLETED = 'completed'

    def __init__(self, tokens: Sequence[str], registry: Registry, dos_mode: bool = False, verbosity: int = 0):
        self.tokens: tuple[str, ...] = tuple(tokens)
        self.dos_mode = dos_mode
        self.verbosity = verbosity
        self.cursor = 0
        self.pending_skip = 0
        self.state = ScanEngine.UNSTARTED
        self._registry = registry
        self._result: ScanResult | None = None

    @property
    def result(self) -> ScanResult | None:
        return self._result

    def _trace(self, index: int, label: str, token: str) -> None:
        if self.verbosity > 0:
            show_trace(index, label, token, cursor=self.cursor, pending=self.pending_skip)

    def _advance(self) -> None:
        self.cursor += 1

    def _lookahead(self) -> str | None:
        # Raw token, untrimmed: an option's argument is adopted verbatim.
        index = self.cursor + 1
        return self.tokens[index] if index < len(self.tokens) else None

    def run(self) -> ScanResult:
        if self.state == ScanEngine.COMPLETED:
            return self._result
        self.state = ScanEngine.RUNNING
        registry = self._registry.snapshot()

        outcomes: list[ParsedOption] = []
        for index, raw in enumerate(self.tokens):
            token = raw.strip()
            if token == '':
                # Blank tokens are swallowed only when they sit at the cursor.
                if index == self.cursor: self._advance()
                self._trace(index, 'blank', raw)
                continue
            if self.pending_skip > 0:
                self.pending_skip -= 1
                self.cursor = index + 1
                self._trace(index, 'claimed', raw)
                continue

            if self.dos_mode and token[0] == '/':
                if token == '/':
                    self._trace(index, 'stop', raw)
                    break
                self.cursor = index
                text = token[1:]
                if is_dos_long_option(text):
                    self._trace(index, 'long', raw)
                    outcomes.append(self._parse_long(registry, text, dos=True))
                else:
                    self._trace(index, 'short', raw)
                    outcomes.extend(self._parse_short(registry, text, dos=True))
            elif token[0] == '-':
                if token == '-':
                    self._trace(index, 'stop', raw)
                    break
                if token == '--':
                    self.cursor = index + 1
                    self._trace(index, 'end', raw)
                    break
                self.cursor = index
                if token[1] == '-':
                    self._trace(index, 'long', raw)
                    outcomes.append(self._parse_long(registry, token[2:], dos=False))
                else:
                    self._trace(index, 'short', raw)
                    outcomes.extend(self._parse_short(registry, token[1:], dos=False))
            else:
                self._trace(index, 'plain', raw)

        self._result = ScanResult(options=tuple(outcomes), remaining=self.tokens[self.cursor:])
        self.state = ScanEngine.COMPLETED
        return self._result

    def _parse_long(self, registry: Registry, text: str, dos: bool) -> ParsedOption:
        name, _, argument = text.partition(':' if dos else '=')
        argument = argument or None  # A bare trailing separator carries no argument.

        if (descriptor := registry.lookup(LONG, name)) is None:
            self._advance()
            return UnknownOptionError(LONG, name)

        if descriptor.argument_type == NONE and argument is not None:
            self._advance()
            return ExtraneousArgumentError(LONG, name, argument)

        if descriptor.argument_type == REQUIRED and argument is None:
            if (argument := self._lookahead()) is None:
                self._advance()
                return MissingArgumentError(LONG, name)
            self.pending_skip += 1

        self._advance()
        return ParsedValue(name, LONG, descriptor.argument_type, argument)

    def _parse_short(self, registry: Registry, cluster: str, dos: bool) -> list[ParsedOption]:
        outcomes: list[ParsedOption] = []
        skip = 0
        for offset, name in enumerate(cluster):
            if skip > 0:
                skip -= 1
                continue

            trailing = cluster[offset+1:]
            if dos and trailing.startswith(':'):
                trailing = trailing[1:]
                skip += 1
            # Trailing text belongs to this flag, even when the flag turns out invalid.
            skip += len(trailing)
            outcomes.append(self._resolve_short(registry.lookup(SHORT, name), name, trailing))

        # The whole cluster is one token.
        self._advance()
        return outcomes

    def _resolve_short(self, descriptor: OptionDescriptor | None, name: str, trailing: str) -> ParsedOption:
        if descriptor is None:
            return UnknownOptionError(SHORT, name)

        match descriptor.argument_type:
            case "none":
                if trailing:
                    return ExtraneousArgumentError(SHORT, name, trailing)
                argument = None
            case "required":
                argument = trailing
                if not trailing:
                    if (argument := self._lookahead()) is None:
                        return MissingArgumentError(SHORT, name)
                    self.pending_skip += 1

        return ParsedValue(name, SHORT, descriptor.argument_type, argument)
