## optscan — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Literal

import lark


# Messages always render the GNU prefix, whichever convention was scanned.
PREFIXES: dict[str, str] = {'long': '--', 'short': '-'}


class OptScanError(Exception):
    """Base class for all optscan errors."""
    pass

class OptionDeclarationError(OptScanError, ValueError):
    pass

class DeclarationSyntaxError(OptionDeclarationError, lark.exceptions.ParseError):
    def __init__(self, message, *, line=None, column=None, token=None):
        super().__init__(message)
        self.line = line
        self.column = column
        self.token = token


class OptionError(OptScanError):
    """One malformed option occurrence.  Returned as a scan outcome, raised only by callers."""

    reason: Literal["unknown", "missing", "extraneous"]
    error = True

    def __init__(self, option_kind: str, option_name: str, option_argument: str | None = None):
        self.option_kind = option_kind
        self.option_name = option_name
        self.option_argument = option_argument
        super().__init__(self._format())

    def _format(self) -> str:
        raise NotImplementedError

    @property
    def prefixed_name(self) -> str:
        return PREFIXES[self.option_kind] + self.option_name

    def _key(self):
        return (type(self), self.option_kind, self.option_name, self.option_argument)

    def __eq__(self, other):
        return isinstance(other, OptionError) and self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return f"{type(self).__name__}({self.option_kind!r}, {self.option_name!r})"

    def __reduce__(self):
        return type(self), (self.option_kind, self.option_name)


class UnknownOptionError(OptionError):
    reason = "unknown"

    def _format(self) -> str:
        return f'Option "{self.prefixed_name}" is unknown.'

class MissingArgumentError(OptionError):
    reason = "missing"

    def _format(self) -> str:
        return f'Option "{self.prefixed_name}" expects an argument.'

class ExtraneousArgumentError(OptionError):
    reason = "extraneous"

    def __init__(self, option_kind: str, option_name: str, option_argument: str):
        super().__init__(option_kind, option_name, option_argument)

    def _format(self) -> str:
        return f'Extraneous argument "{self.option_argument}" passed to option "{self.prefixed_name}".'

    def __repr__(self):
        return f"{type(self).__name__}({self.option_kind!r}, {self.option_name!r}, {self.option_argument!r})"

    def __reduce__(self):
        return type(self), (self.option_kind, self.option_name, self.option_argument)
