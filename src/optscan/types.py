## optscan — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Literal
from dataclasses import dataclass

from .errors import OptionDeclarationError, OptionError, PREFIXES


OptionKind = Literal["long", "short"]
ArgumentType = Literal["none", "required"]

LONG: OptionKind = "long"
SHORT: OptionKind = "short"

NONE: ArgumentType = "none"
REQUIRED: ArgumentType = "required"


@dataclass(frozen=True)
class OptionDescriptor:
    name: str
    kind: OptionKind
    argument_type: ArgumentType = NONE

    def __post_init__(self):
        if self.kind not in PREFIXES:
            raise OptionDeclarationError(f"Option kind `{self.kind}` must be one of: long, short.")
        if self.argument_type not in (NONE, REQUIRED):
            raise OptionDeclarationError(f"Argument type `{self.argument_type}` must be one of: none, required.")
        if self.kind == SHORT and len(self.name) != 1:
            raise OptionDeclarationError(f"Short option name `{self.name}` must be exactly one character.")
        if self.kind == LONG and not self.name:
            raise OptionDeclarationError("Long option name must not be empty.")

    @classmethod
    def long(cls, name: str, argument_type: ArgumentType = NONE) -> "OptionDescriptor":
        return cls(name, LONG, argument_type)

    @classmethod
    def short(cls, name: str, argument_type: ArgumentType = NONE) -> "OptionDescriptor":
        return cls(name, SHORT, argument_type)

    def __str__(self):
        return PREFIXES[self.kind] + self.name + ('=' if self.argument_type == REQUIRED else '')


@dataclass(frozen=True)
class ParsedValue:
    """An option occurrence that matched its descriptor.

    `argument` is None when the option carries no argument (flags), never the empty string.
    """
    name: str
    kind: OptionKind
    argument_type: ArgumentType
    argument: str | None = None

    error = False

    @property
    def prefixed_name(self) -> str:
        return PREFIXES[self.kind] + self.name


ParsedOption = ParsedValue | OptionError


@dataclass(frozen=True)
class ScanResult:
    options: tuple[ParsedOption, ...]     # outcomes, in input order
    remaining: tuple[str, ...]            # unscanned tail of the tokens, verbatim

    @property
    def values(self) -> list[ParsedValue]:
        return [o for o in self.options if not o.error]

    @property
    def errors(self) -> list[OptionError]:
        return [o for o in self.options if o.error]

    @property
    def ok(self) -> bool:
        return not any(o.error for o in self.options)

    def raise_for_errors(self) -> None:
        """Raise the first error outcome, leaving the decision to abort with the caller."""
        for outcome in self.options:
            if outcome.error: raise outcome
