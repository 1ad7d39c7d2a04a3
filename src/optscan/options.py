## optscan — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Iterable, Sequence

from .types import OptionDescriptor, ScanResult
from .registry import Registry
from .scanner import ScanEngine
from .declarations import parse_declarations


class Options:
    """Option registry plus the syntax convention; `dos_mode` is injected by the embedding program."""

    def __init__(self, registry: Registry | None = None, dos_mode: bool = False):
        self.registry = registry if registry is not None else Registry()
        self.dos_mode = dos_mode

    # Configuration ───────────────────────────────────────────────────────────────────────────
    def configure(self, *, dos_mode: bool | None = None) -> None:
        """Change the syntax convention for engines created by later `scan()` calls."""
        if dos_mode is not None: self.dos_mode = dos_mode

    # Registration ────────────────────────────────────────────────────────────────────────────
    def register_option(self, descriptor: OptionDescriptor) -> None:
        self.registry.register(descriptor)

    def register_options(self, descriptors: Iterable[OptionDescriptor]) -> None:
        self.registry.register_all(descriptors)

    def declare(self, text: str) -> list[OptionDescriptor]:
        descriptors = parse_declarations(text)
        self.registry.register_all(descriptors)
        return descriptors

    # Scanning ────────────────────────────────────────────────────────────────────────────────
    def scan(self, tokens: Sequence[str], verbosity: int = 0) -> ScanEngine:
        return ScanEngine(tokens, self.registry, dos_mode=self.dos_mode, verbosity=verbosity)

    def parse(self, tokens: Sequence[str], verbosity: int = 0) -> ScanResult:
        return self.scan(tokens, verbosity=verbosity).run()
