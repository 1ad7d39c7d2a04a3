## optscan — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Iterable
from dataclasses import dataclass, field

from .types import OptionDescriptor, OptionKind, LONG, SHORT


@dataclass
class Registry:
    long: dict[str, OptionDescriptor] = field(default_factory=dict)
    short: dict[str, OptionDescriptor] = field(default_factory=dict)

    def _namespace(self, kind: OptionKind) -> dict[str, OptionDescriptor]:
        return self.long if kind == LONG else self.short

    # Registration helpers
    def register(self, descriptor: OptionDescriptor) -> None:
        # Last write wins; no warning on redefinition.
        self._namespace(descriptor.kind)[descriptor.name] = descriptor

    def register_all(self, descriptors: Iterable[OptionDescriptor]) -> None:
        for descriptor in descriptors:
            self.register(descriptor)

    def lookup(self, kind: OptionKind, name: str) -> OptionDescriptor | None:
        return self._namespace(kind).get(name)

    def snapshot(self) -> "Registry":
        """Independent copy, so that later registrations do not leak into a running scan."""
        return Registry(long=dict(self.long), short=dict(self.short))

    def __len__(self):
        return len(self.long) + len(self.short)

    def __iter__(self):
        yield from self.long.values()
        yield from self.short.values()

    def __contains__(self, descriptor: OptionDescriptor):
        return self.lookup(descriptor.kind, descriptor.name) == descriptor


def describe(registry: Registry) -> list[str]:
    """Sorted human-readable listing of registered options, shorts first."""
    return [str(d) for d in sorted(registry, key=lambda d: (d.kind != SHORT, d.name))]
