"""Read-only table of the verbs gcal understands."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from gcal.commands.models import CommandDescriptor


class CommandRegistry(Mapping[str, CommandDescriptor]):
    """Verb name -> CommandDescriptor, fixed at construction."""

    def __init__(self, descriptors: Iterable[CommandDescriptor]):
        table: dict[str, CommandDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.name in table:
                raise ValueError(f"duplicate command: {descriptor.name}")
            table[descriptor.name] = descriptor
        self._table = MappingProxyType(dict(sorted(table.items())))

    def lookup(self, verb: str) -> CommandDescriptor | None:
        return self._table.get(verb)

    def __getitem__(self, verb: str) -> CommandDescriptor:
        return self._table[verb]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"CommandRegistry({list(self._table)})"


__all__ = ["CommandRegistry"]
