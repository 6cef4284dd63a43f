"""Command routing data models.

    argv → CommandDescriptor → handler(FlagSet, args) → exit status | UsageError
"""

from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from gcal.commands.flags import FlagSet

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


@dataclass(frozen=True)
class UsageError:
    """The command line was wrong; the router prints usage and exits 2.

    A help request travels the same way with ``help_requested`` set and exits 0.
    """

    message: str = ""
    help_requested: bool = False

    @property
    def exit_status(self) -> int:
        return EXIT_OK if self.help_requested else EXIT_USAGE


@dataclass(frozen=True)
class Parsed:
    """Flags parsed successfully; ``args`` are the remaining operands."""

    args: list[str] = field(default_factory=list)
    options: argparse.Namespace = field(default_factory=argparse.Namespace)


ParseResult = Union[Parsed, UsageError]

# Handler: function(flag_set, args) -> exit status or UsageError
HandlerFn = Callable[["FlagSet", list[str]], Union[int, UsageError]]


@dataclass(frozen=True)
class CommandDescriptor:
    """One verb: how to call it, what it does, and who runs it."""

    name: str
    syntax: str
    usage: str
    handler: HandlerFn


__all__ = [
    "EXIT_FAILURE",
    "EXIT_OK",
    "EXIT_USAGE",
    "CommandDescriptor",
    "HandlerFn",
    "ParseResult",
    "Parsed",
    "UsageError",
]
