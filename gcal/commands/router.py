"""Route a command line to the handler registered for its verb.

The router owns every exit decision: handlers return a status or a
UsageError, and collaborator failures surface as CollaboratorError.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import NoReturn

from gcal.commands.flags import FlagSet
from gcal.commands.models import (
    EXIT_FAILURE,
    EXIT_OK,
    EXIT_USAGE,
    CommandDescriptor,
    UsageError,
)
from gcal.commands.registry import CommandRegistry
from gcal.errors import CollaboratorError
from gcal.logging_config import get_logger

logger = get_logger(__name__)

GlobalFlagsFn = Callable[[FlagSet], None]


class CommandRouter:
    """Dispatches an argument vector to one registered command."""

    def __init__(
        self,
        registry: CommandRegistry,
        global_flags: GlobalFlagsFn | None = None,
    ):
        self.registry = registry
        self.global_flags = global_flags

    def usage(
        self,
        full_cmd: str,
        flags: FlagSet,
        only: CommandDescriptor | None = None,
    ) -> None:
        """Print usage for every verb, or just ``only``, plus the flag defaults."""
        descriptors = [only] if only is not None else list(self.registry.values())

        print(f"usage of {full_cmd}:", file=sys.stderr)
        for descriptor in descriptors:
            print(f"  {descriptor.syntax}\n    \t{descriptor.usage}", file=sys.stderr)
        print(file=sys.stderr)
        print(flags.format_defaults(), file=sys.stderr)

    def dispatch(self, flags: FlagSet, argv: list[str]) -> int:
        """Run one command and return the process exit status.

        ``argv`` excludes the program name; ``flags.name`` carries it.
        """
        if self.global_flags is not None:
            self.global_flags(flags)

        prog = flags.name

        if not argv or argv[0].startswith("-"):
            print("command required but not provided", file=sys.stderr)
            self.usage(prog, flags)
            return EXIT_USAGE

        verb, args = argv[0], argv[1:]
        descriptor = self.registry.lookup(verb)
        if descriptor is None:
            print(f"command provided but not defined: {verb}", file=sys.stderr)
            self.usage(prog, flags)
            return EXIT_USAGE

        full_cmd = f"{prog} {verb}"
        flags.scope(full_cmd, lambda: self.usage(full_cmd, flags, only=descriptor))

        logger.debug("command_dispatched", command=verb, args=len(args))

        try:
            outcome = descriptor.handler(flags, args)
        except CollaboratorError as e:
            print(e, file=sys.stderr)
            return EXIT_FAILURE

        if isinstance(outcome, UsageError):
            if outcome.message:
                print(outcome.message, file=sys.stderr)
            flags.usage()
            return outcome.exit_status

        return EXIT_OK if outcome is None else outcome

    def run(self, flags: FlagSet, argv: list[str]) -> NoReturn:
        sys.exit(self.dispatch(flags, argv))


__all__ = ["CommandRouter", "GlobalFlagsFn"]
