"""Per-invocation flag sets.

A FlagSet is created by the entry point, receives the global flags, gets
scoped to a verb by the router, and is finally filled with the verb's own
flags by the handler before it parses the remaining arguments.
"""

from __future__ import annotations

import argparse
import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from gcal.commands.models import ParseResult, Parsed, UsageError


class FlagError(Exception):
    """Raised by FlagParser in place of printing and exiting."""


class FlagParser(argparse.ArgumentParser):
    """ArgumentParser that reports problems instead of exiting the process."""

    def __init__(self, prog: str):
        super().__init__(prog=prog, add_help=False, allow_abbrev=False)
        # relative offsets such as -3d are operands, not flags
        self._negative_number_matcher = re.compile(r"^-[0-9]")

    def error(self, message: str):
        raise FlagError(message)

    def exit(self, status: int = 0, message: str | None = None):
        raise FlagError(message or f"exit status {status}")


@dataclass(frozen=True)
class FlagSpec:
    """A registered flag, kept for the usage listing."""

    names: tuple[str, ...]
    help: str = ""
    metavar: str | None = None
    default: Any = None

    @property
    def sort_key(self) -> str:
        return self.names[-1].lstrip("-")

    def format(self) -> str:
        line = "  " + ", ".join(self.names)
        if self.metavar:
            line += f" {self.metavar}"
        text = self.help
        if self.default not in (None, False, ""):
            text += f" (default {self.default})"
        return f"{line}\n    \t{text}"


class FlagSet:
    """Flags and operands for one command invocation."""

    def __init__(self, name: str):
        self.name = name
        self._parser = FlagParser(prog=name)
        self._specs: list[FlagSpec] = []
        self._usage: Callable[[], None] | None = None
        self.add_flag("-h", "--help", action="store_true", help="show usage")
        self._parser.add_argument("args", nargs="*", help=argparse.SUPPRESS)

    def add_flag(self, *names: str, help: str = "", **kwargs: Any) -> None:
        """Register a flag; keyword arguments go to ``add_argument``."""
        action = self._parser.add_argument(*names, help=help, **kwargs)
        metavar = None
        if action.nargs != 0:
            metavar = action.metavar or action.dest.upper()
        self._specs.append(FlagSpec(
            names=tuple(names),
            help=help,
            metavar=metavar,
            default=kwargs.get("default"),
        ))

    def scope(self, name: str, usage: Callable[[], None]) -> None:
        """Bind the set to a command path and its usage printer."""
        self.name = name
        self._parser.prog = name
        self._usage = usage

    def usage(self) -> None:
        if self._usage is not None:
            self._usage()

    def format_defaults(self) -> str:
        specs = sorted(self._specs, key=lambda s: s.sort_key)
        return "\n".join(spec.format() for spec in specs)

    def parse(self, args: list[str]) -> ParseResult:
        """Parse flags out of ``args``; operands may be interspersed."""
        try:
            options = self._parser.parse_intermixed_args(args)
        except FlagError as e:
            return UsageError(str(e))

        if options.help:
            return UsageError(help_requested=True)

        operands = list(options.args or [])
        del options.args
        return Parsed(args=operands, options=options)


__all__ = ["FlagError", "FlagParser", "FlagSet", "FlagSpec"]
