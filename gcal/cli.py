#!/usr/bin/env python3
"""
gcal Command Line Interface

Main entry point for the `gcal` command.

Usage:
    gcal list                      # today's events
    gcal list -3d now              # the last three days
    gcal list "Mar 1 2024" 2w      # from a date to two weeks from today
    gcal auth                      # authorize again and save the token
"""

from __future__ import annotations

import os
import sys

from gcal.commands.auth_commands import AUTH_COMMAND
from gcal.commands.calendar_commands import LIST_COMMAND
from gcal.commands.flags import FlagSet
from gcal.commands.globals import register_global_flags
from gcal.commands.registry import CommandRegistry
from gcal.commands.router import CommandRouter


def build_registry() -> CommandRegistry:
    return CommandRegistry([LIST_COMMAND, AUTH_COMMAND])


def build_router() -> CommandRouter:
    return CommandRouter(build_registry(), global_flags=register_global_flags)


def main(argv: list[str] | None = None) -> int:
    """Dispatch ``argv`` (default ``sys.argv``) and return the exit status."""
    if argv is None:
        argv = sys.argv
    prog = os.path.basename(argv[0]) if argv else "gcal"
    return build_router().dispatch(FlagSet(prog), argv[1:])


if __name__ == "__main__":
    sys.exit(main())
