"""Command routing: verb registry, scoped flag sets, dispatch."""

from gcal.commands.flags import FlagSet
from gcal.commands.models import CommandDescriptor, Parsed, UsageError
from gcal.commands.registry import CommandRegistry
from gcal.commands.router import CommandRouter

__all__ = [
    "CommandDescriptor",
    "CommandRegistry",
    "CommandRouter",
    "FlagSet",
    "Parsed",
    "UsageError",
]
