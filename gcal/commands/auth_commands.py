"""Auth command handler: authorize again and store a fresh token."""

from __future__ import annotations

import asyncio
import sys

from gcal.auth.oauth import get_valid_token
from gcal.commands.flags import FlagSet
from gcal.commands.globals import apply_global_options
from gcal.commands.models import EXIT_OK, CommandDescriptor, UsageError


def handle_auth(flags: FlagSet, args: list[str]) -> int | UsageError:
    parsed = flags.parse(args)
    if isinstance(parsed, UsageError):
        return parsed
    if parsed.args:
        return UsageError(f"wrong number of arguments: {', '.join(parsed.args)}")

    config = apply_global_options(parsed.options)
    asyncio.run(get_valid_token(config.auth, force=True))
    print(f"token saved to {config.auth.token_path}", file=sys.stderr)
    return EXIT_OK


AUTH_COMMAND = CommandDescriptor(
    name="auth",
    syntax="auth",
    usage="authorize calendar access and save the token",
    handler=handle_auth,
)


__all__ = ["AUTH_COMMAND", "handle_auth"]
