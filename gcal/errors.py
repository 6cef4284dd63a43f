"""Exceptions shared across gcal.

Usage errors are not exceptions: flag parsing and range resolution return a
``UsageError`` value (see ``gcal.commands.models``) and the router decides the
exit status.
"""

from __future__ import annotations


class GcalError(Exception):
    """Base class for gcal failures."""


class UnparseableExpression(GcalError, ValueError):
    """A date token matched no layout and no relative-offset grammar."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"unable to parse time or duration: {token}")


class CollaboratorError(GcalError):
    """Opaque failure from the token store or the event source.

    Reported verbatim by the router; never retried.
    """


__all__ = ["CollaboratorError", "GcalError", "UnparseableExpression"]
