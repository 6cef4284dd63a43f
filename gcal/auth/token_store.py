"""
Tool: Token Store
Purpose: Read client credentials and read/write the OAuth token file

The token file holds a single JSON object (access token, refresh token,
expiry) and is written with mode 0600. A missing or unreadable token file is
not an error: it just means the user has to authorize again.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from gcal.auth.models import ClientCredentials, OAuthToken
from gcal.errors import CollaboratorError
from gcal.logging_config import get_logger

logger = get_logger(__name__)

TOKEN_FILE_MODE = 0o600


def load_credentials(path: Path) -> ClientCredentials:
    """Load the client secrets file downloaded from the Cloud Console.

    Raises:
        CollaboratorError: the file is missing or is not a client secrets file.
    """
    try:
        with open(path) as f:
            data = json.load(f)
    except OSError as e:
        raise CollaboratorError(f"missing client credentials: {e}") from e
    except json.JSONDecodeError as e:
        raise CollaboratorError(f"failed to parse client credentials: {path}: {e}") from e

    try:
        return ClientCredentials.from_dict(data)
    except (KeyError, TypeError, AttributeError) as e:
        raise CollaboratorError(
            f"failed to parse client credentials: {path}: missing {e}"
        ) from e


def load_token(path: Path) -> OAuthToken | None:
    """Return the stored token, or None when there is no usable one."""
    try:
        with open(path) as f:
            data = json.load(f)
        return OAuthToken.from_dict(data)
    except FileNotFoundError:
        return None
    except (OSError, ValueError, KeyError, TypeError) as e:
        logger.warning("token_file_unreadable", path=str(path), error=str(e))
        return None


def save_token(path: Path, token: OAuthToken) -> None:
    """Write the token file, creating its directory if needed.

    Raises:
        CollaboratorError: the file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(path, os.O_RDWR | os.O_CREAT | os.O_TRUNC, TOKEN_FILE_MODE)
        with os.fdopen(fd, "w") as f:
            json.dump(token.to_dict(), f)
        os.chmod(path, TOKEN_FILE_MODE)
    except OSError as e:
        raise CollaboratorError(f"unable to save token: {path}: {e}") from e

    logger.debug("token_saved", path=str(path))


__all__ = ["TOKEN_FILE_MODE", "load_credentials", "load_token", "save_token"]
