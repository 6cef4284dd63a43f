"""
Tool: OAuth
Purpose: Authorization-code flow and token refresh for Google Calendar

Handles:
- Consent URL generation (PKCE, offline access)
- Code exchange (auth code -> tokens)
- Token refresh
- Returning a valid token, authorizing or refreshing as needed

Dependencies:
    - aiohttp (pip install aiohttp)
"""

from __future__ import annotations

import base64
import hashlib
import secrets
import sys
import uuid
from collections.abc import Callable
from typing import Any
from urllib.parse import parse_qs, urlencode, urlparse

import aiohttp

from gcal.auth.models import ClientCredentials, OAuthToken
from gcal.auth.token_store import load_credentials, load_token, save_token
from gcal.config import AuthSettings
from gcal.errors import CollaboratorError
from gcal.logging_config import get_logger

logger = get_logger(__name__)

CALENDAR_READONLY_SCOPE = "https://www.googleapis.com/auth/calendar.readonly"
SCOPES = [CALENDAR_READONLY_SCOPE]

PromptFn = Callable[[str], str]


def generate_pkce_pair() -> tuple[str, str]:
    """
    Generate PKCE code verifier and challenge pair per RFC 7636.

    Returns:
        Tuple of (code_verifier, code_challenge)
    """
    verifier_bytes = secrets.token_bytes(43)
    code_verifier = base64.urlsafe_b64encode(verifier_bytes).rstrip(b"=").decode("ascii")

    challenge_bytes = hashlib.sha256(code_verifier.encode("ascii")).digest()
    code_challenge = base64.urlsafe_b64encode(challenge_bytes).rstrip(b"=").decode("ascii")

    return code_verifier, code_challenge


def authorization_url(
    credentials: ClientCredentials,
    code_challenge: str,
    state: str,
    scopes: list[str] | None = None,
) -> str:
    params = {
        "client_id": credentials.client_id,
        "redirect_uri": credentials.redirect_uri,
        "response_type": "code",
        "scope": " ".join(scopes or SCOPES),
        "state": state,
        "access_type": "offline",  # Get refresh token
        "prompt": "consent",
        "code_challenge": code_challenge,
        "code_challenge_method": "S256",
    }
    return f"{credentials.auth_uri}?{urlencode(params)}"


def extract_code(pasted: str) -> str:
    """Accept either the bare code or the whole redirect URL."""
    pasted = pasted.strip()
    if "code=" in pasted:
        query = urlparse(pasted).query or pasted
        values = parse_qs(query).get("code")
        if values:
            return values[0]
    return pasted


async def _post_token_request(token_uri: str, form: dict[str, str]) -> dict[str, Any]:
    try:
        async with aiohttp.ClientSession() as session:
            async with session.post(token_uri, data=form) as resp:
                if resp.status != 200:
                    error = await resp.text()
                    raise CollaboratorError(f"token request failed: HTTP {resp.status}: {error}")
                return await resp.json()
    except aiohttp.ClientError as e:
        raise CollaboratorError(f"token request failed: {e!s}") from e


async def exchange_code(
    credentials: ClientCredentials,
    code: str,
    code_verifier: str,
) -> OAuthToken:
    tokens = await _post_token_request(credentials.token_uri, {
        "client_id": credentials.client_id,
        "client_secret": credentials.client_secret,
        "code": code,
        "code_verifier": code_verifier,
        "redirect_uri": credentials.redirect_uri,
        "grant_type": "authorization_code",
    })
    return OAuthToken.from_response(tokens)


async def refresh_token(credentials: ClientCredentials, token: OAuthToken) -> OAuthToken:
    """Trade the refresh token for a new access token."""
    if not token.refresh_token:
        raise CollaboratorError("token expired and no refresh token")

    tokens = await _post_token_request(credentials.token_uri, {
        "client_id": credentials.client_id,
        "client_secret": credentials.client_secret,
        "refresh_token": token.refresh_token,
        "grant_type": "refresh_token",
    })
    refreshed = OAuthToken.from_response(tokens, previous=token)
    logger.debug("token_refreshed", expiry=str(refreshed.expiry))
    return refreshed


async def authorize(
    credentials: ClientCredentials,
    prompt: PromptFn = input,
) -> OAuthToken:
    """Walk the user through the consent screen and exchange the code."""
    code_verifier, code_challenge = generate_pkce_pair()
    state = str(uuid.uuid4())
    url = authorization_url(credentials, code_challenge, state)

    print("Open this link in your browser and grant calendar access:", file=sys.stderr)
    print(f"\n  {url}\n", file=sys.stderr)
    print(
        "After approving, paste the code (or the whole address you were sent to).",
        file=sys.stderr,
    )

    try:
        pasted = prompt("code: ")
    except EOFError:
        pasted = ""
    code = extract_code(pasted)
    if not code:
        raise CollaboratorError("unable to authorize: no authorization code provided")

    return await exchange_code(credentials, code, code_verifier)


async def get_valid_token(
    settings: AuthSettings,
    prompt: PromptFn = input,
    force: bool = False,
) -> OAuthToken:
    """Return a usable token, authorizing or refreshing and saving as needed.

    Raises:
        CollaboratorError: credentials are missing or a token request failed.
    """
    credentials = load_credentials(settings.credentials_path)

    token = None if force else load_token(settings.token_path)
    if token is None:
        token = await authorize(credentials, prompt=prompt)
        save_token(settings.token_path, token)
    elif token.is_expired():
        token = await refresh_token(credentials, token)
        save_token(settings.token_path, token)

    return token


__all__ = [
    "CALENDAR_READONLY_SCOPE",
    "SCOPES",
    "authorization_url",
    "authorize",
    "exchange_code",
    "extract_code",
    "generate_pkce_pair",
    "get_valid_token",
    "refresh_token",
]
