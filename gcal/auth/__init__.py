"""OAuth credentials, token storage, and the authorization flow."""

from gcal.auth.models import ClientCredentials, OAuthToken
from gcal.auth.oauth import get_valid_token
from gcal.auth.token_store import load_credentials, load_token, save_token

__all__ = [
    "ClientCredentials",
    "OAuthToken",
    "get_valid_token",
    "load_credentials",
    "load_token",
    "save_token",
]
