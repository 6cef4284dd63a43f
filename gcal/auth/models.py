"""OAuth data models: installed-app client credentials and stored tokens."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

GOOGLE_AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"


@dataclass(frozen=True)
class ClientCredentials:
    """The ``installed`` (or ``web``) block of a Google client secrets file."""

    client_id: str
    client_secret: str
    auth_uri: str = GOOGLE_AUTH_URI
    token_uri: str = GOOGLE_TOKEN_URI
    redirect_uris: tuple[str, ...] = ("http://localhost",)

    @property
    def redirect_uri(self) -> str:
        return self.redirect_uris[0]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ClientCredentials:
        """Build from the parsed JSON document.

        Raises:
            KeyError: no client block or no client id/secret.
        """
        block = data.get("installed") or data.get("web")
        if block is None:
            raise KeyError("installed")
        return cls(
            client_id=block["client_id"],
            client_secret=block["client_secret"],
            auth_uri=block.get("auth_uri", GOOGLE_AUTH_URI),
            token_uri=block.get("token_uri", GOOGLE_TOKEN_URI),
            redirect_uris=tuple(block.get("redirect_uris") or ("http://localhost",)),
        )


@dataclass
class OAuthToken:
    """An access token plus what is needed to renew it."""

    access_token: str
    token_type: str = "Bearer"
    refresh_token: str | None = None
    expiry: datetime | None = None
    scopes: list[str] = field(default_factory=list)

    def is_expired(
        self,
        leeway: timedelta = timedelta(seconds=60),
        now: datetime | None = None,
    ) -> bool:
        """True once the token is within ``leeway`` of its expiry."""
        if self.expiry is None:
            return False
        now = now or datetime.now(timezone.utc)
        return self.expiry - leeway <= now

    @classmethod
    def from_response(
        cls,
        data: dict[str, Any],
        previous: OAuthToken | None = None,
        now: datetime | None = None,
    ) -> OAuthToken:
        """Build from a token endpoint response.

        A refresh response usually omits the refresh token; the previous one
        is carried over.
        """
        now = now or datetime.now(timezone.utc)
        expires_in = data.get("expires_in")
        expiry = now + timedelta(seconds=int(expires_in)) if expires_in else None
        refresh_token = data.get("refresh_token") or (previous.refresh_token if previous else None)
        scope = data.get("scope")
        return cls(
            access_token=data["access_token"],
            token_type=data.get("token_type", "Bearer"),
            refresh_token=refresh_token,
            expiry=expiry,
            scopes=scope.split() if scope else (list(previous.scopes) if previous else []),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OAuthToken:
        expiry = data.get("expiry")
        parsed_expiry = None
        if expiry:
            parsed_expiry = datetime.fromisoformat(expiry.replace("Z", "+00:00"))
            if parsed_expiry.tzinfo is None:
                parsed_expiry = parsed_expiry.replace(tzinfo=timezone.utc)
        return cls(
            access_token=data["access_token"],
            token_type=data.get("token_type") or "Bearer",
            refresh_token=data.get("refresh_token") or None,
            expiry=parsed_expiry,
            scopes=list(data.get("scopes") or []),
        )

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "access_token": self.access_token,
            "token_type": self.token_type,
        }
        if self.refresh_token:
            d["refresh_token"] = self.refresh_token
        if self.expiry:
            d["expiry"] = self.expiry.isoformat()
        if self.scopes:
            d["scopes"] = self.scopes
        return d

    @property
    def authorization_header(self) -> str:
        return f"{self.token_type} {self.access_token}"
