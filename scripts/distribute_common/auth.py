"""Exchange service account credentials for a bearer token."""

from __future__ import annotations

import typing as typ
from collections.abc import Callable, Sequence

from google.auth import exceptions as google_exceptions
from google.auth.transport.requests import Request
from google.oauth2 import service_account

from .credentials import ServiceAccountKey
from .errors import AuthenticationError

__all__ = ["FIREBASE_SCOPE", "fetch_access_token"]

FIREBASE_SCOPE = "https://www.googleapis.com/auth/firebase"


def _identity(key: ServiceAccountKey) -> str:
    return key.client_email or f"for project {key.project_id}"


def fetch_access_token(
    key: ServiceAccountKey,
    *,
    scopes: Sequence[str] = (FIREBASE_SCOPE,),
    credentials_factory: Callable[..., typ.Any] = (
        service_account.Credentials.from_service_account_info
    ),
    request_factory: Callable[[], typ.Any] = Request,
) -> str:
    """Return a bearer token for ``key`` scoped to ``scopes``.

    Parameters
    ----------
    key : ServiceAccountKey
        Parsed service account credentials.
    scopes : Sequence[str]
        OAuth scopes requested for the token.
    credentials_factory : Callable[..., Any]
        Builds google-auth credentials from the key mapping and ``scopes``.
    request_factory : Callable[[], Any]
        Builds the HTTP transport google-auth uses for the exchange.

    Returns
    -------
    str
        Non-empty access token.

    Raises
    ------
    AuthenticationError
        If the credentials are rejected, the exchange fails, or the token
        endpoint returns no token.
    """
    try:
        credentials = credentials_factory(dict(key.info), scopes=list(scopes))
        credentials.refresh(request_factory())
    except (ValueError, google_exceptions.GoogleAuthError) as exc:
        message = (
            f"Token exchange for service account {_identity(key)} failed: {exc}"
        )
        raise AuthenticationError(message) from exc

    token = getattr(credentials, "token", None)
    if not token:
        message = (
            f"Token exchange for service account {_identity(key)} "
            "returned an empty access token."
        )
        raise AuthenticationError(message)
    return token
