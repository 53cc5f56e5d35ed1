"""Decode service account credentials supplied as JSON text."""

from __future__ import annotations

import dataclasses
import json
import typing as typ

from .errors import CredentialParseError

__all__ = ["ServiceAccountKey", "parse_service_account"]


@dataclasses.dataclass(frozen=True, slots=True)
class ServiceAccountKey:
    """Decoded service account document.

    Only ``project_id`` is guaranteed; the signing fields are empty strings
    when absent and google-auth reports them during the token exchange.

    Attributes
    ----------
    project_id : str
        Firebase project that owns the target app.
    info : Mapping[str, Any]
        Complete decoded document, passed unchanged to google-auth.
    client_email : str
        Service account identity.
    private_key : str
        PEM private key used to sign the token request.
    token_uri : str
        OAuth token endpoint.
    """

    project_id: str
    info: typ.Mapping[str, typ.Any] = dataclasses.field(repr=False)
    client_email: str = ""
    private_key: str = dataclasses.field(default="", repr=False)
    token_uri: str = ""


def _optional_text(data: typ.Mapping[str, typ.Any], field: str) -> str:
    value = data.get(field)
    return value if isinstance(value, str) else ""


def parse_service_account(text: str) -> ServiceAccountKey:
    """Parse ``text`` as a service account JSON document.

    Parameters
    ----------
    text : str
        Raw content of the service account key file.

    Returns
    -------
    ServiceAccountKey
        Decoded key exposing ``project_id`` unchanged.

    Raises
    ------
    CredentialParseError
        If ``text`` is not valid JSON, is not a JSON object, or has no
        ``project_id``. The message never echoes the credential.

    Examples
    --------
    >>> parse_service_account('{"project_id": "demo"}').project_id
    'demo'
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        message = (
            "Service credentials are not valid JSON "
            f"(line {exc.lineno}, column {exc.colno})."
        )
        # The decoder error holds the raw document; do not chain it.
        raise CredentialParseError(message) from None

    if not isinstance(data, dict):
        message = "Service credentials must be a JSON object."
        raise CredentialParseError(message)

    project_id = data.get("project_id")
    if not isinstance(project_id, str) or not project_id:
        message = "Service credentials are missing required field: project_id"
        raise CredentialParseError(message)

    return ServiceAccountKey(
        project_id=project_id,
        info=data,
        client_email=_optional_text(data, "client_email"),
        private_key=_optional_text(data, "private_key"),
        token_uri=_optional_text(data, "token_uri"),
    )
