"""HTTP calls to the Firebase App Distribution REST API."""

from __future__ import annotations

import typing as typ
from collections.abc import Sequence

import httpx

from .artefact import ResolvedArtefact
from .endpoints import DEFAULT_API_ROOT, build_distribute_url, build_upload_url
from .errors import DistributionError, RequestError, UploadError

__all__ = ["OCTET_STREAM", "distribute_release", "upload_artefact"]

OCTET_STREAM = "application/octet-stream"
_MAX_DETAIL_LENGTH = 500


def _auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def _describe_response(response: httpx.Response) -> str:
    """Return the most useful diagnostic text carried by ``response``."""
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            return error["message"]
        if isinstance(payload.get("message"), str):
            return payload["message"]
    text = response.text.strip()
    if len(text) > _MAX_DETAIL_LENGTH:
        return f"{text[:_MAX_DETAIL_LENGTH]}..."
    return text or response.reason_phrase


def _raise_for_status(
    response: httpx.Response, error_type: type[RequestError], action: str
) -> None:
    if response.is_success:
        return
    detail = _describe_response(response)
    message = f"{action} failed with HTTP {response.status_code}: {detail}"
    raise error_type(message, status_code=response.status_code, detail=detail)


def upload_artefact(
    client: httpx.Client,
    *,
    project_id: str,
    app_id: str,
    artefact: ResolvedArtefact,
    token: str,
    api_root: str = DEFAULT_API_ROOT,
) -> str:
    """Upload ``artefact`` and return the release name reported by the API.

    The file is streamed from disk as the single multipart part ``file``.

    Parameters
    ----------
    client : httpx.Client
        Client used for the request; its timeout applies.
    project_id : str
        Firebase project that owns ``app_id``.
    app_id : str
        Firebase app receiving the release.
    artefact : ResolvedArtefact
        File to upload.
    token : str
        Bearer token for the ``Authorization`` header.
    api_root : str
        Base address of the distribution API.

    Returns
    -------
    str
        Release name from the ``name`` field of the response body.

    Raises
    ------
    UploadError
        On transport errors, non-2xx responses, an unreadable body, or a
        response without a release name.
    """
    try:
        url = build_upload_url(project_id, app_id, api_root=api_root)
    except ValueError as exc:
        message = f"Cannot build upload URL: {exc}"
        raise UploadError(message) from exc

    try:
        with artefact.path.open("rb") as handle:
            response = client.post(
                url,
                files={"file": (artefact.name, handle, OCTET_STREAM)},
                headers=_auth_headers(token),
            )
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        message = f"Upload of {artefact.name} failed: {exc}"
        raise UploadError(message) from exc
    except OSError as exc:
        message = f"Could not read {artefact.path}: {exc}"
        raise UploadError(message) from exc

    _raise_for_status(response, UploadError, f"Upload of {artefact.name}")

    try:
        payload: typ.Any = response.json()
    except ValueError as exc:
        message = f"Upload of {artefact.name} returned a body that is not JSON"
        raise UploadError(message, status_code=response.status_code) from exc

    release_name = payload.get("name") if isinstance(payload, dict) else None
    if not isinstance(release_name, str) or not release_name:
        message = f"Upload of {artefact.name} returned no release name"
        raise UploadError(message, status_code=response.status_code)
    return release_name


def distribute_release(
    client: httpx.Client,
    *,
    project_id: str,
    app_id: str,
    release_name: str,
    groups: Sequence[str],
    release_notes: str,
    token: str,
    api_root: str = DEFAULT_API_ROOT,
) -> None:
    """Distribute ``release_name`` to the tester ``groups``.

    Raises
    ------
    DistributionError
        On transport errors or non-2xx responses. The release created by the
        upload is left in place.
    """
    try:
        url = build_distribute_url(
            project_id, app_id, release_name, api_root=api_root
        )
    except ValueError as exc:
        message = f"Cannot build distribute URL: {exc}"
        raise DistributionError(message) from exc

    body = {
        "groupNames": [group.strip() for group in groups],
        "releaseNotes": {"text": release_notes},
    }
    try:
        response = client.post(url, json=body, headers=_auth_headers(token))
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        message = f"Distribution of {release_name} failed: {exc}"
        raise DistributionError(message) from exc

    _raise_for_status(response, DistributionError, f"Distribution of {release_name}")
