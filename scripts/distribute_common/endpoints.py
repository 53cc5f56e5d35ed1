"""Build Firebase App Distribution endpoint addresses."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

__all__ = ["DEFAULT_API_ROOT", "build_distribute_url", "build_upload_url"]

DEFAULT_API_ROOT = "https://firebaseappdistribution.googleapis.com"

_UPLOAD_TEMPLATE = (
    "{root}/upload/v1/projects/{project_id}/apps/{app_id}/releases:upload"
)
_DISTRIBUTE_TEMPLATE = (
    "{root}/v1/projects/{project_id}/apps/{app_id}/releases/{release_name}:distribute"
)
_INVALID_SEGMENT = re.compile(r"[\s?#\x00-\x1f\x7f]")
_LOOPBACK_HOSTS = {"localhost", "127.0.0.1", "::1"}


def _normalise_root(api_root: str) -> str:
    parts = urlsplit(api_root)
    if not parts.hostname:
        message = f"API root must be an absolute URL: {api_root!r}"
        raise ValueError(message)
    if parts.scheme != "https" and not (
        parts.scheme == "http" and parts.hostname in _LOOPBACK_HOSTS
    ):
        message = f"API root must use https: {api_root!r}"
        raise ValueError(message)
    if parts.query or parts.fragment:
        message = f"API root must not carry a query or fragment: {api_root!r}"
        raise ValueError(message)
    return api_root.rstrip("/")


def _require_segment(label: str, value: str) -> str:
    if not value:
        message = f"{label} must not be empty"
        raise ValueError(message)
    if _INVALID_SEGMENT.search(value):
        message = f"{label} contains characters not allowed in a URL path: {value!r}"
        raise ValueError(message)
    return value


def build_upload_url(
    project_id: str, app_id: str, *, api_root: str = DEFAULT_API_ROOT
) -> str:
    """Return the ``releases:upload`` endpoint for ``app_id``.

    Examples
    --------
    >>> build_upload_url("demo", "1:123:android:abc")
    'https://firebaseappdistribution.googleapis.com/upload/v1/projects/demo/apps/1:123:android:abc/releases:upload'
    """
    return _UPLOAD_TEMPLATE.format(
        root=_normalise_root(api_root),
        project_id=_require_segment("Project id", project_id),
        app_id=_require_segment("App id", app_id),
    )


def build_distribute_url(
    project_id: str,
    app_id: str,
    release_name: str,
    *,
    api_root: str = DEFAULT_API_ROOT,
) -> str:
    """Return the ``:distribute`` endpoint for ``release_name``.

    The release name is inserted verbatim, slashes included, as returned by
    the upload call.

    Examples
    --------
    >>> build_distribute_url("demo", "app", "releases/r1")
    'https://firebaseappdistribution.googleapis.com/v1/projects/demo/apps/app/releases/releases/r1:distribute'
    """
    return _DISTRIBUTE_TEMPLATE.format(
        root=_normalise_root(api_root),
        project_id=_require_segment("Project id", project_id),
        app_id=_require_segment("App id", app_id),
        release_name=_require_segment("Release name", release_name),
    )
