# /// script
# requires-python = ">=3.11"
# dependencies = [
#   "cyclopts>=3.24.0,<4.0.0",
#   "google-auth>=2.20",
#   "httpx>=0.27",
#   "requests>=2.31",
# ]
# ///

"""Command-line entry point for the App Distribution upload helper.

Inputs are read from the ``INPUT_*`` variables GitHub Actions exports for the
step; the optional flags override them for local runs. Service credentials are
only ever read from ``INPUT_SERVICECREDENTIALSFILECONTENT``.

Examples
--------
Upload an APK locally after exporting the credentials::

    export INPUT_SERVICECREDENTIALSFILECONTENT="$(cat service-account.json)"
    export GITHUB_OUTPUT="$(mktemp)"
    uv run scripts/distribute.py --app-id 1:123:android:abc \
        --file build/app-release.apk --groups "testers, qa"
"""

from __future__ import annotations

import os

from distribute_common import GitHubActionsEnvironment, run

import cyclopts

app = cyclopts.App(
    help="Upload a build artefact to Firebase App Distribution.",
)


@app.default
def main(
    *,
    app_id: str | None = None,
    file: str | None = None,
    groups: str | None = None,
    release_notes: str | None = None,
    timeout: str | None = None,
    api_root: str | None = None,
) -> None:
    """Upload ``file`` and optionally distribute it to ``groups``.

    Parameters
    ----------
    app_id:
        Firebase app identifier (``INPUT_APPID``).
    file:
        Path to the artefact to upload (``INPUT_FILE``).
    groups:
        Comma-separated tester group names (``INPUT_GROUPS``).
    release_notes:
        Release notes text (``INPUT_RELEASENOTES``).
    timeout:
        Per-request timeout in seconds, ``0`` to disable (``INPUT_TIMEOUT``).
    api_root:
        Base address of the distribution API (``INPUT_APIROOT``).
    """
    env = GitHubActionsEnvironment(
        os.environ,
        overrides={
            "appId": app_id,
            "file": file,
            "groups": groups,
            "releaseNotes": release_notes,
            "timeout": timeout,
            "apiRoot": api_root,
        },
    )
    if exit_code := run(env):
        raise SystemExit(exit_code)


if __name__ == "__main__":
    app()
