"""Upload-then-distribute pipeline and its error boundary."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from pathlib import Path

import httpx

from .artefact import ResolvedArtefact, resolve_artefact
from .auth import fetch_access_token
from .client import distribute_release, upload_artefact
from .config import DistributionInputs, load_inputs
from .credentials import ServiceAccountKey, parse_service_account
from .environment import ActionEnvironment
from .errors import DistributionActionError
from .summary import report_release

__all__ = [
    "ARTEFACT_MISSING_TITLE",
    "DistributionResult",
    "TokenFetcher",
    "distribute_artefact",
    "run",
]

ARTEFACT_MISSING_TITLE = "Artefact Missing"

TokenFetcher = Callable[[ServiceAccountKey], str]


@dataclasses.dataclass(frozen=True, slots=True)
class DistributionResult:
    """Outcome of a successful run.

    Attributes
    ----------
    release_name : str
        Release created by the upload.
    artefact : ResolvedArtefact
        File that was uploaded.
    groups : tuple[str, ...]
        Tester groups targeted by the run.
    distributed : bool
        ``True`` when the release was distributed to ``groups``.
    """

    release_name: str
    artefact: ResolvedArtefact
    groups: tuple[str, ...]
    distributed: bool


def distribute_artefact(
    inputs: DistributionInputs,
    *,
    env: ActionEnvironment,
    http_client: httpx.Client,
    token_fetcher: TokenFetcher = fetch_access_token,
    cwd: Path | None = None,
) -> DistributionResult:
    """Upload the artefact named by ``inputs`` and distribute it.

    Steps run strictly in order; the first failure propagates and no later
    step runs.

    Parameters
    ----------
    inputs : DistributionInputs
        Normalised action inputs.
    env : ActionEnvironment
        Host environment receiving logs, secrets and outputs.
    http_client : httpx.Client
        Client used for the upload and distribute requests.
    token_fetcher : Callable[[ServiceAccountKey], str]
        Exchanges the service account for a bearer token.
    cwd : Path | None, optional
        Base directory for a relative artefact path.

    Returns
    -------
    DistributionResult
        Release name and what was done with it.
    """
    with env.group("Parse service credentials"):
        key = parse_service_account(inputs.credentials)
        if key.private_key:
            env.redact(key.private_key)
        env.log(
            f"Using service account {key.client_email or '(unnamed)'} "
            f"for project {key.project_id}."
        )

    with env.group("Authenticate"):
        token = token_fetcher(key)
        env.redact(token)
        env.log("Obtained access token.")

    with env.group("Resolve artefact"):
        artefact = resolve_artefact(inputs.file, cwd=cwd)
        env.log(f"Resolved '{artefact.source}' to '{artefact.path}'.")

    with env.group(f"Upload {artefact.name}"):
        release_name = upload_artefact(
            http_client,
            project_id=key.project_id,
            app_id=inputs.app_id,
            artefact=artefact,
            token=token,
            api_root=inputs.api_root,
        )
        env.log(f"Created release {release_name}.")

    distributed = False
    if inputs.groups:
        with env.group("Distribute release"):
            distribute_release(
                http_client,
                project_id=key.project_id,
                app_id=inputs.app_id,
                release_name=release_name,
                groups=inputs.groups,
                release_notes=inputs.release_notes,
                token=token,
                api_root=inputs.api_root,
            )
            env.log(f"Distributed {release_name} to {', '.join(inputs.groups)}.")
        distributed = True
    else:
        env.log("No tester groups supplied; skipping distribution.")

    report_release(
        env,
        app_id=inputs.app_id,
        release_name=release_name,
        groups=inputs.groups,
        distributed=distributed,
    )
    return DistributionResult(
        release_name=release_name,
        artefact=artefact,
        groups=inputs.groups,
        distributed=distributed,
    )


def run(
    env: ActionEnvironment,
    *,
    http_client: httpx.Client | None = None,
    token_fetcher: TokenFetcher = fetch_access_token,
    cwd: Path | None = None,
) -> int:
    """Run the action against ``env`` and return the process exit code.

    Every failure is reported through ``env.fail`` after its message has been
    registered for redaction.

    Returns
    -------
    int
        ``0`` on success, ``1`` when any step fails.

    Examples
    --------
    >>> from distribute_common import GitHubActionsEnvironment
    >>> run(GitHubActionsEnvironment())  # doctest: +SKIP
    0
    """
    try:
        inputs = load_inputs(env)
        if http_client is not None:
            distribute_artefact(
                inputs,
                env=env,
                http_client=http_client,
                token_fetcher=token_fetcher,
                cwd=cwd,
            )
        else:
            with httpx.Client(timeout=inputs.timeout) as client:
                distribute_artefact(
                    inputs,
                    env=env,
                    http_client=client,
                    token_fetcher=token_fetcher,
                    cwd=cwd,
                )
    except (DistributionActionError, FileNotFoundError) as exc:
        title = (
            exc.title
            if isinstance(exc, DistributionActionError)
            else ARTEFACT_MISSING_TITLE
        )
        env.redact(str(exc))
        env.fail(f"Action failed with error {exc}", title=title)
        return 1
    return 0
