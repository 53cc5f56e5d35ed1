"""Action inputs and their normalisation.

Usage
-----
Load the inputs of the current step::

    from distribute_common.config import load_inputs
    from distribute_common.environment import GitHubActionsEnvironment

    inputs = load_inputs(GitHubActionsEnvironment())
    print(inputs.groups)
"""

from __future__ import annotations

import dataclasses
import math

from .endpoints import DEFAULT_API_ROOT
from .environment import ActionEnvironment
from .errors import InputError

__all__ = [
    "DEFAULT_RELEASE_NOTES",
    "DEFAULT_TIMEOUT",
    "DistributionInputs",
    "load_inputs",
    "parse_groups",
]

DEFAULT_RELEASE_NOTES = "Distributed via GitHub Actions"
DEFAULT_TIMEOUT = 300.0


@dataclasses.dataclass(frozen=True, slots=True)
class DistributionInputs:
    """Inputs for one distribution run.

    Attributes
    ----------
    credentials : str
        Raw service account JSON. Never shown in ``repr``.
    app_id : str
        Firebase app identifier.
    file : str
        Artefact path as supplied.
    groups : tuple[str, ...]
        Trimmed tester group names; empty when distribution is skipped.
    release_notes : str
        Text attached to the distributed release.
    timeout : float | None
        Per-request timeout in seconds, ``None`` to wait indefinitely.
    api_root : str
        Base address of the distribution API.
    """

    credentials: str = dataclasses.field(repr=False)
    app_id: str
    file: str
    groups: tuple[str, ...] = ()
    release_notes: str = DEFAULT_RELEASE_NOTES
    timeout: float | None = DEFAULT_TIMEOUT
    api_root: str = DEFAULT_API_ROOT


def parse_groups(value: str | None) -> tuple[str, ...]:
    """Split a comma-separated group list, trimming each name.

    Examples
    --------
    >>> parse_groups("testers, qa")
    ('testers', 'qa')
    >>> parse_groups(" , ")
    ()
    """
    if not value:
        return ()
    return tuple(name.strip() for name in value.split(",") if name.strip())


def _parse_timeout(value: str) -> float | None:
    if not value:
        return DEFAULT_TIMEOUT
    try:
        seconds = float(value)
    except ValueError as exc:
        message = f"Input 'timeout' must be a number of seconds, got {value!r}"
        raise InputError(message) from exc
    if seconds < 0 or not math.isfinite(seconds):
        message = f"Input 'timeout' must be a non-negative number, got {value!r}"
        raise InputError(message)
    return seconds or None


def load_inputs(env: ActionEnvironment) -> DistributionInputs:
    """Read and normalise the action inputs from ``env``.

    Raises
    ------
    InputError
        If a required input is missing or ``timeout`` is invalid.
    """
    return DistributionInputs(
        credentials=env.get_input("serviceCredentialsFileContent", required=True),
        app_id=env.get_input("appId", required=True),
        file=env.get_input("file", required=True),
        groups=parse_groups(env.get_input("groups")),
        release_notes=env.get_input("releaseNotes") or DEFAULT_RELEASE_NOTES,
        timeout=_parse_timeout(env.get_input("timeout")),
        api_root=env.get_input("apiRoot") or DEFAULT_API_ROOT,
    )
