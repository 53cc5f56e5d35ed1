"""Public interface for the App Distribution upload helper package."""

from .artefact import ResolvedArtefact, resolve_artefact
from .auth import FIREBASE_SCOPE, fetch_access_token
from .client import distribute_release, upload_artefact
from .config import (
    DEFAULT_RELEASE_NOTES,
    DistributionInputs,
    load_inputs,
    parse_groups,
)
from .credentials import ServiceAccountKey, parse_service_account
from .endpoints import DEFAULT_API_ROOT, build_distribute_url, build_upload_url
from .environment import ActionEnvironment, GitHubActionsEnvironment, require_env_path
from .errors import (
    AuthenticationError,
    CredentialParseError,
    DistributionActionError,
    DistributionError,
    InputError,
    RequestError,
    SummaryError,
    UploadError,
)
from .pipeline import DistributionResult, distribute_artefact, run
from .summary import RELEASE_NAME_OUTPUT, render_summary, report_release

__all__ = [
    "ActionEnvironment",
    "AuthenticationError",
    "build_distribute_url",
    "build_upload_url",
    "CredentialParseError",
    "DEFAULT_API_ROOT",
    "DEFAULT_RELEASE_NOTES",
    "distribute_artefact",
    "distribute_release",
    "DistributionActionError",
    "DistributionError",
    "DistributionInputs",
    "DistributionResult",
    "fetch_access_token",
    "FIREBASE_SCOPE",
    "GitHubActionsEnvironment",
    "InputError",
    "load_inputs",
    "parse_groups",
    "parse_service_account",
    "RELEASE_NAME_OUTPUT",
    "render_summary",
    "report_release",
    "RequestError",
    "require_env_path",
    "resolve_artefact",
    "ResolvedArtefact",
    "run",
    "ServiceAccountKey",
    "SummaryError",
    "upload_artefact",
    "UploadError",
]
