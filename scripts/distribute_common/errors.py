"""Exception types raised by the distribution pipeline."""

from __future__ import annotations

__all__ = [
    "AuthenticationError",
    "CredentialParseError",
    "DistributionActionError",
    "DistributionError",
    "InputError",
    "RequestError",
    "SummaryError",
    "UploadError",
]


class DistributionActionError(RuntimeError):
    """Base class for failures that abort the distribution run.

    Attributes
    ----------
    title : str
        Title used when the failure is reported as a workflow ``::error``.
    """

    title = "Distribution Action Failure"


class InputError(DistributionActionError):
    """Raised when an action input or runner variable is missing or invalid."""

    title = "Configuration Error"


class CredentialParseError(DistributionActionError):
    """Raised when the service account JSON cannot be decoded."""

    title = "Credential Error"


class AuthenticationError(DistributionActionError):
    """Raised when the service account token exchange fails."""

    title = "Authentication Failure"


class RequestError(DistributionActionError):
    """Raised when a request to the distribution API fails.

    Parameters
    ----------
    message : str
        Human readable description of the failure.
    status_code : int | None, optional
        HTTP status returned by the API, or ``None`` for transport errors.
    detail : str | None, optional
        Diagnostic text extracted from the response body.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        detail: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class UploadError(RequestError):
    """Raised when the artefact upload request fails."""

    title = "Upload Failure"


class DistributionError(RequestError):
    """Raised when distributing the release to tester groups fails."""

    title = "Distribution Failure"


class SummaryError(DistributionActionError):
    """Raised when the job summary cannot be written."""

    title = "Summary Failure"
