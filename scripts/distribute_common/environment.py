"""Host environment abstraction for the distribution action.

The pipeline talks to the CI runner only through :class:`ActionEnvironment`.
:class:`GitHubActionsEnvironment` implements it with the GitHub Actions
conventions: ``INPUT_*`` variables, the ``GITHUB_OUTPUT`` and
``GITHUB_STEP_SUMMARY`` files, and workflow commands printed to the console.
"""

from __future__ import annotations

import contextlib
import os
import sys
import typing as typ
from pathlib import Path

from .errors import InputError, SummaryError
from .github_output import (
    append_step_summary,
    format_workflow_command,
    write_github_output,
)

__all__ = [
    "ActionEnvironment",
    "GitHubActionsEnvironment",
    "input_variable_name",
    "require_env_path",
]


class ActionEnvironment(typ.Protocol):
    """Capabilities the pipeline needs from the hosting CI platform."""

    def get_input(self, name: str, *, required: bool = False) -> str:
        """Return the stripped value of input ``name`` (``""`` when absent)."""
        ...

    def set_output(self, name: str, value: str) -> None:
        """Publish ``value`` as step output ``name``."""
        ...

    def fail(self, message: str, *, title: str | None = None) -> None:
        """Report the run as failed with ``message``."""
        ...

    def log(self, message: str) -> None:
        """Write an informational line."""
        ...

    def warning(self, message: str, *, title: str | None = None) -> None:
        """Write a warning annotation."""
        ...

    def redact(self, value: str) -> None:
        """Register ``value`` as a secret to be masked in logs."""
        ...

    def group(self, title: str) -> contextlib.AbstractContextManager[None]:
        """Return a context manager that folds log lines under ``title``."""
        ...

    def write_summary(self, markdown: str) -> None:
        """Append ``markdown`` to the job summary."""
        ...


def require_env_path(
    name: str, environ: typ.Mapping[str, str] | None = None
) -> Path:
    """Return ``Path`` value for ``name`` or raise :class:`InputError`.

    Parameters
    ----------
    name:
        Name of the environment variable to fetch.
    environ:
        Mapping to read from; defaults to :data:`os.environ`.

    Raises
    ------
    InputError
        Raised when the environment variable is unset or empty.
    """
    source = os.environ if environ is None else environ
    value = source.get(name)
    if not value:
        message = f"Environment variable '{name}' is not set."
        raise InputError(message)
    return Path(value)


def input_variable_name(name: str) -> str:
    """Return the variable GitHub uses to pass input ``name`` to a step.

    Examples
    --------
    >>> input_variable_name("serviceCredentialsFileContent")
    'INPUT_SERVICECREDENTIALSFILECONTENT'
    >>> input_variable_name("release notes")
    'INPUT_RELEASE_NOTES'
    """
    return f"INPUT_{name.replace(' ', '_').upper()}"


class GitHubActionsEnvironment:
    """Run the pipeline against a GitHub Actions runner.

    Parameters
    ----------
    environ : Mapping[str, str] | None, optional
        Process environment; defaults to :data:`os.environ`.
    overrides : Mapping[str, str | None] | None, optional
        Input values supplied on the command line. Entries that are not
        ``None`` take precedence over the ``INPUT_*`` variables, so an empty
        string clears an input.
    """

    def __init__(
        self,
        environ: typ.Mapping[str, str] | None = None,
        overrides: typ.Mapping[str, str | None] | None = None,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self._overrides = {
            key: value
            for key, value in (overrides or {}).items()
            if value is not None
        }
        self.failed = False

    def get_input(self, name: str, *, required: bool = False) -> str:
        value = self._overrides.get(name)
        if value is None:
            value = self._environ.get(input_variable_name(name), "")
        value = value.strip()
        if required and not value:
            message = f"Input required and not supplied: {name}"
            raise InputError(message)
        return value

    def set_output(self, name: str, value: str) -> None:
        github_output = require_env_path("GITHUB_OUTPUT", self._environ)
        write_github_output(github_output, {name: value})

    def fail(self, message: str, *, title: str | None = None) -> None:
        self.failed = True
        properties = {"title": title} if title else {}
        print(
            format_workflow_command("error", message, **properties),
            file=sys.stderr,
        )

    def log(self, message: str) -> None:
        print(message)

    def warning(self, message: str, *, title: str | None = None) -> None:
        properties = {"title": title} if title else {}
        print(
            format_workflow_command("warning", message, **properties),
            file=sys.stderr,
        )

    def redact(self, value: str) -> None:
        for line in value.splitlines():
            if line.strip():
                print(format_workflow_command("add-mask", line))

    @contextlib.contextmanager
    def group(self, title: str) -> typ.Iterator[None]:
        print(format_workflow_command("group", title))
        try:
            yield
        finally:
            print(format_workflow_command("endgroup"))

    def write_summary(self, markdown: str) -> None:
        summary_path = self._environ.get("GITHUB_STEP_SUMMARY")
        if not summary_path:
            self.warning(
                "GITHUB_STEP_SUMMARY is not set; skipping job summary.",
                title="Summary Skipped",
            )
            return
        try:
            append_step_summary(Path(summary_path), markdown)
        except OSError as exc:
            message = f"Failed to write job summary to {summary_path}: {exc}"
            raise SummaryError(message) from exc
