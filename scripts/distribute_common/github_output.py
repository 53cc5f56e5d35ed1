"""Helpers for writing GitHub Actions outputs, summaries and commands."""

from __future__ import annotations

import uuid
from collections.abc import Mapping, Sequence
from pathlib import Path

__all__ = [
    "append_step_summary",
    "format_workflow_command",
    "write_github_output",
]


def write_github_output(
    file: Path, values: Mapping[str, str | Sequence[str]]
) -> None:
    """Append ``values`` to ``file`` using GitHub's multiline syntax.

    Parameters
    ----------
    file:
        Path to the GitHub Actions output file (typically ``GITHUB_OUTPUT``).
    values:
        Mapping of output keys to string or sequence values. Sequence values
        are joined with newlines before being written.

    Examples
    --------
    >>> write_github_output(Path("/tmp/out"), {"releaseName": "r1"})  # doctest: +SKIP
    """

    file.parent.mkdir(parents=True, exist_ok=True)
    with file.open("a", encoding="utf-8") as handle:
        for key, value in values.items():
            delimiter = f"EOF_{uuid.uuid4().hex}"
            handle.write(f"{key}<<{delimiter}\n")
            if isinstance(value, Sequence) and not isinstance(value, str):
                handle.write("\n".join(value))
            else:
                handle.write(str(value))
            handle.write(f"\n{delimiter}\n")


def append_step_summary(file: Path, markdown: str) -> None:
    """Append ``markdown`` to the job summary ``file``.

    Raises
    ------
    OSError
        If the summary file cannot be opened or written.
    """

    file.parent.mkdir(parents=True, exist_ok=True)
    with file.open("a", encoding="utf-8") as handle:
        handle.write(markdown)
        if not markdown.endswith("\n"):
            handle.write("\n")


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value: str) -> str:
    return _escape_data(value).replace(":", "%3A").replace(",", "%2C")


def format_workflow_command(
    command: str, message: str = "", **properties: str
) -> str:
    """Render a ``::command key=value::message`` workflow command line.

    Examples
    --------
    >>> format_workflow_command("error", "boom\\nagain", title="Upload Failure")
    '::error title=Upload Failure::boom%0Aagain'
    >>> format_workflow_command("endgroup")
    '::endgroup::'
    """

    rendered = ",".join(
        f"{key}={_escape_property(value)}" for key, value in properties.items()
    )
    prefix = f"::{command} {rendered}" if rendered else f"::{command}"
    return f"{prefix}::{_escape_data(message)}"
