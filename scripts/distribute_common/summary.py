"""Report the created release to the workflow."""

from __future__ import annotations

from collections.abc import Sequence

from .environment import ActionEnvironment
from .errors import InputError, SummaryError

__all__ = ["RELEASE_NAME_OUTPUT", "render_summary", "report_release"]

RELEASE_NAME_OUTPUT = "releaseName"


def _cell(value: str) -> str:
    """Render ``value`` as a table cell that cannot open extra columns.

    Pipes are escaped. A value holding a backtick cannot sit in a code span,
    so it is written as escaped plain text instead.

    Examples
    --------
    >>> _cell("releases/r1")
    '`releases/r1`'
    >>> _cell("a|b")
    '`a\\\\|b`'
    >>> _cell("qa`x")
    'qa\\\\`x'
    """
    text = " ".join(value.splitlines()).replace("|", "\\|")
    if "`" in text:
        return text.replace("`", "\\`")
    return f"`{text}`"


def render_summary(
    *,
    app_id: str,
    release_name: str,
    groups: Sequence[str],
    distributed: bool,
) -> str:
    """Return a Markdown job summary describing the release.

    Examples
    --------
    >>> print(render_summary(app_id="app", release_name="r1", groups=(),
    ...                      distributed=False))
    ### Firebase App Distribution
    <BLANKLINE>
    | Field | Value |
    | --- | --- |
    | App | `app` |
    | Release | `r1` |
    | Groups | _not distributed_ |
    <BLANKLINE>
    """
    if distributed and groups:
        group_text = ", ".join(_cell(group) for group in groups)
    else:
        group_text = "_not distributed_"
    lines = [
        "### Firebase App Distribution",
        "",
        "| Field | Value |",
        "| --- | --- |",
        f"| App | {_cell(app_id)} |",
        f"| Release | {_cell(release_name)} |",
        f"| Groups | {group_text} |",
        "",
    ]
    return "\n".join(lines)


def report_release(
    env: ActionEnvironment,
    *,
    app_id: str,
    release_name: str,
    groups: Sequence[str],
    distributed: bool,
) -> None:
    """Publish the ``releaseName`` output and append the job summary.

    Raises
    ------
    SummaryError
        If the output or summary file is not configured or cannot be written.
    """
    try:
        env.set_output(RELEASE_NAME_OUTPUT, release_name)
    except (InputError, OSError) as exc:
        message = f"Failed to write output '{RELEASE_NAME_OUTPUT}': {exc}"
        raise SummaryError(message) from exc

    env.write_summary(
        render_summary(
            app_id=app_id,
            release_name=release_name,
            groups=groups,
            distributed=distributed,
        )
    )
    env.log(f"Release {release_name} is available as output '{RELEASE_NAME_OUTPUT}'.")
