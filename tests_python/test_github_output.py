"""Tests covering the GitHub output, summary and command helpers."""

from __future__ import annotations

from pathlib import Path

import pytest
from distribute_common.github_output import (
    append_step_summary,
    format_workflow_command,
    write_github_output,
)
from distribute_test_helpers import decode_output_file


class TestWriteGithubOutput:
    """Tests covering the GitHub output writer."""

    def test_appends_heredoc_records(self, tmp_path: Path) -> None:
        """Values are appended using unique heredoc delimiters."""

        output_file = tmp_path / "github" / "output.txt"
        output_file.parent.mkdir(parents=True)
        output_file.write_text("initial=value\n", encoding="utf-8")

        write_github_output(
            output_file,
            {"releaseName": "releases/release-id", "lines": ["one", "two"]},
        )

        values = decode_output_file(output_file)
        assert values["initial"] == "value", "Existing output lines should remain"
        assert values["releaseName"] == "releases/release-id"
        assert values["lines"] == "one\ntwo"

    def test_multiline_values_survive(self, tmp_path: Path) -> None:
        """Newlines inside values do not break the record format."""

        output_file = tmp_path / "output.txt"
        write_github_output(output_file, {"notes": "first\nsecond"})

        assert decode_output_file(output_file)["notes"] == "first\nsecond"

    def test_delimiters_are_unique(self, tmp_path: Path) -> None:
        """Each record uses its own delimiter."""

        output_file = tmp_path / "output.txt"
        write_github_output(output_file, {"a": "1", "b": "2"})

        headers = [
            line
            for line in output_file.read_text(encoding="utf-8").splitlines()
            if "<<" in line
        ]
        delimiters = {line.split("<<", 1)[1] for line in headers}
        assert len(delimiters) == 2


def test_append_step_summary_adds_trailing_newline(tmp_path: Path) -> None:
    """Summaries are appended and newline-terminated."""

    summary = tmp_path / "summary.md"
    append_step_summary(summary, "# One")
    append_step_summary(summary, "# Two\n")

    assert summary.read_text(encoding="utf-8") == "# One\n# Two\n"


@pytest.mark.parametrize(
    ("command", "message", "properties", "expected"),
    [
        ("endgroup", "", {}, "::endgroup::"),
        ("group", "Upload app.apk", {}, "::group::Upload app.apk"),
        ("add-mask", "s3cr3t", {}, "::add-mask::s3cr3t"),
        (
            "error",
            "100% failed\r\nagain",
            {"title": "Upload Failure"},
            "::error title=Upload Failure::100%25 failed%0D%0Aagain",
        ),
        (
            "warning",
            "skipped",
            {"title": "a: b, c"},
            "::warning title=a%3A b%2C c::skipped",
        ),
    ],
)
def test_format_workflow_command(
    command: str, message: str, properties: dict[str, str], expected: str
) -> None:
    """Workflow commands escape data and property values."""

    assert format_workflow_command(command, message, **properties) == expected
