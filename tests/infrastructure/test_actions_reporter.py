"""Tests for ActionsReporter."""

import io

from release_uploader.infrastructure.actions import ActionsReporter


def test_set_output_appends_to_output_file(tmp_path):
    """Test outputs are appended in name=value form."""
    output_file = tmp_path / "output"
    output_file.write_text("existing=1\n")
    reporter = ActionsReporter(environ={"GITHUB_OUTPUT": str(output_file)})

    reporter.set_output("browser_download_url", "https://dl/out.bin")

    assert output_file.read_text() == (
        "existing=1\nbrowser_download_url=https://dl/out.bin\n"
    )
    assert reporter.outputs == {"browser_download_url": "https://dl/out.bin"}


def test_multiline_output_uses_delimiter(tmp_path):
    """Test multi-line values are wrapped in a heredoc block."""
    output_file = tmp_path / "output"
    reporter = ActionsReporter(environ={"GITHUB_OUTPUT": str(output_file)})

    reporter.set_output("notes", "line1\nline2")

    lines = output_file.read_text().splitlines()
    assert lines[0].startswith("notes<<ghadelimiter_")
    delimiter = lines[0].split("<<", 1)[1]
    assert lines[1:] == ["line1", "line2", delimiter]


def test_set_output_without_output_file_prints():
    """Test outputs are printed when not running in Actions."""
    stream = io.StringIO()
    reporter = ActionsReporter(environ={}, stream=stream)

    reporter.set_output("browser_download_url", "https://dl/x")

    assert stream.getvalue() == "browser_download_url=https://dl/x\n"


def test_set_failed_emits_escaped_annotation():
    """Test failures become ::error:: annotations."""
    stream = io.StringIO()
    reporter = ActionsReporter(environ={}, stream=stream)
    assert reporter.exit_code == 0

    reporter.set_failed("100% broken\nsecond line")

    assert stream.getvalue() == "::error::100%25 broken%0Asecond line\n"
    assert reporter.failed is True
    assert reporter.exit_code == 1
