"""Tests for the log viewer CLI."""

import pytest

from doc2code.management.log_viewer import (
    colourise,
    filter_lines,
    list_log_files,
    main,
    render,
)

LINES = [
    "[2024-05-02T10:00:00.000+00:00] [INFO] Processing request from IP: 1.2.3.4",
    "[2024-05-02T10:00:01.000+00:00] [WARNING] Rate limit exceeded for IP: 1.2.3.4",
    "[2024-05-02T10:00:02.000+00:00] [ERROR] Error generating SDK with groq error=timeout",
    "[2024-05-02T10:00:03.000+00:00] [DEBUG] GET /ping",
    "[2024-05-02T10:00:04.000+00:00] [INFO] SDK generated successfully provider=groq",
]


@pytest.fixture
def log_dir(tmp_path):
    (tmp_path / "2024-05-01.log").write_text("[2024-05-01T09:00:00.000+00:00] [INFO] old\n")
    (tmp_path / "2024-05-02.log").write_text("\n".join(LINES) + "\n")
    (tmp_path / "notes.txt").write_text("ignored")
    return tmp_path


class TestFilterLines:
    """Tests for filter_lines."""

    def test_no_filters(self):
        lines, total = filter_lines(LINES)
        assert lines == LINES
        assert total == 5

    def test_level(self):
        lines, _ = filter_lines(LINES, level="error")
        assert lines == [LINES[2]]

    def test_warn_matches_warning(self):
        lines, _ = filter_lines(LINES, level="WARN")
        assert lines == [LINES[1]]

    def test_search_is_case_insensitive(self):
        lines, _ = filter_lines(LINES, search="GROQ")
        assert lines == [LINES[2], LINES[4]]

    def test_tail_applies_after_filters(self):
        lines, total = filter_lines(LINES, level="info", tail=1)
        assert lines == [LINES[4]]
        assert total == 5


class TestRender:
    def test_colours_by_level(self):
        assert colourise(LINES[2]).startswith("\x1b[31m")
        assert colourise(LINES[1]).startswith("\x1b[33m")
        assert colourise(LINES[0]).startswith("\x1b[32m")
        assert colourise(LINES[3]).startswith("\x1b[36m")
        assert colourise("plain") == "plain"

    def test_summary_line(self):
        output = render("2024-05-02.log", LINES[:2], 5, colour=False)

        assert output[0] == "=== Log file: 2024-05-02.log ==="
        assert output[-1] == "Displayed 2 of 5 total log entries."

    def test_no_matches(self):
        output = render("2024-05-02.log", [], 5, search="missing")
        assert output[-1] == "No matching log entries found."
        assert 'Searching for: "missing"' in output


class TestMain:
    """Tests for the CLI entry point."""

    def test_list_files_newest_first(self, log_dir):
        assert list_log_files(log_dir) == ["2024-05-02.log", "2024-05-01.log"]

    def test_list_option(self, log_dir, capsys):
        assert main(["--log-dir", str(log_dir), "--list"]) == 0

        out = capsys.readouterr().out
        assert out.index("2024-05-02.log") < out.index("2024-05-01.log")

    def test_defaults_to_newest_file(self, log_dir, capsys):
        assert main(["--log-dir", str(log_dir), "--no-color"]) == 0

        out = capsys.readouterr().out
        assert "=== Log file: 2024-05-02.log ===" in out
        assert "Displayed 5 of 5 total log entries." in out

    def test_file_and_level(self, log_dir, capsys):
        argv = ["--log-dir", str(log_dir), "--file", "2024-05-01.log", "--level", "INFO", "--no-color"]
        assert main(argv) == 0
        assert "Displayed 1 of 1 total log entries." in capsys.readouterr().out

    def test_unknown_file(self, log_dir):
        assert main(["--log-dir", str(log_dir), "--file", "2023-01-01.log"]) == 1

    def test_missing_directory(self, tmp_path):
        assert main(["--log-dir", str(tmp_path / "missing")]) == 1

    def test_empty_directory(self, tmp_path):
        assert main(["--log-dir", str(tmp_path)]) == 1

    def test_log_dir_from_environment(self, log_dir, monkeypatch, capsys):
        monkeypatch.setenv("DOC2CODE_LOG_DIR", str(log_dir))
        assert main(["--tail", "2", "--no-color"]) == 0
        assert "Displayed 2 of 5 total log entries." in capsys.readouterr().out
