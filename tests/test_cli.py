"""Tests for proxy_hooks.cli module."""

import pytest
from unittest.mock import patch
from proxy_hooks.cli import main


class TestMain:
    """Tests for main CLI entry point."""

    def test_no_args_shows_help(self, capsys):
        """Running without arguments should show help and exit 0."""
        with patch("sys.argv", ["proxy-hooks"]):
            result = main()
        assert result == 0
        captured = capsys.readouterr()
        assert "usage:" in captured.out.lower()

    def test_invalid_command_exits_with_error(self, capsys):
        """Running with invalid command should exit with error."""
        with patch("sys.argv", ["proxy-hooks", "invalid-command"]):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 2
        captured = capsys.readouterr()
        assert "invalid choice" in captured.err


class TestClassifyCommand:
    """Tests for the classify command."""

    def test_classify_codes(self, capsys):
        result = main(["classify", "ECONNRESET", "HPE_INVALID_METHOD", "EPIPE"])
        assert result == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "ECONNRESET -> 504",
            "HPE_INVALID_METHOD -> 502",
            "EPIPE -> 500",
        ]

    def test_classify_requires_code(self):
        with pytest.raises(SystemExit):
            main(["classify"])


class TestCheckCommand:
    """Tests for the check command."""

    def test_missing_file(self, tmp_path, capsys):
        result = main(["check", "--config", str(tmp_path / "nope.yaml")])
        assert result == 1
        assert "not found" in capsys.readouterr().err.lower()

    def test_lists_defaults(self, tmp_path, capsys):
        config = tmp_path / "hooks.yaml"
        config.write_text("hooks: {}\n")

        result = main(["check", "-c", str(config)])

        assert result == 0
        output = capsys.readouterr().out
        assert "default_error_handler (default)" in output
        assert "log_close (default)" in output
        assert "proxyReq" not in output

    def test_marks_configured_hooks(self, tmp_path, capsys):
        config = tmp_path / "hooks.yaml"
        config.write_text(
            "hooks:\n"
            "  on_error:\n"
            "    module: proxy_hooks.binder\n"
            "    function: default_error_handler\n"
        )

        result = main(["check", "--config", str(config)])

        assert result == 0
        output = capsys.readouterr().out
        assert "default_error_handler (hook)" in output

    def test_uses_hooks_file_from_env(self, tmp_path, monkeypatch, capsys):
        config = tmp_path / "hooks.yaml"
        config.write_text("hooks: {}\n")
        monkeypatch.setenv("PROXY_HOOKS_CONFIG", str(config))

        assert main(["check"]) == 0
        assert str(config) in capsys.readouterr().out

    def test_malformed_hooks_section_falls_back_to_defaults(self, tmp_path, capsys):
        config = tmp_path / "hooks.yaml"
        config.write_text("python_path:\nhooks:\n  - on_error\n")

        assert main(["check", "--config", str(config)]) == 0
        assert "default_error_handler (default)" in capsys.readouterr().out
