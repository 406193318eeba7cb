"""Tests for the hoconkit command-line interface."""

import json
import sys

import pytest
from loguru import logger

from hoconkit.api.cli.commands.options import render_overrides_from_args
from hoconkit.api.cli.main import create_parser, main


@pytest.fixture(autouse=True)
def restore_logging():
    """Drop the sinks main() installs on the captured stderr."""
    yield
    logger.remove()
    logger.add(sys.stderr)


class TestParser:
    """Test argument parsing."""

    def test_flag_defaults_are_unset(self):
        """Test toggles not given on the command line stay None."""
        args = create_parser().parse_args(["options", "show"])

        assert args.comments is None
        assert args.show_env_variable_values is None
        assert render_overrides_from_args(args) == {}

    def test_boolean_flags(self):
        """Test --flag and --no-flag spellings."""
        args = create_parser().parse_args(
            ["options", "show", "--no-comments", "--origin-comments", "--preset", "concise"]
        )

        assert render_overrides_from_args(args) == {
            "preset": "concise",
            "origin_comments": True,
            "comments": False,
        }

    def test_invalid_preset_choice(self):
        """Test argparse rejects unknown presets."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["options", "show", "--preset", "loud"])


class TestOptionsShow:
    """Test the options show command."""

    def test_defaults_summary(self, isolated_env, capsys):
        """Test the summary of the defaults preset is printed."""
        main(["options", "show"])

        out = capsys.readouterr().out
        assert out.strip() == (
            "ConfigRenderOptions(originComments,comments,formatted,json,showEnvVariableValues)"
        )

    def test_concise_with_flags(self, isolated_env, capsys):
        """Test command-line flags apply on top of the chosen preset."""
        main(["options", "show", "--preset", "concise", "--no-json"])

        assert capsys.readouterr().out.strip() == "ConfigRenderOptions(showEnvVariableValues)"

    def test_json_format(self, isolated_env, capsys):
        """Test JSON output of the resolved options."""
        main(["options", "show", "--no-formatted", "--comment-prefix", "//", "--format", "json"])

        data = json.loads(capsys.readouterr().out)
        assert data["formatted"] is False
        assert data["comment_prefix"] == "//"
        assert data["comments"] is True

    def test_reads_project_file(self, isolated_env, capsys):
        """Test settings in the project file are honoured."""
        (isolated_env / ".hoconkit.json").write_text(json.dumps({"render": {"preset": "concise"}}))

        main(["options", "show"])

        assert capsys.readouterr().out.strip() == "ConfigRenderOptions(json,showEnvVariableValues)"

    def test_flags_override_config_file(self, isolated_env, tmp_path, capsys):
        """Test command-line flags beat an explicit config file."""
        config_file = tmp_path / "render.json"
        config_file.write_text(json.dumps({"render": {"preset": "concise", "comments": False}}))

        main(["options", "show", "--config", str(config_file), "--comments"])

        assert capsys.readouterr().out.strip() == (
            "ConfigRenderOptions(comments,json,showEnvVariableValues)"
        )

    def test_verbose_reports_non_strict_json(self, isolated_env, capsys):
        """Test verbose output warns that commented JSON is not strict."""
        main(["options", "show", "--verbose"])

        out = capsys.readouterr().out
        assert "Preset: defaults" in out
        assert "not strict JSON" in out

    def test_missing_config_file_exits(self, isolated_env, tmp_path):
        """Test configuration errors exit with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            main(["options", "show", "--config", str(tmp_path / "missing.json")])

        assert exc_info.value.code == 1

    def test_undecodable_config_file_exits(self, isolated_env, tmp_path):
        """Test a config file with invalid UTF-8 exits with status 1."""
        config_file = tmp_path / "render.json"
        config_file.write_bytes(b"\xff\xfe{}")

        with pytest.raises(SystemExit) as exc_info:
            main(["options", "show", "--config", str(config_file)])

        assert exc_info.value.code == 1

    def test_empty_comment_prefix_exits(self, isolated_env):
        """Test invalid settings from flags exit with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            main(["options", "show", "--comment-prefix", ""])

        assert exc_info.value.code == 1


class TestOptionsPresets:
    """Test the options presets command."""

    def test_summary(self, isolated_env, capsys):
        """Test both presets are listed."""
        main(["options", "presets"])

        lines = capsys.readouterr().out.strip().splitlines()
        assert lines == [
            "defaults: ConfigRenderOptions(originComments,comments,formatted,json,showEnvVariableValues)",
            "concise: ConfigRenderOptions(json,showEnvVariableValues)",
        ]

    def test_json(self, isolated_env, capsys):
        """Test JSON output of both presets."""
        main(["options", "presets", "--format", "json"])

        data = json.loads(capsys.readouterr().out)
        assert set(data) == {"defaults", "concise"}
        assert data["concise"]["formatted"] is False


class TestMain:
    """Test the entry point itself."""

    def test_no_command(self, capsys):
        """Test running without a command prints help and exits 1."""
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 1
        assert "usage: hoconkit" in capsys.readouterr().out

    def test_version(self, capsys):
        """Test --version prints the package version."""
        from hoconkit import __version__

        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert capsys.readouterr().out.strip() == f"hoconkit {__version__}"
