"""Tests for the CLI entry point."""

import re

import pytest
from click.testing import CliRunner

from coderoast_cli.cli import main
from coderoast_core.errors import UpstreamRequestError
from coderoast_core.models import ReviewResponse
from coderoast_core.prompts import Mode

ANSI = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def roaster_cls(mocker):
    """Patch the Anthropic adapter so no test ever reaches the network."""
    mock = mocker.patch("coderoast_core.roaster.AnthropicRoaster")
    mock.return_value.roast.return_value = ReviewResponse(raw_text="🔥 meh")
    return mock


@pytest.fixture
def py_file(tmp_path):
    path = tmp_path / "foo.py"
    path.write_text("print(1)")
    return str(path)


def _env(key="test-key", **extra):
    env = {"ANTHROPIC_API_KEY": key, "NO_COLOR": None, "FORCE_COLOR": None}
    env.update(extra)
    return env


class TestCLIValidation:
    @pytest.mark.parametrize("severity", ["extreme", "MILD", ""])
    def test_invalid_severity_exits_1_without_request(self, runner, roaster_cls, py_file, severity):
        result = runner.invoke(main, [py_file, "--severity", severity], env=_env())

        assert result.exit_code == 1
        assert f"💥 Error: Invalid severity level: {severity}" in result.output
        assert "\nValid options: mild, medium, harsh\n" in result.output
        roaster_cls.assert_not_called()

    def test_invalid_severity_rejected_with_serious(self, runner, roaster_cls, py_file):
        result = runner.invoke(main, [py_file, "--serious", "--severity", "brutal"], env=_env())

        assert result.exit_code == 1
        roaster_cls.assert_not_called()

    @pytest.mark.parametrize(
        "flags",
        [[], ["--serious"], ["--severity", "mild"], ["--severity", "harsh", "--no-color"], ["-m", "claude-x"]],
    )
    def test_missing_api_key(self, runner, roaster_cls, py_file, flags):
        result = runner.invoke(main, [py_file, *flags], env=_env(key=None))

        assert result.exit_code == 1
        assert "ANTHROPIC_API_KEY" in result.output
        assert "export ANTHROPIC_API_KEY" in result.output
        roaster_cls.assert_not_called()

    def test_missing_file(self, runner, roaster_cls, tmp_path):
        result = runner.invoke(main, [str(tmp_path / "ghost.py"), "--no-color"], env=_env())

        assert result.exit_code == 1
        assert "💥 Error:" in result.output
        assert "No such file or directory" in result.output
        assert not ANSI.search(result.output)
        roaster_cls.assert_not_called()

    def test_missing_file_argument(self, runner, roaster_cls):
        result = runner.invoke(main, [], env=_env())
        assert result.exit_code != 0
        roaster_cls.assert_not_called()


class TestCLIRoast:
    def test_mild_roast(self, runner, roaster_cls, py_file):
        roaster_cls.return_value.roast.return_value = ReviewResponse(raw_text="✨ looks fine 💡 maybe add a docstring")

        result = runner.invoke(main, [py_file, "--severity", "mild"], env=_env())

        assert result.exit_code == 0, result.output
        assert "😊 CODE REVIEW (Be Nice Mode)" in result.output
        assert "✨ Friendly feedback mode" in result.output
        assert "✨ looks fine 💡 maybe add a docstring" in result.output
        request = roaster_cls.return_value.roast.call_args.args[0]
        assert request.mode is Mode.MILD
        assert request.source_text == "print(1)"

    def test_mild_roast_colored(self, runner, roaster_cls, py_file):
        roaster_cls.return_value.roast.return_value = ReviewResponse(raw_text="✨ looks fine 💡 maybe add a docstring")

        result = runner.invoke(
            main,
            [py_file, "--severity", "mild"],
            env=_env(FORCE_COLOR="1", TERM="xterm-256color", COLORTERM=None),
        )

        assert result.exit_code == 0, result.output
        assert re.search(r"\x1b\[[0-9;]*m✨\x1b\[0m looks fine", result.output)
        assert re.search(r"\x1b\[[0-9;]*m💡\x1b\[0m maybe", result.output)

    def test_serious_review(self, runner, roaster_cls, tmp_path):
        path = tmp_path / "bar.rs"
        path.write_text("fn main() { let x: Option<u8> = None; x.unwrap(); }")
        roaster_cls.return_value.roast.return_value = ReviewResponse(raw_text="🚨 unwrap can panic")

        result = runner.invoke(main, [str(path), "--serious"], env=_env())

        assert result.exit_code == 0, result.output
        assert "📋 Professional Code Review" in result.output
        assert "File: bar.rs (Rust)" in result.output
        assert "🚨 unwrap can panic" in result.output
        assert "Roasted with" not in result.output
        assert roaster_cls.return_value.roast.call_args.args[0].mode is Mode.SERIOUS

    def test_serious_siren_emphasized(self, runner, roaster_cls, tmp_path):
        path = tmp_path / "bar.rs"
        path.write_text("fn main() {}")
        roaster_cls.return_value.roast.return_value = ReviewResponse(raw_text="🚨 unwrap can panic 💡 use ?")

        result = runner.invoke(main, [str(path), "-s"], env=_env(FORCE_COLOR="1", TERM="xterm-256color"))

        assert result.exit_code == 0, result.output
        siren = re.search(r"\x1b\[([0-9;]*)m🚨", result.output)
        bulb = re.search(r"\x1b\[([0-9;]*)m💡", result.output)
        assert siren and bulb
        assert "1" in siren.group(1).split(";")
        assert siren.group(1) != bulb.group(1)

    @pytest.mark.parametrize("flags", [["--serious"], ["--severity", "mild"], [], ["--severity", "harsh"]])
    def test_no_color(self, runner, roaster_cls, py_file, flags):
        raw = "🔥 a 💡 b ✨ c 🚨 d ⚠️ e ✅ f 💀 g 💪 h"
        roaster_cls.return_value.roast.return_value = ReviewResponse(raw_text=raw)

        result = runner.invoke(
            main, [py_file, "--no-color", *flags], env=_env(FORCE_COLOR="1", TERM="xterm-256color")
        )

        assert result.exit_code == 0, result.output
        assert raw in result.output
        assert not ANSI.search(result.output)

    def test_quoted_code_keeps_tabs(self, runner, roaster_cls, py_file):
        raw = "🔥 look:\n\tif x:\n\t\treturn 1  \n⚠ bare sign"
        roaster_cls.return_value.roast.return_value = ReviewResponse(raw_text=raw)

        result = runner.invoke(main, [py_file, "--no-color"], env=_env())

        assert result.exit_code == 0, result.output
        assert raw in result.output

    def test_default_severity_is_medium(self, runner, roaster_cls, py_file):
        result = runner.invoke(main, [py_file], env=_env())

        assert result.exit_code == 0, result.output
        assert "🔥 CODE ROAST 🔥" in result.output
        assert "Roasted with" in result.output
        assert roaster_cls.return_value.roast.call_args.args[0].mode is Mode.MEDIUM

    def test_harsh_header(self, runner, roaster_cls, py_file):
        result = runner.invoke(main, [py_file, "--severity", "harsh"], env=_env())

        assert result.exit_code == 0, result.output
        assert "💀 CODE EXECUTION 💀" in result.output
        assert "Brutally honest mode enabled" in result.output

    def test_model_option(self, runner, roaster_cls, py_file):
        result = runner.invoke(main, [py_file, "--model", "claude-haiku-4-5"], env=_env())

        assert result.exit_code == 0, result.output
        assert roaster_cls.return_value.roast.call_args.args[0].model == "claude-haiku-4-5"
        roaster_cls.assert_called_once_with(api_key="test-key")

    def test_default_model(self, runner, roaster_cls, py_file):
        runner.invoke(main, [py_file], env=_env())
        assert roaster_cls.return_value.roast.call_args.args[0].model == "claude-sonnet-4-5-20250929"

    def test_upstream_error(self, runner, roaster_cls, py_file):
        roaster_cls.return_value.roast.side_effect = UpstreamRequestError("rate_limit_error: slow down")

        result = runner.invoke(main, [py_file, "--no-color"], env=_env())

        assert result.exit_code == 1
        assert "💥 Error: rate_limit_error: slow down" in result.output
        assert "CODE ROAST" not in result.output
        roaster_cls.return_value.roast.assert_called_once()

    def test_verbose_logs_request(self, runner, roaster_cls, py_file):
        result = runner.invoke(main, [py_file, "--verbose", "--no-color"], env=_env())
        assert result.exit_code == 0, result.output
        assert "Detected language" in result.output


class TestCLIMeta:
    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert result.output.startswith("roast, version ")

    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        for flag in ("--serious", "--severity", "--model", "--no-color", "--version"):
            assert flag in result.output
