"""Tests for the batch command line builder."""

import pytest

from batspawn.errors import InvalidArgumentError, InvalidCommandError
from batspawn.services.builder import (
    INTERPRETER_FLAGS,
    build_batch_command_line,
    build_batch_plan,
)

FLAGS = ["/E:ON", "/F:OFF", "/V:OFF", "/d", "/s", "/c"]


class TestBuildBatchPlan:
    """Test build_batch_plan."""

    def test_command_only(self):
        """A bare script gets the fixed flags and one wrapped line."""
        plan = build_batch_plan("test.bat", [], {})

        assert plan.executable == "cmd.exe"
        assert list(plan.args) == [*FLAGS, '""test.bat""']
        assert dict(plan.options) == {"shell": False, "verbatim_arguments": True}
        assert plan.wrapped is True

    def test_command_and_args(self):
        """Arguments are escaped into the single wrapped line."""
        plan = build_batch_plan("test.bat", ["1"])

        assert list(plan.args) == [*FLAGS, '""test.bat" "1""']

    def test_options_preserved(self):
        """Caller options are kept alongside the forced ones."""
        plan = build_batch_plan("test.bat", ["testing"], {"cwd": "C:\\src", "text": True})

        assert list(plan.args) == [*FLAGS, '""test.bat" "testing""']
        assert dict(plan.options) == {
            "cwd": "C:\\src",
            "text": True,
            "shell": False,
            "verbatim_arguments": True,
        }

    def test_caller_options_not_mutated(self):
        """The options mapping passed in is left alone."""
        options = {"cwd": "C:\\"}
        build_batch_plan("test.bat", [], options)
        assert options == {"cwd": "C:\\"}

    def test_custom_interpreter(self):
        """The interpreter path can be overridden."""
        plan = build_batch_plan(
            "test.bat", [], interpreter="C:\\Windows\\System32\\cmd.exe"
        )
        assert plan.executable == "C:\\Windows\\System32\\cmd.exe"

    def test_always_six_flags_and_one_line(self):
        """However many arguments, the interpreter gets seven arguments."""
        plan = build_batch_plan("run.cmd", ["a", "b c", '"d"', "%e%"])

        assert len(plan.args) == 7
        assert plan.args[:6] == INTERPRETER_FLAGS

    def test_quote_in_command_rejected(self):
        """Quotes in the command name are refused."""
        with pytest.raises(InvalidCommandError):
            build_batch_plan('".bat', [], {})

    def test_quote_in_interpreter_rejected(self):
        """Quotes in the interpreter path are refused."""
        with pytest.raises(InvalidCommandError):
            build_batch_plan("test.bat", [], interpreter='"C:\\cmd.exe"')

    @pytest.mark.parametrize("arg", ["\0", "\r", "\n"])
    def test_invalid_argument_rejected(self, arg):
        """Unrepresentable arguments are refused."""
        with pytest.raises(InvalidArgumentError):
            build_batch_plan("test.bat", [arg], {})


class TestBuildBatchCommandLine:
    """Test build_batch_command_line."""

    def test_extra_quote_layer(self):
        """The joined tokens get one extra pair of quotes for /s."""
        assert build_batch_command_line("a.bat", ["x y"]) == '""a.bat" "x y""'

    def test_command_is_escaped_like_args(self):
        """Percent signs in the script path are neutralized too."""
        assert build_batch_command_line("%TMP%\\a.bat", []) == (
            '""%%cd:~,%TMP%%cd:~,%\\a.bat""'
        )
