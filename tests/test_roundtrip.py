"""Round-trip tests through a model of cmd.exe and the C runtime.

Every argument list is escaped into a batch plan, pushed through the
simulated /s /c parse and argv split, and must come back unchanged.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from batspawn.services.builder import build_batch_plan
from helpers.cmdline import simulate_cmd_c


def recover_args(args: list[str], command: str = "test.bat") -> list[str]:
    """Build a plan and return what the script's target would receive."""
    plan = build_batch_plan(command, args)
    argv = simulate_cmd_c(plan.args[-1])
    assert argv[0] == command
    return argv[1:]


class TestBasicRoundTrip:
    """Test the common argument shapes."""

    def test_percent(self):
        """Variable references are not expanded."""
        args = ["%path%", "%cd%"]
        assert recover_args(args) == args

    def test_percent_upper(self):
        """Upper-case variable names behave the same."""
        args = ["%PATH%", "%cd%"]
        assert recover_args(args) == args

    def test_spaces(self):
        """Arguments with spaces stay single arguments."""
        args = ["hello  world", "are you here"]
        assert recover_args(args) == args

    def test_backslash(self):
        """Lone backslashes are preserved."""
        args = ["hello \\ world", "\\ world"]
        assert recover_args(args) == args

    def test_quote(self):
        """Embedded quotes are preserved."""
        args = ['hello " there', 'my " world']
        assert recover_args(args) == args

    def test_backslash_quote(self):
        """Backslash-quote pairs are preserved."""
        args = ['hello \\" there', 'my \\" world']
        assert recover_args(args) == args

    def test_double_backslash_quote(self):
        """Even backslash runs before a quote are preserved."""
        args = ['hello \\\\" there', 'my \\\\" world']
        assert recover_args(args) == args

    def test_ampersand(self):
        """Ampersands do not start a new command."""
        assert recover_args(["&calc"]) == ["&calc"]

    def test_quote_ampersand(self):
        """A leading quote cannot unbalance the quoting."""
        assert recover_args(['"&calc']) == ['"&calc']

    def test_no_args(self):
        """A bare command round-trips."""
        assert recover_args([]) == []

    def test_command_with_spaces(self):
        """Script paths with spaces survive."""
        command = "C:\\My Scripts\\run.cmd"
        assert recover_args(["x"], command=command) == ["x"]


class TestMicrosoftExamples:
    """Examples from the C runtime command-line parsing documentation."""

    @pytest.mark.parametrize(
        "args",
        [
            ["a b c", "d", "e"],
            ['ab"c', "\\", "d"],
            ["a\\\\\\b", "de fg", "h"],
            ['a\\"b', "c", "d"],
            ["a\\\\b c", "d", "e"],
            ['ab" c d'],
        ],
    )
    def test_example(self, args):
        """Documented tricky inputs round-trip."""
        assert recover_args(args) == args


class TestInjectionCases:
    """Adversarial inputs collected from other runtimes' batch fixes."""

    @pytest.mark.parametrize(
        "args",
        [
            ["a", "b"],
            ["c is for cat", "d is for dog"],
            ['"', ' "'],
            ["\\", "\\"],
            [">file.txt"],
            ["whoami.exe"],
            ["&a.exe"],
            ["&echo hello "],
            ["&echo hello", "&whoami", ">file.txt"],
            ["!TMP!"],
            ["key=value"],
            ['"key=value"'],
            ["key = value"],
            ['key=["value"],'],
            ["", "a=b"],
            ['key="foo bar"'],
            ['key=["my_value],'],
            ['key=["my_value","other-value"],'],
            ["key\\=value"],
            ['key="&whoami"'],
            ['key="value"=5'],
            ['key=[">file.txt"],'],
            ["%hello"],
            ["%PATH%"],
            ["%%cd:~,%"],
            ["%PATH%PATH%"],
            ['">file.txt'],
            ['abc"&echo hello'],
            ['123">file.txt'],
            ['"&echo hello&whoami.exe'],
            ['"hello^"world"', "hello &echo oh no >file.txt"],
        ],
    )
    def test_case(self, args):
        """Injection attempts come back as plain data."""
        assert recover_args(args) == args


class TestPercentRegression:
    """Regression coverage for the %cd:~,% percent defeat."""

    def test_defined_variable_not_expanded(self):
        """A variable defined in the environment is not substituted."""
        assert recover_args(["%HELLO%"]) == ["%HELLO%"]

    def test_undefined_variable_not_expanded(self):
        """An undefined variable is left as typed."""
        assert recover_args(["%NOPE%"]) == ["%NOPE%"]

    def test_substring_syntax_not_expanded(self):
        """Substring syntax in the data is inert."""
        assert recover_args(["%PATH:~0,3%"]) == ["%PATH:~0,3%"]

    def test_adjacent_percents(self):
        """Runs of percents keep their count."""
        assert recover_args(["%%%", "%"]) == ["%%%", "%"]

    def test_percent_with_quotes_and_backslashes(self):
        """Percent handling composes with the quote rules."""
        args = ['%"\\%', '\\%"%']
        assert recover_args(args) == args

    def test_defined_cd_variable(self):
        """A user-defined CD variable still expands to nothing in the defeat."""
        plan = build_batch_plan("test.bat", ["%cd%"])
        env = {"CD": "D:\\elsewhere", "PATH": "C:\\Windows"}
        assert simulate_cmd_c(plan.args[-1], env=env)[1:] == ["%cd%"]


# Anything but NUL, CR and LF
any_argument = st.text(st.characters(exclude_characters="\0\r\n"))

# Characters cmd.exe or the C runtime treat specially
hostile_argument = st.text(alphabet='"\\%&|<>^()!:~, \tab=')


class TestRoundTripProperties:
    """Property-based round trips through the cmd.exe model."""

    @given(st.lists(any_argument, max_size=5))
    def test_any_arguments(self, args: list[str]) -> None:
        """Any representable arguments come back unchanged."""
        assert recover_args(args) == args

    @given(st.lists(hostile_argument, max_size=5))
    def test_hostile_arguments(self, args: list[str]) -> None:
        """Quotes, operators, carets and percents never leak."""
        assert recover_args(args) == args
