"""Tests for command formatting."""

from rcflow.domain.formatting import format_command, positional_params
from rcflow.domain.models import Command


class TestFormatCommand:
    """Tests for format_command()."""

    def test_single_param(self) -> None:
        assert format_command(Command("align", ("--high-detail",))) == (
            "align --high-detail"
        )

    def test_no_params(self) -> None:
        assert format_command(Command("export")) == "export"

    def test_params_in_order(self) -> None:
        command = Command("export", ("--format", "glb", "--output", "scan.glb"))

        assert format_command(command) == "export --format glb --output scan.glb"

    def test_params_passed_verbatim(self) -> None:
        """No quoting or escaping, even for spaces and shell characters."""
        command = Command("printProgress", ("Initial alignment completed", "$HOME;"))

        assert format_command(command) == (
            "printProgress Initial alignment completed $HOME;"
        )


class TestPositionalParams:
    """Tests for positional_params()."""

    def test_one_indexed_keys(self) -> None:
        command = Command("exportSelectedModel", ("./out.obj", "./settings.xml"))

        assert positional_params(command) == {
            "param1": "./out.obj",
            "param2": "./settings.xml",
        }

    def test_preserves_order(self) -> None:
        command = Command("selectByColor", ("0", "0", "0", "10"))

        assert list(positional_params(command)) == [
            "param1",
            "param2",
            "param3",
            "param4",
        ]

    def test_empty(self) -> None:
        assert positional_params(Command("align")) == {}
