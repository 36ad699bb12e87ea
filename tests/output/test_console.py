"""Tests for Rich Console factory and theme."""

from io import StringIO

from durctl.output.console import DUR_THEME, create_console, get_output, style_for_unit


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        assert isinstance(create_console().file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[dur.error]hello[/dur.error]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80

    def test_default_width(self) -> None:
        assert create_console().width == 120


class TestStyles:
    def test_unit_styles_exist_in_theme(self) -> None:
        for unit in ("years", "hours", "nanoseconds"):
            assert style_for_unit(unit) in DUR_THEME.styles

    def test_unknown_unit(self) -> None:
        assert style_for_unit("fortnights") == ""
