"""Tests for the Rich console factory."""

from lpfcalc.output.console import LPF_THEME, create_console, get_output


class TestCreateConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console()
        console.print("hello")
        assert get_output(console) == "hello\n"

    def test_default_width(self) -> None:
        assert create_console().width == 120

    def test_width_override(self) -> None:
        assert create_console(width=60).width == 60

    def test_no_ansi_when_not_a_terminal(self) -> None:
        console = create_console()
        console.print("[lpf.ok]OK[/lpf.ok]")
        assert get_output(console) == "OK\n"

    def test_theme_styles_present(self) -> None:
        for name in ("lpf.ok", "lpf.error", "lpf.coef", "lpf.stable", "lpf.unstable"):
            assert name in LPF_THEME.styles
