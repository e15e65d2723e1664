"""Tests for theme resolution and rich rendering."""
from __future__ import annotations

import io

from rich.console import Console
from rich.text import Text

from bids.bid import Bid
from display import render
from display.theme import DARK, PALETTES, detect_dark_mode, make_console, resolve_theme


BID = Bid(bid_id="98109", title="Ford F-150, 2008", fund="Fleet Services", amount=3512.0)


def text_console(width: int = 100, theme: str = "mono") -> Console:
    """Console writing plain text into a buffer."""
    return make_console(theme, file=io.StringIO(), width=width)


def rendered(console: Console, renderable) -> str:
    console.print(renderable)
    return console.file.getvalue()


class TestThemeResolution:
    """Tests for picking a colour theme."""

    def test_no_color_forces_mono(self):
        assert resolve_theme("dark", env={"NO_COLOR": "1"}) == "mono"

    def test_color_theme_env_overrides_request(self):
        assert resolve_theme("dark", env={"COLOR_THEME": "light"}) == "light"
        assert resolve_theme("light", env={"COLOR_THEME": "none"}) == "mono"

    def test_requested_theme_used_without_env(self):
        assert resolve_theme("light", env={}) == "light"
        assert resolve_theme("mono", env={}) == "mono"

    def test_auto_defaults_to_dark(self):
        assert resolve_theme("auto", env={}) == "dark"

    def test_colorfgbg_light_background(self):
        """A COLORFGBG background of 15 means a light terminal."""
        assert detect_dark_mode({"COLORFGBG": "0;15"}) is False
        assert detect_dark_mode({"COLORFGBG": "15;0"}) is True

    def test_iterm_profile_hint(self):
        env = {"TERM_PROGRAM": "iTerm.app", "ITERM_PROFILE": "Solarized Light"}
        assert detect_dark_mode(env) is False

    def test_every_palette_defines_the_same_styles(self):
        names = set(DARK.styles)
        for theme in PALETTES.values():
            assert names <= set(theme.styles)


class TestMakeConsole:
    """Tests for console construction."""

    def test_mono_turns_colour_off(self):
        console = make_console("mono", file=io.StringIO())
        assert console.no_color is True

    def test_dark_uses_dark_palette(self):
        console = make_console("dark", file=io.StringIO())
        assert console.no_color is False
        assert console.get_style("bid.id") == DARK.styles["bid.id"]

    def test_default_width_when_not_a_terminal(self, monkeypatch):
        monkeypatch.delenv("COLUMNS", raising=False)
        console = make_console("mono", file=io.StringIO())
        assert console.width == 100

    def test_minimum_width_enforced(self, monkeypatch):
        monkeypatch.delenv("COLUMNS", raising=False)
        console = make_console("mono", file=io.StringIO(), default_width=20, min_width=50)
        assert console.width == 50

    def test_explicit_width_kept(self):
        assert make_console("mono", file=io.StringIO(), width=132).width == 132


class TestBidTable:
    """Tests for the Show All table."""

    def test_rows_in_order(self):
        console = text_console()
        table = render.bid_table("ALL BIDS (2 total)", console)
        render.add_bid_row(table, BID)
        render.add_bid_row(table, Bid(bid_id="98120", title="Filing Cabinet", fund="General Fund", amount=18.0))

        out = rendered(console, table)

        assert "ALL BIDS (2 total)" in out
        assert out.index("98109") < out.index("98120")
        assert "Ford F-150, 2008" in out
        assert "$3512.00" in out

    def test_long_title_truncated_to_width(self):
        """Long titles are cut with an ellipsis instead of wrapping the row."""
        console = text_console(width=80)
        table = render.bid_table("ALL BIDS", console)
        render.add_bid_row(table, Bid(bid_id="1", title="x" * 300, fund="F", amount=1.0))

        out = rendered(console, table)

        assert "…" in out
        assert all(len(line) <= 80 for line in out.splitlines())

    def test_brackets_are_not_markup(self):
        console = text_console()
        table = render.bid_table("ALL BIDS", console)
        render.add_bid_row(table, Bid(bid_id="7", title="[bold]Chair[/bold]", fund="F", amount=1.0))

        assert "[bold]Chair[/bold]" in rendered(console, table)


class TestPanels:
    """Tests for result panels and the menu."""

    def test_mono_panel_uses_ascii_box(self):
        console = text_console()
        out = rendered(console, render.result_panel("ERROR", [Text("Nope")], console, ok=False))
        lines = out.splitlines()

        assert lines[0].startswith("+")
        assert "ERROR" in lines[0]
        assert "Nope" in out

    def test_panel_is_at_least_32_wide(self):
        console = text_console()
        out = rendered(console, render.result_panel("T", [Text("x")], console))
        assert len(out.splitlines()[0]) == 32

    def test_panel_grows_for_long_lines(self):
        console = text_console(width=120)
        out = rendered(console, render.result_panel("T", [Text("z" * 80)], console))
        assert len(out.splitlines()[0]) == 84

    def test_bid_details(self):
        console = text_console()
        out = rendered(console, render.result_panel("BID FOUND", render.bid_details(BID), console))
        for expected in ("ID:      98109", "Title:   Ford F-150, 2008", "Fund:    Fleet Services", "Amount:  $3512.00"):
            assert expected in out

    def test_menu_lists_every_choice(self):
        console = text_console()
        out = rendered(console, render.menu(console))
        assert "BID SYSTEM" in out
        for label, _ in render.MENU_ITEMS:
            assert label in out
