"""Colour themes and the console they are rendered through.

The theme is resolved once at startup and handed to ``make_console``; every
piece of output then goes through that one console. Dark and light palettes
use 256-colour codes so they look the same across terminals. Mono maps every
style to nothing and turns colour off, which also switches panels to ASCII
boxes.
"""
from __future__ import annotations

import os
from typing import IO, Mapping, Optional

from rich.console import Console
from rich.theme import Theme

THEMES = ("auto", "dark", "light", "mono")

STYLE_NAMES = (
    "bid.id", "bid.title", "bid.fund", "bid.amount",
    "ok", "error", "warn", "hint", "heading", "menu.title", "menu.item", "menu.exit", "prompt",
)

DARK = Theme({
    "bid.id": "color(80)",
    "bid.title": "color(114)",
    "bid.fund": "color(221)",
    "bid.amount": "color(177)",
    "ok": "bold color(114)",
    "error": "bold color(203)",
    "warn": "color(221)",
    "hint": "dim",
    "heading": "bold color(80)",
    "menu.title": "bold color(221)",
    "menu.item": "color(114)",
    "menu.exit": "color(203)",
    "prompt": "color(80)",
})

LIGHT = Theme({
    "bid.id": "color(30)",
    "bid.title": "color(28)",
    "bid.fund": "color(130)",
    "bid.amount": "color(127)",
    "ok": "bold color(28)",
    "error": "bold color(160)",
    "warn": "color(130)",
    "hint": "dim",
    "heading": "bold color(30)",
    "menu.title": "bold color(130)",
    "menu.item": "color(28)",
    "menu.exit": "color(160)",
    "prompt": "color(30)",
})

MONO = Theme({name: "none" for name in STYLE_NAMES})

PALETTES = {"dark": DARK, "light": LIGHT, "mono": MONO}


def detect_dark_mode(env: Mapping[str, str]) -> bool:
    """Guess whether the terminal background is dark. Defaults to dark."""
    theme = env.get("COLOR_THEME", "")
    if theme == "dark":
        return True
    if theme == "light":
        return False

    # COLORFGBG is "fg;bg"; bg 0-6 are dark backgrounds, 7-15 light.
    fgbg = env.get("COLORFGBG", "")
    if ";" in fgbg:
        try:
            bg = int(fgbg.rsplit(";", 1)[1])
        except ValueError:
            bg = -1
        if 0 <= bg <= 6:
            return True
        if 7 <= bg <= 15:
            return False

    if env.get("TERM_PROGRAM") == "iTerm.app":
        profile = env.get("ITERM_PROFILE", "")
        if "Dark" in profile or "dark" in profile:
            return True
        if "Light" in profile or "light" in profile:
            return False

    return True


def resolve_theme(requested: str = "auto", env: Optional[Mapping[str, str]] = None) -> str:
    """Pick a theme name (dark, light or mono).

    ``COLOR_THEME`` and ``NO_COLOR`` in the environment win over ``requested``.
    """
    env = os.environ if env is None else env

    if env.get("COLOR_THEME") in ("mono", "none") or "NO_COLOR" in env:
        return "mono"
    if env.get("COLOR_THEME") in ("dark", "light"):
        return env["COLOR_THEME"]
    if requested in PALETTES:
        return requested
    return "dark" if detect_dark_mode(env) else "light"


def make_console(
    theme: str = "dark",
    file: Optional[IO[str]] = None,
    width: Optional[int] = None,
    default_width: int = 100,
    min_width: int = 50,
) -> Console:
    """Build the console all output goes through.

    Without an explicit ``width`` the console measures the terminal; when
    output is not a terminal and COLUMNS is unset, ``default_width`` is used.
    The width never drops below ``min_width``.
    """
    console = Console(
        file=file,
        theme=PALETTES.get(theme, DARK),
        no_color=theme == "mono",
        width=width,
        highlight=False,
    )
    if width is None:
        if not console.is_terminal and "COLUMNS" not in os.environ:
            console.width = default_width
        console.width = max(console.width, min_width)
    return console
