"""Rich renderables for bids, result panels and the main menu.

Every function returns something a ``rich.console.Console`` can print;
callers decide which console. Bid fields are added as plain ``Text`` so
brackets in titles are never read as markup.
"""
from __future__ import annotations

from typing import List, Tuple

from rich import box
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from bids.bid import Bid


def box_style(console: Console) -> box.Box:
    """ASCII borders when colour is off, square Unicode ones otherwise."""
    return box.ASCII if console.no_color else box.SQUARE


def amount(bid: Bid) -> str:
    return f"${bid.amount:.2f}"


def bid_table(title: str, console: Console) -> Table:
    """Empty table for listing bids; fill it with ``add_bid_row``."""
    table = Table(title=title, title_style="heading", box=box_style(console), expand=True)
    table.add_column("ID", style="bid.id", no_wrap=True)
    table.add_column("Title", style="bid.title", no_wrap=True, overflow="ellipsis", ratio=1)
    table.add_column("Fund", style="bid.fund", no_wrap=True, overflow="ellipsis", max_width=20)
    table.add_column("Amount", style="bid.amount", no_wrap=True, justify="right")
    return table


def add_bid_row(table: Table, bid: Bid) -> None:
    table.add_row(Text(bid.bid_id), Text(bid.title), Text(bid.fund), amount(bid))


def bid_details(bid: Bid) -> List[Text]:
    """Labelled lines for a single bid, used inside result panels."""
    return [
        Text.assemble(("ID:      ", "bid.id"), bid.bid_id),
        Text.assemble(("Title:   ", "bid.title"), bid.title),
        Text.assemble(("Fund:    ", "bid.fund"), bid.fund),
        Text.assemble(("Amount:  ", "bid.amount"), amount(bid)),
    ]


def panel_width(title: str, lines: List[Text], console: Console) -> int:
    """At least 32 columns, wide enough for the title and every line, capped at the console."""
    widest = max([len(title) + 6] + [line.cell_len + 4 for line in lines])
    return min(console.width, max(32, widest))


def result_panel(title: str, lines: List[Text], console: Console, ok: bool = True) -> Panel:
    """Boxed result: styled title over the given lines."""
    style = "ok" if ok else "error"
    return Panel(
        Group(*lines),
        title=Text(title, style=style),
        border_style=style,
        box=box_style(console),
        padding=(0, 1),
        expand=False,
        width=panel_width(title, lines, console),
    )


def banner(text: str, console: Console, style: str = "heading") -> Panel:
    return Panel.fit(Text(text, style=style), box=box_style(console), padding=(0, 4))


MENU_ITEMS: Tuple[Tuple[str, str], ...] = (
    ("[1] Enter Bid", "menu.item"),
    ("[2] Load Bids", "menu.item"),
    ("[3] Show All", "menu.item"),
    ("[4] Find Bid", "menu.item"),
    ("[5] Remove Bid", "menu.item"),
    ("[9] Exit", "menu.exit"),
)


def menu(console: Console) -> Panel:
    lines = [Text(label, style=style) for label, style in MENU_ITEMS]
    return Panel(
        Group(*lines),
        title=Text("BID SYSTEM", style="menu.title"),
        box=box_style(console),
        padding=(0, 2),
        expand=False,
        width=26,
    )
