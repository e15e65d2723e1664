"""Interactive menu session.

Maps menu choices to list operations:
- 1 Enter Bid: append, after refusing an ID that is already stored
- 2 Load Bids: bulk append from the CSV file
- 3 Show All: traverse and print every bid
- 4 Find Bid: search by ID
- 5 Remove Bid: remove by ID
- 9 Exit
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from rich.console import Console
from rich.text import Text

from bids.bid import Bid
from bids.linked_list import LinkedList
from common.config_loader import LoadedConfig
from display import render
from loader.amount import str_to_double
from loader.csv_loader import load_bids

logger = logging.getLogger(__name__)

EXIT_CHOICE = 9


@dataclass
class Session:
    """One interactive run: the bid list plus the console it talks through.

    ``read`` replaces ``console.input`` when given; it receives the plain
    prompt text and returns the answer.
    """

    config: LoadedConfig
    console: Console
    csv_path: str
    default_key: str = ""
    bids: LinkedList = field(default_factory=LinkedList)
    read: Optional[Callable[[str], str]] = None

    def ask(self, prompt: str) -> str:
        if self.read is not None:
            return self.read(prompt)
        return self.console.input(Text(prompt, style="prompt"))

    def result(self, title: str, lines: List[Text], ok: bool = True) -> None:
        self.console.print()
        self.console.print(render.result_panel(title, lines, self.console, ok))

    def error(self, *messages: str) -> None:
        lines = [Text(messages[0], style="error")] + [Text(m, style="hint") for m in messages[1:]]
        self.result("ERROR", lines, ok=False)

    def pause(self) -> None:
        self.ask("Press Enter to continue...")

    def ask_key(self, prompt: str) -> str:
        """Prompt for a bid ID; blank answers fall back to the default key."""
        hint = f" [{self.default_key}]" if self.default_key else ""
        self.console.print()
        key = self.ask(f"{prompt}{hint}: ").strip()
        return key or self.default_key

    # -- commands -----------------------------------------------------------

    def enter_bid(self) -> int:
        self.console.print()
        bid_id = self.ask("Enter ID: ").strip()
        title = self.ask("Enter Title: ")
        fund = self.ask("Enter Fund: ").strip()
        amount = str_to_double(self.ask("Enter Amount: $"), self.config.strip_char)

        if not bid_id:
            self.error("No ID entered.")
            return 1
        if self.bids.contains(bid_id):
            self.error(
                f"Bid ID {bid_id} already exists.",
                "Use a different ID or remove the existing bid first.",
            )
            return 1

        bid = Bid(bid_id=bid_id, title=title, fund=fund, amount=amount)
        self.bids.append(bid)
        logger.debug("Appended bid %s", bid_id)
        self.result("BID ADDED", render.bid_details(bid))
        return 0

    def load(self) -> int:
        self.console.print(Text(f"Loading CSV file {self.csv_path}"))
        res = load_bids(self.csv_path, self.bids, self.config.columns, self.config.strip_char)

        if not res.ok:
            self.error(
                f"Error loading CSV '{self.csv_path}': {res.error}",
                f"{self.bids.size()} bids in list",
            )
            return 1

        lines = [
            Text(f"{self.bids.size()} bids read", style="ok"),
            Text(f"Time: {res.elapsed * 1000:.2f} ms ({res.elapsed:.4f} s)", style="hint"),
        ]
        if res.skipped:
            lines.insert(1, Text(f"{res.skipped} malformed row(s) skipped", style="warn"))
        self.result("BIDS LOADED", lines)
        return 0

    def show_all(self) -> int:
        if self.bids.is_empty():
            self.error("No bids loaded yet.", "Please select option 2 first.")
            return 1

        table = render.bid_table(f"ALL BIDS ({self.bids.size()} total)", self.console)
        self.bids.print_list(lambda bid: render.add_bid_row(table, bid))
        self.console.print()
        self.console.print(table)
        self.console.print()
        return 0

    def find(self) -> int:
        key = self.ask_key("Enter Bid ID to find")
        if not key:
            self.error("No ID entered.")
            return 1

        start = time.perf_counter()
        bid = self.bids.search(key)
        us = int((time.perf_counter() - start) * 1_000_000)

        if bid is None:
            self.result("NOT FOUND", [Text(f"Bid ID {key} not found.", style="error")], ok=False)
            return 1

        lines = render.bid_details(bid)
        lines += [Text(""), Text(f"Search time: {us} us ({us / 1_000_000:.6f} s)", style="hint")]
        self.result("BID FOUND", lines)
        return 0

    def remove(self) -> int:
        key = self.ask_key("Enter Bid ID to remove")
        if not key:
            self.error("No ID entered.")
            return 1

        if not self.bids.remove(key):
            self.result("NOT FOUND", [Text(f"Bid ID {key} was not in the list.", style="error")], ok=False)
            return 1

        logger.debug("Removed bid %s", key)
        self.result("BID REMOVED", [Text(f"Successfully removed bid ID: {key}", style="ok")])
        return 0

    def commands(self) -> Dict[int, Callable[[], int]]:
        return {
            1: self.enter_bid,
            2: self.load,
            3: self.show_all,
            4: self.find,
            5: self.remove,
        }

    def goodbye(self) -> None:
        self.console.print()
        self.console.print(render.banner("Goodbye!", self.console, "menu.title"))
        self.console.print()

    def run(self) -> int:
        """Menu loop. Always returns 0, whatever state the list is in."""
        handlers = self.commands()
        try:
            while True:
                self.console.print()
                self.console.print(render.menu(self.console))
                self.console.print()
                raw = self.ask("Enter choice: ").strip()
                try:
                    choice = int(raw)
                except ValueError:
                    self.error("Invalid input. Please enter a number.")
                    self.pause()
                    continue

                if choice == EXIT_CHOICE:
                    self.goodbye()
                    break

                handler = handlers.get(choice)
                if handler is None:
                    self.error("Invalid choice. Please try again.")
                    self.pause()
                    continue

                handler()
                self.pause()
        except (EOFError, KeyboardInterrupt):
            logger.debug("Input closed, ending session")
            self.console.print()
        return 0
