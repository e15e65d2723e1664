from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True)
class Bid:
    bid_id: str = ""
    title: str = ""
    fund: str = ""
    amount: float = 0.0
