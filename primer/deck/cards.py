from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

SUITS = ("hearts", "spades", "clubs", "diamonds")
VALUES = (
    "ace", "two", "three", "four", "five", "six", "seven",
    "eight", "nine", "ten", "jack", "queen", "king",
)


@dataclass(frozen=True, slots=True)
class Card:
    value: str  # one of VALUES
    suit: str  # one of SUITS

    def __str__(self) -> str:
        return f"{self.value} of {self.suit}"


def full_deck() -> List[Card]:
    # suit-major, value-minor
    return [Card(value, suit) for suit in SUITS for value in VALUES]


def cards_str(cards: Iterable[Card], sep: str = ", ") -> str:
    return sep.join(str(c) for c in cards)
