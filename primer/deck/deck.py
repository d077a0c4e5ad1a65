from __future__ import annotations

import logging
import random
from typing import Iterator, List, Optional

from .cards import Card, full_deck

log = logging.getLogger(__name__)


class Deck:
    """Ordered cards; deal() and draw() take from the end."""

    def __init__(self, cards: Optional[List[Card]] = None, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self._start: Optional[List[Card]] = None if cards is None else list(cards)
        self.cards: List[Card] = []
        self.reset()

    @classmethod
    def create(cls, rng: Optional[random.Random] = None) -> "Deck":
        return cls(rng=rng)

    def reset(self) -> None:
        """Put every card back, unshuffled: the custom start list if one was given, else all 52."""
        self.cards = full_deck() if self._start is None else list(self._start)
        log.debug("deck reset: %d cards", len(self.cards))

    def shuffle(self) -> None:
        self.rng.shuffle(self.cards)
        log.debug("deck shuffled")

    def deal(self, n: int) -> List[Card]:
        """Remove and return the last n cards, keeping their order."""
        if n < 0:
            raise ValueError(f"Cannot deal a negative number of cards: {n}")
        if n > len(self.cards):
            raise ValueError(
                f"Not enough cards left to deal: asked for {n}, {len(self.cards)} left"
            )
        cut = len(self.cards) - n
        out = self.cards[cut:]
        del self.cards[cut:]
        log.debug("dealt %d cards, %d left", n, len(self.cards))
        return out

    def draw(self) -> Card:
        if not self.cards:
            raise ValueError("No cards left to draw")
        return self.cards.pop()

    def labels(self) -> List[str]:
        return [str(c) for c in self.cards]

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)
