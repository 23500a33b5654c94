from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

from .cards import Card


class PileKind(Enum):
    STOCK = 'stock'
    STACK = 'stack'
    COLUMN = 'column'
    WASTE = 'waste'


@dataclass(frozen=True, eq=False)
class Pile:
    """An ordered run of cards, bottom to top, with the lowest `invisible_count` cards face down.

    Piles compare by identity: two piles holding the same cards are still two piles.
    """
    kind: PileKind
    cards: Tuple[Card, ...] = ()
    invisible_count: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.cards, tuple):
            object.__setattr__(self, 'cards', tuple(self.cards))
        if self.invisible_count < 0 or self.invisible_count > len(self.cards):
            raise ValueError(
                f'invisible_count {self.invisible_count} out of range for a pile of {len(self.cards)} cards'
            )

    def __len__(self) -> int:
        return len(self.cards)

    def __getitem__(self, index: int) -> Card:
        return self.cards[index]

    def __iter__(self):
        return iter(self.cards)

    @property
    def is_empty(self) -> bool:
        return not self.cards

    def top(self) -> Optional[Card]:
        return self.cards[-1] if self.cards else None

    @property
    def visible_cards(self) -> Tuple[Card, ...]:
        return self.cards[self.invisible_count:]

    def with_cards(self, cards: Iterable[Card], invisible_count: int) -> 'Pile':
        return Pile(self.kind, tuple(cards), invisible_count)
