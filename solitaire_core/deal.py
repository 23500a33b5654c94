from __future__ import annotations

import random
from typing import List, Optional

from .cards import Card, Rank, STANDARD_SUITS
from .piles import Pile, PileKind
from .state import NUM_COLUMNS, NUM_STACKS, Table


def standard_deck(jokers: int = 0) -> List[Card]:
    """The 52 standard cards in suit/rank order, followed by `jokers` Jokers."""
    deck: List[Card] = [Card(rank, suit) for suit in STANDARD_SUITS for rank in Rank]
    deck.extend(Card.joker() for _ in range(jokers))
    return deck


def deal_klondike(seed: Optional[int] = None, jokers: int = 0) -> Table:
    """Shuffles and deals a Klondike table.

    Column i receives i+1 cards with only the top one face up. The remaining cards
    (plus any Jokers) form the stock with its top card face up.
    """
    rng = random.Random(seed)
    deck = standard_deck()
    rng.shuffle(deck)
    columns: List[Pile] = []
    for i in range(NUM_COLUMNS):
        cards, deck = deck[:i + 1], deck[i + 1:]
        columns.append(Pile(PileKind.COLUMN, tuple(cards), invisible_count=i))
    # Jokers only ever sit in the stock.
    deck.extend(Card.joker() for _ in range(jokers))
    rng.shuffle(deck)
    stock = Pile(PileKind.STOCK, tuple(deck), invisible_count=max(len(deck) - 1, 0))
    return Table(
        stock=stock,
        stacks=tuple(Pile(PileKind.STACK) for _ in range(NUM_STACKS)),
        columns=tuple(columns),
    )
