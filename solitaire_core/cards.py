from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Optional

from .errors import ContractViolation


class Rank(IntEnum):
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


class Suit(Enum):
    CLUBS = 'C'
    DIAMONDS = 'D'
    HEARTS = 'H'
    SPADES = 'S'
    JOKER = 'K'


class Color(Enum):
    RED = 'red'
    BLACK = 'black'


RANK_SYMBOLS: Dict[Rank, str] = {
    Rank.ACE: 'A',
    Rank.TWO: '2',
    Rank.THREE: '3',
    Rank.FOUR: '4',
    Rank.FIVE: '5',
    Rank.SIX: '6',
    Rank.SEVEN: '7',
    Rank.EIGHT: '8',
    Rank.NINE: '9',
    Rank.TEN: '10',
    Rank.JACK: 'J',
    Rank.QUEEN: 'Q',
    Rank.KING: 'K',
}
_RANKS_BY_SYMBOL: Dict[str, Rank] = {sym: rank for rank, sym in RANK_SYMBOLS.items()}

STANDARD_SUITS = (Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES)
JOKER_SYMBOL = 'JK'


@dataclass(frozen=True)
class Card:
    """A single playing card. Jokers carry no rank."""
    rank: Optional[Rank]
    suit: Suit

    def __post_init__(self) -> None:
        if self.suit is Suit.JOKER:
            if self.rank is not None:
                raise ValueError('a Joker has no rank')
        elif self.rank is None:
            raise ValueError(f'a card of suit {self.suit.name} needs a rank')

    @classmethod
    def joker(cls) -> 'Card':
        return cls(None, Suit.JOKER)

    @property
    def is_joker(self) -> bool:
        return self.suit is Suit.JOKER

    @property
    def color(self) -> Color:
        return Color.RED if red_suit(self) else Color.BLACK

    def __str__(self) -> str:
        if self.rank is None:
            return JOKER_SYMBOL
        return RANK_SYMBOLS[self.rank] + self.suit.value


def parse_card(text: str) -> Card:
    """Parses short notation such as '7H', '10S', 'KD' or 'JK' (Joker)."""
    s = text.strip().upper()
    if s == JOKER_SYMBOL:
        return Card.joker()
    if len(s) < 2:
        raise ValueError(f'invalid card: {text!r}')
    rank_sym, suit_sym = s[:-1], s[-1]
    rank = _RANKS_BY_SYMBOL.get(rank_sym)
    if rank is None or suit_sym == Suit.JOKER.value:
        raise ValueError(f'invalid card: {text!r}')
    try:
        suit = Suit(suit_sym)
    except ValueError:
        raise ValueError(f'invalid card: {text!r}') from None
    return Card(rank, suit)


def red_suit(card: Card) -> bool:
    """True for Diamonds and Hearts. Jokers have no colour and raise ContractViolation."""
    if card.suit is Suit.JOKER:
        raise ContractViolation('red_suit() should not be used with Jokers')
    return card.suit in (Suit.DIAMONDS, Suit.HEARTS)


def opposing_color(card1: Card, card2: Card) -> bool:
    """True if one card is red and the other black."""
    return red_suit(card1) != red_suit(card2)
