from __future__ import annotations

from enum import Enum
from typing import Optional


class PileRejection(Enum):
    """Pile-level reasons a move is refused. The value is the user-facing message."""
    SAME_DECK = "Move source and destination can't be the same"
    EMPTY_SOURCE = "You can't move a card from an empty deck"
    STOCK_IS_NOT_A_DESTINATION = "You can't move cards to the stock"
    INVISIBLE_CARD = "You can't move an invisible card"
    MULTI_CARD_TO_STACK = "You can't move more than 1 card at a time to a Stack Pile"
    NO_SUCH_CARD = "There is no card at that position"


class CardRejection(Enum):
    """Card-level reasons a move is refused. The value is the user-facing message."""
    INVALID_TARGET_KIND = "Target deck is neither Stack nor Column."
    STACK_MUST_START_WITH_ACE = "An Ace has to be the first card of a Stack Pile"
    COLUMN_MUST_START_WITH_KING = "A King has to be the first card of a Column"
    SUIT_MISMATCH_ON_STACK = "Stack Piles can only contain same-suit cards"
    RANK_NOT_SEQUENTIAL_ON_STACK = "Stack Piles hold same-suit cards of increasing Rank from Ace to King"
    COLOR_NOT_ALTERNATING = "Column cards have to alternate colors (red and black)"
    RANK_NOT_SEQUENTIAL_ON_COLUMN = "Columns hold alternating-color cards of decreasing rank from King to Two"


class MoveError(Exception):
    """Base class for every recoverable, user-facing move rejection."""

    def __init__(self, message: str, reason: Optional[Enum] = None) -> None:
        super().__init__(message)
        self.message = message
        self.reason = reason

    @property
    def reason_name(self) -> str:
        return self.reason.name if self.reason is not None else type(self).__name__


class MoveSyntaxError(MoveError):
    """A source, destination or command token does not match the move grammar."""

    def __init__(self, token: str, slot: str, message: str) -> None:
        super().__init__(message)
        self.token = token
        self.slot = slot

    @property
    def reason_name(self) -> str:
        return "SYNTAX_ERROR"


class PileError(MoveError):
    def __init__(self, reason: PileRejection) -> None:
        super().__init__(reason.value, reason)


class CardError(MoveError):
    def __init__(self, reason: CardRejection) -> None:
        super().__init__(reason.value, reason)


class ContractViolation(RuntimeError):
    """Raised when a caller breaks the validator's contract, e.g. asks a Joker for its colour.

    Not a MoveError: this is never reported to the player as an ordinary rejection.
    """
