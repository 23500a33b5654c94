"""
Move legality checks.

Three layers, always applied in this order by the caller:
- check_player_input: the raw tokens match the move grammar
- deck_level_checks: the piles involved allow the move at all
- card_level_checks: the moved (first) card fits onto the destination

Every check raises a MoveError subclass on the first rule it finds broken and
returns None otherwise. None of them mutate or keep hold of the piles.
"""
from __future__ import annotations

from typing import Optional, Sequence

from .cards import Card, Rank, opposing_color
from .errors import (
    CardError,
    CardRejection,
    MoveSyntaxError,
    PileError,
    PileRejection,
)
from .help import help_pointer
from .locations import is_valid_destination, is_valid_source
from .piles import Pile, PileKind


def _syntax_error(token: str, slot: str) -> MoveSyntaxError:
    message = f'Invalid Move syntax. "{token}" is not a valid {slot} location.\n{help_pointer()}'
    return MoveSyntaxError(token, slot, message)


def check_player_input(tokens: Sequence[str]) -> None:
    """Verifies the source and destination tokens of `[command, source, destination]`.

    Sources are a column coordinate (A0, G12, ...), the stock (O) or a stack pile
    (SA..SD). Destinations are a column letter, the stock or a stack pile; the
    row is irrelevant because cards always land at the end of a column.
    """
    source, destination = tokens[1], tokens[2]
    if not is_valid_source(source):
        raise _syntax_error(source, 'source')
    if not is_valid_destination(destination):
        raise _syntax_error(destination, 'destination')


def deck_level_checks(source: Pile, source_index: int, destination: Pile) -> None:
    """Verifies that the piles permit moving the card(s) from `source_index` onward.

    Ranks and suits are not looked at here.
    """
    if source is destination:
        raise PileError(PileRejection.SAME_DECK)
    if source.is_empty:
        raise PileError(PileRejection.EMPTY_SOURCE)
    if destination.kind is PileKind.STOCK:
        raise PileError(PileRejection.STOCK_IS_NOT_A_DESTINATION)
    if source_index < source.invisible_count:
        raise PileError(PileRejection.INVISIBLE_CARD)
    if destination.kind is PileKind.STACK and source_index != len(source) - 1:
        raise PileError(PileRejection.MULTI_CARD_TO_STACK)


def _rank_step(lower: Optional[Rank], upper: Optional[Rank]) -> bool:
    # No wraparound: KING never precedes ACE.
    if lower is None or upper is None:
        return False
    return int(upper) == int(lower) + 1


def card_level_checks(destination: Pile, card_to_add: Card) -> None:
    """Verifies that `card_to_add` (the first card of the moved run) fits onto `destination`."""
    if destination.kind not in (PileKind.STACK, PileKind.COLUMN):
        raise CardError(CardRejection.INVALID_TARGET_KIND)

    last_card = destination.top()
    if destination.kind is PileKind.STACK:
        if last_card is None:
            if card_to_add.rank is not Rank.ACE:
                raise CardError(CardRejection.STACK_MUST_START_WITH_ACE)
            return
        if card_to_add.suit is not last_card.suit:
            raise CardError(CardRejection.SUIT_MISMATCH_ON_STACK)
        if not _rank_step(last_card.rank, card_to_add.rank):
            raise CardError(CardRejection.RANK_NOT_SEQUENTIAL_ON_STACK)
        return

    if last_card is None:
        if card_to_add.rank is not Rank.KING:
            raise CardError(CardRejection.COLUMN_MUST_START_WITH_KING)
        return
    # Raises ContractViolation for a Joker on either side.
    if not opposing_color(last_card, card_to_add):
        raise CardError(CardRejection.COLOR_NOT_ALTERNATING)
    if not _rank_step(card_to_add.rank, last_card.rank):
        raise CardError(CardRejection.RANK_NOT_SEQUENTIAL_ON_COLUMN)
