from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from .checks import card_level_checks, check_player_input, deck_level_checks
from .errors import MoveError, MoveSyntaxError, PileError, PileRejection
from .help import help_pointer
from .locations import parse_destination, parse_source
from .piles import Pile, PileKind
from .state import Table

logger = logging.getLogger(__name__)

MOVE_COMMAND = 'M'


@dataclass(frozen=True)
class MoveRequest:
    """A fully resolved move: the run starting at `source_index` goes onto `destination`."""
    source: Pile
    source_index: int
    destination: Pile
    tokens: Tuple[str, ...] = ()

    @property
    def card_count(self) -> int:
        return len(self.source) - self.source_index


@dataclass(frozen=True)
class Verdict:
    accepted: bool
    error: Optional[MoveError] = None
    request: Optional[MoveRequest] = None

    @property
    def reason(self) -> Optional[Enum]:
        return self.error.reason if self.error is not None else None

    @property
    def reason_name(self) -> Optional[str]:
        return self.error.reason_name if self.error is not None else None

    @property
    def message(self) -> str:
        return self.error.message if self.error is not None else 'OK'


def tokenize(text: str) -> List[str]:
    """Splits a raw move command into `[command, source, destination]`, uppercased."""
    tokens = text.upper().split()
    if len(tokens) != 3:
        raise MoveSyntaxError(
            text.strip(), 'command',
            f'Invalid Move syntax. A move has the form "M <source> <destination>".\n{help_pointer()}',
        )
    if tokens[0] != MOVE_COMMAND:
        raise MoveSyntaxError(
            tokens[0], 'command',
            f'Invalid Move syntax. "{tokens[0]}" is not a move command.\n{help_pointer()}',
        )
    return tokens


def resolve_move(table: Table, tokens: Sequence[str]) -> MoveRequest:
    """Resolves syntactically valid tokens to the piles of `table`.

    Column sources use their row as the index, even past the end of the column;
    stock and stack sources offer their top card.
    """
    src_loc = parse_source(tokens[1])
    dst_loc = parse_destination(tokens[2])
    source = table.pile_at(src_loc)
    destination = table.pile_at(dst_loc)
    if src_loc.kind is PileKind.COLUMN:
        index = src_loc.row
    else:
        index = len(source) - 1
    return MoveRequest(source, index, destination, tuple(tokens))


def validate_move(table: Table, tokens: Sequence[str]) -> Verdict:
    """Runs the syntax, pile and card checks in order and returns the verdict.

    ContractViolation is not a rejection and propagates to the caller.
    """
    request: Optional[MoveRequest] = None
    try:
        check_player_input(tokens)
        request = resolve_move(table, tokens)
        deck_level_checks(request.source, request.source_index, request.destination)
        if request.source_index >= len(request.source):
            raise PileError(PileRejection.NO_SUCH_CARD)
        card_level_checks(request.destination, request.source[request.source_index])
    except MoveError as e:
        logger.debug("rejected move %s: %s", ' '.join(tokens), e.reason_name)
        return Verdict(False, e, request)
    return Verdict(True, None, request)


def validate_command(table: Table, text: str) -> Verdict:
    try:
        tokens = tokenize(text)
    except MoveSyntaxError as e:
        logger.debug("rejected command %r: %s", text, e.reason_name)
        return Verdict(False, e)
    return validate_move(table, tokens)


def apply_move(table: Table, request: MoveRequest) -> Table:
    """Moves the run and returns the new table. Only call this after an accepting verdict.

    If the source is left with only face-down cards, its new top card is turned up.
    """
    source, dest = request.source, request.destination
    run = source.cards[request.source_index:]
    remaining = source.cards[:request.source_index]
    invisible = min(source.invisible_count, len(remaining))
    if remaining and invisible == len(remaining):
        invisible -= 1
    new_source = source.with_cards(remaining, invisible)
    new_dest = dest.with_cards(dest.cards + run, dest.invisible_count)
    return table.replacing(source, new_source).replacing(dest, new_dest)
