from __future__ import annotations

# Facade module that re-exports the Klondike core for the Flask app and tests.
# Single-responsibility modules live under solitaire_core/*.

from solitaire_core.cards import (
    Card,
    Color,
    Rank,
    Suit,
    opposing_color,
    parse_card,
    red_suit,
)
from solitaire_core.checks import card_level_checks, check_player_input, deck_level_checks
from solitaire_core.deal import deal_klondike, standard_deck
from solitaire_core.errors import (
    CardError,
    CardRejection,
    ContractViolation,
    MoveError,
    MoveSyntaxError,
    PileError,
    PileRejection,
)
from solitaire_core.help import help_pointer, help_text
from solitaire_core.locations import Location, parse_destination, parse_source
from solitaire_core.moves import (
    MoveRequest,
    Verdict,
    apply_move,
    resolve_move,
    tokenize,
    validate_command,
    validate_move,
)
from solitaire_core.piles import Pile, PileKind
from solitaire_core.state import Table, table_from_json, table_to_json

__all__ = [
    'Card', 'Color', 'Rank', 'Suit', 'opposing_color', 'parse_card', 'red_suit',
    'card_level_checks', 'check_player_input', 'deck_level_checks',
    'deal_klondike', 'standard_deck',
    'CardError', 'CardRejection', 'ContractViolation', 'MoveError', 'MoveSyntaxError',
    'PileError', 'PileRejection',
    'help_pointer', 'help_text',
    'Location', 'parse_destination', 'parse_source',
    'MoveRequest', 'Verdict', 'apply_move', 'resolve_move', 'tokenize',
    'validate_command', 'validate_move',
    'Pile', 'PileKind',
    'Table', 'table_from_json', 'table_to_json',
]


if __name__ == '__main__':
    from solitaire_core.cli import main
    raise SystemExit(main())
