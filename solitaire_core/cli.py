from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from .deal import deal_klondike
from .help import help_text
from .logging_config import setup_logging
from .moves import apply_move, validate_command
from .state import Table, table_from_json

logger = logging.getLogger(__name__)

QUIT_WORDS = ('Q', 'QUIT', 'EXIT')
HELP_WORDS = ('H', 'HELP')
LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']


def load_table(path: Optional[str], seed: Optional[int]) -> Table:
    if path:
        with open(path, 'r', encoding='utf-8') as f:
            return table_from_json(json.load(f))
    return deal_klondike(seed=seed)


def check_once(table: Table, command: str) -> int:
    """Validates one move command and prints the verdict. Returns a process exit code."""
    verdict = validate_command(table, command)
    if verdict.accepted:
        print('OK')
        return 0
    print(f'{verdict.reason_name}: {verdict.message}')
    return 1


def play(table: Table) -> None:
    print(table.pretty())
    while True:
        try:
            text = input('Move (M <source> <destination>, H for help, Q to quit): ').strip()
        except EOFError:
            print()
            return
        word = text.upper()
        if word in QUIT_WORDS:
            return
        if word in HELP_WORDS:
            print(help_text())
            continue
        verdict = validate_command(table, text)
        if not verdict.accepted:
            print(verdict.message)
            continue
        table = apply_move(table, verdict.request)
        logger.info("applied move %s", ' '.join(verdict.request.tokens))
        print(table.pretty())


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Klondike move legality checker')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the deal')
    parser.add_argument('--state', default=None, help='JSON file holding the table to check against')
    parser.add_argument('--move', default=None, help='Move to check, e.g. "M A3 SA"')
    parser.add_argument('--play', action='store_true', help='Play interactively on the table')
    parser.add_argument('--show-help', action='store_true', help='Print the move syntax reference')
    parser.add_argument('--log-level', default=None, choices=LOG_LEVELS,
                        help='Logging level (default: $SOLITAIRE_LOG_LEVEL or INFO)')
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    if args.show_help:
        print(help_text())
        return 0

    try:
        table = load_table(args.state, args.seed)
    except (OSError, ValueError, KeyError, TypeError) as e:
        print(f'error: could not load table: {e}', file=sys.stderr)
        return 2

    if args.move is not None:
        return check_once(table, args.move)
    if args.play:
        play(table)
        return 0
    print(table.pretty())
    return 0


if __name__ == '__main__':
    sys.exit(main())
