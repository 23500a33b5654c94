from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .piles import PileKind

COLUMN_LETTERS = 'ABCDEFG'
STACK_LETTERS = 'ABCD'
STOCK_TOKEN = 'O'

# Column rows are any non-negative integer without leading zeros; depth is checked on lookup.
SOURCE_PATTERN = re.compile(r'^(?:(?P<column>[A-G])(?P<row>0|[1-9][0-9]*)|(?P<stock>O)|S(?P<stack>[A-D]))$')
DESTINATION_PATTERN = re.compile(r'^(?:(?P<column>[A-G])|(?P<stock>O)|S(?P<stack>[A-D]))$')


@dataclass(frozen=True)
class Location:
    """A parsed move token: a column (with an optional row), the stock, or a stack pile."""
    kind: PileKind
    column: Optional[int] = None
    row: Optional[int] = None
    stack: Optional[int] = None

    def token(self) -> str:
        if self.kind is PileKind.STOCK:
            return STOCK_TOKEN
        if self.kind is PileKind.STACK:
            return 'S' + STACK_LETTERS[self.stack]
        letter = COLUMN_LETTERS[self.column]
        return letter if self.row is None else f'{letter}{self.row}'


def is_valid_source(token: str) -> bool:
    return SOURCE_PATTERN.match(token) is not None


def is_valid_destination(token: str) -> bool:
    return DESTINATION_PATTERN.match(token) is not None


def _from_match(m: 're.Match[str]') -> Location:
    groups = m.groupdict()
    if groups.get('stock'):
        return Location(PileKind.STOCK)
    if groups.get('stack'):
        return Location(PileKind.STACK, stack=STACK_LETTERS.index(groups['stack']))
    row = groups.get('row')
    return Location(
        PileKind.COLUMN,
        column=COLUMN_LETTERS.index(groups['column']),
        row=int(row) if row is not None else None,
    )


def parse_source(token: str) -> Location:
    """Parses a source token. Raises ValueError if the token is not a source location."""
    m = SOURCE_PATTERN.match(token)
    if m is None:
        raise ValueError(f'not a source location: {token!r}')
    return _from_match(m)


def parse_destination(token: str) -> Location:
    """Parses a destination token. Raises ValueError if the token is not a destination location."""
    m = DESTINATION_PATTERN.match(token)
    if m is None:
        raise ValueError(f'not a destination location: {token!r}')
    return _from_match(m)
