from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Tuple

from .cards import parse_card
from .locations import Location
from .piles import Pile, PileKind

NUM_COLUMNS = 7
NUM_STACKS = 4


@dataclass(frozen=True)
class Table:
    """A snapshot of a Klondike layout: the stock, four stack piles and seven columns."""
    stock: Pile
    stacks: Tuple[Pile, ...]
    columns: Tuple[Pile, ...]

    def __post_init__(self) -> None:
        if len(self.stacks) != NUM_STACKS:
            raise ValueError(f'expected {NUM_STACKS} stacks, got {len(self.stacks)}')
        if len(self.columns) != NUM_COLUMNS:
            raise ValueError(f'expected {NUM_COLUMNS} columns, got {len(self.columns)}')

    @classmethod
    def empty(cls) -> 'Table':
        return cls(
            stock=Pile(PileKind.STOCK),
            stacks=tuple(Pile(PileKind.STACK) for _ in range(NUM_STACKS)),
            columns=tuple(Pile(PileKind.COLUMN) for _ in range(NUM_COLUMNS)),
        )

    def pile_at(self, loc: Location) -> Pile:
        if loc.kind is PileKind.STOCK:
            return self.stock
        if loc.kind is PileKind.STACK:
            return self.stacks[loc.stack]
        return self.columns[loc.column]

    def piles(self) -> Tuple[Pile, ...]:
        return (self.stock,) + self.stacks + self.columns

    def replacing(self, old: Pile, new: Pile) -> 'Table':
        """Returns a copy of the table with pile `old` (matched by identity) swapped for `new`."""
        if old is self.stock:
            return replace(self, stock=new)
        stacks = tuple(new if p is old else p for p in self.stacks)
        columns = tuple(new if p is old else p for p in self.columns)
        return replace(self, stacks=stacks, columns=columns)

    def pretty(self) -> str:
        """Human-readable rendering: face-down cards as '##'."""
        lines: List[str] = []
        stock_top = self.stock.top()
        lines.append(f"O : {stock_top if stock_top is not None else '--'} ({len(self.stock)} in stock)")
        for i, stack in enumerate(self.stacks):
            top = stack.top()
            lines.append(f"S{'ABCD'[i]}: {top if top is not None else '--'}")
        for i, col in enumerate(self.columns):
            cells = ['##' if idx < col.invisible_count else str(card) for idx, card in enumerate(col.cards)]
            lines.append(f"{'ABCDEFG'[i]} : {' '.join(cells)}")
        return '\n'.join(lines)


def pile_to_json(p: Pile) -> Dict[str, Any]:
    return {"cards": [str(c) for c in p.cards], "invisible": int(p.invisible_count)}


def pile_from_json(obj: Dict[str, Any], kind: PileKind) -> Pile:
    if not isinstance(obj, dict):
        raise ValueError(f"{kind.value} pile must be an object, got {type(obj).__name__}")
    cards = tuple(parse_card(str(x)) for x in obj.get("cards", []))
    return Pile(kind, cards, int(obj.get("invisible", 0)))


def table_to_json(t: Table) -> Dict[str, Any]:
    return {
        "stock": pile_to_json(t.stock),
        "stacks": [pile_to_json(p) for p in t.stacks],
        "columns": [pile_to_json(p) for p in t.columns],
    }


def table_from_json(obj: Dict[str, Any]) -> Table:
    """Builds a Table from its JSON form. Raises KeyError/ValueError/TypeError on malformed input."""
    if not isinstance(obj, dict):
        raise ValueError(f"state must be an object, got {type(obj).__name__}")
    return Table(
        stock=pile_from_json(obj["stock"], PileKind.STOCK),
        stacks=tuple(pile_from_json(p, PileKind.STACK) for p in obj["stacks"]),
        columns=tuple(pile_from_json(p, PileKind.COLUMN) for p in obj["columns"]),
    )
