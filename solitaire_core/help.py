from __future__ import annotations

HELP_POINTER = "See H̲elp for instructions."

HELP_TEXT = """\
Klondike moves are entered as three space-separated parts:

    M <source> <destination>

Source locations
    A0 .. G12   a card in a column: column letter A-G, then the row (0 is the bottom card)
    O           the top card of the stock
    SA .. SD    the top card of a stack pile

Destination locations
    A .. G      a column (cards are always added at the end of a column)
    SA .. SD    a stack pile

Rules
    Stack piles are built up by suit from Ace to King, one card at a time.
    Columns are built down from King in alternating colours; a run of visible
    cards may be moved together.
    Face-down cards can't be moved, and nothing can be moved onto the stock.
"""


def help_text() -> str:
    return HELP_TEXT


def help_pointer() -> str:
    return HELP_POINTER
