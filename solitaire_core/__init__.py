"""
Klondike move legality core.

Pure-logic package: the rule checks a move executor consults before it touches
any pile. Modules:
- cards.py: Rank, Suit, Color, Card and the colour helpers
- piles.py: PileKind, Pile
- errors.py: rejection classifications and ContractViolation
- locations.py: move token grammar
- checks.py: syntax, pile-level and card-level checks
- state.py: Table snapshot and its JSON form
- moves.py: the validate-then-apply pipeline
- deal.py: seeded Klondike deal
- help.py: move syntax reference shown to players
- logging_config.py: logging setup for the CLI and the web app
- cli.py: command-line checker and interactive play loop
"""
