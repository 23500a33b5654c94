import unittest

from game import (
    Card,
    CardError,
    CardRejection,
    ContractViolation,
    MoveSyntaxError,
    Pile,
    PileError,
    PileKind,
    PileRejection,
    Rank,
    Suit,
    card_level_checks,
    check_player_input,
    deck_level_checks,
    help_pointer,
    parse_card,
)
from solitaire_core.cards import STANDARD_SUITS


def pile(kind, *cards, invisible=0):
    return Pile(kind, tuple(parse_card(c) for c in cards), invisible)


class TestPlayerInput(unittest.TestCase):
    def test_given_valid_tokens_when_checked_then_no_error(self):
        for src in ('A0', 'A3', 'G12', 'D19', 'O', 'SA', 'SD'):
            for dst in ('A', 'G', 'O', 'SA', 'SD'):
                check_player_input(['M', src, dst])

    def test_given_bad_source_when_checked_then_syntax_error_names_token(self):
        for src in ('H0', 'A', 'A01', 'SE', 'S', 'OO', 'A-1', ''):
            with self.assertRaises(MoveSyntaxError, msg=src) as cm:
                check_player_input(['M', src, 'A'])
            self.assertEqual(cm.exception.token, src)
            self.assertEqual(cm.exception.slot, 'source')
            self.assertIn(f'"{src}" is not a valid source location', cm.exception.message)

    def test_given_destination_z_when_checked_then_syntax_error_names_z(self):
        with self.assertRaises(MoveSyntaxError) as cm:
            check_player_input(['M', 'A3', 'Z'])
        err = cm.exception
        self.assertEqual(err.token, 'Z')
        self.assertEqual(err.slot, 'destination')
        self.assertIn('"Z" is not a valid destination location', err.message)
        self.assertTrue(err.message.endswith(help_pointer()))

    def test_given_destination_with_row_when_checked_then_syntax_error(self):
        with self.assertRaises(MoveSyntaxError) as cm:
            check_player_input(['M', 'A3', 'B4'])
        self.assertEqual(cm.exception.slot, 'destination')

    def test_given_both_tokens_bad_when_checked_then_source_reported_first(self):
        with self.assertRaises(MoveSyntaxError) as cm:
            check_player_input(['M', 'Q9', 'Z'])
        self.assertEqual(cm.exception.token, 'Q9')


class TestDeckLevelChecks(unittest.TestCase):
    def assertPileRejection(self, reason, source, index, destination):
        with self.assertRaises(PileError) as cm:
            deck_level_checks(source, index, destination)
        self.assertIs(cm.exception.reason, reason)
        self.assertEqual(cm.exception.message, reason.value)

    def test_given_same_pile_when_checked_then_same_deck(self):
        col = pile(PileKind.COLUMN, 'KH', 'QS')
        self.assertPileRejection(PileRejection.SAME_DECK, col, 1, col)

    def test_given_equal_but_distinct_piles_when_checked_then_not_same_deck(self):
        a = pile(PileKind.COLUMN, 'KH')
        b = pile(PileKind.COLUMN, 'KH')
        deck_level_checks(a, 0, b)

    def test_given_empty_source_when_checked_then_empty_source(self):
        self.assertPileRejection(
            PileRejection.EMPTY_SOURCE, pile(PileKind.COLUMN), 0, pile(PileKind.COLUMN))

    def test_given_stock_destination_when_checked_then_rejected(self):
        self.assertPileRejection(
            PileRejection.STOCK_IS_NOT_A_DESTINATION,
            pile(PileKind.COLUMN, 'KH'), 0, pile(PileKind.STOCK, '2C'))

    def test_given_invisible_index_when_checked_then_invisible_card(self):
        src = pile(PileKind.COLUMN, '3C', '4D', '5S', invisible=2)
        self.assertPileRejection(PileRejection.INVISIBLE_CARD, src, 1, pile(PileKind.COLUMN))
        deck_level_checks(src, 2, pile(PileKind.COLUMN))

    def test_given_run_to_stack_when_checked_then_multi_card_rejected(self):
        src = pile(PileKind.COLUMN, '3C', '2H', 'AS')
        self.assertPileRejection(PileRejection.MULTI_CARD_TO_STACK, src, 1, pile(PileKind.STACK))
        deck_level_checks(src, 2, pile(PileKind.STACK))

    def test_given_run_to_column_when_checked_then_permitted(self):
        src = pile(PileKind.COLUMN, '9C', '8H', '7S', invisible=1)
        deck_level_checks(src, 1, pile(PileKind.COLUMN, '10D'))

    def test_given_several_violations_when_checked_then_first_in_order_wins(self):
        stock = pile(PileKind.STOCK)
        self.assertPileRejection(PileRejection.SAME_DECK, stock, 0, stock)
        self.assertPileRejection(PileRejection.EMPTY_SOURCE, pile(PileKind.STOCK), -1, pile(PileKind.STOCK))
        src = pile(PileKind.COLUMN, '3C', '4D', invisible=2)
        self.assertPileRejection(PileRejection.STOCK_IS_NOT_A_DESTINATION, src, 0, pile(PileKind.STOCK))
        self.assertPileRejection(PileRejection.INVISIBLE_CARD, src, 0, pile(PileKind.STACK))


class TestCardLevelChecks(unittest.TestCase):
    def assertCardRejection(self, reason, destination, card):
        with self.assertRaises(CardError) as cm:
            card_level_checks(destination, parse_card(card) if isinstance(card, str) else card)
        self.assertIs(cm.exception.reason, reason)

    def test_given_waste_or_stock_target_when_checked_then_invalid_target_kind(self):
        self.assertCardRejection(CardRejection.INVALID_TARGET_KIND, pile(PileKind.WASTE), 'AH')
        self.assertCardRejection(CardRejection.INVALID_TARGET_KIND, pile(PileKind.STOCK), 'AH')

    def test_given_empty_stack_when_any_card_then_accepted_iff_ace(self):
        for suit in STANDARD_SUITS:
            for rank in Rank:
                card = Card(rank, suit)
                if rank is Rank.ACE:
                    card_level_checks(pile(PileKind.STACK), card)
                else:
                    self.assertCardRejection(CardRejection.STACK_MUST_START_WITH_ACE, pile(PileKind.STACK), card)

    def test_given_empty_column_when_any_card_then_accepted_iff_king(self):
        for suit in STANDARD_SUITS:
            for rank in Rank:
                card = Card(rank, suit)
                if rank is Rank.KING:
                    card_level_checks(pile(PileKind.COLUMN), card)
                else:
                    self.assertCardRejection(CardRejection.COLUMN_MUST_START_WITH_KING, pile(PileKind.COLUMN), card)

    def test_given_stack_top_when_any_candidate_then_accepted_iff_same_suit_and_one_higher(self):
        for top_rank in Rank:
            top = Card(top_rank, Suit.HEARTS)
            dest = Pile(PileKind.STACK, (top,))
            for suit in STANDARD_SUITS:
                for rank in Rank:
                    card = Card(rank, suit)
                    if suit is Suit.HEARTS and int(rank) == int(top_rank) + 1:
                        card_level_checks(dest, card)
                    else:
                        with self.assertRaises(CardError):
                            card_level_checks(dest, card)

    def test_given_column_top_when_any_candidate_then_accepted_iff_opposite_color_and_one_lower(self):
        for top_rank in Rank:
            top = Card(top_rank, Suit.CLUBS)
            dest = Pile(PileKind.COLUMN, (top,))
            for suit in STANDARD_SUITS:
                for rank in Rank:
                    card = Card(rank, suit)
                    red = suit in (Suit.HEARTS, Suit.DIAMONDS)
                    if red and int(rank) == int(top_rank) - 1:
                        card_level_checks(dest, card)
                    else:
                        with self.assertRaises(CardError):
                            card_level_checks(dest, card)

    def test_given_stack_with_wrong_suit_when_checked_then_suit_mismatch_before_rank(self):
        self.assertCardRejection(CardRejection.SUIT_MISMATCH_ON_STACK, pile(PileKind.STACK, 'AH'), '3S')

    def test_given_stack_with_same_suit_wrong_rank_when_checked_then_rank_not_sequential(self):
        self.assertCardRejection(CardRejection.RANK_NOT_SEQUENTIAL_ON_STACK, pile(PileKind.STACK, 'AH'), '3H')
        self.assertCardRejection(CardRejection.RANK_NOT_SEQUENTIAL_ON_STACK, pile(PileKind.STACK, '2H'), '2H')

    def test_given_ace_then_two_on_stack_when_checked_then_accepted(self):
        card_level_checks(pile(PileKind.STACK, 'AS'), parse_card('2S'))

    def test_given_full_stack_when_ace_added_then_no_wraparound(self):
        self.assertCardRejection(CardRejection.RANK_NOT_SEQUENTIAL_ON_STACK, pile(PileKind.STACK, 'KH'), 'AH')
        self.assertCardRejection(CardRejection.RANK_NOT_SEQUENTIAL_ON_STACK, pile(PileKind.STACK, 'AH'), 'AH')

    def test_given_column_ending_in_two_when_ace_added_then_accepted(self):
        card_level_checks(pile(PileKind.COLUMN, '2S'), parse_card('AH'))

    def test_given_column_ending_in_ace_when_king_added_then_no_wraparound(self):
        self.assertCardRejection(CardRejection.RANK_NOT_SEQUENTIAL_ON_COLUMN, pile(PileKind.COLUMN, 'AS'), 'KH')

    def test_given_nine_of_clubs_when_eight_of_spades_added_then_color_not_alternating(self):
        self.assertCardRejection(CardRejection.COLOR_NOT_ALTERNATING, pile(PileKind.COLUMN, '9C'), '8S')

    def test_given_column_with_wrong_rank_when_checked_then_rank_not_sequential(self):
        self.assertCardRejection(CardRejection.RANK_NOT_SEQUENTIAL_ON_COLUMN, pile(PileKind.COLUMN, '9C'), '7H')
        self.assertCardRejection(CardRejection.RANK_NOT_SEQUENTIAL_ON_COLUMN, pile(PileKind.COLUMN, '9C'), '10H')

    def test_given_joker_offered_to_column_when_checked_then_contract_violation(self):
        with self.assertRaises(ContractViolation):
            card_level_checks(pile(PileKind.COLUMN, '9C'), Card.joker())

    def test_given_joker_offered_to_stack_when_checked_then_rejected(self):
        self.assertCardRejection(CardRejection.STACK_MUST_START_WITH_ACE, pile(PileKind.STACK), Card.joker())
        self.assertCardRejection(CardRejection.SUIT_MISMATCH_ON_STACK, pile(PileKind.STACK, 'AH'), Card.joker())

    def test_given_rejection_when_raised_then_message_names_rule(self):
        with self.assertRaises(CardError) as cm:
            card_level_checks(pile(PileKind.STACK), parse_card('5S'))
        self.assertEqual(str(cm.exception), 'An Ace has to be the first card of a Stack Pile')


if __name__ == '__main__':
    unittest.main()
