"""Tests for hand classification and scoring.

Test coverage:
- Construction: exactly five cards, sorted by value, immutable
- Hand type detection in priority order (straight flush down to high card)
- Ace duality: ace-high and ace-low straights
- Score vectors: base score followed by kickers
- Comparison of hands by score
"""

import pytest
from poker_hands.rules import (
    Card,
    Hand,
    HandType,
    InvalidHand,
    Suit,
    compare_hands,
    parse_cards,
)


def make_hand(text: str) -> Hand:
    return Hand(parse_cards(text))


class TestHandConstruction:
    """A hand holds exactly five cards, sorted ascending by value."""

    @pytest.mark.parametrize("text", ["h2 h3 h4 h5", "h2 h3 h4 h5 h6 h7", ""])
    def test_wrong_card_count_rejected(self, text):
        with pytest.raises(InvalidHand) as exc_info:
            make_hand(text)
        assert exc_info.value.count == len(parse_cards(text))

    def test_invalid_hand_is_value_error(self):
        with pytest.raises(ValueError):
            Hand([])

    def test_sorted_by_value(self):
        hand = make_hand("h14 h10 h11 h12 h13")
        assert [c.value for c in hand.cards] == [10, 11, 12, 13, 14]

    def test_sort_is_stable_for_value_ties(self):
        hand = make_hand("s3 h9 c3 d3 h3")
        assert [c.suit for c in hand.cards[:4]] == [
            Suit.SPADES,
            Suit.CLUBS,
            Suit.DIAMONDS,
            Suit.HEARTS,
        ]

    def test_hand_is_immutable(self):
        hand = make_hand("h2 h3 h4 h5 h6")
        with pytest.raises(AttributeError):
            hand.cards = ()
        assert isinstance(hand.cards, tuple)

    def test_from_string(self):
        assert Hand.from_string("h2 c2 h4 s5 h10") == make_hand("h2 c2 h4 s5 h10")

    def test_equality_ignores_order_of_tied_values(self):
        a = Hand.from_string("h3 d3 c9 s10 c11")
        b = Hand.from_string("d3 h3 c9 s10 c11")
        assert a.cards != b.cards
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_different_suits_not_equal(self):
        a = Hand.from_string("h3 d3 c9 s10 c11")
        b = Hand.from_string("h3 s3 c9 s10 c11")
        assert a != b

    def test_not_equal_to_other_types(self):
        assert Hand.from_string("h3 d3 c9 s10 c11") != "h3 d3 c9 s10 c11"

    def test_len_and_iter(self):
        hand = make_hand("h2 c2 h4 s5 h10")
        assert len(hand) == 5
        assert list(hand) == list(hand.cards)


class TestHandViews:
    def test_has_aces(self):
        assert not make_hand("h2 h3 h4 h5 h6").has_aces
        assert make_hand("h2 h3 h4 h5 h14").has_aces

    def test_values(self):
        assert make_hand("h2 c2 h4 s5 h10").values == (2, 2, 4, 5, 10)

    def test_suits(self):
        hand = make_hand("h2 c2 h4 s5 h10")
        assert hand.suits == (Suit.CLUBS, Suit.HEARTS, Suit.HEARTS, Suit.HEARTS, Suit.SPADES)

    def test_aces_low_remaps_every_ace(self):
        hand = make_hand("h14 s14 c2 d3 h4")
        assert hand.aces_low.values == (1, 1, 2, 3, 4)
        assert hand.values == (2, 3, 4, 14, 14)

    def test_aces_low_without_aces(self):
        hand = make_hand("h2 c2 h4 s5 h10")
        assert hand.aces_low.values == hand.values


class TestHandTypes:
    """Type detection and score vectors for each category."""

    def test_straight_flush(self):
        hand = make_hand("h2 h3 h4 h5 h6")
        assert hand.is_straight_flush()
        assert hand.hand_type == HandType.STRAIGHT_FLUSH
        assert hand.score == (8, 6, 5, 4, 3, 2)

    def test_straight_flush_aces_high(self):
        hand = make_hand("h14 h10 h11 h12 h13")
        assert hand.is_straight_flush()
        assert hand.hand_type == HandType.STRAIGHT_FLUSH
        assert hand.score == (8, 14, 13, 12, 11, 10)

    def test_straight_flush_aces_low(self):
        hand = make_hand("h14 h2 h3 h4 h5")
        assert hand.is_straight_flush()
        assert hand.hand_type == HandType.STRAIGHT_FLUSH
        assert hand.score == (8, 5, 4, 3, 2, 1)

    def test_four_of_a_kind(self):
        hand = make_hand("h3 d3 c3 s3 c11")
        assert hand.is_four_of_a_kind()
        assert hand.hand_type == HandType.FOUR_OF_A_KIND
        assert hand.score == (7, 3, 11)

    def test_full_house(self):
        hand = make_hand("h3 d3 c3 s11 c11")
        assert hand.is_full_house()
        assert hand.hand_type == HandType.FULL_HOUSE
        assert hand.score == (6, 3, 11)

    def test_full_house_pair_higher_than_trips(self):
        hand = make_hand("h13 d13 c4 s4 c4")
        assert hand.hand_type == HandType.FULL_HOUSE
        assert hand.score == (6, 4, 13)

    def test_flush(self):
        hand = make_hand("c2 c3 c6 c7 c11")
        assert hand.is_flush()
        assert hand.hand_type == HandType.FLUSH
        assert hand.score == (5, 11, 7, 6, 3, 2)

    def test_straight(self):
        hand = make_hand("c3 c4 s5 h6 c7")
        assert hand.is_straight()
        assert hand.hand_type == HandType.STRAIGHT
        assert hand.score == (4, 7, 6, 5, 4, 3)

    def test_straight_aces_high(self):
        hand = make_hand("c10 c11 s12 h13 c14")
        assert hand.is_straight()
        assert hand.is_aces_high_straight()
        assert not hand.is_aces_low_straight()
        assert hand.score == (4, 14, 13, 12, 11, 10)

    def test_straight_aces_low(self):
        hand = make_hand("c14 c2 s3 h4 c5")
        assert hand.is_straight()
        assert hand.is_aces_low_straight()
        assert not hand.is_aces_high_straight()
        assert hand.hand_type == HandType.STRAIGHT
        assert hand.score == (4, 5, 4, 3, 2, 1)

    def test_no_wraparound_straight(self):
        hand = make_hand("c12 c13 s14 h2 c3")
        assert not hand.is_straight()
        assert hand.hand_type == HandType.HIGH_CARD
        assert hand.score == (0, 14, 13, 12, 3, 2)

    def test_three_of_a_kind(self):
        hand = make_hand("h3 d3 c3 s10 c11")
        assert hand.is_three_of_a_kind()
        assert hand.hand_type == HandType.THREE_OF_A_KIND
        assert hand.score == (3, 3, 11, 10)

    def test_two_pair(self):
        hand = make_hand("h3 d3 c10 s10 c11")
        assert hand.is_two_pair()
        assert hand.hand_type == HandType.TWO_PAIR
        assert hand.score == (2, 10, 3, 11)

    def test_pair(self):
        hand = make_hand("h3 d3 c9 s10 c11")
        assert hand.is_pair()
        assert hand.hand_type == HandType.PAIR
        assert hand.score == (1, 3, 11, 10, 9)

    def test_pair_of_aces_is_not_aces_low(self):
        hand = make_hand("h14 d14 c2 s3 c4")
        assert hand.hand_type == HandType.PAIR
        assert hand.score == (1, 14, 4, 3, 2)

    def test_high_card(self):
        hand = make_hand("h3 d4 c7 s8 c11")
        assert hand.hand_type == HandType.HIGH_CARD
        assert hand.score == (0, 11, 8, 7, 4, 3)


class TestPriority:
    """Higher categories win over the lower ones they also satisfy."""

    def test_straight_flush_not_reported_as_flush_or_straight(self):
        hand = make_hand("s9 s10 s11 s12 s13")
        assert hand.is_flush()
        assert hand.is_straight()
        assert hand.hand_type == HandType.STRAIGHT_FLUSH

    def test_full_house_also_has_pair(self):
        hand = make_hand("h3 d3 c3 s11 c11")
        assert hand.is_pair()
        assert hand.hand_type == HandType.FULL_HOUSE

    def test_four_of_a_kind_is_not_three_of_a_kind(self):
        hand = make_hand("h3 d3 c3 s3 c11")
        assert not hand.is_three_of_a_kind()

    @pytest.mark.parametrize(
        "text",
        [
            "h2 h3 h4 h5 h6",
            "h3 d3 c3 s3 c11",
            "h3 d3 c3 s11 c11",
            "c2 c3 c6 c7 c11",
            "c3 c4 s5 h6 c7",
            "h3 d3 c3 s10 c11",
            "h3 d3 c10 s10 c11",
            "h3 d3 c9 s10 c11",
            "h3 d4 c7 s8 c11",
        ],
    )
    def test_score_starts_with_base_score(self, text):
        hand = make_hand(text)
        assert hand.score[0] == hand.hand_type.base_score == hand.base_score
        assert hand.rank == (hand.hand_type, hand.base_score)


class TestCompareHands:
    def test_category_dominates(self):
        pair = make_hand("h14 d14 c13 s12 c11")
        two_pair = make_hand("h2 d2 c3 s3 c4")
        assert compare_hands(two_pair, pair) > 0
        assert compare_hands(pair, two_pair) < 0

    def test_ace_low_straight_is_lowest_straight(self):
        wheel = make_hand("c14 c2 s3 h4 c5")
        six_high = make_hand("c2 c3 s4 h5 c6")
        assert compare_hands(six_high, wheel) > 0

    def test_kickers_break_ties(self):
        high = make_hand("h3 d3 c9 s10 c12")
        low = make_hand("s3 c3 d9 h10 c11")
        assert compare_hands(high, low) > 0

    def test_equal_scores_tie(self):
        a = make_hand("h3 d4 c7 s8 c11")
        b = make_hand("s3 c4 d7 h8 d11")
        assert compare_hands(a, b) == 0

    def test_sorting_by_score(self):
        hands = [
            make_hand("h3 d4 c7 s8 c11"),
            make_hand("h2 h3 h4 h5 h6"),
            make_hand("h3 d3 c9 s10 c11"),
        ]
        ordered = sorted(hands, key=lambda h: h.score, reverse=True)
        assert [h.hand_type for h in ordered] == [
            HandType.STRAIGHT_FLUSH,
            HandType.PAIR,
            HandType.HIGH_CARD,
        ]


class TestHandType:
    def test_base_scores(self):
        assert [t.base_score for t in HandType] == list(range(9))

    def test_str(self):
        assert str(HandType.FOUR_OF_A_KIND) == "four_of_a_kind"

    def test_card_order_irrelevant(self):
        a = Hand([Card(Suit.HEARTS, 5), Card(Suit.HEARTS, 2), Card(Suit.HEARTS, 4),
                  Card(Suit.HEARTS, 3), Card(Suit.HEARTS, 14)])
        assert a.score == (8, 5, 4, 3, 2, 1)
