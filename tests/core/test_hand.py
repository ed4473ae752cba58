"""Tests for hand evaluation and participant state."""

import pytest
from hypothesis import given, strategies as st

from core.cards import Card, Suit, RANKS
from core.errors import HandFullError
from core.hand import HandType, Participant, Role, evaluate_hand


def hand(*codes: str) -> list[Card]:
    return [Card.from_string(code) for code in codes]


@st.composite
def card_strategy(draw):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(RANKS)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card.from_rank(rank, suit)


class TestEvaluateHand:
    """Tests for evaluate_hand."""

    def test_empty_hand(self):
        """Test an empty hand scores hard zero."""
        result = evaluate_hand([])
        assert result.score == 0
        assert result.hand_type == HandType.HARD
        assert not result.busted
        assert not result.done

    def test_ace_king_is_soft_21(self):
        """Test a natural."""
        result = evaluate_hand(hand("AS", "KH"))
        assert result.score == 21
        assert result.hand_type == HandType.SOFT
        assert result.done
        assert not result.busted

    def test_two_aces_and_nine_upgrade_one_ace(self):
        """Test only one ace is counted as 11: A-A-9 is soft 21."""
        result = evaluate_hand(hand("AS", "AH", "9C"))
        assert result.score == 21
        assert result.hand_type == HandType.SOFT
        assert result.done

    def test_bust(self):
        """Test 10-9-5 busts."""
        result = evaluate_hand(hand("10S", "9H", "5C"))
        assert result.score == 24
        assert result.hand_type == HandType.HARD
        assert result.busted
        assert result.done

    def test_hard_hand(self):
        """Test 7-7 is hard 14."""
        result = evaluate_hand(hand("7S", "7H"))
        assert result.score == 14
        assert result.hand_type == HandType.HARD
        assert not result.done
        assert not result.busted

    def test_soft_to_hard_transition(self):
        """Test ace switching from 11 to 1."""
        assert evaluate_hand(hand("AS")).score == 11
        assert evaluate_hand(hand("AS", "5H")).hand_type == HandType.SOFT
        result = evaluate_hand(hand("AS", "5H", "8C"))
        assert result.score == 14
        assert result.hand_type == HandType.HARD

    def test_ace_counted_as_one_when_eleven_busts(self):
        """Test K-Q-A is hard 21."""
        result = evaluate_hand(hand("KS", "QH", "AC"))
        assert result.score == 21
        assert result.hand_type == HandType.HARD
        assert result.done

    def test_multiple_aces(self):
        """Test aces beyond the first always count as 1."""
        assert evaluate_hand(hand("AS", "AH")).score == 12
        assert evaluate_hand(hand("AS", "AH", "AC")).score == 13
        result = evaluate_hand(hand("AS", "AH", "AC", "9D"))
        assert result.score == 12
        assert result.hand_type == HandType.HARD

    @given(st.lists(card_strategy(), min_size=1, max_size=9))
    def test_score_is_base_or_base_plus_ten(self, cards):
        """Test the score never upgrades more than one ace."""
        base = sum(card.value for card in cards)
        result = evaluate_hand(cards)
        if result.hand_type == HandType.SOFT:
            assert result.score == base + 10
            assert result.score <= 21
            assert any(card.is_ace for card in cards)
        else:
            assert result.score == base

    @given(st.lists(card_strategy(), min_size=1, max_size=9))
    def test_flags_follow_score(self, cards):
        """Test bust and done are never both from 21 and over 21."""
        result = evaluate_hand(cards)
        assert result.busted == (result.score > 21)
        assert result.done == (result.score >= 21)
        assert not (result.busted and result.score == 21)


class TestParticipant:
    """Tests for the Participant class."""

    def test_new_participant(self, player):
        """Test a fresh participant."""
        assert len(player) == 0
        assert player.score == 0
        assert player.is_hard
        assert not player.is_done
        assert not player.is_busted
        assert player.is_player

    def test_receive_card_updates_score(self, player):
        """Test scoring after each card."""
        player.receive_card(Card.from_string("AS"))
        assert player.score == 11
        assert player.is_soft

        player.receive_card(Card.from_string("5H"))
        assert player.score == 16

        player.receive_card(Card.from_string("8C"))
        assert player.score == 14
        assert player.is_hard

    def test_receive_card_to_21_is_done(self, make_participant):
        """Test reaching 21 finishes the participant."""
        player = make_participant(Role.PLAYER, "AS", "KH")
        assert player.is_done
        assert player.has_blackjack
        assert not player.is_busted

    def test_bust_implies_done(self, make_participant):
        """Test busting also finishes the participant."""
        player = make_participant(Role.PLAYER, "10S", "9H", "5C")
        assert player.is_busted
        assert player.is_done

    def test_done_is_sticky(self, make_participant):
        """Test done survives a later drop below 21."""
        dealer = make_participant(Role.DEALER, "AS", "KH")
        dealer.receive_card(Card.from_string("5C"))
        assert dealer.score == 16
        assert dealer.is_done

    def test_hand_full_raises(self, player):
        """Test the card bound."""
        for code in ("AS", "AH", "AC", "AD", "2S", "2H", "2C", "2D", "3S"):
            player.receive_card(Card.from_string(code))
        assert len(player) == 9

        with pytest.raises(HandFullError):
            player.receive_card(Card.from_string("3H"))
        assert len(player) == 9

    def test_reset(self, make_participant):
        """Test reset clears everything."""
        participant = make_participant(Role.PLAYER, "10S", "9H", "5C")
        participant.reset(Role.DEALER)
        assert participant.role == Role.DEALER
        assert participant.cards == []
        assert participant.score == 0
        assert participant.hand_type == HandType.HARD
        assert not participant.is_done
        assert not participant.is_busted

    def test_str(self, make_participant):
        """Test compact description."""
        assert str(make_participant(Role.PLAYER, "AS", "6H")) == "player: A♠ 6♥ (soft 17)"
        assert str(make_participant(Role.DEALER, "10S", "9H", "5C")) == "dealer: 10♠ 9♥ 5♣ (BUST)"

    def test_custom_target(self):
        """Test a participant scores against its own blackjack target."""
        participant = Participant(Role.PLAYER, blackjack=15)
        for card in hand("AS", "4H"):
            participant.receive_card(card)

        assert participant.score == 15
        assert participant.is_soft
        assert participant.is_done
        assert participant.has_blackjack

        participant.reset()
        participant.receive_card(Card.from_string("AC"))
        participant.receive_card(Card.from_string("5D"))
        assert participant.score == 6
        assert participant.is_hard
