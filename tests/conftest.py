import pytest

from pinochle_api.domain.game import Game
from pinochle_api.domain.hand import Hand
from pinochle_api.domain.hand_state import Completed
from pinochle_api.domain.value import GameState, Player, Suit


def completed_hand(us_total, them_total, bidder=Player.north, dealer=Player.west):
    """Build a finished hand with the given totals, skipping play."""
    return Hand(
        dealer=dealer,
        state=Completed(
            bidder=bidder,
            bid_amount=50,
            trump=Suit.hearts,
            us_total=us_total,
            them_total=them_total,
        ),
    )


def game_with_hands(*hands, dealer=Player.north):
    return Game(
        current_dealer=dealer,
        state=GameState.in_progress,
        completed_hands=tuple(hands),
        current_hand=Hand(dealer),
    )


def hand_at_meld(bidder=Player.north, bid=51, trump=Suit.spades):
    return Hand(Player.east).place_bid(bidder, bid).declare_trump(trump)


def hand_at_tricks(bidder=Player.north, bid=51, us_meld=24, them_meld=32):
    return hand_at_meld(bidder, bid).record_meld(us_meld, them_meld)


@pytest.fixture
def started_game():
    return Game(current_dealer=Player.north).start_new_hand()
