import pytest

from pinochle_api.domain.errors import (
    GameHandError,
    GamePhaseError,
    InvalidBidError,
    NoCurrentHandError,
)
from pinochle_api.domain.game import Game
from pinochle_api.domain.value import GameState, Player, Suit, Team

from conftest import completed_hand, game_with_hands


def play_hand(game, bidder=Player.north, bid=51, meld=(24, 32), tricks=(27, 23)):
    game = game.record_bid(bidder, bid).declare_trump(Suit.spades)
    game = game.record_meld(*meld)
    return game.record_tricks(*tricks)


class TestLifecycle:
    def test_new_game(self):
        game = Game(current_dealer=Player.south)
        assert game.state == GameState.waiting_to_start
        assert game.current_hand is None
        assert game.completed_hands == ()
        assert game.running_totals() == (0, 0)

    def test_start_new_hand(self):
        game = Game(current_dealer=Player.south).start_new_hand()
        assert game.state == GameState.in_progress
        assert game.current_hand.dealer == Player.south
        assert game.current_hand.phase == "WaitingForBid"

    def test_start_new_hand_twice(self, started_game):
        with pytest.raises(GamePhaseError):
            started_game.start_new_hand()

    def test_in_progress_requires_a_hand(self):
        with pytest.raises(ValueError):
            Game(current_dealer=Player.north, state=GameState.in_progress)

    @pytest.mark.parametrize(
        "operation",
        [
            lambda game: game.record_bid(Player.north, 50),
            lambda game: game.declare_trump(Suit.spades),
            lambda game: game.record_meld(20, 20),
            lambda game: game.record_tricks(25, 25),
        ],
    )
    def test_operations_need_a_current_hand(self, operation):
        with pytest.raises(NoCurrentHandError):
            operation(Game(current_dealer=Player.north))


class TestDelegation:
    def test_record_bid_replaces_current_hand(self, started_game):
        game = started_game.record_bid(Player.east, 60)
        assert game.current_hand.bidder == Player.east
        assert game.current_hand.id == started_game.current_hand.id
        assert game.completed_hands == ()

    def test_hand_errors_are_wrapped(self, started_game):
        with pytest.raises(GameHandError) as e:
            started_game.record_bid(Player.east, 61)
        assert isinstance(e.value.hand_error, InvalidBidError)
        assert started_game.current_hand.phase == "WaitingForBid"

    def test_record_tricks_folds_hand_into_history(self, started_game):
        game = play_hand(started_game)
        assert len(game.completed_hands) == 1
        assert game.completed_hands[0].id == started_game.current_hand.id
        assert game.current_dealer == Player.east
        assert game.current_hand.dealer == Player.east
        assert game.current_hand.phase == "WaitingForBid"
        assert game.state == GameState.in_progress
        assert game.running_totals() == (51, 55)

    def test_record_meld_forfeit_folds_hand_into_history(self, started_game):
        game = started_game.record_bid(Player.north, 51).declare_trump(Suit.spades)
        game = game.record_meld(19, 32)
        assert len(game.completed_hands) == 1
        assert game.current_dealer == Player.east
        assert game.running_totals() == (-51, 32)

    def test_record_meld_keeps_hand_when_tricks_remain(self, started_game):
        game = started_game.record_bid(Player.north, 51).declare_trump(Suit.spades)
        game = game.record_meld(24, 32)
        assert game.completed_hands == ()
        assert game.current_hand.phase == "WaitingForTricks"

    def test_dealer_rotates_every_hand(self, started_game):
        game = started_game
        dealers = []
        for _ in range(5):
            game = play_hand(game)
            dealers.append(game.current_dealer)
        assert dealers == [Player.east, Player.south, Player.west, Player.north, Player.east]
        assert [hand.dealer for hand in game.completed_hands] == [
            Player.north,
            Player.east,
            Player.south,
            Player.west,
            Player.north,
        ]

    def test_history_is_append_only(self, started_game):
        first = play_hand(started_game)
        second = play_hand(first, bidder=Player.west, tricks=(26, 24))
        assert second.completed_hands[0] == first.completed_hands[0]
        assert second.running_totals() == (101, 111)


class TestWinner:
    def test_running_totals_treat_absent_as_zero(self):
        game = game_with_hands(completed_hand(60, None), completed_hand(None, -50))
        assert game.running_totals() == (60, -50)

    def test_not_complete_below_500(self):
        game = game_with_hands(completed_hand(250, 240), completed_hand(249, 259))
        assert game.running_totals() == (499, 499)
        assert not game.is_game_complete()
        assert game.winner() is None

    def test_single_team_reaches_500(self):
        game = game_with_hands(completed_hand(450, 100), completed_hand(50, 30))
        assert game.is_game_complete()
        assert game.winner() == Team.us

    def test_them_reaches_500(self):
        game = game_with_hands(completed_hand(100, 520))
        assert game.winner() == Team.them

    def test_both_over_500_last_bidder_wins(self):
        game = game_with_hands(
            completed_hand(480, 450),
            completed_hand(60, 55, bidder=Player.east),
        )
        assert game.running_totals() == (540, 505)
        assert game.winner() == Team.them

    def test_both_over_500_without_bidder_higher_total_wins(self):
        game = game_with_hands(completed_hand(520, 510, bidder=None))
        assert game.winner() == Team.us

    def test_exact_tie_without_bidder_is_unresolved(self):
        game = game_with_hands(completed_hand(510, 510, bidder=None))
        assert game.is_game_complete()
        assert game.winner() is None

    def test_completion_is_a_query(self):
        game = game_with_hands(completed_hand(500, 0))
        assert game.is_game_complete()
        assert game.state == GameState.in_progress
