from dataclasses import dataclass, field, replace
from typing import Optional, Tuple
from uuid import UUID

from pinochle_api.domain.errors import (
    GameHandError,
    GamePhaseError,
    HandError,
    NoCurrentHandError,
)
from pinochle_api.domain.hand import Hand
from pinochle_api.domain.scoring_rules import WINNING_SCORE
from pinochle_api.domain.value import GameState, Player, Suit, Team, new_game_id


@dataclass(frozen=True)
class Game:
    """A match: dealer rotation, the hand in play and every completed hand.

    Hands are only ever changed through the Game's operations, each of which
    returns a new Game.
    """

    current_dealer: Player
    state: GameState = GameState.waiting_to_start
    completed_hands: Tuple[Hand, ...] = ()
    current_hand: Optional[Hand] = None
    id: UUID = field(default_factory=new_game_id)

    def __post_init__(self):
        if self.state == GameState.in_progress and self.current_hand is None:
            raise ValueError("A game in progress must have a current hand")

    def start_new_hand(self) -> "Game":
        """Deal the first hand and put the game in progress.

        Raises:
            GamePhaseError: a hand is already in flight.
        """
        if self.state == GameState.in_progress:
            raise GamePhaseError(
                "Cannot start new hand when game is already in progress"
            )
        return replace(
            self,
            state=GameState.in_progress,
            current_hand=Hand(self.current_dealer),
        )

    def record_bid(self, bidder: Player, amount: int) -> "Game":
        hand = self._require_current_hand()
        try:
            new_hand = hand.place_bid(bidder, amount)
        except HandError as e:
            raise GameHandError(e) from e
        return replace(self, current_hand=new_hand)

    def declare_trump(self, trump: Suit) -> "Game":
        hand = self._require_current_hand()
        try:
            new_hand = hand.declare_trump(trump)
        except HandError as e:
            raise GameHandError(e) from e
        return replace(self, current_hand=new_hand)

    def record_meld(self, us: int, them: int) -> "Game":
        """Record meld; a hand lost at meld is filed and the next one dealt."""
        hand = self._require_current_hand()
        try:
            new_hand = hand.record_meld(us, them)
        except HandError as e:
            raise GameHandError(e) from e
        if new_hand.is_completed:
            return self._complete_hand_and_start_new(new_hand)
        return replace(self, current_hand=new_hand)

    def record_tricks(self, us: int, them: int) -> "Game":
        """Record tricks; this always completes the hand and deals the next one."""
        hand = self._require_current_hand("No current hand to record tricks")
        try:
            new_hand = hand.record_tricks(us, them)
        except HandError as e:
            raise GameHandError(e) from e
        return self._complete_hand_and_start_new(new_hand)

    def running_totals(self) -> Tuple[int, int]:
        """Return the (us, them) score summed over completed hands."""
        us_total = 0
        them_total = 0
        for hand in self.completed_hands:
            us_total += hand.us_total
            them_total += hand.them_total
        return us_total, them_total

    def is_game_complete(self) -> bool:
        us_total, them_total = self.running_totals()
        return us_total >= WINNING_SCORE or them_total >= WINNING_SCORE

    def winner(self) -> Optional[Team]:
        """Return the winning team, or None while the game is still open.

        When both teams pass 500 on the same hand the last bidding team wins.
        Failing that, the higher total wins; an exact tie stays unresolved
        and returns None.
        """
        if not self.is_game_complete():
            return None

        us_total, them_total = self.running_totals()
        if us_total >= WINNING_SCORE and them_total >= WINNING_SCORE:
            if self.completed_hands:
                bidder = self.completed_hands[-1].bidder
                if bidder is not None:
                    return bidder.team
            if us_total > them_total:
                return Team.us
            if them_total > us_total:
                return Team.them
            return None
        if us_total >= WINNING_SCORE:
            return Team.us
        return Team.them

    def _require_current_hand(self, message: str = "No current hand") -> Hand:
        if self.current_hand is None:
            raise NoCurrentHandError(message)
        return self.current_hand

    def _complete_hand_and_start_new(self, completed_hand: Hand) -> "Game":
        next_dealer = self.current_dealer.next_clockwise()
        return replace(
            self,
            completed_hands=self.completed_hands + (completed_hand,),
            current_dealer=next_dealer,
            current_hand=Hand(next_dealer),
        )
