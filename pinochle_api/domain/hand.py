from dataclasses import dataclass, field, replace
from typing import Optional
from uuid import UUID

from pinochle_api.domain import scoring_rules
from pinochle_api.domain.errors import HandPhaseError, InvalidBidError
from pinochle_api.domain.hand_state import (
    Completed,
    HandState,
    NoMarriage,
    WaitingForBid,
    WaitingForMeld,
    WaitingForTricks,
    WaitingForTrump,
)
from pinochle_api.domain.value import Player, Suit, Team, new_hand_id


@dataclass(frozen=True)
class Hand:
    """One deal, from bidding through the final score.

    Transitions never modify the receiver; they return a new Hand with the
    same id and dealer, or raise a HandError.
    """

    dealer: Player
    state: HandState = field(default_factory=WaitingForBid)
    id: UUID = field(default_factory=new_hand_id)

    # ---- queries --------------------------------------------------------------

    @property
    def phase(self) -> str:
        return self.state.phase

    @property
    def is_completed(self) -> bool:
        return isinstance(self.state, Completed)

    @property
    def bidder(self) -> Optional[Player]:
        if isinstance(self.state, WaitingForBid):
            return None
        return self.state.bidder

    @property
    def bid_amount(self) -> Optional[int]:
        if isinstance(self.state, WaitingForBid):
            return None
        return self.state.bid_amount

    @property
    def trump(self) -> Optional[Suit]:
        if isinstance(self.state, (WaitingForMeld, WaitingForTricks, Completed)):
            return self.state.trump
        return None

    @property
    def us_meld(self) -> Optional[int]:
        if isinstance(self.state, (WaitingForTricks, Completed)):
            return self.state.us_meld
        return None

    @property
    def them_meld(self) -> Optional[int]:
        if isinstance(self.state, (WaitingForTricks, Completed)):
            return self.state.them_meld
        return None

    @property
    def us_tricks(self) -> Optional[int]:
        if isinstance(self.state, Completed):
            return self.state.us_tricks
        return None

    @property
    def them_tricks(self) -> Optional[int]:
        if isinstance(self.state, Completed):
            return self.state.them_tricks
        return None

    @property
    def us_total(self) -> int:
        """Hand score for Us; 0 until the hand is completed."""
        if isinstance(self.state, Completed):
            return self.state.us_total or 0
        return 0

    @property
    def them_total(self) -> int:
        """Hand score for Them; 0 until the hand is completed."""
        if isinstance(self.state, Completed):
            return self.state.them_total or 0
        return 0

    @property
    def tricks_to_save(self) -> Optional[int]:
        """Trick points the bidding team needs to make its contract.

        Available as soon as a bid exists; meld is counted once recorded.
        """
        bidder = self.bidder
        if bidder is None:
            return None
        bidding_meld = scoring_rules.team_value(
            bidder.team, self.us_meld, self.them_meld
        )
        return scoring_rules.required_tricks(self.bid_amount, bidding_meld)

    # ---- transitions ----------------------------------------------------------

    def place_bid(self, bidder: Player, amount: int) -> "Hand":
        """WaitingForBid -> WaitingForTrump.

        Raises:
            HandPhaseError: a bid was already placed.
            InvalidBidError: the amount breaks the increment rules.
        """
        if not isinstance(self.state, WaitingForBid):
            raise HandPhaseError("Hand is not waiting for bid")
        if not scoring_rules.validate_bid_increment(amount):
            raise InvalidBidError(amount)
        return replace(self, state=WaitingForTrump(bidder=bidder, bid_amount=amount))

    def declare_trump(self, trump: Suit) -> "Hand":
        """WaitingForTrump -> WaitingForMeld, or NoMarriage for the sentinel suit."""
        state = self.state
        if not isinstance(state, WaitingForTrump):
            raise HandPhaseError("Hand is not waiting for trump")
        if trump == Suit.no_marriage:
            return replace(
                self,
                state=NoMarriage(bidder=state.bidder, bid_amount=state.bid_amount),
            )
        return replace(
            self,
            state=WaitingForMeld(
                bidder=state.bidder, bid_amount=state.bid_amount, trump=trump
            ),
        )

    def record_meld(self, us: int, them: int) -> "Hand":
        """Record both teams' meld.

        Meld below 20 is dropped. If the bidding team is left without meld,
        or trump was never named, the hand completes here with the bidders
        set back by their bid. Otherwise the hand waits for tricks.
        """
        us_meld = scoring_rules.normalize_meld(us)
        them_meld = scoring_rules.normalize_meld(them)
        state = self.state

        if isinstance(state, WaitingForMeld):
            bidding_team = state.bidder.team
            if scoring_rules.team_value(bidding_team, us_meld, them_meld) is None:
                us_total, them_total = scoring_rules.meld_forfeit_scores(
                    bidding_team, state.bid_amount, us_meld, them_meld
                )
                return replace(
                    self,
                    state=Completed(
                        bidder=state.bidder,
                        bid_amount=state.bid_amount,
                        trump=state.trump,
                        us_meld=us_meld,
                        them_meld=them_meld,
                        us_total=us_total,
                        them_total=them_total,
                    ),
                )
            return replace(
                self,
                state=WaitingForTricks(
                    bidder=state.bidder,
                    bid_amount=state.bid_amount,
                    trump=state.trump,
                    us_meld=us_meld,
                    them_meld=them_meld,
                ),
            )

        if isinstance(state, NoMarriage):
            # Without a marriage the bidders cannot claim meld at all.
            bidding_team = state.bidder.team
            if bidding_team == Team.us:
                us_meld = None
            else:
                them_meld = None
            us_total, them_total = scoring_rules.meld_forfeit_scores(
                bidding_team, state.bid_amount, us_meld, them_meld
            )
            return replace(
                self,
                state=Completed(
                    bidder=state.bidder,
                    bid_amount=state.bid_amount,
                    trump=Suit.no_marriage,
                    us_meld=us_meld,
                    them_meld=them_meld,
                    us_total=us_total or 0,
                    them_total=them_total or 0,
                ),
            )

        raise HandPhaseError("Hand is not waiting for meld")

    def record_tricks(self, us: int, them: int) -> "Hand":
        """WaitingForTricks -> Completed.

        A single 0 is read as "not entered" and inferred from the other side.

        Raises:
            HandPhaseError: the hand is not waiting for tricks.
            InvalidTricksError: the pair cannot be made to sum to 50.
        """
        state = self.state
        if not isinstance(state, WaitingForTricks):
            raise HandPhaseError("Hand is not waiting for tricks")

        us_tricks, them_tricks = scoring_rules.infer_tricks(us, them)

        bidding_team = state.bidder.team
        needed = scoring_rules.required_tricks(
            state.bid_amount,
            scoring_rules.team_value(bidding_team, state.us_meld, state.them_meld),
        )
        us_score, them_score = scoring_rules.apply_contract_penalty(
            bidding_team,
            scoring_rules.team_score(state.us_meld, us_tricks),
            scoring_rules.team_score(state.them_meld, them_tricks),
            state.bid_amount,
            scoring_rules.team_value(bidding_team, us_tricks, them_tricks),
            needed,
        )

        return replace(
            self,
            state=Completed(
                bidder=state.bidder,
                bid_amount=state.bid_amount,
                trump=state.trump,
                us_meld=scoring_rules.normalize_meld(state.us_meld),
                them_meld=scoring_rules.normalize_meld(state.them_meld),
                us_tricks=us_tricks,
                them_tricks=them_tricks,
                us_total=scoring_rules.normalize_total(us_score),
                them_total=scoring_rules.normalize_total(them_score),
            ),
        )
