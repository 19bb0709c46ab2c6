from dataclasses import asdict, fields
from typing import List

from pinochle_api.domain.game import Game
from pinochle_api.domain.hand import Hand
from pinochle_api.domain.hand_state import HAND_STATES
from pinochle_api.models.response_models import (
    CompletedHandsResponse,
    GameResponse,
    HandResponse,
    RunningTotalResponse,
)
from pinochle_api.models.schema_models import GameSchema, HandSchema


class DataConverter:
    """This class is used to convert games between domain values, stored schemas and responses."""

    def convert_hand_to_handschema(self, hand: Hand) -> HandSchema:
        """Convert a Hand to the HandSchema kept in storage

        Args:
            hand (Hand): Hand in any phase

        Returns:
            HandSchema: Phase name plus the fields that phase carries
        """
        return HandSchema(
            hand_id=hand.id,
            dealer=hand.dealer,
            phase=hand.phase,
            **asdict(hand.state),
        )

    def convert_handschema_to_hand(self, hand_data: HandSchema) -> Hand:
        """Convert a stored HandSchema back to a Hand

        Args:
            hand_data (HandSchema): Stored hand

        Raises:
            ValueError: The phase name is unknown

        Returns:
            Hand: Hand rebuilt with its original id, dealer and phase payload
        """
        state_class = HAND_STATES.get(hand_data.phase)
        if state_class is None:
            raise ValueError(f"Unknown hand phase: {hand_data.phase}")
        state = state_class(
            **{f.name: getattr(hand_data, f.name) for f in fields(state_class)}
        )
        return Hand(dealer=hand_data.dealer, state=state, id=hand_data.hand_id)

    def convert_game_to_gameschema(self, game: Game) -> GameSchema:
        return GameSchema(
            game_id=game.id,
            game_state=game.state,
            current_dealer=game.current_dealer,
            completed_hands=[
                self.convert_hand_to_handschema(hand) for hand in game.completed_hands
            ],
            current_hand=(
                self.convert_hand_to_handschema(game.current_hand)
                if game.current_hand is not None
                else None
            ),
        )

    def convert_gameschema_to_game(self, game_data: GameSchema) -> Game:
        return Game(
            current_dealer=game_data.current_dealer,
            state=game_data.game_state,
            completed_hands=tuple(
                self.convert_handschema_to_hand(hand) for hand in game_data.completed_hands
            ),
            current_hand=(
                self.convert_handschema_to_hand(game_data.current_hand)
                if game_data.current_hand is not None
                else None
            ),
            id=game_data.game_id,
        )

    def convert_hand_to_handresponse(self, hand: Hand) -> HandResponse:
        return HandResponse(
            id=hand.id,
            state=hand.phase,
            dealer=hand.dealer,
            bidder=hand.bidder,
            bid_amount=hand.bid_amount,
            trump=hand.trump,
            us_total=hand.us_total,
            them_total=hand.them_total,
            us_meld=hand.us_meld,
            them_meld=hand.them_meld,
            us_tricks=hand.us_tricks,
            them_tricks=hand.them_tricks,
            required_tricks=hand.tricks_to_save,
        )

    def convert_game_to_gameresponse(self, game: Game) -> GameResponse:
        """Convert a Game to the GameResponse sent to the client

        Args:
            game (Game): The latest game value

        Returns:
            GameResponse: Running totals plus a flat view of the current hand
        """
        us_score, them_score = game.running_totals()
        hand = game.current_hand
        response = GameResponse(
            game_id=game.id,
            game_state=game.state,
            dealer=game.current_dealer,
            us_score=us_score,
            them_score=them_score,
            is_complete=game.is_game_complete(),
            winner=game.winner(),
        )
        if hand is None:
            return response

        return response.model_copy(
            update={
                "hand_state": hand.phase,
                "bidder": hand.bidder,
                "bid_amount": hand.bid_amount,
                "trump": hand.trump,
                "us_meld": hand.us_meld,
                "them_meld": hand.them_meld,
                "us_tricks": hand.us_tricks,
                "them_tricks": hand.them_tricks,
                "us_hand_score": hand.us_total,
                "them_hand_score": hand.them_total,
                "required_tricks": hand.tricks_to_save,
            }
        )

    def convert_hands_to_completedhandsresponse(self, hands: List[Hand]) -> CompletedHandsResponse:
        return CompletedHandsResponse(
            hands=[self.convert_hand_to_handresponse(hand) for hand in hands]
        )

    def convert_totals_to_runningtotalresponse(self, us_total: int, them_total: int) -> RunningTotalResponse:
        return RunningTotalResponse(us_total=us_total, them_total=them_total)
