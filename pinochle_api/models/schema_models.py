from pydantic import BaseModel
from typing import List, Optional
from uuid import UUID

from pinochle_api.domain.value import GameState, Player, Suit


class HandSchema(BaseModel):
    """Stored form of a Hand; ``phase`` selects which fields are meaningful."""

    hand_id: UUID
    dealer: Player
    phase: str
    bidder: Optional[Player] = None
    bid_amount: Optional[int] = None
    trump: Optional[Suit] = None
    us_meld: Optional[int] = None
    them_meld: Optional[int] = None
    us_tricks: Optional[int] = None
    them_tricks: Optional[int] = None
    us_total: Optional[int] = None
    them_total: Optional[int] = None


class GameSchema(BaseModel):
    game_id: UUID
    game_state: GameState
    current_dealer: Player
    completed_hands: List[HandSchema] = []
    current_hand: Optional[HandSchema] = None
