from pydantic import BaseModel
from typing import List, Optional
from uuid import UUID

from pinochle_api.domain.value import GameState, Player, Suit, Team


class HandResponse(BaseModel):
    id: UUID
    state: str
    dealer: Player
    bidder: Optional[Player] = None
    bid_amount: Optional[int] = None
    trump: Optional[Suit] = None
    us_total: int = 0
    them_total: int = 0
    us_meld: Optional[int] = None
    them_meld: Optional[int] = None
    us_tricks: Optional[int] = None
    them_tricks: Optional[int] = None
    required_tricks: Optional[int] = None


class CompletedHandsResponse(BaseModel):
    hands: List[HandResponse]


class RunningTotalResponse(BaseModel):
    us_total: int
    them_total: int


class GameResponse(BaseModel):
    game_id: UUID
    game_state: GameState
    dealer: Player
    hand_state: Optional[str] = None
    bidder: Optional[Player] = None
    bid_amount: Optional[int] = None
    trump: Optional[Suit] = None
    us_meld: Optional[int] = None
    them_meld: Optional[int] = None
    us_tricks: Optional[int] = None
    them_tricks: Optional[int] = None
    us_score: int  # running total
    them_score: int  # running total
    us_hand_score: Optional[int] = None
    them_hand_score: Optional[int] = None
    required_tricks: Optional[int] = None
    is_complete: bool = False
    winner: Optional[Team] = None


class ErrorDetailModel(BaseModel):
    code: int
    message: str


class ErrorResponse(BaseModel):
    error: ErrorDetailModel
