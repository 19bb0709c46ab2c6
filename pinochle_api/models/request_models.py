from pydantic import BaseModel, Field
from uuid import UUID

from pinochle_api.domain.value import Player, Suit


class StartNewGameRequest(BaseModel):
    dealer: Player


class StartNewHandRequest(BaseModel):
    game_id: UUID


class RecordBidRequest(BaseModel):
    player: Player
    bid: int = Field(ge=0)


class DeclareTrumpRequest(BaseModel):
    trump: Suit


class RecordMeldRequest(BaseModel):
    us_meld: int = Field(ge=0)
    them_meld: int = Field(ge=0)


class RecordTricksRequest(BaseModel):
    # 0 means "not entered"; it is inferred from the other team's count.
    us_tricks: int = Field(ge=0)
    them_tricks: int = Field(ge=0)
