"""Phases of a single hand.

Each phase is its own frozen dataclass carrying exactly the data known at that
point; a hand's state is always one of them. ``phase`` is the wire name.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from pinochle_api.domain.value import Player, Suit


@dataclass(frozen=True)
class WaitingForBid:
    phase: ClassVar[str] = "WaitingForBid"


@dataclass(frozen=True)
class WaitingForTrump:
    phase: ClassVar[str] = "WaitingForTrump"

    bidder: Player
    bid_amount: int


@dataclass(frozen=True)
class NoMarriage:
    phase: ClassVar[str] = "NoMarriage"

    bidder: Player
    bid_amount: int


@dataclass(frozen=True)
class WaitingForMeld:
    phase: ClassVar[str] = "WaitingForMeld"

    bidder: Player
    bid_amount: int
    trump: Suit


@dataclass(frozen=True)
class WaitingForTricks:
    phase: ClassVar[str] = "WaitingForTricks"

    bidder: Player
    bid_amount: int
    trump: Suit
    us_meld: Optional[int] = None
    them_meld: Optional[int] = None


@dataclass(frozen=True)
class Completed:
    phase: ClassVar[str] = "Completed"

    bidder: Player
    bid_amount: int
    trump: Suit
    us_meld: Optional[int] = None
    them_meld: Optional[int] = None
    us_tricks: Optional[int] = None
    them_tricks: Optional[int] = None
    us_total: Optional[int] = None
    them_total: Optional[int] = None


HandState = Union[
    WaitingForBid,
    WaitingForTrump,
    NoMarriage,
    WaitingForMeld,
    WaitingForTricks,
    Completed,
]

HAND_STATES = {
    state.phase: state
    for state in (
        WaitingForBid,
        WaitingForTrump,
        NoMarriage,
        WaitingForMeld,
        WaitingForTricks,
        Completed,
    )
}
