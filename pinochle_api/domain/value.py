from enum import Enum
from uuid import UUID

from uuid6 import uuid7


class Team(str, Enum):
    us = "Us"  # North and South
    them = "Them"  # East and West


class Suit(str, Enum):
    spades = "Spades"
    hearts = "Hearts"
    clubs = "Clubs"
    diamonds = "Diamonds"
    # Declared when the bidder holds no marriage; the hand is lost at meld.
    no_marriage = "NoMarriage"


class Player(str, Enum):
    north = "North"
    east = "East"
    south = "South"
    west = "West"

    @property
    def team(self) -> Team:
        """Return the partnership this seat belongs to."""
        if self in (Player.north, Player.south):
            return Team.us
        return Team.them

    def next_clockwise(self) -> "Player":
        """Return the seat to the left, which deals the following hand."""
        return _CLOCKWISE[self]


_CLOCKWISE = {
    Player.north: Player.east,
    Player.east: Player.south,
    Player.south: Player.west,
    Player.west: Player.north,
}


class GameState(str, Enum):
    waiting_to_start = "WaitingToStart"
    in_progress = "InProgress"
    completed = "Completed"


def new_game_id() -> UUID:
    return uuid7()


def new_hand_id() -> UUID:
    return uuid7()
