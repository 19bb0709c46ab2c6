"""Bidding and scoring rules that are independent from HTTP and DB.

Rule of thumb:
- OK: arithmetic, validation, pure transformations.
- Not OK: touching repositories, FastAPI, logging, datetime.now(), etc.

Absent meld/total values are represented as ``None``.
"""

from typing import Optional, Tuple, TypeVar

from pinochle_api.domain.errors import InvalidTricksError
from pinochle_api.domain.value import Team

MINIMUM_BID = 50
MINIMUM_MELD = 20
MINIMUM_TRICKS = 20
TOTAL_TRICKS = 50
WINNING_SCORE = 500

T = TypeVar("T")


# ==============================================================================
# ==== Bidding =================================================================
# ==============================================================================


def validate_bid_increment(amount: int) -> bool:
    """Return True if ``amount`` is a legal bid.

    50-59 go up by ones, 60-99 by fives, 100 and above by tens.
    """
    if amount < MINIMUM_BID:
        return False
    if amount < 60:
        return True
    if amount < 100:
        return amount % 5 == 0
    return amount % 10 == 0


# ==============================================================================
# ==== Meld ====================================================================
# ==============================================================================


def normalize_meld(meld: Optional[int]) -> Optional[int]:
    """Meld below 20 does not count and becomes absent."""
    if meld is None or meld < MINIMUM_MELD:
        return None
    return meld


def meld_forfeit_scores(
    bidding_team: Team,
    bid_amount: int,
    us_meld: Optional[int],
    them_meld: Optional[int],
) -> Tuple[Optional[int], Optional[int]]:
    """Scores when the hand ends at meld.

    The bidders lose their bid; the other team keeps its (normalized) meld,
    which stays absent if it did not count.
    """
    if bidding_team == Team.us:
        return -bid_amount, them_meld
    return us_meld, -bid_amount


# ==============================================================================
# ==== Tricks ==================================================================
# ==============================================================================


def infer_tricks(us: int, them: int) -> Tuple[int, int]:
    """Fill in a single zero as ``50 - other`` and check the pair sums to 50.

    A literal 0 means "not entered"; both zero is rejected.

    Raises:
        InvalidTricksError: both zero, a negative count, or a bad total.
    """
    if us == 0 and them == 0:
        raise InvalidTricksError(us, them)

    if us == 0:
        us = TOTAL_TRICKS - them
    if them == 0:
        them = TOTAL_TRICKS - us

    if us + them != TOTAL_TRICKS or us < 0 or them < 0:
        raise InvalidTricksError(us, them)
    return us, them


def required_tricks(bid_amount: int, bidding_team_meld: Optional[int]) -> int:
    """Trick points the bidders need: the bid net of meld, but never below 20."""
    return max(bid_amount - (bidding_team_meld or 0), MINIMUM_TRICKS)


def team_score(meld: Optional[int], tricks: int) -> int:
    """Score for one team before the contract check.

    A team that takes fewer than 20 trick points scores nothing, meld included.
    """
    if tricks < MINIMUM_TRICKS:
        return 0
    if meld is None or meld < MINIMUM_MELD:
        return tricks
    return meld + tricks


def apply_contract_penalty(
    bidding_team: Team,
    us_score: int,
    them_score: int,
    bid_amount: int,
    bidding_tricks: int,
    needed_tricks: int,
) -> Tuple[int, int]:
    """Set the bidders back by their bid if they fell short of ``needed_tricks``."""
    if bidding_tricks >= needed_tricks:
        return us_score, them_score
    if bidding_team == Team.us:
        return -bid_amount, them_score
    return us_score, -bid_amount


def normalize_total(total: int) -> Optional[int]:
    return None if total == 0 else total


# ==============================================================================
# ==== Common ==================================================================
# ==============================================================================


def team_value(team: Team, us_value: T, them_value: T) -> T:
    """Pick the value belonging to ``team`` from an (us, them) pair."""
    return us_value if team == Team.us else them_value
