import pytest

from pinochle_api.domain import scoring_rules
from pinochle_api.domain.errors import InvalidTricksError
from pinochle_api.domain.value import Team


@pytest.mark.parametrize("amount", [50, 55, 59, 65, 95, 100, 110, 200])
def test_valid_bids(amount):
    assert scoring_rules.validate_bid_increment(amount)


@pytest.mark.parametrize("amount", [0, 49, 61, 63, 77, 105, 121, 151])
def test_invalid_bids(amount):
    assert not scoring_rules.validate_bid_increment(amount)


def test_bid_increment_matches_rule_for_every_amount():
    for amount in range(0, 300):
        expected = amount >= 50 and (
            amount < 60 or (amount < 100 and amount % 5 == 0) or amount % 10 == 0
        )
        assert scoring_rules.validate_bid_increment(amount) == expected


@pytest.mark.parametrize("meld,expected", [(0, None), (19, None), (20, 20), (45, 45), (None, None)])
def test_normalize_meld(meld, expected):
    assert scoring_rules.normalize_meld(meld) == expected
    assert scoring_rules.normalize_meld(scoring_rules.normalize_meld(meld)) == expected


def test_infer_tricks_fills_single_zero():
    assert scoring_rules.infer_tricks(0, 20) == (30, 20)
    assert scoring_rules.infer_tricks(35, 0) == (35, 15)
    assert scoring_rules.infer_tricks(26, 24) == (26, 24)


@pytest.mark.parametrize("us,them", [(0, 0), (30, 30), (10, 10), (60, 0), (0, 51)])
def test_infer_tricks_rejects_bad_pairs(us, them):
    with pytest.raises(InvalidTricksError):
        scoring_rules.infer_tricks(us, them)


def test_required_tricks():
    assert scoring_rules.required_tricks(60, 24) == 36
    assert scoring_rules.required_tricks(51, 32) == 20
    assert scoring_rules.required_tricks(51, None) == 51


def test_team_score():
    assert scoring_rules.team_score(24, 19) == 0
    assert scoring_rules.team_score(None, 30) == 30
    assert scoring_rules.team_score(24, 30) == 54


def test_contract_penalty_only_hits_bidders():
    assert scoring_rules.apply_contract_penalty(Team.us, 54, 52, 60, 30, 36) == (-60, 52)
    assert scoring_rules.apply_contract_penalty(Team.them, 54, 52, 60, 20, 36) == (54, -60)
    assert scoring_rules.apply_contract_penalty(Team.us, 54, 52, 60, 36, 36) == (54, 52)


def test_meld_forfeit_keeps_absent_meld_absent():
    assert scoring_rules.meld_forfeit_scores(Team.us, 51, None, 32) == (-51, 32)
    assert scoring_rules.meld_forfeit_scores(Team.them, 51, None, None) == (None, -51)
