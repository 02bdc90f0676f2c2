"""Unit tests for validation functions."""

import pytest

from fantasy_cricket.constants import PlayerRole
from fantasy_cricket.errors import ValidationError
from fantasy_cricket.models import PlayerScore
from fantasy_cricket.schemas import PlayerRef, TeamSubmission
from fantasy_cricket.validators import (
    ensure_valid_team,
    validate_all_scores,
    validate_player_score,
    validate_team_composition,
)

BALANCED_ROLES = ['WK', 'BAT', 'BAT', 'BAT', 'BAT', 'AR', 'AR', 'BWL', 'BWL', 'BWL', 'BWL']


def make_players(roles: list[str]) -> list[PlayerRef]:
    return [PlayerRef(name=f'Player {i}', type=role) for i, role in enumerate(roles, 1)]


def make_submission(roles: list[str], **overrides) -> TeamSubmission:
    payload = {
        'teamName': 'Team Test',
        'players': [{'name': f'Player {i}', 'type': role} for i, role in enumerate(roles, 1)],
        'captain': 'Player 1',
        'viceCaptain': 'Player 2',
    }
    payload.update(overrides)
    return TeamSubmission.model_validate(payload)


class TestTeamComposition:
    """Tests for team composition rules."""

    def test_valid_team(self):
        """Test that a balanced 11-player team passes."""
        assert validate_team_composition(make_players(BALANCED_ROLES)) == []

    def test_minimum_roles_with_skewed_distribution(self):
        """Test one of each role plus seven batters still passes."""
        roles = ['WK', 'AR', 'BWL'] + ['BAT'] * 8
        assert validate_team_composition(make_players(roles)) == []

    def test_too_few_players(self):
        """Test a 10-player team fails."""
        errors = validate_team_composition(make_players(BALANCED_ROLES[:10]))
        assert errors == ['Team has 10 players (expected 11)']

    def test_too_many_players(self):
        """Test a 12-player team fails even with every role present."""
        errors = validate_team_composition(make_players(BALANCED_ROLES + ['BAT']))
        assert errors == ['Team has 12 players (expected 11)']

    def test_missing_wicket_keeper(self):
        """Test 11 players with no wicket keeper fails."""
        roles = ['BAT'] * 5 + ['AR'] * 2 + ['BWL'] * 4
        errors = validate_team_composition(make_players(roles))
        assert errors == ['Team has 0 WK players (min 1)']

    @pytest.mark.parametrize('missing', ['WK', 'BAT', 'AR', 'BWL'])
    def test_each_role_required(self, missing):
        """Test every role must appear at least once."""
        filler = next(r for r in ['BAT', 'BWL'] if r != missing)
        roles = [filler if r == missing else r for r in BALANCED_ROLES]
        errors = validate_team_composition(make_players(roles))
        assert len(errors) == 1
        assert f'0 {missing} players' in errors[0]

    def test_empty_team(self):
        """Test an empty roster reports the count and every missing role."""
        errors = validate_team_composition([])
        assert len(errors) == 5

    def test_duplicate_names_allowed(self):
        """Test duplicate player names are not checked."""
        players = [PlayerRef(name='Same Name', type=role) for role in BALANCED_ROLES]
        assert validate_team_composition(players) == []


class TestEnsureValidTeam:
    """Tests for the raising wrapper used before persistence."""

    def test_valid_team_passes(self):
        ensure_valid_team(make_submission(BALANCED_ROLES))

    def test_invalid_team_raises(self):
        """Test composition failures raise with details attached."""
        with pytest.raises(ValidationError) as exc_info:
            ensure_valid_team(make_submission(BALANCED_ROLES[:9]))
        assert exc_info.value.message == 'Invalid team composition'
        assert exc_info.value.details == ['Team has 9 players (expected 11)']

    def test_captain_not_checked_against_roster(self):
        """Test captain and vice captain outside the roster are accepted."""
        submission = make_submission(BALANCED_ROLES, captain='Someone Else', viceCaptain=None)
        ensure_valid_team(submission)


class TestPlayerScoreValidation:
    """Tests for score sanity warnings."""

    def test_consistent_score(self):
        score = PlayerScore(
            name='A', role=PlayerRole.BATTER, total_points=62,
            breakdown={'runs': 50, 'run_milestones': 12},
        )
        assert validate_player_score(score) == []

    def test_breakdown_mismatch(self):
        """Test a breakdown not summing to the total is flagged."""
        score = PlayerScore(
            name='A', role=PlayerRole.BATTER, total_points=60, breakdown={'runs': 50},
        )
        warnings = validate_player_score(score)
        assert warnings == ['A breakdown sum (50) != total (60)']

    def test_unusually_high_score(self):
        score = PlayerScore(
            name='A', role=PlayerRole.BOWLER, total_points=500, breakdown={'wickets': 500},
        )
        warnings = validate_player_score(score)
        assert len(warnings) == 1
        assert 'unusually high' in warnings[0]

    def test_validate_all_scores(self):
        """Test warnings are collected across scores."""
        scores = [
            PlayerScore(name='A', role=PlayerRole.BATTER, total_points=1, breakdown={}),
            PlayerScore(name='B', role=PlayerRole.BATTER, total_points=2, breakdown={'runs': 2}),
        ]
        assert validate_all_scores(scores) == ['A breakdown sum (0) != total (1)']
