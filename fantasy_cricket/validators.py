"""Validation functions for team submissions and scoring results."""

from collections import Counter
from typing import Iterable

from .constants import MAX_PLAUSIBLE_SCORE, MIN_PLAUSIBLE_SCORE, MIN_ROLE_COUNTS, TEAM_SIZE
from .errors import ValidationError
from .models import PlayerScore
from .schemas import PlayerRef, TeamSubmission

INVALID_COMPOSITION = 'Invalid team composition'


def validate_team_composition(players: list[PlayerRef]) -> list[str]:
    """
    Validate that a fantasy team's roster complies with composition rules.

    Checks:
    - Exactly 11 players
    - At least one player of each role

    Captain/vice-captain membership and duplicate names are not checked.

    Args:
        players: Roster of the submitted team

    Returns:
        List of validation error messages (empty if valid)
    """
    errors = []

    if len(players) != TEAM_SIZE:
        errors.append(f'Team has {len(players)} players (expected {TEAM_SIZE})')

    role_counts = Counter(player.role for player in players)
    for role, minimum in MIN_ROLE_COUNTS.items():
        count = role_counts.get(role, 0)
        if count < minimum:
            errors.append(f'Team has {count} {role.value} players (min {minimum})')

    return errors


def ensure_valid_team(submission: TeamSubmission) -> None:
    """Raise ValidationError if the submitted team breaks composition rules."""
    errors = validate_team_composition(submission.players)
    if errors:
        raise ValidationError(INVALID_COMPOSITION, details=errors)


def validate_player_score(score: PlayerScore) -> list[str]:
    """
    Check that a player's score is reasonable and internally consistent.

    Sanity checks:
    - Total points in a plausible range
    - Breakdown totals match final score

    Args:
        score: PlayerScore object to validate

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    if score.total_points > MAX_PLAUSIBLE_SCORE:
        warnings.append(
            f'{score.name} scored {score.total_points} pts (unusually high - check match data)'
        )
    elif score.total_points < MIN_PLAUSIBLE_SCORE:
        warnings.append(
            f'{score.name} scored {score.total_points} pts (unusually low - check match data)'
        )

    breakdown_sum = sum(score.breakdown.values())
    if breakdown_sum != score.total_points:
        warnings.append(
            f'{score.name} breakdown sum ({breakdown_sum}) != total ({score.total_points})'
        )

    return warnings


def validate_all_scores(scores: Iterable[PlayerScore]) -> list[str]:
    """Collect sanity warnings for every scored appearance in a run."""
    warnings: list[str] = []
    for score in scores:
        warnings.extend(validate_player_score(score))
    return warnings
