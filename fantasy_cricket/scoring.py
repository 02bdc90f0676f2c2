"""Scoring functions for batting, bowling and fielding."""

from typing import Dict, Iterable, List, Tuple

from .constants import (
    BONUS_WICKET_POINTS,
    BOUNDARY_POINTS,
    CATCH_MILESTONES,
    CATCH_POINTS,
    DUCK_DISMISSAL,
    DUCK_PENALTY,
    DUCK_ROLES,
    MAIDEN_POINTS,
    RUN_MILESTONES,
    RUN_OUT_POINTS,
    RUN_POINTS,
    SIX_POINTS,
    STUMPING_POINTS,
    WICKET_MILESTONES,
    WICKET_POINTS,
)
from .models import PlayerScore
from .schemas import MatchPlayerStat, MatchRecord


def milestone_bonus(value: int, milestones: list[tuple[int, int]]) -> int:
    """Sum every milestone bonus whose threshold is reached (not tiered)."""
    return sum(bonus for threshold, bonus in milestones if value >= threshold)


def score_batting(stat: MatchPlayerStat) -> Tuple[int, Dict[str, int]]:
    """
    Score a batting innings.

    Scoring:
        - Runs: 1 point each
        - Boundaries: 1 point each
        - Sixes: 2 points each
        - 30 runs: +4, 50 runs: +8, 100 runs: +16 (all reached bonuses apply)
        - Duck: -2 (wicket keepers, batters and all rounders only)
    """
    points = 0
    breakdown = {}

    run_pts = RUN_POINTS * stat.runs
    if run_pts:
        breakdown['runs'] = run_pts
    points += run_pts

    boundary_pts = BOUNDARY_POINTS * stat.boundary_bonus
    if boundary_pts:
        breakdown['boundaries'] = boundary_pts
    points += boundary_pts

    six_pts = SIX_POINTS * stat.six_bonus
    if six_pts:
        breakdown['sixes'] = six_pts
    points += six_pts

    run_bonus = milestone_bonus(stat.runs, RUN_MILESTONES)
    if run_bonus:
        breakdown['run_milestones'] = run_bonus
    points += run_bonus

    # Bowler ducks are not penalized
    if stat.dismissal == DUCK_DISMISSAL and stat.role in DUCK_ROLES:
        breakdown['duck'] = DUCK_PENALTY
        points += DUCK_PENALTY

    return points, breakdown


def score_bowling(stat: MatchPlayerStat) -> Tuple[int, Dict[str, int]]:
    """
    Score a bowling performance.

    Scoring:
        - Wickets: 25 points each
        - Bonus wickets: 8 points each
        - 3 wickets: +4, 4 wickets: +8, 5 wickets: +16 (all reached bonuses apply)
        - Maiden over: 12 points
    """
    points = 0
    breakdown = {}

    wicket_pts = WICKET_POINTS * stat.wickets
    if wicket_pts:
        breakdown['wickets'] = wicket_pts
    points += wicket_pts

    bonus_pts = BONUS_WICKET_POINTS * stat.bonus
    if bonus_pts:
        breakdown['bonus_wickets'] = bonus_pts
    points += bonus_pts

    wicket_bonus = milestone_bonus(stat.wickets, WICKET_MILESTONES)
    if wicket_bonus:
        breakdown['wicket_milestones'] = wicket_bonus
    points += wicket_bonus

    if stat.maiden:
        breakdown['maiden'] = MAIDEN_POINTS
        points += MAIDEN_POINTS

    return points, breakdown


def score_fielding(stat: MatchPlayerStat) -> Tuple[int, Dict[str, int]]:
    """
    Score fielding.

    Scoring:
        - Catches: 8 points each, +4 for 3 or more
        - Stumpings: 12 points each
        - Run outs: 6 points each
    """
    points = 0
    breakdown = {}

    catch_pts = CATCH_POINTS * stat.catches + milestone_bonus(stat.catches, CATCH_MILESTONES)
    if catch_pts:
        breakdown['catches'] = catch_pts
    points += catch_pts

    stumping_pts = STUMPING_POINTS * stat.stumpings
    if stumping_pts:
        breakdown['stumpings'] = stumping_pts
    points += stumping_pts

    run_out_pts = RUN_OUT_POINTS * stat.run_outs
    if run_out_pts:
        breakdown['run_outs'] = run_out_pts
    points += run_out_pts

    return points, breakdown


def score_player(stat: MatchPlayerStat) -> PlayerScore:
    """Score one player's match appearance across all disciplines."""
    result = PlayerScore(name=stat.name, role=stat.role)

    for scorer in (score_batting, score_bowling, score_fielding):
        points, breakdown = scorer(stat)
        result.total_points += points
        result.breakdown.update(breakdown)

    return result


def calculate_player_scores(match_results: Iterable[MatchRecord]) -> List[PlayerScore]:
    """Score every player appearance in every match record, in input order."""
    return [score_player(stat) for record in match_results for stat in record.players]


def calculate_player_points(match_results: Iterable[MatchRecord]) -> Dict[str, int]:
    """
    Build the player points map for a scoring run.

    A player appearing in several records accumulates points from every
    appearance. The keys are exactly the player names found in the input.

    Args:
        match_results: Parsed match records

    Returns:
        Dict mapping player name to point delta
    """
    return aggregate_player_points(calculate_player_scores(match_results))


def aggregate_player_points(scores: Iterable[PlayerScore]) -> Dict[str, int]:
    """Sum scored appearances by player name."""
    player_points: Dict[str, int] = {}

    for score in scores:
        player_points[score.name] = player_points.get(score.name, 0) + score.total_points

    return player_points
