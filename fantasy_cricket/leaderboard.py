"""Winner resolution and standings."""

from typing import Any

from .models import StandingsEntry


def calculate_winning_teams(teams: list[dict[str, Any]]) -> list[str]:
    """
    Return the names of the teams with the highest points, in scan order.

    The running maximum starts at 0, so when every team is below zero no
    team is reported as a winner. Ties are all returned.

    Args:
        teams: Team documents with 'teamName' and 'points'

    Returns:
        Winning team names (empty if there are no teams)
    """
    max_points = 0
    for team in teams:
        if team['points'] > max_points:
            max_points = team['points']

    return [team['teamName'] for team in teams if team['points'] == max_points]


def build_standings(teams: list[dict[str, Any]]) -> list[StandingsEntry]:
    """Rank teams by points, highest first. Tied teams share a rank."""
    ordered = sorted(teams, key=lambda t: t['points'], reverse=True)

    standings = []
    for position, team in enumerate(ordered, 1):
        if standings and standings[-1].points == team['points']:
            rank = standings[-1].rank
        else:
            rank = position
        standings.append(StandingsEntry(rank=rank, team_name=team['teamName'], points=team['points']))

    return standings
