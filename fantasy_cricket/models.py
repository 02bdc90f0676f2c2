"""Data models for the fantasy cricket scorer."""

from dataclasses import dataclass, field
from typing import Dict

from .constants import PlayerRole


@dataclass
class PlayerScore:
    """Container for a player's score breakdown in one match appearance."""
    name: str
    role: PlayerRole
    total_points: int = 0
    breakdown: Dict[str, int] = field(default_factory=dict)


@dataclass
class StandingsEntry:
    """One row of the team leaderboard."""
    rank: int
    team_name: str
    points: int
