"""Constants and scoring rules for the fantasy cricket scorer."""

from enum import Enum


class PlayerRole(str, Enum):
    """Player role, carried on the wire as a short code."""

    WICKET_KEEPER = 'WK'
    BATTER = 'BAT'
    ALL_ROUNDER = 'AR'
    BOWLER = 'BWL'


# Long-form role names accepted on input
ROLE_ALIASES = {
    'WicketKeeper': PlayerRole.WICKET_KEEPER,
    'Batter': PlayerRole.BATTER,
    'AllRounder': PlayerRole.ALL_ROUNDER,
    'Bowler': PlayerRole.BOWLER,
}

TEAM_SIZE = 11

# Minimum players per role in a submitted team
MIN_ROLE_COUNTS = {
    PlayerRole.WICKET_KEEPER: 1,
    PlayerRole.BATTER: 1,
    PlayerRole.ALL_ROUNDER: 1,
    PlayerRole.BOWLER: 1,
}

# Batting
RUN_POINTS = 1
BOUNDARY_POINTS = 1
SIX_POINTS = 2
# (threshold, bonus) - every threshold reached is applied
RUN_MILESTONES = [(30, 4), (50, 8), (100, 16)]
DUCK_PENALTY = -2
DUCK_DISMISSAL = 'duck'
DUCK_ROLES = frozenset({PlayerRole.WICKET_KEEPER, PlayerRole.BATTER, PlayerRole.ALL_ROUNDER})

# Bowling
WICKET_POINTS = 25
BONUS_WICKET_POINTS = 8
WICKET_MILESTONES = [(3, 4), (4, 8), (5, 16)]
MAIDEN_POINTS = 12

# Fielding
CATCH_POINTS = 8
CATCH_MILESTONES = [(3, 4)]
STUMPING_POINTS = 12
RUN_OUT_POINTS = 6

# Plausible range for a single player's match score (sanity warnings only)
MIN_PLAUSIBLE_SCORE = -10
MAX_PLAUSIBLE_SCORE = 400
