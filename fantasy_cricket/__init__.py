from .constants import PlayerRole
from .errors import FantasyError, IngestionError, PersistenceError, ValidationError
from .models import PlayerScore, StandingsEntry
from .scoring import (
    score_batting,
    score_bowling,
    score_fielding,
    score_player,
    calculate_player_scores,
    calculate_player_points,
)
from .validators import validate_team_composition, ensure_valid_team
from .accumulator import update_team_points
from .leaderboard import calculate_winning_teams, build_standings
from .ingestion import load_match_results, parse_match_results
from .store import InMemoryTeamStore, JsonTeamStore, create_store
from .service import FantasyService, ProcessResult

__all__ = [
    # Models
    'PlayerRole',
    'PlayerScore',
    'StandingsEntry',
    # Errors
    'FantasyError',
    'IngestionError',
    'PersistenceError',
    'ValidationError',
    # Scoring functions
    'score_batting',
    'score_bowling',
    'score_fielding',
    'score_player',
    'calculate_player_scores',
    'calculate_player_points',
    # Team validation
    'validate_team_composition',
    'ensure_valid_team',
    # Accumulation and results
    'update_team_points',
    'calculate_winning_teams',
    'build_standings',
    # Match results
    'load_match_results',
    'parse_match_results',
    # Storage
    'InMemoryTeamStore',
    'JsonTeamStore',
    'create_store',
    # Service
    'FantasyService',
    'ProcessResult',
]
