"""Fantasy cricket service: team submission, result processing and winners."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError

from .accumulator import update_team_points
from .errors import IngestionError, ValidationError
from .ingestion import load_match_results, parse_match_results
from .leaderboard import build_standings, calculate_winning_teams
from .models import StandingsEntry
from .schemas import TeamRecord, TeamSubmission
from .scoring import aggregate_player_points, calculate_player_scores
from .store import TeamStore
from .validators import ensure_valid_team, validate_all_scores

logger = logging.getLogger('fantasy_cricket.service')

INVALID_PAYLOAD = 'Invalid team payload'


@dataclass
class ProcessResult:
    """Outcome of a scoring run."""
    players_scored: int
    teams_updated: int
    warnings: list[str] = field(default_factory=list)


def format_pydantic_errors(error: PydanticValidationError) -> list[str]:
    """Flatten pydantic errors into 'field.path: message' strings."""
    return [
        f'{".".join(str(part) for part in err["loc"])}: {err["msg"]}'
        for err in error.errors()
    ]


class FantasyService:
    """
    Entry points for the fantasy cricket scorer.

    The team store is created once by the caller and injected here, so tests
    can pass an in-memory store and the server can share one store across
    requests.
    """

    def __init__(self, store: TeamStore, match_path: Optional[Path | str] = None):
        """
        Initialize service.

        Args:
            store: Team store shared by all operations
            match_path: Match results file used when no results are supplied
        """
        self.store = store
        self.match_path = Path(match_path) if match_path else None

    def add_team(self, payload: dict[str, Any]) -> TeamRecord:
        """
        Validate and persist a submitted team with zero points.

        Raises:
            ValidationError: If the payload is malformed or the composition is invalid
            PersistenceError: If the store write fails
        """
        try:
            submission = TeamSubmission.model_validate(payload)
        except PydanticValidationError as e:
            raise ValidationError(INVALID_PAYLOAD, details=format_pydantic_errors(e)) from e

        ensure_valid_team(submission)

        record = TeamRecord.from_submission(submission)
        self.store.insert_team(record.to_document())
        logger.info(f'Added team {record.team_name} with {len(record.players)} players')
        return record

    def process_result(self, match_data: Any = None) -> ProcessResult:
        """
        Score a match and apply the points to every stored team.

        Args:
            match_data: Raw match results; read from match_path when None

        Raises:
            IngestionError: If match results are missing or malformed
            PersistenceError: If applying points fails (earlier increments stay applied)
        """
        if match_data is None:
            if self.match_path is None:
                raise IngestionError('No match results supplied and no match file configured')
            match_results = load_match_results(self.match_path)
        else:
            match_results = parse_match_results(match_data)

        scores = calculate_player_scores(match_results)
        warnings = validate_all_scores(scores)
        for warning in warnings:
            logger.warning(warning)

        player_points = aggregate_player_points(scores)
        teams_updated = update_team_points(self.store, player_points)

        logger.info(
            f'Processed {len(match_results)} match records: '
            f'{len(player_points)} players scored, {teams_updated} team updates'
        )
        return ProcessResult(
            players_scored=len(player_points),
            teams_updated=teams_updated,
            warnings=warnings,
        )

    def team_result(self) -> list[str]:
        """Return the names of the winning teams."""
        return calculate_winning_teams(self.store.find_teams())

    def standings(self) -> list[StandingsEntry]:
        """Return every team ranked by points."""
        return build_standings(self.store.find_teams())
