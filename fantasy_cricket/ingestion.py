"""Match result ingestion.

Match results arrive as a JSON list of match records, either read from a
file or passed in directly (e.g. from a request body). Ingestion completes,
including validation of every record, before any scoring starts.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from .errors import IngestionError
from .schemas import MatchRecord
from .utils import load_json

logger = logging.getLogger('fantasy_cricket.ingestion')


def parse_match_results(data: Any) -> list[MatchRecord]:
    """
    Validate raw match results.

    Accepts a list of match records, a single match record, or a
    ``{"matches": [...]}`` wrapper.

    Raises:
        IngestionError: If the data is not shaped like match results
    """
    if isinstance(data, dict):
        data = data['matches'] if 'matches' in data else [data]

    if not isinstance(data, list):
        raise IngestionError(f'Match results must be a list, got {type(data).__name__}')

    records = []
    for index, raw in enumerate(data):
        try:
            records.append(MatchRecord.model_validate(raw))
        except PydanticValidationError as e:
            raise IngestionError(f'Invalid match record at index {index}:\n{e}') from e

    return records


def load_match_results(path: Path | str) -> list[MatchRecord]:
    """
    Read and validate match results from a JSON file.

    Args:
        path: Path to the match results file (e.g. data/match.json)

    Raises:
        IngestionError: If the file is missing, unreadable or malformed
    """
    path = Path(path)
    try:
        data = load_json(path)
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise IngestionError(f'Could not read match results from {path}: {e}') from e

    records = parse_match_results(data)
    logger.info(f'Loaded {len(records)} match records from {path}')
    return records
