"""Team store backends.

A team store is a collection of team documents shaped like
``{teamName, players, captain, viceCaptain, points}`` supporting insert,
read-all and a bulk increment of ``points`` across every team whose roster
contains a given player. Each call is atomic on its own; nothing spans calls.
"""

import copy
import json
import logging
import threading
from pathlib import Path
from typing import Any, Protocol

from .errors import PersistenceError
from .schemas import AppConfig
from .utils import load_json, save_json

logger = logging.getLogger('fantasy_cricket.store')


def roster_contains(document: dict[str, Any], player_name: str) -> bool:
    """True if any player on the team document is named player_name."""
    return any(player.get('name') == player_name for player in document.get('players', []))


class TeamStore(Protocol):
    """Interface the service and accumulator rely on."""

    def insert_team(self, document: dict[str, Any]) -> None: ...

    def find_teams(self) -> list[dict[str, Any]]: ...

    def increment_points(self, player_name: str, delta: int) -> int: ...


class InMemoryTeamStore:
    """Team store held in process memory."""

    def __init__(self, documents: list[dict[str, Any]] | None = None):
        self._documents = copy.deepcopy(documents or [])
        self._lock = threading.Lock()

    def insert_team(self, document: dict[str, Any]) -> None:
        with self._lock:
            self._documents.append(copy.deepcopy(document))

    def find_teams(self) -> list[dict[str, Any]]:
        with self._lock:
            return copy.deepcopy(self._documents)

    def increment_points(self, player_name: str, delta: int) -> int:
        with self._lock:
            matched = 0
            for document in self._documents:
                if roster_contains(document, player_name):
                    document['points'] = document.get('points', 0) + delta
                    matched += 1
            return matched


class JsonTeamStore:
    """
    Team store persisted to a JSON file as ``{"teams": [...]}``.

    The whole file is rewritten on every mutating call. A missing file is an
    empty store.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read(self) -> list[dict[str, Any]]:
        if not self.path.exists():
            return []
        try:
            data = load_json(self.path)
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
            raise PersistenceError(f'Failed to read team store {self.path}: {e}') from e

        if not isinstance(data, dict) or not isinstance(data.get('teams'), list):
            raise PersistenceError(f'Team store {self.path} is not a {{"teams": [...]}} document')
        return data['teams']

    def _write(self, documents: list[dict[str, Any]]) -> None:
        try:
            save_json(self.path, {'teams': documents})
        except (OSError, TypeError) as e:
            raise PersistenceError(f'Failed to write team store {self.path}: {e}') from e

    def insert_team(self, document: dict[str, Any]) -> None:
        with self._lock:
            documents = self._read()
            documents.append(document)
            self._write(documents)

    def find_teams(self) -> list[dict[str, Any]]:
        with self._lock:
            return self._read()

    def increment_points(self, player_name: str, delta: int) -> int:
        with self._lock:
            documents = self._read()
            matched = 0
            for document in documents:
                if roster_contains(document, player_name):
                    document['points'] = document.get('points', 0) + delta
                    matched += 1
            if matched:
                self._write(documents)
            return matched


def create_store(config: AppConfig) -> TeamStore:
    """Create the team store selected by configuration."""
    if config.store == 'memory':
        logger.info('Using in-memory team store')
        return InMemoryTeamStore()

    logger.info(f'Using JSON team store at {config.teams_path}')
    return JsonTeamStore(config.teams_path)
