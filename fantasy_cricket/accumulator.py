"""Apply a player points map to stored team totals."""

import logging

from .errors import PersistenceError
from .store import TeamStore

logger = logging.getLogger('fantasy_cricket.accumulator')


def update_team_points(store: TeamStore, player_points: dict[str, int]) -> int:
    """
    Increment the points of every team that rosters each scored player.

    Issues one bulk increment per player name. Increments commute, so the
    order across names does not matter. There is no rollback: if the store
    fails part way, increments for names already processed stay applied.

    Args:
        store: Team store to update
        player_points: Player name -> point delta

    Returns:
        Number of team documents updated, summed over all player names

    Raises:
        PersistenceError: If the store fails
    """
    updated = 0

    for player_name, delta in player_points.items():
        try:
            matched = store.increment_points(player_name, delta)
        except PersistenceError:
            logger.error(f'Failed updating teams for {player_name} after {updated} team updates')
            raise
        except OSError as e:
            logger.error(f'Failed updating teams for {player_name} after {updated} team updates')
            raise PersistenceError(f'Failed to apply points for {player_name}: {e}') from e

        logger.debug(f'{player_name}: {delta:+d} pts applied to {matched} teams')
        updated += matched

    return updated
