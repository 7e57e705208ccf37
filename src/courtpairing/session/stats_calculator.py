"""Per-player win/loss aggregation over a match history."""

# Court Pairing
# Copyright (C) 2025  Court Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from typing import Dict, List, Sequence

from courtpairing.models.enums import Winner
from courtpairing.models.player import Player, PlayerStats
from courtpairing.models.session import Match
from courtpairing.type_hints import PlayerId, Team
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


class StatsCalculator:
    """Folds match history into per-player statistics.

    For every match a listed player took part in:
    - games played increases by one
    - a win or a loss is counted for the player's side
    - the side's score is added to the player's points

    Players that appear in the history but not in the roster are ignored.
    """

    def __init__(self, players: Sequence[Player]):
        self._stats: Dict[PlayerId, PlayerStats] = {
            p.id: PlayerStats(id=p.id, name=p.name) for p in players
        }

    def _record_side(self, team: Team, won: bool, score: int) -> None:
        for player_id in team:
            stats = self._stats.get(player_id)
            if stats is None:
                continue
            stats.games_played += 1
            if won:
                stats.wins += 1
            else:
                stats.losses += 1
            stats.points += score

    def add_match(self, match: Match) -> None:
        a_won = match.winner is Winner.TEAM_A
        self._record_side(match.team_a, a_won, match.score_a)
        self._record_side(match.team_b, not a_won, match.score_b)

    def calculate(self, match_history: Sequence[Match]) -> List[PlayerStats]:
        """Statistics in roster order.

        Args:
            match_history: Matches in any order

        Returns:
            One PlayerStats per roster player
        """
        for match in match_history:
            self.add_match(match)
        logger.debug("Aggregated %d matches", len(match_history))
        return list(self._stats.values())


def calculate_player_stats(
    players: Sequence[Player], match_history: Sequence[Match]
) -> List[PlayerStats]:
    """Games, wins, losses and points per player, in roster order."""
    return StatsCalculator(players).calculate(match_history)
