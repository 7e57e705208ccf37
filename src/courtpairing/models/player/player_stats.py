"""PlayerStats data class."""

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

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class PlayerStats:
    """Aggregated results of one player over a match history.

    Attributes
    ----------
    id : str
        Player identifier.
    name : str
        Display name.
    games_played : int
        Matches the player appeared in.
    wins : int
        Matches won.
    losses : int
        Matches lost.
    points : int
        Sum of the player's team score over all matches.
    """

    id: str
    name: str
    games_played: int = 0
    wins: int = 0
    losses: int = 0
    points: int = 0

    @property
    def win_rate(self) -> float:
        return self.wins / self.games_played if self.games_played else 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize stats to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "games_played": self.games_played,
            "wins": self.wins,
            "losses": self.losses,
            "points": self.points,
        }
