"""Match data class."""

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
from typing import Any, Dict, FrozenSet

from courtpairing.models.enums import Winner
from courtpairing.type_hints import Team


@dataclass(frozen=True)
class Match:
    """A finished, scored doubles match.

    Match history is always handed to the core newest-first.

    Attributes
    ----------
    id : str
        Match identifier.
    court_id : int
        Court the match was played on.
    team_a : tuple of str
        The two player ids of side A.
    team_b : tuple of str
        The two player ids of side B.
    score_a : int
        Points scored by side A.
    score_b : int
        Points scored by side B.
    winner : Winner
        Winning side.
    started_at : int
        Epoch milliseconds when play began.
    finished_at : int
        Epoch milliseconds when the score was entered.
    """

    id: str
    court_id: int
    team_a: Team
    team_b: Team
    score_a: int
    score_b: int
    winner: Winner
    started_at: int = 0
    finished_at: int = 0

    @property
    def participants(self) -> FrozenSet[str]:
        """The four player ids, order-independent."""
        return frozenset(self.team_a + self.team_b)

    @property
    def winners(self) -> Team:
        return self.team_a if self.winner is Winner.TEAM_A else self.team_b

    @property
    def losers(self) -> Team:
        return self.team_b if self.winner is Winner.TEAM_A else self.team_a

    def involves(self, player_id: str) -> bool:
        return player_id in self.team_a or player_id in self.team_b

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self.id,
            "court_id": self.court_id,
            "team_a": list(self.team_a),
            "team_b": list(self.team_b),
            "score_a": self.score_a,
            "score_b": self.score_b,
            "winner": self.winner.value,
            "started_at": self.started_at,
            "finished_at": self.finished_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary.

        A missing ``winner`` is derived from the scores.
        """
        score_a = int(data["score_a"])
        score_b = int(data["score_b"])
        winner = data.get("winner")
        if winner is None:
            winner = Winner.TEAM_A if score_a > score_b else Winner.TEAM_B
        return cls(
            id=str(data["id"]),
            court_id=int(data["court_id"]),
            team_a=tuple(data["team_a"]),
            team_b=tuple(data["team_b"]),
            score_a=score_a,
            score_b=score_b,
            winner=Winner(winner),
            started_at=int(data.get("started_at", 0)),
            finished_at=int(data.get("finished_at", 0)),
        )
