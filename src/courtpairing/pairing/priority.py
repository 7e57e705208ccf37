"""Play priority: who deserves the next game.

Lower scores mean higher priority. Time is always injected so scoring is
reproducible.
"""

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

from typing import Iterable, List, Optional

from courtpairing.constants import (
    GAMES_WEIGHT,
    MIN_STAY_MINUTES,
    MS_PER_MINUTE,
    UNPLAYED_PRIORITY,
)
from courtpairing.models.player import Player
from courtpairing.models.session import AssignmentOptions


class PriorityCalculator:
    """Computes priority scores for one assignment call.

    Attributes:
        now: Current time in epoch ms
        practice_start_time: Session start in epoch ms, if known
        use_stay_duration: Divide games played by minutes present
    """

    def __init__(
        self,
        now: int,
        practice_start_time: Optional[int] = None,
        use_stay_duration: bool = True,
    ):
        self.now = now
        self.practice_start_time = practice_start_time
        self.use_stay_duration = use_stay_duration

    @classmethod
    def from_options(cls, options: AssignmentOptions) -> "PriorityCalculator":
        return cls(
            now=options.current_time(),
            practice_start_time=options.practice_start_time,
            use_stay_duration=options.use_stay_duration_priority,
        )

    def _minutes_since(self, anchor: Optional[int]) -> float:
        if anchor is None:
            return 0.0
        return max(0.0, (self.now - anchor) / MS_PER_MINUTE)

    def minutes_present(self, player: Player) -> float:
        """Minutes since the player became available.

        The anchor is the later of the player's activation and the session
        start.
        """
        anchors = [
            t for t in (player.activated_at, self.practice_start_time) if t is not None
        ]
        return self._minutes_since(max(anchors) if anchors else None)

    def score(self, player: Player) -> float:
        if player.games_played == 0:
            return UNPLAYED_PRIORITY
        if self.use_stay_duration:
            return player.games_played / max(
                self.minutes_present(player), MIN_STAY_MINUTES
            )
        return player.games_played * GAMES_WEIGHT

    @property
    def one_game_delta(self) -> float:
        """Priority difference worth one extra game; the unit of all penalties."""
        if not self.use_stay_duration:
            return GAMES_WEIGHT
        session_minutes = self._minutes_since(self.practice_start_time)
        return 1.0 / max(session_minutes, MIN_STAY_MINUTES)

    def sort(self, players: Iterable[Player]) -> List[Player]:
        """Players by ascending score; ties keep their incoming order."""
        return sorted(players, key=self.score)
