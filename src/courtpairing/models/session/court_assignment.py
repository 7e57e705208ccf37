"""CourtAssignment data class."""

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
from typing import Any, Dict, Tuple

from courtpairing.type_hints import PlayerId, Team


@dataclass(frozen=True, slots=True)
class CourtAssignment:
    """Result of an assignment for a single court."""

    court_id: int
    team_a: Team
    team_b: Team

    @property
    def player_ids(self) -> Tuple[PlayerId, ...]:
        return self.team_a + self.team_b

    def to_dict(self) -> Dict[str, Any]:
        """Serialize assignment to dictionary."""
        return {
            "court_id": self.court_id,
            "team_a": list(self.team_a),
            "team_b": list(self.team_b),
        }


#  LocalWords:  CourtAssignment
