"""Split four selected players into two balanced teams."""

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

from typing import Dict, List, Sequence, Tuple

from courtpairing.constants import PLAYERS_PER_COURT
from courtpairing.models.enums import Gender
from courtpairing.models.player import Player
from courtpairing.type_hints import PlayerId, Team


def rank_positions(rank_order: Sequence[PlayerId]) -> Dict[PlayerId, int]:
    return {player_id: index for index, player_id in enumerate(rank_order)}


def sort_by_rank(
    players: Sequence[Player], rank_order: Sequence[PlayerId]
) -> List[Player]:
    """Players in rank order; ids missing from the order go last, input order kept."""
    positions = rank_positions(rank_order)
    unranked = len(positions)
    return sorted(players, key=lambda p: positions.get(p.id, unranked))


def _is_mixed(first: Player, second: Player) -> bool:
    return first.gender is not None and first.gender != second.gender


def form_teams(
    players: Sequence[Player], rank_order: Sequence[PlayerId]
) -> Tuple[Team, Team]:
    """Pair the strongest with the weakest.

    The default split is rank 1 + 4 against rank 2 + 3. When all four carry
    a gender tag in a 2-2 split and the default does not give two mixed
    pairs, rank 1 + 3 against rank 2 + 4 is used if it does.

    Args:
        players: Exactly four players
        rank_order: Global rank order, strongest first

    Returns:
        ``(team_a, team_b)`` as tuples of player ids
    """
    if len(players) != PLAYERS_PER_COURT:
        raise ValueError(f"A court needs {PLAYERS_PER_COURT} players, got {len(players)}")

    r1, r2, r3, r4 = sort_by_rank(players, rank_order)
    team_a, team_b = (r1, r4), (r2, r3)

    genders = [p.gender for p in (r1, r2, r3, r4)]
    if None not in genders and genders.count(Gender.MALE) == 2:
        if not (_is_mixed(*team_a) and _is_mixed(*team_b)):
            alt_a, alt_b = (r1, r3), (r2, r4)
            if _is_mixed(*alt_a) and _is_mixed(*alt_b):
                team_a, team_b = alt_a, alt_b

    return (team_a[0].id, team_a[1].id), (team_b[0].id, team_b[1].id)
