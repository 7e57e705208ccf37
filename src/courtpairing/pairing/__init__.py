"""Court assignment engine.

Ranking, tiering, constraint checks, combination search, routing and team
formation. The public entry points are :func:`assign_courts` and
:func:`sort_waiting_players`; the remaining names are composable
primitives used for display ordering.
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

from courtpairing.pairing.assigner import assign_courts, sort_waiting_players
from courtpairing.pairing.constraints import (
    get_combo_repeat_penalty,
    get_gender_penalty,
    has_isolated_extreme,
    has_similar_recent_match,
)
from courtpairing.pairing.holistic import assign_two_courts_holistically
from courtpairing.pairing.priority import PriorityCalculator
from courtpairing.pairing.ranking import (
    apply_streak_swaps,
    build_initial_order,
    compute_rank_order,
    get_streaks,
)
from courtpairing.pairing.router import CourtRouter
from courtpairing.pairing.selector import (
    SelectionContext,
    combinations_of_four,
    find_best_four,
    select_best_four,
)
from courtpairing.pairing.teams import form_teams
from courtpairing.pairing.tiers import group_into_tiers, routing_probability

__all__ = [
    "assign_courts",
    "sort_waiting_players",
    "build_initial_order",
    "apply_streak_swaps",
    "get_streaks",
    "compute_rank_order",
    "group_into_tiers",
    "routing_probability",
    "has_similar_recent_match",
    "has_isolated_extreme",
    "get_gender_penalty",
    "get_combo_repeat_penalty",
    "combinations_of_four",
    "find_best_four",
    "select_best_four",
    "SelectionContext",
    "PriorityCalculator",
    "CourtRouter",
    "assign_two_courts_holistically",
    "form_teams",
]
