"""Court Pairing: fair, skill-aware court assignment for doubles practice sessions."""

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

from courtpairing.exceptions import (
    AssignmentImpossibleException,
    CourtPairingException,
    InsufficientPlayersException,
    InvalidConfigurationException,
    InvalidPlayerDataException,
)
from courtpairing.models import (
    AssignmentOptions,
    CourtAssignment,
    Gender,
    Match,
    Player,
    PlayerStats,
    Tier,
    Winner,
)
from courtpairing.pairing import (
    CourtRouter,
    PriorityCalculator,
    SelectionContext,
    apply_streak_swaps,
    assign_courts,
    assign_two_courts_holistically,
    build_initial_order,
    combinations_of_four,
    compute_rank_order,
    find_best_four,
    form_teams,
    get_combo_repeat_penalty,
    get_gender_penalty,
    get_streaks,
    group_into_tiers,
    has_isolated_extreme,
    has_similar_recent_match,
    routing_probability,
    select_best_four,
    sort_waiting_players,
)
from courtpairing.session import StatsCalculator, calculate_player_stats

__version__ = "0.1.0"

__all__ = [
    "AssignmentImpossibleException",
    "AssignmentOptions",
    "CourtAssignment",
    "CourtPairingException",
    "CourtRouter",
    "Gender",
    "InsufficientPlayersException",
    "InvalidConfigurationException",
    "InvalidPlayerDataException",
    "Match",
    "Player",
    "PlayerStats",
    "PriorityCalculator",
    "SelectionContext",
    "StatsCalculator",
    "Tier",
    "Winner",
    "apply_streak_swaps",
    "assign_courts",
    "assign_two_courts_holistically",
    "build_initial_order",
    "calculate_player_stats",
    "combinations_of_four",
    "compute_rank_order",
    "find_best_four",
    "form_teams",
    "get_combo_repeat_penalty",
    "get_gender_penalty",
    "get_streaks",
    "group_into_tiers",
    "has_isolated_extreme",
    "has_similar_recent_match",
    "routing_probability",
    "select_best_four",
    "sort_waiting_players",
]
