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

# --- Constants ---
PLAYERS_PER_COURT = 4

# Tier grouping
THREE_TIER_MIN_COURTS = 3  # 3+ courts use upper/middle/lower, fewer use upper/lower
TWO_TIERS = 2
THREE_TIERS = 3

# Priority score (lower = more deserving of a game)
UNPLAYED_PRIORITY = -1e9  # finite so several unplayed candidates still sum
GAMES_WEIGHT = 0.4  # count mode: priority = games_played * GAMES_WEIGHT
MIN_STAY_MINUTES = 5.0  # duration mode divisor floor
MS_PER_MINUTE = 60_000

# Constraint horizons
RECENT_MATCHES_PER_PLAYER = 2
RECENT_OVERLAP_THRESHOLD = 3
COMBO_REPEAT_TOLERANCE = 2

# Penalty weights, in units of "one game" of priority
GENDER_IMBALANCE_WEIGHT = 0.5
COMBO_REPEAT_WEIGHT = 3.0
COURT_FIT_WEIGHT = 3.0

# 2-court holistic split
DEFAULT_JITTER_SCALE = 1.8

# Routing probability towards court 1 / court 2 in 2-tier mode
TWO_COURT_ROUTING = {
    "upper": (0.70, 0.30),
    "lower": (0.30, 0.70),
}

# Minimum routing probability for a waiting player to count as eligible
WAITING_ELIGIBILITY_THRESHOLD = 0.5

# Match outcome tags
WINNER_TEAM_A = "A"
WINNER_TEAM_B = "B"

# Gender tags
GENDER_MALE = "M"
GENDER_FEMALE = "F"
