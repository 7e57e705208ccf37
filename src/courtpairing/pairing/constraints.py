"""Eligibility predicates and soft penalties for a four-player combination.

Nothing in this module raises for a bad combination: the predicates reject,
the penalty functions add cost, and the selector decides.
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

from collections import Counter
from typing import Mapping, Optional, Sequence, Set

from courtpairing.constants import (
    COMBO_REPEAT_TOLERANCE,
    COMBO_REPEAT_WEIGHT,
    GENDER_IMBALANCE_WEIGHT,
    PLAYERS_PER_COURT,
    RECENT_MATCHES_PER_PLAYER,
    RECENT_OVERLAP_THRESHOLD,
)
from courtpairing.models.enums import Gender, Tier
from courtpairing.models.player import Player
from courtpairing.models.session import Match
from courtpairing.type_hints import ComboKey, PlayerId


def has_similar_recent_match(
    player_ids: Sequence[PlayerId],
    match_history: Sequence[Match],
    recent_count: int = RECENT_MATCHES_PER_PLAYER,
    overlap_threshold: int = RECENT_OVERLAP_THRESHOLD,
) -> bool:
    """True if the group largely repeats one of its members' recent matches.

    Each member looks back over their own last ``recent_count`` matches
    (history is newest first). If any of those matches contains
    ``overlap_threshold`` or more of the candidate ids, the group is rejected.
    """
    candidates = set(player_ids)
    for player_id in candidates:
        seen = 0
        for match in match_history:
            if seen >= recent_count:
                break
            if not match.involves(player_id):
                continue
            seen += 1
            if len(candidates & match.participants) >= overlap_threshold:
                return True
    return False


def has_isolated_extreme(
    player_ids: Sequence[PlayerId], tiers: Mapping[Tier, Set[PlayerId]]
) -> bool:
    """True if a lone upper (or lower) player faces three of the opposite extreme.

    Only meaningful with three tiers; 1v1, 1v2, 2v1 and 2v2 mixes pass.
    """
    upper = tiers.get(Tier.UPPER, set())
    lower = tiers.get(Tier.LOWER, set())
    upper_count = sum(1 for pid in player_ids if pid in upper)
    lower_count = sum(1 for pid in player_ids if pid in lower)
    if not upper_count or not lower_count:
        return False
    return (upper_count == 1 and lower_count >= 3) or (
        lower_count == 1 and upper_count >= 3
    )


def get_gender_penalty(players: Sequence[Player], one_game_delta: float) -> float:
    """Penalty for a 3-1 gender split; 2-2 and 4-0 cost nothing.

    Applies only when every player carries a gender tag.
    """
    if len(players) != PLAYERS_PER_COURT or any(p.gender is None for p in players):
        return 0.0
    males = sum(1 for p in players if p.gender is Gender.MALE)
    if males in (1, 3):
        return GENDER_IMBALANCE_WEIGHT * one_game_delta
    return 0.0


def count_combos(match_history: Sequence[Match]) -> Counter:
    """Number of past matches per exact group of four players."""
    return Counter(match.participants for match in match_history)


def count_combo_occurrences(
    player_ids: Sequence[PlayerId], match_history: Sequence[Match]
) -> int:
    """How many past matches had exactly these four players."""
    key: ComboKey = frozenset(player_ids)
    return sum(1 for match in match_history if match.participants == key)


def get_combo_repeat_penalty(
    player_ids: Sequence[PlayerId],
    match_history: Sequence[Match],
    one_game_delta: float,
    combo_counts: Optional[Mapping[ComboKey, int]] = None,
) -> float:
    """Penalty once the same four would meet for a third time.

    ``combo_counts`` from :func:`count_combos` replaces the history scan.
    """
    if combo_counts is None:
        seen = count_combo_occurrences(player_ids, match_history)
    else:
        seen = combo_counts.get(frozenset(player_ids), 0)
    if seen >= COMBO_REPEAT_TOLERANCE:
        return COMBO_REPEAT_WEIGHT * one_game_delta
    return 0.0
