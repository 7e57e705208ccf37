"""Tier grouping and tier-to-court routing probabilities."""

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

from typing import Dict, Mapping, Sequence, Set

from courtpairing.constants import (
    THREE_TIER_MIN_COURTS,
    THREE_TIERS,
    TWO_COURT_ROUTING,
    TWO_TIERS,
)
from courtpairing.models.enums import Tier
from courtpairing.type_hints import PlayerId

TierMembership = Dict[Tier, Set[PlayerId]]

_BANDS = (Tier.UPPER, Tier.MIDDLE, Tier.LOWER)


def tier_count_for_courts(total_court_count: int) -> int:
    """Three tiers from three courts up, two below."""
    return THREE_TIERS if total_court_count >= THREE_TIER_MIN_COURTS else TWO_TIERS


def group_into_tiers(order: Sequence[PlayerId], group_count: int) -> TierMembership:
    """Split a rank order positionally into tiers.

    With three groups the remainder of ``n / 3`` goes to the middle tier.
    With two groups the upper tier takes ``n // 2`` and the remainder goes
    to the lower tier.
    """
    n = len(order)
    if group_count == THREE_TIERS:
        group_size = n // 3
        middle_end = group_size + group_size + n % 3
        return {
            Tier.UPPER: set(order[:group_size]),
            Tier.MIDDLE: set(order[group_size:middle_end]),
            Tier.LOWER: set(order[middle_end:]),
        }
    if group_count == TWO_TIERS:
        upper_size = n // 2
        return {
            Tier.UPPER: set(order[:upper_size]),
            Tier.LOWER: set(order[upper_size:]),
        }
    raise ValueError(f"Unsupported group count: {group_count}")


def tier_of(player_id: PlayerId, tiers: Mapping[Tier, Set[PlayerId]]) -> Tier:
    """Tier holding ``player_id``; players outside the population rank lowest."""
    for tier, members in tiers.items():
        if player_id in members:
            return tier
    return Tier.LOWER


def court_band(court_id: int, total_court_count: int) -> Tier:
    """Tier a court serves when three tiers are in use.

    Courts are split into three contiguous bands in ascending id order.
    """
    position = min(max(court_id, 1), total_court_count) - 1
    return _BANDS[position * THREE_TIERS // total_court_count]


def routing_probability(tier: Tier, court_id: int, total_court_count: int) -> float:
    """Probability that players of ``tier`` belong on ``court_id``."""
    if total_court_count <= 1:
        return 1.0
    if total_court_count == 2:
        if tier is Tier.MIDDLE:
            raise ValueError("The middle tier does not exist with two courts")
        court_index = min(max(court_id, 1), 2) - 1
        return TWO_COURT_ROUTING[tier.value][court_index]
    return 1.0 if court_band(court_id, total_court_count) is tier else 0.0
