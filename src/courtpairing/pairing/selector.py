"""Exhaustive four-player combination search."""

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

import math
from dataclasses import dataclass, field
from itertools import combinations
from typing import Callable, Counter, Iterator, List, Optional, Sequence, Tuple

from courtpairing.constants import PLAYERS_PER_COURT, THREE_TIER_MIN_COURTS
from courtpairing.models.player import Player
from courtpairing.models.session import Match
from courtpairing.pairing.constraints import (
    count_combos,
    get_combo_repeat_penalty,
    get_gender_penalty,
    has_isolated_extreme,
    has_similar_recent_match,
)
from courtpairing.pairing.tiers import TierMembership
from courtpairing.type_hints import ComboKey, PlayerId
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)

PlayerCost = Callable[[Player], float]


class FourPlayerCombinations:
    """Lazy, re-iterable sequence of every four-element subset of a pool.

    Subsets come out in lexicographic order of pool position, so earlier
    (higher priority) candidates appear in earlier subsets.
    """

    def __init__(self, pool: Sequence[Player]):
        self._pool: Tuple[Player, ...] = tuple(pool)

    def __iter__(self) -> Iterator[Tuple[Player, ...]]:
        return combinations(self._pool, PLAYERS_PER_COURT)

    def __len__(self) -> int:
        return math.comb(len(self._pool), PLAYERS_PER_COURT)


def combinations_of_four(pool: Sequence[Player]) -> FourPlayerCombinations:
    return FourPlayerCombinations(pool)


def _no_court_fit_penalty(player: Player) -> float:
    return 0.0


@dataclass
class SelectionContext:
    """Everything the selector needs besides the candidate pool.

    Attributes:
        match_history: Matches, newest first
        tiers: Global tier membership
        total_court_count: Courts in the session; 3+ enables tier isolation checks
        priority_fn: Priority score per player (lower plays first)
        one_game_delta: Unit weight of the soft penalties
        court_fit_penalty: Extra cost for players outside the court's home tier
        combo_counts: Past meetings per group of four, counted once from the history
    """

    match_history: Sequence[Match]
    tiers: TierMembership
    total_court_count: int
    priority_fn: PlayerCost
    one_game_delta: float
    court_fit_penalty: PlayerCost = field(default=_no_court_fit_penalty)
    combo_counts: Counter[ComboKey] = field(init=False, repr=False)

    def __post_init__(self):
        self.combo_counts = count_combos(self.match_history)

    def is_valid(self, player_ids: Sequence[PlayerId]) -> bool:
        if has_similar_recent_match(player_ids, self.match_history):
            return False
        if self.total_court_count >= THREE_TIER_MIN_COURTS and has_isolated_extreme(
            player_ids, self.tiers
        ):
            return False
        return True

    def cost(self, players: Sequence[Player]) -> float:
        player_ids = [p.id for p in players]
        total = sum(self.priority_fn(p) + self.court_fit_penalty(p) for p in players)
        total += get_gender_penalty(players, self.one_game_delta)
        total += get_combo_repeat_penalty(
            player_ids, self.match_history, self.one_game_delta, self.combo_counts
        )
        return total


def find_best_four(
    candidates: Sequence[Player], context: SelectionContext
) -> Optional[List[Player]]:
    """Cheapest constraint-satisfying four, or None when none exists.

    Ties keep the first combination found.
    """
    if len(candidates) < PLAYERS_PER_COURT:
        return None

    best: Optional[Tuple[Player, ...]] = None
    best_cost = math.inf
    for combo in combinations_of_four(candidates):
        if not context.is_valid([p.id for p in combo]):
            continue
        cost = context.cost(combo)
        if cost < best_cost:
            best, best_cost = combo, cost

    return list(best) if best is not None else None


def select_best_four(
    candidates: Sequence[Player], context: SelectionContext
) -> List[Player]:
    """Best four from the pool, falling back to the four most deserving.

    A pool of four or fewer is returned unchanged. When no combination
    passes the constraints, the four lowest priority scores are taken
    regardless: a game is better than no game.
    """
    if len(candidates) <= PLAYERS_PER_COURT:
        return list(candidates)

    best = find_best_four(candidates, context)
    if best is not None:
        return best

    fallback = sorted(candidates, key=context.priority_fn)[:PLAYERS_PER_COURT]
    logger.warning(
        "No constraint-satisfying group among %d candidates, using %s",
        len(candidates),
        [p.id for p in fallback],
    )
    return fallback
