"""Per-court greedy fill with tier routing and adjacent-tier borrowing."""

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

from itertools import zip_longest
from typing import List, Sequence, Set, Tuple

from courtpairing.constants import (
    COURT_FIT_WEIGHT,
    PLAYERS_PER_COURT,
    THREE_TIER_MIN_COURTS,
)
from courtpairing.exceptions import AssignmentImpossibleException
from courtpairing.models.enums import Tier
from courtpairing.models.player import Player
from courtpairing.models.session import Match
from courtpairing.pairing.priority import PriorityCalculator
from courtpairing.pairing.selector import (
    SelectionContext,
    find_best_four,
    select_best_four,
)
from courtpairing.pairing.tiers import (
    TierMembership,
    court_band,
    routing_probability,
    tier_of,
)
from courtpairing.type_hints import PlayerId
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


class CourtRouter:
    """Fills courts one after another in ascending id order.

    Each court draws first from its home group (players whose tier may be
    routed to it) and widens the pool one borrowed player at a time when the
    home group cannot produce a valid four. Players chosen for one court are
    unavailable for the following courts of the same call.

    Attributes:
        players: Active players eligible for this call
        match_history: Matches, newest first
        rank_order: Global rank order, strongest first
        tiers: Global tier membership
        total_court_count: Courts in the whole session
        priority: Priority calculator for this call
    """

    def __init__(
        self,
        players: Sequence[Player],
        match_history: Sequence[Match],
        rank_order: Sequence[PlayerId],
        tiers: TierMembership,
        total_court_count: int,
        priority: PriorityCalculator,
    ):
        self.players = list(players)
        self.match_history = match_history
        self.rank_order = list(rank_order)
        self.tiers = tiers
        self.total_court_count = total_court_count
        self.priority = priority
        self._by_id = {p.id: p for p in self.players}

    def _tier(self, player: Player) -> Tier:
        return tier_of(player.id, self.tiers)

    def _probability(self, player: Player, court_id: int) -> float:
        return routing_probability(self._tier(player), court_id, self.total_court_count)

    def _context(self, court_id: int) -> SelectionContext:
        delta = self.priority.one_game_delta

        def court_fit_penalty(player: Player) -> float:
            return (1.0 - self._probability(player, court_id)) * COURT_FIT_WEIGHT * delta

        return SelectionContext(
            match_history=self.match_history,
            tiers=self.tiers,
            total_court_count=self.total_court_count,
            priority_fn=self.priority.score,
            one_game_delta=delta,
            court_fit_penalty=court_fit_penalty,
        )

    def home_group(self, court_id: int, used: Set[PlayerId]) -> List[Player]:
        """Unused players whose tier routes to the court with nonzero probability."""
        return [
            p
            for p in self.players
            if p.id not in used and self._probability(p, court_id) > 0
        ]

    def _tier_in_rank_order(self, tier: Tier, used: Set[PlayerId]) -> List[Player]:
        members = self.tiers.get(tier, set())
        return [
            self._by_id[pid]
            for pid in self.rank_order
            if pid in members and pid in self._by_id and pid not in used
        ]

    def adjacent_candidates(self, court_id: int, used: Set[PlayerId]) -> List[Player]:
        """Borrowable players from neighbouring tiers, nearest in rank first.

        Only used with three or more courts. An upper court borrows the top
        of the middle tier, a lower court the bottom of it, and a middle
        court alternates between the weakest upper and the strongest lower
        players.
        """
        if self.total_court_count < THREE_TIER_MIN_COURTS:
            return []

        band = court_band(court_id, self.total_court_count)
        if band is Tier.UPPER:
            return self._tier_in_rank_order(Tier.MIDDLE, used)
        if band is Tier.LOWER:
            return list(reversed(self._tier_in_rank_order(Tier.MIDDLE, used)))

        weakest_upper = reversed(self._tier_in_rank_order(Tier.UPPER, used))
        strongest_lower = self._tier_in_rank_order(Tier.LOWER, used)
        return [
            p
            for pair in zip_longest(weakest_upper, strongest_lower)
            for p in pair
            if p is not None
        ]

    def fill_court(self, court_id: int, used: Set[PlayerId]) -> List[Player]:
        """Choose four players for ``court_id``.

        Raises:
            AssignmentImpossibleException: If fewer than four players remain
        """
        context = self._context(court_id)
        home = self.home_group(court_id, used)
        adjacent = self.adjacent_candidates(court_id, used)

        pool: List[Player] = []
        for borrowed in range(len(adjacent) + 1):
            pool = self.priority.sort(home + adjacent[:borrowed])
            if len(pool) < PLAYERS_PER_COURT:
                continue
            best = find_best_four(pool, context)
            if best is not None:
                if borrowed:
                    logger.debug(
                        "Court %d borrowed %d adjacent player(s)", court_id, borrowed
                    )
                return best

        if len(pool) < PLAYERS_PER_COURT:
            pool = self.priority.sort(p for p in self.players if p.id not in used)
            logger.debug(
                "Court %d widened to all %d unassigned players", court_id, len(pool)
            )
        if len(pool) < PLAYERS_PER_COURT:
            raise AssignmentImpossibleException(court_id, len(pool))

        return select_best_four(pool, context)

    def route(self, court_ids: Sequence[int]) -> List[Tuple[int, List[Player]]]:
        """Fill every court in ascending id order."""
        used: Set[PlayerId] = set()
        filled = []
        for court_id in sorted(court_ids):
            chosen = self.fill_court(court_id, used)
            used.update(p.id for p in chosen)
            filled.append((court_id, chosen))
        return filled
