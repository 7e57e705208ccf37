"""Joint split of the eight most deserving players over two courts."""

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

from typing import List, Sequence, Tuple

from courtpairing.constants import DEFAULT_JITTER_SCALE, PLAYERS_PER_COURT
from courtpairing.exceptions import AssignmentImpossibleException
from courtpairing.models.player import Player
from courtpairing.models.session import Match
from courtpairing.pairing.constraints import has_similar_recent_match
from courtpairing.pairing.priority import PriorityCalculator
from courtpairing.pairing.teams import rank_positions, sort_by_rank
from courtpairing.pairing.tiers import TierMembership, routing_probability, tier_of
from courtpairing.type_hints import PlayerId, RandomSource
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)

TWO_COURTS = 2
UPPER_LEANING_COURT = 1


def _repeats_recent(players: Sequence[Player], match_history: Sequence[Match]) -> bool:
    return has_similar_recent_match([p.id for p in players], match_history)


def repair_recent_repeats(
    court_one: List[Player],
    court_two: List[Player],
    match_history: Sequence[Match],
    rank_order: Sequence[PlayerId],
) -> Tuple[List[Player], List[Player]]:
    """Swap one player across the courts to break a recent-match repeat.

    Swaps are tried from the skill boundary outward: the weakest player of
    the first court against the strongest of the second court first. The
    first swap leaving both courts clean is taken; otherwise the split is
    returned unchanged.
    """
    if not (
        _repeats_recent(court_one, match_history)
        or _repeats_recent(court_two, match_history)
    ):
        return court_one, court_two

    positions = rank_positions(rank_order)
    unranked = len(positions)
    weakest_first = sorted(
        court_one, key=lambda p: positions.get(p.id, unranked), reverse=True
    )
    strongest_first = sort_by_rank(court_two, rank_order)

    for leaving in weakest_first:
        for joining in strongest_first:
            new_one = [joining if p is leaving else p for p in court_one]
            new_two = [leaving if p is joining else p for p in court_two]
            if not _repeats_recent(new_one, match_history) and not _repeats_recent(
                new_two, match_history
            ):
                logger.debug("Swapped %s and %s between courts", leaving.id, joining.id)
                return new_one, new_two

    logger.debug("No swap clears the recent-match repeat, keeping the split")
    return court_one, court_two


def assign_two_courts_holistically(
    players: Sequence[Player],
    court_ids: Sequence[int],
    match_history: Sequence[Match],
    rank_order: Sequence[PlayerId],
    tiers: TierMembership,
    priority: PriorityCalculator,
    rng: RandomSource,
    jitter_scale: float = DEFAULT_JITTER_SCALE,
) -> List[Tuple[int, List[Player]]]:
    """Pick the eight most deserving players and split them over two courts.

    Each selected player gets an affinity for the upper-leaning court: the
    routing probability of their tier plus ``rng() * jitter_scale``. The
    four highest affinities play on the first target court. The random term
    lets a lower-tier player cross over now and then while keeping the
    split tier-correct on average.

    Args:
        players: Active players eligible for this call
        court_ids: The two courts to fill
        match_history: Matches, newest first
        rank_order: Global rank order, strongest first
        tiers: Global two-tier membership
        priority: Priority calculator for this call
        rng: Random source returning floats in [0, 1)
        jitter_scale: Magnitude of the random affinity term

    Returns:
        ``[(court_id, players), ...]`` for both courts, first court first

    Raises:
        AssignmentImpossibleException: If fewer than eight players are given
    """
    first_court, second_court = sorted(court_ids)
    needed = TWO_COURTS * PLAYERS_PER_COURT
    selected = priority.sort(players)[:needed]
    if len(selected) < needed:
        raise AssignmentImpossibleException(
            first_court if len(selected) < PLAYERS_PER_COURT else second_court,
            len(selected),
        )

    ranked = sort_by_rank(selected, rank_order)
    affinity = {
        p.id: routing_probability(tier_of(p.id, tiers), UPPER_LEANING_COURT, TWO_COURTS)
        + rng() * jitter_scale
        for p in ranked
    }
    by_affinity = sorted(ranked, key=lambda p: affinity[p.id], reverse=True)
    court_one = by_affinity[:PLAYERS_PER_COURT]
    court_two = by_affinity[PLAYERS_PER_COURT:]
    logger.debug(
        "Two-court split: %s | %s",
        [p.id for p in court_one],
        [p.id for p in court_two],
    )

    court_one, court_two = repair_recent_repeats(
        court_one, court_two, match_history, rank_order
    )
    return [(first_court, court_one), (second_court, court_two)]
