"""Court assignment entry points."""

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

from typing import List, Optional, Sequence

from courtpairing.constants import (
    PLAYERS_PER_COURT,
    THREE_TIER_MIN_COURTS,
    WAITING_ELIGIBILITY_THRESHOLD,
)
from courtpairing.exceptions import InsufficientPlayersException
from courtpairing.models.player import Player
from courtpairing.models.session import AssignmentOptions, CourtAssignment, Match
from courtpairing.pairing.holistic import assign_two_courts_holistically
from courtpairing.pairing.priority import PriorityCalculator
from courtpairing.pairing.ranking import compute_rank_order
from courtpairing.pairing.router import CourtRouter
from courtpairing.pairing.teams import form_teams
from courtpairing.pairing.tiers import (
    group_into_tiers,
    routing_probability,
    tier_count_for_courts,
    tier_of,
)
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


def grouping_population(
    players: Sequence[Player], all_players: Optional[Sequence[Player]] = None
) -> List[Player]:
    """Non-resting players the tiers are computed over.

    ``all_players`` may include players busy on other courts. Players being
    placed but missing from it are appended so every candidate has a rank.
    """
    population = [p for p in (all_players or players) if p.is_active]
    known = {p.id for p in population}
    population.extend(p for p in players if p.is_active and p.id not in known)
    return population


def assign_courts(
    players: Sequence[Player],
    court_count: int,
    match_history: Sequence[Match] = (),
    options: Optional[AssignmentOptions] = None,
) -> List[CourtAssignment]:
    """Assign four active players with balanced teams to each target court.

    With exactly two courts in the session and both being filled, the
    eight most deserving players are split jointly. Otherwise courts are
    filled one by one in ascending id order.

    Args:
        players: Candidate players; resting ones are ignored
        court_count: Number of courts to fill
        match_history: Finished matches, newest first
        options: Per-call configuration and injected clock/random source

    Returns:
        One assignment per target court, in ascending court id order

    Raises:
        InsufficientPlayersException: If fewer than ``court_count * 4`` active players
        AssignmentImpossibleException: If a court cannot be filled
        InvalidConfigurationException: If the options are inconsistent
    """
    options = options or AssignmentOptions()
    options.validate(court_count)

    active = [p for p in players if p.is_active]
    required = court_count * PLAYERS_PER_COURT
    if len(active) < required:
        raise InsufficientPlayersException(required, len(active))

    total_courts = options.resolved_total_court_count(court_count)
    court_ids = options.resolved_target_court_ids(court_count)
    group_count = tier_count_for_courts(total_courts)
    holistic = total_courts == 2 and court_count == 2
    logger.info(
        f"Assigning {len(active)} active players to courts {court_ids} "
        f"({total_courts} in session, {'holistic' if holistic else 'per-court'} mode)"
    )

    priority = PriorityCalculator.from_options(options)
    population = grouping_population(active, options.all_players)
    rank_order = compute_rank_order(population, match_history, group_count)
    tiers = group_into_tiers(rank_order, group_count)

    if holistic:
        filled = assign_two_courts_holistically(
            active,
            court_ids,
            match_history,
            rank_order,
            tiers,
            priority,
            options.random_source(),
            options.jitter_scale,
        )
    else:
        router = CourtRouter(
            active, match_history, rank_order, tiers, total_courts, priority
        )
        filled = router.route(court_ids)

    assignments = []
    for court_id, chosen in filled:
        team_a, team_b = form_teams(chosen, rank_order)
        assignments.append(CourtAssignment(court_id, team_a, team_b))
        logger.info(f"Court {court_id}: {team_a} vs {team_b}")
    return assignments


def sort_waiting_players(
    waiting_players: Sequence[Player],
    options: Optional[AssignmentOptions] = None,
    match_history: Sequence[Match] = (),
) -> List[Player]:
    """Order the waiting list for display.

    Players are sorted by priority score. With three or more courts and
    empty courts given in ``options.target_court_ids``, players eligible
    for at least one empty court come first.
    """
    options = options or AssignmentOptions()
    priority = PriorityCalculator.from_options(options)
    total_courts = options.total_court_count or 0
    empty_courts = options.target_court_ids or []

    if total_courts < THREE_TIER_MIN_COURTS or not empty_courts:
        return priority.sort(waiting_players)

    group_count = tier_count_for_courts(total_courts)
    population = grouping_population(waiting_players, options.all_players)
    tiers = group_into_tiers(
        compute_rank_order(population, match_history, group_count), group_count
    )

    def is_eligible(player: Player) -> bool:
        tier = tier_of(player.id, tiers)
        return any(
            routing_probability(tier, court_id, total_courts)
            >= WAITING_ELIGIBILITY_THRESHOLD
            for court_id in empty_courts
        )

    return sorted(
        waiting_players, key=lambda p: (not is_eligible(p), priority.score(p))
    )
