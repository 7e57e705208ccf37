"""Ranking engine: initial skill order and streak-driven re-ranking."""

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
from typing import Dict, Iterator, List, Sequence

from courtpairing.models.player import Player
from courtpairing.models.session import Match
from courtpairing.type_hints import PlayerId, RankOrder, Streaks
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


class OrderedRoster:
    """Ordered list of player ids supporting a single move primitive.

    Positions are 0-based, index 0 being the strongest player.
    """

    def __init__(self, player_ids: Sequence[PlayerId]):
        self._ids: List[PlayerId] = list(player_ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[PlayerId]:
        return iter(self._ids)

    def __contains__(self, player_id: object) -> bool:
        return player_id in self._ids

    def index(self, player_id: PlayerId) -> int:
        return self._ids.index(player_id)

    def move(self, player_id: PlayerId, target_index: int) -> None:
        """Move a player to ``target_index``, clamped to the roster bounds."""
        current = self._ids.index(player_id)
        target = max(0, min(len(self._ids) - 1, target_index))
        if target == current:
            return
        self._ids.pop(current)
        self._ids.insert(target, player_id)

    def to_list(self) -> RankOrder:
        return list(self._ids)


def build_initial_order(players: Sequence[Player]) -> RankOrder:
    """Order players by rating, placing the unrated block below the top third.

    Rated players are sorted by rating descending (stable). Unrated players
    keep their input order and are inserted as one block at
    ``len(rated) // 3``.
    """
    rated = sorted((p for p in players if p.is_rated), key=lambda p: -p.rating)
    unrated = [p for p in players if not p.is_rated]
    insert_at = len(rated) // 3
    ordered = rated[:insert_at] + unrated + rated[insert_at:]
    return [p.id for p in ordered]


def _win_streak(previous: int) -> int:
    return previous + 1 if previous > 0 else 1


def apply_streak_swaps(
    initial_order: Sequence[PlayerId],
    match_history: Sequence[Match],
    group_count: int,
) -> RankOrder:
    """Replay match history oldest-first and move players by their results.

    Every win moves the winner one place up, except every second
    consecutive win which jumps a whole group (``len // group_count``).
    Every loss resets the win streak and drops the player half a group.

    Args:
        initial_order: Starting order, strongest first
        match_history: Matches, newest first
        group_count: Number of tiers the order will be split into

    Returns:
        New order over the same ids
    """
    if group_count < 1:
        raise ValueError(f"group_count must be positive, got {group_count}")

    roster = OrderedRoster(initial_order)
    step_size = max(1, len(roster) // group_count)
    drop_amount = max(1, math.ceil(step_size / 2))
    win_streaks: Dict[PlayerId, int] = {}

    for match in reversed(match_history):
        for player_id in match.winners:
            streak = _win_streak(win_streaks.get(player_id, 0))
            win_streaks[player_id] = streak
            if player_id not in roster:
                continue
            position = roster.index(player_id)
            if streak >= 2 and streak % 2 == 0:
                roster.move(player_id, position - step_size)
            else:
                roster.move(player_id, position - 1)

        for player_id in match.losers:
            win_streaks[player_id] = 0
            if player_id not in roster:
                continue
            roster.move(player_id, roster.index(player_id) + drop_amount)

    return roster.to_list()


def get_streaks(match_history: Sequence[Match]) -> Streaks:
    """Current signed streak per player (positive wins, negative losses)."""
    streaks: Streaks = {}
    for match in reversed(match_history):
        for player_id in match.winners:
            streaks[player_id] = _win_streak(streaks.get(player_id, 0))
        for player_id in match.losers:
            previous = streaks.get(player_id, 0)
            streaks[player_id] = previous - 1 if previous < 0 else -1
    return streaks


def compute_rank_order(
    players: Sequence[Player],
    match_history: Sequence[Match],
    group_count: int,
) -> RankOrder:
    """Initial rating order adjusted by the streak replay."""
    order = apply_streak_swaps(build_initial_order(players), match_history, group_count)
    logger.debug("Rank order over %d players: %s", len(order), order)
    return order
