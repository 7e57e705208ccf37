"""Quality metrics of a simulated (or real) session."""

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

import statistics
from collections import Counter, defaultdict
from dataclasses import dataclass
from typing import Dict, List, Sequence, Set

from courtpairing.constants import PLAYERS_PER_COURT
from courtpairing.models.enums import Gender
from courtpairing.models.player import Player
from courtpairing.models.session import Match
from courtpairing.pairing.constraints import has_similar_recent_match
from courtpairing.type_hints import PlayerId
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class SessionMetrics:
    """Fairness and variety figures for one session."""

    total_matches: int = 0

    # Games played spread
    min_games: int = 0
    max_games: int = 0
    mean_games: float = 0.0
    stddev_games: float = 0.0

    # Repetition
    recent_match_violations: int = 0
    combos_played_twice: int = 0
    combos_played_three_plus: int = 0
    max_combo_repeat: int = 0

    # Gender mix, as fractions of fully tagged matches
    mixed_rate: float = 0.0
    same_gender_rate: float = 0.0
    unbalanced_rate: float = 0.0

    average_unique_partners: float = 0.0

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            "total_matches": self.total_matches,
            "min_games": self.min_games,
            "max_games": self.max_games,
            "mean_games": self.mean_games,
            "stddev_games": self.stddev_games,
            "recent_match_violations": self.recent_match_violations,
            "combos_played_twice": self.combos_played_twice,
            "combos_played_three_plus": self.combos_played_three_plus,
            "max_combo_repeat": self.max_combo_repeat,
            "mixed_rate": self.mixed_rate,
            "same_gender_rate": self.same_gender_rate,
            "unbalanced_rate": self.unbalanced_rate,
            "average_unique_partners": self.average_unique_partners,
        }


def count_recent_match_violations(match_history: Sequence[Match]) -> int:
    """Matches that repeated three of their players' recent match at the time.

    Each match is checked against the history that preceded it.
    """
    violations = 0
    for index, match in enumerate(match_history):
        earlier = match_history[index + 1 :]
        if has_similar_recent_match(sorted(match.participants), earlier):
            violations += 1
    return violations


def _gender_split(match: Match, genders: Dict[PlayerId, Gender]) -> int:
    """Number of men on court, or -1 if anyone is untagged."""
    tags = [genders.get(pid) for pid in match.participants]
    if len(tags) != PLAYERS_PER_COURT or None in tags:
        return -1
    return tags.count(Gender.MALE)


def analyze_session(
    players: Sequence[Player], match_history: Sequence[Match]
) -> SessionMetrics:
    """Compute session metrics.

    Args:
        players: Session roster; ``games_played`` is read from it
        match_history: Matches, newest first

    Returns:
        Metrics summary
    """
    metrics = SessionMetrics(total_matches=len(match_history))
    if not players:
        logger.warning("No players to analyze")
        return metrics

    games = [p.games_played for p in players]
    metrics.min_games = min(games)
    metrics.max_games = max(games)
    metrics.mean_games = statistics.mean(games)
    metrics.stddev_games = statistics.pstdev(games)

    metrics.recent_match_violations = count_recent_match_violations(match_history)

    combo_counts = Counter(match.participants for match in match_history)
    metrics.combos_played_twice = sum(1 for n in combo_counts.values() if n == 2)
    metrics.combos_played_three_plus = sum(1 for n in combo_counts.values() if n >= 3)
    metrics.max_combo_repeat = max(combo_counts.values(), default=0)

    genders = {p.id: p.gender for p in players if p.gender is not None}
    splits = [_gender_split(m, genders) for m in match_history]
    tagged = [s for s in splits if s >= 0]
    if tagged:
        metrics.mixed_rate = sum(1 for s in tagged if s == 2) / len(tagged)
        metrics.same_gender_rate = sum(1 for s in tagged if s in (0, 4)) / len(tagged)
        metrics.unbalanced_rate = sum(1 for s in tagged if s in (1, 3)) / len(tagged)

    co_players: Dict[PlayerId, Set[PlayerId]] = defaultdict(set)
    for match in match_history:
        for player_id in match.participants:
            co_players[player_id].update(match.participants - {player_id})
    metrics.average_unique_partners = statistics.mean(
        len(co_players[p.id]) for p in players
    )

    return metrics


def average_metrics(results: List[SessionMetrics]) -> Dict[str, float]:
    """Field-wise mean over several sessions."""
    if not results:
        return {}
    keys = results[0].to_dict().keys()
    return {key: statistics.mean(r.to_dict()[key] for r in results) for key in keys}
