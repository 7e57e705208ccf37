"""AssignmentOptions data class."""

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

import random
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from dateutil import parser as date_parser

from courtpairing.constants import DEFAULT_JITTER_SCALE
from courtpairing.exceptions import InvalidConfigurationException
from courtpairing.models.player import Player
from courtpairing.type_hints import RandomSource


def _datetime_ms(value: datetime) -> int:
    # Naive datetimes are UTC.
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return int(value.timestamp() * 1000)


def to_epoch_ms(value: Union[int, float, str, datetime, None]) -> Optional[int]:
    """Convert a timestamp given as epoch ms, ISO-8601 string or datetime.

    ISO strings and datetimes without an offset are read as UTC.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return _datetime_ms(value)
    if isinstance(value, str):
        try:
            return int(float(value))
        except (ValueError, OverflowError):
            pass
        try:
            return _datetime_ms(date_parser.isoparse(value))
        except (ValueError, OverflowError) as e:
            raise InvalidConfigurationException(
                f"Unrecognised timestamp: {value!r}"
            ) from e
    try:
        return int(value)
    except (ValueError, OverflowError) as e:
        raise InvalidConfigurationException(f"Unrecognised timestamp: {value!r}") from e


@dataclass
class AssignmentOptions:
    """Per-call configuration of :func:`assign_courts`.

    Attributes
    ----------
    total_court_count : int or None
        Courts in the whole session. Decides between 2 and 3 tiers.
        Defaults to the number of courts being filled.
    target_court_ids : list of int or None
        Which courts to fill in this call. Defaults to ``1..court_count``.
    practice_start_time : int or None
        Session start in epoch milliseconds, anchor of duration priority.
    all_players : list of Player or None
        Population used to compute tiers. May include players currently on
        other courts. Defaults to the players being placed.
    use_stay_duration_priority : bool
        Weight games played by time present instead of a flat count.
    now : int or None
        Current time in epoch milliseconds. Defaults to the wall clock.
    rng : callable or None
        Random source for the 2-court split. Defaults to ``random.random``.
    jitter_scale : float
        Magnitude of the random court affinity in the 2-court split.
    """

    total_court_count: Optional[int] = None
    target_court_ids: Optional[List[int]] = None
    practice_start_time: Optional[int] = None
    all_players: Optional[List[Player]] = None
    use_stay_duration_priority: bool = True
    now: Optional[int] = None
    rng: Optional[RandomSource] = None
    jitter_scale: float = DEFAULT_JITTER_SCALE

    def resolved_total_court_count(self, court_count: int) -> int:
        return self.total_court_count or court_count

    def resolved_target_court_ids(self, court_count: int) -> List[int]:
        if self.target_court_ids:
            return sorted(self.target_court_ids)
        return list(range(1, court_count + 1))

    def current_time(self) -> int:
        """Injected ``now`` or the wall clock, in epoch ms."""
        return self.now if self.now is not None else int(time.time() * 1000)

    def random_source(self) -> RandomSource:
        return self.rng if self.rng is not None else random.random

    def validate(self, court_count: int) -> None:
        """Check the options against the number of courts to fill.

        Raises:
            InvalidConfigurationException: If the options are inconsistent
        """
        if court_count < 1:
            raise InvalidConfigurationException(
                f"court_count must be at least 1, got {court_count}"
            )
        if self.target_court_ids:
            if len(self.target_court_ids) != court_count:
                raise InvalidConfigurationException(
                    f"{len(self.target_court_ids)} target courts given "
                    f"for court_count={court_count}"
                )
            if len(set(self.target_court_ids)) != len(self.target_court_ids):
                raise InvalidConfigurationException(
                    f"Duplicate target court ids: {self.target_court_ids}"
                )
        total = self.resolved_total_court_count(court_count)
        if total < court_count:
            raise InvalidConfigurationException(
                f"total_court_count={total} is smaller than court_count={court_count}"
            )
        if self.jitter_scale < 0:
            raise InvalidConfigurationException(
                f"jitter_scale must be non-negative, got {self.jitter_scale}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the plain-data part of the options."""
        return {
            "total_court_count": self.total_court_count,
            "target_court_ids": self.target_court_ids,
            "practice_start_time": self.practice_start_time,
            "use_stay_duration_priority": self.use_stay_duration_priority,
            "jitter_scale": self.jitter_scale,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AssignmentOptions":
        """Deserialize options from dictionary.

        ``practice_start_time`` may be epoch ms or an ISO-8601 string.
        """
        return cls(
            total_court_count=data.get("total_court_count"),
            target_court_ids=data.get("target_court_ids"),
            practice_start_time=to_epoch_ms(data.get("practice_start_time")),
            use_stay_duration_priority=data.get("use_stay_duration_priority", True),
            now=to_epoch_ms(data.get("now")),
            jitter_scale=data.get("jitter_scale", DEFAULT_JITTER_SCALE),
        )
