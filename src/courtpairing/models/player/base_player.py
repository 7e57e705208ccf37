"""A player taking part in a practice session."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional

from courtpairing.exceptions import InvalidPlayerDataException
from courtpairing.models.enums import Gender
from courtpairing.utils import setup_logger
from courtpairing.utils.validation import validate_gender, validate_rating

logger = setup_logger(__name__)


@dataclass(slots=True)
class Player:
    """
    A player in the session pool, as supplied by the surrounding application.

    The assignment core only reads players. The application increments
    ``games_played`` after every finished game and flips ``is_resting`` when
    a player sits out; ``activated_at`` is refreshed whenever a rest ends.

    Attributes
    ----------
    id : str
        Unique identifier for the player.
    name : str
        Display name.
    rating : int or None
        Skill rating. ``None`` or ``0`` means unrated.
    games_played : int
        Games played so far in this session.
    is_resting : bool
        Resting players are never assigned.
    activated_at : int or None
        Epoch milliseconds when the player last became available (session
        join or end of a rest).
    last_played_at : int or None
        Epoch milliseconds of the end of the player's last game.
    gender : Gender or None
        Optional tag used by the gender-mix constraints.

    Examples
    --------
    Creating a player::

        player = Player(id="p-001", name="Aiko", rating=1450, gender=Gender.FEMALE)
    """

    id: str
    name: str
    rating: Optional[int] = None
    games_played: int = 0
    is_resting: bool = False
    activated_at: Optional[int] = None
    last_played_at: Optional[int] = None
    gender: Optional[Gender] = None

    @property
    def is_rated(self) -> bool:
        """True when the player carries a positive rating."""
        return bool(self.rating) and self.rating > 0

    @property
    def is_active(self) -> bool:
        return not self.is_resting

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "rating": self.rating,
            "games_played": self.games_played,
            "is_resting": self.is_resting,
            "activated_at": self.activated_at,
            "last_played_at": self.last_played_at,
            "gender": self.gender.value if self.gender else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Deserialize player from dictionary.

        Raises:
            InvalidPlayerDataException: If id is missing or rating/gender are invalid
        """
        if not data.get("id"):
            raise InvalidPlayerDataException(f"Player record without id: {data!r}")

        rating_result = validate_rating(data.get("rating"))
        if not rating_result:
            raise InvalidPlayerDataException(
                f"Player {data['id']}: {rating_result.error_message}"
            )

        gender_result = validate_gender(data.get("gender"))
        if not gender_result:
            raise InvalidPlayerDataException(
                f"Player {data['id']}: {gender_result.error_message}"
            )

        games_played = int(data.get("games_played", 0) or 0)
        if games_played < 0:
            raise InvalidPlayerDataException(
                f"Player {data['id']}: negative games_played ({games_played})"
            )

        player = cls(
            id=str(data["id"]),
            name=data.get("name") or str(data["id"]),
            rating=rating_result.sanitized_value,
            games_played=games_played,
            is_resting=bool(data.get("is_resting", False)),
            activated_at=data.get("activated_at"),
            last_played_at=data.get("last_played_at"),
            gender=(
                Gender(gender_result.sanitized_value)
                if gender_result.sanitized_value
                else None
            ),
        )
        logger.debug("Loaded player %s (%s)", player.id, player.name)
        return player
