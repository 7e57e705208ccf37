"""Enumerations shared by the Court Pairing models."""

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

from enum import Enum

from courtpairing.constants import (
    GENDER_FEMALE,
    GENDER_MALE,
    WINNER_TEAM_A,
    WINNER_TEAM_B,
)


class Tier(Enum):
    """Skill tier derived from the dynamic rank order."""

    UPPER = "upper"
    MIDDLE = "middle"
    LOWER = "lower"


class Gender(Enum):
    """Optional gender tag used for mixed pairings."""

    MALE = GENDER_MALE
    FEMALE = GENDER_FEMALE


class Winner(Enum):
    """Which side of a court won a match."""

    TEAM_A = WINNER_TEAM_A
    TEAM_B = WINNER_TEAM_B
