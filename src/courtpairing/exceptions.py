"""Exceptions for use in Court Pairing"""

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

from typing import Optional

# ========== Base Application Exception ==========


class CourtPairingException(Exception):
    """Base exception for all Court Pairing errors.

    All custom exceptions in the package inherit from this class, so callers
    can catch every library error with a single except clause.
    """

    pass


# ========== Assignment Exceptions ==========


class AssignmentException(CourtPairingException):
    """Base exception for court assignment errors."""

    pass


class InsufficientPlayersException(AssignmentException):
    """Raised when there are fewer active players than the courts need.

    Attributes
    ----------
    required : int
        Number of players needed (courts x 4).
    available : int
        Number of active (non-resting) players supplied.
    """

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(
            f"Not enough active players (required: {required}, available: {available})"
        )


class AssignmentImpossibleException(AssignmentException):
    """Raised when fewer than four players remain selectable for a court."""

    def __init__(self, court_id: int, remaining: int, message: Optional[str] = None):
        self.court_id = court_id
        self.remaining = remaining
        super().__init__(
            message
            or f"Cannot fill court {court_id}: only {remaining} players left to place"
        )


# ========== Player Exceptions ==========


class PlayerException(CourtPairingException):
    """Base exception for player-related errors."""

    pass


class InvalidPlayerDataException(PlayerException):
    """Raised when player data is invalid or incomplete."""

    pass


# ========== Validation Exceptions ==========


class ValidationException(CourtPairingException):
    """Base exception for validation errors."""

    pass


class RatingValidationException(ValidationException):
    """Raised when a rating value is invalid."""

    pass


class GenderValidationException(ValidationException):
    """Raised when a gender tag is not recognised."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(CourtPairingException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when assignment options are inconsistent."""

    pass
