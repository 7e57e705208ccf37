"""Validation utilities for Court Pairing.

This module provides reusable validation functions with consistent error handling.
"""

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

from typing import Any, Optional

from courtpairing.constants import GENDER_FEMALE, GENDER_MALE
from courtpairing.exceptions import (
    GenderValidationException,
    RatingValidationException,
)

MAX_RATING = 4000

_GENDER_ALIASES = {
    "m": GENDER_MALE,
    "male": GENDER_MALE,
    "man": GENDER_MALE,
    "f": GENDER_FEMALE,
    "female": GENDER_FEMALE,
    "woman": GENDER_FEMALE,
}


class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether the validation passed
        error_message: Human-readable error message if invalid
        sanitized_value: Cleaned/normalized value if valid
    """

    def __init__(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        sanitized_value: Any = None,
    ):
        self.is_valid = is_valid
        self.error_message = error_message
        self.sanitized_value = sanitized_value

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.is_valid

    def __repr__(self) -> str:
        if self.is_valid:
            return f"ValidationResult(VALID, {self.sanitized_value!r})"
        return f"ValidationResult(INVALID, {self.error_message!r})"


# ========== Rating Validation ==========


def validate_rating(rating: Any) -> ValidationResult:
    """Validate a player rating.

    ``None``, empty strings and ``0`` all mean "unrated" and sanitize to ``None``.

    Args:
        rating: Rating as int, float or numeric string

    Returns:
        ValidationResult with the integer rating (or None) as sanitized value

    Example:
        >>> validate_rating("1450").sanitized_value
        1450
    """
    if rating is None or (isinstance(rating, str) and not rating.strip()):
        return ValidationResult(is_valid=True, sanitized_value=None)

    if isinstance(rating, bool):
        return ValidationResult(
            is_valid=False, error_message=f"Invalid rating: {rating!r}"
        )

    try:
        value = int(float(rating))
    except (TypeError, ValueError, OverflowError):
        return ValidationResult(
            is_valid=False, error_message=f"Rating is not a number: {rating!r}"
        )

    if value < 0 or value > MAX_RATING:
        return ValidationResult(
            is_valid=False,
            error_message=f"Rating out of range (0-{MAX_RATING}): {value}",
        )

    return ValidationResult(is_valid=True, sanitized_value=value or None)


def validate_rating_strict(rating: Any) -> Optional[int]:
    """Validate rating and raise exception if invalid.

    Raises:
        RatingValidationException: If rating is invalid
    """
    result = validate_rating(rating)
    if not result.is_valid:
        raise RatingValidationException(result.error_message)
    return result.sanitized_value


# ========== Gender Validation ==========


def validate_gender(gender: Optional[str]) -> ValidationResult:
    """Validate a gender tag.

    Accepts ``M``/``F`` and common spelled-out forms, case-insensitive.
    Missing values are valid and sanitize to ``None``.
    """
    if gender is None or not str(gender).strip():
        return ValidationResult(is_valid=True, sanitized_value=None)

    normalized = _GENDER_ALIASES.get(str(gender).strip().lower())
    if normalized is None:
        return ValidationResult(
            is_valid=False, error_message=f"Unknown gender tag: {gender!r}"
        )
    return ValidationResult(is_valid=True, sanitized_value=normalized)


def validate_gender_strict(gender: Optional[str]) -> Optional[str]:
    """Validate gender and raise exception if invalid.

    Raises:
        GenderValidationException: If the tag is not recognised
    """
    result = validate_gender(gender)
    if not result.is_valid:
        raise GenderValidationException(result.error_message)
    return result.sanitized_value
