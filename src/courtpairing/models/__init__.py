from courtpairing.models.enums import Gender, Tier, Winner
from courtpairing.models.player import Player, PlayerStats
from courtpairing.models.session import AssignmentOptions, CourtAssignment, Match

__all__ = [
    "AssignmentOptions",
    "CourtAssignment",
    "Gender",
    "Match",
    "Player",
    "PlayerStats",
    "Tier",
    "Winner",
]
