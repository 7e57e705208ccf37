from courtpairing.models.session.assignment_options import (
    AssignmentOptions,
    to_epoch_ms,
)
from courtpairing.models.session.court_assignment import CourtAssignment
from courtpairing.models.session.match import Match

__all__ = [
    "AssignmentOptions",
    "CourtAssignment",
    "Match",
    "to_epoch_ms",
]
