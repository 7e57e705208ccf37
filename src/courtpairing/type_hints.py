"""Type hints used in Court Pairing."""

from typing import Callable, Dict, FrozenSet, List, Tuple

# Player identifier
PlayerId = str

# Two player ids forming one side of a court
Team = Tuple[PlayerId, PlayerId]

# Order-independent key of the four players on a court
ComboKey = FrozenSet[PlayerId]

# Ordered player ids, strongest first
RankOrder = List[PlayerId]

# Signed streak per player: positive wins, negative losses
Streaks = Dict[PlayerId, int]

# Zero-argument random source returning floats in [0, 1)
RandomSource = Callable[[], float]

#  LocalWords:  PlayerId ComboKey RankOrder
