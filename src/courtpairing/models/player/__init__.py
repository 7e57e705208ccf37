from courtpairing.models.player.base_player import Player
from courtpairing.models.player.player_stats import PlayerStats

__all__ = [
    "Player",
    "PlayerStats",
]
