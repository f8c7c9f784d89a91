from .player_core import Player
