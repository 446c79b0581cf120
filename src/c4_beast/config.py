"""
Configuration for the C4Beast player and the play script.
"""

from dataclasses import dataclass


# Search Configuration
SEARCH_CONFIG = {
    'max_depth': 6,                 # Plies searched per decision, root move included
    'cache_policy': 'verbatim',     # 'verbatim' | 'bounded' | 'disabled'
}

# Board Configuration
BOARD_CONFIG = {
    'size': 7,                      # Square board: size x size
    'win_length': 4,                # Discs in a row needed to win
}

# Player Configuration
PLAYER_CONFIG = {
    'name': 'C4Beast',
}


# Play script defaults
@dataclass
class PlayConfig:
    depth: int = SEARCH_CONFIG['max_depth']
    size: int = BOARD_CONFIG['size']
    cache_policy: str = SEARCH_CONFIG['cache_policy']
    opponent: str = "human"
    games: int = 10
    ai_first: bool = False
    seed: int = 42


PLAY = PlayConfig()
