"""
Registry for autopilot players.

Maps player keys (e.g., 'random', 'greedy') to player classes so the CLI
can pick one by name. To add a player, implement it in its own module and
add an entry to PLAYER_LOADERS.
"""

from typing import Callable, Dict, List, Optional, Type

from .base import Player


def _get_random_player() -> Type[Player]:
    from .random_player import RandomPlayer
    return RandomPlayer


def _get_greedy_player() -> Type[Player]:
    from .greedy_player import GreedyPlayer
    return GreedyPlayer


PLAYER_LOADERS: Dict[str, Callable[[], Type[Player]]] = {
    "random": _get_random_player,
    "greedy": _get_greedy_player,
}

AVAILABLE_PLAYERS = list(PLAYER_LOADERS.keys())


def get_player_class(player_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given key.

    Args:
        player_key: One of AVAILABLE_PLAYERS. If None or empty, returns the greedy player.

    Raises:
        ValueError: If player_key is not recognized.
    """
    if not player_key or player_key.strip() == "":
        player_key = "greedy"

    player_key = player_key.strip().lower()

    if player_key not in PLAYER_LOADERS:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(f"Unknown player '{player_key}'. Available players: {available}")

    return PLAYER_LOADERS[player_key]()


def list_players() -> List[dict]:
    return [
        {"key": "random", "description": "Random safe move each tick"},
        {"key": "greedy", "description": "Shortest wrapped path toward the food, avoiding collisions"},
    ]
