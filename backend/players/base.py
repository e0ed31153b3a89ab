"""
Base player interface: something that produces direction input.
"""

from domain.game_state import GameState


class Player:
    """
    Base class/interface for direction sources.

    A player looks at the latest snapshot and returns the direction it wants
    submitted before the next tick. Human input and autopilots share this
    seam so the tick driver does not care which one is attached.
    """

    name = "player"

    def get_move(self, game_state: GameState) -> str:
        """
        Return a move direction given the current game state.

        Args:
            game_state: Current snapshot of the game

        Returns:
            One of: "UP", "DOWN", "LEFT", "RIGHT"
        """
        raise NotImplementedError
