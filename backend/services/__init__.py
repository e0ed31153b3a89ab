"""
Stateful services used by the game engine.
"""

from .score_tracker import ScoreTracker

__all__ = ['ScoreTracker']
