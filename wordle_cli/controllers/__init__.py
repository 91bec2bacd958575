"""
Controllers Package

Contains the terminal game loop.
"""

from .game_controller import GameController

__all__ = ['GameController']
