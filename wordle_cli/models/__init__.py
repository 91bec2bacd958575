"""
Data Models Package

Contains all data models used throughout the game.
"""

from .game import GameState, GameStatus, LetterStatus

__all__ = ['GameState', 'GameStatus', 'LetterStatus']
