"""
Views Package

Terminal presentation of guesses and the alphabet.
"""

from .renderer import Renderer, LETTER_STYLES

__all__ = ['Renderer', 'LETTER_STYLES']
