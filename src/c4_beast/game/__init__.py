# Game module

from .board import Board, EMPTY

__all__ = ['Board', 'EMPTY']
