"""
connectfour - Connect Four rules engine

This package provides the authoritative state and rules of a two-player
Connect Four game: the board, turn derivation, piece placement with gravity
and win/tie detection, plus thin adapters (CLI, Gymnasium environment) that
drive the engine the way a presentation layer would.
"""

# Version number
__version__ = '0.1.0'
