"""
connectfour.interfaces - User interfaces for Connect Four

Thin front ends that drive a GameState: currently the command line.
"""

# Don't import anything here to avoid circular imports
__all__ = []
