"""
EscapeArtist - The Great Escape agent
Shortest-path racing with leader-blocking wall placement
"""

from .agent import PlayerAgent

__all__ = ['PlayerAgent']
