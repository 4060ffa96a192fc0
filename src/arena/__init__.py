"""
Arena module for matches between search depths.
"""
from .arena import Arena, DepthRatings, MatchRecord

__all__ = ['Arena', 'DepthRatings', 'MatchRecord']
