"""
Search module for Othello.
Depth-limited minimax with alpha-beta pruning over material evaluation.
"""
from .evaluate import evaluate
from .minimax import SearchEngine, SearchResult, best_move, minimax

__all__ = ['evaluate', 'SearchEngine', 'SearchResult', 'best_move', 'minimax']
