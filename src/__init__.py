"""
Othello engine: board rules, minimax search and game drivers.
"""
