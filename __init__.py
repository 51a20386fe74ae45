"""
TicTacToe
=========
3x3 TicTacToe for one or two players. In single player mode the computer
plays O using a Minimax search, with an easy and a hard difficulty.

Scores carry over between rounds until they are reset.
"""

__version__ = "1.0.0"
