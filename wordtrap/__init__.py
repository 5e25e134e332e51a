"""Word-ladder trapping games on a graph of same-length words: board, searches and bots."""

__version__ = "0.1.0"