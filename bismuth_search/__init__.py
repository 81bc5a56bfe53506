"""Move ordering, hashing tables, Zobrist keys and negamax search for a chess engine."""

__version__ = "0.1.0"
__all__ = ["moves", "pregenerate", "repetition", "transposition", "zobrist", "search"]