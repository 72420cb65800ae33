"""Chess rules engine: board, move generation, legality and turn sequencing."""

__version__ = "0.1.0"
