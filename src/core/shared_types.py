"""
Type definitions used across layers
"""

from enum import StrEnum

# --- NOTE: the domain layer has its own Color / PieceType (src/chess/pieces.py). These are the string versions for the boundary.
# --- Same names, let the imports show which versions are used in what part of the code


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class Outcome(StrEnum):
    APPLIED = "applied"
    ILLEGAL = "illegal"
    NO_PIECE = "no piece"
