"""
Vector layer - result types shared by the embedding table and its callers.
"""

from dataclasses import dataclass


@dataclass
class NearestResult:
    """Represents a single nearest-neighbour match from the embedding table."""

    word: str
    """The matching vocabulary word"""

    similarity: float
    """Cosine similarity to the query vector (-1 to 1)"""
