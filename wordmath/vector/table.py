"""
Vector layer - in-memory word embedding table with brute-force cosine search.
Built once at load time and treated as read-only afterwards.
"""

import math
import time
from typing import Dict, Iterable, List, Optional, Set

import numpy as np

from .ops import DTYPE, as_vector, normalize
from .types import NearestResult
from ..util.logging import logger


def _parse_component(field: str) -> float:
    """Parse one numeric field permissively: empty is 0.0, garbage is NaN."""
    if not field.strip():
        return 0.0
    try:
        return float(field)
    except ValueError:
        return math.nan


class EmbeddingTable:
    """Mapping from word to unit-normalized vector with nearest-neighbour search."""

    def __init__(self, vectors: Optional[Dict[str, np.ndarray]] = None):
        self._vectors = dict(vectors) if vectors else {}  # word -> normalized vector
        self._words = list(self._vectors)
        self._matrix = self._stack()

    def _stack(self) -> Optional[np.ndarray]:
        """Stack all vectors into one matrix when they share a dimension."""
        if not self._vectors:
            return None
        lengths = {len(v) for v in self._vectors.values()}
        if len(lengths) != 1:
            return None
        return np.vstack(list(self._vectors.values())).astype(DTYPE, copy=False)

    @classmethod
    def load(cls, lines: Iterable[str], max_words: Optional[int] = None) -> "EmbeddingTable":
        """
        Build a table from lines of the form ``word v1 v2 ... vN``.

        Fields are separated by single spaces. Each vector is normalized on
        insert and a repeated word overwrites the earlier entry.

        Args:
            lines: Iterable of text lines (a file object works)
            max_words: Stop after this many entries (None loads everything)

        Returns:
            A populated EmbeddingTable
        """
        vectors = {}
        count = 0
        for line in lines:
            line = line.rstrip("\r\n")
            if not line:
                continue
            if max_words is not None and count >= max_words:
                break
            parts = line.split(" ")
            word = parts[0]
            values = [_parse_component(field) for field in parts[1:]]
            vectors[word] = normalize(as_vector(values))
            count += 1
        return cls(vectors)

    @classmethod
    def load_file(cls, path, max_words: Optional[int] = None) -> "EmbeddingTable":
        """Load a table from a UTF-8 embeddings file."""
        start_time = time.time()
        with open(path, "r", encoding="utf-8") as f:
            table = cls.load(f, max_words=max_words)
        logger.log_embeddings_load(str(path), table.size, table.dimension, start_time, time.time())
        return table

    @property
    def size(self) -> int:
        return len(self._vectors)

    @property
    def dimension(self) -> int:
        """Length of the first loaded vector (0 when empty)."""
        if not self._words:
            return 0
        return len(self._vectors[self._words[0]])

    def __len__(self) -> int:
        return self.size

    def __contains__(self, word: str) -> bool:
        return word in self._vectors

    def words(self) -> List[str]:
        """Vocabulary in insertion order."""
        return list(self._words)

    def get(self, word: str) -> Optional[np.ndarray]:
        """Exact, case-sensitive lookup."""
        return self._vectors.get(word)

    def has(self, word: str) -> bool:
        return word in self._vectors

    def _similarities(self, query: np.ndarray) -> np.ndarray:
        if self._matrix is not None:
            return self._matrix @ query
        return np.array([np.dot(query, self._vectors[w]) for w in self._words], dtype=DTYPE)

    def nearest(self, vector: np.ndarray, n: int, exclude: Optional[Set[str]] = None) -> List[NearestResult]:
        """
        Rank every non-excluded word by cosine similarity to ``vector``.

        Stored vectors are unit length, so the dot product with the normalized
        query is the cosine similarity. Equal scores keep insertion order.

        Args:
            vector: Query vector (need not be normalized)
            n: Maximum number of results
            exclude: Words to leave out of the ranking

        Returns:
            Up to ``n`` results sorted by descending similarity
        """
        if n <= 0 or not self._words:
            return []

        exclude = exclude or set()
        normalized_query = normalize(as_vector(vector))
        similarities = self._similarities(normalized_query)

        candidates = [i for i, word in enumerate(self._words) if word not in exclude]
        scores = similarities[candidates]
        order = np.argsort(-scores, kind="stable")[:n]

        results = [
            NearestResult(word=self._words[candidates[i]], similarity=float(scores[i]))
            for i in order
        ]
        logger.log_search(n, len(self._words) - len(candidates), len(results), len(candidates))
        return results


def load_embeddings(path, max_words: Optional[int] = None) -> EmbeddingTable:
    """Load an embedding table from ``path``."""
    return EmbeddingTable.load_file(path, max_words=max_words)
