"""
Vector layer - vector arithmetic and the in-memory embedding table.
"""

# Package initialization for vector module
from .ops import add, subtract, dot, magnitude, normalize, as_vector
from .table import EmbeddingTable, load_embeddings
from .types import NearestResult

__all__ = [
    'add',
    'subtract',
    'dot',
    'magnitude',
    'normalize',
    'as_vector',
    'EmbeddingTable',
    'load_embeddings',
    'NearestResult'
]
