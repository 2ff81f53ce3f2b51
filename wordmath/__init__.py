"""
word-math - vector arithmetic on word embeddings.
"""

__version__ = "1.0.0"
