"""
Expression evaluation over word vectors with session-scoped variables.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

import numpy as np

from .errors import UndefinedVariable, UnknownWord, WordMathError
from .parser import ASTNode, Assignment, BinaryOp, Word, parse
from ..vector.ops import add, normalize, subtract
from ..vector.table import EmbeddingTable
from ..util.logging import logger


@dataclass
class EvalResult:
    """Outcome of evaluating one line of input."""

    vector: np.ndarray
    """Unit-length result vector"""

    used_words: Set[str] = field(default_factory=set)
    """Embedding words consumed, excluded later from nearest-neighbour search"""

    assignment: Optional[str] = None
    """Variable name when the input was an assignment"""


class Evaluator:
    """
    Evaluates expressions against an embedding table and a private variable store.

    Identifiers resolve to variables first and table words second. The table is
    shared by reference and never modified; the variable store belongs to this
    evaluator alone and only changes when an assignment succeeds.
    """

    def __init__(self, embeddings: EmbeddingTable):
        self.embeddings = embeddings
        self._variables: Dict[str, np.ndarray] = {}

    def evaluate(self, text: str) -> EvalResult:
        """
        Parse and evaluate one line of input.

        Raises:
            WordMathError: any parse or lookup failure; the variable store is left untouched
        """
        try:
            ast = parse(text)
            used_words: Set[str] = set()
            vector = self._eval_node(ast, used_words)
        except WordMathError as e:
            logger.log_evaluation("error", status="failed", details={"error": type(e).__name__})
            raise

        assignment = ast.name if isinstance(ast, Assignment) else None
        logger.log_evaluation(
            "assignment" if assignment else "expression",
            details={"used_words": len(used_words)}
        )
        return EvalResult(vector=vector, used_words=used_words, assignment=assignment)

    def _eval_node(self, node: ASTNode, used_words: Set[str]) -> np.ndarray:
        if isinstance(node, Word):
            return self._resolve(node.name, used_words)

        if isinstance(node, BinaryOp):
            left = self._eval_node(node.left, used_words)
            right = self._eval_node(node.right, used_words)
            combined = add(left, right) if node.operator == "+" else subtract(left, right)
            return normalize(combined)

        if isinstance(node, Assignment):
            vector = self._eval_node(node.expression, used_words)
            self._variables[node.name] = vector
            return vector

        raise TypeError(f"Unknown AST node: {node!r}")

    def _resolve(self, name: str, used_words: Set[str]) -> np.ndarray:
        if name in self._variables:
            return self._variables[name]

        vector = self.embeddings.get(name)
        if vector is not None:
            used_words.add(name)
            return vector

        # Underscores mark names the user meant as variables
        if "_" in name:
            raise UndefinedVariable(name)
        raise UnknownWord(name)

    def has_variable(self, name: str) -> bool:
        return name in self._variables

    def get_variable(self, name: str) -> Optional[np.ndarray]:
        return self._variables.get(name)

    def list_variables(self) -> List[str]:
        """Variable names in the order they were first assigned."""
        return list(self._variables)
