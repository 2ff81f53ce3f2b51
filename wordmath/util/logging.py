"""
Structured logging for word arithmetic operations (loading, evaluation, search).
"""

import logging
from typing import Any, Dict, Optional


class StructuredLogger:
    """Structured logger for embedding load, expression evaluation and search."""

    def __init__(self, name: str = "word_math", level: Optional[str] = None):
        self.logger = logging.getLogger(name)
        if level is None:
            from ..core.config import get_log_level
            level = get_log_level()
        self.logger.setLevel(level)

        # Create handler if not already set
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def log_operation(self, operation: str, status: str, details: Dict[str, Any] = None,
                      level: int = logging.INFO):
        """Log a structured operation."""
        message = f"Operation: {operation}, Status: {status}"
        if details:
            message += f", Details: {details}"

        self.logger.log(level, message)

    def log_embeddings_load(self, source: str, word_count: int, dimension: int,
                            start_time: float, end_time: float, status: str = "success"):
        """Log a completed embedding table load."""
        duration_ms = round((end_time - start_time) * 1000, 2)
        details = {
            "source": source,
            "word_count": word_count,
            "dimension": dimension,
            "duration_ms": duration_ms,
        }
        self.log_operation("embeddings.load", status, details)

    def log_evaluation(self, kind: str, status: str = "success", details: Dict[str, Any] = None):
        """Log an expression evaluation."""
        log_details = {"kind": kind}
        if details:
            log_details.update(details)

        self.log_operation(f"evaluate.{kind}", status, log_details, level=logging.DEBUG)

    def log_search(self, top_k: int, excluded: int, returned: int, candidates: int):
        """Log a brute-force nearest neighbour search."""
        details = {
            "top_k": top_k,
            "excluded": excluded,
            "returned": returned,
            "candidates": candidates,
        }
        self.log_operation("embeddings.nearest", "success", details, level=logging.DEBUG)

    # Standard logging methods for compatibility
    def info(self, message: str) -> None:
        """Log an info message."""
        self.logger.info(message)

    def warning(self, message: str) -> None:
        """Log a warning message."""
        self.logger.warning(message)

    def error(self, message: str) -> None:
        """Log an error message."""
        self.logger.error(message)

    def debug(self, message: str) -> None:
        """Log a debug message."""
        self.logger.debug(message)


# Global logger instance
logger = StructuredLogger()
