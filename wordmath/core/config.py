"""
Runtime configuration for the word arithmetic shell.
Values are defaults for the command line only; the core takes paths explicitly.
"""

import os
from pathlib import Path
from typing import List, Optional

# Data directory and embedding file configuration
DATA_DIR = os.getenv("WORD_MATH_DATA_DIR", str(Path.home() / ".word-math"))
EMBEDDINGS_FILENAME = "glove.6B.300d.txt"
EMBEDDINGS_PATH = os.getenv("WORD_MATH_EMBEDDINGS", str(Path(DATA_DIR) / EMBEDDINGS_FILENAME))
GLOVE_URL = "https://nlp.stanford.edu/data/glove.6B.zip"

# Search and load limits
TOP_K = int(os.getenv("WORD_MATH_TOP_K", "5"))
MAX_WORDS = os.getenv("WORD_MATH_MAX_WORDS")  # unset = load everything

# Logging
LOG_LEVEL = os.getenv("WORD_MATH_LOG_LEVEL", "WARNING").upper()
DEBUG = os.getenv("DEBUG", "false").lower() == "true"

# Version string
VERSION = "1.0.0"

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_data_dir(create: bool = True) -> Path:
    """Get the data directory, creating it if requested."""
    data_dir = Path(DATA_DIR).expanduser()
    if create:
        data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_embeddings_path() -> Path:
    """Get the default embeddings file path."""
    return Path(EMBEDDINGS_PATH).expanduser()


def embeddings_exist(path: Optional[Path] = None) -> bool:
    """Check whether the embeddings file is present."""
    return Path(path or get_embeddings_path()).is_file()


def get_download_instructions(path: Optional[Path] = None) -> str:
    """Build the instructions shown when the embeddings file is missing."""
    target = Path(path or get_embeddings_path())
    return f"""
Embeddings not found. Please download GloVe embeddings:

1. Download from: {GLOVE_URL}
2. Extract {target.name}
3. Move to: {target}

Or run: curl -L {GLOVE_URL} -o /tmp/glove.zip && \\
         unzip /tmp/glove.zip {target.name} -d {target.parent}
"""


def get_top_k() -> int:
    """Get the number of nearest words to report."""
    return TOP_K


def get_max_words() -> Optional[int]:
    """Get the vocabulary load limit (None for no limit)."""
    if MAX_WORDS is None or MAX_WORDS == "":
        return None
    return int(MAX_WORDS)


def get_log_level() -> str:
    """Get the logging level name (DEBUG flag wins)."""
    if DEBUG:
        return "DEBUG"
    if LOG_LEVEL not in _LOG_LEVELS:
        return "WARNING"
    return LOG_LEVEL


def validate_config() -> List[str]:
    """Validate configuration and return any issues."""
    issues = []

    if TOP_K < 1:
        issues.append("WORD_MATH_TOP_K must be >= 1")

    if MAX_WORDS not in (None, ""):
        try:
            if int(MAX_WORDS) < 1:
                issues.append("WORD_MATH_MAX_WORDS must be >= 1")
        except ValueError:
            issues.append(f"Invalid WORD_MATH_MAX_WORDS: {MAX_WORDS}")

    if LOG_LEVEL not in _LOG_LEVELS:
        issues.append(f"Invalid WORD_MATH_LOG_LEVEL: {LOG_LEVEL}")

    return issues
