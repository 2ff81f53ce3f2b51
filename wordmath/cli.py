"""
Command line entry point - loads embeddings and starts the interactive shell.
"""

import argparse
import sys
from pathlib import Path

from .core.config import (
    get_data_dir,
    get_download_instructions,
    get_embeddings_path,
    get_max_words,
    get_top_k,
    validate_config,
    embeddings_exist,
)
from .core.evaluator import Evaluator
from .core.shell import Shell
from .util.logging import logger
from .vector.table import load_embeddings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="word-math",
        description="Vector arithmetic on word embeddings"
    )
    parser.add_argument(
        "--embeddings",
        type=Path,
        default=None,
        help="Path to a whitespace-separated embeddings file (default: WORD_MATH_EMBEDDINGS or ~/.word-math)"
    )
    parser.add_argument(
        "--top-k",
        type=int,
        default=None,
        help="Number of nearest words to show (default: WORD_MATH_TOP_K or 5)"
    )
    parser.add_argument(
        "--max-words",
        type=int,
        default=None,
        help="Only load the first N words of the embeddings file"
    )
    return parser


def main(argv=None) -> int:
    """Run the word-math shell. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    issues = validate_config()
    if issues:
        for issue in issues:
            print(f"ERROR: {issue}")
        return 1

    if args.embeddings is None:
        # Only the default location lives in the managed data directory
        get_data_dir()
        embeddings_path = get_embeddings_path()
    else:
        embeddings_path = args.embeddings

    top_k = args.top_k if args.top_k is not None else get_top_k()
    max_words = args.max_words if args.max_words is not None else get_max_words()

    if top_k < 1:
        print("ERROR: --top-k must be >= 1")
        return 1

    if not embeddings_exist(embeddings_path):
        print(get_download_instructions(embeddings_path))
        return 1

    print("Loading embeddings...")
    try:
        embeddings = load_embeddings(embeddings_path, max_words=max_words)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read embeddings from {embeddings_path}: {e}")
        print(f"ERROR: Could not read {embeddings_path}: {e}")
        return 1

    print(f"Loaded {embeddings.size:,} words")
    print('Type "help" for commands.\n')

    shell = Shell(Evaluator(embeddings), embeddings, top_k=top_k)
    shell.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
