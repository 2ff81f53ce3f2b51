"""
Interactive command loop around the evaluator.
Reserved commands are handled here and never reach the parser.
"""

from dataclasses import dataclass, field
from typing import Callable, List

from .errors import WordMathError
from .evaluator import Evaluator
from ..vector.table import EmbeddingTable

HELP_TEXT = """
word-math - Vector arithmetic on word embeddings

Commands:
  <expr>           Evaluate expression, show top {top_k} nearest words
  name = <expr>    Store result in variable
  vars             List defined variables
  help             Show this help
  exit             Quit

Examples:
  king - man + woman
  royalty = king - man
  royalty + cat
"""

EXIT_COMMANDS = ("exit", "quit")


@dataclass
class ShellResponse:
    lines: List[str] = field(default_factory=list)
    exit: bool = False


class Shell:
    """Turns input lines into printable responses."""

    def __init__(self, evaluator: Evaluator, embeddings: EmbeddingTable, top_k: int = 5):
        self.evaluator = evaluator
        self.embeddings = embeddings
        self.top_k = top_k

    def handle(self, line: str) -> ShellResponse:
        """Process one line of user input."""
        command = line.strip()

        if not command:
            return ShellResponse()

        if command in EXIT_COMMANDS:
            return ShellResponse(exit=True)

        if command == "help":
            return ShellResponse([HELP_TEXT.format(top_k=self.top_k)])

        if command == "vars":
            return ShellResponse(self._list_variables())

        return ShellResponse(self._evaluate(command))

    def _list_variables(self) -> List[str]:
        names = self.evaluator.list_variables()
        if not names:
            return ["  No variables defined"]
        return [f"  {name}    <vector>" for name in names]

    def _evaluate(self, command: str) -> List[str]:
        try:
            result = self.evaluator.evaluate(command)
        except WordMathError as e:
            return [f"  Error: {e}"]

        if result.assignment:
            return [f"  [stored as '{result.assignment}']"]

        # Exclude words used in the expression
        nearest = self.embeddings.nearest(result.vector, self.top_k, result.used_words)
        return [f"  {match.word:<15} {match.similarity:.3f}" for match in nearest]

    def run(self, input_fn: Callable[[str], str] = input, output_fn: Callable[[str], None] = print,
            prompt: str = "> ") -> None:
        """Read-eval-print until an exit command or end of input."""
        while True:
            try:
                line = input_fn(prompt)
            except (EOFError, KeyboardInterrupt):
                break

            response = self.handle(line)
            for text in response.lines:
                output_fn(text)
            if response.exit:
                break

        output_fn("\nGoodbye!")
