"""
Errors raised while parsing and evaluating word expressions.
Every error aborts the current expression; none leave partial state behind.
"""


class WordMathError(Exception):
    """Base class for all expression errors."""
    pass


class ParseError(WordMathError):
    """Input text does not match the expression grammar."""
    pass


class UnexpectedCharacter(ParseError):
    """The tokenizer met a character outside the recognized set."""

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Unexpected character: '{char}'")


class UnexpectedToken(ParseError):
    """A token cannot start the expected production, or trails a complete parse."""

    def __init__(self, token, expected: str = None):
        self.token = token
        self.expected = expected
        if expected:
            message = f"Expected {expected}, got {token.type.value}"
        else:
            message = f"Unexpected token: {token.type.value}"
        super().__init__(message)


class UnexpectedEnd(ParseError):
    """Tokens ran out while one was still required."""

    def __init__(self, message: str = "Unexpected end of expression"):
        super().__init__(message)


class EvaluationError(WordMathError):
    """A parsed expression could not be turned into a vector."""
    pass


class UnknownWord(EvaluationError):
    def __init__(self, word: str):
        self.word = word
        super().__init__(f"Unknown word: '{word}'")


class UndefinedVariable(EvaluationError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Undefined variable: '{name}'")
