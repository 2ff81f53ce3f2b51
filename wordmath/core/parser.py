"""
Tokenizer and recursive-descent parser for word expressions.

Grammar:
    input      := assignment | expression
    assignment := IDENT '=' expression
    expression := primary ( ('+' | '-') primary )*
    primary    := IDENT | '(' expression ')'

Identifiers are folded to lowercase. Both operators share one precedence
level and associate to the left.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from .errors import UnexpectedCharacter, UnexpectedEnd, UnexpectedToken


class TokenType(Enum):
    IDENTIFIER = "Identifier"
    PLUS = "Plus"
    MINUS = "Minus"
    EQUALS = "Equals"
    LPAREN = "LParen"
    RPAREN = "RParen"


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str


@dataclass(frozen=True)
class Word:
    name: str


@dataclass(frozen=True)
class BinaryOp:
    operator: str  # '+' or '-'
    left: "ASTNode"
    right: "ASTNode"


@dataclass(frozen=True)
class Assignment:
    name: str
    expression: "ASTNode"


ASTNode = Union[Word, BinaryOp, Assignment]

_SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "=": TokenType.EQUALS,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def tokenize(text: str) -> List[Token]:
    """Split input text into tokens, lowercasing identifiers."""
    tokens = []
    pos = 0
    while pos < len(text):
        char = text[pos]

        if char.isspace():
            pos += 1
            continue

        if char in _SINGLE_CHAR_TOKENS:
            tokens.append(Token(_SINGLE_CHAR_TOKENS[char], char))
            pos += 1
            continue

        match = _IDENTIFIER.match(text, pos)
        if match:
            tokens.append(Token(TokenType.IDENTIFIER, match.group().lower()))
            pos = match.end()
            continue

        raise UnexpectedCharacter(char, pos)

    return tokens


class Parser:
    """Single-pass parser over a token list."""

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0

    def peek(self, offset: int = 0) -> Optional[Token]:
        index = self.pos + offset
        if index < len(self.tokens):
            return self.tokens[index]
        return None

    def consume(self) -> Token:
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def expect(self, token_type: TokenType) -> Token:
        token = self.peek()
        if token is None:
            raise UnexpectedEnd()
        if token.type is not token_type:
            raise UnexpectedToken(token, expected=token_type.value)
        return self.consume()

    def parse_input(self) -> ASTNode:
        first = self.peek()
        if first is None:
            raise UnexpectedEnd("Empty input")

        # Assignment only when the stream starts with IDENT '='
        second = self.peek(1)
        if first.type is TokenType.IDENTIFIER and second is not None and second.type is TokenType.EQUALS:
            name = self.consume().value
            self.consume()
            return Assignment(name, self.parse_expression())

        return self.parse_expression()

    def parse_expression(self) -> ASTNode:
        left = self.parse_primary()

        while True:
            token = self.peek()
            if token is None or token.type not in (TokenType.PLUS, TokenType.MINUS):
                break
            operator = self.consume().value
            right = self.parse_primary()
            left = BinaryOp(operator, left, right)

        return left

    def parse_primary(self) -> ASTNode:
        token = self.peek()
        if token is None:
            raise UnexpectedEnd()

        if token.type is TokenType.LPAREN:
            self.consume()
            expression = self.parse_expression()
            self.expect(TokenType.RPAREN)
            return expression

        if token.type is TokenType.IDENTIFIER:
            self.consume()
            return Word(token.value)

        raise UnexpectedToken(token)

    def parse(self) -> ASTNode:
        ast = self.parse_input()
        trailing = self.peek()
        if trailing is not None:
            raise UnexpectedToken(trailing)
        return ast


def parse(text: str) -> ASTNode:
    """Parse one line of input into an AST."""
    return Parser(tokenize(text)).parse()
