"""
Recursive-descent parser, precedence low -> high:

    expr    := term (('+' | '-') term)*
    term    := unary (('*' | '/') unary)*
    unary   := '-' unary | power
    power   := postfix ('^' unary)?
    postfix := primary '%'?
    primary := NUMBER | CONST | FUNC '(' expr ')' | '(' expr ')'

'^' is right-associative and binds tighter than unary minus, so -2^2 is
-(2^2) while 2^-1 is still accepted.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from .errors import (
    EmptyExpression, MissingArgumentList, NestingTooDeep, UnbalancedParentheses,
    UnexpectedToken, UnknownIdentifier,
)
from .lexer import Token, TokenKind
from .nodes import CONSTANTS, FUNCTIONS, BinaryOp, Call, Constant, Literal, Node, Percent, UnaryOp

logger = logging.getLogger(__name__)

MAX_DEPTH = 64


class Parser:
    def __init__(self, tokens: Sequence[Token], max_depth: int = MAX_DEPTH) -> None:
        if not tokens or tokens[-1].kind is not TokenKind.END:
            raise ValueError("token stream must end with an END token")
        self.tokens: List[Token] = list(tokens)
        self.pos = 0
        self.depth = 0       # open parentheses
        self.nesting = 0     # groups, unary minus and exponents currently open
        self.max_depth = max_depth

    def parse(self) -> Node:
        if self._peek().kind is TokenKind.END: raise EmptyExpression()
        node = self._expr()
        tok = self._peek()
        if tok.kind is TokenKind.RPAREN: raise UnbalancedParentheses(tok.position)
        if tok.kind is not TokenKind.END: raise UnexpectedToken(tok, tok.position)
        return node

    # ---- token cursor

    def _peek(self) -> Token: return self.tokens[self.pos]

    def _advance(self) -> Token:
        tok = self.tokens[self.pos]
        if tok.kind is not TokenKind.END: self.pos += 1
        return tok

    def _enter(self, tok: Token) -> None:
        self.nesting += 1
        if self.nesting > self.max_depth: raise NestingTooDeep(self.max_depth, tok.position)

    # ---- grammar rules

    def _expr(self) -> Node:
        node = self._term()
        while self._peek().is_op("+", "-"):
            op = self._advance().value
            node = BinaryOp(op, node, self._term())
        return node

    def _term(self) -> Node:
        node = self._unary()
        while self._peek().is_op("*", "/"):
            op = self._advance().value
            node = BinaryOp(op, node, self._unary())
        return node

    def _unary(self) -> Node:
        if self._peek().is_op("-"):
            self._enter(self._advance())
            node = UnaryOp("-", self._unary())
            self.nesting -= 1
            return node
        return self._power()

    def _power(self) -> Node:
        base = self._postfix()
        if self._peek().is_op("^"):
            self._enter(self._advance())
            # exponent re-enters at unary, which reaches _power again: right-assoc
            node = BinaryOp("^", base, self._unary())
            self.nesting -= 1
            return node
        return base

    def _postfix(self) -> Node:
        node = self._primary()
        if self._peek().is_op("%"):
            self._advance()
            node = Percent(node)
        return node

    def _primary(self) -> Node:
        tok = self._peek()
        if tok.kind is TokenKind.NUMBER:
            self._advance(); return Literal(float(tok.value))

        if tok.kind is TokenKind.IDENTIFIER:
            name = str(tok.value)
            if name in CONSTANTS:
                self._advance(); return Constant(name)
            if name not in FUNCTIONS: raise UnknownIdentifier(name, tok.position)
            self._advance()
            if self._peek().kind is not TokenKind.LPAREN: raise MissingArgumentList(name, tok.position)
            return Call(name, self._group())

        if tok.kind is TokenKind.LPAREN:
            return self._group()

        if tok.kind is TokenKind.RPAREN and self.depth == 0:
            raise UnbalancedParentheses(tok.position)
        if tok.kind is TokenKind.END and self.depth > 0:
            raise UnbalancedParentheses(tok.position)
        raise UnexpectedToken(tok, tok.position)

    def _group(self) -> Node:
        opening = self._advance()
        self._enter(opening)
        self.depth += 1
        node = self._expr()
        tok = self._peek()
        if tok.kind is TokenKind.END: raise UnbalancedParentheses(opening.position)
        if tok.kind is not TokenKind.RPAREN: raise UnexpectedToken(tok, tok.position)
        self._advance()
        self.depth -= 1
        self.nesting -= 1
        return node


def parse(tokens: Sequence[Token], max_depth: int = MAX_DEPTH) -> Node:
    node = Parser(tokens, max_depth).parse()
    logger.debug("parsed %d tokens into %s", len(tokens), type(node).__name__)
    return node
