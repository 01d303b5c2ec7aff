"""
Tokenizer: raw expression text -> flat list of tokens ending in END.

The UI glyphs are accepted directly: '×' and '÷' are the '*' and '/'
operators, '√' names the sqrt function and 'π' the pi constant.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Dict, List, Union

from .errors import MalformedNumber, UnexpectedCharacter

logger = logging.getLogger(__name__)


class TokenKind(enum.Enum):
    NUMBER = "number"
    IDENTIFIER = "identifier"
    OPERATOR = "operator"
    LPAREN = "("
    RPAREN = ")"
    END = "end"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: Union[float, str, None] = None
    position: int = 0

    def is_op(self, *symbols: str) -> bool:
        return self.kind is TokenKind.OPERATOR and self.value in symbols

    def __str__(self) -> str:
        if self.kind is TokenKind.END: return "end of input"
        if self.kind is TokenKind.NUMBER: return f"number {self.value:g}"
        if self.kind is TokenKind.IDENTIFIER: return f"name '{self.value}'"
        if self.kind is TokenKind.OPERATOR: return f"operator '{self.value}'"
        return f"'{self.kind.value}'"


OPERATORS: Dict[str, str] = {
    "+": "+", "-": "-", "*": "*", "/": "/", "^": "^", "%": "%",
    "×": "*", "÷": "/",
}
GLYPH_NAMES: Dict[str, str] = {"√": "sqrt", "π": "pi"}
DIGITS = "0123456789"


def _is_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def tokenize(text: str) -> List[Token]:
    tokens: List[Token] = []
    i, n = 0, len(text)
    while i < n:
        ch = text[i]
        if ch.isspace():
            i += 1; continue

        if ch in DIGITS or ch == ".":
            start, dots = i, 0
            while i < n and (text[i] in DIGITS or text[i] == "."):
                if text[i] == ".": dots += 1
                i += 1
            numeral = text[start:i]
            if dots > 1 or numeral == ".":
                raise MalformedNumber(numeral, start)
            tokens.append(Token(TokenKind.NUMBER, float(numeral), start))
            continue

        if _is_letter(ch):
            start = i
            while i < n and _is_letter(text[i]): i += 1
            tokens.append(Token(TokenKind.IDENTIFIER, text[start:i], start))
            continue

        if ch in GLYPH_NAMES:
            tokens.append(Token(TokenKind.IDENTIFIER, GLYPH_NAMES[ch], i))
        elif ch in OPERATORS:
            tokens.append(Token(TokenKind.OPERATOR, OPERATORS[ch], i))
        elif ch == "(":
            tokens.append(Token(TokenKind.LPAREN, "(", i))
        elif ch == ")":
            tokens.append(Token(TokenKind.RPAREN, ")", i))
        else:
            raise UnexpectedCharacter(ch, i)
        i += 1

    tokens.append(Token(TokenKind.END, None, n))
    logger.debug("tokenized %r into %d tokens", text, len(tokens))
    return tokens
