"""Error taxonomy for the tokenize -> parse -> evaluate pipeline."""

from __future__ import annotations

from typing import Any, Optional


class CalculationError(Exception):
    """Base class for every failure the calculator reports."""

    kind: str = "error"

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        super().__init__(message)
        self.position = position

# ================================ Lexing ====================================

class LexError(CalculationError): pass

class MalformedNumber(LexError):
    kind = "malformed_number"

    def __init__(self, text: str, position: int) -> None:
        super().__init__(f"Malformed number {text!r} at position {position}.", position)
        self.text = text

class UnexpectedCharacter(LexError):
    kind = "unexpected_character"

    def __init__(self, char: str, position: int) -> None:
        super().__init__(f"Unexpected character {char!r} at position {position}.", position)
        self.char = char

class InputTooLong(LexError):
    kind = "input_too_long"

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f"Expression too long ({length} chars, limit: {limit}).")
        self.length = length
        self.limit = limit

# ================================ Parsing ===================================

class ParseError(CalculationError): pass

class UnbalancedParentheses(ParseError):
    kind = "unbalanced_parentheses"

    def __init__(self, position: Optional[int] = None) -> None:
        super().__init__("Unbalanced parentheses.", position)

class UnexpectedToken(ParseError):
    kind = "unexpected_token"

    def __init__(self, token: Any, position: int) -> None:
        super().__init__(f"Unexpected {token} at position {position}.", position)
        self.token = token

class MissingArgumentList(ParseError):
    kind = "missing_argument_list"

    def __init__(self, name: str, position: Optional[int] = None) -> None:
        super().__init__(f"'{name}' is a function; call it like {name}(...).", position)
        self.name = name

class UnknownIdentifier(ParseError):
    kind = "unknown_identifier"

    def __init__(self, name: str, position: Optional[int] = None) -> None:
        super().__init__(f"Unknown name: {name}.", position)
        self.name = name

class EmptyExpression(ParseError):
    kind = "empty_expression"

    def __init__(self) -> None:
        super().__init__("Empty expression.")

class NestingTooDeep(ParseError):
    kind = "nesting_too_deep"

    def __init__(self, limit: int, position: int) -> None:
        super().__init__(f"Expression nested deeper than {limit} levels at position {position}.", position)
        self.limit = limit

# =============================== Evaluation =================================

class EvalError(CalculationError): pass

class DivisionByZero(EvalError):
    kind = "division_by_zero"

    def __init__(self) -> None:
        super().__init__("Division by zero.")

class DomainError(EvalError):
    kind = "domain_error"

    def __init__(self, name: str, argument: float, reason: str) -> None:
        super().__init__(f"{name} domain error: {reason}.")
        self.name = name
        self.argument = argument

class InvalidOperand(EvalError):
    kind = "invalid_operand"

    def __init__(self, op: str, left: float, right: float) -> None:
        super().__init__(f"Invalid operands for '{op}': {left!r}, {right!r}.")
        self.op = op
        self.left = left
        self.right = right

class NotFinite(EvalError):
    kind = "not_finite"

    def __init__(self, value: float) -> None:
        super().__init__(f"Result is not finite: {value!r}.")
        self.value = value
