"""Scientific expression evaluator: tokenizer, parser, evaluator and history."""

from .engine import CalculatorEngine, Evaluation, calculate, format_result
from .errors import (
    CalculationError, DivisionByZero, DomainError, EmptyExpression, EvalError,
    InputTooLong, InvalidOperand, LexError, MalformedNumber, MissingArgumentList,
    NestingTooDeep, NotFinite, ParseError, UnbalancedParentheses, UnexpectedCharacter,
    UnexpectedToken, UnknownIdentifier,
)
from .evaluator import evaluate
from .history import HistoryEntry, HistoryStore
from .lexer import Token, TokenKind, tokenize
from .parser import parse
from .settings import EvaluationMode, Settings

__version__ = "1.0.0"
