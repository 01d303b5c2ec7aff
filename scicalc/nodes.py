"""Expression tree produced by the parser and walked by the evaluator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

FUNCTIONS = frozenset({"sin", "cos", "tan", "asin", "acos", "atan", "log", "ln", "sqrt", "abs"})
CONSTANTS = frozenset({"pi", "e"})


@dataclass(frozen=True)
class Literal:
    value: float

@dataclass(frozen=True)
class Constant:
    name: str

@dataclass(frozen=True)
class UnaryOp:
    op: str
    operand: "Node"

@dataclass(frozen=True)
class BinaryOp:
    op: str
    left: "Node"
    right: "Node"

@dataclass(frozen=True)
class Call:
    name: str
    argument: "Node"

@dataclass(frozen=True)
class Percent:
    operand: "Node"


Node = Union[Literal, Constant, UnaryOp, BinaryOp, Call, Percent]
