from __future__ import annotations

import logging
import math
from typing import Callable, Dict

from .errors import CalculationError, DivisionByZero, DomainError, InvalidOperand, NotFinite
from .nodes import BinaryOp, Call, Constant, Literal, Node, Percent, UnaryOp
from .settings import EvaluationMode

logger = logging.getLogger(__name__)

CONSTANT_VALUES: Dict[str, float] = {"pi": math.pi, "e": math.e}


def _log10(x: float) -> float:
    if x <= 0: raise DomainError("log", x, "log requires x > 0")
    return math.log10(x)

def _ln(x: float) -> float:
    if x <= 0: raise DomainError("ln", x, "ln requires x > 0")
    return math.log(x)

def _sqrt(x: float) -> float:
    if x < 0: raise DomainError("sqrt", x, "sqrt requires x >= 0")
    return math.sqrt(x)

def _unit_interval(name: str, func: Callable[[float], float]) -> Callable[[float], float]:
    def inner(x: float) -> float:
        if not -1.0 <= x <= 1.0: raise DomainError(name, x, f"{name} requires -1 <= x <= 1")
        return func(x)
    return inner


DIRECT_TRIG: Dict[str, Callable[[float], float]] = {"sin": math.sin, "cos": math.cos, "tan": math.tan}
INVERSE_TRIG: Dict[str, Callable[[float], float]] = {
    "asin": _unit_interval("asin", math.asin),
    "acos": _unit_interval("acos", math.acos),
    "atan": math.atan,
}
PLAIN_FUNCTIONS: Dict[str, Callable[[float], float]] = {
    "log": _log10, "ln": _ln, "sqrt": _sqrt, "abs": abs,
}


def apply_function(name: str, x: float, mode: EvaluationMode) -> float:
    """Apply one of the named functions, honoring the angle mode for trig."""
    if not math.isfinite(x): raise NotFinite(x)
    if name in DIRECT_TRIG:
        return DIRECT_TRIG[name](math.radians(x) if mode is EvaluationMode.DEGREES else x)
    if name in INVERSE_TRIG:
        y = INVERSE_TRIG[name](x)
        return math.degrees(y) if mode is EvaluationMode.DEGREES else y
    if name in PLAIN_FUNCTIONS:
        return float(PLAIN_FUNCTIONS[name](x))
    raise CalculationError(f"Unknown function: {name}.")


def _power(l: float, r: float) -> float:
    try:
        value = math.pow(l, r)
    except (ValueError, OverflowError):
        raise InvalidOperand("^", l, r) from None
    if not math.isfinite(value): raise InvalidOperand("^", l, r)
    return value


def _binary(op: str, l: float, r: float) -> float:
    try:
        if op == "+": return l + r
        if op == "-": return l - r
        if op == "*": return l * r
        if op == "/":
            if r == 0: raise DivisionByZero()
            return l / r
    except OverflowError:
        raise NotFinite(math.inf) from None
    raise CalculationError(f"Unsupported operator: {op}.")


def _eval(node: Node, mode: EvaluationMode) -> float:
    if isinstance(node, Literal): return node.value

    if isinstance(node, Constant):
        if node.name not in CONSTANT_VALUES: raise CalculationError(f"Unknown constant: {node.name}.")
        return CONSTANT_VALUES[node.name]

    if isinstance(node, UnaryOp):
        v = _eval(node.operand, mode)
        if node.op == "-": return -v
        raise CalculationError(f"Unsupported unary operator: {node.op}.")

    if isinstance(node, BinaryOp) and node.op == "^":
        return _power(_eval(node.left, mode), _eval(node.right, mode))

    if isinstance(node, BinaryOp):
        # the left spine of a +-*/ chain has no nesting limit; walk it iteratively
        spine = []
        while isinstance(node, BinaryOp) and node.op != "^":
            spine.append(node); node = node.left
        value = _eval(node, mode)
        for link in reversed(spine): value = _binary(link.op, value, _eval(link.right, mode))
        return value

    if isinstance(node, Call):
        return apply_function(node.name, _eval(node.argument, mode), mode)

    if isinstance(node, Percent):
        return _eval(node.operand, mode) / 100.0

    raise CalculationError(f"Unsupported expression node: {type(node).__name__}.")


def evaluate(node: Node, mode: EvaluationMode, precision: int = 10) -> float:
    """
    Evaluate a parsed expression tree.

    Only the final value is rounded to `precision` decimal places, which
    hides binary representation noise (0.1 + 0.2 gives 0.3).
    """
    mode = EvaluationMode.parse(mode)
    value = _eval(node, mode)
    if not math.isfinite(value): raise NotFinite(value)
    value = round(value, precision)
    if value == 0.0: value = 0.0
    logger.debug("evaluated in %s mode: %r", mode.label, value)
    return value
