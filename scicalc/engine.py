from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from .errors import CalculationError, InputTooLong
from .evaluator import evaluate
from .history import HistoryStore
from .lexer import tokenize
from .parser import MAX_DEPTH, parse
from .settings import EvaluationMode, Settings

logger = logging.getLogger(__name__)

ERROR_DISPLAY = "Error"


def calculate(text: str, mode: EvaluationMode, precision: int = 10, max_depth: int = MAX_DEPTH) -> float:
    """tokenize -> parse -> evaluate; raises the first CalculationError hit."""
    return evaluate(parse(tokenize(text), max_depth), mode, precision)


def format_result(value: float, precision: int = 10) -> str:
    if not math.isfinite(value): raise ValueError(f"cannot format {value!r}")
    text = f"{value:.{precision}f}"
    if "." in text: text = text.rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


@dataclass(frozen=True)
class Evaluation:
    expression: str
    mode: EvaluationMode
    value: Optional[float] = None
    display: str = ERROR_DISPLAY
    error: Optional[CalculationError] = None

    @property
    def ok(self) -> bool: return self.error is None


class CalculatorEngine:
    def __init__(self, settings: Optional[Settings] = None, history: Optional[HistoryStore] = None) -> None:
        self.settings = settings or Settings(); self.settings.validate()
        self.history = history if history is not None else HistoryStore(self.settings.history_limit)
        self.mode: EvaluationMode = self.settings.angle_mode
        self.last_result: str = ""

    def toggle_mode(self) -> EvaluationMode:
        self.mode = self.mode.toggled()
        return self.mode

    def evaluate(self, expr: str, mode: Optional[EvaluationMode] = None) -> float:
        if len(expr) > self.settings.max_length:
            raise InputTooLong(len(expr), self.settings.max_length)
        return calculate(expr, mode or self.mode, self.settings.precision, self.settings.max_depth)

    def format_number(self, x: float) -> str:
        return format_result(x, self.settings.precision)

    def submit(self, expr: str, mode: Optional[EvaluationMode] = None) -> Evaluation:
        """Evaluate and, on success, record into history. Never raises CalculationError."""
        mode = mode or self.mode
        expr = expr.strip()
        try:
            value = self.evaluate(expr, mode)
        except CalculationError as exc:
            logger.warning("rejected %r (%s): %s", expr, exc.kind, exc)
            return Evaluation(expr, mode, error=exc)
        display = self.format_number(value)
        self.history.record(expr, display)
        self.last_result = display
        logger.info("%s = %s [%s]", expr, display, mode.label)
        return Evaluation(expr, mode, value, display)

    def preview(self, expr: str, mode: Optional[EvaluationMode] = None) -> str:
        """Live result for partially typed input; empty string while it does not evaluate."""
        try:
            return self.format_number(self.evaluate(expr, mode))
        except CalculationError:
            return ""
