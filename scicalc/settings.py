from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional


class EvaluationMode(enum.Enum):
    DEGREES = "deg"
    RADIANS = "rad"

    @property
    def label(self) -> str: return self.name[:3]

    def toggled(self) -> "EvaluationMode":
        return EvaluationMode.RADIANS if self is EvaluationMode.DEGREES else EvaluationMode.DEGREES

    @classmethod
    def parse(cls, value: "str | EvaluationMode") -> "EvaluationMode":
        if isinstance(value, cls): return value
        key = str(value).strip().lower()
        for mode in cls:
            if key in (mode.value, mode.name.lower()): return mode
        raise ValueError(f"angle_mode must be 'deg' or 'rad', got {value!r}")


@dataclass
class Settings:
    angle_mode: EvaluationMode = EvaluationMode.DEGREES
    precision: int = 10        # decimal places kept in the final result
    history_limit: int = 10
    max_length: int = 2000
    max_depth: int = 64        # nested groups, unary minus and exponents

    def validate(self) -> None:
        self.angle_mode = EvaluationMode.parse(self.angle_mode)
        self.precision = _whole("precision", self.precision, 1, 15)
        self.history_limit = _whole("history_limit", self.history_limit, 1)
        self.max_length = _whole("max_length", self.max_length, 1)
        self.max_depth = _whole("max_depth", self.max_depth, 1, 100)


def _whole(name: str, value: object, lo: int, hi: Optional[int] = None) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < lo or (hi is not None and value > hi):
        raise ValueError(f"{name} must be {lo}..{hi}" if hi is not None else f"{name} must be >= {lo}")
    return value
