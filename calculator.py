#!/usr/bin/env python3
"""
Scientific Calculator (console)

- Safe tokenizer/parser/evaluator (no eval/exec), degree/radian mode
- Accepts the keypad glyphs × ÷ √ π as typed
- History of the last 10 results, recall into the input line, Ans

Commands
- :deg / :rad / :mode   set or toggle the angle mode
- :history              list past results, most recent first
- :recall N             load entry N's expression as the next input
- :ans                  append the last result to the input
- :clear                empty the history
- :quit                 leave
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional, TextIO

from scicalc import CalculatorEngine, EvaluationMode, Settings


class ConsoleApp:
    def __init__(self, engine: CalculatorEngine, out: TextIO = sys.stdout) -> None:
        self.engine = engine
        self.out = out
        self.pending: str = ""
        self.running = True

    def prompt(self) -> str:
        return f"[{self.engine.mode.label}] {self.pending}"

    def say(self, text: str) -> None: print(text, file=self.out)

    def handle(self, line: str) -> None:
        if line.strip().startswith(":"):
            self._command(line.strip()[1:].split()); return
        text = (self.pending + line).strip()
        self.pending = ""
        if not text: return
        ev = self.engine.submit(text)
        self.say(f"= {ev.display}")

    def _command(self, argv: List[str]) -> None:
        if not argv: self.say("Unknown command."); return
        name, args = argv[0].lower(), argv[1:]
        handlers: Dict[str, Callable[[List[str]], None]] = {
            "deg": lambda _a: self._set_mode(EvaluationMode.DEGREES),
            "rad": lambda _a: self._set_mode(EvaluationMode.RADIANS),
            "mode": lambda _a: self._set_mode(self.engine.mode.toggled()),
            "history": self._show_history,
            "recall": self._recall,
            "ans": self._ans,
            "clear": self._clear,
            "quit": self._quit, "q": self._quit, "exit": self._quit,
        }
        handler = handlers.get(name)
        if handler is None: self.say(f"Unknown command: :{name}"); return
        handler(args)

    def _set_mode(self, mode: EvaluationMode) -> None:
        self.engine.mode = mode; self.say(f"Mode: {mode.label}")

    def _show_history(self, _args: List[str]) -> None:
        entries = self.engine.history.all()
        if not entries: self.say("No history"); return
        for i, entry in enumerate(entries, 1): self.say(f"{i:>2}. {entry.label}")

    def _recall(self, args: List[str]) -> None:
        try:
            self.pending = self.engine.history.recall(int(args[0]) - 1)
        except (IndexError, ValueError):
            self.say("Usage: :recall N  (see :history)")

    def _ans(self, _args: List[str]) -> None:
        if not self.engine.last_result: self.say("No result yet"); return
        self.pending += self.engine.last_result

    def _clear(self, _args: List[str]) -> None:
        self.engine.history.clear(); self.say("History cleared.")

    def _quit(self, _args: List[str]) -> None: self.running = False

    def run(self, stdin: TextIO = sys.stdin) -> None:
        interactive = stdin.isatty()
        while self.running:
            if interactive: print(self.prompt(), end="", file=self.out, flush=True)
            line = stdin.readline()
            if not line: break
            self.handle(line.rstrip("\n"))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Scientific calculator")
    p.add_argument("expression", nargs="*", help="evaluate once and exit")
    p.add_argument("--mode", choices=["deg", "rad"], default="deg", help="angle mode (default: deg)")
    p.add_argument("--precision", type=int, default=10, help="decimal places kept (1..15)")
    p.add_argument("-v", "--verbose", action="store_true", help="log pipeline details")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        engine = CalculatorEngine(Settings(angle_mode=EvaluationMode.parse(args.mode), precision=args.precision))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr); return 2
    if args.expression:
        ev = engine.submit(" ".join(args.expression))
        print(ev.display)
        return 0 if ev.ok else 1
    ConsoleApp(engine).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
