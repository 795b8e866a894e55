# =====================================================================
# File: vexargs_pkg/utils/logger.py
# Simple leveled logger for the parser and the inspector CLI
# =====================================================================
from __future__ import annotations
import sys
from typing import Optional, TextIO

LEVELS = {0: "ERROR", 1: "WARN", 2: "INFO", 3: "DEBUG"}


class Logger:
    def __init__(self, level: int = 2, stream: Optional[TextIO] = None):
        self.level = max(0, min(3, level))
        self.stream = stream

    @classmethod
    def from_verbosity(cls, verbosity: int, base: int = 2) -> "Logger":
        """Map a repeated -d count onto a level (INFO plus one per -d)."""
        return cls(level=base + max(0, verbosity or 0))

    @classmethod
    def quiet(cls) -> "Logger":
        return cls(level=0)

    def enabled(self, lvl: int) -> bool:
        return self.level >= lvl

    def _log(self, lvl: int, msg: str):
        if self.enabled(lvl):
            # resolve stderr late so redirected streams are honoured
            print(f"[{LEVELS.get(lvl, lvl)}] {msg}", file=self.stream or sys.stderr)

    def error(self, msg: str):
        self._log(0, msg)

    def warn(self, msg: str):
        self._log(1, msg)

    def info(self, msg: str):
        self._log(2, msg)

    def debug(self, msg: str):
        self._log(3, msg)
