from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Optional, TextIO

from moon_console.core.errors import InvalidNumberError

_INT_RE = re.compile(r"^[+-]?[0-9]+$")

# Ids and years are 32-bit signed integers.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


@dataclass(frozen=True)
class ParsedInt:
    """Outcome of parsing one input line as an integer.

    Callers decide what a failure means: `unwrap()` raises, anything else may
    re-prompt.
    """

    field: str
    raw: str
    value: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.value is not None

    @property
    def error(self) -> Optional[str]:
        if self.ok:
            return None
        return f"{self.field}: expected an integer, got {self.raw!r}"

    def unwrap(self) -> int:
        if self.value is None:
            raise InvalidNumberError(self.field, self.raw)
        return self.value


def parse_int(raw: str, *, field: str) -> ParsedInt:
    text = raw.strip()
    if not _INT_RE.fullmatch(text):
        return ParsedInt(field=field, raw=raw)
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        return ParsedInt(field=field, raw=raw)
    return ParsedInt(field=field, raw=raw, value=value)


class Console:
    """Line-oriented terminal I/O over injected streams."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self.exhausted = False

    def println(self, text: str = "") -> None:
        self._out.write(f"{text}\n")
        self._out.flush()

    def read_line(self) -> str:
        # End of input reads as an empty line; loops check `exhausted` to stop.
        line = self._in.readline()
        if not line:
            self.exhausted = True
        return line.strip() if line else ""

    def prompt(self, label: str) -> str:
        self.println(label)
        return self.read_line()

    def prompt_int(self, label: str, *, field: str) -> ParsedInt:
        return parse_int(self.prompt(label), field=field)
