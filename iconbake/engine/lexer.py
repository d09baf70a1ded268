"""Path-data lexer.

Reads command letters and SVG-grammar numbers from a ``d`` attribute string.
The read cursor only moves forward.
"""

from __future__ import annotations

import re

# Sign, mantissa with at least one digit, optional complete exponent.
NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")

_SEPARATORS = frozenset(" \t\n\r,")
_NUMBER_START = frozenset("0123456789+-.")


class PathLexer:
    """Forward-only tokenizer over one path-data string."""

    def __init__(self, data: str) -> None:
        self.data = data
        self.pos = 0

    def skip_separators(self) -> None:
        n = len(self.data)
        while self.pos < n and self.data[self.pos] in _SEPARATORS:
            self.pos += 1

    def at_end(self) -> bool:
        return self.pos >= len(self.data)

    def peek(self) -> str:
        if self.pos >= len(self.data):
            return ""
        return self.data[self.pos]

    def next_char(self) -> str:
        ch = self.peek()
        if ch:
            self.pos += 1
        return ch

    def at_number(self) -> bool:
        """True if the next character can start a number (implicit repetition)."""
        return self.peek() in _NUMBER_START

    def next_number(self) -> float | None:
        """Skip separators and read one number, or return None if there is none.

        A lone sign or dot that does not start a valid number is consumed anyway
        so a caller looping on ``at_number()`` cannot stall.
        """
        self.skip_separators()
        match = NUMBER_RE.match(self.data, self.pos)
        if match is None:
            while self.peek() in ("+", "-", "."):
                self.pos += 1
            return None
        self.pos = match.end()
        return float(match.group(0))

    def next_numbers(self, count: int) -> list[float] | None:
        """Read ``count`` numbers; None if any of them is missing.

        Numbers read before the failing one stay consumed.
        """
        values: list[float] = []
        for _ in range(count):
            value = self.next_number()
            if value is None:
                return None
            values.append(value)
        return values
