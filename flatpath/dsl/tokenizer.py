from __future__ import annotations
from typing import Optional

SEPARATORS = ","
NUMBER_START = "+-.0123456789"

class PathSyntaxError(ValueError):
    """Malformed path data at a given character offset."""

    def __init__(self, reason: str, offset: int):
        super().__init__(f"{reason} at offset {offset}")
        self.reason = reason
        self.offset = offset

def is_separator(ch: str) -> bool:
    return ch.isspace() or ch in SEPARATORS

def is_number_part(ch: str) -> bool:
    return ch in NUMBER_START

class PathTokenizer:
    """Character cursor over path data: separators, numbers, flags, letters."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def peek(self) -> Optional[str]:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def next_char(self) -> str:
        ch = self.peek()
        if ch is None:
            raise PathSyntaxError("unexpected end of path data", self.pos)
        self.pos += 1
        return ch

    def skip_separators(self) -> None:
        while self.pos < len(self.text) and is_separator(self.text[self.pos]):
            self.pos += 1

    def at_number(self) -> bool:
        ch = self.peek()
        return ch is not None and is_number_part(ch)

    def read_number(self) -> float:
        self.skip_separators()
        start = self.pos
        seen_point = False
        while self.pos < len(self.text):
            ch = self.text[self.pos]
            if ch in "+-" and self.pos == start:
                pass
            elif ch == "." and not seen_point:
                seen_point = True
            elif "0" <= ch <= "9":
                pass
            else:
                break
            self.pos += 1
        token = self.text[start:self.pos]
        if not token:
            if self.peek() is None:
                raise PathSyntaxError("unexpected end of path data", start)
            raise PathSyntaxError(f"expected number, found {self.peek()!r}", start)
        try:
            return float(token)
        except ValueError:
            raise PathSyntaxError(f"invalid number {token!r}", start) from None

    def read_flag(self) -> bool:
        self.skip_separators()
        start = self.pos
        n = self.read_number()
        if n == 1.0:
            return True
        if n == 0.0:
            return False
        raise PathSyntaxError(f"arc flag must be 0 or 1, got {n:g}", start)
