"""
SVG path command model.

Letters (lowercase = relative to the cursor):
M/m  move            L/l  line           H/h  horizontal    V/v  vertical
C/c  cubic Bezier    S/s  smooth cubic   Q/q  quadratic     T/t  smooth quadratic
A/a  elliptical arc  Z/z  close sub-path (never relative, no operands)
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..geometry.vectors import Point

class CommandLabel(Enum):
    MOVE = "M"
    LINE = "L"
    HORIZONTAL = "H"
    VERTICAL = "V"
    CUBIC_BEZIER = "C"
    SMOOTH_CUBIC_BEZIER = "S"
    QUADRATIC_BEZIER = "Q"
    SMOOTH_QUADRATIC_BEZIER = "T"
    ARC = "A"
    END = "Z"

_LABELS = {label.value: label for label in CommandLabel}

@dataclass(frozen=True)
class PathCommand:
    relative: bool
    label: CommandLabel

    @classmethod
    def from_char(cls, ch: str) -> Optional["PathCommand"]:
        label = _LABELS.get(ch.upper())
        if label is None:
            return None
        if label is CommandLabel.END:
            return cls(False, label)
        return cls(ch.islower(), label)

    def repeated(self) -> "PathCommand":
        """Command implied by a bare number following this one."""
        # extra coordinate pairs after a moveto are implicit lineto
        if self.label is CommandLabel.MOVE:
            return PathCommand(self.relative, CommandLabel.LINE)
        return self

class PreviousKind(Enum):
    NOT_CURVE = "not_curve"
    CUBIC = "cubic"
    QUADRATIC = "quadratic"
    SUBPATH_ENDED = "subpath_ended"

@dataclass(frozen=True)
class PreviousCommand:
    kind: PreviousKind
    control: Optional[Point] = None

NOT_CURVE = PreviousCommand(PreviousKind.NOT_CURVE)
SUBPATH_ENDED = PreviousCommand(PreviousKind.SUBPATH_ENDED)
