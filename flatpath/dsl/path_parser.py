"""
Streaming SVG path parser -> polylines.

    for closed, points in parse("M0,0 L10,0 L10,10 Z"):
        ...

Each item is one sub-path flattened at `resolution` samples per curve.
As in SVG renderers, malformed data silently ends the stream: the sub-path
in progress is emitted (not closed) and nothing after it. The reason is kept
on `parser.error`; pass strict=True to have it raised once the partial
sub-path has been handed out.
"""
from __future__ import annotations
from collections import deque
from enum import Enum
from typing import Callable, Deque, Dict, List, Optional, Tuple
import logging

from ..geometry.curves import flatten_arc, flatten_cubic, flatten_quadratic
from ..geometry.vectors import Point, add_point, reflect_point
from .commands import (
    NOT_CURVE, SUBPATH_ENDED, CommandLabel, PathCommand, PreviousCommand, PreviousKind,
)
from .tokenizer import PathSyntaxError, PathTokenizer

logger = logging.getLogger(__name__)

DEFAULT_RESOLUTION = 64

SubPath = Tuple[bool, List[Point]]

class ParserState(Enum):
    AWAITING_COMMAND = "awaiting_command"
    IN_SUBPATH = "in_subpath"
    HARD_ENDED = "hard_ended"
    EXHAUSTED = "exhausted"

class PathParser:
    """Lazy, non-restartable iterator of (closed, points) per sub-path."""

    def __init__(self, data: str, resolution: int = DEFAULT_RESOLUTION, strict: bool = False):
        self.resolution = resolution
        self.strict = strict
        self.cursor: Point = (0.0, 0.0)
        self.current_command: Optional[PathCommand] = None
        self.previous_command: PreviousCommand = NOT_CURVE
        self.error: Optional[PathSyntaxError] = None
        self._tokens = PathTokenizer(data)
        self._path: Optional[List[Point]] = None
        self._completed: Deque[SubPath] = deque()
        self._hard_ended = False
        self._exhausted = False
        self._raise_pending = False
        self._handlers: Dict[CommandLabel, Callable[[bool], PreviousCommand]] = {
            CommandLabel.MOVE: self._move,
            CommandLabel.LINE: self._line,
            CommandLabel.HORIZONTAL: self._horizontal,
            CommandLabel.VERTICAL: self._vertical,
            CommandLabel.CUBIC_BEZIER: self._cubic,
            CommandLabel.SMOOTH_CUBIC_BEZIER: self._smooth_cubic,
            CommandLabel.QUADRATIC_BEZIER: self._quadratic,
            CommandLabel.SMOOTH_QUADRATIC_BEZIER: self._smooth_quadratic,
            CommandLabel.ARC: self._arc,
            CommandLabel.END: self._end,
        }

    def __iter__(self) -> "PathParser":
        return self

    def __next__(self) -> SubPath:
        item = self.get_path()
        if item is None:
            raise StopIteration
        return item

    @property
    def state(self) -> ParserState:
        if self._hard_ended:
            return ParserState.HARD_ENDED
        if self._exhausted:
            return ParserState.EXHAUSTED
        return ParserState.IN_SUBPATH if self._path else ParserState.AWAITING_COMMAND

    # ---------------- driving ----------------

    def get_path(self) -> Optional[SubPath]:
        """Pull the next complete sub-path, None once the data is used up."""
        while not self._completed and not (self._hard_ended or self._exhausted):
            try:
                more = self.advance()
            except PathSyntaxError as exc:
                self._hard_end(exc)
            else:
                if not more:
                    self._finish_path(closed=False)
                    self._exhausted = True
        if self._completed:
            return self._completed.popleft()
        if self._raise_pending:
            self._raise_pending = False
            raise self.error
        return None

    def advance(self) -> bool:
        """Parse one command. Returns False when only separators are left."""
        tokens = self._tokens
        tokens.skip_separators()
        ch = tokens.peek()
        if ch is None:
            return False
        offset = tokens.pos
        if tokens.at_number():
            # Z takes no operands, so a number cannot repeat it
            if self.current_command is None or self.current_command.label is CommandLabel.END:
                raise PathSyntaxError("number without a command", offset)
            command = self.current_command.repeated()
        else:
            tokens.next_char()
            command = PathCommand.from_char(ch)
            if command is None:
                raise PathSyntaxError(f"unknown command {ch!r}", offset)

        self.current_command = command
        self.previous_command = self._handlers[command.label](command.relative)
        return True

    def _hard_end(self, exc: PathSyntaxError) -> None:
        logger.debug("stopped parsing path data: %s", exc)
        self.error = exc
        self._finish_path(closed=False)
        self._hard_ended = True
        self._raise_pending = self.strict

    # ---------------- sub-path bookkeeping ----------------

    def _finish_path(self, closed: bool) -> None:
        if self._path:
            self._completed.append((closed, self._path))
        self._path = None

    def _append(self, p: Point) -> None:
        if p != self._path[-1]:
            self._path.append(p)

    def _extend(self, points: List[Point], end: Point) -> None:
        # an active sub-path must exist and end at the cursor
        if self._path is None:
            self._path = [self.cursor]
        else:
            self._append(self.cursor)
        if not points:
            return
        # samples run from the cursor to `end`; both are taken exactly
        for p in points[1:-1]:
            self._append(p)
        self._append(end)
        self.cursor = end

    def _point(self, relative: bool) -> Point:
        x = self._tokens.read_number()
        y = self._tokens.read_number()
        if relative:
            return add_point(self.cursor, (x, y))
        return (x, y)

    def _reflected_control(self, kind: PreviousKind) -> Point:
        prev = self.previous_command
        if prev.kind is kind:
            return reflect_point(prev.control, self.cursor)
        return self.cursor

    # ---------------- command handlers ----------------

    def _move(self, relative: bool) -> PreviousCommand:
        target = self._point(relative)
        self._finish_path(closed=False)
        self.cursor = target
        self._path = [target]
        return NOT_CURVE

    def _line_to(self, end: Point) -> PreviousCommand:
        self._extend([end], end)
        return NOT_CURVE

    def _line(self, relative: bool) -> PreviousCommand:
        return self._line_to(self._point(relative))

    def _horizontal(self, relative: bool) -> PreviousCommand:
        x = self._tokens.read_number()
        if relative:
            x += self.cursor[0]
        return self._line_to((x, self.cursor[1]))

    def _vertical(self, relative: bool) -> PreviousCommand:
        y = self._tokens.read_number()
        if relative:
            y += self.cursor[1]
        return self._line_to((self.cursor[0], y))

    def _cubic_to(self, p1: Point, p2: Point, end: Point) -> PreviousCommand:
        self._extend(flatten_cubic(self.cursor, p1, p2, end, self.resolution), end)
        return PreviousCommand(PreviousKind.CUBIC, p2)

    def _cubic(self, relative: bool) -> PreviousCommand:
        p1 = self._point(relative)
        p2 = self._point(relative)
        end = self._point(relative)
        return self._cubic_to(p1, p2, end)

    def _smooth_cubic(self, relative: bool) -> PreviousCommand:
        p2 = self._point(relative)
        end = self._point(relative)
        p1 = self._reflected_control(PreviousKind.CUBIC)
        return self._cubic_to(p1, p2, end)

    def _quadratic_to(self, p1: Point, end: Point) -> PreviousCommand:
        self._extend(flatten_quadratic(self.cursor, p1, end, self.resolution), end)
        return PreviousCommand(PreviousKind.QUADRATIC, p1)

    def _quadratic(self, relative: bool) -> PreviousCommand:
        p1 = self._point(relative)
        end = self._point(relative)
        return self._quadratic_to(p1, end)

    def _smooth_quadratic(self, relative: bool) -> PreviousCommand:
        end = self._point(relative)
        p1 = self._reflected_control(PreviousKind.QUADRATIC)
        return self._quadratic_to(p1, end)

    def _arc(self, relative: bool) -> PreviousCommand:
        tokens = self._tokens
        # radii are lengths, never offsets from the cursor
        radii = (tokens.read_number(), tokens.read_number())
        rotation = tokens.read_number()
        large = tokens.read_flag()
        sweep = tokens.read_flag()
        end = self._point(relative)
        points = flatten_arc(self.cursor, radii, rotation, large, sweep, end, self.resolution)
        self._extend(points, end)
        return NOT_CURVE

    def _end(self, relative: bool) -> PreviousCommand:
        if self._path:
            self.cursor = self._path[0]
            self._append(self.cursor)
            self._finish_path(closed=True)
        return SUBPATH_ENDED

def parse(data: str, strict: bool = False) -> PathParser:
    return PathParser(data, DEFAULT_RESOLUTION, strict=strict)

def parse_with_resolution(data: str, resolution: int, strict: bool = False) -> PathParser:
    return PathParser(data, resolution, strict=strict)

def flatten_path(data: str, resolution: int = DEFAULT_RESOLUTION) -> List[SubPath]:
    """Flatten all sub-paths of `data` eagerly."""
    return list(PathParser(data, resolution))
