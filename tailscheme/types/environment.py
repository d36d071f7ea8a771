"""Runtime environment for tailscheme.

An Environment is a chain of frames, innermost first. Each frame holds two
parallel sequences: names (Symbols) and values. Lookup walks the chain from the
innermost frame outwards and, inside a frame, scans names left to right.

A frame can be created open (both sequences empty), captured by closures, and
closed exactly once afterwards. Closing fills the frame in place, so every
environment that already links to it sees the final bindings. This is how
letrec ties its knot: the closures of a group capture the open frame and
observe the whole group once it is closed. Between open and close the frame
belongs to the evaluator that created it; nobody else writes to it.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional, Sequence

from tailscheme import LispValue
from tailscheme.errors import SchemeError, SchemeArityError, SchemeUnboundSymbol
from tailscheme.types.symbol import Symbol


class Frame:
    """One binding scope: parallel names and values, possibly not yet closed."""

    __slots__ = ("names", "values", "closed")

    def __init__(self, names: Sequence[Symbol] = (), values: Sequence[LispValue] = (), closed: bool = True):
        if len(names) != len(values):
            raise SchemeArityError(
                f"Frame needs as many values as names: {len(names)} names, {len(values)} values"
            )
        self.names: tuple[Symbol, ...] = tuple(names)
        self.values: tuple[LispValue, ...] = tuple(values)
        self.closed = closed

    @classmethod
    def open(cls) -> Frame:
        """A frame with no bindings yet, to be closed later."""
        return cls(closed=False)

    def close(self, names: Sequence[Symbol], values: Sequence[LispValue]) -> None:
        """Fix the frame's contents in place. Only allowed once, on an open frame."""
        if self.closed:
            raise SchemeError("Frame is already closed")
        if len(names) != len(values):
            raise SchemeArityError(
                f"Frame needs as many values as names: {len(names)} names, {len(values)} values"
            )
        self.names = tuple(names)
        self.values = tuple(values)
        self.closed = True

    def index(self, name: Symbol) -> int:
        """Position of the first binding of `name`, or -1."""
        for i, n in enumerate(self.names):
            if n == name:
                return i
        return -1

    def __len__(self) -> int:
        return len(self.names)


class Environment:
    """Chain of Frames. The empty environment has no frame and no outer link."""

    __slots__ = ("frame", "outer")

    def __init__(self, frame: Optional[Frame] = None, outer: Optional[Environment] = None):
        self.frame: Frame | None = frame
        self.outer: Environment | None = outer

    @classmethod
    def empty(cls) -> Environment:
        return cls()

    def extend(self, names: Sequence[Symbol], values: Sequence[LispValue]) -> Environment:
        """Return a new environment with one closed frame on top of this one."""
        return Environment(Frame(names, values), self)

    def extend_frame(self, frame: Frame) -> Environment:
        """Return a new environment with `frame` (open or closed) on top of this one."""
        return Environment(frame, self)

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`, innermost frame first.

        Raises SchemeUnboundSymbol if no frame binds it.
        """
        env: Optional[Environment] = self
        while env is not None:
            frame = env.frame
            if frame is not None:
                i = frame.index(name)
                if i >= 0:
                    return frame.values[i]
            env = env.outer
        raise SchemeUnboundSymbol(f"Unbound identifier {name}")

    def depth(self) -> int:
        """Number of frames in the chain."""
        n = 0
        env: Optional[Environment] = self
        while env is not None:
            if env.frame is not None:
                n += 1
            env = env.outer
        return n

    def _write_frame(self, buffer: StringIO) -> None:
        """Write this frame's names in a compact form. Values are omitted; they may be cyclic."""
        buffer.write("{")
        if self.frame is not None:
            buffer.write(" ".join(str(n) for n in self.frame.names))
            if not self.frame.closed:
                buffer.write(" <open>")
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_frame(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env = self
            chain = []
            while env is not None:
                env_buf = StringIO()
                env._write_frame(env_buf)
                chain.append(env_buf.getvalue())
                env = env.outer
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
