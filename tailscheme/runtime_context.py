from __future__ import annotations
import sys
from typing import Optional, TextIO

# NOTE: process-global. The print primitive writes here; hosts and tests swap it.
_output: Optional[TextIO] = None


def set_output(stream: Optional[TextIO]) -> None:
    """Redirect primitive output; None restores the current sys.stdout."""
    global _output
    _output = stream


def get_output() -> TextIO:
    # Resolved lazily so pytest's capsys replacement of sys.stdout is honoured
    return _output if _output is not None else sys.stdout
