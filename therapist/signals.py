# Therapist CLI Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used internally by the therapist parser.

Signals interrupt the parse from deep inside descriptor consumption and are
caught by the parser of the scope that should answer them. They inherit from
`FlowSignal`, a subclass of `BaseException`, so they bypass `except Exception`
blocks in user supplied value parsers and handlers.

Signals:
- HelpSignal: A help descriptor was recognised; the active scope renders help.
"""
from __future__ import annotations

from typing import Any


class FlowSignal(BaseException):
    """Base class for all flow control signals in therapist.

    These are not errors. They carry control back to the parser that owns the
    scope in which they were raised.
    """


class HelpSignal(FlowSignal):
    """Raised to request help text for the active specification.

    Args:
        show_level: Highest help level to include in the rendered text.
        style: Layout to render with (a `HelpStyle` member).
        target: Optional command variant whose help should be shown instead
            of the active scope's own help.
    """

    def __init__(
        self,
        show_level: int = 0,
        style: Any = None,
        target: str | None = None,
        message: str = "Help signal received.",
    ):
        super().__init__(message)
        self.show_level = show_level
        self.style = style
        self.target = target
