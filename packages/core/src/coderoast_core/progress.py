"""Spinner shown while the completion request is outstanding."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager

from rich.console import Console

SPINNER = "dots"  # ⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏, 80 ms per frame
_REFRESH_PER_SECOND = 12.5


@contextmanager
def analyzing(console: Console, message: str = "Analyzing...") -> Generator[None, None, None]:
    """Animate a spinner on ``console`` for the duration of the block.

    The status display is transient: on every exit path, including an
    exception from the wrapped call, the refresh thread is stopped and the
    line cleared before this returns. Nothing may be printed to ``console``
    from inside the block.
    """
    with console.status(
        f"[cyan]{message}",
        spinner=SPINNER,
        spinner_style="cyan",
        refresh_per_second=_REFRESH_PER_SECOND,
    ):
        yield
