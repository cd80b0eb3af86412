from __future__ import annotations

"""Full-screen terminal session: alternate screen plus single-key input."""

import os
import select
import sys
import termios
import tty
from typing import Any, List, Optional

from rich.console import Console, RenderableType
from rich.live import Live
from rich.text import Text

from crypto_tracker.utils.errors import TerminalError
from crypto_tracker.utils.logging import get_logger


logger = get_logger(__name__)


class TerminalSession:
    """Owns the terminal between ``__enter__`` and ``__exit__``.

    Entering saves the tty attributes, switches stdin to cbreak mode and opens
    the alternate screen. Exiting undoes both, once.
    """

    def __init__(self, console: Optional[Console] = None, stdin: Any = None) -> None:
        self.console = console or Console()
        self._stdin = stdin if stdin is not None else sys.stdin
        self._fd: Optional[int] = None
        self._saved_attrs: Optional[List[Any]] = None
        self._live: Optional[Live] = None

    def __enter__(self) -> "TerminalSession":
        self.acquire()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.release()
        return False

    @property
    def active(self) -> bool:
        return self._live is not None

    def acquire(self) -> None:
        if self.active:
            raise TerminalError("Terminal session already acquired")
        try:
            self._fd = self._stdin.fileno()
            self._saved_attrs = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd)
        except (OSError, ValueError, termios.error) as e:
            self._fd = None
            self._saved_attrs = None
            raise TerminalError(f"Unable to switch terminal to single-key input mode: {e}") from e

        live = Live(Text(""), console=self.console, screen=True, auto_refresh=False)
        try:
            live.start()
        except Exception as e:
            self._restore_input_mode()
            raise TerminalError(f"Unable to open the alternate screen: {e}") from e
        self._live = live
        logger.debug("Terminal session acquired")

    def release(self) -> None:
        if self._live is None:
            return
        live, self._live = self._live, None
        try:
            live.stop()
        finally:
            self._restore_input_mode()
        logger.debug("Terminal session released")

    def _restore_input_mode(self) -> None:
        if self._fd is None or self._saved_attrs is None:
            return
        fd, attrs = self._fd, self._saved_attrs
        self._fd = None
        self._saved_attrs = None
        try:
            termios.tcsetattr(fd, termios.TCSADRAIN, attrs)
        except termios.error as e:
            raise TerminalError(f"Unable to restore terminal input mode: {e}") from e

    def draw(self, renderable: RenderableType) -> None:
        if self._live is None:
            raise TerminalError("Terminal session is not active")
        self._live.update(renderable, refresh=True)

    def read_key(self, timeout: float) -> Optional[str]:
        """Wait up to ``timeout`` seconds for one key press."""
        if self._fd is None:
            raise TerminalError("Terminal session is not active")
        ready, _, _ = select.select([self._fd], [], [], timeout)
        if not ready:
            return None
        data = os.read(self._fd, 1)
        if not data:
            return None
        return data.decode("utf-8", errors="ignore") or None
