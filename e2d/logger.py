"""A small prefixed console logger."""

from __future__ import annotations

import sys
from typing import Any, Optional, TextIO

from e2d.text import format_string


class Logger:
    """Writes formatted, prefixed lines to a stream while enabled."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self._enabled = True

    def enable(self) -> None:
        self._enabled = True

    def disable(self) -> None:
        self._enabled = False

    def is_enabled(self) -> bool:
        return self._enabled

    def _output(self, prompt: str, fmt: str, args: tuple) -> None:
        if not self._enabled:
            return
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"{prompt}{format_string(fmt, *args)}\n")
        stream.flush()

    def message(self, fmt: str, *args: Any) -> None:
        self._output(" ", fmt, args)

    def warning(self, fmt: str, *args: Any) -> None:
        self._output("Warning: ", fmt, args)

    def error(self, fmt: str, *args: Any) -> None:
        self._output("Error: ", fmt, args)