"""String formatting and encoding helpers."""

from __future__ import annotations

import locale
from typing import Any, Optional, Union


def format_string(fmt: Optional[Union[str, bytes]], *args: Any) -> Union[str, bytes]:
    """Format ``fmt`` printf-style; ``None`` yields an empty string."""
    if fmt is None:
        return ""
    return fmt % args if args else fmt % ()


def _system_encoding(encoding: Optional[str]) -> str:
    return encoding or locale.getpreferredencoding(False)


def wide_to_narrow(text: str, encoding: Optional[str] = None) -> bytes:
    """Encode text with the system code page, replacing what it cannot hold."""
    if not text:
        return b""
    return text.encode(_system_encoding(encoding), errors="replace")


def narrow_to_wide(data: bytes, encoding: Optional[str] = None) -> str:
    """Decode bytes in the system code page, replacing invalid sequences."""
    if not data:
        return ""
    return data.decode(_system_encoding(encoding), errors="replace")