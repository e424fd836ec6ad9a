"""Debug logging and UTF-8 text conversion."""

from __future__ import annotations

import logging
from typing import Union, overload

_logger = logging.getLogger(__name__)


def output_log(message: str) -> None:
    """Send ``message`` to the debug log."""
    _logger.debug("%s", message)


@overload
def convert_string(value: bytes) -> str: ...


@overload
def convert_string(value: str) -> bytes: ...


def convert_string(value: Union[bytes, str]) -> Union[str, bytes]:
    """Convert UTF-8 bytes to text, or text to UTF-8 bytes.

    Malformed input is replaced with U+FFFD rather than raising.
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, str):
        cleaned = value.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")
        return cleaned.encode("utf-8")
    raise TypeError(f"expected bytes or str, got {type(value).__name__}")