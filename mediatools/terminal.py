"""Raw terminal mode and ANSI escape sequences."""

from __future__ import annotations

import termios
import tty

CLEAR = "\x1b[2J"
LN = "\r\n"
RESET = "\x1b[0m"

_STDIN_FD = 0

_original: list | None = None


def enable_raw_mode() -> None:
    """Put standard input into raw mode, remembering its previous settings."""
    global _original
    try:
        _original = termios.tcgetattr(_STDIN_FD)
    except termios.error:
        return
    tty.setraw(_STDIN_FD, termios.TCSANOW)


def disable_raw_mode() -> None:
    """Restore the settings saved by enable_raw_mode, if any."""
    if _original is not None:
        termios.tcsetattr(_STDIN_FD, termios.TCSANOW, _original)


def set_cursor(row: int, col: int) -> str:
    """Escape sequence moving the cursor to row and column."""
    return f"\x1b[{row};{col}H"


def fg(r: int, g: int, b: int) -> str:
    """Escape sequence setting a 24-bit foreground colour."""
    return f"\x1b[38;2;{r};{g};{b}m"


def bg(r: int, g: int, b: int) -> str:
    """Escape sequence setting a 24-bit background colour."""
    return f"\x1b[48;2;{r};{g};{b}m"


class RawMode:
    """Context manager that keeps the terminal in raw mode while active."""

    def __enter__(self) -> RawMode:
        enable_raw_mode()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        disable_raw_mode()