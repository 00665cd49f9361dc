"""Raw-mode terminal host: key decoding, window size and frame output."""

from __future__ import annotations

import errno
import fcntl
import os
import signal
import struct
import sys
import termios
from contextlib import AbstractContextManager
from typing import Callable, Optional, Tuple

from vin.modes.base_mode import KeyInput
from vin.runtime import telemetry
from vin.runtime.loop import EventLoop

ESC = 0x1B
ENTER = 0x0D
BACKSPACE = 0x7F
TAB = 0x09

ENTER_ALT_SCREEN = b"\x1b[?1049h"
LEAVE_ALT_SCREEN = b"\x1b[?1049l"
CLEAR_SCREEN = b"\x1b[2J\x1b[H"

ByteReader = Callable[[], Optional[int]]

_TILDE_KEYS = {
    "1": "HOME",
    "3": "DELETE",
    "4": "END",
    "5": "PAGE_UP",
    "6": "PAGE_DOWN",
    "7": "HOME",
    "8": "END",
}

_CSI_KEYS = {
    "A": "UP",
    "B": "DOWN",
    "C": "RIGHT",
    "D": "LEFT",
    "H": "HOME",
    "F": "END",
}

_SS3_KEYS = {"H": "HOME", "F": "END"}


def _escape_sequence(read_byte: ByteReader) -> KeyInput:
    seq0 = read_byte()
    if seq0 is None:
        return KeyInput("ESC")
    seq1 = read_byte()
    if seq1 is None:
        return KeyInput("ESC")

    first, second = chr(seq0), chr(seq1)
    name: Optional[str] = None
    if first == "[":
        if second.isdigit():
            seq2 = read_byte()
            if seq2 is not None and chr(seq2) == "~":
                name = _TILDE_KEYS.get(second)
        else:
            name = _CSI_KEYS.get(second)
    elif first == "O":
        name = _SS3_KEYS.get(second)
    return KeyInput(name or "ESC")


def decode_byte(c: int, read_byte: ByteReader) -> KeyInput:
    """Turn the first byte of a key (plus any escape tail) into a ``KeyInput``."""

    if c == ESC:
        return _escape_sequence(read_byte)
    if c == ENTER:
        return KeyInput("ENTER")
    if c == BACKSPACE:
        return KeyInput("BACKSPACE")
    if c == TAB:
        return KeyInput("TAB", text="\t")
    if c < 0x20:
        return KeyInput(chr(c + 0x40).lower(), modifiers=("ctrl",))
    ch = chr(c)
    return KeyInput(ch, text=ch)


def read_key(read_byte: ByteReader) -> Optional[KeyInput]:
    """Read one logical key, or ``None`` when the read timed out."""

    c = read_byte()
    if c is None:
        return None
    return decode_byte(c, read_byte)


def _read_byte_once(fd: int) -> Optional[int]:
    try:
        data = os.read(fd, 1)
    except InterruptedError:
        return None
    if not data:
        return None
    return data[0]


def get_window_size(fd: int) -> Tuple[int, int]:
    packed = fcntl.ioctl(fd, termios.TIOCGWINSZ, struct.pack("HHHH", 0, 0, 0, 0))
    rows, cols, _, _ = struct.unpack("HHHH", packed)
    if not cols:
        raise OSError(errno.EIO, "Unable to query screen size")
    return rows, cols


class RawMode(AbstractContextManager["RawMode"]):
    """Put the terminal in raw mode with a 100 ms read timeout."""

    def __init__(self, fd: int) -> None:
        self.fd = fd
        self._orig: list | None = None

    def __enter__(self) -> "RawMode":
        if not os.isatty(self.fd):
            raise OSError(errno.ENOTTY, "stdin is not a tty")

        self._orig = termios.tcgetattr(self.fd)
        raw = termios.tcgetattr(self.fd)
        raw[0] &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON)
        raw[1] &= ~termios.OPOST
        raw[2] |= termios.CS8
        raw[3] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
        raw[6][termios.VMIN] = 0
        raw[6][termios.VTIME] = 1
        termios.tcsetattr(self.fd, termios.TCSAFLUSH, raw)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._orig is not None:
            termios.tcsetattr(self.fd, termios.TCSAFLUSH, self._orig)
            self._orig = None


class TerminalHost(AbstractContextManager["TerminalHost"]):
    """Key source and frame sink bound to a pair of terminal descriptors."""

    def __init__(self, stdin_fd: Optional[int] = None, stdout_fd: Optional[int] = None) -> None:
        self.stdin_fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
        self.stdout_fd = sys.stdout.fileno() if stdout_fd is None else stdout_fd
        self._raw = RawMode(self.stdin_fd)

    def __enter__(self) -> "TerminalHost":
        self._raw.__enter__()
        self.flush(ENTER_ALT_SCREEN)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            self.flush(CLEAR_SCREEN + LEAVE_ALT_SCREEN)
        finally:
            self._raw.__exit__(exc_type, exc, tb)

    def poll_key(self) -> Optional[KeyInput]:
        return read_key(lambda: _read_byte_once(self.stdin_fd))

    def window_size(self) -> Tuple[int, int]:
        return get_window_size(self.stdout_fd)

    def flush(self, frame: bytes) -> None:
        view = memoryview(frame)
        while view:
            written = os.write(self.stdout_fd, view)
            view = view[written:]


def install_resize_handler(loop: EventLoop) -> object:
    """Route SIGWINCH onto ``loop``'s queue; return the previous handler."""

    def _on_sigwinch(_signum: int, _frame) -> None:
        loop.request_resize()

    return signal.signal(signal.SIGWINCH, _on_sigwinch)


def run_terminal(loop_factory: Callable[[TerminalHost], EventLoop]) -> None:
    """Run an event loop against the controlling terminal until it quits."""

    with TerminalHost() as host:
        loop = loop_factory(host)
        previous = install_resize_handler(loop)
        try:
            loop.run()
        finally:
            signal.signal(
                signal.SIGWINCH, previous if previous is not None else signal.SIG_DFL
            )
    telemetry.record_event("terminal.closed", level="debug")


__all__ = [
    "read_key",
    "decode_byte",
    "get_window_size",
    "RawMode",
    "TerminalHost",
    "install_resize_handler",
    "run_terminal",
]
