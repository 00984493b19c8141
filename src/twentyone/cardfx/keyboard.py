# src/twentyone/cardfx/keyboard.py
from __future__ import annotations

import sys
from typing import List, Optional, TextIO

import termios
import tty


class Keyboard:
    """
    Terminal input for the game.

    - open(): echo off for the whole session (stray keys must not print over the table)
    - read_key(): one raw keystroke, no Enter needed; Ctrl-C arrives as '\\x03'
    - read_line(): one line with echo switched back on
    - close(): restore the terminal exactly as we found it
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdin
        self._saved: Optional[List] = None

    def _fd(self) -> Optional[int]:
        if not self.stream.isatty():
            return None
        return self.stream.fileno()

    def _set_echo(self, enabled: bool) -> None:
        fd = self._fd()
        if fd is None:
            return
        attrs = termios.tcgetattr(fd)
        if enabled:
            attrs[3] |= termios.ECHO
        else:
            attrs[3] &= ~termios.ECHO
        termios.tcsetattr(fd, termios.TCSADRAIN, attrs)

    def open(self) -> None:
        fd = self._fd()
        if fd is None:
            return
        self._saved = termios.tcgetattr(fd)
        self._set_echo(False)

    def close(self) -> None:
        fd = self._fd()
        if fd is None or self._saved is None:
            return
        termios.tcsetattr(fd, termios.TCSADRAIN, self._saved)
        self._saved = None

    def read_key(self) -> str:
        fd = self._fd()
        if fd is None:
            return self._read_char()
        before = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            return self._read_char()
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, before)

    def read_line(self) -> str:
        self._set_echo(True)
        try:
            line = self.stream.readline()
        finally:
            self._set_echo(False)
        if not line:
            raise EOFError("Input closed")
        return line.rstrip("\r\n")

    def _read_char(self) -> str:
        ch = self.stream.read(1)
        if not ch:
            raise EOFError("Input closed")
        return ch
