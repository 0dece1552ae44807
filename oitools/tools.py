"""Timestamped log writer, a millisecond stopwatch and small file/random helpers."""

from __future__ import annotations

import os
import random
import sys
import time
from datetime import datetime
from types import TracebackType
from typing import IO, Optional, Union

_CHUNK = 1 << 16
_RAND_MAX = (1 << 31) - 1


class LogWriter:
    """Writes lines such as ``[2024-01-02 03:04:05:006] INFO: message``.

    The target may be a path (opened for appending and closed by ``close``),
    an open text stream (left open), or ``None`` for standard output.
    """

    def __init__(self, target: Union[str, os.PathLike, IO[str], None] = None) -> None:
        if target is None:
            self._stream: IO[str] = sys.stdout
            self._owned = False
        elif isinstance(target, (str, os.PathLike)):
            self._stream = open(target, "a", encoding="utf-8")
            self._owned = True
        else:
            self._stream = target
            self._owned = False

    @staticmethod
    def _stamp() -> str:
        now = datetime.now()
        return (
            f"{now.year:04d}-{now.month:02d}-{now.day:02d} "
            f"{now.hour:02d}:{now.minute:02d}:{now.second:02d}:"
            f"{now.microsecond // 1000:03d}"
        )

    def write(self, msg: str, level: str) -> None:
        """Write ``msg`` with the given level name."""
        self._stream.write(f"[{self._stamp()}] {level}: {msg}\n")

    def info(self, msg: str) -> None:
        """Write ``msg`` at level ``INFO``."""
        self.write(msg, "INFO")

    def close(self) -> None:
        """Close the underlying file if this writer opened it."""
        if self._owned and not self._stream.closed:
            self._stream.close()

    def __enter__(self) -> "LogWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()


class StopwatchMs:
    """Stopwatch toggled on and off; reports the last measured span in milliseconds."""

    def __init__(self) -> None:
        self._start: Optional[int] = None
        self._end: Optional[int] = None
        self.running = False

    def toggle(self) -> None:
        """Start timing if stopped, otherwise stop."""
        now = time.perf_counter_ns()
        if not self.running:
            self._start = now
            self._end = None
            self.running = True
        else:
            self._end = now
            self.running = False

    def result(self) -> int:
        """Whole milliseconds between the last start and stop."""
        if self._start is None or self._end is None:
            raise RuntimeError("stopwatch has not completed a measurement")
        return (self._end - self._start) // 1_000_000


def xor_invert_file(path: Union[str, os.PathLike], key: int) -> None:
    """Replace each byte ``c`` at offset ``i`` by ``~c ^ key_byte[i % 8]`` in place.

    The key bytes are the little-endian bytes of the 64-bit ``key``. Applying
    the transformation twice with the same key restores the file.
    """
    try:
        keys = key.to_bytes(8, "little")
    except OverflowError:
        raise ValueError("key must fit in 64 unsigned bits") from None
    offset = 0
    with open(path, "r+b") as fh:
        while True:
            fh.seek(offset)
            chunk = fh.read(_CHUNK)
            if not chunk:
                break
            out = bytes(
                (~c ^ keys[(offset + i) % 8]) & 0xFF for i, c in enumerate(chunk)
            )
            fh.seek(offset)
            fh.write(out)
            offset += len(chunk)


def random_list(size: int) -> list[int]:
    """A list of ``size`` random non-negative integers below ``2**31``."""
    if size < 0:
        raise ValueError("size must be non-negative")
    return [random.randint(0, _RAND_MAX) for _ in range(size)]