"""Receive ring buffer with the stream-scanning helpers used to pick out sentences."""

from __future__ import annotations

from collections import deque
from typing import AnyStr, Iterable, Optional, Union

UART_BUFFER_SIZE = 512
"""Default number of slots; one slot stays free, so this many minus one bytes fit."""

_Pattern = Union[bytes, bytearray, str]


def _as_bytes(pattern: _Pattern) -> bytes:
    data = pattern.encode("ascii") if isinstance(pattern, str) else bytes(pattern)
    if not data:
        raise ValueError("pattern must not be empty")
    return data


class RingBuffer:
    """Fixed-size byte queue that drops incoming bytes once it is full.

    The scanning methods never block: when the buffered data runs out they
    report failure, just as a read would after its timeout had expired.
    """

    def __init__(self, size: int = UART_BUFFER_SIZE) -> None:
        if size < 2:
            raise ValueError("a ring buffer needs at least two slots")
        self.size = size
        self._data: deque[int] = deque()

    @property
    def capacity(self) -> int:
        """Largest number of bytes the buffer holds at once."""
        return self.size - 1

    def __len__(self) -> int:
        return len(self._data)

    def store(self, byte: int) -> bool:
        """Append one byte; return False and drop it when the buffer is full."""
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"{byte} is not a byte value")
        if len(self._data) >= self.capacity:
            return False
        self._data.append(byte)
        return True

    def feed(self, data: Union[bytes, bytearray, str, Iterable[int]]) -> int:
        """Store every byte of ``data``; return how many were kept."""
        if isinstance(data, str):
            data = data.encode("ascii")
        return sum(self.store(byte) for byte in data)

    def read(self) -> Optional[int]:
        """Remove and return the oldest byte, or None when empty."""
        return self._data.popleft() if self._data else None

    def peek(self) -> Optional[int]:
        """Return the oldest byte without removing it, or None when empty."""
        return self._data[0] if self._data else None

    def available(self) -> int:
        """Number of bytes waiting to be read."""
        return len(self._data)

    def flush(self) -> None:
        """Discard everything buffered."""
        self._data.clear()

    def wait_for(self, pattern: _Pattern) -> bool:
        """Consume bytes up to and including ``pattern``.

        Returns True once the pattern has been consumed, False when the data
        runs out first. A partial match that breaks off restarts the search
        at the byte that broke it, so that byte is not skipped.
        """
        target = _as_bytes(pattern)
        data = self._data
        while data:
            while data and data[0] != target[0]:
                data.popleft()
            matched = 0
            while data and data[0] == target[matched]:
                data.popleft()
                matched += 1
                if matched == len(target):
                    return True
        return False

    def copy_upto(self, pattern: _Pattern) -> bytes:
        """Remove and return bytes up to and including ``pattern``.

        When the data runs out before the pattern is complete, everything
        consumed so far is returned; the result then does not end with it.
        """
        target = _as_bytes(pattern)
        data = self._data
        copied = bytearray()
        while data:
            while data and data[0] != target[0]:
                copied.append(data.popleft())
            matched = 0
            while data and data[0] == target[matched]:
                copied.append(data.popleft())
                matched += 1
                if matched == len(target):
                    return bytes(copied)
        return bytes(copied)

    def get_after(self, count: int) -> bytes:
        """Remove and return the next ``count`` bytes, fewer if the data runs out."""
        if count < 0:
            raise ValueError("count must not be negative")
        taken = min(count, len(self._data))
        return bytes(self._data.popleft() for _ in range(taken))


def look_for(needle: AnyStr, haystack: AnyStr) -> bool:
    """Tell whether ``needle`` occurs in ``haystack``."""
    return needle in haystack


def get_data_from_buffer(start: AnyStr, end: AnyStr, data: AnyStr) -> AnyStr:
    """Return what lies between the first ``start`` and the next ``end`` after it.

    Raises ValueError when either marker is missing.
    """
    try:
        begin = data.index(start) + len(start)
        finish = data.index(end, begin)
    except ValueError:
        raise ValueError("start or end marker not found in data") from None
    return data[begin:finish]