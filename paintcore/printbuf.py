"""A growable byte buffer with printf-style appending."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview, str]


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class PrintBuffer:
    """Accumulates bytes; supports appending, filling and formatted output."""

    def __init__(self) -> None:
        self._buf = bytearray()

    def append(self, data: BytesLike) -> int:
        """Append raw data and return the number of bytes added."""
        chunk = _as_bytes(data)
        self._buf += chunk
        return len(chunk)

    def memset(self, offset: int, char_value: int, length: int) -> None:
        """Set ``length`` bytes to ``char_value`` starting at ``offset``.

        An offset of -1 starts at the end of the current data. The buffer
        grows as needed; any gap before ``offset`` is filled with zero bytes.
        """
        if offset == -1:
            offset = len(self._buf)
        if offset < 0:
            raise ValueError(f"invalid offset: {offset}")
        if length < 0:
            raise ValueError(f"invalid length: {length}")
        end = offset + length
        if len(self._buf) < end:
            self._buf.extend(bytes(end - len(self._buf)))
        self._buf[offset:end] = bytes([char_value & 0xFF]) * length

    def printf(self, fmt: str, *args: object) -> int:
        """Append ``fmt % args`` and return the number of bytes added."""
        return self.append(fmt % args)

    def reset(self) -> None:
        """Discard all content."""
        self._buf.clear()

    def getvalue(self) -> bytes:
        """Return the current content."""
        return bytes(self._buf)

    def __len__(self) -> int:
        return len(self._buf)