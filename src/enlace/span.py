"""Link spans.

Provides the Span dataclass returned by every matcher.

Thread Safety:
Span is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open byte range ``[start, end)`` into a text buffer.

    Matchers narrow a span with local cursors and return a fresh Span
    once the boundaries are final, so a Span seen by a caller is never
    modified afterwards.

    Attributes:
        start: Offset of the first byte of the link
        end: Offset one past the last byte of the link

    Examples:
            >>> span = Span(4, 19)
            >>> len(span)
            15
            >>> span.slice(b"see www.example.com.")
            b'www.example.com'

    """

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return f"[{self.start}, {self.end})"

    def slice(self, data: bytes | bytearray | memoryview) -> bytes:
        """Return the bytes covered by this span."""
        return bytes(data[self.start : self.end])

    def fits(self, size: int) -> bool:
        """Whether this is a non-empty span lying inside a buffer of ``size`` bytes."""
        return 0 <= self.start < self.end <= size
