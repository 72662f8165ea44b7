"""
Errors raised while decoding SLP files.

Every error keeps the byte offset where decoding stopped. The frame
assembler and the parser fill in the row and frame indices on the way up,
so the final message points at the exact place in the file.
"""

from typing import Optional


class SLPError(ValueError):
    """Base class for all SLP decoding errors."""

    def __init__(self, message: str, offset: Optional[int] = None):
        # args mirrors the constructor signature so errors survive pickling
        super().__init__(message, offset)
        self.message = message
        self.offset = offset
        self.frame: Optional[int] = None
        self.row: Optional[int] = None

    def __str__(self) -> str:
        context = []
        if self.frame is not None:
            context.append(f"frame {self.frame}")
        if self.row is not None:
            context.append(f"row {self.row}")
        if self.offset is not None:
            context.append(f"offset {self.offset:#x}")

        if not context:
            return self.message
        return f"{self.message} ({', '.join(context)})"


class TruncatedInput(SLPError):
    """A fixed-size, table or stream read went past the end of the buffer."""

    def __init__(self, offset: int, size: int, buffer_length: int):
        super().__init__(
            f"Cannot read {size} byte(s), buffer is only {buffer_length} byte(s) long",
            offset,
        )
        self.args = (offset, size, buffer_length)
        self.size = size
        self.buffer_length = buffer_length


class UnknownCommand(SLPError):
    def __init__(self, cmd: int, offset: int):
        super().__init__(f"Unknown draw command {cmd:#04x}", offset)
        self.args = (cmd, offset)
        self.cmd = cmd


class UnknownExtendedCommand(SLPError):
    def __init__(self, cmd: int, offset: int):
        super().__init__(f"Unknown extended draw command {cmd:#04x}", offset)
        self.args = (cmd, offset)
        self.cmd = cmd


class RowOverrun(SLPError):
    """The row produced a different number of pixels than its bounds allow."""

    def __init__(self, expected: int, decoded: int, offset: int):
        if decoded > expected:
            message = (
                f"Expected {expected} pixel(s), but read {decoded} "
                "without reaching end of row"
            )
        else:
            message = f"Expected {expected} pixel(s), but row ended after {decoded}"
        super().__init__(message, offset)
        self.args = (expected, decoded, offset)
        self.expected = expected
        self.decoded = decoded


class InvalidFrame(SLPError):
    """Frame info with negative or oversized dimensions."""
