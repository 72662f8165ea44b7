"""
Data structures for decoded SLP files.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

import numpy as np

from .constants import SLPFormat
from .pixel import Pixel, PixelType


def _decode_ascii(raw: bytes) -> str:
    return raw.decode("ascii", errors="replace")


@dataclass(frozen=True)
class SLPHeader:
    """File header, always the first 32 bytes."""

    version: bytes = b"\x00" * SLPFormat.VERSION_SIZE
    frame_count: int = 0
    comment: bytes = b"\x00" * SLPFormat.COMMENT_SIZE

    @property
    def version_string(self) -> str:
        return _decode_ascii(self.version)

    @property
    def comment_text(self) -> str:
        return _decode_ascii(self.comment.rstrip(b"\x00"))

    @property
    def is_known_version(self) -> bool:
        return self.version in SLPFormat.KNOWN_VERSIONS


class FrameType(Enum):
    MAIN = "MAIN"
    SHADOW = "SHADOW"


@dataclass(frozen=True)
class FrameInfo:
    """Frame metadata record.

    All offsets are absolute positions in the file buffer.
    """

    cmd_table_offset: int = 0
    bounds_table_offset: int = 0
    palette_offset: int = 0
    properties: int = 0
    width: int = 0
    height: int = 0
    anchor_x: int = 0
    anchor_y: int = 0
    frame_type: FrameType = FrameType.MAIN
    version: bytes = b"\x00" * SLPFormat.VERSION_SIZE

    @property
    def is_valid(self) -> bool:
        return self.width >= 0 and self.height >= 0

    @property
    def version_string(self) -> str:
        return _decode_ascii(self.version)


@dataclass(frozen=True)
class RowBound:
    """Transparent padding on both sides of a row."""

    left: int = 0
    right: int = 0
    full_row: bool = False

    @classmethod
    def from_raw(cls, left: int, right: int) -> "RowBound":
        if (
            left == SLPFormat.FULL_ROW_TRANSPARENT
            or right == SLPFormat.FULL_ROW_TRANSPARENT
        ):
            return cls(0, 0, True)
        return cls(left, right, False)


class SLPFrame:
    """Decoded frame.

    Pixels are stored as two (height, width) uint8 arrays: the PixelType
    value of every pixel and its palette index. Both arrays are read-only.
    """

    def __init__(
        self,
        bounds_table: List[RowBound],
        cmd_table: List[int],
        kinds: np.ndarray,
        indices: np.ndarray,
    ):
        if kinds.shape != indices.shape or kinds.ndim != 2:
            raise ValueError(
                f"Pixel arrays must share a 2D shape, got {kinds.shape} and {indices.shape}"
            )

        self.bounds_table = tuple(bounds_table)
        self.cmd_table = tuple(cmd_table)
        self.kinds = kinds
        self.indices = indices
        self.kinds.flags.writeable = False
        self.indices.flags.writeable = False

    @property
    def height(self) -> int:
        return self.kinds.shape[0]

    @property
    def width(self) -> int:
        return self.kinds.shape[1]

    @property
    def pixel_count(self) -> int:
        return self.kinds.size

    def pixel_at(self, row: int, col: int) -> Pixel:
        return Pixel(PixelType(int(self.kinds[row, col])), int(self.indices[row, col]))

    def row_pixels(self, row: int) -> List[Pixel]:
        return [
            Pixel(PixelType(int(kind)), int(index))
            for kind, index in zip(self.kinds[row], self.indices[row])
        ]

    @property
    def pixels(self) -> List[List[Pixel]]:
        """Row-major pixel grid."""
        return [self.row_pixels(row) for row in range(self.height)]


@dataclass
class SLPFile:
    """Decoded SLP file. frames[i] is decoded from frame_infos[i]."""

    header: SLPHeader = field(default_factory=SLPHeader)
    frame_infos: List[FrameInfo] = field(default_factory=list)
    frames: List[SLPFrame] = field(default_factory=list)
