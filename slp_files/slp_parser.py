"""
SLP file parser for reading .slp sprite files.
"""

from typing import List, Optional

import numpy as np

from .binary import read_bytes, read_int32, read_uint16, read_uint32
from .constants import SLPFormat
from .errors import InvalidFrame, SLPError
from .pixel import PixelType
from .row_decoder import decode_row
from .sprite import (
    FrameInfo,
    FrameType,
    RowBound,
    SLPFile,
    SLPFrame,
    SLPHeader,
)
from data import DEBUG


def read_header(data: bytes) -> SLPHeader:
    """Read the 32 byte file header at offset 0."""
    raw = read_bytes(data, 0, SLPFormat.HEADER_SIZE)
    return SLPHeader(
        version=raw[0:4],
        frame_count=read_uint32(raw, 4),
        comment=raw[8:32],
    )


def read_frame_info(
    data: bytes,
    index: int,
    version: bytes = b"\x00" * SLPFormat.VERSION_SIZE,
    frame_type: FrameType = FrameType.MAIN,
) -> FrameInfo:
    """Read the frame info record of the frame at index.

    Records follow the header back to back, 32 bytes each.
    """
    offset = SLPFormat.HEADER_SIZE + index * SLPFormat.FRAME_INFO_SIZE
    raw = read_bytes(data, offset, SLPFormat.FRAME_INFO_SIZE)
    return FrameInfo(
        cmd_table_offset=read_uint32(raw, 0),
        bounds_table_offset=read_uint32(raw, 4),
        palette_offset=read_uint32(raw, 8),
        properties=read_uint32(raw, 12),
        width=read_int32(raw, 16),
        height=read_int32(raw, 20),
        anchor_x=read_int32(raw, 24),
        anchor_y=read_int32(raw, 28),
        frame_type=frame_type,
        version=version,
    )


def _check_dimensions(frame_info: FrameInfo) -> None:
    if not frame_info.is_valid:
        raise InvalidFrame(
            f"Invalid frame size {frame_info.width}x{frame_info.height}"
        )
    # Row bounds are u16, wider frames cannot be described by the format
    if frame_info.width > SLPFormat.MAX_FRAME_WIDTH:
        raise InvalidFrame(
            f"Frame width {frame_info.width} exceeds {SLPFormat.MAX_FRAME_WIDTH}"
        )


def decode_bounds_table(data: bytes, frame_info: FrameInfo) -> List[RowBound]:
    """Read one row bound per row of the frame."""
    _check_dimensions(frame_info)

    bounds_table = []
    for row in range(frame_info.height):
        pos = frame_info.bounds_table_offset + row * SLPFormat.ROW_BOUND_SIZE
        left = read_uint16(data, pos)
        right = read_uint16(data, pos + 2)
        bounds_table.append(RowBound.from_raw(left, right))

    return bounds_table


def decode_cmd_table(data: bytes, frame_info: FrameInfo) -> List[int]:
    """Read the absolute offset of every row's first command."""
    _check_dimensions(frame_info)

    pos = frame_info.cmd_table_offset
    return [
        read_uint32(data, pos + row * SLPFormat.ROW_OFFSET_SIZE)
        for row in range(frame_info.height)
    ]


def decode_frame(
    data: bytes,
    frame_info: FrameInfo,
    bounds_table: List[RowBound],
    cmd_table: List[int],
) -> SLPFrame:
    """Decode every row of a frame into its pixel arrays.

    Raises:
        SLPError: Any row decoding error, with its row attribute set
    """
    _check_dimensions(frame_info)

    height, width = frame_info.height, frame_info.width
    kinds = np.zeros((height, width), dtype=np.uint8)
    indices = np.zeros((height, width), dtype=np.uint8)

    for row in range(height):
        if bounds_table[row].full_row:
            kinds[row] = PixelType.TRANSPARENT
            continue

        try:
            pixels, end_offset = decode_row(
                data, bounds_table[row], cmd_table[row], width
            )
        except SLPError as e:
            e.row = row
            raise

        kinds[row] = [pixel.kind for pixel in pixels]
        indices[row] = [pixel.index for pixel in pixels]

        if DEBUG:
            print(
                f"[DEBUG] Row {row}: {cmd_table[row]:#x} -> {end_offset:#x}, "
                f"bounds {bounds_table[row].left}/{bounds_table[row].right}"
            )

    return SLPFrame(bounds_table, cmd_table, kinds, indices)


def decode_frame_from_info(data: bytes, frame_info: FrameInfo) -> SLPFrame:
    """Read the tables of a frame and decode it."""
    bounds_table = decode_bounds_table(data, frame_info)
    cmd_table = decode_cmd_table(data, frame_info)
    return decode_frame(data, frame_info, bounds_table, cmd_table)


class SLPParser:
    """Parser for SLP sprite files.

    Headers are read once and cached. Frames can be decoded one by one with
    decode_frame(), or all at once with parse().
    """

    def __init__(self, rawdata: bytes):
        """Initialize parser with raw SLP file data."""
        self.rawdata = bytes(rawdata)
        self.header: Optional[SLPHeader] = None
        self.frame_infos: List[FrameInfo] = []

    def read_headers(self) -> None:
        """Read the file header and all frame info records."""
        if self.header is not None:
            return

        header = read_header(self.rawdata)

        if not header.is_known_version:
            print(
                f"[WARNING] Unknown SLP version {header.version!r}, "
                "decoding as a standard SLP file"
            )

        frame_infos = []
        for index in range(header.frame_count):
            try:
                frame_infos.append(
                    read_frame_info(self.rawdata, index, header.version)
                )
            except SLPError as e:
                e.frame = index
                raise

        self.header = header
        self.frame_infos = frame_infos

        if DEBUG:
            print(
                f"[DEBUG] SLP {header.version_string}: {header.frame_count} frame(s)"
            )

    def decode_frame(self, index: int) -> SLPFrame:
        """Decode a single frame.

        Raises:
            IndexError: If index is not a valid frame index
            SLPError: If the frame data is malformed, with its frame attribute set
        """
        self.read_headers()

        if not 0 <= index < len(self.frame_infos):
            raise IndexError(
                f"Frame index {index} out of range, "
                f"file has {len(self.frame_infos)} frame(s)"
            )

        frame_info = self.frame_infos[index]
        try:
            frame = decode_frame_from_info(self.rawdata, frame_info)
        except SLPError as e:
            e.frame = index
            raise

        if DEBUG:
            print(f"[DEBUG] Frame {index}: {frame.width}x{frame.height}")

        return frame

    def parse(self) -> SLPFile:
        """Parse the whole file."""
        self.read_headers()

        frames = [self.decode_frame(index) for index in range(len(self.frame_infos))]

        return SLPFile(
            header=self.header,
            frame_infos=list(self.frame_infos),
            frames=frames,
        )
