"""Common utility functions for test scripts.

Builds SLP files in memory: a reference encoder turns pixel rows into row
command streams, and build_slp() lays out header, frame infos, tables and
streams the same way real files do.
"""

import struct
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

script_dir = Path(__file__).parent
if str(script_dir.parent) not in sys.path:
    sys.path.insert(0, str(script_dir.parent))

from slp_files import Pixel, PixelType, SLPFormat

FULL_ROW = SLPFormat.FULL_ROW_TRANSPARENT
END_OF_ROW = b"\x0f"


@dataclass
class RowSpec:
    """One row: its padding and the pixels between the padding.

    If stream is set, it is written as-is instead of encoding pixels.
    """

    left: int = 0
    right: int = 0
    pixels: List[Pixel] = field(default_factory=list)
    full_row: bool = False
    stream: Optional[bytes] = None


@dataclass
class FrameSpec:
    width: int
    rows: List[RowSpec]
    anchor_x: int = 0
    anchor_y: int = 0
    palette_offset: int = 0
    properties: int = 0
    height: Optional[int] = None


def _count_cmd(low_nibble: int, count: int) -> bytes:
    """Count packed in the high nibble, or in the next byte if it doesn't fit."""
    if 0 < count < 16:
        return bytes([(count << 4) | low_nibble])
    return bytes([low_nibble, count])


def _skip_cmd(count: int) -> bytes:
    if 0 < count < 64:
        return bytes([(count << 2) | 0x01])
    return bytes([((count >> 8) << 4) | 0x03, count & 0xFF])


def encode_row_cmds(pixels: List[Pixel]) -> bytes:
    """Encode the pixels between a row's padding, including end of row."""
    out = bytearray()
    n = len(pixels)
    i = 0

    while i < n:
        pixel = pixels[i]
        run = 1
        while i + run < n and pixels[i + run] == pixel and run < 255:
            run += 1

        kind = pixel.kind
        if kind == PixelType.TRANSPARENT:
            out += _skip_cmd(run)
        elif kind == PixelType.SHADOW:
            out += _count_cmd(0x0B, run)
        elif kind == PixelType.SPECIAL1:
            out += b"\x4e" if run == 1 else bytes([0x5E, run])
        elif kind == PixelType.SPECIAL2:
            out += b"\x6e" if run == 1 else bytes([0x7E, run])
        elif kind == PixelType.PLAYER:
            if run > 1:
                out += _count_cmd(0x0A, run) + bytes([pixel.index])
            else:
                out += _count_cmd(0x06, 1) + bytes([pixel.index])
        elif kind == PixelType.PALETTE:
            if run > 1:
                out += _count_cmd(0x07, run) + bytes([pixel.index])
            else:
                # Batch single palette pixels into one lesser draw
                j = i
                while (
                    j < n
                    and j - i < 63
                    and pixels[j].kind == PixelType.PALETTE
                    and (j + 1 == n or pixels[j + 1] != pixels[j])
                ):
                    j += 1
                run = j - i
                out.append(run << 2)
                out += bytes(p.index for p in pixels[i:j])
        else:
            raise ValueError(f"Cannot encode {pixel!r}")

        i += run

    out += END_OF_ROW
    return bytes(out)


def build_header(frame_count: int, version: bytes = b"2.0N", comment: bytes = b"") -> bytes:
    return version + struct.pack("<I", frame_count) + comment.ljust(24, b"\x00")


def build_frame_info(
    cmd_table_offset: int,
    bounds_table_offset: int,
    width: int,
    height: int,
    anchor_x: int = 0,
    anchor_y: int = 0,
    palette_offset: int = 0,
    properties: int = 0,
) -> bytes:
    return struct.pack(
        "<4I4i",
        cmd_table_offset,
        bounds_table_offset,
        palette_offset,
        properties,
        width,
        height,
        anchor_x,
        anchor_y,
    )


def _frame_data(frame: FrameSpec, base: int):
    """Lay out bounds table, command table and row streams starting at base."""
    height = len(frame.rows)
    bounds_offset = base
    cmd_offset = bounds_offset + height * 4
    stream_pos = cmd_offset + height * 4

    bounds = bytearray()
    offsets = bytearray()
    streams = bytearray()

    for row in frame.rows:
        if row.full_row:
            bounds += struct.pack("<HH", FULL_ROW, FULL_ROW)
        else:
            bounds += struct.pack("<HH", row.left, row.right)

        if row.stream is not None:
            stream = row.stream
        elif row.full_row:
            stream = END_OF_ROW
        else:
            stream = encode_row_cmds(row.pixels)

        offsets += struct.pack("<I", stream_pos + len(streams))
        streams += stream

    return cmd_offset, bounds_offset, bytes(bounds + offsets + streams)


def build_slp(
    frames: List[FrameSpec], version: bytes = b"2.0N", comment: bytes = b""
) -> bytes:
    """Build a complete SLP file."""
    infos = bytearray()
    blobs = bytearray()
    base = SLPFormat.HEADER_SIZE + len(frames) * SLPFormat.FRAME_INFO_SIZE

    for frame in frames:
        cmd_offset, bounds_offset, blob = _frame_data(frame, base + len(blobs))
        height = frame.height if frame.height is not None else len(frame.rows)
        infos += build_frame_info(
            cmd_offset,
            bounds_offset,
            frame.width,
            height,
            frame.anchor_x,
            frame.anchor_y,
            frame.palette_offset,
            frame.properties,
        )
        blobs += blob

    return build_header(len(frames), version, comment) + bytes(infos) + bytes(blobs)


def expected_row(width: int, row: RowSpec) -> List[Pixel]:
    """The full decoded row a RowSpec should produce."""
    transparent = Pixel(PixelType.TRANSPARENT)
    if row.full_row:
        return [transparent] * width
    return [transparent] * row.left + list(row.pixels) + [transparent] * row.right
