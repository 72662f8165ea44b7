"""
Row command decoder.

Every row of an SLP frame is a stream of draw commands starting at the
offset stored in the frame's command table. The lowest two bits of a
command byte select the "lesser" commands, the low nibble selects the
others. Several commands store their pixel count either in the high bits
of the command byte or, when those bits are zero, in the following byte.
"""

from typing import List, Tuple

from .binary import read_bytes, read_uint8
from .constants import RowCommand, ExtendedCommand
from .errors import RowOverrun, UnknownCommand, UnknownExtendedCommand
from .pixel import (
    Pixel,
    PixelType,
    TRANSPARENT,
    SHADOW,
    SPECIAL1,
    SPECIAL2,
)
from .sprite import RowBound


def cmd_or_next(data: bytes, cmd: int, shift: int, pos: int) -> Tuple[int, int]:
    """Get the pixel count of a command.

    Returns cmd >> shift if it is not 0. Otherwise the count is the next
    byte and the returned position points at that byte.

    Returns:
        Tuple of (count, new position)
    """
    packed_in_cmd = cmd >> shift
    if packed_in_cmd != 0:
        return packed_in_cmd, pos

    pos += 1
    return read_uint8(data, pos), pos


def _read_indexed(
    data: bytes, pos: int, count: int, kind: PixelType, pixels: List[Pixel]
) -> int:
    """Append count pixels that each take their index from the following bytes."""
    indices = read_bytes(data, pos + 1, count)
    pixels.extend(Pixel(kind, index) for index in indices)
    return pos + count


def _read_extended(data: bytes, cmd: int, pos: int, pixels: List[Pixel]) -> int:
    high_nibble = cmd & 0xF0

    if high_nibble in ExtendedCommand.NO_PIXEL_EFFECT:
        return pos

    if high_nibble == ExtendedCommand.SPECIAL1_DRAW:
        pixels.append(SPECIAL1)
    elif high_nibble == ExtendedCommand.SPECIAL2_DRAW:
        pixels.append(SPECIAL2)
    elif high_nibble in (
        ExtendedCommand.SPECIAL1_MULTI_DRAW,
        ExtendedCommand.SPECIAL2_MULTI_DRAW,
    ):
        pos += 1
        count = read_uint8(data, pos)
        pixel = SPECIAL1 if high_nibble == ExtendedCommand.SPECIAL1_MULTI_DRAW else SPECIAL2
        pixels.extend([pixel] * count)
    else:
        raise UnknownExtendedCommand(cmd, pos)

    return pos


def decode_row_cmds(
    data: bytes, first_cmd_offset: int, expected_size: int
) -> Tuple[List[Pixel], int]:
    """Decode the draw commands of a single row.

    Args:
        data: Whole file buffer
        first_cmd_offset: Absolute offset of the row's first command
        expected_size: Number of pixels between the left and right padding

    Returns:
        Tuple of (pixels, offset just past the end-of-row byte)

    Raises:
        RowOverrun: If the commands produce more or fewer than expected_size pixels
        UnknownCommand, UnknownExtendedCommand: On unrecognized command bytes
        TruncatedInput: If the stream runs past the end of the buffer
    """
    pixels: List[Pixel] = []
    pos = first_cmd_offset

    while True:
        if len(pixels) > expected_size:
            raise RowOverrun(expected_size, len(pixels), pos)

        cmd = read_uint8(data, pos)

        lower_nibble = cmd & 0x0F
        higher_nibble = cmd & 0xF0
        lowest_crumb = cmd & 0b11

        if lower_nibble == RowCommand.END_OF_ROW:
            if len(pixels) != expected_size:
                raise RowOverrun(expected_size, len(pixels), pos)
            return pixels, pos + 1

        if lowest_crumb == RowCommand.LESSER_DRAW:
            count = cmd >> RowCommand.LESSER_COUNT_SHIFT
            pos = _read_indexed(data, pos, count, PixelType.PALETTE, pixels)

        elif lowest_crumb == RowCommand.LESSER_SKIP:
            count, pos = cmd_or_next(data, cmd, RowCommand.LESSER_COUNT_SHIFT, pos)
            pixels.extend([TRANSPARENT] * count)

        elif lower_nibble in (RowCommand.BIG_DRAW, RowCommand.BIG_SKIP):
            pos += 1
            count = (higher_nibble << 4) | read_uint8(data, pos)
            if lower_nibble == RowCommand.BIG_DRAW:
                pos = _read_indexed(data, pos, count, PixelType.PALETTE, pixels)
            else:
                pixels.extend([TRANSPARENT] * count)

        elif lower_nibble == RowCommand.PLAYER_COLOR:
            count, pos = cmd_or_next(data, cmd, RowCommand.COUNT_SHIFT, pos)
            pos = _read_indexed(data, pos, count, PixelType.PLAYER, pixels)

        elif lower_nibble in (RowCommand.FILL_PALETTE, RowCommand.FILL_PLAYER):
            count, pos = cmd_or_next(data, cmd, RowCommand.COUNT_SHIFT, pos)
            pos += 1
            kind = (
                PixelType.PALETTE
                if lower_nibble == RowCommand.FILL_PALETTE
                else PixelType.PLAYER
            )
            pixels.extend([Pixel(kind, read_uint8(data, pos))] * count)

        elif lower_nibble == RowCommand.SHADOW_FILL:
            count, pos = cmd_or_next(data, cmd, RowCommand.COUNT_SHIFT, pos)
            pixels.extend([SHADOW] * count)

        elif lower_nibble == RowCommand.EXTENDED:
            pos = _read_extended(data, cmd, pos, pixels)

        else:
            raise UnknownCommand(cmd, pos)

        pos += 1


def decode_row(
    data: bytes, bounds: RowBound, first_cmd_offset: int, width: int
) -> Tuple[List[Pixel], int]:
    """Decode a full row, including the transparent padding from its bounds.

    Fully transparent rows do not read any command bytes.

    Returns:
        Tuple of (width pixels, offset just past the row's end-of-row byte)
    """
    if bounds.full_row:
        return [TRANSPARENT] * width, first_cmd_offset

    color_pixels, end_offset = decode_row_cmds(
        data, first_cmd_offset, width - (bounds.left + bounds.right)
    )

    row = [TRANSPARENT] * bounds.left
    row.extend(color_pixels)
    row.extend([TRANSPARENT] * bounds.right)
    return row, end_offset
