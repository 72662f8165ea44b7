"""
Plain text dumps of decoded SLP structures.
"""

from typing import List

from data import SEPARATOR_LINE_LENGTH
from slp_files.pixel import Pixel, PixelType
from slp_files.sprite import FrameInfo, SLPFile, SLPFrame, SLPHeader

SEPARATOR = "-" * SEPARATOR_LINE_LENGTH


def pixel_symbol(pixel: Pixel) -> str:
    """One character per pixel kind."""
    kind = pixel.kind
    if kind == PixelType.TRANSPARENT:
        return "."
    if kind == PixelType.PALETTE:
        return "#"
    if kind == PixelType.PLAYER:
        return "p"
    if kind == PixelType.PLAYER_V4:
        return "P"
    if kind == PixelType.SHADOW:
        return "s"
    if kind == PixelType.SHADOW_V4:
        return "S"
    if kind == PixelType.SPECIAL1:
        return "1"
    if kind == PixelType.SPECIAL2:
        return "2"
    raise ValueError(f"Unhandled pixel type: {kind!r}")


def format_header(header: SLPHeader) -> str:
    return "\n".join(
        [
            f"version: {header.version_string}",
            f"num_frames: {header.frame_count}",
            f"comment: {header.comment_text}",
        ]
    )


def format_frame_info(info: FrameInfo) -> str:
    return "\n".join(
        [
            f"cmd_table_offset: {info.cmd_table_offset:#x}",
            f"bounds_table_offset: {info.bounds_table_offset:#x}",
            f"palette_offset: {info.palette_offset}",
            f"properties: {info.properties:#x}",
            f"width: {info.width}",
            f"height: {info.height}",
            f"anchor_x: {info.anchor_x}",
            f"anchor_y: {info.anchor_y}",
            f"frame_type: {info.frame_type.value}",
            f"slp_version: {info.version_string}",
        ]
    )


def format_frame(frame: SLPFrame, show_pixels: bool = True) -> str:
    lines: List[str] = [
        "| Row   | Start Offset | Bounds (left/right) |",
        "|-------|--------------|---------------------|",
    ]

    for row, (offset, bounds) in enumerate(zip(frame.cmd_table, frame.bounds_table)):
        if bounds.full_row:
            bounds_text = f"{'full row':^19}"
        else:
            bounds_text = f"{bounds.left:>4} / {bounds.right:<12}"
        lines.append(f"| {row:<5} | {offset:<#12x} | {bounds_text} |")

    if show_pixels:
        for row in range(frame.height):
            lines.append("".join(pixel_symbol(p) for p in frame.row_pixels(row)))

    return "\n".join(lines)


def format_slp(slp: SLPFile, show_pixels: bool = True) -> str:
    parts = [format_header(slp.header), SEPARATOR]
    for info in slp.frame_infos:
        parts.extend([format_frame_info(info), SEPARATOR])
    for frame in slp.frames:
        parts.extend([format_frame(frame, show_pixels), SEPARATOR])
    return "\n".join(parts)
