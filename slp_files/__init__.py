"""
SLP files module for decoding SLP sprite files.
"""

from .slp_io import extract_slp
from .slp_parser import (
    SLPParser,
    read_header,
    read_frame_info,
    decode_bounds_table,
    decode_cmd_table,
    decode_frame,
    decode_frame_from_info,
)
from .row_decoder import decode_row, decode_row_cmds, cmd_or_next
from .sprite import (
    # Sprite classes
    SLPHeader,
    FrameInfo,
    FrameType,
    RowBound,
    SLPFrame,
    SLPFile,
)
from .pixel import Pixel, PixelType
from .errors import (
    SLPError,
    TruncatedInput,
    UnknownCommand,
    UnknownExtendedCommand,
    RowOverrun,
    InvalidFrame,
)
from .constants import (
    # Constants
    SLPFormat,
    RowCommand,
    ExtendedCommand,
)

__all__ = [
    # IO functions
    "extract_slp",
    # Parser
    "SLPParser",
    "read_header",
    "read_frame_info",
    "decode_bounds_table",
    "decode_cmd_table",
    "decode_frame",
    "decode_frame_from_info",
    "decode_row",
    "decode_row_cmds",
    "cmd_or_next",
    # Sprite classes
    "SLPHeader",
    "FrameInfo",
    "FrameType",
    "RowBound",
    "SLPFrame",
    "SLPFile",
    "Pixel",
    "PixelType",
    # Errors
    "SLPError",
    "TruncatedInput",
    "UnknownCommand",
    "UnknownExtendedCommand",
    "RowOverrun",
    "InvalidFrame",
    # Constants
    "SLPFormat",
    "RowCommand",
    "ExtendedCommand",
]
