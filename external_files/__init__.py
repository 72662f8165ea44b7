"""
External files utility module for exporting decoded SLP files as XML, text and images.
"""

from .files_io import write_external_files
from .images import (
    pixel_to_rgba,
    frame_to_rgba_array,
    frame_to_rgba_bytes,
    frame_to_image,
    export_frame_images,
)
from .palette import read_palette, write_palette
from .text_dump import (
    format_header,
    format_frame_info,
    format_frame,
    format_slp,
)
from .xml_writer import write_slp_xml

__all__ = [
    "write_external_files",
    "pixel_to_rgba",
    "frame_to_rgba_array",
    "frame_to_rgba_bytes",
    "frame_to_image",
    "export_frame_images",
    "read_palette",
    "write_palette",
    "format_header",
    "format_frame_info",
    "format_frame",
    "format_slp",
    "write_slp_xml",
]
