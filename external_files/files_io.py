"""
Wrapper function for writing all external files (XML, text dump and images).
"""

from pathlib import Path
from typing import Dict, Optional, Tuple

from slp_files.sprite import SLPFile
from data import write_bytes_to_file
from .constants import ExternalFiles
from .xml_writer import write_slp_xml
from .text_dump import format_slp
from .images import export_frame_images
from .palette import write_palette


def write_external_files(
    slp: SLPFile,
    output_dir: Path,
    palette: Optional[Dict[int, Tuple[int, int, int, int]]] = None,
) -> None:
    """Write all external files (XML, text dump, palette and images) for an SLP file.

    Args:
        slp: Decoded SLP file to export
        output_dir: Output directory path
        palette: Optional palette lookup (index -> RGBA) for the images
    """

    output_dir.mkdir(parents=True, exist_ok=True)

    write_slp_xml(slp, output_dir)

    dump = format_slp(slp, show_pixels=False) + "\n"
    write_bytes_to_file(output_dir / ExternalFiles.TEXT_DUMP_FILE, dump.encode("utf-8"))

    imgs_dir = output_dir / ExternalFiles.IMGS_DIR

    export_frame_images(slp, imgs_dir, palette)

    if palette:
        write_palette(palette, output_dir / ExternalFiles.PALETTE_FILE)
