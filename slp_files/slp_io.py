"""
SLP file I/O operations for extracting SLP sprite files.
"""

from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from .sprite import SLPFile
from .slp_parser import SLPParser
from data import read_file_to_bytes


def extract_slp(
    slp_input: Union[Path, bytes],
    output_dir: Optional[Path] = None,
    palette: Optional[Dict[int, Tuple[int, int, int, int]]] = None,
) -> SLPFile:
    """
    Extract an SLP sprite from file path or raw bytes.

    Args:
        slp_input: Either Path to .slp file or raw SLP bytes
        output_dir: Optional output directory. If provided, writes XML and images.
        palette: Optional palette lookup (index -> RGBA) used for the images

    Returns:
        SLPFile object
    """
    if isinstance(slp_input, (bytes, bytearray)):
        rawdata = bytes(slp_input)
    else:
        rawdata = read_file_to_bytes(slp_input)

    slp = SLPParser(rawdata).parse()

    if output_dir is not None:
        from external_files import write_external_files

        write_external_files(slp, output_dir, palette)

    return slp
