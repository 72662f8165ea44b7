"""
JASC-PAL palette reading and writing functions.

SLP files do not carry their colors, the palette is loaded separately and
handed to the image conversion as an index -> RGBA lookup.
"""

from pathlib import Path
from typing import Dict, Tuple

from data import read_file_to_bytes, write_bytes_to_file

RGBA = Tuple[int, int, int, int]


def write_palette(lookup: Dict[int, RGBA], output_path: Path) -> None:
    """Export a palette lookup to JASC-PAL format.

    Args:
        lookup: Palette index -> (r, g, b, a)
        output_path: Path to output palette file
    """
    num_colors = max(lookup) + 1 if lookup else 0

    lines = ["JASC-PAL", "0100", str(num_colors)]
    for idx in range(num_colors):
        r, g, b, a = lookup.get(idx, (0, 0, 0, 0))
        lines.append(f"{r} {g} {b} {a}")

    content = "\n".join(lines) + "\n"
    write_bytes_to_file(output_path, content.encode("ascii"))


def read_palette(palette_path: Path) -> Dict[int, RGBA]:
    """Import palette from JASC-PAL format.

    Args:
        palette_path: Path to palette file

    Returns:
        Lookup of palette index -> (r, g, b, a). Alpha defaults to 255.
    """
    data = read_file_to_bytes(palette_path)
    text = data.decode("ascii").strip()
    lines = text.splitlines()

    if len(lines) < 3:
        raise ValueError("Invalid JASC-PAL file: too few lines")

    if lines[0].strip() != "JASC-PAL":
        raise ValueError("Invalid JASC-PAL file: missing header")

    if lines[1].strip() != "0100":
        raise ValueError(f"Unsupported JASC-PAL version: {lines[1].strip()}")

    num_colors = int(lines[2].strip())

    if num_colors > 256:
        raise ValueError(f"Invalid palette: {num_colors} colors exceeds maximum of 256")

    if len(lines) < 3 + num_colors:
        raise ValueError(
            f"Invalid JASC-PAL file: expected {num_colors} colors, got {len(lines) - 3}"
        )

    lookup = {}
    for i in range(num_colors):
        line_num = 4 + i
        parts = lines[3 + i].strip().split()
        if len(parts) < 3 or len(parts) > 4:
            raise ValueError(
                f"Invalid color entry at line {line_num}: expected 3 or 4 values"
            )

        try:
            values = [int(part) for part in parts]
        except ValueError:
            raise ValueError(
                f"Invalid color entry at line {line_num}: values must be integers, got '{' '.join(parts)}'"
            )

        if not all(0 <= value <= 255 for value in values):
            raise ValueError(
                f"Invalid color entry at line {line_num}: values must be 0-255, got '{' '.join(parts)}'"
            )

        if len(values) == 3:
            values.append(255)

        lookup[i] = tuple(values)

    return lookup
