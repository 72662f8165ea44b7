"""
RGBA conversion and image export for decoded SLP frames.
"""

from pathlib import Path
from typing import Dict, Optional, Tuple

import numpy as np
from PIL import Image

from slp_files.pixel import Pixel, PixelType
from slp_files.sprite import SLPFile, SLPFrame

RGBA = Tuple[int, int, int, int]
PaletteLookup = Dict[int, RGBA]

TRANSPARENT_RGBA: RGBA = (0, 0, 0, 0)
SHADOW_RGBA: RGBA = (0, 0, 0, 128)
SPECIAL1_RGBA: RGBA = (255, 0, 255, 255)
SPECIAL2_RGBA: RGBA = (0, 0, 0, 255)


def _indexed_rgba(index: int, lookup: Optional[PaletteLookup]) -> RGBA:
    if lookup and index in lookup:
        return tuple(lookup[index])
    return (index, index, index, 255)


def pixel_to_rgba(pixel: Pixel, lookup: Optional[PaletteLookup] = None) -> RGBA:
    """Resolve a pixel to an RGBA color.

    Palette and player pixels are looked up by index, falling back to a
    grey level when the lookup has no entry.
    """
    kind = pixel.kind
    if kind in (PixelType.PALETTE, PixelType.PLAYER, PixelType.PLAYER_V4):
        return _indexed_rgba(pixel.index, lookup)
    if kind == PixelType.TRANSPARENT:
        return TRANSPARENT_RGBA
    if kind in (PixelType.SHADOW, PixelType.SHADOW_V4):
        return SHADOW_RGBA
    if kind == PixelType.SPECIAL1:
        return SPECIAL1_RGBA
    if kind == PixelType.SPECIAL2:
        return SPECIAL2_RGBA
    raise ValueError(f"Unhandled pixel type: {kind!r}")


def frame_to_rgba_array(
    frame: SLPFrame, lookup: Optional[PaletteLookup] = None
) -> np.ndarray:
    """Convert a frame to a (height, width, 4) uint8 array."""
    # Every (kind, index) pair maps to one color, so build a 2D table once
    table = np.zeros((len(PixelType), 256, 4), dtype=np.uint8)
    for kind in PixelType:
        for index in range(256):
            table[kind, index] = pixel_to_rgba(Pixel(kind, index), lookup)

    return table[frame.kinds, frame.indices]


def frame_to_rgba_bytes(
    frame: SLPFrame, lookup: Optional[PaletteLookup] = None
) -> bytes:
    return frame_to_rgba_array(frame, lookup).tobytes()


def frame_to_image(
    frame: SLPFrame, lookup: Optional[PaletteLookup] = None
) -> Image.Image:
    return Image.fromarray(frame_to_rgba_array(frame, lookup))


def export_frame_images(
    slp: SLPFile, imgs_dir: Path, lookup: Optional[PaletteLookup] = None
) -> None:
    """Export all frame images to a directory.

    Args:
        slp: Decoded SLP file
        imgs_dir: Output directory for PNG image files
        lookup: Optional palette lookup (index -> RGBA)
    """
    imgs_dir.mkdir(parents=True, exist_ok=True)

    exported = 0
    for frame_idx, frame in enumerate(slp.frames):
        if frame.width == 0 or frame.height == 0:
            print(f"[WARNING] Skipping empty frame {frame_idx}")
            continue

        img = frame_to_image(frame, lookup)
        img.save(imgs_dir / f"{frame_idx}.png", "PNG")
        exported += 1

    print(f"[OK] {exported} frame image(s) saved to: {imgs_dir}")
