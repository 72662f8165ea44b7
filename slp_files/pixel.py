"""
Typed pixels produced by the row command decoder.
"""

from dataclasses import dataclass
from enum import IntEnum


class PixelType(IntEnum):
    """Pixel kinds. Values are stored as-is in SLPFrame.kinds."""

    PALETTE = 0
    SHADOW = 1
    TRANSPARENT = 2
    PLAYER = 3
    # Player color outline
    SPECIAL1 = 4
    # Black outline
    SPECIAL2 = 5
    SHADOW_V4 = 6
    PLAYER_V4 = 7


INDEXED_PIXEL_TYPES = frozenset(
    (PixelType.PALETTE, PixelType.PLAYER, PixelType.PLAYER_V4)
)


@dataclass(frozen=True)
class Pixel:
    """A pixel kind plus its palette index.

    The index only means something for palette and player pixels, it is
    always 0 for the other kinds. Colors are resolved outside of the decoder.
    """

    kind: PixelType
    index: int = 0

    @property
    def has_index(self) -> bool:
        return self.kind in INDEXED_PIXEL_TYPES

    def __repr__(self) -> str:
        if self.has_index:
            return f"{self.kind.name.title()}({self.index})"
        return self.kind.name.title()


TRANSPARENT = Pixel(PixelType.TRANSPARENT)
SHADOW = Pixel(PixelType.SHADOW)
SPECIAL1 = Pixel(PixelType.SPECIAL1)
SPECIAL2 = Pixel(PixelType.SPECIAL2)
