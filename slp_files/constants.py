"""
SLP file format constants.
"""


class SLPFormat:
    VERSION_SIZE = 4
    COMMENT_SIZE = 24
    HEADER_SIZE = 32
    FRAME_INFO_SIZE = 32
    ROW_BOUND_SIZE = 4
    ROW_OFFSET_SIZE = 4

    # Either bound field set to this marks a fully transparent row
    FULL_ROW_TRANSPARENT = 0x8000

    MAX_FRAME_WIDTH = 0xFFFF

    KNOWN_VERSIONS = (b"1.00", b"1.10", b"2.0N", b"2.0P", b"3.0\x00")


class RowCommand:
    """Command byte values, matched against the lowest crumb or nibble."""

    # cmd & 0b11
    LESSER_DRAW = 0b00
    LESSER_SKIP = 0b01

    # cmd & 0x0F
    BIG_DRAW = 0x02
    BIG_SKIP = 0x03
    PLAYER_COLOR = 0x06
    FILL_PALETTE = 0x07
    FILL_PLAYER = 0x0A
    SHADOW_FILL = 0x0B
    EXTENDED = 0x0E
    END_OF_ROW = 0x0F

    LESSER_COUNT_SHIFT = 2
    COUNT_SHIFT = 4


class ExtendedCommand:
    """Extended command values, matched against cmd & 0xF0."""

    XFLIP_ON = 0x00
    XFLIP_OFF = 0x10
    NORMAL_TABLE = 0x20
    ALTERNATE_TABLE = 0x30
    SPECIAL1_DRAW = 0x40
    SPECIAL1_MULTI_DRAW = 0x50
    SPECIAL2_DRAW = 0x60
    SPECIAL2_MULTI_DRAW = 0x70
    DITHER = 0x80
    PREMULTIPLIED_ALPHA = 0x90
    ORIGINAL_ALPHA = 0xA0

    # Recognized, but they have no effect on the decoded pixels
    NO_PIXEL_EFFECT = (
        XFLIP_ON,
        XFLIP_OFF,
        NORMAL_TABLE,
        ALTERNATE_TABLE,
        DITHER,
        PREMULTIPLIED_ALPHA,
        ORIGINAL_ALPHA,
    )
