"""
Bounds-checked little-endian reads from the file buffer.
"""

import struct

from .errors import TruncatedInput


def check_range(data: bytes, offset: int, size: int) -> None:
    """Raise TruncatedInput if [offset, offset + size) is not inside data."""
    if offset < 0 or size < 0 or offset + size > len(data):
        raise TruncatedInput(offset, size, len(data))


def _unpack(fmt: str, data: bytes, offset: int) -> int:
    check_range(data, offset, struct.calcsize(fmt))
    return struct.unpack_from(fmt, data, offset)[0]


def read_uint32(data: bytes, offset: int, little_endian: bool = True) -> int:
    fmt = "<I" if little_endian else ">I"
    return _unpack(fmt, data, offset)


def read_uint16(data: bytes, offset: int, little_endian: bool = True) -> int:
    fmt = "<H" if little_endian else ">H"
    return _unpack(fmt, data, offset)


def read_uint8(data: bytes, offset: int) -> int:
    if not 0 <= offset < len(data):
        raise TruncatedInput(offset, 1, len(data))
    return data[offset]


def read_int32(data: bytes, offset: int, little_endian: bool = True) -> int:
    fmt = "<i" if little_endian else ">i"
    return _unpack(fmt, data, offset)


def read_bytes(data: bytes, offset: int, size: int) -> bytes:
    check_range(data, offset, size)
    return bytes(data[offset : offset + size])
