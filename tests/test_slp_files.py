#!/usr/bin/env python3
"""
Tests for reading whole SLP files: header, frame infos, row tables and frames.

The round-trip test builds random frames, encodes them with the reference
encoder from tests/utils.py and checks the decoder gives back the same pixels.

Usage:
    python tests/test_slp_files.py
    pytest tests/test_slp_files.py
"""

import pickle
import random
import struct
import sys
from pathlib import Path

import numpy as np
import pytest

script_dir = Path(__file__).parent
if str(script_dir.parent) not in sys.path:
    sys.path.insert(0, str(script_dir.parent))

from slp_files import (
    FrameType,
    InvalidFrame,
    Pixel,
    PixelType,
    RowBound,
    RowOverrun,
    SLPError,
    SLPParser,
    TruncatedInput,
    UnknownCommand,
    UnknownExtendedCommand,
    decode_bounds_table,
    decode_cmd_table,
    extract_slp,
    read_frame_info,
    read_header,
)
from utils import (
    FULL_ROW,
    FrameSpec,
    RowSpec,
    build_frame_info,
    build_header,
    build_slp,
    expected_row,
)

T = Pixel(PixelType.TRANSPARENT)


def P(index):
    return Pixel(PixelType.PALETTE, index)


def single_row_file():
    """width 4, bounds 1/1, two lesser-draw pixels."""
    return build_slp(
        [FrameSpec(width=4, rows=[RowSpec(1, 1, stream=bytes([0x08, 0x05, 0x06, 0x0F]))])]
    )


def test_read_header():
    data = build_header(3, b"2.0N", b"ArtDesk 1.00 SLP Writer")
    header = read_header(data)

    assert header.version == b"2.0N"
    assert header.version_string == "2.0N"
    assert header.frame_count == 3
    assert len(header.comment) == 24
    assert header.comment_text == "ArtDesk 1.00 SLP Writer"
    assert header.is_known_version


def test_read_header_truncated():
    with pytest.raises(TruncatedInput) as exc_info:
        read_header(b"2.0N\x01\x00\x00\x00")
    assert exc_info.value.size == 32
    assert exc_info.value.buffer_length == 8


def test_read_frame_info():
    info_bytes = build_frame_info(0x100, 0x80, 20, 10, -3, 7, 0x40, 0x18)
    data = build_header(2) + bytes(32) + info_bytes
    info = read_frame_info(data, 1, b"2.0N")

    assert info.cmd_table_offset == 0x100
    assert info.bounds_table_offset == 0x80
    assert info.palette_offset == 0x40
    assert info.properties == 0x18
    assert (info.width, info.height) == (20, 10)
    assert (info.anchor_x, info.anchor_y) == (-3, 7)
    assert info.frame_type == FrameType.MAIN
    assert info.version == b"2.0N"
    assert info.is_valid


def test_read_frame_info_truncated():
    data = build_header(2) + bytes(32) + bytes(16)
    read_frame_info(data, 0)
    with pytest.raises(TruncatedInput):
        read_frame_info(data, 1)


def test_row_bound_sentinel():
    assert RowBound.from_raw(FULL_ROW, 5) == RowBound(0, 0, True)
    assert RowBound.from_raw(5, FULL_ROW) == RowBound(0, 0, True)
    assert RowBound.from_raw(FULL_ROW, FULL_ROW) == RowBound(0, 0, True)
    assert RowBound.from_raw(3, 0x7FFF) == RowBound(3, 0x7FFF, False)


def test_decode_bounds_table():
    table = struct.pack("<HHHHHH", 1, 2, 0x8000, 9, 0, 0)
    data = bytes(8) + table
    info = read_frame_info(build_header(1) + build_frame_info(0, 8, 5, 3), 0)

    assert decode_bounds_table(data, info) == [
        RowBound(1, 2, False),
        RowBound(0, 0, True),
        RowBound(0, 0, False),
    ]


def test_decode_bounds_table_truncated():
    data = bytes(8) + struct.pack("<HH", 1, 2)
    info = read_frame_info(build_header(1) + build_frame_info(0, 8, 5, 2), 0)
    with pytest.raises(TruncatedInput):
        decode_bounds_table(data, info)


def test_decode_cmd_table():
    data = bytes(4) + struct.pack("<3I", 0x40, 0x48, 0x1234)
    info = read_frame_info(build_header(1) + build_frame_info(4, 0, 5, 3), 0)
    assert decode_cmd_table(data, info) == [0x40, 0x48, 0x1234]

    with pytest.raises(TruncatedInput):
        decode_cmd_table(data[:-1], info)


def test_negative_height_is_invalid():
    info = read_frame_info(build_header(1) + build_frame_info(0, 0, 5, -1), 0)
    assert not info.is_valid
    with pytest.raises(InvalidFrame):
        decode_bounds_table(bytes(64), info)


def test_end_to_end_single_row():
    slp = SLPParser(single_row_file()).parse()

    assert slp.header.frame_count == 1
    assert len(slp.frame_infos) == 1
    assert len(slp.frames) == 1

    frame = slp.frames[0]
    assert (frame.width, frame.height) == (4, 1)
    assert frame.pixels == [[T, P(5), P(6), T]]
    assert frame.bounds_table == (RowBound(1, 1, False),)
    assert frame.pixel_at(0, 2) == P(6)


def test_frame_arrays_are_read_only():
    frame = SLPParser(single_row_file()).parse().frames[0]
    assert frame.kinds.dtype == np.uint8
    with pytest.raises(ValueError):
        frame.kinds[0, 0] = 0


def test_full_row_transparent_frame():
    data = build_slp(
        [
            FrameSpec(
                width=3,
                rows=[
                    RowSpec(full_row=True),
                    RowSpec(0, 1, [P(1), P(2)]),
                    RowSpec(full_row=True),
                ],
            )
        ]
    )
    frame = SLPParser(data).parse().frames[0]
    assert frame.pixels == [[T, T, T], [P(1), P(2), T], [T, T, T]]


def test_zero_frames():
    slp = SLPParser(build_header(0)).parse()
    assert slp.frame_infos == []
    assert slp.frames == []


def test_errors_are_tagged_with_frame_and_row():
    good = FrameSpec(width=2, rows=[RowSpec(0, 0, [P(1), P(2)])])
    bad = FrameSpec(
        width=2,
        rows=[
            RowSpec(0, 0, [P(1), P(2)]),
            RowSpec(1, 0, [P(3)]),
            RowSpec(0, 0, stream=bytes([0xFF])),
        ],
    )
    data = build_slp([good, bad])

    with pytest.raises(RowOverrun) as exc_info:
        SLPParser(data).parse()

    error = exc_info.value
    assert error.frame == 1
    assert error.row == 2
    assert "frame 1" in str(error)
    assert "row 2" in str(error)
    assert f"offset {error.offset:#x}" in str(error)


def test_truncated_frame_info_is_tagged_with_frame():
    data = build_header(2) + build_frame_info(0, 0, 0, 0)
    with pytest.raises(TruncatedInput) as exc_info:
        SLPParser(data).read_headers()
    assert exc_info.value.frame == 1


def test_decode_single_frame_on_demand():
    frames = [
        FrameSpec(width=1, rows=[RowSpec(0, 0, [P(index)])]) for index in range(3)
    ]
    slp_parser = SLPParser(build_slp(frames))

    frame = slp_parser.decode_frame(2)
    assert frame.pixels == [[P(2)]]
    assert len(slp_parser.frame_infos) == 3


@pytest.mark.parametrize("index", [-1, -3, 3])
def test_decode_frame_rejects_out_of_range_index(index):
    frames = [FrameSpec(width=1, rows=[RowSpec(0, 0, [P(i)])]) for i in range(3)]
    with pytest.raises(IndexError):
        SLPParser(build_slp(frames)).decode_frame(index)


def test_oversized_width_is_invalid():
    data = build_header(1) + build_frame_info(64, 64, 0x7FFFFFFF, 1) + bytes(8)
    with pytest.raises(InvalidFrame) as exc_info:
        SLPParser(data).decode_frame(0)
    assert exc_info.value.frame == 0


def test_widest_full_row_frame():
    data = build_slp([FrameSpec(width=0xFFFF, rows=[RowSpec(full_row=True)])])
    frame = SLPParser(data).decode_frame(0)

    assert (frame.width, frame.height) == (0xFFFF, 1)
    assert (frame.kinds == PixelType.TRANSPARENT).all()
    assert not frame.indices.any()


@pytest.mark.parametrize(
    "error",
    [
        SLPError("bad data", 0x10),
        InvalidFrame("Invalid frame size -1x1"),
        TruncatedInput(0x20, 4, 0x21),
        UnknownCommand(0x0C, 0x30),
        UnknownExtendedCommand(0xFE, 0x40),
        RowOverrun(3, 5, 0x50),
    ],
)
def test_errors_survive_pickling(error):
    error.frame = 2
    error.row = 7
    restored = pickle.loads(pickle.dumps(error))

    assert type(restored) is type(error)
    assert restored.__dict__ == error.__dict__
    assert str(restored) == str(error)


def test_unknown_version_prints_warning(capsys):
    data = build_slp([FrameSpec(width=1, rows=[RowSpec(0, 1)])], version=b"9.9X")
    slp = SLPParser(data).parse()
    assert slp.header.version_string == "9.9X"
    assert slp.frame_infos[0].version == b"9.9X"
    assert "[WARNING]" in capsys.readouterr().out


def random_pixels(rng: random.Random, count: int):
    pixels = []
    while len(pixels) < count:
        kind = rng.choice(
            [
                PixelType.TRANSPARENT,
                PixelType.PALETTE,
                PixelType.PALETTE,
                PixelType.PLAYER,
                PixelType.SHADOW,
                PixelType.SPECIAL1,
                PixelType.SPECIAL2,
            ]
        )
        run = min(rng.choice([1, 1, 2, 5, 17, 80, 300]), count - len(pixels))
        if kind in (PixelType.PALETTE, PixelType.PLAYER) and rng.random() < 0.5:
            pixels.extend(Pixel(kind, rng.randrange(256)) for _ in range(run))
        else:
            index = rng.randrange(256) if kind in (PixelType.PALETTE, PixelType.PLAYER) else 0
            pixels.extend([Pixel(kind, index)] * run)
    return pixels


def random_frame(rng: random.Random) -> FrameSpec:
    width = rng.randrange(1, 400)
    rows = []
    for _ in range(rng.randrange(1, 12)):
        if rng.random() < 0.15:
            rows.append(RowSpec(full_row=True))
            continue
        left = rng.randrange(0, width + 1)
        right = rng.randrange(0, width - left + 1)
        rows.append(RowSpec(left, right, random_pixels(rng, width - left - right)))
    return FrameSpec(width=width, rows=rows, anchor_x=rng.randrange(-50, 50))


@pytest.mark.parametrize("seed", range(5))
def test_round_trip_random_frames(seed):
    rng = random.Random(seed)
    specs = [random_frame(rng) for _ in range(rng.randrange(1, 5))]
    slp = SLPParser(build_slp(specs)).parse()

    assert len(slp.frames) == len(specs)
    for spec, info, frame in zip(specs, slp.frame_infos, slp.frames):
        assert info.anchor_x == spec.anchor_x
        assert frame.pixel_count == spec.width * len(spec.rows)
        assert frame.pixels == [expected_row(spec.width, row) for row in spec.rows]


def test_extract_slp_from_bytes_and_path(tmp_path):
    data = single_row_file()
    slp_path = tmp_path / "sprite.slp"
    slp_path.write_bytes(data)

    from_bytes = extract_slp(data)
    from_path = extract_slp(slp_path)
    assert from_bytes.frames[0].pixels == from_path.frames[0].pixels


def test_extract_slp_raises_on_malformed_file():
    data = build_slp([FrameSpec(width=2, rows=[RowSpec(0, 0, stream=bytes([0x0F]))])])
    with pytest.raises(SLPError):
        extract_slp(data)


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
