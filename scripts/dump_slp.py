#!/usr/bin/env python3
"""
Print the decoded structures of an SLP file.

Usage:
    python scripts/dump_slp.py <slp_file>
    python scripts/dump_slp.py <slp_file> --frame 3
    python scripts/dump_slp.py <slp_file> --no-pixels
"""

import sys
import argparse
from pathlib import Path

# Add parent directory to path for imports
script_dir = Path(__file__).parent
if str(script_dir.parent) not in sys.path:
    sys.path.insert(0, str(script_dir.parent))

from data import SEPARATOR_LINE_LENGTH, read_file_to_bytes
from slp_files import SLPParser, SLPError
from external_files import format_header, format_frame_info, format_frame, format_slp


def main():
    parser = argparse.ArgumentParser(description="Print the contents of an SLP file")
    parser.add_argument("path", type=Path, help="SLP file to read")
    parser.add_argument(
        "--frame",
        type=int,
        default=None,
        help="Only decode and print this frame",
    )
    parser.add_argument(
        "--no-pixels",
        action="store_true",
        help="Skip the pixel grid of each frame",
    )

    args = parser.parse_args()

    if not args.path.is_file():
        print(f"[ERROR] File does not exist: {args.path}")
        sys.exit(1)

    slp_parser = SLPParser(read_file_to_bytes(args.path))
    show_pixels = not args.no_pixels

    try:
        if args.frame is None:
            print(format_slp(slp_parser.parse(), show_pixels))
            return

        slp_parser.read_headers()
        if not 0 <= args.frame < len(slp_parser.frame_infos):
            print(
                f"[ERROR] Frame {args.frame} out of range, "
                f"file has {len(slp_parser.frame_infos)} frame(s)"
            )
            sys.exit(1)

        separator = "-" * SEPARATOR_LINE_LENGTH
        print(format_header(slp_parser.header))
        print(separator)
        print(format_frame_info(slp_parser.frame_infos[args.frame]))
        print(separator)
        print(format_frame(slp_parser.decode_frame(args.frame), show_pixels))

    except SLPError as e:
        print(f"[ERROR] Malformed SLP file: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
