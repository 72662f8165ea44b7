#!/usr/bin/env python3
"""
Extract SLP file(s) to external files.

Usage:
    python scripts/extract_slps.py <slp_file>                    # Single SLP file
    python scripts/extract_slps.py <slp1> <slp2> <slp3>          # Multiple SLP files
    python scripts/extract_slps.py tests/demo-slps               # All SLPs in folder
    python scripts/extract_slps.py <slp_file> --palette 50500.pal
"""

import sys
import argparse
from pathlib import Path

# Add parent directory to path for imports
script_dir = Path(__file__).parent
if str(script_dir.parent) not in sys.path:
    sys.path.insert(0, str(script_dir.parent))

from generators import slp_transform_process_single, slp_transform_process_multiple


def main():
    parser = argparse.ArgumentParser(
        description="Extract SLP file(s) to external files"
    )
    parser.add_argument(
        "paths",
        nargs="+",
        help="SLP file(s) or folder containing SLP files",
    )
    parser.add_argument(
        "--palette",
        type=Path,
        default=None,
        help="JASC-PAL palette used to color the exported images",
    )

    args = parser.parse_args()

    palette_path = args.palette.resolve() if args.palette else None
    if palette_path is not None and not palette_path.is_file():
        print(f"[ERROR] Palette file does not exist: {palette_path}")
        sys.exit(1)

    for path_str in args.paths:
        input_path = Path(path_str).resolve()

        if not input_path.exists():
            print(f"[ERROR] Path does not exist: {input_path}")
            continue

        if input_path.is_file():
            slp_transform_process_single(input_path, palette_path)
        else:
            slp_transform_process_multiple(input_path, palette_path)


if __name__ == "__main__":
    main()
