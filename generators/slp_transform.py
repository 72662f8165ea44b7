from pathlib import Path
from typing import Optional

from slp_files import extract_slp, SLPError
from external_files import read_palette
from data import SEPARATOR_LINE_LENGTH, validate_path_exists_and_is_dir


def slp_transform_main(path: Path, palette_path: Optional[Path] = None) -> Path:
    """Extract an SLP file next to itself, into <stem>_extracted/.

    Args:
        path: Path to the .slp file
        palette_path: Optional JASC-PAL palette used for the images
    """
    palette = read_palette(palette_path) if palette_path is not None else None
    if palette is not None:
        print(f"[INFO] Loaded {len(palette)} palette color(s) from: {palette_path}")

    print("[START] Extracting SLP file...")
    output_dir = path.parent / f"{path.stem}_extracted"
    slp = extract_slp(path, output_dir, palette)
    print(f"[INFO] Decoded {len(slp.frames)} frame(s)")
    print(f"\n[OK] SLP file extracted successfully to: {output_dir}")
    return output_dir


def slp_transform_process_single(path: Path, palette_path: Optional[Path] = None) -> bool:
    """Process a single SLP file.

    Args:
        path: Path to .slp file
        palette_path: Optional JASC-PAL palette used for the images

    Returns:
        True if successful, False otherwise
    """
    if not path.exists():
        print(f"[ERROR] Path does not exist: {path}")
        return False

    if not (path.is_file() and path.suffix.lower() == ".slp"):
        print(f"[ERROR] Path must be a .slp file: {path}")
        return False

    print("=" * SEPARATOR_LINE_LENGTH)
    print(f"[INFO] Processing SLP file: {path}")
    print("=" * SEPARATOR_LINE_LENGTH)
    print()

    try:
        slp_transform_main(path, palette_path)
        return True

    except SLPError as e:
        print(f"[ERROR] Malformed SLP file: {e}")
        return False

    except (OSError, ValueError) as e:
        print(f"[ERROR] Error during processing: {str(e)}")
        return False


def slp_transform_process_multiple(
    parent_folder: Path, palette_path: Optional[Path] = None
) -> None:
    """Process every SLP file in a folder.

    Args:
        parent_folder: Folder containing SLP files
        palette_path: Optional JASC-PAL palette used for the images
    """
    if not validate_path_exists_and_is_dir(parent_folder, "Parent folder"):
        return

    items = sorted(
        f for f in parent_folder.iterdir() if f.is_file() and f.suffix.lower() == ".slp"
    )

    if not items:
        print(f"[ERROR] No SLP files found in: {parent_folder}")
        return

    print("=" * SEPARATOR_LINE_LENGTH)
    print(f"[INFO] Found {len(items)} item(s) to process")
    print("=" * SEPARATOR_LINE_LENGTH)
    print()

    success_count = 0
    failed_items = []

    for idx, item_path in enumerate(items):
        if idx > 0:
            print()

        success = slp_transform_process_single(item_path, palette_path)

        if success:
            success_count += 1
        else:
            failed_items.append(item_path.name)

    print()
    print("=" * SEPARATOR_LINE_LENGTH)
    print("[SUMMARY] PROCESSING SUMMARY")
    print("=" * SEPARATOR_LINE_LENGTH)
    print(f"[INFO] Total: {len(items)}")
    print(f"[INFO] Successful: {success_count}")
    print(f"[INFO] Failed: {len(failed_items)}")

    if failed_items:
        print("\n[ERROR] Failed items:")
        for item in failed_items:
            print(f"   - {item}")

    print("=" * SEPARATOR_LINE_LENGTH)
