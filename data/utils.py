import xml.etree.ElementTree as ET
from pathlib import Path


def read_file_to_bytes(filepath: Path) -> bytes:
    with open(filepath, "rb") as f:
        return f.read()


def write_bytes_to_file(filepath: Path, data: bytes) -> None:
    with open(filepath, "wb") as f:
        f.write(data)


def int_value_to_string(value: int) -> str:
    return str(value)


def validate_path_exists_and_is_dir(path: Path, path_description: str = "Path") -> bool:
    if not path.exists():
        print(f"[ERROR] {path_description} does not exist: {path}\n")
        return False

    if not path.is_dir():
        print(f"[ERROR] Path is not a directory: {path}\n")
        return False

    return True


def write_xml_file(root: ET.Element, output_path: Path) -> None:
    tree = ET.ElementTree(root)
    ET.indent(tree, space="    ")
    tree.write(output_path, encoding="utf-8", xml_declaration=True)
