"""
Core configuration, constants, and utils
"""

from .config import (
    DEBUG,
    CURRENT_VERSION,
)

from .utils import (
    read_file_to_bytes,
    write_bytes_to_file,
    int_value_to_string,
    validate_path_exists_and_is_dir,
    write_xml_file,
)

from .constants import (
    SEPARATOR_LINE_LENGTH,
)

__all__ = [
    # Config
    "DEBUG",
    "CURRENT_VERSION",
    # Utils
    "read_file_to_bytes",
    "write_bytes_to_file",
    "int_value_to_string",
    "validate_path_exists_and_is_dir",
    "write_xml_file",
    # Constants
    "SEPARATOR_LINE_LENGTH",
]
