"""
SLP Tools Generators Module

This module provides functions for extracting SLP files to external files
"""

from .slp_transform import (
    slp_transform_main,
    slp_transform_process_single,
    slp_transform_process_multiple,
)

__all__ = [
    "slp_transform_main",
    "slp_transform_process_single",
    "slp_transform_process_multiple",
]
