"""
XML writer functions for decoded SLP files.
Handles writing slpinfo.xml and frames.xml
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from slp_files.sprite import SLPFile
from .constants import ExternalFiles, XmlRoot, XmlNode, XmlProp
from data import (
    int_value_to_string,
    write_xml_file,
)


def write_slp_xml(slp: SLPFile, output_dir: Path) -> None:
    """Write all XML files for an SLP file."""
    write_slpinfo_xml(slp, output_dir / ExternalFiles.SLPINFO_FILE)
    write_frames_xml(slp, output_dir / ExternalFiles.FRAMES_FILE)


def write_slpinfo_xml(slp: SLPFile, output_path: Path) -> None:
    """Write slpinfo.xml with the file header."""
    root = ET.Element(XmlRoot.SLPINFO)

    header = slp.header

    ET.SubElement(root, XmlProp.VERSION).text = header.version_string
    ET.SubElement(root, XmlProp.NBFRAMES).text = int_value_to_string(
        header.frame_count
    )
    ET.SubElement(root, XmlProp.COMMENT).text = header.comment_text

    write_xml_file(root, output_path)


def write_frames_xml(slp: SLPFile, output_path: Path) -> None:
    """Write frames.xml with frame infos and their row tables."""
    root = ET.Element(XmlRoot.FRMLST)

    for idx, (info, frame) in enumerate(zip(slp.frame_infos, slp.frames)):
        frame_elem = ET.SubElement(root, XmlNode.FRAME)

        ET.SubElement(frame_elem, XmlProp.INDEX).text = int_value_to_string(idx)
        ET.SubElement(frame_elem, XmlProp.FRAMETYPE).text = info.frame_type.value
        ET.SubElement(frame_elem, XmlProp.CMDTABLEOFFSET).text = int_value_to_string(
            info.cmd_table_offset
        )
        ET.SubElement(
            frame_elem, XmlProp.BOUNDSTABLEOFFSET
        ).text = int_value_to_string(info.bounds_table_offset)
        ET.SubElement(frame_elem, XmlProp.PALOFFSET).text = int_value_to_string(
            info.palette_offset
        )
        ET.SubElement(frame_elem, XmlProp.PROPERTIES).text = int_value_to_string(
            info.properties
        )

        res_elem = ET.SubElement(frame_elem, XmlNode.RESOLUTION)
        ET.SubElement(res_elem, XmlProp.WIDTH).text = int_value_to_string(info.width)
        ET.SubElement(res_elem, XmlProp.HEIGHT).text = int_value_to_string(info.height)

        anchor_elem = ET.SubElement(frame_elem, XmlNode.ANCHOR)
        ET.SubElement(anchor_elem, XmlProp.X).text = int_value_to_string(info.anchor_x)
        ET.SubElement(anchor_elem, XmlProp.Y).text = int_value_to_string(info.anchor_y)

        rows_elem = ET.SubElement(frame_elem, XmlNode.ROWS)
        for bounds, offset in zip(frame.bounds_table, frame.cmd_table):
            ET.SubElement(
                rows_elem,
                XmlNode.ROW,
                {
                    XmlProp.OFFSET: int_value_to_string(offset),
                    XmlProp.LEFT: int_value_to_string(bounds.left),
                    XmlProp.RIGHT: int_value_to_string(bounds.right),
                    XmlProp.FULLROW: int_value_to_string(int(bounds.full_row)),
                },
            )

    write_xml_file(root, output_path)
