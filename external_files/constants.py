class ExternalFiles:
    SLPINFO_FILE = "slpinfo.xml"
    FRAMES_FILE = "frames.xml"
    TEXT_DUMP_FILE = "dump.txt"
    PALETTE_FILE = "palette.pal"
    IMGS_DIR = "imgs"


class XmlRoot:
    SLPINFO = "SlpInfo"
    FRMLST = "FrameList"


class XmlNode:
    FRAME = "Frame"
    ANCHOR = "Anchor"
    RESOLUTION = "Resolution"
    ROWS = "Rows"
    ROW = "Row"


class XmlProp:
    VERSION = "Version"
    NBFRAMES = "FrameCount"
    COMMENT = "Comment"
    INDEX = "Index"
    FRAMETYPE = "FrameType"
    CMDTABLEOFFSET = "CmdTableOffset"
    BOUNDSTABLEOFFSET = "BoundsTableOffset"
    PALOFFSET = "PaletteOffset"
    PROPERTIES = "Properties"
    WIDTH = "Width"
    HEIGHT = "Height"
    X = "X"
    Y = "Y"
    LEFT = "Left"
    RIGHT = "Right"
    FULLROW = "FullRow"
    OFFSET = "Offset"
