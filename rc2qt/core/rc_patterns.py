# rc2qt/core/rc_patterns.py

import enum
import re
from collections import namedtuple
from typing import List, Optional, Tuple, Union

# Memory/load flags that may sit between the type keyword and the quoted file name,
# e.g. IDB_LOGO BITMAP DISCARDABLE "res\\logo.bmp"
_LOAD_FLAGS = r'(?:(?:DISCARDABLE|PRELOAD|LOADONCALL|FIXED|MOVEABLE|PURE|IMPURE|SHARED|NONSHARED)\s+)*'

BITMAP_PATTERN = re.compile(r'^(\w+)\s+BITMAP\s+' + _LOAD_FLAGS + r'"(.+)"\s*$', re.IGNORECASE)
ICON_PATTERN = re.compile(r'^(\w+)\s+ICON\s+' + _LOAD_FLAGS + r'"(.+)"\s*$', re.IGNORECASE)
STRINGTABLE_START_PATTERN = re.compile(r'^STRINGTABLE\b(.*)$', re.IGNORECASE)
STRINGTABLE_ITEM_PATTERN = re.compile(r'^(\w+)\s*,?\s*"(.*)"\s*$')
TOOLBAR_PATTERN = re.compile(r'^(\w+)\s+TOOLBAR\s+' + _LOAD_FLAGS + r'"(.+)"\s*$', re.IGNORECASE)
# Block form as written by the MFC wizards:
#   IDR_MAINFRAME TOOLBAR 16, 15
#   BEGIN ... END
TOOLBAR_BLOCK_PATTERN = re.compile(r'^(\w+)\s+TOOLBAR\s+' + _LOAD_FLAGS + r'(\d+)\s*,\s*(\d+)(.*)$', re.IGNORECASE)
ACCELERATORS_START_PATTERN = re.compile(r'^(?:(\w+)\s+)?ACCELERATORS\b(.*)$', re.IGNORECASE)
MENU_START_PATTERN = re.compile(r'^(?:(\w+)\s+)?MENU\b(.*)$', re.IGNORECASE)
DIALOG_PATTERN = re.compile(r'^(\w+)\s+(DIALOGEX|DIALOG)\b(.*)$', re.IGNORECASE)
END_PATTERN = re.compile(r'^END$')
BEGIN_PATTERN = re.compile(r'^BEGIN$')

# CONTROL "text", id, BUTTON, style, x, y, width, height
# The class may be written bare or quoted ("Button"), as resource editors emit it.
CONTROL_PATTERN = re.compile(
    r'^\s*CONTROL\s+"((?:[^"]|"")*)"\s*,\s*'   # Text
    r'(\w+)\s*,\s*'                             # ID
    r'"?BUTTON"?\s*,\s*'                        # Class
    r'([^,]+?)\s*,\s*'                          # Style
    r'(-?\d+)\s*,\s*(-?\d+)\s*,\s*(\d+)\s*,\s*(\d+)',  # x, y, w, h
    re.IGNORECASE
)

_INLINE_BEGIN = re.compile(r'\bBEGIN\s*$', re.IGNORECASE)


class LineKind(enum.Enum):
    BITMAP = "BITMAP"
    ICON = "ICON"
    STRINGTABLE_START = "STRINGTABLE"
    TOOLBAR = "TOOLBAR"
    TOOLBAR_BLOCK = "TOOLBAR_BLOCK"
    ACCELERATORS_START = "ACCELERATORS"
    MENU_START = "MENU"
    DIALOG = "DIALOG"
    END = "END"
    UNRECOGNIZED = "UNRECOGNIZED"


LineClass = namedtuple("LineClass", ["kind", "match"])

# Tried top to bottom; the first pattern that matches decides the kind of the line.
LINE_PATTERNS: List[Tuple[LineKind, "re.Pattern[str]"]] = [
    (LineKind.BITMAP, BITMAP_PATTERN),
    (LineKind.ICON, ICON_PATTERN),
    (LineKind.STRINGTABLE_START, STRINGTABLE_START_PATTERN),
    (LineKind.TOOLBAR, TOOLBAR_PATTERN),
    (LineKind.TOOLBAR_BLOCK, TOOLBAR_BLOCK_PATTERN),
    (LineKind.ACCELERATORS_START, ACCELERATORS_START_PATTERN),
    (LineKind.MENU_START, MENU_START_PATTERN),
    (LineKind.DIALOG, DIALOG_PATTERN),
    (LineKind.END, END_PATTERN),
]

# Attribute statements accepted inside an extended bitmap block:
#   IDB_LOGO BITMAP "res/logo.bmp"
#   BEGIN
#       WIDTH 32
#       AUTHOR Jane Doe
#   END
# (field name, pattern, converter)
BITMAP_ATTRIBUTE_PATTERNS = [
    ("width", re.compile(r'^WIDTH\s+(\d+)$', re.IGNORECASE), int),
    ("height", re.compile(r'^HEIGHT\s+(\d+)$', re.IGNORECASE), int),
    ("color_depth", re.compile(r'^COLOR_DEPTH\s+(\d+)$', re.IGNORECASE), int),
    ("compression_level", re.compile(r'^COMPRESSION_LEVEL\s+(\d+)$', re.IGNORECASE), int),
    ("compression", re.compile(r'^COMPRESSION\s+(.+)$', re.IGNORECASE), str),
    ("palette", re.compile(r'^PALETTE\s+(.+)$', re.IGNORECASE), str),
    ("dpi", re.compile(r'^DPI\s+(\d+)$', re.IGNORECASE), int),
    ("color_mode", re.compile(r'^COLOR_MODE\s+(.+)$', re.IGNORECASE), str),
    ("author", re.compile(r'^AUTHOR\s+(.+)$', re.IGNORECASE), str),
]


def classify_line(line: str) -> LineClass:
    """Returns the first matching line kind for a trimmed line, or UNRECOGNIZED."""
    for kind, pattern in LINE_PATTERNS:
        match = pattern.match(line)
        if match:
            return LineClass(kind, match)
    return LineClass(LineKind.UNRECOGNIZED, None)


def has_inline_begin(line_class: LineClass) -> bool:
    """True when a block header carries its BEGIN on the same line (e.g. 'STRINGTABLE BEGIN')."""
    if line_class.match is None:
        return False
    rest = line_class.match.groups()[-1] or ""
    return bool(_INLINE_BEGIN.search(rest))


def is_begin(line: Optional[str]) -> bool:
    return line is not None and bool(BEGIN_PATTERN.match(line))


def match_bitmap_attribute(line: str) -> Optional[Tuple[str, Union[int, str]]]:
    for field_name, pattern, convert in BITMAP_ATTRIBUTE_PATTERNS:
        match = pattern.match(line)
        if match:
            value = match.group(1).strip()
            if convert is str:
                value = value.strip('"')
            return field_name, convert(value)
    return None


def match_string_item(line: str) -> Optional[Tuple[str, str]]:
    match = STRINGTABLE_ITEM_PATTERN.match(line)
    if match:
        return match.group(1), match.group(2)
    return None


def match_control(line: str):
    """
    Matches a button CONTROL statement.
    Returns (text, id, x, y, width, height) with coordinates as strings, or None.
    """
    match = CONTROL_PATTERN.match(line)
    if not match:
        return None
    text, control_id, _style, x, y, width, height = match.groups()
    return text.replace('""', '"'), control_id, x, y, width, height


def strip_comments(line: str, in_block_comment: bool = False) -> Tuple[str, bool]:
    """
    Removes // and /* ... */ comments that are not inside a quoted string.

    in_block_comment says whether the line starts inside a /* comment left open
    by an earlier line. Returns the remaining text (trimmed) and whether a block
    comment is still open at the end of the line.
    """
    out: List[str] = []
    in_quotes = False
    i = 0
    while i < len(line):
        if in_block_comment:
            close = line.find("*/", i)
            if close == -1:
                return "".join(out).strip(), True
            in_block_comment = False
            out.append(" ")  # A comment still separates the tokens around it
            i = close + 2
            continue
        ch = line[i]
        if ch == '"':
            in_quotes = not in_quotes
        elif not in_quotes and line.startswith("//", i):
            break
        elif not in_quotes and line.startswith("/*", i):
            in_block_comment = True
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out).strip(), in_block_comment
