# rc2qt/core/dialog_parser_util.py

import re
from typing import List, Optional, Tuple

_HEADER_PATTERN = re.compile(r'^(\w+)\s+(DIALOGEX|DIALOG)\b\s*(.*)$', re.IGNORECASE)
_CAPTION_PATTERN = re.compile(r'^CAPTION\s+"((?:[^"]|"")*)"', re.IGNORECASE)
_STYLE_PATTERN = re.compile(r'^STYLE\s+(.+)$', re.IGNORECASE)
_FONT_PATTERN = re.compile(r'^FONT\s+(.+)$', re.IGNORECASE)
# Load/memory flags written before the coordinates, e.g. DISCARDABLE
_OPTIONS_PREFIX = re.compile(r'^((?:[A-Z]+\s+)*)(.*)$', re.IGNORECASE)


class DialogHeader:
    def __init__(self, name: str, is_ex: bool = True,
                 options: Optional[List[str]] = None, numbers: Optional[List[int]] = None):
        self.name = name
        self.is_ex = is_ex
        self.options: List[str] = options if options is not None else []
        self.numbers: List[int] = numbers if numbers is not None else []

    def __repr__(self):
        return f"DialogHeader(name='{self.name}', ex={self.is_ex}, options={self.options}, numbers={self.numbers})"


def parse_dialog_header(header_line: str, warnings: Optional[List[str]] = None) -> Optional[DialogHeader]:
    """
    Parses 'IDD_ABOUTBOX DIALOGEX [DISCARDABLE] 0, 0, 170, 62[, helpID]'.
    Words before the coordinates go to options; non-numeric coordinates are reported and dropped.
    """
    if warnings is None:
        warnings = []
    match = _HEADER_PATTERN.match(header_line or "")
    if not match:
        warnings.append(f"Malformed dialog header '{header_line}'")
        return None
    name, keyword, rest = match.groups()
    header = DialogHeader(name, is_ex=(keyword.upper() == "DIALOGEX"))

    opt_match = _OPTIONS_PREFIX.match(rest)
    header.options = [w.upper() for w in opt_match.group(1).split()]
    for part in opt_match.group(2).split(","):
        part = part.strip()
        if not part:
            continue
        try:
            header.numbers.append(int(part, 0))
        except ValueError:
            warnings.append(f"Dialog {name}: non-numeric coordinate '{part}' ignored")
    if header.numbers and len(header.numbers) < 4:
        warnings.append(f"Dialog {name}: expected 4 coordinates, found {len(header.numbers)}")
    return header


def parse_dialog_body(lines: List[str]) -> Tuple[dict, List[str]]:
    """
    Splits the raw lines that follow a dialog header.
    Statements before BEGIN (CAPTION, STYLE, FONT, EXSTYLE, MENU, ...) become properties;
    lines after BEGIN are the control statements.
    Returns (properties, controls) where properties has caption, style, font and options keys.
    """
    props = {"caption": "", "style": "", "font": "", "options": []}
    controls: List[str] = []
    in_controls = False
    for line in lines:
        if not in_controls:
            if line.upper() == "BEGIN":
                in_controls = True
                continue
            cap_match = _CAPTION_PATTERN.match(line)
            if cap_match:
                props["caption"] = cap_match.group(1).replace('""', '"')
                continue
            style_match = _STYLE_PATTERN.match(line)
            if style_match:
                props["style"] = " ".join(style_match.group(1).split())
                continue
            font_match = _FONT_PATTERN.match(line)
            if font_match:
                props["font"] = font_match.group(1).strip()
                continue
            props["options"].append(line)
        else:
            controls.append(line)
    return props, controls

