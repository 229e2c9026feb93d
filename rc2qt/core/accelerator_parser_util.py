# rc2qt/core/accelerator_parser_util.py

import re
from typing import Iterable, List, Optional

# RC flag keywords -> MFC ACCEL.fVirt constants
ACCEL_FLAG_MAP = {
    "VIRTKEY": "FVIRTKEY",
    "SHIFT": "FSHIFT",
    "CONTROL": "FCONTROL",
    "ALT": "FALT",
    "NOINVERT": "FNOINVERT",
}

_HEADER_PATTERN = re.compile(r'^(\w+)\s+ACCELERATORS\b', re.IGNORECASE)
_ENTRY_PATTERN = re.compile(
    r'^\s*(\^?"[^"]+"|\S+?)\s*,\s*'  # Key: quoted char, ^char, VK_*, or a number
    r'(\w+)\s*'                     # Command ID
    r'(?:,\s*(.*))?$',              # Optional flags
    re.IGNORECASE
)


class AcceleratorEntry:
    def __init__(self, key_event_str: str, command_id: str, type_flags: Optional[List[str]] = None):
        self.key_event_str: str = key_event_str
        self.command_id: str = command_id
        self.type_flags: List[str] = [f.upper().strip() for f in type_flags] if type_flags else []

    @property
    def is_virtkey(self) -> bool:
        return "VIRTKEY" in self.type_flags

    def fvirt_expression(self) -> str:
        """The fVirt field as a C expression, e.g. 'FVIRTKEY | FCONTROL'."""
        names = [ACCEL_FLAG_MAP[f] for f in self.type_flags if f in ACCEL_FLAG_MAP]
        return " | ".join(names) if names else "0"

    def key_expression(self) -> str:
        """The key field as a C expression: VK_ constants pass through, characters become char literals."""
        key = self.key_event_str
        if key.startswith("^") and len(key) == 2:
            # ^C in an ASCII table is the control character itself
            return str(ord(key[1].upper()) - ord("@"))
        if len(key) == 1:
            if self.is_virtkey:
                key = key.upper()  # Virtual key codes for letters are the upper case characters
            if key in ("'", "\\"):
                return f"'\\{key}'"
            return f"'{key}'"
        return key

    def __repr__(self):
        return f"AcceleratorEntry(key='{self.key_event_str}', cmd='{self.command_id}', flags={self.type_flags})"


def parse_accelerator_header(header_line: str) -> Optional[str]:
    match = _HEADER_PATTERN.match(header_line or "")
    return match.group(1) if match else None


def parse_accelerator_lines(lines: Iterable[str]) -> List[AcceleratorEntry]:
    """
    Parses the raw lines of an ACCELERATORS block.
        "N",    ID_FILE_NEW,   VIRTKEY, CONTROL
        VK_F1,  ID_HELP,       VIRTKEY
        "^C",   ID_EDIT_COPY
    Unparseable lines are skipped.
    """
    entries: List[AcceleratorEntry] = []
    for line in lines:
        match = _ENTRY_PATTERN.match(line)
        if not match:
            continue
        key_event_str, command_id, flags_str = match.groups()
        key_event_str = key_event_str.strip()
        if key_event_str.startswith('"') and key_event_str.endswith('"') and len(key_event_str) > 1:
            key_event_str = key_event_str[1:-1]
        elif key_event_str.startswith('^"') and key_event_str.endswith('"'):
            key_event_str = "^" + key_event_str[2:-1]

        type_flags: List[str] = []
        if flags_str:
            type_flags = [f.strip().upper() for f in flags_str.split(',') if f.strip()]
        entries.append(AcceleratorEntry(key_event_str, command_id, type_flags))
    return entries
