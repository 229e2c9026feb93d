# rc2qt/core/rc_parser_util.py

from typing import Iterable, List

from .rc_patterns import match_string_item
from .resource_base import normalize_resource_path


class StringTableEntry:
    def __init__(self, res_id: str, text: str):
        self.id: str = res_id
        self.text: str = text  # As written between the quotes, RC escapes included

    def __repr__(self):
        return f"StringTableEntry(id={self.id!r}, text={self.text!r})"

    def __eq__(self, other):
        if not isinstance(other, StringTableEntry):
            return NotImplemented
        return self.id == other.id and self.text == other.text


def parse_stringtable_lines(lines: Iterable[str]) -> List[StringTableEntry]:
    """
    Parses the lines between STRINGTABLE's BEGIN and END.
    Expected format, one entry per line:
        IDS_APP_TITLE "My Application"
        IDS_GREETING, "Hello, ""User""!"
    Lines that are not entries are dropped.
    """
    entries: List[StringTableEntry] = []
    for line in lines:
        item = match_string_item(line)
        if item:
            entries.append(StringTableEntry(*item))
    return entries


def c_string_literal(rc_text: str) -> str:
    """
    Quotes RC string text for C++ source.
    RC doubles quotes ("") where C escapes them; backslash escapes (\\n, \\t) mean the same in both.
    """
    text = rc_text.replace('""', '"')
    out = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch == "\\" and i + 1 < len(text):
            out.append(text[i:i + 2])  # Already an escape sequence
            i += 2
            continue
        if ch == "\\":
            out.append("\\\\")
        elif ch == '"':
            out.append('\\"')
        elif ch == "\t":
            out.append("\\t")
        else:
            out.append(ch)
        i += 1
    return '"' + "".join(out) + '"'


def c_path_literal(path: str) -> str:
    """Quotes a file reference for C++ source, with forward slashes."""
    return '"' + normalize_resource_path(path).replace('"', '\\"') + '"'
