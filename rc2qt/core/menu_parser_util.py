# rc2qt/core/menu_parser_util.py

import re
from typing import Iterator, List, Optional

_HEADER_PATTERN = re.compile(r'^(\w+)\s+MENU\b', re.IGNORECASE)
_ITEM_PATTERN = re.compile(
    r'^(MENUITEM|POPUP)\s+"((?:[^"]|"")*)"'   # Keyword and text
    r'(?:\s*,\s*(\w+))?'                       # ID (MENUITEM) or first option (POPUP)
    r'(?:\s*,\s*(.*))?$',                      # Options: GRAYED, CHECKED, ...
    re.IGNORECASE
)
_SEPARATOR_PATTERN = re.compile(r'^MENUITEM\s+SEPARATOR$', re.IGNORECASE)

MENU_OPTION_KEYWORDS = {"CHECKED", "GRAYED", "HELP", "INACTIVE", "MENUBARBREAK", "MENUBREAK"}


class MenuItemEntry:
    def __init__(self, item_type: str = "MENUITEM", text: str = "",
                 id_val: Optional[str] = None,
                 flags: Optional[List[str]] = None,
                 children: Optional[List['MenuItemEntry']] = None):
        self.item_type: str = item_type  # MENUITEM, POPUP or SEPARATOR
        self.text: str = text
        self.id_val: Optional[str] = id_val
        self.flags: List[str] = flags if flags is not None else []
        self.children: List['MenuItemEntry'] = children if children is not None else []

    @property
    def is_popup(self) -> bool:
        return self.item_type == "POPUP"

    @property
    def is_separator(self) -> bool:
        return self.item_type == "SEPARATOR"

    @property
    def shortcut_hint(self) -> Optional[str]:
        """The accelerator text after a tab, e.g. 'Ctrl+N' for "&New\\tCtrl+N"."""
        for sep in ("\\t", "\t"):
            if sep in self.text:
                return self.text.split(sep, 1)[1] or None
        return None

    def __repr__(self):
        return (f"MenuItemEntry(type='{self.item_type}', text='{self.text}', id={self.id_val!r}, "
                f"flags={self.flags}, children={len(self.children)})")


def parse_menu_header(header_line: str) -> Optional[str]:
    match = _HEADER_PATTERN.match(header_line or "")
    return match.group(1) if match else None


def _parse_menu_items_recursive(lines_iterator: Iterator[str], warnings: List[str]) -> List[MenuItemEntry]:
    items: List[MenuItemEntry] = []
    while True:
        try:
            line = next(lines_iterator)
        except StopIteration:
            break
        if line.upper() == "END":
            break

        if _SEPARATOR_PATTERN.match(line):
            items.append(MenuItemEntry(item_type="SEPARATOR"))
            continue

        match = _ITEM_PATTERN.match(line)
        if not match:
            warnings.append(f"Unrecognized menu statement '{line}'")
            continue

        keyword, text, first_arg, options_str = match.groups()
        item_type = keyword.upper()
        text = text.replace('""', '"')
        flags: List[str] = []
        id_val: Optional[str] = None
        if first_arg:
            if item_type == "POPUP" or first_arg.upper() in MENU_OPTION_KEYWORDS:
                flags.append(first_arg.upper())
            else:
                id_val = first_arg
        if options_str:
            flags.extend(f.strip().upper() for f in options_str.split(',') if f.strip())

        entry = MenuItemEntry(item_type=item_type, text=text, id_val=id_val, flags=flags)
        if entry.is_popup:
            try:
                next_line = next(lines_iterator)
            except StopIteration:
                warnings.append(f"End of menu after POPUP '{text}', expected BEGIN")
                items.append(entry)
                break
            if next_line.upper() == "BEGIN":
                entry.children = _parse_menu_items_recursive(lines_iterator, warnings)
            else:
                warnings.append(f"Expected BEGIN after POPUP '{text}', found '{next_line}'")
        items.append(entry)
    return items


def parse_menu_lines(lines: List[str], warnings: Optional[List[str]] = None) -> List[MenuItemEntry]:
    """
    Builds the item tree from the raw body of a MENU block (the lines between its outer BEGIN and END).
    Nested POPUP blocks become children. Problems are appended to warnings, if given.
    """
    if warnings is None:
        warnings = []
    return _parse_menu_items_recursive(iter(lines), warnings)


def iter_menu_items(items: List[MenuItemEntry]):
    """Depth-first walk over a menu tree."""
    for item in items:
        yield item
        if item.children:
            yield from iter_menu_items(item.children)
