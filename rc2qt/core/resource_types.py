# rc2qt/core/resource_types.py

from typing import Iterator, List, Optional, Union

from .resource_base import FileResource, TextBlockResource, normalize_resource_path
from .rc_parser_util import StringTableEntry
from .accelerator_parser_util import AcceleratorEntry
from .menu_parser_util import MenuItemEntry

BITMAP_ATTRIBUTES = (
    "width", "height", "color_depth", "compression", "palette",
    "dpi", "color_mode", "compression_level", "author",
)


class BitmapEntry(FileResource):
    rc_keyword = "BITMAP"

    def __init__(self, res_id: str, file_path: str, original_rc_statement: str = "", **attributes):
        super().__init__(res_id, normalize_resource_path(file_path), original_rc_statement)
        self.width: Optional[int] = None
        self.height: Optional[int] = None
        self.color_depth: Optional[int] = None
        self.compression: Optional[str] = None
        self.palette: Optional[str] = None
        self.dpi: Optional[int] = None
        self.color_mode: Optional[str] = None
        self.compression_level: Optional[int] = None
        self.author: Optional[str] = None
        for name, value in attributes.items():
            if name not in BITMAP_ATTRIBUTES:
                raise TypeError(f"Unknown bitmap attribute '{name}'")
            setattr(self, name, value)

    @property
    def attributes(self) -> dict:
        """The extended attributes that were actually declared."""
        return {name: getattr(self, name) for name in BITMAP_ATTRIBUTES if getattr(self, name) is not None}


class IconEntry(FileResource):
    rc_keyword = "ICON"


class StringTable:
    def __init__(self, entries: Optional[List[StringTableEntry]] = None):
        self.entries: List[StringTableEntry] = entries if entries is not None else []

    def __iter__(self) -> Iterator[StringTableEntry]:
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)

    def __repr__(self):
        return f"<StringTable with {len(self.entries)} entries>"


class ToolbarEntry(TextBlockResource):
    rc_keyword = "TOOLBAR"

    def __init__(self, res_id: str, label: Optional[str] = None, lines: Optional[List[str]] = None,
                 numbers: Optional[List[int]] = None, header_line: str = ""):
        super().__init__(res_id, lines, header_line)
        self.label: Optional[str] = label
        self.numbers: List[int] = numbers if numbers is not None else []  # Button width, height


class AcceleratorTable(TextBlockResource):
    rc_keyword = "ACCELERATORS"

    def __init__(self, res_id: Optional[str] = None, lines: Optional[List[str]] = None, header_line: str = ""):
        super().__init__(res_id, lines, header_line)
        self.entries: List[AcceleratorEntry] = []


class Menu(TextBlockResource):
    rc_keyword = "MENU"

    def __init__(self, res_id: Optional[str] = None, lines: Optional[List[str]] = None, header_line: str = ""):
        super().__init__(res_id, lines, header_line)
        self.items: List[MenuItemEntry] = []


class Dialog(TextBlockResource):
    rc_keyword = "DIALOGEX"

    def __init__(self, res_id: str, lines: Optional[List[str]] = None, header_line: str = ""):
        super().__init__(res_id, lines, header_line)
        # Left empty by the block parser; rc_refine fills them from the header and body.
        self.caption: str = ""
        self.style: str = ""
        self.font: str = ""
        self.options: List[str] = []
        self.numbers: List[int] = []
        self.controls: List[str] = []

    @property
    def control_lines(self) -> List[str]:
        """Control statements for form generation; the raw body until the dialog has been refined."""
        return self.controls if self.controls else self.lines


CatalogEntry = Union[BitmapEntry, IconEntry, StringTable, ToolbarEntry, AcceleratorTable, Menu, Dialog]
