# rc2qt/core/resource_catalog.py

from typing import Iterator, List

from .resource_base import FileResource, ParseWarning
from .resource_types import (
    AcceleratorTable, BitmapEntry, CatalogEntry, Dialog, IconEntry, Menu, StringTable, ToolbarEntry
)


class ResourceCatalog:
    """
    Everything parsed out of one RC script, one list per resource kind.

    Lists keep source order and duplicate ids are all kept; deciding precedence
    is left to whoever consumes the catalog. Emitters only read it.
    """

    def __init__(self):
        self.bitmaps: List[BitmapEntry] = []
        self.icons: List[IconEntry] = []
        self.string_tables: List[StringTable] = []
        self.toolbars: List[ToolbarEntry] = []
        self.accelerator_tables: List[AcceleratorTable] = []
        self.menus: List[Menu] = []
        self.dialogs: List[Dialog] = []
        self.warnings: List[ParseWarning] = []

    def add(self, entry: CatalogEntry):
        """Appends an entry to the list for its kind."""
        if isinstance(entry, BitmapEntry):
            self.bitmaps.append(entry)
        elif isinstance(entry, IconEntry):
            self.icons.append(entry)
        elif isinstance(entry, StringTable):
            self.string_tables.append(entry)
        elif isinstance(entry, ToolbarEntry):
            self.toolbars.append(entry)
        elif isinstance(entry, AcceleratorTable):
            self.accelerator_tables.append(entry)
        elif isinstance(entry, Menu):
            self.menus.append(entry)
        elif isinstance(entry, Dialog):
            self.dialogs.append(entry)
        else:
            raise TypeError(f"Cannot add {entry!r} to a resource catalog")

    def warn(self, line_number: int, message: str, line: str = ""):
        self.warnings.append(ParseWarning(line_number, message, line))

    def iter_file_resources(self) -> Iterator[FileResource]:
        """Bitmaps, then icons, in source order."""
        yield from self.bitmaps
        yield from self.icons

    def _lists(self):
        return (self.bitmaps, self.icons, self.string_tables, self.toolbars,
                self.accelerator_tables, self.menus, self.dialogs)

    def __len__(self):
        return sum(len(lst) for lst in self._lists())

    def is_empty(self) -> bool:
        return len(self) == 0

    def __repr__(self):
        return (f"<ResourceCatalog bitmaps={len(self.bitmaps)} icons={len(self.icons)} "
                f"string_tables={len(self.string_tables)} toolbars={len(self.toolbars)} "
                f"accelerator_tables={len(self.accelerator_tables)} menus={len(self.menus)} "
                f"dialogs={len(self.dialogs)} warnings={len(self.warnings)}>")
