# rc2qt/emit/shim_writer.py
from typing import List, Optional, Sequence, Tuple

from ..core.menu_parser_util import MenuItemEntry, iter_menu_items
from ..core.rc_parser_util import c_path_literal, c_string_literal
from ..core.resource_catalog import ResourceCatalog
from ..utils.output_files import write_text_file

# Registries the generated code expects the Qt/MFC compatibility layer to define.
BITMAP_REGISTRY = "qtMfcBitmapResources"
ICON_NAME_REGISTRY = "qtIconNames"
ICON_REGISTRY = "qtIconResources"
STRING_REGISTRY = "qtMfcStringResources"

# Strings MFC itself provides; always registered so framework dialogs keep working.
AFX_DEFAULT_STRINGS: List[Tuple[str, str]] = [
    ("AFX_IDS_ALLFILTER", "All files|"),
    ("AFX_IDS_OPENFILE", "Open"),
    ("AFX_IDS_SAVEFILE", "Save As"),
    ("AFX_IDS_SAVEFILECOPY", "Save As"),
    ("AFX_IDS_UNTITLED", "Untitled"),
    ("AFX_IDP_ASK_TO_SAVE", "Save changes to %s?"),
    ("AFX_IDP_FAILED_TO_CREATE_DOC", "Failed to create empty document."),
]

INDENT = "    "

# Walks the top level popups and turns "Text\tCtrl+N" hints into real shortcuts.
MENU_SHORTCUT_FIXUP = [
    "// Fixup shortcuts",
    "int menu = 0;",
    "CMenu* subMenu = parent->GetSubMenu(menu);",
    "while (subMenu) {",
    "    foreach (QAction* action, subMenu->toQMenu()->actions()) {",
    "        if (action->text().contains(\"\\t\")) {",
    "            action->setShortcut(QKeySequence(action->text().split(\"\\t\").at(1)));",
    "        }",
    "    }",
    "    menu++;",
    "    subMenu = parent->GetSubMenu(menu);",
    "}",
]


def _indent(lines: Sequence[str], level: int = 1) -> List[str]:
    return [INDENT * level + line for line in lines]


def _comment(text: str) -> str:
    return f"// {text}"


def _header_comment(entry) -> List[str]:
    return [_comment(entry.header_line)] if entry.header_line else []


def _switch(variable: str, cases: Sequence[Tuple[str, List[str]]], extra: Optional[List[str]] = None) -> List[str]:
    """A switch statement; each case is (label, statements), break is appended by the caller."""
    out = [f"switch ({variable}) {{"]
    for label, statements in cases:
        out.append(INDENT + f"case {label}:")
        out.extend(_indent(statements, 2))
    if extra:
        out.extend(_indent(extra))
    out.append("}")
    return out


class ShimWriter:
    """
    Renders C++ source that registers a catalog's resources with the Qt port of the MFC API.

    Expects a refined catalog (see rc_refine.refine_catalog); accelerator tables and
    menus whose id is still unknown are skipped with a comment. Ids are written as
    they appear in the script, so the generated file must include resource.h.
    The catalog is only read.
    """

    def __init__(self, catalog: ResourceCatalog, source_name: Optional[str] = None):
        self.catalog = catalog
        self.source_name = source_name

    # --- Helpers ---

    @staticmethod
    def _identified(entries, keyword: str):
        """Splits entries into the ones that can get a function and comments for the rest."""
        kept = []
        skipped: List[str] = []
        seen = set()
        for entry in entries:
            if not entry.has_id:
                skipped.append(_comment(f"{keyword} without an identifier skipped: {entry.header_line}"))
            elif entry.id in seen:
                skipped.append(_comment(f"Duplicate {keyword} {entry.id} skipped"))
            else:
                seen.add(entry.id)
                kept.append(entry)
        return kept, skipped

    @staticmethod
    def _function(signature: str, body: List[str]) -> List[str]:
        return [f"{signature} {{"] + _indent(body) + ["}"]

    # --- Sections ---

    def header(self) -> List[str]:
        lines = [_comment("Generated by rc2qt. Do not edit.")]
        if self.source_name:
            lines.append(_comment(f"Source: {self.source_name}"))
        return lines

    def bitmaps(self) -> List[str]:
        body = [f"{BITMAP_REGISTRY}.clear();"]
        for bitmap in self.catalog.bitmaps:
            body.append(_comment(bitmap.to_rc_text()))
            body.append(f"{BITMAP_REGISTRY}.insert({bitmap.id}, new CBitmap({c_path_literal(bitmap.file_path)}));")
        return self._function("void qtMfcInitBitmapResources()", body)

    def icons(self) -> List[str]:
        body = [
            f"{ICON_NAME_REGISTRY}.clear();",
            f"{ICON_REGISTRY}.clear();",
            _comment("Icon with lowest ID value placed first to ensure application icon remains consistent "
                     "on all systems."),
        ]
        for icon in self.catalog.icons:
            body.append(_comment(icon.to_rc_text()))
            body.append(f"{ICON_NAME_REGISTRY}.insert({icon.id}, {c_path_literal(icon.file_path)});")
        return self._function("void qtInitIconResources()", body)

    def strings(self) -> List[str]:
        body = [f"{STRING_REGISTRY}.clear();"]
        for table in self.catalog.string_tables:
            body.append(_comment("STRINGTABLE"))
            body.append(_comment("BEGIN"))
            for entry in table:
                body.append(_comment(f'{entry.id} "{entry.text}"'))
                body.append(f"{STRING_REGISTRY}.insert({entry.id}, {c_string_literal(entry.text)});")
            body.append(_comment("END"))
        body.append(_comment("AFX resources"))
        for afx_id, text in AFX_DEFAULT_STRINGS:
            body.append(f"{STRING_REGISTRY}.insert({afx_id}, {c_string_literal(text)});")
        return self._function("void qtMfcInitStringResources()", body)

    def toolbars(self) -> List[str]:
        toolbars, out = self._identified(self.catalog.toolbars, "TOOLBAR")
        for toolbar in toolbars:
            body = _header_comment(toolbar) + [_comment(line) for line in toolbar.lines]
            out.extend(self._function(
                f"void qtMfcInitToolBarResource_{toolbar.id}(UINT dlgID, CToolBar* parent)", body))
        cases = [(t.id, [f"qtMfcInitToolBarResource_{t.id}(dlgID, parent);", "break;"]) for t in toolbars]
        out.extend(self._function("void qtMfcInitToolBarResource(UINT dlgID, CToolBar* parent)",
                                  _switch("dlgID", cases)))
        return out

    def accelerators(self) -> List[str]:
        tables, out = self._identified(self.catalog.accelerator_tables, "ACCELERATORS")
        for table in tables:
            out.append(_comment(f"{table.id} ACCELERATORS"))
            out.append(f"ACCEL ACCEL_{table.id}[] = {{")
            for entry in table.entries:
                out.append(INDENT + f"{{ {entry.fvirt_expression()}, {entry.key_expression()}, {entry.command_id} }},")
            out.append(INDENT + "{ 0, 0, 0 },")
            out.append("};")
        cases = [(t.id, [f"return ACCEL_{t.id};", "break;"]) for t in tables]
        out.extend(self._function("ACCEL* qtMfcAcceleratorResource(UINT id)",
                                  _switch("id", cases) + ["return NULL;"]))
        return out

    @staticmethod
    def _menu_outline(items: List[MenuItemEntry], depth: int = 0) -> List[str]:
        lines: List[str] = []
        for item in items:
            pad = INDENT * depth
            if item.is_separator:
                lines.append(_comment(f"{pad}MENUITEM SEPARATOR"))
            elif item.is_popup:
                lines.append(_comment(f'{pad}POPUP "{item.text}"'))
                lines.extend(ShimWriter._menu_outline(item.children, depth + 1))
            else:
                suffix = f", {item.id_val}" if item.id_val else ""
                lines.append(_comment(f'{pad}MENUITEM "{item.text}"{suffix}'))
        return lines

    @staticmethod
    def _menu_shortcuts(items: List[MenuItemEntry]) -> List[str]:
        return [_comment(f"Shortcut {item.shortcut_hint}: {item.id_val}")
                for item in iter_menu_items(items) if item.id_val and item.shortcut_hint]

    def menus(self) -> List[str]:
        menus, out = self._identified(self.catalog.menus, "MENU")
        for menu in menus:
            body = _header_comment(menu) + self._menu_outline(menu.items) + self._menu_shortcuts(menu.items)
            out.extend(self._function(f"void qtMfcInitMenuResource_{menu.id}(CMenu* parent)", body))
        cases = [(m.id, [f"qtMfcInitMenuResource_{m.id}(parent);", "break;"]) for m in menus]
        out.extend(self._function("void qtMfcInitMenuResource(UINT menuID, CMenu* parent)",
                                  _switch("menuID", cases) + MENU_SHORTCUT_FIXUP))
        return out

    def dialogs(self) -> List[str]:
        dialogs, out = self._identified(self.catalog.dialogs, "DIALOG")
        for dialog in dialogs:
            body = _header_comment(dialog)
            if dialog.caption:
                body.append(_comment(f'CAPTION "{dialog.caption}"'))
            body.append(_comment(f"Form: {dialog.id}.ui"))
            out.extend(self._function(f"void qtMfcInitDialogResource_{dialog.id}(CDialog* parent)", body))
        cases = [(d.id, [f"qtMfcInitDialogResource_{d.id}(parent);", "break;"]) for d in dialogs]
        if all(d.id != "0" for d in dialogs):
            cases.append(("0", [_comment("Allow blank dialogs."), "break;"]))
        default = ["default:", INDENT + 'qFatal("dialog resource not implemented...");']
        out.extend(self._function("void qtMfcInitDialogResource(UINT dlgID, CDialog* parent)",
                                  _switch("dlgID", cases, default)))
        return out

    def sections(self) -> List[List[str]]:
        return [
            self.header(),
            self.bitmaps(),
            self.icons(),
            self.strings(),
            self.toolbars(),
            self.accelerators(),
            self.menus(),
            self.dialogs(),
        ]

    def render(self) -> str:
        return "\n\n".join("\n".join(section) for section in self.sections()) + "\n"


def write_shim_file(catalog: ResourceCatalog, output_path: str, source_name: Optional[str] = None):
    write_text_file(output_path, ShimWriter(catalog, source_name).render())
