# rc2qt/core/rc_refine.py

from typing import List

from .accelerator_parser_util import parse_accelerator_header, parse_accelerator_lines
from .dialog_parser_util import parse_dialog_body, parse_dialog_header
from .menu_parser_util import parse_menu_header, parse_menu_lines
from .resource_catalog import ResourceCatalog
from .resource_types import AcceleratorTable, Dialog, Menu


def _record(catalog: ResourceCatalog, messages: List[str], block):
    for message in messages:
        catalog.warn(block.line_number, message, block.header_line)


def refine_accelerator_table(table: AcceleratorTable):
    if not table.id:
        table.id = parse_accelerator_header(table.header_line)
    table.entries = parse_accelerator_lines(table.lines)


def refine_menu(menu: Menu, warnings: List[str]):
    if not menu.id:
        menu.id = parse_menu_header(menu.header_line)
    menu.items = parse_menu_lines(menu.lines, warnings)


def refine_dialog(dialog: Dialog, warnings: List[str]):
    header = parse_dialog_header(dialog.header_line, warnings)
    props, controls = parse_dialog_body(dialog.lines)
    if header is not None:
        dialog.numbers = header.numbers
        dialog.options = header.options + props["options"]
    else:
        dialog.options = props["options"]
    dialog.caption = props["caption"]
    dialog.style = props["style"]
    dialog.font = props["font"]
    dialog.controls = controls


def refine_catalog(catalog: ResourceCatalog) -> ResourceCatalog:
    """
    Fills in the structured fields the block parser leaves empty: accelerator and menu ids,
    accelerator entries, menu item trees and the dialog caption/style/font/coordinates/controls.
    Raw line lists are left as they are. Returns the same catalog.
    """
    for table in catalog.accelerator_tables:
        refine_accelerator_table(table)

    for menu in catalog.menus:
        messages: List[str] = []
        refine_menu(menu, messages)
        _record(catalog, messages, menu)

    for dialog in catalog.dialogs:
        messages = []
        refine_dialog(dialog, messages)
        _record(catalog, messages, dialog)

    return catalog
