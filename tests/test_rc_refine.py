# Structured fields filled in after the block parser has run.

import unittest

from rc2qt.core.accelerator_parser_util import parse_accelerator_lines
from rc2qt.core.menu_parser_util import iter_menu_items
from rc2qt.core.rc_parser import RCParser
from rc2qt.core.rc_refine import refine_catalog

ACCELERATORS_RC = r'''
IDR_MAINFRAME ACCELERATORS
BEGIN
    "N",            ID_FILE_NEW,            VIRTKEY, CONTROL
    VK_F1,          ID_HELP,                VIRTKEY
    "^C",           ID_EDIT_COPY
    "a",            ID_EDIT_ADD,            ASCII, NOINVERT
END
'''

MENU_RC = r'''
IDR_MAINFRAME MENU
BEGIN
    POPUP "&File"
    BEGIN
        MENUITEM "&New\tCtrl+N",                ID_FILE_NEW
        MENUITEM SEPARATOR
        POPUP "Recent"
        BEGIN
            MENUITEM "(none)",                  ID_FILE_MRU_FILE1, GRAYED
        END
        MENUITEM "E&xit",                       ID_APP_EXIT
    END
    POPUP "&Help"
    BEGIN
        MENUITEM "&About",                      ID_APP_ABOUT
    END
END
'''

DIALOG_RC = r'''
IDD_ABOUTBOX DIALOGEX 0, 0, 170, 62
STYLE DS_SETFONT | DS_MODALFRAME |   WS_POPUP | WS_CAPTION
EXSTYLE WS_EX_TOOLWINDOW
CAPTION "About ""Demo"""
FONT 8, "MS Shell Dlg", 0, 0, 0x1
BEGIN
    ICON            IDR_MAINFRAME,IDC_STATIC,14,14,21,20
    CONTROL "OK", IDOK, "Button", BS_DEFPUSHBUTTON | WS_TABSTOP, 113, 41, 50, 14
END
'''


def parse_and_refine(text):
    return refine_catalog(RCParser().parse_text(text))


class AcceleratorRefineTest(unittest.TestCase):
    def setUp(self):
        self.table = parse_and_refine(ACCELERATORS_RC).accelerator_tables[0]

    def test_id_from_header(self):
        self.assertEqual(self.table.id, "IDR_MAINFRAME")

    def test_entries(self):
        entries = self.table.entries
        self.assertEqual([e.command_id for e in entries], ["ID_FILE_NEW", "ID_HELP", "ID_EDIT_COPY", "ID_EDIT_ADD"])
        new, help_, copy, add = entries
        self.assertEqual((new.key_event_str, new.type_flags), ("N", ["VIRTKEY", "CONTROL"]))
        self.assertEqual(new.fvirt_expression(), "FVIRTKEY | FCONTROL")
        self.assertEqual(new.key_expression(), "'N'")
        self.assertTrue(help_.is_virtkey)
        self.assertEqual(help_.key_expression(), "VK_F1")
        self.assertEqual(copy.key_expression(), "3")
        self.assertEqual(copy.fvirt_expression(), "0")
        self.assertEqual(add.fvirt_expression(), "FNOINVERT")

    def test_virtkey_letters_upper_case(self):
        lower, plain = parse_accelerator_lines(['"n", ID_FILE_NEW, VIRTKEY, CONTROL', '"n", ID_NEXT'])
        self.assertEqual(lower.key_expression(), "'N'")
        self.assertFalse(plain.is_virtkey)
        self.assertEqual(plain.key_expression(), "'n'")

    def test_raw_lines_untouched(self):
        self.assertEqual(len(self.table.lines), 4)

    def test_table_without_id(self):
        catalog = parse_and_refine('ACCELERATORS\nBEGIN\n"Q", ID_QUIT\nEND\n')
        self.assertIsNone(catalog.accelerator_tables[0].id)
        self.assertEqual(len(catalog.accelerator_tables[0].entries), 1)


class MenuRefineTest(unittest.TestCase):
    def setUp(self):
        self.catalog = parse_and_refine(MENU_RC)
        self.menu = self.catalog.menus[0]

    def test_id_from_header(self):
        self.assertEqual(self.menu.id, "IDR_MAINFRAME")

    def test_tree(self):
        file_menu, help_menu = self.menu.items
        self.assertTrue(file_menu.is_popup)
        self.assertEqual(file_menu.text, "&File")
        self.assertEqual([c.item_type for c in file_menu.children], ["MENUITEM", "SEPARATOR", "POPUP", "MENUITEM"])
        recent = file_menu.children[2]
        self.assertEqual(recent.children[0].id_val, "ID_FILE_MRU_FILE1")
        self.assertEqual(recent.children[0].flags, ["GRAYED"])
        self.assertEqual(help_menu.children[0].id_val, "ID_APP_ABOUT")

    def test_shortcut_hint(self):
        new_item = self.menu.items[0].children[0]
        self.assertEqual(new_item.shortcut_hint, "Ctrl+N")
        self.assertIsNone(self.menu.items[1].children[0].shortcut_hint)

    def test_walk(self):
        ids = [item.id_val for item in iter_menu_items(self.menu.items) if item.id_val]
        self.assertEqual(ids, ["ID_FILE_NEW", "ID_FILE_MRU_FILE1", "ID_APP_EXIT", "ID_APP_ABOUT"])

    def test_no_warnings(self):
        self.assertEqual(self.catalog.warnings, [])

    def test_bad_menu_line_warns_with_header_line(self):
        catalog = parse_and_refine('\nIDR_POPUP MENU\nBEGIN\n    BOGUS "x"\nEND\n')
        self.assertEqual(len(catalog.warnings), 1)
        self.assertEqual(catalog.warnings[0].line_number, 2)
        self.assertIn("BOGUS", catalog.warnings[0].message)


class DialogRefineTest(unittest.TestCase):
    def setUp(self):
        self.catalog = parse_and_refine(DIALOG_RC)
        self.dialog = self.catalog.dialogs[0]

    def test_header_numbers(self):
        self.assertEqual(self.dialog.numbers, [0, 0, 170, 62])

    def test_statements(self):
        self.assertEqual(self.dialog.caption, 'About "Demo"')
        self.assertEqual(self.dialog.style, "DS_SETFONT | DS_MODALFRAME | WS_POPUP | WS_CAPTION")
        self.assertEqual(self.dialog.font, '8, "MS Shell Dlg", 0, 0, 0x1')
        self.assertEqual(self.dialog.options, ["EXSTYLE WS_EX_TOOLWINDOW"])

    def test_controls(self):
        self.assertEqual(self.dialog.controls, [
            "ICON            IDR_MAINFRAME,IDC_STATIC,14,14,21,20",
            'CONTROL "OK", IDOK, "Button", BS_DEFPUSHBUTTON | WS_TABSTOP, 113, 41, 50, 14',
        ])
        self.assertEqual(self.dialog.control_lines, self.dialog.controls)

    def test_raw_lines_untouched(self):
        self.assertEqual(len(self.dialog.lines), 7)
        self.assertEqual(self.dialog.lines[4], "BEGIN")

    def test_header_options(self):
        dialog = parse_and_refine("IDD_OLD DIALOG DISCARDABLE 10, 20, 100, 0x40\nBEGIN\nEND\n").dialogs[0]
        self.assertEqual(dialog.options, ["DISCARDABLE"])
        self.assertEqual(dialog.numbers, [10, 20, 100, 64])
        self.assertEqual(dialog.controls, [])

    def test_malformed_header(self):
        catalog = parse_and_refine("IDD_BAD DIALOGEX 0, 0, wide, 62\nBEGIN\nEND\n")
        self.assertEqual(catalog.dialogs[0].numbers, [0, 0, 62])
        warning_text = " ".join(w.message for w in catalog.warnings)
        self.assertIn("non-numeric coordinate 'wide'", warning_text)
        self.assertIn("expected 4 coordinates", warning_text)
        self.assertTrue(all(w.line_number == 1 for w in catalog.warnings))

    def test_returns_same_catalog(self):
        catalog = RCParser().parse_text(DIALOG_RC)
        self.assertIs(refine_catalog(catalog), catalog)


if __name__ == "__main__":
    unittest.main()
