# .qrc manifests and Qt Designer .ui forms.

import os
import re
import shutil
import tempfile
import unittest
import xml.etree.ElementTree as ET

from rc2qt.core.rc_parser import RCParser
from rc2qt.emit.qrc_writer import build_qrc_document, catalog_manifest_entries, write_qrc_file
from rc2qt.emit.ui_writer import DEFAULT_FORM_GEOMETRY, build_ui_document, write_ui_file
from rc2qt.emit.xml_document import XML_DECLARATION


def compact(document):
    """Drops the declaration and the indentation between tags."""
    body = document.split("\n", 1)[1]
    return re.sub(r">\s+<", "><", body).strip()


def parse_xml(document):
    return ET.fromstring(document.encode("utf-8"))


def rect_values(widget):
    rect = widget.find("property[@name='geometry']/rect")
    return tuple(rect.find(tag).text for tag in ("x", "y", "width", "height"))


class QrcWriterTest(unittest.TestCase):
    def test_empty_manifest(self):
        document = build_qrc_document({})
        self.assertEqual(compact(document), '<RCC><qresource prefix="/"></qresource></RCC>')

    def test_declaration_and_indentation(self):
        lines = build_qrc_document({"foo": "a/b.bmp"}).splitlines()
        self.assertEqual(lines, [
            XML_DECLARATION,
            "<RCC>",
            '  <qresource prefix="/">',
            "    <file>a/b.bmp</file>",
            "  </qresource>",
            "</RCC>",
        ])

    def test_one_entry(self):
        root = parse_xml(build_qrc_document({"foo": "a/b.bmp"}))
        files = root.findall("qresource/file")
        self.assertEqual([f.text for f in files], ["a/b.bmp"])
        self.assertIsNone(files[0].get("alias"))

    def test_order_and_aliases(self):
        entries = [("IDB_Z", "z.bmp"), ("IDB_A", "a & b.bmp")]
        root = parse_xml(build_qrc_document(entries, prefix="/images", aliases=True))
        self.assertEqual(root.find("qresource").get("prefix"), "/images")
        files = root.findall("qresource/file")
        self.assertEqual([(f.get("alias"), f.text) for f in files], entries)

    def test_catalog_manifest_entries(self):
        catalog = RCParser().parse_text(
            'IDB_ZEBRA BITMAP "res\\\\zebra.bmp"\n'
            'IDR_MAINFRAME ICON "res\\\\app.ico"\n'
            'IDB_APPLE BITMAP "res/apple.bmp"\n'
            'IDB_APPLE BITMAP "res/other.bmp"\n'
        )
        self.assertEqual(catalog_manifest_entries(catalog), [
            ("IDB_APPLE", "res/apple.bmp"),
            ("IDB_ZEBRA", "res/zebra.bmp"),
            ("IDR_MAINFRAME", "res/app.ico"),
        ])

    def test_write_qrc_file(self):
        tmp_dir = tempfile.mkdtemp()
        try:
            path = os.path.join(tmp_dir, "resources.qrc")
            write_qrc_file([("foo", "a/b.bmp")], path)
            with open(path, "rb") as f:
                self.assertEqual(f.read(), build_qrc_document([("foo", "a/b.bmp")]).encode("utf-8"))
        finally:
            shutil.rmtree(tmp_dir)


class UiWriterTest(unittest.TestCase):
    def test_button(self):
        document = build_ui_document("ExampleDialog",
                                     ['CONTROL "OK", 101, BUTTON, WS_TABSTOP, 10, 10, 50, 14'])
        root = parse_xml(document)
        self.assertEqual(root.tag, "ui")
        self.assertEqual(root.get("version"), "4.0")
        self.assertEqual(root.find("class").text, "ExampleDialog")
        form = root.find("widget")
        self.assertEqual((form.get("class"), form.get("name")), ("QWidget", "ExampleDialog"))
        self.assertEqual(rect_values(form), tuple(str(v) for v in DEFAULT_FORM_GEOMETRY))
        buttons = form.findall("widget")
        self.assertEqual(len(buttons), 1)
        button = buttons[0]
        self.assertEqual((button.get("class"), button.get("name")), ("QPushButton", "button_101"))
        self.assertEqual(rect_values(button), ("10", "10", "50", "14"))
        self.assertEqual(button.find("property[@name='text']/string").text, "OK")

    def test_default_geometry(self):
        self.assertEqual(DEFAULT_FORM_GEOMETRY, (0, 0, 400, 300))

    def test_non_button_lines_skipped(self):
        root = parse_xml(build_ui_document("IDD_MAIN", [
            'LTEXT "Name:", IDC_STATIC, 7, 7, 40, 8',
            'CONTROL "", IDC_LIST, "SysListView32", LVS_REPORT, 7, 20, 100, 50',
            'CONTROL "&Apply", IDC_APPLY, "Button", BS_PUSHBUTTON | WS_TABSTOP, 7, 80, 50, 14',
            "garbage",
        ]))
        names = [w.get("name") for w in root.find("widget").findall("widget")]
        self.assertEqual(names, ["button_IDC_APPLY"])

    def test_no_controls(self):
        root = parse_xml(build_ui_document("IDD_EMPTY", []))
        self.assertEqual(root.find("widget").findall("widget"), [])

    def test_text_is_escaped(self):
        document = build_ui_document("IDD_X", ['CONTROL "Save && ""Quit""", IDC_Q, BUTTON, 0, 1, 2, 3, 4'])
        self.assertIn("Save &amp;&amp; \"Quit\"", document)
        button = parse_xml(document).find("widget/widget")
        self.assertEqual(button.find("property[@name='text']/string").text, 'Save && "Quit"')

    def test_write_ui_file(self):
        tmp_dir = tempfile.mkdtemp()
        try:
            path = os.path.join(tmp_dir, "IDD_X.ui")
            write_ui_file("IDD_X", [], path)
            with open(path, encoding="utf-8") as f:
                self.assertEqual(f.read(), build_ui_document("IDD_X", []))
        finally:
            shutil.rmtree(tmp_dir)


if __name__ == "__main__":
    unittest.main()
