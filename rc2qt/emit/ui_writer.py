# rc2qt/emit/ui_writer.py
import xml.etree.ElementTree as ET
from typing import Iterable, Tuple

from ..core.rc_patterns import match_control
from ..utils.output_files import write_text_file
from .xml_document import serialize_document

UI_VERSION = "4.0"
# x, y, width, height of the top level form. Not taken from the dialog's own coordinates.
DEFAULT_FORM_GEOMETRY: Tuple[int, int, int, int] = (0, 0, 400, 300)


def _add_geometry(widget: ET.Element, x, y, width, height):
    prop = ET.SubElement(widget, "property", name="geometry")
    rect = ET.SubElement(prop, "rect")
    for tag, value in (("x", x), ("y", y), ("width", width), ("height", height)):
        ET.SubElement(rect, tag).text = str(value)


def _add_push_button(form: ET.Element, text: str, control_id: str, x, y, width, height):
    button = ET.SubElement(form, "widget", {"class": "QPushButton", "name": f"button_{control_id}"})
    _add_geometry(button, x, y, width, height)
    text_prop = ET.SubElement(button, "property", name="text")
    ET.SubElement(text_prop, "string").text = text


def build_ui_element(dialog_name: str, controls: Iterable[str]) -> ET.Element:
    ui = ET.Element("ui", version=UI_VERSION)
    ET.SubElement(ui, "class").text = dialog_name
    form = ET.SubElement(ui, "widget", {"class": "QWidget", "name": dialog_name})
    _add_geometry(form, *DEFAULT_FORM_GEOMETRY)
    for line in controls:
        control = match_control(line)
        if control is None:  # Only BUTTON controls have a Qt counterpart so far
            continue
        _add_push_button(form, *control)
    return ui


def build_ui_document(dialog_name: str, controls: Iterable[str]) -> str:
    """
    Renders a Qt Designer form for one dialog: a QWidget with one QPushButton per
    'CONTROL "text", id, BUTTON, style, x, y, w, h' line. Other lines are skipped.
    """
    return serialize_document(build_ui_element(dialog_name, controls))


def write_ui_file(dialog_name: str, controls: Iterable[str], output_path: str):
    write_text_file(output_path, build_ui_document(dialog_name, controls))
