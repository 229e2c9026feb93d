# rc2qt/emit/xml_document.py
import xml.etree.ElementTree as ET

# Written by hand so the declaration does not depend on ElementTree's locale-derived default encoding.
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
INDENT = "  "


def serialize_document(root: ET.Element) -> str:
    """
    Pretty prints an element tree as a complete XML document.
    Empty elements are written as an open/close pair (<qresource prefix="/"></qresource>),
    which is what rcc and uic produce themselves.
    """
    ET.indent(root, space=INDENT)
    body = ET.tostring(root, encoding="unicode", short_empty_elements=False)
    return f"{XML_DECLARATION}\n{body}\n"
