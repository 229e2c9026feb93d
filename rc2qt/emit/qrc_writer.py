# rc2qt/emit/qrc_writer.py
import xml.etree.ElementTree as ET
from typing import Iterable, List, Mapping, Tuple, Union

from ..core.resource_base import normalize_resource_path
from ..core.resource_catalog import ResourceCatalog
from ..utils.output_files import write_text_file
from .xml_document import serialize_document

DEFAULT_PREFIX = "/"

ManifestEntries = Union[Mapping[str, str], Iterable[Tuple[str, str]]]


def _iter_entries(resources: ManifestEntries):
    if isinstance(resources, Mapping):
        return resources.items()
    return resources


def build_qrc_element(resources: ManifestEntries, prefix: str = DEFAULT_PREFIX, aliases: bool = False) -> ET.Element:
    rcc = ET.Element("RCC")
    qresource = ET.SubElement(rcc, "qresource", prefix=prefix)
    for name, path in _iter_entries(resources):
        file_element = ET.SubElement(qresource, "file")
        if aliases:
            file_element.set("alias", name)
        file_element.text = path
    return rcc


def build_qrc_document(resources: ManifestEntries, prefix: str = DEFAULT_PREFIX, aliases: bool = False) -> str:
    """
    Renders a Qt resource collection (.qrc) listing one <file> per (name, path) entry.
    Entries are written in the order given; sort them first for stable output.
    With aliases=True each file is also reachable as :<prefix><name>.
    """
    return serialize_document(build_qrc_element(resources, prefix, aliases))


def write_qrc_file(resources: ManifestEntries, output_path: str, prefix: str = DEFAULT_PREFIX,
                   aliases: bool = False):
    write_text_file(output_path, build_qrc_document(resources, prefix, aliases))


def catalog_manifest_entries(catalog: ResourceCatalog) -> List[Tuple[str, str]]:
    """
    Collects (id, path) pairs from the catalog's bitmaps, then icons, sorted by id.
    An id declared more than once keeps its first file; entries without an id are left out.
    """
    entries = {}
    for resource in catalog.iter_file_resources():
        if not resource.has_id:
            continue
        entries.setdefault(resource.id, normalize_resource_path(resource.file_path))
    return sorted(entries.items())
