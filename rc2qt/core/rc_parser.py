# rc2qt/core/rc_parser.py

from typing import Iterable

from .line_source import LineSource
from .rc_patterns import LineClass, LineKind, classify_line, has_inline_begin, is_begin, match_bitmap_attribute
from .rc_parser_util import parse_stringtable_lines
from .resource_catalog import ResourceCatalog
from .resource_types import AcceleratorTable, BitmapEntry, Dialog, IconEntry, Menu, StringTable, ToolbarEntry


class RCParser:
    """
    Single pass block parser for RC scripts.

    Each statement line is classified (first matching pattern wins) and block
    resources consume their lines up to END. Anything the parser does not model
    is skipped and reported on catalog.warnings rather than raised.
    """

    def __init__(self, encoding: str = "utf-8", warn_unrecognized: bool = True):
        self.encoding = encoding  # Encoding of the RC file itself
        self.warn_unrecognized = warn_unrecognized
        self.catalog = ResourceCatalog()
        self._handlers = {
            LineKind.BITMAP: self._parse_bitmap,
            LineKind.ICON: self._parse_icon,
            LineKind.STRINGTABLE_START: self._parse_stringtable,
            LineKind.TOOLBAR: self._parse_toolbar,
            LineKind.TOOLBAR_BLOCK: self._parse_toolbar_block,
            LineKind.ACCELERATORS_START: self._parse_accelerators,
            LineKind.MENU_START: self._parse_menu,
            LineKind.DIALOG: self._parse_dialog,
        }

    def parse_rc_file(self, rc_filepath: str) -> ResourceCatalog:
        """Parses an RC file. Raises RCSourceError if it cannot be read."""
        return self.parse_source(LineSource.open(rc_filepath, self.encoding))

    def parse_text(self, rc_text: str) -> ResourceCatalog:
        return self.parse_source(LineSource.from_text(rc_text))

    def parse_lines(self, lines: Iterable[str]) -> ResourceCatalog:
        return self.parse_source(LineSource(lines))

    def parse_source(self, source: LineSource) -> ResourceCatalog:
        self.catalog = ResourceCatalog()
        for line in source:
            if line.startswith("#"):  # #include, #define, #if ... are left to the C preprocessor
                continue
            line_class = classify_line(line)
            handler = self._handlers.get(line_class.kind)
            warned = len(self.catalog.warnings)
            if handler is None or not handler(line, line_class, source):
                if len(self.catalog.warnings) == warned:  # A failed header has already been reported
                    self._skip_unrecognized(line, line_class, source)
        return self.catalog

    # --- Helpers ---

    def _open_block(self, line: str, line_class: LineClass, source: LineSource) -> bool:
        """Consumes the BEGIN of a block header, on the same line or the next one."""
        if has_inline_begin(line_class):
            return True
        if is_begin(source.peek()):
            source.next_line()
            return True
        self.catalog.warn(source.line_number, f"Expected BEGIN after '{line}'", line)
        return False

    def _check_terminated(self, source: LineSource, header_line: str, header_number: int):
        if source.reached_end:
            self.catalog.warn(header_number, f"EOF reached before END of block '{header_line}'. Block may be incomplete.",
                              header_line)

    def _add_block(self, entry, header_number: int):
        entry.line_number = header_number
        self.catalog.add(entry)

    def _skip_unrecognized(self, line: str, line_class: LineClass, source: LineSource):
        line_number = source.line_number
        if line_class.kind == LineKind.END:
            self.catalog.warn(line_number, "END without a matching block", line)
            return
        if is_begin(source.peek()):
            # VERSIONINFO, TEXTINCLUDE, DESIGNINFO, ...: skip the whole block in one go.
            source.next_line()
            source.consume_block()
            self.catalog.warn(line_number, f"Unsupported resource block skipped: '{line}'", line)
            return
        if self.warn_unrecognized:
            self.catalog.warn(line_number, f"Unrecognized statement ignored: '{line}'", line)

    # --- Resource handlers; each returns False if the line turned out not to start its resource ---

    def _parse_bitmap(self, line: str, line_class: LineClass, source: LineSource) -> bool:
        res_id, file_path = line_class.match.groups()
        header_number = source.line_number
        attributes = {}
        if is_begin(source.peek()):  # Extended form with attribute statements
            source.next_line()
            source.reached_end = False
            while True:
                attr_line = source.next_line()
                if attr_line is None or attr_line == "END":
                    break
                parsed = match_bitmap_attribute(attr_line)
                if parsed is None:
                    self.catalog.warn(source.line_number, f"Unrecognized bitmap attribute ignored: '{attr_line}'",
                                      attr_line)
                    continue
                field_name, value = parsed
                attributes[field_name] = value
            self._check_terminated(source, line, header_number)
        self.catalog.add(BitmapEntry(res_id, file_path, line, **attributes))
        return True

    def _parse_icon(self, line: str, line_class: LineClass, source: LineSource) -> bool:
        res_id, file_path = line_class.match.groups()
        self.catalog.add(IconEntry(res_id, file_path, line))
        return True

    def _parse_stringtable(self, line: str, line_class: LineClass, source: LineSource) -> bool:
        header_number = source.line_number
        if not self._open_block(line, line_class, source):
            return False
        block_lines = source.consume_until("END")
        self._check_terminated(source, line, header_number)
        self.catalog.add(StringTable(parse_stringtable_lines(block_lines)))
        return True

    def _parse_toolbar(self, line: str, line_class: LineClass, source: LineSource) -> bool:
        res_id, label = line_class.match.groups()
        self._add_block(ToolbarEntry(res_id, label=label, header_line=line), source.line_number)
        return True

    def _parse_toolbar_block(self, line: str, line_class: LineClass, source: LineSource) -> bool:
        res_id, width, height, _rest = line_class.match.groups()
        header_number = source.line_number
        if not self._open_block(line, line_class, source):
            return False
        block_lines = source.consume_until("END")
        self._check_terminated(source, line, header_number)
        self._add_block(ToolbarEntry(res_id, lines=block_lines, numbers=[int(width), int(height)], header_line=line),
                        header_number)
        return True

    def _parse_accelerators(self, line: str, line_class: LineClass, source: LineSource) -> bool:
        header_number = source.line_number
        if not self._open_block(line, line_class, source):
            return False
        block_lines = source.consume_until("END")
        self._check_terminated(source, line, header_number)
        self._add_block(AcceleratorTable(None, block_lines, header_line=line), header_number)
        return True

    def _parse_menu(self, line: str, line_class: LineClass, source: LineSource) -> bool:
        header_number = source.line_number
        if not self._open_block(line, line_class, source):
            return False
        # POPUP submenus nest their own BEGIN ... END inside the menu body
        block_lines = source.consume_block()
        self._check_terminated(source, line, header_number)
        self._add_block(Menu(None, block_lines, header_line=line), header_number)
        return True

    def _parse_dialog(self, line: str, line_class: LineClass, source: LineSource) -> bool:
        res_id = line_class.match.group(1)
        header_number = source.line_number
        # Statements (STYLE, CAPTION, FONT), BEGIN and the controls are kept verbatim.
        block_lines = source.consume_until("END")
        self._check_terminated(source, line, header_number)
        self._add_block(Dialog(res_id, block_lines, header_line=line), header_number)
        return True


def parse_rc_file(rc_filepath: str, encoding: str = "utf-8") -> ResourceCatalog:
    return RCParser(encoding=encoding).parse_rc_file(rc_filepath)


if __name__ == '__main__':
    import sys
    if len(sys.argv) < 2:
        print("Usage: python -m rc2qt.core.rc_parser <file.rc>")
        sys.exit(2)
    parsed = parse_rc_file(sys.argv[1])
    print(parsed)
    for warning in parsed.warnings:
        print(f"Warning: {warning}")
