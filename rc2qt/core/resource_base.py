# rc2qt/core/resource_base.py

from typing import List, Optional


def normalize_resource_path(path: str) -> str:
    """
    Converts an RC file reference to forward slashes.
    RC scripts escape backslashes inside strings, so both "res\\\\a.bmp" and "res\\a.bmp" become "res/a.bmp".
    """
    return path.replace("\\\\", "/").replace("\\", "/")


class ParseWarning:
    """
    A recoverable problem noticed while reading an RC script.
    Parsing never stops for these; they are collected on the catalog instead.
    """
    def __init__(self, line_number: int, message: str, line: str = ""):
        self.line_number = line_number
        self.message = message
        self.line = line

    def __str__(self):
        return f"line {self.line_number}: {self.message}"

    def __repr__(self):
        return f"ParseWarning(line={self.line_number}, message={self.message!r})"

    def __eq__(self, other):
        if not isinstance(other, ParseWarning):
            return NotImplemented
        return (self.line_number, self.message, self.line) == (other.line_number, other.message, other.line)


class Resource:
    """
    Base class for catalog entries.
    The identifier is kept exactly as written in the script (IDB_LOGO, 101, ...); it is never resolved.
    """
    rc_keyword: str = ""

    def __init__(self, res_id: Optional[str]):
        self.id: Optional[str] = res_id

    @property
    def has_id(self) -> bool:
        return bool(self.id)

    def __repr__(self):
        return f"{self.__class__.__name__}(id={self.id!r})"


class FileResource(Resource):  # Resources that only reference an external file (.ico, .bmp)
    def __init__(self, res_id: str, file_path: str, original_rc_statement: str = ""):
        super().__init__(res_id)
        self.file_path = file_path
        self.original_rc_statement = original_rc_statement

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.id} linked to '{self.file_path}'>"

    def to_rc_text(self) -> str:
        if self.original_rc_statement:
            return self.original_rc_statement
        return f'{self.id} {self.rc_keyword} "{self.file_path}"'


class TextBlockResource(Resource):  # BEGIN ... END blocks kept as raw statement lines
    def __init__(self, res_id: Optional[str] = None, lines: Optional[List[str]] = None, header_line: str = ""):
        super().__init__(res_id)
        self.lines: List[str] = lines if lines is not None else []
        self.header_line: str = header_line
        self.line_number: int = 0  # Physical line of the header, set by the parser

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.id!r} with {len(self.lines)} lines>"
