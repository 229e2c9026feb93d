# rc2qt/core/line_source.py

from typing import Iterable, Iterator, List, Optional

from .rc_patterns import strip_comments


class RCSourceError(OSError):
    """Raised when an RC script cannot be opened or read."""
    pass


class LineSource:
    """
    Ordered, trimmed lines of an RC script with one line of lookahead.

    Trailing // comments and /* ... */ comments are removed and blank lines are
    skipped, so block parsers only ever see statements. line_number reports the
    physical line (1-based) of the last line handed out.
    """

    def __init__(self, lines: Iterable[str], strip_comments: bool = True):
        self._lines: Iterator[str] = iter(lines)
        self._strip_comments = strip_comments
        self._physical_line = 0
        self._in_block_comment = False
        self._peeked: Optional[str] = None
        self._peeked_number = 0
        self.line_number = 0
        self.reached_end = False

    @classmethod
    def open(cls, path: str, encoding: str = "utf-8") -> "LineSource":
        try:
            with open(path, "r", encoding=encoding, errors="replace") as f:
                content = f.read()
        except OSError as e:
            raise RCSourceError(f"Cannot open RC file '{path}': {e}") from e
        return cls.from_text(content)

    @classmethod
    def from_text(cls, text: str) -> "LineSource":
        # A UTF-8 BOM written by Visual Studio would otherwise stick to the first statement.
        return cls(text.lstrip("\ufeff").splitlines())

    def _clean(self, raw: str) -> str:
        line = raw.strip()
        if not self._strip_comments:
            return line
        line, self._in_block_comment = strip_comments(line, self._in_block_comment)
        return line

    def _read(self) -> Optional[str]:
        for raw in self._lines:
            self._physical_line += 1
            line = self._clean(raw)
            if line:
                return line
        return None

    def peek(self) -> Optional[str]:
        """Returns the next line without consuming it, or None at end of input."""
        if self._peeked is None:
            self._peeked = self._read()
            self._peeked_number = self._physical_line
        return self._peeked

    def next_line(self) -> Optional[str]:
        """Advances and returns the next line, or None at end of input."""
        line = self.peek()
        self._peeked = None
        if line is None:
            self.reached_end = True
            return None
        self.line_number = self._peeked_number
        return line

    def consume_until(self, terminator: str = "END") -> List[str]:
        """
        Collects lines up to the terminator line (exact match), consuming the terminator.
        Stops quietly at end of input; check reached_end to tell the two apart.
        """
        collected: List[str] = []
        self.reached_end = False
        while True:
            line = self.next_line()
            if line is None:
                break
            if line == terminator:
                break
            collected.append(line)
        return collected

    def consume_block(self, begin: str = "BEGIN", end: str = "END") -> List[str]:
        """
        Like consume_until, but nested begin/end pairs are kept inside the result,
        so a POPUP's own BEGIN ... END does not terminate the enclosing menu.
        """
        collected: List[str] = []
        self.reached_end = False
        depth = 1
        while True:
            line = self.next_line()
            if line is None:
                break
            if line == begin:
                depth += 1
            elif line == end:
                depth -= 1
                if depth == 0:
                    break
            collected.append(line)
        return collected

    def __iter__(self):
        return self

    def __next__(self) -> str:
        line = self.next_line()
        if line is None:
            raise StopIteration
        return line
