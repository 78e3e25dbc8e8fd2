"""Mapping between tree-sitter byte offsets, character offsets and line/column."""

from bisect import bisect_right

from .models import CharRange, SourceLocation


class SourceLocationResolver:
    """Converts positions for one immutable snapshot of a file's contents.

    tree-sitter reports UTF-8 byte offsets while the contents are edited as a
    Python string, so every edit goes through `char_range` first. Offsets that
    fall outside the file or inside a multi-byte character cannot be resolved
    and yield None.
    """

    def __init__(self, source: str, file_path: str | None = None):
        self.source = source
        self.file_path = file_path
        self._data = source.encode("utf-8")
        self._line_starts = [0]
        for index, char in enumerate(source):
            if char == "\n":
                self._line_starts.append(index + 1)

    def char_offset(self, byte_offset: int) -> int | None:
        if byte_offset < 0 or byte_offset > len(self._data):
            return None
        try:
            return len(self._data[:byte_offset].decode("utf-8"))
        except UnicodeDecodeError:
            return None

    def char_range(self, start_byte: int, end_byte: int) -> CharRange | None:
        if end_byte < start_byte:
            return None
        start = self.char_offset(start_byte)
        end = self.char_offset(end_byte)
        if start is None or end is None:
            return None
        return CharRange(start=start, end=end)

    def location(self, char_offset: int) -> SourceLocation | None:
        if char_offset < 0 or char_offset > len(self.source):
            return None
        line_index = bisect_right(self._line_starts, char_offset) - 1
        return SourceLocation(
            file=self.file_path,
            line=line_index + 1,
            character=char_offset - self._line_starts[line_index] + 1,
            offset=char_offset,
        )

    def location_for_byte(self, byte_offset: int) -> SourceLocation | None:
        char_offset = self.char_offset(byte_offset)
        if char_offset is None:
            return None
        return self.location(char_offset)

    def char_offset_at(self, line: int, character: int) -> int:
        """Character offset of a 1-based line/column, clamped to the line"""
        line_index = min(max(line - 1, 0), len(self._line_starts) - 1)
        line_start = self._line_starts[line_index]
        if line_index + 1 < len(self._line_starts):
            line_end = self._line_starts[line_index + 1] - 1
        else:
            line_end = len(self.source)
        return min(line_start + max(character - 1, 0), line_end)
