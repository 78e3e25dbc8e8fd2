from pathlib import Path

from swift_tree_sitter import ParseResult, SwiftParser

from .location import SourceLocationResolver
from .suppression import SuppressionFilter


class SwiftFile:
    """A Swift source file together with everything derived from its contents.

    The parse tree, location resolver and suppression filter always describe the
    current contents; `write` replaces the contents and rebuilds them.
    """

    def __init__(self, contents: str, path: Path | None = None, parser: SwiftParser | None = None):
        self.path = path
        self.parser = parser or SwiftParser()
        self._load(contents)

    @classmethod
    def from_path(cls, path: Path, parser: SwiftParser | None = None) -> "SwiftFile":
        return cls(Path(path).read_text(encoding="utf-8"), path=Path(path), parser=parser)

    def _load(self, contents: str):
        self.contents = contents
        self.parse_result: ParseResult = self.parser.parse_string(contents)
        self.resolver = SourceLocationResolver(contents, str(self.path) if self.path else None)
        self.suppression = SuppressionFilter.from_tree(self.parse_result.tree, self.resolver)

    @property
    def tree(self):
        return self.parse_result.tree

    def write(self, contents: str):
        """Replace the contents, persisting them when the file lives on disk"""
        if contents == self.contents:
            return
        if self.path is not None:
            self.path.write_text(contents, encoding="utf-8")
        self._load(contents)
