from pathlib import Path
from typing import List

import tree_sitter_swift as tss
from tree_sitter import Language, Node, Parser

from .node_types import ParseResult


class SwiftParser:
    """Thin wrapper around the tree-sitter Swift grammar"""

    def __init__(self):
        self.language = Language(tss.language())
        self.parser = Parser(self.language)

    def parse_string(self, source: str) -> ParseResult:
        tree = self.parser.parse(source.encode("utf-8"))
        return ParseResult(tree=tree, source=source, errors=self._collect_errors(tree.root_node))

    def parse_file(self, file_path: Path) -> ParseResult:
        return self.parse_string(Path(file_path).read_text(encoding="utf-8"))

    def _collect_errors(self, root: Node) -> List[str]:
        """Describe ERROR and missing nodes; parsing itself never fails"""
        if not root.has_error:
            return []

        errors = []
        stack = [root]
        while stack:
            node = stack.pop()
            if node.is_error:
                line, col = node.start_point
                errors.append(f"Syntax error at {line + 1}:{col + 1}")
            elif node.is_missing:
                line, col = node.start_point
                errors.append(f"Missing '{node.type}' at {line + 1}:{col + 1}")
            if node.has_error:
                stack.extend(reversed(node.children))
        return errors
