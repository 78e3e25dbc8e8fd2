from tree_sitter import Node
from typing import Callable, Optional, List


class ASTWalker:
    """Utilities for traversing and searching the Swift AST"""

    @staticmethod
    def walk(node: Node, callback: Callable[[Node], None]):
        """Perform a pre-order depth-first traversal of the AST"""
        ASTWalker.walk_scoped(node, enter=callback)

    @staticmethod
    def walk_scoped(
        node: Node,
        enter: Optional[Callable[[Node], None]] = None,
        leave: Optional[Callable[[Node], None]] = None,
        skip: Optional[Callable[[Node], bool]] = None,
    ):
        """Depth-first traversal calling `enter` before and `leave` after each subtree.

        Nodes for which `skip` returns True are neither entered nor descended into.
        Iterative, so arbitrarily deep trees do not hit the recursion limit.
        """
        stack: List[tuple[Node, bool]] = [(node, False)]
        while stack:
            current, leaving = stack.pop()
            if leaving:
                if leave:
                    leave(current)
                continue

            if skip and skip(current):
                continue
            if enter:
                enter(current)

            stack.append((current, True))
            for child in reversed(current.children):
                stack.append((child, False))

    @staticmethod
    def get_text(node: Node, source: bytes | str) -> str:
        """Return the source text covered by a node"""
        if node.text is not None:
            return node.text.decode("utf-8", errors="replace")
        data = source.encode("utf-8") if isinstance(source, str) else source
        return data[node.start_byte:node.end_byte].decode("utf-8", errors="replace")

    @staticmethod
    def get_child_of_type(node: Node, type_name: str) -> Optional[Node]:
        """Find the first direct child of a specific type"""
        for child in node.children:
            if child.type == type_name:
                return child
        return None

    @staticmethod
    def find_all_by_type(node: Node, type_name: str) -> List[Node]:
        """Find all descendant nodes of a specific type"""
        results = []

        def check(n):
            if n.type == type_name:
                results.append(n)

        ASTWalker.walk(node, check)
        return results
