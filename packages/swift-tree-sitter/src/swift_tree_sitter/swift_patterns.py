"""Swift-specific AST pattern recognition."""

from typing import List, Optional

from tree_sitter import Node

from .ast_walker import ASTWalker
from .node_types import DeclarationKind, Modifier

CLASS_KEYWORDS = ("class", "struct", "actor", "extension", "enum")
PRIVATE_MODIFIERS = ("private", "fileprivate")
MEMBER_DECLARATIONS = ("function_declaration", "property_declaration")
MEMBER_INTRODUCERS = ("func", "var", "let")
MEMBER_KEYWORDS = ("class", "static", "final")


class SwiftPatterns:
    """Recognize Swift declaration patterns in the AST."""

    @staticmethod
    def declaration_kind(node: Node) -> DeclarationKind:
        """Classify a node into the closed set of kinds used by the class rules.

        tree-sitter-swift folds classes, structs, actors, extensions and enums into
        `class_declaration`; only a real `class` counts as CLASS.
        """
        if node.type == "class_declaration":
            if SwiftPatterns.get_class_keyword(node) == "class":
                return DeclarationKind.CLASS
            return DeclarationKind.OTHER
        if node.type == "protocol_declaration":
            return DeclarationKind.PROTOCOL
        if node.type == "function_declaration":
            return DeclarationKind.METHOD
        if node.type == "property_declaration":
            return DeclarationKind.PROPERTY
        return DeclarationKind.OTHER

    @staticmethod
    def get_class_keyword(node: Node) -> Optional[str]:
        """Return `class`, `struct`, `actor`, `extension` or `enum` for a class_declaration."""
        kind = node.child_by_field_name("declaration_kind")
        if kind is not None:
            return kind.type

        # Fallback: first anonymous keyword child
        for child in node.children:
            if not child.is_named and child.type in CLASS_KEYWORDS:
                return child.type
        return None

    @staticmethod
    def get_modifiers(node: Node) -> List[Modifier]:
        """Modifier keywords of a declaration in source order.

        A declaration without a `modifiers` child, or with one that has no usable
        children, simply has no modifiers.
        """
        modifiers = []
        modifiers_node = ASTWalker.get_child_of_type(node, "modifiers")
        if modifiers_node is not None:
            for child in modifiers_node.named_children:
                if child.type == "attribute":
                    continue
                name = ASTWalker.get_text(child, b"").strip()
                if name:
                    modifiers.append(Modifier(name=name, start_byte=child.start_byte, end_byte=child.end_byte))

        if node.type in MEMBER_DECLARATIONS:
            modifiers.extend(SwiftPatterns._keyword_modifiers(node))
        return sorted(set(modifiers), key=lambda m: m.start_byte)

    @staticmethod
    def _keyword_modifiers(node: Node) -> List[Modifier]:
        """Bare keywords the grammar leaves as anonymous children, e.g. `class` in `class func f()`.

        Only the tokens before the introducer (`func`, `var`, ...) count.
        """
        keywords = []
        for child in node.children:
            if child.type == "modifiers":
                continue
            if child.is_named or child.type in MEMBER_INTRODUCERS:
                break
            if child.type in MEMBER_KEYWORDS:
                keywords.append(Modifier(name=child.type, start_byte=child.start_byte, end_byte=child.end_byte))
        return keywords

    @staticmethod
    def find_modifier(modifiers: List[Modifier], name: str) -> Optional[Modifier]:
        for modifier in modifiers:
            if modifier.name == name:
                return modifier
        return None

    @staticmethod
    def is_final(modifiers: List[Modifier]) -> bool:
        return SwiftPatterns.find_modifier(modifiers, "final") is not None

    @staticmethod
    def is_private(modifiers: List[Modifier]) -> bool:
        """True for `private` and `fileprivate`; `private(set)` only restricts the setter."""
        return any(m.name in PRIVATE_MODIFIERS for m in modifiers)
