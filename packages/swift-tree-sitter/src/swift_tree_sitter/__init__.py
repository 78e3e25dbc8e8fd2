from .ast_walker import ASTWalker
from .node_types import DeclarationKind, Modifier, ParseResult
from .parser import SwiftParser
from .swift_patterns import SwiftPatterns

__all__ = [
    "ASTWalker",
    "DeclarationKind",
    "Modifier",
    "ParseResult",
    "SwiftParser",
    "SwiftPatterns",
]
