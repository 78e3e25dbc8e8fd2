from dataclasses import dataclass, field
from enum import Enum
from typing import List
from tree_sitter import Tree


class DeclarationKind(Enum):
    """Closed set of node kinds the class declaration rules care about"""
    CLASS = "class"
    PROTOCOL = "protocol"
    METHOD = "method"
    PROPERTY = "property"
    OTHER = "other"


@dataclass(frozen=True)
class Modifier:
    """A single declaration modifier keyword with its byte span"""
    name: str
    start_byte: int
    end_byte: int


@dataclass
class ParseResult:
    """Result of a tree-sitter parse operation"""
    tree: Tree
    source: str
    errors: List[str] = field(default_factory=list)
