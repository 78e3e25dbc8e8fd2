from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Severity(str, Enum):
    """Configurable severity of a rule violation"""

    WARNING = "warning"
    ERROR = "error"


class RuleState(Enum):
    """Answer of the suppression filter for a range"""

    ENABLED = "enabled"
    DISABLED = "disabled"
    UNRESOLVABLE = "unresolvable"


@dataclass(frozen=True)
class SourceLocation:
    """Human-readable position: 1-based line and character column"""

    file: str | None
    line: int
    character: int
    offset: int

    def __str__(self) -> str:
        return f"{self.file or '<stdin>'}:{self.line}:{self.character}"


@dataclass(frozen=True)
class CharRange:
    """Half-open range of character offsets into the file contents"""

    start: int
    end: int


@dataclass(frozen=True)
class Violation:
    """A rule violation positioned at a tree-native (byte) offset"""

    position: int
    message: str
    severity: Severity


@dataclass(frozen=True)
class CorrectionEdit:
    """Byte span of a token that should be replaced"""

    start: int
    end: int


@dataclass(frozen=True)
class Correction:
    """One applied edit, located in the original (pre-edit) file"""

    rule_id: str
    location: SourceLocation


@dataclass
class InternalIssue:
    """Internal representation of a linting issue"""

    file_path: Path | None
    line: int
    rule_id: str
    message: str
    severity: Severity
    auto_fixable: bool
    column: int = 0
    context: str | None = None
