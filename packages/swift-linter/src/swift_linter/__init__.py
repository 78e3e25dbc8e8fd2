from .autofix import AutoFixEngine
from .corrections import apply_corrections
from .engine import LinterEngine
from .location import SourceLocationResolver
from .models import (
    CharRange,
    Correction,
    CorrectionEdit,
    InternalIssue,
    RuleState,
    Severity,
    SourceLocation,
    Violation,
)
from .registry import RuleRegistry
from .suppression import SuppressionFilter
from .swift_file import SwiftFile

__all__ = [
    "AutoFixEngine",
    "CharRange",
    "Correction",
    "CorrectionEdit",
    "InternalIssue",
    "LinterEngine",
    "RuleRegistry",
    "RuleState",
    "Severity",
    "SourceLocation",
    "SourceLocationResolver",
    "SuppressionFilter",
    "SwiftFile",
    "Violation",
    "apply_corrections",
]
