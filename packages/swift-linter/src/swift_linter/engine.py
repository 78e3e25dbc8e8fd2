import logging
from pathlib import Path
from typing import List, Optional

from swift_tree_sitter import SwiftParser

from .autofix import AutoFixEngine
from .models import CharRange, Correction, InternalIssue
from .registry import RuleRegistry
from .rules.base import BaseRule
from .swift_file import SwiftFile

logger = logging.getLogger(__name__)


class LinterEngine:
    """Core engine for Swift linting"""

    def __init__(self, rules: Optional[List[BaseRule]] = None):
        self.registry = RuleRegistry()
        self.rules = rules if rules is not None else self.registry.get_all_rules()
        self.parser = SwiftParser()
        self.issues: List[InternalIssue] = []

    def load_file(self, file_path: Path) -> SwiftFile:
        return SwiftFile.from_path(Path(file_path), parser=self.parser)

    def analyze_file(self, file_path: Path, rules: Optional[List[BaseRule]] = None) -> List[InternalIssue]:
        """Run all lint checks on a file"""
        return self.analyze(self.load_file(file_path), rules=rules)

    def analyze_string(self, source: str, rules: Optional[List[BaseRule]] = None) -> List[InternalIssue]:
        return self.analyze(SwiftFile(source, parser=self.parser), rules=rules)

    def analyze(self, file: SwiftFile, rules: Optional[List[BaseRule]] = None) -> List[InternalIssue]:
        for error in file.parse_result.errors:
            logger.debug("%s: %s", file.path or "<string>", error)

        self.issues = []
        for rule in rules if rules is not None else self.rules:
            for issue in rule.check(file):
                offset = file.resolver.char_offset_at(issue.line, issue.column)
                if file.suppression.is_enabled(CharRange(offset, offset), rule.rule_id):
                    self.issues.append(issue)
                else:
                    logger.debug("Suppressed %s at %s:%d", rule.rule_id, file.path, issue.line)

        return sorted(self.issues, key=lambda x: (x.line, x.column))

    def fix(self, file: SwiftFile, rules: Optional[List[BaseRule]] = None) -> List[Correction]:
        """Apply every correctable rule to `file`, writing it back when it changes"""
        autofix = AutoFixEngine(rules if rules is not None else self.rules)
        return autofix.apply_fixes(file)
