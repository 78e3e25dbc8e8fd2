from abc import ABC, abstractmethod
from typing import Any

from ..models import Correction, InternalIssue, Severity, Violation
from ..swift_file import SwiftFile


class BaseRule(ABC):
    """Abstract base class for all linting rules."""

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Unique rule identifier (e.g., 'non_overridable_class_declaration')."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable rule name."""
        pass

    @property
    @abstractmethod
    def severity(self) -> Severity:
        """Configured severity for this rule."""
        pass

    @property
    def auto_fixable(self) -> bool:
        """Can this rule automatically fix violations?"""
        return False

    @property
    def description(self) -> str:
        """Detailed description of what this rule checks."""
        return ""

    @abstractmethod
    def check(self, file: SwiftFile) -> list[InternalIssue]:
        """Run the check and return found issues."""
        pass

    def configured(self, options: dict[str, Any]) -> "BaseRule":
        """Return a copy of this rule using `options`; rules without options ignore them."""
        return self

    def _create_issue(self, file: SwiftFile, violation: Violation) -> InternalIssue | None:
        """Locate a violation in the file; None when its position cannot be resolved."""
        location = file.resolver.location_for_byte(violation.position)
        if location is None:
            return None
        return InternalIssue(
            file_path=file.path,
            line=location.line,
            rule_id=self.rule_id,
            message=violation.message,
            severity=violation.severity,
            auto_fixable=self.auto_fixable,
            column=location.character,
        )


class CorrectableRule(BaseRule):
    """A rule that can rewrite the offending source in place."""

    @property
    def auto_fixable(self) -> bool:
        return True

    @abstractmethod
    def correct(self, file: SwiftFile) -> list[Correction]:
        """Fix violations in `file`, returning one record per applied edit."""
        pass
