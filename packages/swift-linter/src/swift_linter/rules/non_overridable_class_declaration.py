from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Tuple

from pydantic import BaseModel, ConfigDict, field_validator
from swift_tree_sitter import ASTWalker, DeclarationKind, Modifier, SwiftPatterns
from tree_sitter import Node, Tree

from ..corrections import apply_corrections
from ..models import Correction, CorrectionEdit, InternalIssue, Severity, Violation
from ..swift_file import SwiftFile
from .base import CorrectableRule


class FinalClassModifier(str, Enum):
    """Replacement written over a redundant `class` keyword"""

    FINAL_CLASS = "final class"
    STATIC = "static"


class NonOverridableClassDeclarationConfiguration(BaseModel):
    model_config = ConfigDict(extra="forbid")

    severity: Severity = Severity.WARNING
    final_class_modifier: FinalClassModifier = FinalClassModifier.FINAL_CLASS

    @field_validator("severity", mode="before")
    @classmethod
    def _normalize_severity(cls, value):
        return value.lower() if isinstance(value, str) else value

    @field_validator("final_class_modifier", mode="before")
    @classmethod
    def _accept_final_alias(cls, value):
        if value == "final":
            return FinalClassModifier.FINAL_CLASS
        return value


@dataclass(frozen=True)
class FlaggedDeclaration:
    keyword: Modifier
    member_kind: str
    in_final_class: bool


class Visitor:
    """Finds class members whose `class` keyword cannot lead to an override.

    `final_class_scope` holds one entry per enclosing class, True when that class
    is final. Only the innermost class decides; protocol bodies are not visited.
    """

    def __init__(self, severity: Severity):
        self.severity = severity
        self.final_class_scope: List[bool] = []

    def traverse(self, tree: Tree) -> Tuple[List[Violation], List[CorrectionEdit]]:
        flagged = self.collect(tree.root_node)
        violations = [self._violation(f) for f in flagged]
        edits = [CorrectionEdit(start=f.keyword.start_byte, end=f.keyword.end_byte) for f in flagged]
        return violations, edits

    def collect(self, root: Node) -> List[FlaggedDeclaration]:
        self.final_class_scope = []
        flagged: List[FlaggedDeclaration] = []

        def enter(node: Node):
            if SwiftPatterns.declaration_kind(node) is DeclarationKind.CLASS:
                self.final_class_scope.append(SwiftPatterns.is_final(SwiftPatterns.get_modifiers(node)))

        def leave(node: Node):
            kind = SwiftPatterns.declaration_kind(node)
            if kind is DeclarationKind.CLASS:
                self.final_class_scope.pop()
            elif kind is DeclarationKind.METHOD:
                self._check(node, "methods", flagged)
            elif kind is DeclarationKind.PROPERTY:
                self._check(node, "properties", flagged)

        ASTWalker.walk_scoped(
            root,
            enter=enter,
            leave=leave,
            skip=lambda node: SwiftPatterns.declaration_kind(node) is DeclarationKind.PROTOCOL,
        )
        # Members are checked when left, so restore source order
        return sorted(flagged, key=lambda f: f.keyword.start_byte)

    def _check(self, node: Node, member_kind: str, flagged: List[FlaggedDeclaration]):
        modifiers = SwiftPatterns.get_modifiers(node)
        if SwiftPatterns.is_final(modifiers):
            return
        class_keyword = SwiftPatterns.find_modifier(modifiers, "class")
        if class_keyword is None:
            return
        # A `class` member outside any class is left to the compiler
        if not self.final_class_scope:
            return

        in_final_class = self.final_class_scope[-1]
        if not in_final_class and not SwiftPatterns.is_private(modifiers):
            return
        flagged.append(FlaggedDeclaration(keyword=class_keyword, member_kind=member_kind, in_final_class=in_final_class))

    def _violation(self, flagged: FlaggedDeclaration) -> Violation:
        if flagged.in_final_class:
            reason = f"Class {flagged.member_kind} in final classes should themselves be final"
        else:
            reason = f"Private class {flagged.member_kind} should be declared final"
        return Violation(position=flagged.keyword.start_byte, message=reason, severity=self.severity)


class NonOverridableClassDeclarationRule(CorrectableRule):
    """Class methods and properties in final classes should themselves be final.

    The same holds for private class members. In both cases they cannot be
    overridden, so `final class` or `static` says so explicitly.
    """

    def __init__(self, config: NonOverridableClassDeclarationConfiguration | None = None):
        self.config = config or NonOverridableClassDeclarationConfiguration()

    @property
    def rule_id(self) -> str:
        return "non_overridable_class_declaration"

    @property
    def name(self) -> str:
        return "Class Declaration in Final Class"

    @property
    def severity(self) -> Severity:
        return self.config.severity

    @property
    def description(self) -> str:
        return (
            "Class methods and properties in final classes should themselves be final, just as if the "
            "declarations are private. In both cases, they cannot be overridden. Using `final class` or "
            "`static` makes this explicit."
        )

    def configured(self, options: dict[str, Any]) -> "NonOverridableClassDeclarationRule":
        return NonOverridableClassDeclarationRule(NonOverridableClassDeclarationConfiguration.model_validate(options))

    def check(self, file: SwiftFile) -> list[InternalIssue]:
        violations, _ = Visitor(self.severity).traverse(file.tree)
        issues = []
        for violation in violations:
            issue = self._create_issue(file, violation)
            if issue is not None:
                issues.append(issue)
        return issues

    def correct(self, file: SwiftFile) -> list[Correction]:
        _, edits = Visitor(self.severity).traverse(file.tree)
        contents, corrections = apply_corrections(
            file.contents,
            edits,
            file.resolver,
            file.suppression,
            self.rule_id,
            self.config.final_class_modifier.value,
        )
        file.write(contents)
        return corrections
