"""Inline `swiftlint:disable` / `swiftlint:enable` directives."""

import logging
import re
import sys
from dataclasses import dataclass
from typing import List

from swift_tree_sitter import ASTWalker
from tree_sitter import Tree

from .location import SourceLocationResolver
from .models import CharRange, RuleState

logger = logging.getLogger(__name__)

COMMENT_TYPES = ("comment", "multiline_comment")
ALL_RULES = "all"

COMMAND_PATTERN = re.compile(
    r"swiftlint:(?P<action>enable|disable)(?::(?P<scope>previous|this|next))?(?P<rules>(?:[ \t]+[\w-]+)+)"
)


@dataclass(frozen=True)
class Command:
    """An expanded directive taking effect at a character offset"""

    offset: int
    disables: bool
    rule_ids: frozenset[str]

    def applies_to(self, rule_id: str) -> bool:
        return ALL_RULES in self.rule_ids or rule_id in self.rule_ids


class SuppressionFilter:
    """Answers whether a rule is enabled at a given range of the file.

    Commands are applied in source order; the last one at or before a range's
    start wins. Scoped commands (`:previous`, `:this`, `:next`) become the
    command at the start of the affected line plus its inverse at the end of it.
    """

    def __init__(self, commands: List[Command], length: int):
        self.commands = sorted(commands, key=lambda c: c.offset)
        self.length = length

    @classmethod
    def from_tree(cls, tree: Tree, resolver: SourceLocationResolver) -> "SuppressionFilter":
        commands: List[Command] = []
        for comment_type in COMMENT_TYPES:
            for node in ASTWalker.find_all_by_type(tree.root_node, comment_type):
                text = ASTWalker.get_text(node, resolver.source)
                for match in COMMAND_PATTERN.finditer(text):
                    start = resolver.char_offset(node.start_byte)
                    if start is None:
                        logger.debug("Ignoring directive at unresolvable byte offset %d", node.start_byte)
                        continue
                    # Command takes effect where its text starts inside the comment
                    offset = start + len(text[:match.start()])
                    commands.extend(cls._expand(match, offset, resolver))
        return cls(commands, len(resolver.source))

    @staticmethod
    def _expand(match: re.Match, offset: int, resolver: SourceLocationResolver) -> List[Command]:
        disables = match.group("action") == "disable"
        rule_ids = frozenset(match.group("rules").split())
        scope = match.group("scope")
        if scope is None:
            return [Command(offset=offset, disables=disables, rule_ids=rule_ids)]

        location = resolver.location(offset)
        line = location.line + {"previous": -1, "this": 0, "next": 1}[scope]
        if line < 1:
            return []
        line_start = resolver.char_offset_at(line, 1)
        line_end = resolver.char_offset_at(line, sys.maxsize)
        return [
            Command(offset=line_start, disables=disables, rule_ids=rule_ids),
            Command(offset=line_end + 1, disables=not disables, rule_ids=rule_ids),
        ]

    def rule_state(self, char_range: CharRange, rule_id: str) -> RuleState:
        if char_range.start < 0 or char_range.end > self.length or char_range.start > char_range.end:
            return RuleState.UNRESOLVABLE

        state = RuleState.ENABLED
        for command in self.commands:
            if command.offset > char_range.start:
                break
            if command.applies_to(rule_id):
                state = RuleState.DISABLED if command.disables else RuleState.ENABLED
        return state

    def is_enabled(self, char_range: CharRange, rule_id: str) -> bool:
        return self.rule_state(char_range, rule_id) is RuleState.ENABLED
