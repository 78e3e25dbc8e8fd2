from typing import Any

from .rules.base import BaseRule

ALL_RULES = "all"


class RuleRegistry:
    """Registry for managing and loading linting rules"""

    def __init__(self):
        self._rules: list[BaseRule] = []
        self._load_builtin_rules()

    def register(self, rule: BaseRule):
        if self.get_rule(rule.rule_id) is not None:
            raise ValueError(f"Rule '{rule.rule_id}' is already registered")
        self._rules.append(rule)

    def get_all_rules(self) -> list[BaseRule]:
        return list(self._rules)

    def get_rule(self, rule_id: str) -> BaseRule | None:
        for rule in self._rules:
            if rule.rule_id == rule_id:
                return rule
        return None

    def get_enabled_rules(
        self,
        select: list[str] | None = None,
        ignore: list[str] | None = None,
        options: dict[str, dict[str, Any]] | None = None,
    ) -> list[BaseRule]:
        """Rules matching `select` and not `ignore`, configured with their `options` table"""
        select = select or [ALL_RULES]
        ignore = ignore or []
        options = options or {}

        enabled = []
        for rule in self._rules:
            if ALL_RULES not in select and rule.rule_id not in select:
                continue
            if rule.rule_id in ignore:
                continue
            rule_options = options.get(rule.rule_id)
            enabled.append(rule.configured(rule_options) if rule_options else rule)
        return enabled

    def _load_builtin_rules(self):
        from .rules.non_overridable_class_declaration import NonOverridableClassDeclarationRule

        self.register(NonOverridableClassDeclarationRule())


registry = RuleRegistry()
