import logging
import tomllib
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class LintConfig:
    """Handles loading of .swift-lint.toml configuration"""

    def __init__(self, config_path: Path | None = None):
        self.select: list[str] = ["all"]
        self.ignore: list[str] = []
        self.rule_options: dict[str, dict[str, Any]] = {}

        if config_path and config_path.exists():
            self._load_from_file(config_path)

    def _load_from_file(self, path: Path):
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            # Fallback to defaults if parsing fails
            logger.warning("Ignoring unreadable config %s: %s", path, e)
            return

        lint_data = data.get("tool", {}).get("swift-lint", {})
        self.select = lint_data.get("select", self.select)
        self.ignore = lint_data.get("ignore", self.ignore)

        # Per-rule tables, e.g. [tool.swift-lint.non_overridable_class_declaration]
        self.rule_options = {key: value for key, value in lint_data.items() if isinstance(value, dict)}

    def apply_to_registry(self, registry: Any) -> list[Any]:
        """Return list of enabled rules based on this config"""
        return registry.get_enabled_rules(select=self.select, ignore=self.ignore, options=self.rule_options)
