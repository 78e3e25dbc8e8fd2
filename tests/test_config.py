from swift_cli.config import LintConfig
from swift_linter.models import Severity
from swift_linter.registry import RuleRegistry


def test_defaults_without_file(tmp_path):
    config = LintConfig(tmp_path / "missing.toml")
    assert config.select == ["all"]
    assert config.ignore == []
    assert config.rule_options == {}


def test_load_rule_options(tmp_path):
    config_path = tmp_path / ".swift-lint.toml"
    config_path.write_text(
        """
[tool.swift-lint]
select = ["non_overridable_class_declaration"]

[tool.swift-lint.non_overridable_class_declaration]
severity = "error"
final_class_modifier = "static"
"""
    )
    config = LintConfig(config_path)

    assert config.select == ["non_overridable_class_declaration"]
    assert config.rule_options == {
        "non_overridable_class_declaration": {"severity": "error", "final_class_modifier": "static"}
    }

    rules = config.apply_to_registry(RuleRegistry())
    assert rules[0].severity is Severity.ERROR
    assert rules[0].config.final_class_modifier.value == "static"


def test_malformed_file_falls_back_to_defaults(tmp_path, caplog):
    config_path = tmp_path / ".swift-lint.toml"
    config_path.write_text("[tool.swift-lint\nselect = ")

    config = LintConfig(config_path)

    assert config.select == ["all"]
    assert "Ignoring unreadable config" in caplog.text
