import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from swift_linter.engine import LinterEngine
from swift_linter.registry import registry

from .config import LintConfig
from .converters import internal_issue_to_lint_issue

app = typer.Typer(help="Swift Static Analyzer - Lint and fix Swift class declarations")


def _collect_files(paths: list[Path]) -> list[Path]:
    """Expand directories into the Swift files they contain"""
    files = []
    for path in paths:
        if path.is_dir():
            files.extend(sorted(path.glob("**/*.swift")))
        else:
            files.append(path)
    return files


@app.command()
def lint(
    files: list[Path] = typer.Argument(None, help="Files or directories to lint"),
    config_file: Path = typer.Option(Path(".swift-lint.toml"), help="Path to config file"),
    severity: str = typer.Option("WARNING", help="Minimum severity to show"),
    fix: bool = typer.Option(False, help="Automatically fix issues"),
    verbose: bool = typer.Option(False, help="Show debug logging"),
):
    """Run linter on Swift files"""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    config = LintConfig(config_file)
    try:
        enabled_rules = config.apply_to_registry(registry)
    except ValidationError as e:
        typer.echo(f"Error: invalid configuration in {config_file}:\n{e}")
        raise typer.Exit(code=2)

    engine = LinterEngine(rules=enabled_rules)
    paths = _collect_files(files or [])
    if not paths:
        typer.echo("Error: Provide files or directories to lint")
        raise typer.Exit(code=1)

    all_issues = []
    failed_files = 0
    for file_path in paths:
        try:
            swift_file = engine.load_file(file_path)
        except (OSError, UnicodeDecodeError) as e:
            typer.echo(f"Error: cannot read {file_path}: {e}")
            failed_files += 1
            continue

        if fix:
            corrections = engine.fix(swift_file)
            for correction in sorted(corrections, key=lambda c: c.location.offset):
                typer.echo(f"  🔧 Corrected {correction.location} [{correction.rule_id}]")

        all_issues.extend(engine.analyze(swift_file))

    external_issues = [internal_issue_to_lint_issue(i) for i in all_issues]

    # Sort and filter by severity
    severity_rank = {"ERROR": 2, "WARNING": 1}
    min_rank = severity_rank.get(severity.upper(), 1)

    reported_count = 0
    for issue in sorted(external_issues, key=lambda x: (x.file_path, x.line_number, x.column)):
        if severity_rank.get(issue.severity.value, 0) >= min_rank:
            typer.echo(
                f"{issue.severity.value}: {issue.file_path}:{issue.line_number}:{issue.column} "
                f"[{issue.rule_id}] - {issue.message}"
            )
            reported_count += 1

    typer.echo(f"\nTotal issues found: {len(external_issues)} ({reported_count} reported)")

    errors = sum(1 for i in external_issues if i.severity.value == "ERROR")
    if errors > 0 or failed_files > 0:
        raise typer.Exit(code=1)


@app.command()
def rules():
    """List available rules"""
    for rule in registry.get_all_rules():
        fixable = " (fixable)" if rule.auto_fixable else ""
        typer.echo(f"{rule.rule_id}: {rule.name}{fixable}")
        typer.echo(f"    {rule.description}")


if __name__ == "__main__":
    app()
