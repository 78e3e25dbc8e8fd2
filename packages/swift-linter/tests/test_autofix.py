from swift_linter.autofix import AutoFixEngine
from swift_linter.corrections import apply_corrections
from swift_linter.location import SourceLocationResolver
from swift_linter.models import CorrectionEdit
from swift_linter.rules.non_overridable_class_declaration import (
    NonOverridableClassDeclarationConfiguration,
    NonOverridableClassDeclarationRule,
)
from swift_linter.suppression import Command, SuppressionFilter
from swift_linter.swift_file import SwiftFile

RULE_ID = "non_overridable_class_declaration"


def _keyword_edits(contents, keyword="class"):
    edits = []
    start = contents.find(keyword)
    while start != -1:
        edits.append(CorrectionEdit(start=start, end=start + len(keyword)))
        start = contents.find(keyword, start + 1)
    return edits


def _apply(contents, edits, replacement="final class", commands=()):
    resolver = SourceLocationResolver(contents)
    suppression = SuppressionFilter(list(commands), len(contents))
    return apply_corrections(contents, edits, resolver, suppression, RULE_ID, replacement)


def test_reverse_order_matches_one_at_a_time():
    contents = "class a; class b; class c"
    edits = _keyword_edits(contents)

    result, corrections = _apply(contents, edits)

    one_at_a_time = contents
    for edit in sorted(edits, key=lambda e: e.start, reverse=True):
        one_at_a_time = one_at_a_time[:edit.start] + "final class" + one_at_a_time[edit.end:]

    assert result == one_at_a_time == "final class a; final class b; final class c"
    assert len(corrections) == 3


def test_forward_order_without_adjustment_corrupts():
    contents = "class a; class b; class c"
    edits = _keyword_edits(contents)

    forward = contents
    for edit in edits:
        forward = forward[:edit.start] + "final class" + forward[edit.end:]

    expected, _ = _apply(contents, edits)
    assert forward != expected


def test_edit_order_does_not_matter():
    contents = "class a; class b; class c"
    edits = _keyword_edits(contents)

    assert _apply(contents, edits)[0] == _apply(contents, list(reversed(edits)))[0]


def test_corrections_are_end_to_start_with_original_locations():
    contents = "class a\nclass b\nclass c"
    _, corrections = _apply(contents, _keyword_edits(contents))

    assert [c.location.offset for c in corrections] == [16, 8, 0]
    assert [c.location.line for c in corrections] == [3, 2, 1]
    assert all(c.location.character == 1 for c in corrections)
    assert all(c.rule_id == RULE_ID for c in corrections)


def test_shrinking_replacement():
    contents = "class a; class b"
    result, _ = _apply(contents, _keyword_edits(contents), replacement="static")
    assert result == "static a; static b"


def test_unresolvable_edit_is_dropped():
    contents = "class a"
    edits = [CorrectionEdit(start=0, end=5), CorrectionEdit(start=40, end=45)]

    result, corrections = _apply(contents, edits)

    assert result == "final class a"
    assert len(corrections) == 1


def test_edit_inside_multibyte_character_is_dropped():
    contents = "é class"
    # 'é' is two bytes; offset 1 splits it
    edits = [CorrectionEdit(start=1, end=2), CorrectionEdit(start=3, end=8)]

    result, corrections = _apply(contents, edits)

    assert result == "é final class"
    assert [c.location.offset for c in corrections] == [2]


def test_disabled_edit_is_skipped():
    contents = "class a; class b"
    commands = [Command(offset=9, disables=True, rule_ids=frozenset([RULE_ID]))]

    result, corrections = _apply(contents, _keyword_edits(contents), commands=commands)

    assert result == "final class a; class b"
    assert len(corrections) == 1


def test_disabling_another_rule_does_not_skip():
    contents = "class a"
    commands = [Command(offset=0, disables=True, rule_ids=frozenset(["other_rule"]))]

    result, _ = _apply(contents, _keyword_edits(contents), commands=commands)
    assert result == "final class a"


def test_no_edits():
    result, corrections = _apply("class a", [])
    assert result == "class a"
    assert corrections == []


def test_autofix_engine_writes_file(tmp_path):
    file_path = tmp_path / "C.swift"
    file_path.write_text("final class C {\n    class func f() {}\n}\n", encoding="utf-8")
    rule = NonOverridableClassDeclarationRule(
        NonOverridableClassDeclarationConfiguration(final_class_modifier="static")
    )
    autofix = AutoFixEngine([rule])

    corrections = autofix.apply_fixes(SwiftFile.from_path(file_path))

    assert autofix.can_fix(RULE_ID)
    assert not autofix.can_fix("other_rule")
    assert len(corrections) == 1
    assert file_path.read_text(encoding="utf-8") == "final class C {\n    static func f() {}\n}\n"


def test_swift_file_reloads_after_write():
    swift_file = SwiftFile("final class C { class func f() {} }")
    NonOverridableClassDeclarationRule().correct(swift_file)

    # The tree now describes the corrected contents
    assert NonOverridableClassDeclarationRule().check(swift_file) == []
    assert NonOverridableClassDeclarationRule().correct(swift_file) == []
