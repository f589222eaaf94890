import json

import pytest

from fixforge.errors import ExtractError
from fixforge.extract import extract_fixes, group_fixes_by_file, parse_fix, parse_replacement
from fixforge.models.fix import Fix

REP = {
    "line": 1,
    "endLine": 1,
    "column": 6,
    "endColumn": 6,
    "precedence": 5,
    "insertionPoint": "beforeStart",
    "replacement": " || exit",
}


def test_parse_replacement_maps_camel_case_fields():
    r = parse_replacement(REP)
    assert (r.line, r.column, r.end_line, r.end_column) == (1, 6, 1, 6)
    assert r.precedence == 5
    assert r.insertion_point == "beforeStart"
    assert r.replacement == " || exit"


def test_parse_replacement_rejects_non_string_text():
    with pytest.raises(TypeError):
        parse_replacement(dict(REP, replacement=3))


def test_parse_fix_unwraps_diagnostic():
    record = {"file": "a.sh", "code": 2164, "level": "warning", "message": "m", "fix": {"replacements": [REP]}}
    fix = parse_fix(record)
    assert fix.applicable
    assert len(fix.replacements) == 1
    assert (fix.file, fix.code, fix.level) == ("a.sh", 2164, "warning")
    assert fix.source is record


def test_parse_fix_accepts_bare_bundle():
    fix = parse_fix({"replacements": [REP]})
    assert fix.applicable
    assert fix.code is None


def test_parse_fix_without_bundle_is_not_applicable():
    assert not parse_fix({"code": 1000, "fix": None}).applicable
    assert not parse_fix({"replacements": "nope"}).applicable
    assert not parse_fix({"fix": {"replacements": [dict(REP, line="x")]}}).applicable
    assert not parse_fix(42).applicable


def test_parse_fix_none_and_passthrough():
    assert parse_fix(None) is None
    fix = Fix(replacements=())
    assert parse_fix(fix) is fix


def test_extract_fixes_from_json1_text():
    doc = json.dumps({"comments": [{"file": "a.sh", "fix": {"replacements": [REP]}}]})
    records = extract_fixes(doc)
    assert len(records) == 1
    assert records[0]["file"] == "a.sh"


def test_extract_fixes_from_list_and_bytes():
    assert extract_fixes([{"code": 1}]) == [{"code": 1}]
    assert extract_fixes(b"[]") == []


@pytest.mark.parametrize("doc", ["{not json", '{"warnings": []}', "7", {"comments": 3}])
def test_extract_fixes_rejects_unexpected_documents(doc):
    with pytest.raises(ExtractError):
        extract_fixes(doc)


def test_group_fixes_by_file_keeps_order():
    a1, b1, a2, s = {"file": "a.sh"}, {"file": "b.sh"}, {"file": "a.sh"}, {"replacements": []}
    groups = group_fixes_by_file([a1, b1, a2, s])
    assert list(groups) == ["a.sh", "b.sh", "-"]
    assert groups["a.sh"] == [a1, a2]
    assert groups["-"] == [s]
