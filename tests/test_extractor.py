"""Tests for schema extraction."""

from jsoncmp.codes import DiagnosticCode
from jsoncmp.kernel.extractor import RawFieldRecord, extract
from jsoncmp.kernel.mapping import FieldMapping


def test_extracts_entry_level_facets_and_document_level_detail(users_schema):
    records, diagnostics = extract(users_schema, FieldMapping(), path="users.json")

    assert diagnostics == []
    assert records == [
        RawFieldRecord(label="id", type="integer", doc_value=None, detail_value="Users"),
        RawFieldRecord(label="email", type="string", doc_value="unique, indexed", detail_value="Users"),
    ]


def test_string_doc_value_used_verbatim():
    document = {"fields": [{"column": "a", "fieldType": {"options": "free text"}}]}
    records, _ = extract(document, FieldMapping())
    assert records[0].doc_value == "free text"


def test_non_string_doc_shapes_are_absent():
    document = {"fields": [
        {"column": "num", "fieldType": {"options": 5}},
        {"column": "obj", "fieldType": {"options": {"a": "b"}}},
        {"column": "mixed", "fieldType": {"options": ["a", 1]}},
    ]}
    records, diagnostics = extract(document, FieldMapping())
    assert diagnostics == []
    assert [r.doc_value for r in records] == [None, None, None]


def test_non_string_type_becomes_empty():
    document = {"fields": [{"column": "a", "fieldType": {"type": 7}}, {"column": "b"}]}
    records, _ = extract(document, FieldMapping())
    assert [r.type for r in records] == ["", ""]


def test_fallback_doc_captured_from_entry():
    document = {"fields": [{"column": "a", "type": "Notes about a"}, {"column": "b", "type": 3}]}
    records, _ = extract(document, FieldMapping())
    assert records[0].fallback_doc_value == "Notes about a"
    assert records[1].fallback_doc_value is None


def test_missing_fields_container_is_one_diagnostic():
    records, diagnostics = extract({"type": "Users"}, FieldMapping(), path="users.json")
    assert records == []
    assert len(diagnostics) == 1
    assert diagnostics[0].code == DiagnosticCode.MISSING_FIELDS_CONTAINER
    assert "'fields'" in diagnostics[0].message
    assert diagnostics[0].path == "users.json"


def test_fields_container_must_be_a_sequence():
    records, diagnostics = extract({"fields": {"column": "a"}}, FieldMapping())
    assert records == []
    assert [d.code for d in diagnostics] == [DiagnosticCode.MISSING_FIELDS_CONTAINER]


def test_non_mapping_document_is_missing_container():
    for document in ([1, 2], "text", 3, None):
        records, diagnostics = extract(document, FieldMapping())
        assert records == []
        assert len(diagnostics) == 1


def test_invalid_entries_are_skipped_not_fatal():
    document = {"type": "T", "fields": [
        {"column": 1},
        "not-an-object",
        {"name": "no-column"},
        {"column": "ok"},
    ]}
    records, diagnostics = extract(document, FieldMapping(), path="t.json")

    assert [r.label for r in records] == ["ok"]
    assert len(diagnostics) == 3
    assert all(d.code == DiagnosticCode.INVALID_FIELD_ENTRY for d in diagnostics)
    assert "missing 'column'" in diagnostics[0].message


def test_custom_mapping_with_nested_container():
    document = {
        "meta": {"table": "Accounts"},
        "schema": {"columns": [{"info": {"name": "balance", "kind": "money"}, "help": "Current balance"}]},
    }
    mapping = FieldMapping(
        label_field="info.name",
        type_field="info.kind",
        doc_field="help",
        fallback_doc_field="",
        detail_field="meta.table",
        fields_container="schema.columns",
    )
    records, diagnostics = extract(document, mapping)
    assert diagnostics == []
    assert records == [
        RawFieldRecord(label="balance", type="money", doc_value="Current balance", detail_value="Accounts"),
    ]


def test_non_string_detail_is_absent():
    records, _ = extract({"type": {"name": "X"}, "fields": [{"column": "a"}]}, FieldMapping())
    assert records[0].detail_value is None


def test_empty_fields_array_yields_nothing_without_diagnostics():
    records, diagnostics = extract({"fields": []}, FieldMapping())
    assert records == []
    assert diagnostics == []


def test_mapping_without_label_or_container_extracts_nothing_silently():
    document = {"fields": [{"column": "a"}, {"column": "b"}]}
    for mapping in (FieldMapping(label_field=""), FieldMapping(fields_container="")):
        records, diagnostics = extract(document, mapping)
        assert records == []
        assert diagnostics == []
