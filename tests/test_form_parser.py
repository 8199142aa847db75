"""
Unit Tests — Form Parser & Field Mapping
========================================
Marker detection, malformed payloads, per-question skipping and the
positional six-slot mapping.
"""
from daily.models.field_mapping import FieldMapping, SLOT_ORDER
from daily.models.form_field import FormField
from daily.parser.form_parser import parse_form_fields
from daily.utils.error_messages import DATA_MALFORMED, MARKER_NOT_FOUND

from conftest import make_form_html, make_question


class TestParseFormFields:

    def test_extracts_fields_in_document_order(self, six_question_html):
        result = parse_form_fields(six_question_html)
        assert result.success
        assert [f.id for f in result.fields] == [str(1000000001 + i) for i in range(6)]
        assert result.fields[0].label == "Date"
        assert result.fields[5].label == "Hours"

    def test_marker_missing(self):
        result = parse_form_fields("<html><body>Sign in to continue</body></html>")
        assert result.error == MARKER_NOT_FOUND
        assert result.fields == []
        assert not result.success

    def test_unterminated_blob(self):
        html = "<script>var FB_PUBLIC_LOAD_DATA_ = [null, [\"d\", []]]"
        result = parse_form_fields(html)
        assert result.error == DATA_MALFORMED
        assert result.fields == []

    def test_invalid_json(self):
        html = "<script>var FB_PUBLIC_LOAD_DATA_ = [null, [oops;</script>"
        assert parse_form_fields(html).error == DATA_MALFORMED

    def test_unexpected_nesting(self):
        html = "<script>var FB_PUBLIC_LOAD_DATA_ = {\"a\": 1};</script>"
        assert parse_form_fields(html).error == DATA_MALFORMED
        html = "<script>var FB_PUBLIC_LOAD_DATA_ = [null, \"flat\"];</script>"
        assert parse_form_fields(html).error == DATA_MALFORMED
        html = "<script>var FB_PUBLIC_LOAD_DATA_ = [null, [\"d\", \"no list\"]];</script>"
        assert parse_form_fields(html).error == DATA_MALFORMED

    def test_skips_malformed_questions(self):
        questions = [
            make_question(11, "Good one"),
            [1, "Too short"],
            [2, "No entries", None, 0, []],
            [3, "Empty inner", None, 0, [[]]],
            [4, "String id", None, 0, [["abc"]]],
            [5, "Bool id", None, 0, [[True]]],
            [6, "Infinite id", None, 0, [[float("inf")]]],
            "not a list",
            make_question(22, "Good two"),
        ]
        result = parse_form_fields(make_form_html(questions))
        assert result.success
        assert [(f.id, f.label) for f in result.fields] == [("11", "Good one"), ("22", "Good two")]

    def test_float_ids_render_as_integers(self):
        html = make_form_html([[1, "Q", None, 0, [[123456789.0]]]])
        assert parse_form_fields(html).fields[0].id == "123456789"

    def test_non_string_label_becomes_empty(self):
        html = make_form_html([[1, None, None, 0, [[77]]]])
        assert parse_form_fields(html).fields == [FormField(id="77", label="")]

    def test_no_questions_is_success_with_no_fields(self):
        result = parse_form_fields(make_form_html([]))
        assert result.success
        assert result.fields == []


class TestFieldMapping:

    def test_first_six_map_positionally(self):
        fields = [FormField(id=str(i), label=f"q{i}") for i in range(1, 9)]
        mapping = FieldMapping.from_fields(fields)
        assert [getattr(mapping, slot) for slot in SLOT_ORDER] == ["1", "2", "3", "4", "5", "6"]
        assert mapping.date == "1"
        assert mapping.issue_link == "2"
        assert mapping.issue_title == "3"
        assert mapping.progress_note == "4"
        assert mapping.project_name == "5"
        assert mapping.hours_spent == "6"
        assert mapping.is_complete()

    def test_fewer_than_six_is_incomplete(self):
        fields = [FormField(id=str(i)) for i in range(5)]
        mapping = FieldMapping.from_fields(fields)
        assert mapping == FieldMapping()
        assert not mapping.is_complete()

    def test_any_empty_slot_is_incomplete(self, mapping):
        assert mapping.is_complete()
        assert not mapping.model_copy(update={"issue_title": ""}).is_complete()
