"""Tests for the content renderer."""

from __future__ import annotations

import pytest

from env_scaffold.core.parser import parse_content
from env_scaffold.core.renderer import render_document, render_line
from env_scaffold.model import LineKind
from env_scaffold.model.document import LineRecord


class TestRenderLine:
    def test_blank(self):
        assert render_line(LineRecord(LineKind.BLANK, "")) == "\n"

    def test_comment_is_verbatim(self):
        assert render_line(LineRecord(LineKind.COMMENT, "# keep  me ")) == "# keep  me \n"

    def test_variable_uses_default(self):
        rec = LineRecord(LineKind.VARIABLE, "FOO=bar", key="FOO", default_value="bar")
        assert render_line(rec) == "FOO=bar\n"

    def test_edited_value_wins(self):
        rec = LineRecord(LineKind.VARIABLE, "FOO=bar", key="FOO", default_value="bar")
        rec.edited_value = "baz"
        assert render_line(rec) == "FOO=baz\n"

    def test_empty_edited_value_falls_back_to_default(self):
        rec = LineRecord(LineKind.VARIABLE, "FOO=bar", key="FOO", default_value="bar")
        rec.edited_value = ""
        assert render_line(rec) == "FOO=bar\n"

    def test_missing_default_renders_empty(self):
        rec = LineRecord(LineKind.VARIABLE, "FOO", key="FOO", default_value=None)
        assert render_line(rec) == "FOO=\n"


class TestRenderDocument:
    def test_single_blank(self):
        assert render_document([LineRecord(LineKind.BLANK, "")]) == "\n"

    def test_parse_empty_renders_newline(self):
        assert render_document(parse_content("")) == "\n"

    def test_comment_round_trip(self):
        assert render_document(parse_content("#hello")) == "#hello\n"

    def test_variable_round_trip_and_edit(self):
        records = parse_content("FOO=bar")
        assert render_document(records) == "FOO=bar\n"
        records[0].edited_value = "baz"
        assert render_document(records) == "FOO=baz\n"

    @pytest.mark.parametrize(
        "text",
        [
            "# header\nA=1\n\nB=\n",
            "\n",
            "A=x=y\n# trailing comment\n",
            "URL=postgres://u:p@h/db?sslmode=require\n\n\n",
        ],
    )
    def test_unedited_round_trip_is_identical(self, text: str):
        assert render_document(parse_content(text)) == text

    def test_no_equals_quirk_gains_equals_on_render(self):
        """A bare name renders as ``NAME=``; flagged, not a round trip."""
        assert render_document(parse_content("JUST_A_NAME\n")) == "JUST_A_NAME=\n"

    def test_missing_final_newline_is_added(self):
        assert render_document(parse_content("A=1\nB=2")) == "A=1\nB=2\n"

    def test_leading_equals_quirk_gains_equals_on_render(self):
        """``=value`` has no usable key; it renders as ``=value=``, not a round trip."""
        assert render_document(parse_content("=value\n")) == "=value=\n"
