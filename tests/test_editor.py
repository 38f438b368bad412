"""Tests for the interactive editor (prompt generation and answer application)."""

from __future__ import annotations

from pathlib import Path

from env_scaffold.core.editor import apply_answers, edit_document, generate_prompts
from env_scaffold.core.parser import parse_content
from env_scaffold.core.renderer import render_document
from env_scaffold.model import CANCELLED, EditOutcome
from env_scaffold.model.document import FileDocument, PromptSpec


def _doc(text: str) -> FileDocument:
    return FileDocument(source=Path("/proj/.env.example"), records=parse_content(text))


class _RecordingPrompter:
    def __init__(self, answers):
        self.answers = answers
        self.calls: list[tuple[str, list[PromptSpec]]] = []

    def prompt(self, title, specs):
        self.calls.append((title, list(specs)))
        return self.answers


class TestGeneratePrompts:
    def test_one_prompt_per_variable_in_line_order(self):
        specs = generate_prompts(_doc("# header\nA=1\n\nB=\nC=x=y\n"))
        assert specs == [
            PromptSpec(identifier=1, label="A", initial_value="1"),
            PromptSpec(identifier=3, label="B", initial_value=""),
            PromptSpec(identifier=4, label="C", initial_value="x=y"),
        ]

    def test_missing_default_becomes_empty_initial(self):
        (spec,) = generate_prompts(_doc("NAME_ONLY\n"))
        assert spec.label == "NAME_ONLY"
        assert spec.initial_value == ""

    def test_no_variables_no_prompts(self):
        assert generate_prompts(_doc("# only\n\n# comments\n")) == []


class TestApplyAnswers:
    def test_sets_edited_value(self):
        doc = _doc("A=1\nB=2\n")
        applied = apply_answers(doc, {0: "10", 1: "20"})
        assert applied == 2
        assert doc[0].edited_value == "10"
        assert doc[1].edited_value == "20"

    def test_stale_index_is_ignored(self):
        doc = _doc("A=1\n")
        applied = apply_answers(doc, {0: "x", 5: "nope", -1: "neg"})
        assert applied == 1
        assert render_document(doc) == "A=x\n"

    def test_answer_for_comment_line_is_ignored(self):
        doc = _doc("# c\nA=1\n")
        applied = apply_answers(doc, {0: "oops"})
        assert applied == 0
        assert doc[0].edited_value is None
        assert render_document(doc) == "# c\nA=1\n"


class TestEditDocument:
    def test_zero_variable_document_never_prompts(self):
        prompter = _RecordingPrompter({})
        doc = _doc("# nothing\n\n")
        assert edit_document(doc, prompter) is EditOutcome.SKIPPED
        assert prompter.calls == []
        assert render_document(doc) == "# nothing\n\n"

    def test_answers_are_applied(self):
        prompter = _RecordingPrompter({1: "10", 3: "20"})
        doc = _doc("# header\nA=1\n\nB=\n")

        outcome = edit_document(doc, prompter, title="app/.env.example")

        assert outcome is EditOutcome.EDITED
        assert prompter.calls[0][0] == "app/.env.example"
        assert render_document(doc) == "# header\nA=10\n\nB=20\n"

    def test_cancel_leaves_document_untouched(self):
        prompter = _RecordingPrompter(CANCELLED)
        doc = _doc("A=1\n")
        assert edit_document(doc, prompter) is EditOutcome.CANCELLED
        assert doc[0].edited_value is None


class TestEditedCount:
    def test_only_changed_answers_count(self):
        doc = _doc("A=1\nB=\nC=x\n")
        apply_answers(doc, {0: "1", 1: "", 2: "y"})
        assert doc.edited_count == 1
        assert doc.variable_count == 3
