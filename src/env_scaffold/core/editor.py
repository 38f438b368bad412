"""Interactive editor — turns a document into prompts and applies answers."""

from __future__ import annotations

import logging
from typing import Mapping

from env_scaffold.model import CANCELLED, EditOutcome
from env_scaffold.model.document import FileDocument, PromptSpec
from env_scaffold.ui import Prompter

_logger = logging.getLogger(__name__)


def generate_prompts(document: FileDocument) -> list[PromptSpec]:
    """One :class:`PromptSpec` per VARIABLE line, in line order."""
    return [
        PromptSpec(
            identifier=index,
            label=record.key or "",
            initial_value=record.default_value or "",
        )
        for index, record in document.variables()
    ]


def apply_answers(document: FileDocument, answers: Mapping[int, str]) -> int:
    """Store *answers* as ``edited_value`` on the matching records.

    Identifiers that are out of range or point at a non-VARIABLE line are
    ignored. Returns the number of answers applied.
    """
    applied = 0
    for identifier, answer in answers.items():
        if not 0 <= identifier < len(document):
            _logger.debug("ignoring answer for stale index %s in %s", identifier, document.source)
            continue
        record = document[identifier]
        if not record.is_variable:
            _logger.debug("ignoring answer for non-variable line %s in %s", identifier, document.source)
            continue
        record.edited_value = answer
        applied += 1
    return applied


def edit_document(document: FileDocument, prompter: Prompter, *, title: str = "") -> EditOutcome:
    """Run one prompt session for *document*.

    Documents without variables are skipped and the prompter is not called.
    """
    specs = generate_prompts(document)
    if not specs:
        return EditOutcome.SKIPPED

    answers = prompter.prompt(title or str(document.source), specs)
    if answers is CANCELLED:
        return EditOutcome.CANCELLED

    applied = apply_answers(document, answers)
    _logger.debug("applied %d/%d answers to %s", applied, len(specs), document.source)
    return EditOutcome.EDITED
