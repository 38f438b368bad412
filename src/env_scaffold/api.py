"""
env_scaffold.api
================

Programmatic entrypoints for using env_scaffold from other tools.

Goals:
  - No argparse dependency
  - Interaction injected through ``Selector`` / ``Prompter`` objects
  - JSON-friendly, schema-validated outputs

Usage::

    from env_scaffold.api import list_examples, scaffold_examples

    files = list_examples(".", use_gitignore=False)
    result, result_dict = scaffold_examples(".", selector=..., prompter=...)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from env_scaffold.contracts.load import validate_instance
from env_scaffold.core.config import ScaffoldConfig
from env_scaffold.core.runner import collect_files, run_examples
from env_scaffold.model.result import ScaffoldResult
from env_scaffold.ui import Prompter, Selector

RESULT_SCHEMA = "scaffold_result.schema.json"


def list_examples(
    root: str | Path = ".",
    *,
    use_gitignore: bool | None = None,
) -> list[Path]:
    """Return the example files ``scaffold_examples`` would offer."""
    config = ScaffoldConfig.from_env(root, use_gitignore=use_gitignore)
    return collect_files(config)


def scaffold_examples(
    root: str | Path = ".",
    *,
    selector: Selector,
    prompter: Prompter,
    use_gitignore: bool | None = None,
) -> tuple[ScaffoldResult, dict[str, Any]]:
    """Run the full pipeline and return the result plus its validated dict.

    ``use_gitignore=None`` defers to ``ENV_SCAFFOLD_NO_GITIGNORE`` and then
    to the default (filtering on).
    """
    config = ScaffoldConfig.from_env(root, use_gitignore=use_gitignore)
    result = run_examples(config, selector=selector, prompter=prompter)
    result_dict = result.to_dict()
    validate_instance(result_dict, RESULT_SCHEMA)
    return result, result_dict
