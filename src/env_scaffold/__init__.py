"""env_scaffold — create ``.env`` files from ``.env.example`` templates."""

__all__ = [
    "__version__",
    "scaffold_examples",
    "list_examples",
    "parse_content",
    "render_document",
]
__version__ = "0.1.0"

# Programmatic entrypoints (no argparse, no console I/O).
from env_scaffold.api import (  # noqa: E402, F401
    list_examples,
    scaffold_examples,
)
from env_scaffold.core.parser import parse_content  # noqa: E402, F401
from env_scaffold.core.renderer import render_document  # noqa: E402, F401
