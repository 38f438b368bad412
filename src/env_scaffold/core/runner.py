"""Runner — discovery → selection → parse → edit → render → write.

This is the **only** entry point that wires discovery, the editor and the
filesystem together. Files are processed one at a time, in selection
order: a cancellation while prompting for file N leaves files 1..N-1 on
disk and writes nothing else.
"""

from __future__ import annotations

import logging
from pathlib import Path

from env_scaffold.core.config import ScaffoldConfig
from env_scaffold.core.discover import discover_example_files
from env_scaffold.core.editor import edit_document
from env_scaffold.core.gitignore import read_gitignore
from env_scaffold.core.parser import parse_file
from env_scaffold.core.renderer import render_document
from env_scaffold.errors import DiscoveryError, ScaffoldError, WriteError
from env_scaffold.model import CANCELLED, EditOutcome, PipelineState
from env_scaffold.model.result import ScaffoldResult, WrittenFile
from env_scaffold.ui import Prompter, Selector

_logger = logging.getLogger(__name__)

EXAMPLE_SUFFIX = ".example"


def derive_output_path(source: Path) -> Path:
    """Strip a trailing ``.example`` from the file name.

    Only the name is touched, so ``/srv/app.example/.env.example`` becomes
    ``/srv/app.example/.env``. Names without the suffix are returned as-is;
    the controller refuses to write those.
    """
    if source.name.endswith(EXAMPLE_SUFFIX) and source.name != EXAMPLE_SUFFIX:
        return source.with_name(source.name[: -len(EXAMPLE_SUFFIX)])
    return source


def collect_files(config: ScaffoldConfig) -> list[Path]:
    """Discover example files under ``config.root``.

    Raises ``DiscoveryError`` for an unreadable root, or a missing /
    unreadable ``.gitignore`` while ``config.use_gitignore`` is on.
    """
    root = config.root.resolve()
    ignore: list[str] = []
    if config.use_gitignore:
        ignore = read_gitignore(root, encoding=config.encoding)
    return discover_example_files(root, ignore=ignore, name=config.example_name)


def _relative(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return str(path)


class _Pipeline:
    """State holder for one run; see :func:`run_examples`."""

    def __init__(self, config: ScaffoldConfig, selector: Selector, prompter: Prompter) -> None:
        self.config = config
        self.root = config.root.resolve()
        self.selector = selector
        self.prompter = prompter
        self.result = ScaffoldResult(root=self.root)

    def _enter(self, state: PipelineState, subject: Path | None = None) -> None:
        _logger.debug(
            "%s -> %s%s",
            self.result.state.value,
            state.value,
            f" ({_relative(subject, self.root)})" if subject else "",
        )
        self.result.state = state

    def _fail(self, message: str | None = None, *, cancelled: bool = False) -> ScaffoldResult:
        self._enter(PipelineState.FAILED)
        self.result.cancelled = cancelled
        self.result.error = message
        return self.result

    def run(self) -> ScaffoldResult:
        # ── 1. discover ─────────────────────────────────────────────
        self._enter(PipelineState.DISCOVERING)
        try:
            self.result.discovered = collect_files(self.config)
        except DiscoveryError as exc:
            self._fail(str(exc))
            raise

        # ── 2. select ───────────────────────────────────────────────
        self._enter(PipelineState.SELECTING)
        selected = self.selector.select(self.result.discovered, self.root)
        if selected is CANCELLED:
            _logger.info("selection cancelled")
            return self._fail(cancelled=True)
        self.result.selected = list(selected)
        if not self.result.selected:
            self._enter(PipelineState.DONE)
            return self.result

        # ── 3. per file: parse → edit → render → write ──────────────
        for source in self.result.selected:
            try:
                if not self._process(source):
                    return self._fail(cancelled=True)
            except ScaffoldError as exc:
                self._fail(str(exc))
                raise

        self._enter(PipelineState.DONE)
        return self.result

    def _process(self, source: Path) -> bool:
        """Handle one file. Returns False when the user cancelled."""
        self._enter(PipelineState.PARSING, source)
        try:
            document = parse_file(source, encoding=self.config.encoding)
        except (OSError, UnicodeError, LookupError) as exc:
            raise DiscoveryError(source, f"cannot read example file: {exc}") from exc

        self._enter(PipelineState.EDITING, source)
        outcome = edit_document(document, self.prompter, title=_relative(source, self.root))
        if outcome is EditOutcome.CANCELLED:
            _logger.info("prompt cancelled while editing %s", source)
            return False

        self._enter(PipelineState.RENDERING, source)
        contents = render_document(document)

        self._enter(PipelineState.WRITING, source)
        target = derive_output_path(source)
        if target == source:
            raise WriteError(target, "output path equals the template; name must end in .example")
        # Encode first so an unencodable answer leaves an existing .env intact.
        try:
            data = contents.encode(self.config.encoding)
        except (UnicodeError, LookupError) as exc:
            raise WriteError(target, f"cannot encode as {self.config.encoding}: {exc}") from exc
        try:
            target.write_bytes(data)
        except OSError as exc:
            raise WriteError(target, f"cannot write: {exc}") from exc

        variables = document.variable_count
        self.result.written.append(
            WrittenFile(source=source, target=target, variables=variables, edited=document.edited_count)
        )
        _logger.info("wrote %s", target)
        return True


def run_examples(
    config: ScaffoldConfig,
    *,
    selector: Selector,
    prompter: Prompter,
) -> ScaffoldResult:
    """Run the whole pipeline for *config*.

    Returns the :class:`ScaffoldResult` on success, empty selection or
    cancellation (``result.cancelled``). Raises ``DiscoveryError`` /
    ``WriteError`` on fatal I/O failures; files already written stay.
    """
    return _Pipeline(config, selector, prompter).run()
