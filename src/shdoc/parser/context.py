# topmark:header:start
#
#   project      : shdoc
#   file         : context.py
#   file_relpath : src/shdoc/parser/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parser context: the single owner of all parsing state.

A `ParserContext` holds the document model, the error controller, the block
accumulator and the description buffer, and drives every input line through them:

1. panic mode check (discard the line unless it resynchronizes);
2. classification;
3. description buffer continuation;
4. dispatch of the event to its handler (tag handlers update the block,
   synchronization lines flush it into the model).

Several files may be parsed with one context: the document model and its
cross-reference index are shared, while the block, the description buffer and
panic mode are reset at each file boundary.

Example:
    ```python
    ctx = ParserContext()
    ctx.parse_file(Path("lib/util.sh"))
    result = ctx.finish()
    if result.ok:
        print(render_markdown(result.model))
    ```
"""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import TYPE_CHECKING

from shdoc.config.logging import get_logger
from shdoc.document.model import DocumentModel, SourceLocation, TypeEntry
from shdoc.parser.block import BlockAccumulator, parse_argument, parse_variable
from shdoc.parser.classifier import classify
from shdoc.parser.description import DescriptionBuffer
from shdoc.parser.errors import ErrorController
from shdoc.parser.events import (
    ArgTag,
    CommentLine,
    DeclarationKind,
    DeclarationLine,
    DescriptionTag,
    EnvTag,
    InternalTag,
    NoArgsTag,
    PlainText,
    SectionTag,
    SeeTag,
    SetTag,
    TypeTag,
    UnknownTag,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from pathlib import Path

    from shdoc.diagnostic.model import Diagnostic
    from shdoc.parser.errors import AdvisorySink
    from shdoc.parser.events import Event

logger = get_logger(__name__)

DEFAULT_FILE_NAME: str = "<input>"


@dataclass(frozen=True)
class ParseResult:
    """Outcome of a parse run.

    Attributes:
        model: The document model, or None when a fatal error was recorded.
        errors: Fatal errors in order of occurrence.
        advisories: Advisory messages in order of occurrence.
    """

    model: DocumentModel | None
    errors: tuple[Diagnostic, ...]
    advisories: tuple[Diagnostic, ...]

    @property
    def ok(self) -> bool:
        """True if no fatal error was recorded."""
        return not self.errors


class ParserContext:
    """Explicit state for one parse run (one or more files)."""

    model: DocumentModel
    errors: ErrorController
    block: BlockAccumulator
    buffer: DescriptionBuffer
    files: list[str]

    def __init__(self, *, advisory_sink: AdvisorySink | None = None) -> None:
        self.model = DocumentModel()
        self.errors = ErrorController(advisory_sink)
        self.block = BlockAccumulator()
        self.buffer = DescriptionBuffer()
        self.files = []
        self._location: SourceLocation = SourceLocation(DEFAULT_FILE_NAME, 0)
        self._handlers: dict[type, Callable[[Event], None]] = {
            SectionTag: self._on_section,
            DescriptionTag: self._on_description,
            ArgTag: self._on_arg,
            SetTag: self._on_set,
            EnvTag: self._on_env,
            SeeTag: self._on_see,
            InternalTag: self._on_internal,
            NoArgsTag: self._on_noargs,
            TypeTag: self._on_type,
            UnknownTag: self._on_unknown,
            DeclarationLine: self._on_declaration,
            CommentLine: self._on_comment,
            PlainText: self._on_plain_text,
        }

    # --- Input ------------------------------------------------------------------

    def parse_lines(self, lines: Iterable[str], *, file: str = DEFAULT_FILE_NAME) -> None:
        """Parse the lines of one source file.

        Args:
            lines: Raw lines; trailing newlines are stripped.
            file: File identifier used in source locations and diagnostics.
        """
        logger.info("Parsing %s", file)
        self.files.append(file)
        self._reset_block()
        self.errors.panic = False
        for lineno, raw in enumerate(lines, start=1):
            self.feed(raw.rstrip("\r\n"), lineno, file=file)
        self.end_file()

    def parse_text(self, text: str, *, file: str = DEFAULT_FILE_NAME) -> None:
        """Parse an in-memory source text as one file.

        Lines are split the way `parse_file` splits them (LF, CRLF and CR only), so
        line numbers match whether a source is read from disk or from STDIN.
        """
        self.parse_lines(io.StringIO(text, newline=None), file=file)

    def parse_file(self, path: Path, *, display_name: str | None = None) -> None:
        """Parse a UTF-8 source file.

        Args:
            path: File to read.
            display_name: Identifier for locations; defaults to ``str(path)``.

        Raises:
            OSError: If the file cannot be read.
            UnicodeDecodeError: If the file is not valid UTF-8.
        """
        with path.open("r", encoding="utf-8") as fh:
            self.parse_lines(fh, file=display_name or str(path))

    def feed(self, line: str, lineno: int, *, file: str = DEFAULT_FILE_NAME) -> None:
        """Process a single line."""
        self._location = SourceLocation(file, lineno)

        if self.errors.should_skip(line):
            logger.debug("%s: skipped (panic mode)", self._location)
            return

        event: Event = classify(line)
        logger.debug("%s: %r", self._location, event)

        if self.buffer.is_open:
            if isinstance(event, CommentLine) and self.buffer.feed(event):
                return
            self.buffer.close()

        self._handlers[type(event)](event)

    def end_file(self) -> None:
        """Treat end of input as a synchronization point and clear per-file state."""
        self.buffer.close()
        self._synchronize()
        self.errors.panic = False

    def finish(self) -> ParseResult:
        """Return the outcome; the model is discarded when a fatal error was recorded."""
        errors: tuple[Diagnostic, ...] = tuple(self.errors.fatal_errors())
        advisories: tuple[Diagnostic, ...] = tuple(self.errors.advisories())
        if errors:
            logger.info("%d fatal error(s); discarding the document model", len(errors))
        return ParseResult(
            model=None if errors else self.model,
            errors=errors,
            advisories=advisories,
        )

    # --- Tag handlers -----------------------------------------------------------

    def _on_section(self, event: Event) -> None:
        assert isinstance(event, SectionTag)
        title: str = event.title.strip()
        if not title:
            self._fatal_in_block("@section requires a title")
            return
        self.block.set_section(title, self._location)

    def _on_description(self, event: Event) -> None:
        assert isinstance(event, DescriptionTag)
        self.block.description = self.buffer.open(event)

    def _on_arg(self, event: Event) -> None:
        assert isinstance(event, ArgTag)
        argument = parse_argument(event.raw)
        if argument is None:
            self._fatal_in_block("@arg requires a name")
            return
        self.block.arguments.append(argument)

    def _on_set(self, event: Event) -> None:
        assert isinstance(event, SetTag)
        ref = parse_variable(event.raw)
        if ref is None:
            logger.debug("%s: ignoring @set without a variable name", self._location)
            return
        self.block.add_set(ref)

    def _on_env(self, event: Event) -> None:
        assert isinstance(event, EnvTag)
        ref = parse_variable(event.raw)
        if ref is None:
            logger.debug("%s: ignoring @env without a variable name", self._location)
            return
        self.block.add_env(ref)

    def _on_see(self, event: Event) -> None:
        assert isinstance(event, SeeTag)
        if event.raw:
            self.block.see.append(event.raw)

    def _on_internal(self, event: Event) -> None:
        self.block.internal = True

    def _on_noargs(self, event: Event) -> None:
        self.block.noargs = True

    def _on_type(self, event: Event) -> None:
        self.block.type_pending = True

    def _on_unknown(self, event: Event) -> None:
        assert isinstance(event, UnknownTag)
        self.errors.advisory(f"Unknown tag @{event.name}", self._location)

    def _on_comment(self, event: Event) -> None:
        # Untagged comments are neither documentation nor synchronization points.
        return

    # --- Synchronization --------------------------------------------------------

    def _on_declaration(self, event: Event) -> None:
        assert isinstance(event, DeclarationLine)
        if event.kind == DeclarationKind.FUNCTION:
            self._flush_attached(event.name)
            if self.block.has_function_content():
                self._flush_function(event.name)
            else:
                self._synchronize()
        elif event.kind == DeclarationKind.VARIABLE and self.block.type_pending:
            self._flush_type(event.name)
        else:
            self._synchronize()

    def _on_plain_text(self, event: Event) -> None:
        self._synchronize()

    def _flush_attached(self, name: str) -> None:
        # A section or type tag right above a function header is reported, whether
        # or not the function itself is documented.
        block: BlockAccumulator = self.block
        if block.section_title is not None:
            self.errors.advisory(
                f"@section '{block.section_title}' is attached to function {name}",
                block.section_location or self._location,
            )
            self.model.add_section(block.build_section(with_description=False))
            block.section_title = None
            block.section_location = None
        if block.type_pending:
            self.errors.advisory(f"@type is attached to function {name}", self._location)
            block.type_pending = False

    def _flush_function(self, name: str) -> None:
        block: BlockAccumulator = self.block
        entry = block.build_function(name, self._location)
        if entry.has_inconsistent_args:
            self.errors.fatal(
                f"@noargs and @arg are mutually exclusive (function {name})",
                self._location,
            )

        if entry.internal:
            logger.info("%s: skipping internal function %s", self._location, name)
        else:
            logger.info("%s: function %s", self._location, name)
            self.model.add_function(entry)
        self._reset_block()

    def _flush_type(self, name: str) -> None:
        logger.info("%s: type %s", self._location, name)
        self.model.add_type(TypeEntry(name=name, location=self._location))
        self.block.type_pending = False
        self._synchronize()

    def _synchronize(self) -> None:
        block: BlockAccumulator = self.block
        if block.is_empty():
            return
        if block.section_title is not None:
            section = block.build_section()
            logger.info("%s: section %s", section.location, section.title)
            self.model.add_section(section)
        if block.type_pending:
            logger.debug("%s: dropping @type without an assignment", self._location)
        self._reset_block()

    def _fatal_in_block(self, message: str) -> None:
        # A malformed block never leaks its fields into the next declaration.
        self.errors.fatal(message, self._location)
        self._reset_block()

    def _reset_block(self) -> None:
        self.block.reset()
        self.buffer.reset()
