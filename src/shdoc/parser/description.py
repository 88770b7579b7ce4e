# topmark:header:start
#
#   project      : shdoc
#   file         : description.py
#   file_relpath : src/shdoc/parser/description.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Description buffer with dedent-column normalization.

A ``@description`` tag opens the buffer. The first contributing line fixes the
*dedent column*: the width of the inline tag prefix when the tag carries text, or
the comment prefix width of the first continuation line otherwise. While open:

- a bare comment marker appends a paragraph break;
- a comment line whose prefix is wider than the dedent column closes the buffer
  and is handed back to the caller for normal processing;
- any other comment line contributes its text with the comment prefix removed; a
  prefix narrower than the dedent column is removed whole, not padded or cut.

Tag lines and non-comment lines close the buffer from the outside via `close()`;
the text collected so far is kept.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from shdoc.config.logging import get_logger
from shdoc.document.model import DescriptionText

if TYPE_CHECKING:
    from shdoc.parser.events import CommentLine, DescriptionTag

logger = get_logger(__name__)


class DescriptionBuffer:
    """Accumulates one multi-line description at a time.

    Attributes:
        is_open: True while continuation lines are being collected.
        dedent_column: Fixed prefix width, or None until the first contributing line.
        target: The description being built; owned by the current block.
    """

    is_open: bool
    dedent_column: int | None
    target: DescriptionText

    def __init__(self) -> None:
        self.is_open = False
        self.dedent_column = None
        self.target = DescriptionText()

    def open(self, event: DescriptionTag) -> DescriptionText:
        """Start a new description; a previous one in the same block is replaced.

        Args:
            event: The ``@description`` tag event.

        Returns:
            The fresh `DescriptionText` the buffer writes into.
        """
        self.target = DescriptionText()
        self.is_open = True
        self.dedent_column = None
        if event.text is not None:
            self.target.lines.append(event.text)
            self.dedent_column = event.prefix_width
        return self.target

    def feed(self, event: CommentLine) -> bool:
        """Offer a plain comment line to the open buffer.

        Args:
            event: The comment line.

        Returns:
            True if the line was consumed; False if it closed the buffer and must be
            processed as an ordinary line.
        """
        if not event.text.strip():
            self.target.lines.append("")
            return True

        if self.dedent_column is None:
            self.dedent_column = event.prefix_width
        elif event.prefix_width > self.dedent_column:
            logger.debug(
                "Closing description: prefix width %d exceeds dedent column %d",
                event.prefix_width,
                self.dedent_column,
            )
            self.close()
            return False

        # A prefix narrower than the dedent column is stripped whole: "#  a" under a
        # column of 4 contributes "a", never a cut into the text itself.
        self.target.lines.append(event.text.rstrip())
        return True

    def close(self) -> None:
        """Stop collecting; the collected text stays on `target`."""
        self.is_open = False

    def reset(self) -> None:
        """Close the buffer and detach it from any block."""
        self.close()
        self.dedent_column = None
        self.target = DescriptionText()
