"""Streaming XML writer.

This module builds an XML document from a sequence of imperative calls
without constructing an element tree. Output is accumulated in a byte
buffer and returned as text by ``XmlWriter.end``.

No escaping is applied: tag names, attribute values, text and comments are
written verbatim, so callers must pre-escape content where strict XML is
required.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import WriterConfig
from .infrastructure.logging.null_logger import NullLogger

if TYPE_CHECKING:
    from .ports import LoggerPort

XML_DECLARATION = '<?xml version="1.0"?>'
ENCODING = "utf-8"


class XmlWriter:
    """Incrementally renders an XML document.

    The writer keeps three pieces of state: the output accumulator, the
    stack of open element names, and a flag recording whether the most
    recently opened element has received attributes but no content yet.
    A start tag is left unterminated after ``open`` so that ``attr`` can
    append to it in place.
    """

    def __init__(
        self,
        config: WriterConfig | None = None,
        *,
        logger: LoggerPort | None = None,
    ) -> None:
        super().__init__()
        self.config = config or WriterConfig()
        self._logger = logger or NullLogger()
        self._buffer = bytearray()
        self._stack: list[str] = []
        self._attrs = False
        self._elements = 0
        self._comments = 0

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def open_elements(self) -> tuple[str, ...]:
        return tuple(self._stack)

    @property
    def pending_attributes(self) -> bool:
        return self._attrs

    def declare(self) -> None:
        self._append(XML_DECLARATION)

    def attr(self, name: str, value: str) -> None:
        """Append an attribute to the start tag opened by the last ``open``.

        Must directly follow ``open`` or another ``attr`` call; anywhere else
        the attribute lands in the middle of unrelated output.
        """
        self._append(f' {name}="{value}"')
        self._attrs = True

    def open(self, tag: str) -> None:
        self._finish_start_tag()
        self._indent()
        self._append(f"<{tag}")
        self._stack.append(tag)
        self._attrs = False
        self._elements += 1

    def close(self) -> None:
        """Close the innermost open element.

        An element without content renders as ``<tag/>`` (with or without
        attributes). The emptiness check is a suffix match of ``<tag``
        against the whole accumulator, so text that itself ends in ``<tag``
        also self-closes the element.

        Calling ``close`` with no open elements does nothing.
        """
        if not self._stack:
            self._logger.debug("close() called with no open elements; ignored")
            return

        tag = self._stack.pop()
        needle = f"<{tag}".encode(ENCODING, "surrogatepass")

        if self._buffer.endswith(needle) or self._attrs:
            self._append("/>")
            self._attrs = False
            return

        if self._buffer.endswith(b">"):
            self._indent()

        self._append(f"</{tag}>")
        self._attrs = False

    def text(self, content: str) -> None:
        self._finish_start_tag()
        self._append(content)
        self._attrs = False

    def write_comment(self, content: str) -> None:
        # Does not terminate a pending start tag; callers must not comment
        # directly after attr().
        self._indent()
        self._append(f"<!--{content}-->")
        self._comments += 1

    def end(self) -> str:
        """Close every open element and return the document.

        Returns:
            The accumulated document, or an empty string if the accumulator
            does not hold valid UTF-8 (only possible when lone surrogates
            were written).
        """
        if self._stack:
            self._logger.debug(f"Auto-closing {len(self._stack)} open element(s)")
        while self._stack:
            self.close()

        try:
            document = self._buffer.decode(ENCODING)
        except UnicodeDecodeError:
            self._logger.warning("Output is not valid UTF-8; returning empty document")
            return ""

        self._logger.log_document_complete(
            elements=self._elements,
            comments=self._comments,
            size=len(self._buffer),
        )
        return document

    def _append(self, text: str) -> None:
        self._buffer += text.encode(ENCODING, "surrogatepass")

    def _finish_start_tag(self) -> None:
        if self._buffer and not self._buffer.endswith(b">"):
            self._buffer += b">"

    def _indent(self) -> None:
        if self._buffer:
            self._append(self.config.newline)
        self._append(self.config.indent * len(self._stack))
