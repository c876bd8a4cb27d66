"""Streaming XML writer package.

This package builds XML documents from a sequence of imperative calls
(open tag, set attribute, write text, write comment, close tag) without
constructing an in-memory tree.

Features:
- Incremental writer with automatic self-closing of empty elements
- Four-space indentation driven by nesting depth
- JSON call scripts replayable from the command line
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("stream-xml")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from stream_xml.config import ConfigLoader, WriterConfig
from stream_xml.script import WriterCall, load_script, replay
from stream_xml.writer import XmlWriter

__all__ = [
    "__version__",
    # Writer
    "XmlWriter",
    "WriterConfig",
    "ConfigLoader",
    # Scripts
    "WriterCall",
    "load_script",
    "replay",
]
