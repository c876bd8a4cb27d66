"""Call scripts: writer operations described as JSON data.

A script is a JSON array of calls, each call being an array whose first item
is the operation name and whose remaining items are its string arguments::

    [["declare"], ["open", "item"], ["attr", "id", "1"], ["text", "x"]]

Replaying a script always finishes with ``XmlWriter.end``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import json
from typing import TYPE_CHECKING

from .exceptions import (
    OperationArityError,
    ScriptError,
    ScriptParseError,
    UnknownOperationError,
)
from .writer import XmlWriter

if TYPE_CHECKING:
    from pathlib import Path

OPERATIONS: dict[str, int] = {
    "declare": 0,
    "attr": 2,
    "open": 1,
    "close": 0,
    "text": 1,
    "write_comment": 1,
}


@dataclass(frozen=True, slots=True)
class WriterCall:
    op: str
    args: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.op, str) or self.op not in OPERATIONS:
            raise UnknownOperationError(f"unknown operation {self.op!r}")
        if len(self.args) != OPERATIONS[self.op]:
            raise OperationArityError(
                f"{self.op} takes {OPERATIONS[self.op]} argument(s), got {len(self.args)}"
            )
        if not all(isinstance(arg, str) for arg in self.args):
            raise ScriptParseError(f"{self.op} arguments must be strings")

    def apply(self, writer: XmlWriter) -> None:
        getattr(writer, self.op)(*self.args)


def parse_calls(data: object) -> list[WriterCall]:
    if not isinstance(data, list):
        raise ScriptParseError(
            f"Script must be a JSON array, got {type(data).__name__}"
        )

    calls: list[WriterCall] = []
    for index, item in enumerate(data):
        if not isinstance(item, list) or not item:
            raise ScriptParseError(f"Call #{index} must be a non-empty array")
        op, *args = item
        try:
            calls.append(WriterCall(op=op, args=tuple(args)))
        except ScriptError as exc:
            raise type(exc)(f"Call #{index}: {exc}") from exc
    return calls


def load_script(path: Path) -> list[WriterCall]:
    try:
        with path.open(encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, ValueError) as exc:
        raise ScriptParseError(f"Cannot read script {path}: {exc}") from exc
    return parse_calls(data)


def replay(calls: Iterable[WriterCall], writer: XmlWriter | None = None) -> str:
    writer = writer or XmlWriter()
    for call in calls:
        call.apply(writer)
    return writer.end()
