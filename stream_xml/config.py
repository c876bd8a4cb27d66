from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

NEWLINES: dict[str, str] = {"lf": "\n", "crlf": "\r\n"}
MAX_VERBOSITY = 2


@dataclass(frozen=True, slots=True)
class WriterConfig:
    indent_width: int = 4
    newline: str = "\n"
    verbosity: int = 0

    def __post_init__(self) -> None:
        if self.indent_width < 0:
            raise ValueError(
                f"indent_width must be non-negative, got {self.indent_width}"
            )
        if self.newline not in NEWLINES.values():
            raise ValueError(f"newline must be LF or CRLF, got {self.newline!r}")
        if not 0 <= self.verbosity <= MAX_VERBOSITY:
            raise ValueError(
                f"verbosity must be between 0 and {MAX_VERBOSITY}, got {self.verbosity}"
            )

    @property
    def indent(self) -> str:
        return " " * self.indent_width

    @classmethod
    def from_env(cls) -> WriterConfig:
        return cls(
            indent_width=int(os.getenv("STREAM_XML_INDENT_WIDTH", "4")),
            newline=_parse_newline(
                os.getenv("STREAM_XML_NEWLINE", "lf"), key="STREAM_XML_NEWLINE"
            ),
            verbosity=int(os.getenv("STREAM_XML_VERBOSITY", "0")),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> WriterConfig:
        config = WriterConfig.from_env()
        if config_file is None:
            config_file = Path("stream_xml.toml")
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(config_file: Path, base_config: WriterConfig) -> WriterConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        format_section = _get_table(data, "format")
        logging_section = _get_table(data, "logging")
        indent_width = base_config.indent_width
        if (value := format_section.get("indent_width")) is not None:
            indent_width = _coerce_int(value, key="format.indent_width")
        newline = base_config.newline
        if (value := format_section.get("newline")) is not None:
            newline = _parse_newline(str(value), key="format.newline")
        verbosity = base_config.verbosity
        if (value := logging_section.get("verbosity")) is not None:
            verbosity = _coerce_int(value, key="logging.verbosity")
        return WriterConfig(
            indent_width=indent_width,
            newline=newline,
            verbosity=verbosity,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _parse_newline(value: str, *, key: str) -> str:
    cleaned = value.strip().lower()
    if cleaned not in NEWLINES:
        raise ValueError(f"{key} must be 'lf' or 'crlf', got {value!r}")
    return NEWLINES[cleaned]


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return int(value)
    raise ValueError(f"{key} must be int-like or string, got {type(value).__name__}")
