from enum import IntEnum
from typing_extensions import override

from rich.console import Console

from ...ports import LoggerPort


class LogLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


class ConsoleLogger(LoggerPort):
    pass

    def __init__(self, console: Console | None = None, verbosity: int = 0) -> None:
        super().__init__()
        self.console = console or Console(stderr=True)
        self.verbosity = verbosity
        self._stats: dict[str, int] = {
            "documents": 0,
            "elements": 0,
            "comments": 0,
            "warnings": 0,
            "errors": 0,
        }

    @override
    def info(self, message: str, *, level: int = LogLevel.NORMAL) -> None:
        if self.verbosity >= level:
            self.console.print(message)

    @override
    def verbose(self, message: str) -> None:
        if self.verbosity >= LogLevel.VERBOSE:
            self.console.print(f"[dim]{message}[/dim]")

    @override
    def debug(self, message: str) -> None:
        if self.verbosity >= LogLevel.DEBUG:
            self.console.print(f"[dim cyan]{message}[/dim cyan]")

    @override
    def success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    @override
    def warning(self, message: str) -> None:
        self._stats["warnings"] += 1
        self.console.print(f"[yellow]⚠[/yellow] {message}")

    @override
    def error(self, message: str) -> None:
        self._stats["errors"] += 1
        self.console.print(f"[red]✗[/red] {message}")

    @override
    def log_document_complete(
        self, *, elements: int, comments: int, size: int
    ) -> None:
        self._stats["documents"] += 1
        self._stats["elements"] += elements
        self._stats["comments"] += comments
        self.verbose(
            f"Rendered document: {elements:,} elements, {comments:,} comments, {size:,} bytes"
        )

    def log_final_stats(self) -> None:
        if self.verbosity < LogLevel.VERBOSE:
            return
        self.console.print()
        self.console.print("[dim]Writer Statistics:[/dim]")
        self.console.print(f"[dim]  Documents: {self._stats['documents']}[/dim]")
        self.console.print(f"[dim]  Elements: {self._stats['elements']:,}[/dim]")
        self.console.print(f"[dim]  Comments: {self._stats['comments']:,}[/dim]")
        if self._stats["warnings"] > 0:
            self.console.print(
                f"[dim yellow]  Warnings: {self._stats['warnings']}[/dim yellow]"
            )
        if self._stats["errors"] > 0:
            self.console.print(f"[dim red]  Errors: {self._stats['errors']}[/dim red]")

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = {
            "documents": 0,
            "elements": 0,
            "comments": 0,
            "warnings": 0,
            "errors": 0,
        }
