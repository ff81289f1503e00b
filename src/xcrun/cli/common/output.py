"""Output formatting utilities for the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

import typer
from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

_THEME = Theme(
    {
        "ok": "bold green",
        "warn": "yellow",
        "err": "bold red",
        "title": "bold cyan",
        "meta": "dim",
    }
)

# Diagnostics go to stderr so stdout carries only tool output and results.
console = Console(theme=_THEME, stderr=True, highlight=False, soft_wrap=True)


@dataclass(frozen=True)
class Out:
    """Output formatter for CLI messages and plain results."""

    prefix: str = "xcrun"

    def info(self, msg: str) -> None:
        """Print an info message."""
        console.print(f"[title]{self.prefix}: info:[/] {escape(msg)}")

    def error(self, msg: str) -> None:
        """Print an error message."""
        console.print(f"[err]{self.prefix}: error:[/] {escape(msg)}")

    def kv(self, items: Mapping[str, Any]) -> None:
        """Print key-value pairs."""
        for k, v in items.items():
            console.print(f"[meta]{escape(k)}[/]: {escape(repr(v))}")

    def result(self, value: object) -> None:
        """Write one machine-readable result line to stdout."""
        typer.echo(str(value))

    def results(self, values: Iterable[object]) -> None:
        """Write machine-readable result lines to stdout, one per value."""
        for value in values:
            self.result(value)


out = Out()
