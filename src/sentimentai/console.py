# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .schemas import SentimentPrediction

ASCII_BANNER = r"""
 ____             _   _                      _
/ ___|  ___ _ __ | |_(_)_ __ ___   ___ _ __ | |_
\___ \ / _ \ '_ \| __| | '_ ` _ \ / _ \ '_ \| __|
 ___) |  __/ | | | |_| | | | | | |  __/ | | | |_
|____/ \___|_| |_|\__|_|_| |_| |_|\___|_| |_|\__|
"""


@dataclass
class MLConsole:
    enabled: bool = True

    def __post_init__(self) -> None:
        self._console = Console(color_system="auto", soft_wrap=True, quiet=not self.enabled)

    def banner(self) -> None:
        self._console.print(Panel.fit(ASCII_BANNER.strip("\n"), title="Sentiment ML", border_style="cyan"))

    def section(self, title: str) -> None:
        self._console.print(f"[bold magenta]=============== {title} ===============[/bold magenta]")

    def info(self, text: str) -> None:
        self._console.print(f"[bold cyan]INFO[/bold cyan] {text}")

    def warn(self, text: str) -> None:
        self._console.print(f"[bold yellow]WARN[/bold yellow] {text}")

    def success(self, text: str) -> None:
        self._console.print(f"[bold green]OK[/bold green] {text}")

    def metrics_table(self, metrics: dict[str, float], *, title: str) -> None:
        table = Table(title=title, show_lines=True)
        table.add_column("Metric", style="bold")
        table.add_column("Value", justify="right")
        for key, value in metrics.items():
            table.add_row(key, f"{float(value):.2%}")
        self._console.print(table)

    def prediction_line(self, result: SentimentPrediction) -> None:
        colour = "green" if result.prediction else "red"
        self._console.print(
            f"Sentiment: {escape(result.text)} | Prediction: [{colour}]{result.sentiment}[/{colour}] "
            f"| Probability: {result.probability:.4f}",
            markup=True,
            highlight=False,
        )

    def predictions(self, results: Iterable[SentimentPrediction]) -> None:
        for result in results:
            self.prediction_line(result)
