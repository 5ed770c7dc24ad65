# -*- coding: utf-8 -*-
"""
reporter.py — per-file status lines and the final summary.

Worker threads call the per-file methods directly; rich's Console serialises
writes, so lines from different files never mix inside one line.
Counters are not touched here: workers return FileResult objects and the
caller folds them into RunStats once everything is done.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from rich.console import Console

if TYPE_CHECKING:
    from bomcheck.scan.inspector import FileResult


@dataclass
class RunStats:
    found: int = 0
    fixed: int = 0
    skipped: int = 0
    failed: int = 0
    total: int = 0

    def add(self, result: FileResult) -> None:
        if result.has_bom:
            self.found += 1
        if result.fixed:
            self.fixed += 1
        if result.skip_reason:
            self.skipped += 1
        if result.error:
            self.failed += 1


class Reporter:
    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    @staticmethod
    def display(path: Path) -> str:
        """Printable form of a path; undecodable name bytes become U+FFFD."""
        return os.fsencode(path).decode("utf-8", "replace")

    def _line(self, text: str, style: Optional[str] = None) -> None:
        # markup off: file names may contain [brackets]; soft_wrap keeps one line per path
        self.console.print(text, style=style, markup=False, highlight=False, soft_wrap=True)

    # -----------------------------
    # Run start
    # -----------------------------

    def start(self, root: Path, autofix: bool) -> None:
        self._line(f"Will check {self.display(root)}...")
        if not autofix:
            self._line("Dry run: no files will be modified (use --autofix to strip BOMs).", style="dim")

    def root_not_found(self, root: Path) -> None:
        self._line(f"Root folder {self.display(root)} not found.", style="red")

    # -----------------------------
    # Per-file events
    # -----------------------------

    def too_small(self, path: Path) -> None:
        self._line(f"File {self.display(path)} is too small to contain a BOM, skipping...", style="dim")

    def has_bom(self, path: Path) -> None:
        self._line(f"File {self.display(path)} has a BOM", style="yellow")

    def too_big(self, path: Path) -> None:
        self._line(f"File {self.display(path)} is too big to fix, skipping...", style="red")

    def empty(self, path: Path) -> None:
        self._line(f"File {self.display(path)} has a BOM but is empty, skipping...", style="yellow")

    def fixed(self, path: Path) -> None:
        self._line(f"File {self.display(path)} fixed.", style="green")

    def failed(self, path: Path, err: Exception) -> None:
        self._line(f"File {self.display(path)} could not be processed: {err}", style="red")

    # -----------------------------
    # Summary
    # -----------------------------

    def summary(self, stats: RunStats) -> None:
        self._line(f"Files with BOM: {stats.found}", style="bold")
        self._line(f"Fixed files:    {stats.fixed}", style="bold")
        self._line(f"Skipped files:  {stats.skipped}", style="bold")
        self._line(f"Total files:    {stats.total}", style="bold")
        if stats.failed:
            self._line(f"Failed files:   {stats.failed}", style="bold red")
