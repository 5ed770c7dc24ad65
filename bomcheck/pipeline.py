# -*- coding: utf-8 -*-
"""
pipeline.py — one scan run: enumerate, fan out, fold results.

Steps:
  1) list_files(root) builds the complete file list up front
  2) every file becomes one task in a ThreadPoolExecutor (bounded by `workers`)
  3) each task returns a FileResult; the results are folded into RunStats
     in this thread after the pool is drained
  4) the reporter prints the summary

Worker count: --workers, else env BOMCHECK_WORKERS, else 2 x cpu_count (capped at 32).
"""

from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from bomcheck.report.reporter import Reporter, RunStats
from bomcheck.scan.enumerator import list_files
from bomcheck.scan.fixer import DEFAULT_MAX_FIX_SIZE
from bomcheck.scan.inspector import inspect_file

log = logging.getLogger("bomcheck.pipeline")

MAX_WORKERS = 32


@dataclass(frozen=True)
class RunConfig:
    root: Path
    autofix: bool = False
    workers: int = 0
    max_fix_size: int = DEFAULT_MAX_FIX_SIZE


def resolve_workers(requested: Optional[int] = None, env: Optional[Mapping[str, str]] = None) -> int:
    if requested and requested > 0:
        return requested
    env = os.environ if env is None else env
    try:
        workers = int(env.get("BOMCHECK_WORKERS", "0"))
    except ValueError:
        workers = 0
    if workers <= 0:
        workers = min(MAX_WORKERS, 2 * (os.cpu_count() or 2))
    return workers


def run(config: RunConfig, reporter: Optional[Reporter] = None) -> RunStats:
    reporter = reporter or Reporter()
    files = list_files(config.root)
    stats = RunStats(total=len(files))
    if not files:
        reporter.summary(stats)
        return stats

    workers = resolve_workers(config.workers)
    log.debug("root=%s autofix=%s files=%d workers=%d", config.root, config.autofix, len(files), workers)

    with ThreadPoolExecutor(max_workers=workers) as ex:
        futures = [
            ex.submit(inspect_file, path, reporter, config.autofix, config.max_fix_size)
            for path in files
        ]
        done = 0
        for fut in as_completed(futures):
            stats.add(fut.result())
            done += 1
            if done % 1000 == 0 or done == len(futures):
                log.debug("progress: %d/%d", done, len(futures))

    reporter.summary(stats)
    return stats
