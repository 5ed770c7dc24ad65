# -*- coding: utf-8 -*-
"""
inspector.py — checks whether a file starts with the UTF-8 byte-order-mark.

One call of inspect_file() is one task: open the file, look at the first
three bytes, report, and (in autofix mode) hand the same open handle over
to the fixer. The result is returned as an immutable FileResult; counters
are summed later by the caller.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from bomcheck.scan.fixer import DEFAULT_MAX_FIX_SIZE, EMPTY, TOO_BIG, strip_bom

if TYPE_CHECKING:
    from bomcheck.report.reporter import Reporter

log = logging.getLogger("bomcheck.scan.inspector")

BOM = b"\xef\xbb\xbf"
BOM_LEN = len(BOM)

# Skip reasons are mutually exclusive per file: TOO_SMALL, TOO_BIG, EMPTY
TOO_SMALL = "too_small"


@dataclass(frozen=True)
class FileResult:
    path: Path
    has_bom: bool = False
    fixed: bool = False
    skip_reason: Optional[str] = None
    error: Optional[str] = None


def has_bom(head: bytes) -> bool:
    return head[:BOM_LEN] == BOM


def inspect_file(
    path: Path,
    reporter: Reporter,
    autofix: bool = False,
    max_fix_size: int = DEFAULT_MAX_FIX_SIZE,
) -> FileResult:
    """Inspect a single file and, if asked, strip its BOM.

    OSError raised while opening, reading or writing is not propagated:
    it ends up in FileResult.error so the other tasks keep running.
    """
    found = False
    try:
        with path.open("rb") as fh:
            size = os.fstat(fh.fileno()).st_size
            if size < BOM_LEN:
                reporter.too_small(path)
                return FileResult(path, skip_reason=TOO_SMALL)

            if not has_bom(fh.read(BOM_LEN)):
                return FileResult(path)

            found = True
            reporter.has_bom(path)
            if not autofix:
                return FileResult(path, has_bom=True)

            skip = strip_bom(fh, path, size, max_fix_size, offset=BOM_LEN)
    except OSError as e:
        log.debug("I/O error on %s", path, exc_info=True)
        reporter.failed(path, e)
        return FileResult(path, has_bom=found, error=str(e))

    if skip == TOO_BIG:
        reporter.too_big(path)
    elif skip == EMPTY:
        reporter.empty(path)
    else:
        reporter.fixed(path)
        return FileResult(path, has_bom=True, fixed=True)
    return FileResult(path, has_bom=True, skip_reason=skip)
