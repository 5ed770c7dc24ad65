# -*- coding: utf-8 -*-
"""
fixer.py — in-place removal of a leading BOM.

The remaining content is read into memory in one piece and written back
with a single write_bytes() call: no backup, no temp file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Optional

log = logging.getLogger("bomcheck.scan.fixer")

# Largest file rewritten as one buffer (~2GB)
DEFAULT_MAX_FIX_SIZE = 2**31 - 1

TOO_BIG = "too_big"
EMPTY = "empty"


def strip_bom(fh: BinaryIO, path: Path, size: int, max_size: int = DEFAULT_MAX_FIX_SIZE,
              offset: int = 3) -> Optional[str]:
    """Rewrite `path` without its first `offset` bytes.

    `fh` is the already open read handle, `size` the size seen when it was
    opened. Returns None on success, otherwise the skip reason; the file is
    left untouched when skipped. The handle is closed before writing.
    """
    if size > max_size:
        return TOO_BIG
    if size == offset:
        return EMPTY

    fh.seek(offset)
    data = fh.read()
    fh.close()

    path.write_bytes(data)
    log.debug("%s: %d -> %d bytes", path, size, len(data))
    return None
