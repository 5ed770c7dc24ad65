# -*- coding: utf-8 -*-
"""
enumerator.py — recursive listing of candidate files under the root folder.

Rules:
- hidden/system entries are skipped; for a directory that means the whole subtree
- only regular files are returned (no dirs, FIFOs, sockets, broken links)
- directory symlinks are not followed, so there are no loops
- each inode is listed once (file symlinks and hard links collapse to one path)
- unreadable entries are dropped, the walk goes on
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import List, Set, Tuple

log = logging.getLogger("bomcheck.scan.enumerator")

# st_file_attributes only exists on Windows
_SKIP_ATTRS = getattr(stat, "FILE_ATTRIBUTE_HIDDEN", 0) | getattr(stat, "FILE_ATTRIBUTE_SYSTEM", 0)


def is_hidden(name: str, st: os.stat_result | None = None) -> bool:
    if name.startswith("."):
        return True
    if st is not None and _SKIP_ATTRS:
        return bool(getattr(st, "st_file_attributes", 0) & _SKIP_ATTRS)
    return False


def _lstat(path: str) -> os.stat_result | None:
    try:
        return os.lstat(path)
    except OSError as e:
        log.debug("skip %s: %s", path, e)
        return None


def _on_walk_error(err: OSError) -> None:
    log.debug("walk error: %s", err)


def list_files(root: Path) -> List[Path]:
    """Return a sorted list of absolute paths of all regular files under root."""
    root = Path(root).resolve()
    found: List[Tuple[Path, Tuple[int, int]]] = []

    for dirpath, dirnames, filenames in os.walk(root, topdown=True, onerror=_on_walk_error, followlinks=False):
        # prune hidden/system directories in place
        kept = []
        for d in dirnames:
            if is_hidden(d, _lstat(os.path.join(dirpath, d))):
                log.debug("skip hidden dir %s", os.path.join(dirpath, d))
                continue
            kept.append(d)
        dirnames[:] = kept

        for name in filenames:
            full = os.path.join(dirpath, name)
            lst = _lstat(full)
            if lst is None or is_hidden(name, lst):
                continue
            try:
                st = os.stat(full)  # follows a file symlink
            except OSError as e:
                log.debug("skip %s: %s", full, e)
                continue
            if not stat.S_ISREG(st.st_mode):
                continue
            found.append((Path(full), (st.st_dev, st.st_ino)))

    # a symlink and its target, or two hard links, are one file: one task
    found.sort(key=lambda item: item[0])
    seen: Set[Tuple[int, int]] = set()
    files: List[Path] = []
    for path, key in found:
        # st_ino is 0 on filesystems without stable ids
        if key[1]:
            if key in seen:
                log.debug("skip %s: same file already listed", path)
                continue
            seen.add(key)
        files.append(path)
    log.debug("enumerated %d file(s) under %s", len(files), root)
    return files
