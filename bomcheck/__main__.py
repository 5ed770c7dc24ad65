# -*- coding: utf-8 -*-
"""
bomcheck — finds files starting with a UTF-8 BOM and optionally strips it.

Run:
  python -m bomcheck <root_folder>
  python -m bomcheck <root_folder> --autofix
  python -m bomcheck <root_folder> -af --workers 8 --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from bomcheck.pipeline import RunConfig, run
from bomcheck.report.reporter import Reporter

AUTOFIX_FLAGS = ("--autofix", "-af")

USAGE = "bomcheck <root_folder> [--autofix|-af]"
EPILOG = """\
Examples:
  bomcheck ./repo            report files with a BOM (dry run)
  bomcheck ./repo --autofix  strip the BOM in place

Hidden and system files are not checked.
Files larger than ~2GB are reported but not fixed.
"""

# -----------------------------
# Logging
# -----------------------------

def setup_logger(level: str = "WARNING") -> logging.Logger:
    logger = logging.getLogger("bomcheck")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    if not logger.handlers:
        ch = logging.StreamHandler()
        ch.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(ch)
    return logger

# -----------------------------
# Arguments
# -----------------------------

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="bomcheck",
        usage=USAGE,
        description="Check a folder tree for files starting with a UTF-8 BOM (EF BB BF).",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    p.add_argument("root", nargs="?", help="Folder to scan recursively")
    p.add_argument(*AUTOFIX_FLAGS, dest="autofix", action="store_true",
                   help="Strip the BOM in place (default: report only)")
    p.add_argument("--workers", type=int, default=0,
                   help="Parallel file tasks (default: env BOMCHECK_WORKERS or 2 x CPU count)")
    p.add_argument("--log-level", default="WARNING", help="Logging level for diagnostics (DEBUG/INFO/...)")
    return p


def normalize_argv(argv: List[str]) -> List[str]:
    """Autofix flags are case-insensitive: --AutoFix, -AF."""
    return [a.lower() if a.lower() in AUTOFIX_FLAGS else a for a in argv]

# -----------------------------
# main
# -----------------------------

def main(argv: Optional[List[str]] = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()
    if not argv:
        parser.print_help()
        return 0

    args, extra = parser.parse_known_args(normalize_argv(argv))
    log = setup_logger(args.log_level)
    if extra:
        log.warning("Ignoring unknown arguments: %s", " ".join(extra))

    reporter = Reporter()
    if not args.root:
        parser.print_help()
        return 0

    root = Path(args.root).expanduser().resolve()
    if not root.is_dir():
        reporter.root_not_found(root)
        return 0

    config = RunConfig(root=root, autofix=args.autofix, workers=args.workers)
    log.debug("config=%s", config)

    reporter.start(root, config.autofix)
    run(config, reporter)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
