# -*- coding: utf-8 -*-
from pathlib import Path
import io
import logging

import pytest
from rich.console import Console

from bomcheck.report.reporter import Reporter

BOM = b"\xef\xbb\xbf"


@pytest.fixture
def console_out():
    return io.StringIO()


@pytest.fixture
def reporter(console_out) -> Reporter:
    console = Console(file=console_out, color_system=None)
    return Reporter(console)


@pytest.fixture
def make_file(tmp_path: Path):
    def _make(rel: str, data: bytes) -> Path:
        p = tmp_path / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(data)
        return p
    return _make


@pytest.fixture(autouse=True)
def _reset_logger():
    # setup_logger() binds its handler to the stderr of the test that created it
    yield
    logger = logging.getLogger("bomcheck")
    for h in list(logger.handlers):
        logger.removeHandler(h)
