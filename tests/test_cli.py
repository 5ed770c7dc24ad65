# -*- coding: utf-8 -*-
"""
Command line: usage, missing root, flag forms.
"""

import os
import sys
from pathlib import Path

import pytest

from bomcheck.__main__ import main, normalize_argv

BOM = b"\xef\xbb\xbf"


def test_no_args_prints_usage(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "bomcheck <root_folder> [--autofix|-af]" in out
    assert "2GB" in out


def test_missing_root(tmp_path: Path, capsys):
    missing = tmp_path / "nope"

    assert main([str(missing)]) == 0

    out = capsys.readouterr().out
    assert f"Root folder {missing.resolve()} not found." in out
    assert "Total files" not in out


def test_dry_run_by_default(make_file, tmp_path: Path, capsys):
    p = make_file("a.txt", BOM + b"Hello")

    assert main([str(tmp_path)]) == 0

    out = capsys.readouterr().out
    assert f"Will check {tmp_path.resolve()}..." in out
    assert f"File {p} has a BOM" in out
    assert "Fixed files:    0" in out
    assert p.read_bytes() == BOM + b"Hello"


@pytest.mark.parametrize("flag", ["--autofix", "-af", "--AutoFix", "-AF"])
@pytest.mark.parametrize("flag_first", [False, True])
def test_autofix_flag_forms(make_file, tmp_path: Path, capsys, flag, flag_first):
    p = make_file("a.txt", BOM + b"Hello")
    argv = [flag, str(tmp_path)] if flag_first else [str(tmp_path), flag]

    assert main(argv) == 0

    out = capsys.readouterr().out
    assert f"File {p} fixed." in out
    assert "Files with BOM: 1" in out
    assert "Fixed files:    1" in out
    assert p.read_bytes() == b"Hello"


def test_unknown_args_ignored(make_file, tmp_path: Path, capsys):
    p = make_file("a.txt", BOM + b"x")

    assert main([str(tmp_path), "--frobnicate", "-af"]) == 0
    assert p.read_bytes() == b"x"


def test_normalize_argv():
    assert normalize_argv(["-Af", "Dir", "--AUTOFIX"]) == ["-af", "Dir", "--autofix"]


@pytest.mark.skipif(not sys.platform.startswith("linux"), reason="needs byte file names")
def test_undecodable_file_name_does_not_abort(make_file, tmp_path: Path, capsys):
    with open(os.path.join(os.fsencode(tmp_path), b"bad\xff.txt"), "wb") as fh:
        fh.write(b"x")
    with open(os.path.join(os.fsencode(tmp_path), b"bom\xfe.txt"), "wb") as fh:
        fh.write(BOM + b"y")
    ok = make_file("ok.txt", BOM + b"Hello")

    assert main([str(tmp_path), "-af"]) == 0

    out = capsys.readouterr().out
    assert "bad\ufffd.txt is too small to contain a BOM" in out
    assert "bom\ufffd.txt fixed." in out
    assert "Fixed files:    2" in out
    assert "Skipped files:  1" in out
    assert "Total files:    3" in out
    assert ok.read_bytes() == b"Hello"
