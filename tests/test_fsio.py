"""
Local filesystem capability.
"""
import os
import stat
from unittest.mock import patch

import pytest

from embedgen.errors import InputReadError, OutputWriteError
from embedgen.fsio import FileSystem


def test_read_bytes(tmp_path):
    p = tmp_path / "x.bin"
    p.write_bytes(b"\x00\x01")
    assert FileSystem().read_bytes(str(p)) == b"\x00\x01"


def test_read_missing_file_names_path(tmp_path):
    missing = str(tmp_path / "missing.bin")
    with pytest.raises(InputReadError) as exc_info:
        FileSystem().read_bytes(missing)
    assert exc_info.value.path == missing
    assert isinstance(exc_info.value.__cause__, OSError)


def test_write_creates_parent_directories(tmp_path):
    out = tmp_path / "a" / "b" / "out.h"
    FileSystem().write_text(str(out), "#pragma once\n")
    assert out.read_text(encoding="utf-8") == "#pragma once\n"


def test_write_replaces_existing_file_and_leaves_no_temp(tmp_path):
    out = tmp_path / "out.h"
    out.write_text("old")
    FileSystem().write_text(str(out), "new")
    assert out.read_text() == "new"
    assert sorted(os.listdir(tmp_path)) == ["out.h"]


def test_failed_replace_keeps_old_file(tmp_path):
    out = tmp_path / "out.h"
    out.write_text("old")
    with patch("embedgen.fsio.os.replace", side_effect=OSError(28, "No space left on device")):
        with pytest.raises(OutputWriteError) as exc_info:
            FileSystem().write_text(str(out), "new")
    assert exc_info.value.path == str(out)
    assert out.read_text() == "old"
    assert sorted(os.listdir(tmp_path)) == ["out.h"]


def test_uncreatable_directory(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("")
    with pytest.raises(OutputWriteError):
        FileSystem().write_text(str(blocker / "sub" / "out.h"), "x")


def test_new_header_mode_follows_umask(tmp_path):
    out = tmp_path / "out.h"
    old_umask = os.umask(0o022)
    try:
        FileSystem().write_text(str(out), "x")
    finally:
        os.umask(old_umask)
    assert stat.S_IMODE(os.stat(out).st_mode) == 0o644


def test_existing_header_mode_is_kept(tmp_path):
    out = tmp_path / "out.h"
    out.write_text("old")
    os.chmod(out, 0o640)
    FileSystem().write_text(str(out), "new")
    assert stat.S_IMODE(os.stat(out).st_mode) == 0o640


def test_unencodable_text_becomes_write_error(tmp_path):
    out = tmp_path / "out.h"
    out.write_text("old")
    with pytest.raises(OutputWriteError) as exc_info:
        FileSystem().write_text(str(out), "static const uint8_t embed_\udcff_bin[1];\n")
    assert isinstance(exc_info.value.__cause__, UnicodeError)
    assert out.read_text() == "old"
    assert sorted(os.listdir(tmp_path)) == ["out.h"]
