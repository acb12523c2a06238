"""
Staleness oracles and the regeneration gate.
"""
import os
import unittest
from unittest.mock import MagicMock

import pytest

from embedgen.gate import AlwaysDirty, MtimeOracle, RegenerationGate, StalenessOracle


@pytest.fixture
def files(tmp_path):
    src = tmp_path / "in.bin"
    out = tmp_path / "out.h"
    src.write_bytes(b"\x00")
    out.write_text("// old\n")
    return str(src), str(out)


def test_mtime_oracle_clean_when_output_newer(files):
    src, out = files
    os.utime(src, (100, 100))
    os.utime(out, (200, 200))
    assert MtimeOracle().is_dirty([src], [out]) is False


def test_mtime_oracle_dirty_when_input_newer(files):
    src, out = files
    os.utime(src, (300, 300))
    os.utime(out, (200, 200))
    assert MtimeOracle().is_dirty([src], [out]) is True


def test_mtime_oracle_dirty_when_output_missing(files):
    src, out = files
    os.remove(out)
    assert MtimeOracle().is_dirty([src], [out]) is True


def test_mtime_oracle_dirty_when_input_missing(files, tmp_path):
    src, out = files
    assert MtimeOracle().is_dirty([src, str(tmp_path / "gone.bin")], [out]) is True


def test_mtime_oracle_uses_oldest_output(files, tmp_path):
    src, out = files
    other = tmp_path / "other.h"
    other.write_text("")
    os.utime(src, (150, 150))
    os.utime(out, (200, 200))
    os.utime(str(other), (100, 100))
    assert MtimeOracle().is_dirty([src], [out, str(other)]) is True


class TestRegenerationGate(unittest.TestCase):

    def test_delegates_to_oracle(self):
        oracle = MagicMock(spec=StalenessOracle)
        oracle.is_dirty.return_value = False
        gate = RegenerationGate(oracle)
        self.assertFalse(gate.should_run(["a.bin"], ["out.h"]))
        oracle.is_dirty.assert_called_once_with(["a.bin"], ["out.h"])

    def test_always_dirty(self):
        self.assertTrue(RegenerationGate(AlwaysDirty()).should_run(["a"], ["b"]))

    def test_default_oracle_is_mtime(self):
        self.assertIsInstance(RegenerationGate().oracle, MtimeOracle)

    def test_oracle_is_abstract(self):
        with self.assertRaises(TypeError):
            StalenessOracle()


if __name__ == "__main__":
    unittest.main()
