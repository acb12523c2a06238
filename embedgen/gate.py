"""
Regeneration gate and staleness oracles.

The gate decides whether a generation run happens at all. When it says
no, the caller must not read inputs or write outputs.
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import Optional, Sequence

logger = logging.getLogger("embedgen.gate")


class StalenessOracle(ABC):
    """Decides whether outputs need rebuilding from their inputs."""

    @abstractmethod
    def is_dirty(self, inputs: Sequence[str], outputs: Sequence[str]) -> bool:
        pass


class MtimeOracle(StalenessOracle):
    """
    Modification-time comparison.

    Dirty if any output is missing, any input is missing (so the read
    error gets reported), or the newest input is newer than the oldest
    output.
    """

    @staticmethod
    def _mtime(path: str) -> Optional[float]:
        try:
            return os.stat(path).st_mtime
        except OSError:
            return None

    def is_dirty(self, inputs: Sequence[str], outputs: Sequence[str]) -> bool:
        if not outputs:
            return True

        oldest_output = None
        for path in outputs:
            mtime = self._mtime(path)
            if mtime is None:
                return True
            if oldest_output is None or mtime < oldest_output:
                oldest_output = mtime

        for path in inputs:
            mtime = self._mtime(path)
            if mtime is None or mtime > oldest_output:
                return True
        return False


class AlwaysDirty(StalenessOracle):
    """Forces regeneration."""

    def is_dirty(self, inputs: Sequence[str], outputs: Sequence[str]) -> bool:
        return True


class RegenerationGate:
    def __init__(self, oracle: Optional[StalenessOracle] = None):
        self.oracle = oracle or MtimeOracle()

    def should_run(self, inputs: Sequence[str], outputs: Sequence[str]) -> bool:
        dirty = bool(self.oracle.is_dirty(list(inputs), list(outputs)))
        if not dirty:
            logger.debug(f"Up to date: {', '.join(outputs)}")
        return dirty
