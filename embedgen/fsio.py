"""
Filesystem capabilities used by the header assembler.

Kept behind a small class so tests and host build systems can swap in
their own reads and writes.
"""

import logging
import os
import stat
import tempfile

from embedgen.errors import InputReadError, OutputWriteError

logger = logging.getLogger("embedgen.fsio")


class FileSystem:
    """Local-disk implementation of the read / write / mkdir capabilities."""

    def read_bytes(self, path: str) -> bytes:
        try:
            with open(path, "rb") as f:
                return f.read()
        except OSError as e:
            raise InputReadError(f"Cannot read input file {path}: {e.strerror or e}", path=path) from e

    def ensure_dir(self, directory: str) -> None:
        if not directory:
            return
        try:
            os.makedirs(directory, exist_ok=True)
        except OSError as e:
            raise OutputWriteError(f"Cannot create directory {directory}: {e.strerror or e}", path=directory) from e

    @staticmethod
    def _target_mode(path: str) -> int:
        """Mode of the existing header, or 0666 minus the umask for a new one."""
        try:
            return stat.S_IMODE(os.stat(path).st_mode)
        except OSError:
            umask = os.umask(0)
            os.umask(umask)
            return 0o666 & ~umask

    def write_text(self, path: str, text: str) -> None:
        """
        Write the whole document in one go.

        The text lands in a temporary file next to `path` and is moved over
        it with os.replace(), so readers see either the old header or the
        complete new one.
        """
        directory = os.path.dirname(os.path.abspath(path))
        self.ensure_dir(directory)

        temp_name = None
        try:
            fd, temp_name = tempfile.mkstemp(dir=directory, prefix=".embedgen-", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(text)
            os.chmod(temp_name, self._target_mode(path))
            os.replace(temp_name, path)
            temp_name = None
        except (OSError, UnicodeError) as e:
            reason = getattr(e, "strerror", None) or e
            raise OutputWriteError(f"Cannot write header {path}: {reason}", path=path) from e
        finally:
            if temp_name is not None and os.path.exists(temp_name):
                try:
                    os.remove(temp_name)
                except OSError as cleanup_error:
                    logger.warning(f"Could not remove temporary file {temp_name}: {cleanup_error}")
        logger.debug(f"Wrote {len(text)} characters to {path}")
