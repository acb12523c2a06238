"""
Name mangling and hex initializer rendering.
"""

from typing import Optional

from embedgen.config import settings


def mangle(base_name: str) -> str:
    """
    Turn a file base name into a symbol fragment.

    Only the first '.' becomes '_' ("icon.png" -> "icon_png",
    "a.b.c" -> "a_b.c"). No other characters are touched.
    """
    return base_name.replace(".", "_", 1)


def emit_bytes(data: bytes, as_text: bool = False, bytes_per_line: Optional[int] = None) -> str:
    """
    Render bytes as the body of a C initializer list.

    Every byte becomes "0x%02x, " and a newline follows every Nth byte
    (N = bytes_per_line, default settings.BYTES_PER_LINE), including the
    last one when the length is a multiple of N. A final newline is always
    appended. With as_text a bare 0 terminator is written after the data.
    """
    if bytes_per_line is None:
        bytes_per_line = settings.BYTES_PER_LINE
    if bytes_per_line < 1:
        raise ValueError(f"bytes_per_line must be positive, got {bytes_per_line}")

    parts = []
    for i, b in enumerate(data, start=1):
        parts.append(f"0x{b:02x}, ")
        if i % bytes_per_line == 0:
            parts.append("\n")
    if as_text:
        parts.append("0")
    parts.append("\n")
    return "".join(parts)
