"""
Static array declarations and the fixed header preamble.
"""

from typing import Optional

from embedgen.codegen.literals import emit_bytes

PREAMBLE = (
    "#pragma once\n"
    "// machine generated, do not edit\n"
    "#include <stdint.h>\n"
    "#include <stddef.h>\n"
)


def element_type(as_text: bool) -> str:
    return "char" if as_text else "uint8_t"


def build_declaration(item, as_text: bool = False, as_const: bool = True,
                      bytes_per_line: Optional[int] = None) -> str:
    """
    Declare one embedded item:

        static const uint8_t embed_logo_png[3] = {
        0x00, 0x01, 0xff, 
        };

    Text mode switches the element type to char and adds one slot for the
    terminating 0.
    """
    qualifier = "const " if as_const else ""
    length = len(item.content) + 1 if as_text else len(item.content)
    body = emit_bytes(item.content, as_text=as_text, bytes_per_line=bytes_per_line)
    return (
        f"static {qualifier}{element_type(as_text)} {item.symbol_name}[{length}] = {{\n"
        f"{body}"
        "};\n"
    )
