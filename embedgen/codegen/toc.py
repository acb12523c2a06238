"""
Table of contents for all items embedded in one header.
"""

from typing import Iterable, List

from embedgen.codegen.declarations import element_type


def c_string(text: str) -> str:
    """Escape backslashes and double quotes for use inside a C string literal."""
    return text.replace("\\", "\\\\").replace('"', '\\"')


def sorted_entries(items: Iterable) -> List:
    """TOC entries ordered by raw name (plain str ordering, case-sensitive)."""
    return sorted((item.toc_entry() for item in items), key=lambda e: e.raw_name)


def build_toc(items, prefix: str, as_text: bool = False, as_const: bool = True) -> str:
    """
    Emit the item struct, the item-count macro and the sorted item array.

    The count macro is the prefix upper-cased followed by NUM_ITEMS
    ("embed_" -> EMBED_NUM_ITEMS).
    """
    items = list(items)
    entries = sorted_entries(items)
    qualifier = "const " if as_const else ""
    item_type = f"{prefix}item_t"
    count_macro = f"{prefix.upper()}NUM_ITEMS"

    lines = [
        "typedef struct {",
        "    const char* name;",
        f"    const {element_type(as_text)}* ptr;",
        "    size_t size;",
        f"}} {item_type};",
        f"#define {count_macro} ({len(items)})",
        f"static {qualifier}{item_type} {prefix}items[{len(items)}] = {{",
    ]
    for entry in entries:
        lines.append(f'    {{ "{c_string(entry.raw_name)}", {entry.symbol_name}, {entry.byte_length} }},')
    lines.append("};")
    return "\n".join(lines) + "\n"
