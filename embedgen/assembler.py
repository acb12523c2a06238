"""
Header assembly.

A HeaderAssembler turns one EmbedRequest into one header file:

    Idle -> Reading -> Emitting -> Writing -> Done
               |                      |
               +------> Failed <------+

All inputs are loaded before any text is produced, and the document is
handed to the filesystem in a single write, so a failing input never
touches an existing header.
"""

import enum
import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from embedgen.codegen.declarations import PREAMBLE, build_declaration
from embedgen.codegen.toc import build_toc
from embedgen.errors import EmbedError
from embedgen.fsio import FileSystem
from embedgen.gate import RegenerationGate, StalenessOracle
from embedgen.request import EmbeddedItem, EmbedRequest

logger = logging.getLogger("embedgen.assembler")


class AssemblerState(enum.Enum):
    IDLE = "idle"
    READING = "reading"
    EMITTING = "emitting"
    WRITING = "writing"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class HeaderDocument:
    fragments: Tuple[str, ...]

    @property
    def text(self) -> str:
        return "\n".join(self.fragments)


class HeaderAssembler:
    """Single-use: one instance per generation run."""

    def __init__(self, fs: Optional[FileSystem] = None, bytes_per_line: Optional[int] = None):
        self.fs = fs or FileSystem()
        self.bytes_per_line = bytes_per_line
        self.state = AssemblerState.IDLE

    def read(self, request: EmbedRequest) -> List[EmbeddedItem]:
        self.state = AssemblerState.READING
        items = []
        try:
            for path in request.inputs:
                content = self.fs.read_bytes(path)
                items.append(EmbeddedItem.from_file(path, content, request.prefix, request.as_text))
        except EmbedError:
            self.state = AssemblerState.FAILED
            raise
        return items

    def emit(self, request: EmbedRequest, items: List[EmbeddedItem]) -> HeaderDocument:
        self.state = AssemblerState.EMITTING
        fragments = [PREAMBLE]
        for item in items:
            logger.debug(f"{item.symbol_name}: {item.byte_length} bytes")
            fragments.append(build_declaration(
                item,
                as_text=request.as_text,
                as_const=request.as_const,
                bytes_per_line=self.bytes_per_line,
            ))
        if request.emit_list:
            fragments.append(build_toc(items, request.prefix, request.as_text, request.as_const))
        return HeaderDocument(tuple(fragments))

    def write(self, request: EmbedRequest, document: HeaderDocument) -> None:
        self.state = AssemblerState.WRITING
        try:
            self.fs.write_text(request.output, document.text)
        except EmbedError:
            self.state = AssemblerState.FAILED
            raise

    def run(self, request: EmbedRequest) -> HeaderDocument:
        if self.state is not AssemblerState.IDLE:
            raise RuntimeError(f"HeaderAssembler already used (state: {self.state.value})")

        items = self.read(request)
        document = self.emit(request, items)
        self.write(request, document)
        self.state = AssemblerState.DONE

        total = sum(len(item.content) for item in items)
        logger.info(f"Embedded {len(items)} file(s), {total} bytes -> {request.output}")
        return document


def embed_files(
    request: EmbedRequest,
    oracle: Optional[StalenessOracle] = None,
    fs: Optional[FileSystem] = None,
    bytes_per_line: Optional[int] = None,
) -> bool:
    """
    Regenerate request.output if the oracle reports it stale.

    Returns True when a header was written, False when it was up to date.
    """
    gate = RegenerationGate(oracle)
    if not gate.should_run(request.inputs, [request.output]):
        return False

    logger.info(f"# embed {' '.join(request.inputs)} -> {request.output}")
    HeaderAssembler(fs=fs, bytes_per_line=bytes_per_line).run(request)
    return True
