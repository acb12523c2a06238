"""
embedgen - embed binary files into a generated C header.
"""

__version__ = "0.1.0"

from embedgen.assembler import AssemblerState, HeaderAssembler, HeaderDocument, embed_files
from embedgen.errors import ConfigurationError, EmbedError, InputReadError, OutputWriteError
from embedgen.gate import AlwaysDirty, MtimeOracle, RegenerationGate, StalenessOracle
from embedgen.request import EmbeddedItem, EmbedRequest, TocEntry

__all__ = [
    "AlwaysDirty",
    "AssemblerState",
    "ConfigurationError",
    "EmbedError",
    "EmbeddedItem",
    "EmbedRequest",
    "HeaderAssembler",
    "HeaderDocument",
    "InputReadError",
    "MtimeOracle",
    "OutputWriteError",
    "RegenerationGate",
    "StalenessOracle",
    "TocEntry",
    "embed_files",
]
