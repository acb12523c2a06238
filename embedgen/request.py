"""
Request and per-item records for a single header generation run.
"""

import os
from dataclasses import dataclass
from typing import List

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from embedgen.codegen.literals import mangle
from embedgen.config import settings
from embedgen.errors import ConfigurationError


def format_validation_hints(exc: ValidationError) -> List[str]:
    """Flatten a pydantic ValidationError into one hint per offending field."""
    hints = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", ())) or "<request>"
        hints.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return hints


class EmbedRequest(BaseModel):
    """
    One header to generate.

    inputs are resolved file paths in the order their arrays are emitted.
    Construct through EmbedRequest.create() to get ConfigurationError instead
    of pydantic's ValidationError.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    inputs: List[str] = Field(min_length=1)
    output: str = Field(min_length=1)
    prefix: str = Field(default_factory=lambda: settings.DEFAULT_PREFIX)
    as_text: bool = False
    emit_list: bool = False
    as_const: bool = True

    @field_validator("inputs")
    @classmethod
    def _no_blank_inputs(cls, value: List[str]) -> List[str]:
        for path in value:
            if not path or not os.path.basename(path):
                raise ValueError(f"input path '{path}' has no file name")
        return value

    @model_validator(mode="after")
    def _unique_symbols(self) -> "EmbedRequest":
        # Two inputs mapping to one symbol would redeclare it in the header.
        seen = {}
        for path in self.inputs:
            symbol = self.prefix + mangle(os.path.basename(path))
            if symbol in seen:
                raise ValueError(
                    f"'{path}' and '{seen[symbol]}' both map to symbol '{symbol}'"
                )
            seen[symbol] = path
        return self

    @classmethod
    def create(cls, **fields) -> "EmbedRequest":
        try:
            return cls(**fields)
        except ValidationError as e:
            raise ConfigurationError("Invalid embed request", format_validation_hints(e)) from e


@dataclass(frozen=True)
class TocEntry:
    raw_name: str
    symbol_name: str
    byte_length: int


@dataclass(frozen=True)
class EmbeddedItem:
    """A loaded input file and the names it is emitted under."""

    raw_name: str
    symbol_name: str
    content: bytes
    as_text: bool = False

    @classmethod
    def from_file(cls, path: str, content: bytes, prefix: str, as_text: bool = False) -> "EmbeddedItem":
        raw_name = mangle(os.path.basename(path))
        return cls(
            raw_name=raw_name,
            symbol_name=prefix + raw_name,
            content=bytes(content),
            as_text=as_text,
        )

    @property
    def byte_length(self) -> int:
        # Text mode reserves one extra slot for the NUL terminator
        return len(self.content) + 1 if self.as_text else len(self.content)

    def toc_entry(self) -> TocEntry:
        return TocEntry(self.raw_name, self.symbol_name, self.byte_length)
