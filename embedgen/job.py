"""
The `embedfiles` job: argument schema, help, validation and execution.

Job arguments use the build-system spelling (outHeader, asText, ...):

    {
        "dir": "assets",
        "files": ["logo.png", "font.ttf"],
        "outHeader": "gen/assets.h",
        "list": True,
    }
"""

import logging
import os
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from embedgen.assembler import embed_files
from embedgen.config import settings
from embedgen.errors import ConfigurationError
from embedgen.fsio import FileSystem
from embedgen.gate import StalenessOracle
from embedgen.request import EmbedRequest, format_validation_hints

logger = logging.getLogger("embedgen.job")

JOB_NAME = "embedfiles"
JOB_DESCRIPTION = "generate C header with embedded binary file data"

# (name, type, description) - trailing '?' marks optional arguments
JOB_ARGS = [
    ("dir?", "string", "base directory of files to embed (default: EMBEDGEN_DEFAULT_DIR or '.')"),
    ("files", "string[]", "list of files to embed"),
    ("outHeader", "string", "path of generated header file"),
    ("prefix?", "string", "symbol prefix (default: 'embed_')"),
    ("list?", "boolean", "also emit a sorted table of contents (default: false)"),
    ("asText?", "boolean", "emit null-terminated char arrays (default: false)"),
    ("asConst?", "boolean", "emit const arrays (default: true)"),
]


class EmbedFilesArgs(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True, strict=True)

    dir: Optional[str] = None
    files: List[str] = Field(min_length=1)
    out_header: str = Field(alias="outHeader", min_length=1)
    prefix: Optional[str] = None
    emit_list: bool = Field(default=False, alias="list")
    as_text: bool = Field(default=False, alias="asText")
    as_const: bool = Field(default=True, alias="asConst")


def help_text() -> str:
    """Describe the job and its arguments."""
    width = max(len(name) for name, _, _ in JOB_ARGS)
    lines = [f"{JOB_NAME}: {JOB_DESCRIPTION}"]
    for name, arg_type, desc in JOB_ARGS:
        lines.append(f"  {name.ljust(width)}  {arg_type.ljust(8)}  {desc}")
    return "\n".join(lines)


def parse_args(args: Mapping[str, Any]) -> EmbedFilesArgs:
    try:
        return EmbedFilesArgs.model_validate(dict(args))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid arguments for job '{JOB_NAME}'", format_validation_hints(e)) from e


def validate(args: Mapping[str, Any]) -> Tuple[bool, List[str]]:
    """Check job arguments without raising. Returns (valid, hints)."""
    try:
        build(args)
    except ConfigurationError as e:
        return False, e.hints or [str(e)]
    return True, []


def build(args: Mapping[str, Any]) -> EmbedRequest:
    """Resolve job arguments into an EmbedRequest. Never touches the filesystem."""
    parsed = args if isinstance(args, EmbedFilesArgs) else parse_args(args)
    base_dir = parsed.dir if parsed.dir is not None else settings.DEFAULT_DIR
    fields: Dict[str, Any] = {
        "inputs": [os.path.join(base_dir, f) for f in parsed.files],
        "output": os.path.abspath(parsed.out_header),
        "as_text": parsed.as_text,
        "emit_list": parsed.emit_list,
        "as_const": parsed.as_const,
    }
    if parsed.prefix is not None:
        fields["prefix"] = parsed.prefix
    return EmbedRequest.create(**fields)


def run(
    args: Mapping[str, Any],
    oracle: Optional[StalenessOracle] = None,
    fs: Optional[FileSystem] = None,
) -> bool:
    """Build the request and regenerate the header if stale. Returns True if written."""
    request = build(args)
    written = embed_files(request, oracle=oracle, fs=fs)
    if not written:
        logger.info(f"{request.output} is up to date")
    return written
