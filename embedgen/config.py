"""
Process-wide defaults for embedgen.

Values can be overridden from the environment with the EMBEDGEN_ prefix,
e.g. EMBEDGEN_DEFAULT_PREFIX=asset_ or EMBEDGEN_LOG_LEVEL=DEBUG.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="EMBEDGEN_", extra="ignore")

    # Symbol prefix used when a job does not pass one
    DEFAULT_PREFIX: str = "embed_"

    # Base directory for relative input paths when a job omits `dir`
    DEFAULT_DIR: str = "."

    # Line break after every Nth byte in generated initializers.
    # Changing this changes generated headers byte-for-byte.
    BYTES_PER_LINE: int = Field(default=16, ge=1)

    LOG_LEVEL: str = "INFO"


settings = Settings()
