"""Configuration models for header parsing."""

import codecs

from pydantic import BaseModel, Field, field_validator


class ParsingConfig(BaseModel):
    """Options applied while parsing a header block."""

    decode_encoded_words: bool = True
    fallback_charset: str = "utf-8"

    @field_validator("fallback_charset")
    def validate_charset(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown charset: {v}")
        return v


class AppConfig(BaseModel):
    """Main application configuration."""

    schema_version: str = "1.0"
    parsing: ParsingConfig = Field(default_factory=ParsingConfig)

    @field_validator("schema_version")
    def validate_schema_version(cls, v: str) -> str:
        if not v:
            raise ValueError("schema_version is required")
        return v
