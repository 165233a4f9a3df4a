"""Pydantic models for link resolution."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator


class LinkReference(BaseModel):
    """A ``[text](uri)`` pair found in markdown source."""

    model_config = ConfigDict(frozen=True)

    text: str
    uri: str

    def to_markdown(self) -> str:
        return f"[{self.text}]({self.uri})"


class ResolutionContext(BaseModel):
    """Read-only inputs shared by every link of one document."""

    model_config = ConfigDict(frozen=True)

    input_dir: Path
    output_dir: Path
    extension: str = "wiki"

    @field_validator("extension")
    @classmethod
    def _strip_dot(cls, v: str) -> str:
        return v.lstrip(".")

    @classmethod
    def for_document(
        cls, input_file: str | Path, output_dir: str | Path, extension: str = "wiki"
    ) -> ResolutionContext:
        return cls(
            input_dir=Path(input_file).parent,
            output_dir=Path(output_dir),
            extension=extension,
        )
