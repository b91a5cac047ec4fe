"""Splitter configuration models. Read-only; no business logic."""

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_SEPARATORS = ["\n\n", "\n", "。", ". ", " ", ""]

StrategyName = Literal["recursive_character", "regex_delimiter"]
LengthUnit = Literal["characters", "tokens"]


class SplitterConfig(BaseModel):
    """Splitting strategy and parameters. Immutable once validated."""

    model_config = ConfigDict(frozen=True)

    strategy: StrategyName = Field(default="recursive_character", description="recursive_character|regex_delimiter")
    separators: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SEPARATORS),
        description="Literal separators, most specific first",
    )
    chunk_size: int = Field(default=500, ge=1, description="Soft upper bound for a chunk, in length units")
    chunk_overlap: int = Field(default=50, ge=0, description="Trailing length carried into the next chunk")
    length_unit: LengthUnit = Field(default="characters", description="characters|tokens")
    encoding_name: str = Field(default="cl100k_base", description="tiktoken encoding for length_unit=tokens")
    delimiter: str = Field(default=r"\n\n+", description="Regular expression for regex_delimiter")

    @model_validator(mode="after")
    def _check_consistency(self) -> "SplitterConfig":
        if self.chunk_overlap >= self.chunk_size:
            raise ValueError(
                f"chunk_overlap ({self.chunk_overlap}) must be smaller than chunk_size ({self.chunk_size})"
            )
        if self.strategy == "recursive_character" and not self.separators:
            raise ValueError("recursive_character requires at least one separator")
        try:
            re.compile(self.delimiter)
        except re.error as e:
            raise ValueError(f"Invalid delimiter pattern {self.delimiter!r}: {e}") from e
        return self
