"""Shared data models for extraction modules."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TaggedToken(BaseModel):
    """A token with its part-of-speech tag and tagger confidence (NaN if unknown)."""

    model_config = ConfigDict(frozen=True)

    token: str
    tag: str
    probability: float = float("nan")


class ExtractionResult(BaseModel):
    """Phrases produced by one extraction call.

    ``diagnostic`` is set when a failure was absorbed; ``phrases`` then holds
    whatever was collected before the failure.
    """

    model_config = ConfigDict(extra="forbid")

    phrases: List[str] = Field(default_factory=list)
    diagnostic: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.diagnostic is None
