"""Public host-facing models for jsoncmp."""

from typing import List
from pydantic import BaseModel, ConfigDict, Field


class CompletionItem(BaseModel):
    """A completion candidate as handed to the host editor."""
    label: str
    kind: str  # always "Field"
    documentation: str
    detail: str  # comma-joined sources


class CompletionResult(BaseModel):
    """Answer to the host's "give me the current candidate set" query."""
    model_config = ConfigDict(populate_by_name=True)

    items: List[CompletionItem]
    is_complete: bool = Field(True, alias="isComplete")  # results are never streamed
