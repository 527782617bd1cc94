"""Data models for deck documents using Pydantic."""

from pydantic import BaseModel, Field
from typing import List, Optional


class SlideSource(BaseModel):
    """Markdown source of one slide."""
    index: int
    body: str
    title: Optional[str] = None


class DeckDocument(BaseModel):
    """A deck as read from disk."""
    title: str = "Untitled deck"
    source_path: Optional[str] = None
    slides: List[SlideSource] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.slides)
