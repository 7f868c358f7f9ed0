"""Knowledge Article — a static resolution the assistant can propose."""

from datetime import date
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class KnowledgeArticle(BaseModel):
    """A canned resolution paired with its trigger keywords."""

    model_config = ConfigDict(frozen=True)

    id: str                                 # e.g., "kb-101"
    title: str                              # Display name, reused as message topic
    summary: str
    response: str                           # Full reply text
    keywords: List[str] = Field(default_factory=list)
    last_updated: date                      # Display only
    confidence: float = Field(ge=0, le=1)   # Static authority score

    @field_validator("keywords")
    @classmethod
    def _normalize_keywords(cls, value: List[str]) -> List[str]:
        # Matching runs on case-folded text, so keywords are stored case-folded.
        seen = []
        for keyword in value:
            folded = keyword.strip().lower()
            if folded and folded not in seen:
                seen.append(folded)
        return seen
