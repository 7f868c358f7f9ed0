"""Conversation models — transcript messages and the state that owns them."""

from datetime import datetime
from enum import Enum
from typing import List, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class MessageAuthor(str, Enum):
    CUSTOMER = "customer"
    AGENT = "agent"
    SYSTEM = "system"


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


def new_message_id() -> str:
    return f"msg-{uuid4().hex[:8]}"


def format_timestamp(moment: datetime) -> str:
    """Format a wall-clock time the way the transcript shows it, e.g. "9:05 AM"."""
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {suffix}"


class Message(BaseModel):
    """A single transcript entry. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_message_id)
    author: MessageAuthor
    body: str
    timestamp: str                          # Display string, formatted at creation
    sentiment: Optional[Sentiment] = None
    topic: Optional[str] = None


class ConversationState(BaseModel):
    """Ordered message log plus the "agent is composing" flag."""

    messages: List[Message] = []
    composing: bool = False
