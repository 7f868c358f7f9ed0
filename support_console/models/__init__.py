"""Support Console data models."""

from support_console.models.console import ConsoleConfig, SeedData, default_seed_data
from support_console.models.conversation import (
    ConversationState,
    Message,
    MessageAuthor,
    Sentiment,
    format_timestamp,
)
from support_console.models.knowledge import KnowledgeArticle

__all__ = [
    "ConsoleConfig",
    "ConversationState",
    "KnowledgeArticle",
    "Message",
    "MessageAuthor",
    "SeedData",
    "Sentiment",
    "default_seed_data",
    "format_timestamp",
]
