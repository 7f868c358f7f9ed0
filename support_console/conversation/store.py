"""
Conversation Store — the append-only transcript of the live session.

Updated by: Scheduler (outbound sends + composed replies)
Queried by: Scheduler + Console Session + presentation layer
"""

from typing import Iterable, List, Optional, Tuple

from support_console.matching.matcher import KnowledgeMatcher
from support_console.models.conversation import (
    ConversationState,
    Message,
    MessageAuthor,
)
from support_console.models.knowledge import KnowledgeArticle


class ConversationStore:
    """
    In-memory conversation log. Messages are only ever appended;
    nothing is reordered, edited or removed.
    """

    def __init__(
        self,
        matcher: KnowledgeMatcher,
        seed_messages: Iterable[Message] = (),
        max_related_articles: int = 2,
    ):
        self.matcher = matcher
        self.max_related_articles = max_related_articles
        self._state = ConversationState(messages=list(seed_messages))

    @property
    def messages(self) -> Tuple[Message, ...]:
        """Snapshot of the transcript in conversation order."""
        return tuple(self._state.messages)

    @property
    def composing(self) -> bool:
        return self._state.composing

    def set_composing(self, composing: bool) -> None:
        self._state.composing = composing

    def append(self, message: Message) -> None:
        """Add a message to the end of the transcript."""
        self._state.messages.append(message)

    def latest_customer_message(self) -> Optional[Message]:
        """The most recent message authored by the customer, if any."""
        for message in reversed(self._state.messages):
            if message.author == MessageAuthor.CUSTOMER:
                return message
        return None

    def recommendations_for(self, message: Optional[Message]) -> List[KnowledgeArticle]:
        """
        Articles to show in the suggestion panel for `message`.

        Best match first, then up to `max_related_articles` others in
        knowledge store order. Without a message, or without a match,
        the whole knowledge base is listed.
        """
        articles = list(self.matcher.knowledge_store.get_all())
        if message is None:
            return articles

        best = self.matcher.match(message.body)
        if best is None:
            return articles

        others = [a for a in articles if a.id != best.id]
        return [best] + others[: self.max_related_articles]

    def snapshot(self) -> dict:
        """Serializable view of the transcript and composing flag."""
        return self._state.model_dump(mode="json")

    def __len__(self) -> int:
        return len(self._state.messages)
