"""
Console Session — the operator-facing surface of the kernel.

Wires the knowledge store, matcher, composer, conversation store and reply
scheduler together, and adds the operator's draft buffer plus the console
actions:
- Send reply / Send & escalate
- Insert a suggestion (canned reply or knowledge article) into the draft
- Auto-draft a reply to the latest customer message
"""

from typing import List, Optional

from support_console.composer.composer import ResponseComposer
from support_console.conversation.store import ConversationStore
from support_console.knowledge.store import KnowledgeStore
from support_console.matching.matcher import KnowledgeMatcher
from support_console.models.console import ConsoleConfig, SeedData, default_seed_data
from support_console.models.conversation import Message
from support_console.models.knowledge import KnowledgeArticle
from support_console.scheduler.reply_scheduler import ReplyScheduler, SchedulerState
from support_console.scheduler.timers import ManualReplyTimer, ReplyTimer
from support_console.utils.logger import get_logger

logger = get_logger(__name__)


class ConsoleSession:
    """
    One live support conversation and its suggestion assistant.

    Without an explicit timer the session uses a ManualReplyTimer: composed
    replies only land when the caller advances that clock. Pass an
    AsyncioReplyTimer to have them land on the running event loop.
    """

    def __init__(
        self,
        seed: Optional[SeedData] = None,
        config: Optional[ConsoleConfig] = None,
        timer: Optional[ReplyTimer] = None,
    ):
        self.seed = seed or default_seed_data()
        self.config = config or ConsoleConfig()
        self.timer = timer or ManualReplyTimer()

        self.knowledge_store = KnowledgeStore(self.seed.knowledge_base)
        self.matcher = KnowledgeMatcher(self.knowledge_store)
        self.composer = ResponseComposer(self.matcher, self.config)
        self.conversation = ConversationStore(
            self.matcher,
            seed_messages=self.seed.transcript,
            max_related_articles=self.config.max_related_articles,
        )
        self.scheduler = ReplyScheduler(
            conversation_store=self.conversation,
            composer=self.composer,
            timer=self.timer,
            config=self.config,
        )
        self._draft = ""

    # --- Read side ---

    @property
    def messages(self) -> List[Message]:
        return list(self.conversation.messages)

    @property
    def composing(self) -> bool:
        return self.scheduler.state == SchedulerState.COMPOSING

    @property
    def canned_replies(self) -> List[str]:
        return list(self.seed.canned_replies)

    @property
    def draft(self) -> str:
        return self._draft

    def recommendations(self) -> List[KnowledgeArticle]:
        """Suggestion panel contents for the latest customer message."""
        latest = self.conversation.latest_customer_message()
        return self.conversation.recommendations_for(latest)

    def snapshot(self) -> dict:
        """Everything the presentation layer renders, JSON-ready."""
        state = self.conversation.snapshot()
        return {
            "messages": state["messages"],
            "composing": state["composing"],
            "draft": self._draft,
            "recommendations": [
                a.model_dump(mode="json") for a in self.recommendations()
            ],
            "canned_replies": self.canned_replies,
        }

    # --- Draft editing ---

    def update_draft(self, text: str) -> None:
        self._draft = text

    def insert_suggestion(self, suggestion: str) -> str:
        """Append a suggestion to the draft, separated by a blank line."""
        self._draft = f"{self._draft}\n\n{suggestion}" if self._draft else suggestion
        return self._draft

    def insert_article(self, article_id: str) -> str:
        """Insert a knowledge article's resolution into the draft."""
        article = self.knowledge_store.get(article_id)
        if article is None:
            raise KeyError(f"Unknown knowledge article: {article_id}")
        logger.info("article_inserted", article_id=article_id)
        return self.insert_suggestion(article.response)

    def auto_draft(self) -> Optional[str]:
        """Insert a composed reply to the latest customer message, if any."""
        latest = self.conversation.latest_customer_message()
        if latest is None:
            return None
        logger.info("auto_draft", customer_message_id=latest.id)
        return self.insert_suggestion(self.composer.draft_reply(latest.body))

    # --- Sending ---

    def send(self, value: Optional[str] = None) -> Optional[Message]:
        """Send `value`, or the current draft, and clear the draft."""
        content = self._draft if value is None else value
        outbound = self.scheduler.send(content)
        if outbound is not None:
            self._draft = ""
        return outbound

    def send_and_escalate(self) -> Optional[Message]:
        """Send the fixed Tier 2 escalation reply."""
        logger.info("send_and_escalate")
        return self.send(self.seed.escalation_reply)
