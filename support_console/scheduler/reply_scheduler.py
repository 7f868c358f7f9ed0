"""
Reply Scheduler — the send/compose state machine of the console.

States:
  IDLE → send → COMPOSING → (timer fires, reply appended) → IDLE

Every send appends the outbound message synchronously, then schedules one
composition. Compositions are never cancelled. Overlapping sends are allowed
and each one produces its own composed reply; the composing flag stays set
until the last outstanding composition lands (the reference console cleared
it on the first completion instead).
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from support_console.composer.composer import ResponseComposer
from support_console.conversation.store import ConversationStore
from support_console.models.console import ConsoleConfig
from support_console.models.conversation import (
    Message,
    MessageAuthor,
    Sentiment,
    format_timestamp,
)
from support_console.scheduler.timers import ReplyTimer
from support_console.utils.logger import get_logger

logger = get_logger(__name__)


class SchedulerState(str, Enum):
    IDLE = "idle"
    COMPOSING = "composing"


class ReplyScheduler:
    """Drives the "agent is composing" delay and inserts composed replies."""

    def __init__(
        self,
        conversation_store: ConversationStore,
        composer: ResponseComposer,
        timer: ReplyTimer,
        config: Optional[ConsoleConfig] = None,
    ):
        self.conversation = conversation_store
        self.composer = composer
        self.timer = timer
        self.config = config or ConsoleConfig()
        self._pending = 0

    @property
    def state(self) -> SchedulerState:
        if self.conversation.composing:
            return SchedulerState.COMPOSING
        return SchedulerState.IDLE

    @property
    def pending_compositions(self) -> int:
        """Compositions scheduled but not yet appended."""
        return self._pending

    def send(self, content: str, current_time: Optional[datetime] = None) -> Optional[Message]:
        """
        Send an agent message and schedule the composed follow-up.

        Blank content is ignored: nothing is appended and no timer starts.
        """
        content = content.strip()
        if not content:
            logger.debug("send_ignored_blank_content")
            return None

        if current_time is None:
            current_time = datetime.now()

        if self._pending:
            logger.warning(
                "send_while_composing",
                pending_compositions=self._pending,
            )

        outbound = Message(
            author=MessageAuthor.AGENT,
            body=content,
            timestamp=format_timestamp(current_time),
            sentiment=Sentiment.POSITIVE,
            topic=self.config.custom_reply_topic,
        )
        self.conversation.append(outbound)
        self.conversation.set_composing(True)

        latest = self.conversation.latest_customer_message()
        target = latest.body if latest else content

        self._pending += 1
        self.timer.schedule(
            self.config.reply_delay_seconds,
            lambda: self._complete(target),
        )
        logger.info(
            "reply_scheduled",
            message_id=outbound.id,
            delay_seconds=self.config.reply_delay_seconds,
            target_from_customer=latest is not None,
        )
        return outbound

    def _complete(self, target: str) -> None:
        """Timer callback: append the composed reply and settle the state."""
        reply = self.composer.compose(target)
        self.conversation.append(reply)
        self._pending -= 1
        if self._pending == 0:
            self.conversation.set_composing(False)
        logger.info(
            "reply_composed",
            message_id=reply.id,
            topic=reply.topic,
            pending_compositions=self._pending,
        )
