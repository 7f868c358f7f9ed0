"""
Response Composer — turns the best knowledge match into an agent reply.

Behavioral Contract:
- Always returns a message; there is no failure outcome
- Matched: article response followed by the follow-up sentence
- Unmatched: the generic fallback reply
- Composed replies are always tagged positive; topic is the article title
  or the fallback topic
"""

from datetime import datetime
from typing import Optional

from support_console.matching.matcher import KnowledgeMatcher
from support_console.models.console import ConsoleConfig
from support_console.models.conversation import (
    Message,
    MessageAuthor,
    Sentiment,
    format_timestamp,
)


class ResponseComposer:
    """Builds agent replies from knowledge matches or the fallback template."""

    def __init__(
        self,
        matcher: KnowledgeMatcher,
        config: Optional[ConsoleConfig] = None,
    ):
        self.matcher = matcher
        self.config = config or ConsoleConfig()

    def compose(self, text: str, current_time: Optional[datetime] = None) -> Message:
        """Compose a full agent reply to `text`."""
        if current_time is None:
            current_time = datetime.now()

        article = self.matcher.match(text)
        if article:
            body = f"{article.response} {self.config.follow_up_suffix}"
            topic = article.title
        else:
            body = self.config.fallback_reply
            topic = self.config.fallback_topic

        return Message(
            author=MessageAuthor.AGENT,
            body=body,
            timestamp=format_timestamp(current_time),
            sentiment=Sentiment.POSITIVE,
            topic=topic,
        )

    def draft_reply(self, text: str) -> str:
        """Just the body of the reply `compose` would produce."""
        return self.compose(text).body
