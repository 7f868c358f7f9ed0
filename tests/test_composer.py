"""Tests for the Response Composer."""

from datetime import datetime

from support_console.composer.composer import ResponseComposer
from support_console.knowledge.store import KnowledgeStore
from support_console.matching.matcher import KnowledgeMatcher
from support_console.models.console import ConsoleConfig, default_seed_data
from support_console.models.conversation import MessageAuthor, Sentiment


def _make_composer(config: ConsoleConfig = None) -> ResponseComposer:
    store = KnowledgeStore(default_seed_data().knowledge_base)
    return ResponseComposer(KnowledgeMatcher(store), config)


class TestResponseComposer:
    def test_matched_reply_uses_article_response(self):
        composer = _make_composer()
        article = composer.matcher.knowledge_store.get("kb-101")

        message = composer.compose("sensor offline red LED Wi-Fi")
        assert message.body.startswith(article.response)
        assert message.body.endswith(ConsoleConfig().follow_up_suffix)
        assert message.topic == "Restore Offline Sensors"

    def test_unmatched_reply_is_fallback(self):
        composer = _make_composer()
        message = composer.compose("nothing relevant whatsoever")
        assert message.body == ConsoleConfig().fallback_reply
        assert message.topic == "Follow-up"

    def test_compose_always_succeeds(self):
        composer = _make_composer()
        for text in ("", "gibberish xyz"):
            message = composer.compose(text)
            assert message.body
            assert message.author == MessageAuthor.AGENT

    def test_composed_labels(self):
        message = _make_composer().compose("billing grace")
        assert message.sentiment == Sentiment.POSITIVE
        assert message.id.startswith("msg-")

    def test_timestamp_from_current_time(self):
        message = _make_composer().compose("", current_time=datetime(2024, 4, 9, 14, 7))
        assert message.timestamp == "2:07 PM"

    def test_fresh_id_per_reply(self):
        composer = _make_composer()
        assert composer.compose("x").id != composer.compose("x").id

    def test_custom_templates(self):
        config = ConsoleConfig(
            follow_up_suffix="Ping me after.",
            fallback_reply="Checking.",
            fallback_topic="Pending",
        )
        composer = _make_composer(config)
        assert composer.compose("premium replacement").body.endswith(" Ping me after.")
        unmatched = composer.compose("hello")
        assert unmatched.body == "Checking."
        assert unmatched.topic == "Pending"

    def test_draft_reply(self):
        composer = _make_composer()
        assert composer.draft_reply("hello") == ConsoleConfig().fallback_reply
