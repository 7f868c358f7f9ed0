"""Tests for the Conversation Store."""

from datetime import date

from support_console.conversation.store import ConversationStore
from support_console.knowledge.store import KnowledgeStore
from support_console.matching.matcher import KnowledgeMatcher
from support_console.models.console import default_seed_data
from support_console.models.conversation import Message, MessageAuthor
from support_console.models.knowledge import KnowledgeArticle


def _customer(body: str) -> Message:
    return Message(author=MessageAuthor.CUSTOMER, body=body, timestamp="9:30 AM")


def _agent(body: str) -> Message:
    return Message(author=MessageAuthor.AGENT, body=body, timestamp="9:31 AM")


def _make_store(seed_messages=(), articles=None) -> ConversationStore:
    if articles is None:
        articles = default_seed_data().knowledge_base
    return ConversationStore(KnowledgeMatcher(KnowledgeStore(articles)), seed_messages)


class TestConversationLog:
    def test_append_preserves_order(self):
        store = _make_store()
        first, second, third = _customer("a"), _agent("b"), _customer("c")
        for m in (first, second, third):
            store.append(m)
        assert [m.id for m in store.messages] == [first.id, second.id, third.id]
        assert len(store) == 3

    def test_seed_messages_loaded(self):
        store = _make_store(default_seed_data().transcript)
        assert [m.id for m in store.messages] == ["msg-1", "msg-2", "msg-3"]

    def test_messages_snapshot_is_detached(self):
        store = _make_store([_customer("a")])
        snapshot = store.messages
        store.append(_agent("b"))
        assert len(snapshot) == 1
        assert len(store.messages) == 2

    def test_latest_customer_message(self):
        older, newer = _customer("older"), _customer("newer")
        store = _make_store([older, _agent("reply"), newer, _agent("again")])
        assert store.latest_customer_message().id == newer.id

    def test_latest_customer_message_absent(self):
        store = _make_store([_agent("only agent")])
        assert store.latest_customer_message() is None

    def test_composing_flag(self):
        store = _make_store()
        assert store.composing is False
        store.set_composing(True)
        assert store.composing is True

    def test_snapshot(self):
        store = _make_store([_customer("hi")])
        data = store.snapshot()
        assert data["composing"] is False
        assert data["messages"][0]["author"] == "customer"


class TestRecommendations:
    def test_best_match_first_then_others(self):
        store = _make_store()
        recs = store.recommendations_for(_customer("need a replacement with shipping"))
        assert [a.id for a in recs] == ["kb-312", "kb-101", "kb-204"]

    def test_no_customer_message_returns_full_store(self):
        store = _make_store()
        assert [a.id for a in store.recommendations_for(None)] == ["kb-101", "kb-204", "kb-312"]

    def test_unmatched_message_returns_full_store(self):
        store = _make_store()
        recs = store.recommendations_for(_customer("firmware update yesterday"))
        assert [a.id for a in recs] == ["kb-101", "kb-204", "kb-312"]

    def test_related_articles_capped(self):
        articles = [
            KnowledgeArticle(
                id=f"kb-{i}",
                title=f"Article {i}",
                summary="",
                response="",
                keywords=[f"topic{i}"],
                last_updated=date(2024, 1, 1),
                confidence=0.5,
            )
            for i in range(5)
        ]
        store = _make_store(articles=articles)
        recs = store.recommendations_for(_customer("about topic3"))
        assert [a.id for a in recs] == ["kb-3", "kb-0", "kb-1"]

    def test_recommendations_do_not_mutate(self):
        store = _make_store(default_seed_data().transcript)
        before = store.messages
        store.recommendations_for(store.latest_customer_message())
        assert store.messages == before
