"""
Matcher — deterministic keyword-overlap ranking of knowledge articles.

Ranking:
  1. keyword matches (substring hits in the case-folded text), descending
  2. article confidence, descending
  3. knowledge store order (stable sort)

A top-ranked article with zero keyword matches means "no match".
"""

from typing import List, Optional

from support_console.knowledge.store import KnowledgeStore
from support_console.models.knowledge import KnowledgeArticle
from support_console.utils.logger import get_logger

logger = get_logger(__name__)


class ScoredArticle:
    """An article together with the keywords it matched."""

    def __init__(self, article: KnowledgeArticle, matched_keywords: List[str]):
        self.article = article
        self.matched_keywords = matched_keywords

    @property
    def keyword_matches(self) -> int:
        return len(self.matched_keywords)

    def to_dict(self) -> dict:
        return {
            "article_id": self.article.id,
            "keyword_matches": self.keyword_matches,
            "matched_keywords": list(self.matched_keywords),
            "confidence": self.article.confidence,
        }


class KnowledgeMatcher:
    """Scores knowledge articles against a text fragment. Pure."""

    def __init__(self, knowledge_store: KnowledgeStore):
        self.knowledge_store = knowledge_store

    def rank(self, text: str) -> List[ScoredArticle]:
        """Score every article and return them best first."""
        normalized = text.lower()
        scored = [
            ScoredArticle(
                article=article,
                matched_keywords=[k for k in article.keywords if k in normalized],
            )
            for article in self.knowledge_store.get_all()
        ]
        # sorted() is stable, so full ties keep knowledge store order
        return sorted(
            scored,
            key=lambda s: (-s.keyword_matches, -s.article.confidence),
        )

    def match(self, text: str) -> Optional[KnowledgeArticle]:
        """Return the best matching article, or None if nothing overlaps."""
        ranked = self.rank(text)
        if not ranked or ranked[0].keyword_matches == 0:
            logger.debug("knowledge_no_match", articles=len(ranked))
            return None

        best = ranked[0]
        logger.debug(
            "knowledge_matched",
            article_id=best.article.id,
            keyword_matches=best.keyword_matches,
        )
        return best.article
