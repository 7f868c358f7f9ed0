"""
Knowledge Store — the fixed set of articles the assistant can propose.

Built once from static configuration and never mutated afterwards.
Queried by: Matcher + Conversation Store (recommendation list)
"""

from typing import Dict, Iterable, Iterator, Optional, Tuple

from support_console.models.knowledge import KnowledgeArticle


class KnowledgeStoreError(ValueError):
    """Raised when the configured articles cannot form a valid store."""
    pass


class KnowledgeStore:
    """Immutable, ordered, in-memory knowledge base."""

    def __init__(self, articles: Iterable[KnowledgeArticle] = ()):
        self._articles: Tuple[KnowledgeArticle, ...] = tuple(articles)
        self._by_id: Dict[str, KnowledgeArticle] = {}
        for article in self._articles:
            if article.id in self._by_id:
                raise KnowledgeStoreError(f"Duplicate knowledge article id: {article.id}")
            self._by_id[article.id] = article

    def get_all(self) -> Tuple[KnowledgeArticle, ...]:
        """All articles, in configuration order."""
        return self._articles

    def get(self, article_id: str) -> Optional[KnowledgeArticle]:
        """Get a specific article by ID."""
        return self._by_id.get(article_id)

    def __len__(self) -> int:
        return len(self._articles)

    def __iter__(self) -> Iterator[KnowledgeArticle]:
        return iter(self._articles)
