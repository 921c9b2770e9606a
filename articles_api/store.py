import threading
import time
from datetime import datetime, timezone
from typing import Dict, List, Optional

from articles_api.models import Article


def generate_article_id() -> str:
    """Return a new article id: the current time in nanoseconds, as a string."""
    return str(time.time_ns())


class ArticleStore:
    """In-memory mapping from article id to :class:`Article`.

    Every operation holds the same lock for its whole duration, reads
    included. Callers only ever see copies of the stored articles.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._articles: Dict[str, Article] = {}

    def insert(self, article: Article) -> None:
        # last write wins on an id collision
        with self._lock:
            self._articles[article.id] = article.model_copy()

    def get_all(self) -> List[Article]:
        with self._lock:
            return [a.model_copy() for a in self._articles.values()]

    def get_by_id(self, article_id: str) -> Optional[Article]:
        with self._lock:
            article = self._articles.get(article_id)
            return article.model_copy() if article is not None else None


def seed_demo_article(store: ArticleStore) -> None:
    store.insert(
        Article(
            id="id1",
            title="Hola!!",
            subtitle="Hello!!",
            content="Hola Amigos!!",
            creation=datetime.now(timezone.utc),
        )
    )
