import logging
from typing import Iterable, List

from articles_api.models import Article

logger = logging.getLogger(__name__)

SEARCHABLE_FIELDS = ("title", "subtitle", "content")


def split_words(text: str) -> List[str]:
    """Split on single spaces, keeping empty words.

    ``"a  b"`` gives ``["a", "", "b"]`` and ``""`` gives ``[""]``.
    """
    return text.split(" ")


def field_matches(text: str, token: str) -> bool:
    for word in split_words(text):
        if word == token:
            return True
    return False


def search_articles(articles: Iterable[Article], token: str) -> List[Article]:
    """Return articles in which ``token`` is a whole word.

    Title, subtitle and content are checked independently, so an article
    matching in several fields is returned once per matching field.
    """
    hits: List[Article] = []
    for article in articles:
        for field in SEARCHABLE_FIELDS:
            if field_matches(getattr(article, field), token):
                hits.append(article)
    logger.debug("search q=%r hits=%d", token, len(hits))
    return hits
