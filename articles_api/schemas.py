import re
from datetime import datetime

from pydantic import BaseModel, field_validator

from articles_api.models import ZERO_TIME

RFC3339_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})$"
)


class ArticleCreate(BaseModel):
    title: str = ""
    subtitle: str = ""
    content: str = ""
    creation: datetime = ZERO_TIME

    @field_validator("creation", mode="before")
    @classmethod
    def creation_must_be_rfc3339(cls, value):
        """Accept only full RFC 3339 timestamps; ``null`` keeps the zero time."""
        if value is None:
            return ZERO_TIME
        if not isinstance(value, str) or not RFC3339_PATTERN.match(value):
            raise ValueError(f"creation must be an RFC 3339 timestamp, got {value!r}")
        return value


class ArticleOut(BaseModel):
    id: str
    title: str
    subtitle: str
    content: str
    creation: datetime
