from datetime import datetime, timezone

from pydantic import BaseModel

# Zero value for a creation time the client never sent.
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


class Article(BaseModel):
    id: str
    title: str = ""
    subtitle: str = ""
    content: str = ""
    creation: datetime = ZERO_TIME
