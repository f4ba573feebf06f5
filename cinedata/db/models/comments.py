from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import Field, field_validator

from cinedata.db.models.base import BaseDocument, oid_to_str, str_to_oid


class Comment(BaseDocument):
    id: Optional[str] = Field(default=None, alias="_id")
    email: str
    name: Optional[str] = None
    text: str = ""
    # filled at insert time by CommentRepository.add_comment
    date: Optional[datetime] = None
    movie_id: Optional[str] = None

    @field_validator("id", "movie_id", mode="before")
    @classmethod
    def _object_ids(cls, v):
        return oid_to_str(v)

    def to_document(self) -> Dict[str, Any]:
        document = super().to_document()
        for key in ("_id", "movie_id"):
            if key in document:
                document[key] = str_to_oid(document[key])
        return document


class Critic(BaseDocument):
    """One row of the most-active-commenters ranking; never persisted."""

    email: str = Field(alias="_id")
    count: int
