import logging
from datetime import datetime, timezone
from typing import List, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import PyMongoError
from pymongo.read_concern import ReadConcern

from cinedata.db.errors import InvalidArgument, OperationFailed
from cinedata.db.models.comments import Comment, Critic
from cinedata.db.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

MOST_ACTIVE_LIMIT = 20


def _object_id(comment_id: str) -> ObjectId:
    # ObjectId(None) would generate a fresh id
    if not isinstance(comment_id, str):
        raise InvalidArgument(f"Invalid comment id: {comment_id!r}")
    try:
        return ObjectId(comment_id)
    except InvalidId as exc:
        raise InvalidArgument(f"Invalid comment id: {comment_id!r}") from exc


class CommentRepository(BaseRepository[Comment]):
    model = Comment
    collection_name = "comments"

    def get_comment(self, comment_id: str) -> Optional[Comment]:
        return self.find_one({"_id": _object_id(comment_id)})

    def add_comment(self, comment: Comment) -> Comment:
        """Insert the comment and return it as stored (re-read by its new id)."""
        if comment.date is None:
            comment = comment.model_copy(update={"date": datetime.now(timezone.utc)})
        try:
            result = self.collection.insert_one(comment.to_document())
            stored = self.find_one({"_id": result.inserted_id})
        except PyMongoError as exc:
            raise OperationFailed(f"Comment by {comment.email} wasn't added") from exc
        if stored is None:
            raise OperationFailed(f"Comment {result.inserted_id} not found after insert")
        logger.debug("add_comment: id=%s email=%s", stored.id, stored.email)
        return stored

    def update_comment(self, comment_id: str, text: str, email: str) -> bool:
        """
        Set the text of the comment only if it was written by `email`.

        Ownership and existence are part of the same filter, so a wrong id and
        a wrong author both come back as False.
        """
        comment_filter = {"_id": _object_id(comment_id), "email": email}
        try:
            result = self.collection.update_one(comment_filter, {"$set": {"text": text}})
        except PyMongoError as exc:
            raise OperationFailed(f"Comment {comment_id} wasn't updated") from exc
        return result.acknowledged and result.matched_count == 1

    def delete_comment(self, comment_id: str, email: str) -> bool:
        comment_filter = {"_id": _object_id(comment_id), "email": email}
        try:
            result = self.collection.delete_one(comment_filter)
        except PyMongoError as exc:
            raise OperationFailed(f"Comment {comment_id} wasn't deleted") from exc
        return result.acknowledged and result.deleted_count == 1

    def most_active_commenters(self) -> List[Critic]:
        """
        Top commenters by number of comments, read with a majority read concern.
        Equal counts are ordered by email ascending.
        """
        pipeline = [
            # documents without an author would group under _id: null
            {"$match": {"email": {"$type": "string"}}},
            {"$group": {"_id": "$email", "count": {"$sum": 1}}},
            {"$sort": {"count": -1, "_id": 1}},
            {"$limit": MOST_ACTIVE_LIMIT},
        ]
        collection = self.collection.with_options(read_concern=ReadConcern("majority"))
        try:
            return [Critic.from_document(row) for row in collection.aggregate(pipeline)]
        except PyMongoError as exc:
            raise OperationFailed("Most active commenters aggregation failed") from exc
