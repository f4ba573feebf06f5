import logging
from typing import Optional

from pymongo.errors import PyMongoError

from cinedata.db.models.sessions import Session
from cinedata.db.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class SessionRepository(BaseRepository[Session]):
    """
    One session document per user identity. Store errors are reported as
    False rather than raised: callers treat session writes as retryable, and
    the account deletion cascade uses delete_user_sessions as a plain gate.
    """

    model = Session
    collection_name = "sessions"

    def create_user_session(self, user_id: str, jwt: str) -> bool:
        """Create the session for user_id, or replace its token if one exists."""
        logger.debug("create_user_session: user_id=%s", user_id)
        try:
            result = self.collection.update_one(
                {"user_id": user_id},
                {"$set": {"jwt": jwt}},
                upsert=True,
            )
        except PyMongoError as exc:
            logger.error("Session creation of user %s failed: %s", user_id, exc)
            return False
        return result.acknowledged

    def get_user_session(self, user_id: str) -> Optional[Session]:
        return self.find_one({"user_id": user_id})

    def delete_user_sessions(self, user_id: str) -> bool:
        """Remove every session of user_id. Nothing to delete counts as success."""
        try:
            result = self.collection.delete_many({"user_id": user_id})
        except PyMongoError as exc:
            logger.error("Sessions of user %s were not deleted: %s", user_id, exc)
            return False
        if not result.acknowledged:
            # deleted_count is unavailable without acknowledgement
            return False
        logger.debug("delete_user_sessions: user_id=%s deleted=%s", user_id, result.deleted_count)
        return True
