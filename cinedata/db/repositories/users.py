"""
➡️ But : Encapsuler toutes les opérations de base de données sur les comptes.

UserRepository : création, lecture, fusion des préférences et suppression (en cascade sur les sessions).

Ne contient aucune logique métier, juste de la persistance.

🔹 Avantages :

Réutilisable (les services n’ont pas à savoir comment la DB fonctionne).

Testable indépendamment (mongomock, ou mock du repo sans base réelle).
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from pymongo import WriteConcern
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from cinedata.db.errors import InvalidArgument, NotFound, OperationFailed
from cinedata.db.models.users import User
from cinedata.db.repositories.base import BaseRepository
from cinedata.db.repositories.sessions import SessionRepository

logger = logging.getLogger(__name__)


def _check_preferences(preferences: Optional[Mapping[str, str]]) -> None:
    if preferences is None:
        raise InvalidArgument("preferences must not be None")
    for key, value in preferences.items():
        # chaque clé devient un chemin "preferences.<clé>" côté MongoDB
        if not isinstance(key, str) or not key or key.startswith("$") or "." in key:
            raise InvalidArgument(f"Invalid preference key: {key!r}")
        if not isinstance(value, str):
            raise InvalidArgument(f"Preference {key!r} must be a string")


class UserRepository(BaseRepository[User]):
    """
    Repository pour la collection users.
    Hérite de la lecture générique de BaseRepository.
    Reçoit le SessionRepository pour la suppression en cascade.
    """
    model = User
    collection_name = "users"

    def __init__(self, db: Database, sessions: SessionRepository):
        super().__init__(db)
        self.sessions = sessions

    def add_user(self, user: User) -> bool:
        """
        Insère le compte avec un write concern "majority".
        Lève OperationFailed si l'email existe déjà ou si l'écriture est refusée.
        """
        logger.debug("add_user: %s", user.email)
        try:
            self.collection.with_options(
                write_concern=WriteConcern(w="majority")
            ).insert_one(user.to_document())
        except DuplicateKeyError as exc:
            raise OperationFailed(f"User {user.email} already exists") from exc
        except PyMongoError as exc:
            raise OperationFailed(f"User {user.email} wasn't added") from exc
        return True

    def get_user(self, email: str) -> Optional[User]:
        """Retourne le compte par email, ou None."""
        return self.find_one({"email": email})

    def update_user_preferences(self, email: str, preferences: Optional[Mapping[str, str]]) -> bool:
        """
        Fusionne `preferences` dans les préférences existantes : les clés fournies
        sont écrasées, les autres conservées.

        La fusion est un seul $set sur les chemins "preferences.<clé>", donc deux
        mises à jour concurrentes du même compte ne perdent pas leurs clés.
        """
        _check_preferences(preferences)
        email_filter = {"email": email}

        if not preferences:
            if self.collection.find_one(email_filter, {"_id": 1}) is None:
                raise NotFound(f"User by email {email} not found")
            return True

        changes = {f"preferences.{key}": value for key, value in preferences.items()}
        try:
            # champ absent ou null -> {} (sinon le $set par chemin échoue)
            self.collection.update_one(
                {"email": email, "preferences": None},
                {"$set": {"preferences": {}}},
            )
            result = self.collection.update_one(email_filter, {"$set": changes})
        except PyMongoError as exc:
            raise OperationFailed(f"Preferences of user {email} weren't updated") from exc

        if result.matched_count == 0:
            raise NotFound(f"User by email {email} not found")
        logger.debug("update_user_preferences: %s keys=%s", email, sorted(preferences))
        return result.acknowledged

    def delete_user(self, email: str) -> bool:
        """
        Supprime les sessions du compte, puis le compte.
        Si les sessions n'ont pas pu être supprimées, le compte est conservé
        (pas de token actif orphelin) et False est retourné.
        """
        if not self.sessions.delete_user_sessions(email):
            logger.error("Sessions of user with email %s were not deleted; account kept", email)
            return False

        try:
            result = self.collection.delete_one({"email": email})
        except PyMongoError as exc:
            raise OperationFailed(f"User {email} wasn't deleted") from exc
        logger.debug("delete_user: %s deleted=%s", email, result.deleted_count)
        return result.acknowledged
