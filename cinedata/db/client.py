"""
➡️ But : Configurer le client MongoDB et fournir la base aux repositories.

get_client() : un seul MongoClient par process (pool de connexions partagé).

get_database() : la base configurée, avec les CodecOptions communes.

init_db() : crée les index (unicité email / user_id).

get_db() : dépendance qui fournit la base aux routes (Depends(get_db)).

🔹 Avantages :

Un seul endroit pour gérer les connexions DB.

Les options de (dé)sérialisation sont fixées une fois au démarrage puis partagées en lecture seule.
"""

from datetime import timezone
from functools import lru_cache
from typing import Iterator, Optional

from bson.codec_options import CodecOptions
from pymongo import ASCENDING, MongoClient
from pymongo.database import Database

from cinedata.core.config import settings

# Dates renvoyées "aware" en UTC
CODEC_OPTIONS: CodecOptions = CodecOptions(tz_aware=True, tzinfo=timezone.utc)


def _build_client() -> MongoClient:
    url = settings.MONGODB_URI
    assert url, "MONGODB_URI must be set"

    # MongoClient ne se connecte qu'à la première opération
    return MongoClient(
        url,
        appname=settings.APP_NAME,
        serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS,
        tz_aware=True,
        tzinfo=timezone.utc,
    )


@lru_cache(maxsize=1)
def get_client() -> MongoClient:
    return _build_client()


def get_database(client: Optional[MongoClient] = None) -> Database:
    client = client if client is not None else get_client()
    return client.get_database(settings.MONGODB_DATABASE, codec_options=CODEC_OPTIONS)


def init_db(db: Database) -> None:
    """
    Crée les index s'ils n'existent pas (idempotent).
    L'index unique sur users.email fait échouer add_user sur un doublon.
    """
    db["users"].create_index([("email", ASCENDING)], unique=True, name="uq_users_email")
    db["sessions"].create_index([("user_id", ASCENDING)], unique=True, name="uq_sessions_user_id")
    db["comments"].create_index([("email", ASCENDING)], name="ix_comments_email")


def get_db() -> Iterator[Database]:
    """
    Dépendance : fournit la base par requête.
    Utilisation :
        def route(..., db: Database = Depends(get_db)):
            ...
    """
    yield get_database()
