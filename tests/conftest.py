import mongomock
import pytest

from cinedata.db.client import init_db
from cinedata.db.repositories.comments import CommentRepository
from cinedata.db.repositories.sessions import SessionRepository
from cinedata.db.repositories.users import UserRepository


@pytest.fixture
def db():
    client = mongomock.MongoClient()
    database = client.get_database("cinedata_test")
    init_db(database)
    yield database
    client.close()


@pytest.fixture
def session_repo(db):
    return SessionRepository(db)


@pytest.fixture
def user_repo(db, session_repo):
    return UserRepository(db, session_repo)


@pytest.fixture
def comment_repo(db):
    return CommentRepository(db)
