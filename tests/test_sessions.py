from unittest import mock

from pymongo.errors import InvalidOperation, PyMongoError

from cinedata.db.repositories.sessions import SessionRepository


def test_create_then_get_session(session_repo):
    assert session_repo.create_user_session("a@x.com", "tok1") is True

    session = session_repo.get_user_session("a@x.com")
    assert session is not None
    assert session.user_id == "a@x.com"
    assert session.jwt == "tok1"


def test_create_session_replaces_token(session_repo):
    session_repo.create_user_session("a@x.com", "tok1")
    session_repo.create_user_session("a@x.com", "tok2")

    assert session_repo.get_user_session("a@x.com").jwt == "tok2"
    assert session_repo.count({"user_id": "a@x.com"}) == 1


def test_get_missing_session_returns_none(session_repo):
    assert session_repo.get_user_session("nobody@x.com") is None


def test_delete_sessions_is_idempotent(session_repo):
    session_repo.create_user_session("a@x.com", "tok1")

    assert session_repo.delete_user_sessions("a@x.com") is True
    assert session_repo.get_user_session("a@x.com") is None
    assert session_repo.delete_user_sessions("a@x.com") is True


def test_delete_sessions_leaves_other_users(session_repo):
    session_repo.create_user_session("a@x.com", "tok1")
    session_repo.create_user_session("b@x.com", "tok2")

    session_repo.delete_user_sessions("a@x.com")

    assert session_repo.get_user_session("b@x.com").jwt == "tok2"


def test_store_errors_are_reported_as_false():
    db = mock.MagicMock()
    repo = SessionRepository(db)
    repo.collection.update_one.side_effect = PyMongoError("connection refused")
    repo.collection.delete_many.side_effect = PyMongoError("connection refused")

    assert repo.create_user_session("a@x.com", "tok1") is False
    assert repo.delete_user_sessions("a@x.com") is False


def test_unacknowledged_delete_is_reported_as_false():
    repo = SessionRepository(mock.MagicMock())
    result = repo.collection.delete_many.return_value
    result.acknowledged = False
    type(result).deleted_count = mock.PropertyMock(side_effect=InvalidOperation("unacknowledged"))

    assert repo.delete_user_sessions("a@x.com") is False
