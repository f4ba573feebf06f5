from datetime import datetime, timezone

from bson import ObjectId

from cinedata.db.models.comments import Comment, Critic
from cinedata.db.models.users import User


def test_user_null_preferences_become_empty():
    user = User.from_document({"_id": ObjectId(), "email": "a@x.com", "preferences": None})
    assert user.preferences == {}


def test_user_document_has_no_id():
    document = User(email="a@x.com", name="A").to_document()
    assert document == {"email": "a@x.com", "name": "A", "preferences": {}}


def test_comment_from_document_stringifies_object_ids():
    oid, movie = ObjectId(), ObjectId()
    comment = Comment.from_document(
        {
            "_id": oid,
            "email": "a@x.com",
            "name": "A",
            "text": "hi",
            "date": datetime(2020, 1, 1, tzinfo=timezone.utc),
            "movie_id": movie,
        }
    )
    assert comment.id == str(oid)
    assert comment.movie_id == str(movie)


def test_new_comment_document_lets_store_assign_id():
    document = Comment(email="a@x.com", text="hi").to_document()
    assert "_id" not in document
    assert "date" not in document


def test_comment_without_stored_date_keeps_it_empty():
    comment = Comment.from_document({"_id": ObjectId(), "email": "a@x.com", "text": "x"})
    assert comment.date is None


def test_critic_reads_group_key_as_email():
    critic = Critic.from_document({"_id": "a@x.com", "count": 4})
    assert critic.email == "a@x.com"
    assert critic.count == 4
