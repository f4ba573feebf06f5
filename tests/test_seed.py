from pathlib import Path

import pytest

from cinedata.db.seed import load_seed_yaml, seed_all

SEED_PATH = Path(__file__).resolve().parent.parent / "cinedata" / "db" / "seed_data.yaml"


def test_seed_all_inserts_users_and_comments(db):
    assert seed_all(db, SEED_PATH) == {"users": 3, "comments": 3}

    assert db["users"].count_documents({}) == 3
    ned = db["users"].find_one({"email": "ned.stark@example.com"})
    assert ned["preferences"] == {"favorite_genre": "drama"}
    assert db["comments"].count_documents({"email": "tyrion.lannister@example.com"}) == 2


def test_seed_all_twice_inserts_nothing_new(db):
    seed_all(db, SEED_PATH)

    assert seed_all(db, SEED_PATH) == {"users": 0, "comments": 0}
    assert db["users"].count_documents({}) == 3
    assert db["comments"].count_documents({}) == 3


def test_missing_seed_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_seed_yaml(tmp_path / "missing.yaml")


def test_seed_root_must_be_mapping(tmp_path):
    path = tmp_path / "seed.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_seed_yaml(path)
