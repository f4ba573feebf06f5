import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

import yaml
from pymongo.database import Database

from cinedata.db.errors import OperationFailed
from cinedata.db.models.comments import Comment
from cinedata.db.models.users import User
from cinedata.db.repositories.comments import CommentRepository
from cinedata.db.repositories.sessions import SessionRepository
from cinedata.db.repositories.users import UserRepository

logger = logging.getLogger(__name__)


# -----------------------------
# YAML loader
# -----------------------------
def load_seed_yaml(seed_path: str | Path) -> Dict[str, Any]:
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed YAML introuvable: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Le YAML de seed doit contenir un objet racine (mapping).")
    return data


# -----------------------------
# Seed Users
# -----------------------------
def seed_users(repo: UserRepository, data: Dict[str, Any]) -> int:
    users: List[Dict[str, Any]] = data.get("users") or []
    if not users:
        logger.warning("⚠️ Aucun utilisateur dans le YAML (clé 'users').")
        return 0

    inserted = 0
    for u in users:
        if repo.get_user(u["email"]) is not None:
            continue
        try:
            repo.add_user(User.model_validate(u))
        except OperationFailed as exc:
            # insertion concurrente du même email : déjà présent
            logger.warning("⚠️ Utilisateur ignoré: %s (%s)", u["email"], exc)
            continue
        inserted += 1
    logger.info("✅ %d utilisateurs insérés.", inserted)
    return inserted


# -----------------------------
# Seed Comments
# -----------------------------
def seed_comments(repo: CommentRepository, data: Dict[str, Any]) -> int:
    comments: List[Dict[str, Any]] = data.get("comments") or []
    if repo.count() > 0:
        logger.info("ℹ️ Les commentaires existent déjà, aucune insertion effectuée.")
        return 0

    for c in comments:
        fields = dict(c)
        # YAML charge les dates ISO en datetime ; les chaînes sont acceptées aussi
        if isinstance(fields.get("date"), str):
            fields["date"] = datetime.fromisoformat(fields["date"])
        repo.add_comment(Comment.model_validate(fields))
    logger.info("✅ %d commentaires insérés.", len(comments))
    return len(comments)


# -----------------------------
# Main entrypoint
# -----------------------------
def seed_all(db: Database, seed_path: str | Path) -> Dict[str, int]:
    data = load_seed_yaml(seed_path)

    sessions = SessionRepository(db)
    users = UserRepository(db, sessions)
    comments = CommentRepository(db)

    return {
        "users": seed_users(users, data),
        "comments": seed_comments(comments, data),
    }
