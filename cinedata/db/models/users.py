"""
➡️ But : Définir la structure des documents de la collection `users`.

L'email est l'identité naturelle du compte (index unique, cf. init_db).

hashedpw est un hash opaque : jamais lu ni vérifié ici.
"""

from typing import Dict, Optional

from pydantic import Field, field_validator

from .base import BaseDocument


class User(BaseDocument):
    email: str
    name: Optional[str] = None
    hashedpw: Optional[str] = None
    preferences: Dict[str, str] = Field(default_factory=dict)

    @field_validator("preferences", mode="before")
    @classmethod
    def _null_preferences(cls, v):
        # anciens comptes : champ absent ou null
        return {} if v is None else v
