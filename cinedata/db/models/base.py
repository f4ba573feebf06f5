"""
➡️ But : Définir la forme des documents stockés dans MongoDB.

Contient les classes héritant de pydantic.BaseModel.

Représente les objets persistés. Ici on représente le comportement commun à toutes les collections :
passage document BSON <-> objet Python.

Chaque champ = une clé du document (avec son type, son alias...).

🔹 Avantages :

Tu manipules des objets Python typés, pas des dict bruts.

Les champs inconnus du document sont ignorés à la lecture.
"""

from typing import Any, Dict, Mapping, Type, TypeVar

from bson import ObjectId
from pydantic import BaseModel, ConfigDict

DocT = TypeVar("DocT", bound="BaseDocument")


def oid_to_str(value: Any) -> Any:
    return str(value) if isinstance(value, ObjectId) else value


def str_to_oid(value: Any) -> Any:
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return value


class BaseDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @classmethod
    def from_document(cls: Type[DocT], document: Mapping[str, Any]) -> DocT:
        return cls.model_validate(dict(document))

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
