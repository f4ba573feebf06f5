from typing import Any, Generic, Mapping, Optional, Type, TypeVar

from pymongo.collection import Collection
from pymongo.database import Database

from cinedata.db.models.base import BaseDocument

# Type générique pour le modèle (User, Session, Comment)
ModelT = TypeVar("ModelT", bound=BaseDocument)

class BaseRepository(Generic[ModelT]):
    """
    Repository de base pour une collection MongoDB.

    👉 Ne contient aucune logique métier.
    👉 Gère le lien collection <-> modèle : lecture d'un document, conversion en objet typé.
    👉 Les repositories concrets définissent `model = MaClasseDocument` et `collection_name`.
    👉 La base (et ses CodecOptions) est injectée : rien n'est recréé par repository.
    """

    model: Type[ModelT]
    collection_name: str

    def __init__(self, db: Database):
        self.db = db
        self.collection: Collection = db[self.collection_name]

    # ---------- READ ----------

    def find_one(self, filter_: Mapping[str, Any]) -> Optional[ModelT]:
        """Retourne le premier document correspondant au filtre, ou None."""
        document = self.collection.find_one(filter_)
        if document is None:
            return None
        return self.model.from_document(document)

    def count(self, filter_: Optional[Mapping[str, Any]] = None) -> int:
        """Retourne le nombre de documents correspondant au filtre."""
        return self.collection.count_documents(filter_ or {})
