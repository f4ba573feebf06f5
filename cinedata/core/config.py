"""
➡️ But : Centraliser tous les paramètres configurables (nom d’app, URI MongoDB, niveau de logs, etc.)

Utilise pydantic-settings pour charger automatiquement les variables d’environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from cinedata.core.config import settings
print(settings.MONGODB_DATABASE)


🔹 Avantages :

Plus propre que des constantes éparpillées dans le code.

Facilite le passage entre environnements (dev / prod / test).
"""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "cinedata"
    ENV: str = "dev"  # dev | prod | test

    # -----------------------------
    # MongoDB
    # -----------------------------
    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DATABASE: str = "sample_mflix"
    MONGODB_TIMEOUT_MS: int = 5000        # serverSelectionTimeoutMS

    # -----------------------------
    # Logging
    # -----------------------------
    LOG_LEVEL: Optional[str] = None       # auto selon ENV si None

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    # -----------------------------
    # Post-process values
    # -----------------------------
    def model_post_init(self, __context): # appelée automatiquement
        # DEBUG en dev, INFO ailleurs, si non spécifié
        if self.LOG_LEVEL is None:
            level = "DEBUG" if self.ENV == "dev" else "INFO"
            object.__setattr__(self, "LOG_LEVEL", level)


# Instance globale importable partout
settings = Settings()
