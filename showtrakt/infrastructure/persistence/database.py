"""
Configuration de la base de donnees SQLite pour ShowTrakt.

Ce module fournit :
- Engine SQLite partage entre la boucle interactive et le worker du DataManager
- Session factory (une session par thread proprietaire)
- Fonction d'initialisation des tables

La base de donnees est configuree via SHOWTRAKT_DATABASE_URL (defaut: sqlite:///showtrakt.db).
"""

from pathlib import Path
from typing import Optional

from sqlalchemy import Engine
from sqlmodel import Session, SQLModel, create_engine

# Engine global - initialise lors du premier appel a get_engine()
_engine: Optional[Engine] = None


def get_engine(database_url: Optional[str] = None) -> Engine:
    """
    Retourne l'engine SQLite, en le creant si necessaire.

    Args:
        database_url: URL de la base; a defaut, celle de la configuration.
                      Ignoree si l'engine existe deja.
    """
    global _engine
    if _engine is None:
        if database_url is None:
            from showtrakt.config import Settings

            database_url = Settings().database_url

        # Creer le repertoire parent si l'URL est un fichier SQLite
        if database_url.startswith("sqlite:///") and not database_url.startswith(
            "sqlite:///:memory:"
        ):
            db_path = Path(database_url.replace("sqlite:///", ""))
            db_path.parent.mkdir(exist_ok=True, parents=True)

        _engine = create_engine(
            database_url,
            echo=False,
            # Le worker du DataManager ouvre sa propre session dans son thread
            connect_args={"check_same_thread": False},
        )
    return _engine


def dispose_engine() -> None:
    """Ferme les connexions et oublie l'engine global."""
    global _engine
    if _engine is not None:
        _engine.dispose()
        _engine = None


def create_session() -> Session:
    """Ouvre une nouvelle session sur l'engine global. L'appelant la ferme."""
    return Session(get_engine())


def init_db(database_url: Optional[str] = None) -> None:
    """
    Initialise la base de donnees en creant toutes les tables.

    Doit etre appelee une fois au demarrage de l'application.
    """
    # Import des modeles pour enregistrer leurs metadonnees
    from showtrakt.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(get_engine(database_url))
