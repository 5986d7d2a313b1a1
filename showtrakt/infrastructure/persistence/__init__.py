"""
Module de persistance SQLite pour ShowTrakt.

- database.py : Configuration de l'engine SQLite, session factory, initialisation
- models.py : Modeles SQLModel representant les tables de la base de donnees

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.

Usage:
    from showtrakt.infrastructure.persistence import create_session, init_db

    init_db()  # Cree les tables si necessaire
    with create_session() as session:
        session.add(ShowModel(imdb_id="tt0903747", title="Breaking Bad"))
        session.commit()
"""

from showtrakt.infrastructure.persistence.database import (
    create_session,
    dispose_engine,
    get_engine,
    init_db,
)
from showtrakt.infrastructure.persistence.models import SeasonModel, ShowModel

__all__ = [
    "create_session",
    "dispose_engine",
    "get_engine",
    "init_db",
    "ShowModel",
    "SeasonModel",
]
