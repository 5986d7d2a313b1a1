"""
Modeles SQLModel pour la base de donnees ShowTrakt.

Tables:
- shows: Series suivies, cle IMDb, statut utilisateur
- seasons: Saisons d'une serie, statut utilisateur par saison

Les statuts sont stockes sous forme de chaine (valeur de l'enum du domaine).
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlmodel import Field, SQLModel, UniqueConstraint


def utcnow() -> datetime:
    """Horodatage UTC avec fuseau, exige par les colonnes datetime de SQLModel."""
    return datetime.now(timezone.utc)


class ShowModel(SQLModel, table=True):
    """
    Modele representant une serie suivie.

    Les lignes proviennent de l'import IMDb; les champs etendus sont
    completes par les consultations Trakt.
    """

    __tablename__ = "shows"

    id: int | None = Field(default=None, primary_key=True)
    imdb_id: str = Field(unique=True, index=True)
    title: str = Field(index=True)
    year: int | None = None
    overview: str | None = None
    network: str | None = None
    no_episodes: int | None = None
    trakt_id: int | None = Field(default=None, index=True)
    user_status: str = Field(default="todo", index=True)
    created_at: datetime | None = Field(default_factory=utcnow)
    updated_at: datetime | None = Field(default_factory=utcnow)


class SeasonModel(SQLModel, table=True):
    """
    Modele representant une saison de serie.

    Lie a une serie via show_imdb_id; une seule ligne par numero de saison.
    """

    __tablename__ = "seasons"
    __table_args__ = (
        UniqueConstraint("show_imdb_id", "number", name="uq_seasons_show_number"),
    )

    id: int | None = Field(default=None, primary_key=True)
    show_imdb_id: str = Field(foreign_key="shows.imdb_id", index=True)
    number: int
    title: str | None = None
    episode_count: int | None = None
    aired_episodes: int | None = None
    first_aired: str | None = None
    trakt_id: int | None = None
    user_status: str = Field(default="unfilled")
    created_at: datetime | None = Field(default_factory=utcnow)
    updated_at: datetime | None = Field(default_factory=utcnow)
