"""
Implementation SQLModel du repository Show.

Implemente l'interface IShowRepository pour la persistance des series
et de leurs saisons dans la base de donnees SQLite via SQLModel.
"""

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from showtrakt.core.entities.media import Season, Show, UserStatusSeason, UserStatusShow
from showtrakt.core.errors import StoreError
from showtrakt.core.ports.api_clients import SeasonInfo
from showtrakt.core.ports.repositories import IShowRepository
from showtrakt.infrastructure.persistence.models import SeasonModel, ShowModel, utcnow


class SQLModelShowRepository(IShowRepository):
    """
    Repository SQLModel pour les series et leurs saisons.

    Une instance n'est utilisee que depuis le thread qui la possede :
    le worker du DataManager pour le listing, la boucle interactive pour
    les mises a jour.
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def close(self) -> None:
        """Ferme la session du repository."""
        self._session.close()

    def _to_entity(self, model: ShowModel) -> Show:
        """Convertit un modele DB en entite Show."""
        return Show(
            imdb_id=model.imdb_id,
            title=model.title,
            year=model.year,
            overview=model.overview,
            network=model.network,
            no_episodes=model.no_episodes,
            trakt_id=model.trakt_id,
            user_status=UserStatusShow(model.user_status),
        )

    def _to_season_entity(self, model: SeasonModel) -> Season:
        """Convertit un modele DB en entite Season."""
        return Season(
            show_imdb_id=model.show_imdb_id,
            number=model.number,
            user_status=UserStatusSeason(model.user_status),
            title=model.title,
            episode_count=model.episode_count,
            aired_episodes=model.aired_episodes,
            first_aired=model.first_aired,
            trakt_id=model.trakt_id,
        )

    def list_all(self) -> list[Show]:
        """Liste toutes les series, dans l'ordre d'insertion."""
        # populate_existing : la session du worker vit longtemps, les lignes
        # modifiees par la boucle interactive doivent etre relues
        statement = (
            select(ShowModel)
            .order_by(ShowModel.id)
            .execution_options(populate_existing=True)
        )
        try:
            models = self._session.exec(statement).all()
        except SQLAlchemyError as e:
            raise StoreError(f"Listing des series impossible: {e}") from e
        return [self._to_entity(model) for model in models]

    def get_by_imdb_id(self, imdb_id: str) -> Show | None:
        """Recupere une serie par son ID IMDb."""
        statement = select(ShowModel).where(ShowModel.imdb_id == imdb_id)
        model = self._session.exec(statement).first()
        if model:
            return self._to_entity(model)
        return None

    def get_seasons(self, imdb_id: str) -> list[Season]:
        """Recupere les saisons stockees d'une serie, triees par numero."""
        statement = (
            select(SeasonModel)
            .where(SeasonModel.show_imdb_id == imdb_id)
            .order_by(SeasonModel.number)
        )
        return [self._to_season_entity(m) for m in self._session.exec(statement).all()]

    def upsert_show(self, show: Show) -> None:
        """Insere ou met a jour une serie (cle : imdb_id)."""
        statement = select(ShowModel).where(ShowModel.imdb_id == show.imdb_id)
        try:
            existing = self._session.exec(statement).first()
            if existing is None:
                existing = ShowModel(imdb_id=show.imdb_id, title=show.title)

            existing.title = show.title
            existing.year = show.year
            existing.overview = show.overview
            existing.network = show.network
            existing.no_episodes = show.no_episodes
            existing.trakt_id = show.trakt_id
            existing.user_status = show.user_status.value
            existing.updated_at = utcnow()
            self._session.add(existing)
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            raise StoreError(f"Mise a jour de la serie {show.imdb_id} impossible: {e}") from e

    def upsert_season(self, season: Season) -> None:
        """Insere ou met a jour une saison (cle : serie + numero)."""
        try:
            existing = self._find_season(season.show_imdb_id, season.number)
            if existing is None:
                existing = SeasonModel(show_imdb_id=season.show_imdb_id, number=season.number)

            existing.title = season.title
            existing.episode_count = season.episode_count
            existing.aired_episodes = season.aired_episodes
            existing.first_aired = season.first_aired
            existing.trakt_id = season.trakt_id
            existing.user_status = season.user_status.value
            existing.updated_at = utcnow()
            self._session.add(existing)
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            raise StoreError(
                f"Mise a jour de la saison {season.number} de {season.show_imdb_id} impossible: {e}"
            ) from e

    def reconcile_seasons(self, show: Show, seasons: list[SeasonInfo]) -> list[Season]:
        """
        Aligne les saisons stockees d'une serie sur les saisons distantes.

        Les saisons deja connues gardent leur statut utilisateur et recoivent
        les metadonnees distantes, les nouvelles sont inserees en UNFILLED,
        celles qui ont disparu cote API sont supprimees.

        Retourne :
            Les saisons de la serie, dans l'ordre distant
        """
        statement = select(SeasonModel).where(SeasonModel.show_imdb_id == show.imdb_id)
        try:
            stored = {m.number: m for m in self._session.exec(statement).all()}
            remote_numbers = {info.number for info in seasons}

            for number, model in stored.items():
                if number not in remote_numbers:
                    logger.debug(f"Saison {number} de {show.imdb_id} absente de l'API, suppression")
                    self._session.delete(model)

            reconciled: list[SeasonModel] = []
            for info in seasons:
                model = stored.get(info.number)
                if model is None:
                    model = SeasonModel(
                        show_imdb_id=show.imdb_id,
                        number=info.number,
                        user_status=UserStatusSeason.UNFILLED.value,
                    )
                model.title = info.title
                model.episode_count = info.episode_count
                model.aired_episodes = info.aired_episodes
                model.first_aired = info.first_aired
                model.trakt_id = info.trakt_id
                model.updated_at = utcnow()
                self._session.add(model)
                reconciled.append(model)

            self._session.commit()
            for model in reconciled:
                self._session.refresh(model)
        except SQLAlchemyError as e:
            self._session.rollback()
            raise StoreError(
                f"Reconciliation des saisons de {show.imdb_id} impossible: {e}"
            ) from e

        return [self._to_season_entity(model) for model in reconciled]

    def add_shows(self, shows: list[Show]) -> int:
        """
        Insere des series inconnues en une transaction.

        Les series dont l'imdb_id existe deja sont ignorees.

        Retourne :
            Nombre de series inserees
        """
        known = set(self._session.exec(select(ShowModel.imdb_id)).all())
        inserted = 0
        try:
            for show in shows:
                if show.imdb_id in known:
                    continue
                self._session.add(
                    ShowModel(
                        imdb_id=show.imdb_id,
                        title=show.title,
                        year=show.year,
                        user_status=show.user_status.value,
                    )
                )
                known.add(show.imdb_id)
                inserted += 1
            self._session.commit()
        except SQLAlchemyError as e:
            self._session.rollback()
            raise StoreError(f"Insertion des series impossible: {e}") from e
        return inserted

    def _find_season(self, imdb_id: str, number: int) -> SeasonModel | None:
        statement = select(SeasonModel).where(
            SeasonModel.show_imdb_id == imdb_id,
            SeasonModel.number == number,
        )
        return self._session.exec(statement).first()
