"""
Import des series TV depuis le dataset IMDb title.basics.

Le dataset est telecharge puis conserve en cache local; il n'est
retelecharge que lorsqu'il depasse l'age maximum configure.
Les series importees entrent dans la base avec le statut TODO.

Documentation: https://www.imdb.com/interfaces/
"""

from dataclasses import dataclass
from datetime import date
from pathlib import Path

import httpx
from loguru import logger

from showtrakt.adapters.imdb.tsv_parser import TSVParser
from showtrakt.core.entities.media import Show
from showtrakt.infrastructure.persistence.repositories import SQLModelShowRepository

IMDB_DATASETS_BASE_URL = "https://datasets.imdbws.com"
BASICS_DATASET = "title.basics"

# Types de titres IMDb consideres comme des series
SHOW_TITLE_TYPES = frozenset({"tvSeries", "tvMiniSeries"})


@dataclass
class IMDbImportStats:
    """Statistiques d'import du dataset IMDb."""

    total: int = 0
    imported: int = 0
    skipped: int = 0


class IMDbShowImporter:
    """
    Gestionnaire d'import des series IMDb.

    Telecharge, cache et importe les series du dataset title.basics.
    """

    def __init__(
        self,
        cache_dir: Path,
        repository: SQLModelShowRepository,
        batch_size: int = 1000,
    ) -> None:
        """
        Initialise le gestionnaire d'import.

        Args:
            cache_dir: Repertoire pour le cache des fichiers telecharges
            repository: Repository des series (insertion en batch)
            batch_size: Nombre de series par transaction
        """
        self._cache_dir = Path(cache_dir)
        self._repository = repository
        self._batch_size = batch_size
        self._parser = TSVParser()

        self._cache_dir.mkdir(parents=True, exist_ok=True)

    @property
    def dataset_path(self) -> Path:
        return self._cache_dir / f"{BASICS_DATASET}.tsv.gz"

    def needs_update(self, file_path: Path, max_age_days: int = 7) -> bool:
        """
        Verifie si un fichier de dataset doit etre mis a jour.

        Returns:
            True si le fichier n'existe pas ou est trop vieux
        """
        if not file_path.exists():
            return True

        file_date = date.fromtimestamp(file_path.stat().st_mtime)
        return (date.today() - file_date).days >= max_age_days

    async def download_dataset(self) -> Path:
        """
        Telecharge title.basics.tsv.gz dans le cache.

        Raises:
            httpx.HTTPError: Si le telechargement echoue (le fichier partiel est supprime)
        """
        url = f"{IMDB_DATASETS_BASE_URL}/{BASICS_DATASET}.tsv.gz"
        file_path = self.dataset_path
        partial_path = file_path.with_suffix(".part")

        logger.info(f"Telechargement du dataset IMDb: {url}")
        try:
            async with httpx.AsyncClient(follow_redirects=True) as client:
                async with client.stream("GET", url) as response:
                    response.raise_for_status()

                    # Streaming pour gerer le gros fichier
                    with open(partial_path, "wb") as f:
                        async for chunk in response.aiter_bytes():
                            f.write(chunk)
        except Exception:
            # Un fichier tronque ne doit pas rester dans le cache
            partial_path.unlink(missing_ok=True)
            raise

        partial_path.replace(file_path)
        return file_path

    async def ensure_dataset(self, max_age_days: int = 7) -> Path:
        """Retourne le dataset en cache, telecharge s'il manque ou est perime."""
        if self.needs_update(self.dataset_path, max_age_days):
            return await self.download_dataset()
        logger.debug(f"Dataset IMDb en cache: {self.dataset_path}")
        return self.dataset_path

    def import_shows(self, file_path: Path) -> IMDbImportStats:
        """
        Importe les series d'un fichier title.basics.

        Les titres adultes et les types non-series sont ignores, les series
        deja connues (meme imdb_id) ne sont pas modifiees.

        Returns:
            Statistiques d'import
        """
        stats = IMDbImportStats()
        batch: list[Show] = []

        for record in self._parser.parse_basics(file_path):
            if record["title_type"] not in SHOW_TITLE_TYPES or record["is_adult"]:
                continue
            stats.total += 1
            batch.append(
                Show(
                    imdb_id=record["tconst"],
                    title=record["primary_title"],
                    year=record["start_year"],
                )
            )

            if len(batch) >= self._batch_size:
                self._flush(batch, stats)
                batch = []

        if batch:
            self._flush(batch, stats)

        logger.info(
            f"Import IMDb termine: {stats.imported} importee(s), {stats.skipped} deja connue(s)"
        )
        return stats

    def _flush(self, batch: list[Show], stats: IMDbImportStats) -> None:
        inserted = self._repository.add_shows(batch)
        stats.imported += inserted
        stats.skipped += len(batch) - inserted
