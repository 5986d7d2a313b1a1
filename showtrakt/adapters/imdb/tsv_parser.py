"""
Parser pour les fichiers TSV des datasets IMDb.

Les datasets IMDb sont distribues sous forme de fichiers TSV compresses (.tsv.gz).
Ce parser lit title.basics en mode streaming pour minimiser l'utilisation
memoire (le fichier fait ~600MB decompresse).

Documentation: https://www.imdb.com/interfaces/
"""

import gzip
from pathlib import Path
from typing import Generator


class TSVParser:
    """Parser streaming pour title.basics.tsv(.gz)."""

    def parse_basics(self, file_path: Path) -> Generator[dict, None, None]:
        """
        Parse le fichier title.basics.tsv(.gz).

        Format du fichier:
        tconst    titleType    primaryTitle    originalTitle    isAdult    startYear    endYear    runtimeMinutes    genres
        tt0903747    tvSeries    Breaking Bad    Breaking Bad    0    2008    2013    45    Crime,Drama,Thriller

        Args:
            file_path: Chemin vers le fichier TSV (compresse ou non)

        Yields:
            Dictionnaire avec tconst, title_type, primary_title, original_title,
            is_adult, start_year, end_year, runtime_minutes, genres

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
        """
        if not file_path.exists():
            raise FileNotFoundError(f"Fichier non trouve: {file_path}")

        open_fn = gzip.open if file_path.suffix == ".gz" else open

        with open_fn(file_path, "rt", encoding="utf-8") as f:
            # Ignorer l'en-tete
            next(f, None)

            for line in f:
                parts = line.rstrip("\n").split("\t")
                if len(parts) >= 9:
                    yield {
                        "tconst": parts[0],
                        "title_type": parts[1],
                        "primary_title": parts[2],
                        "original_title": parts[3],
                        "is_adult": parts[4] == "1",
                        "start_year": self._parse_int(parts[5]),
                        "end_year": self._parse_int(parts[6]),
                        "runtime_minutes": self._parse_int(parts[7]),
                        "genres": parts[8].split(",") if parts[8] != "\\N" else [],
                    }

    @staticmethod
    def _parse_int(value: str) -> int | None:
        """Parse une valeur entiere, retourne None pour \\N."""
        if value == "\\N":
            return None
        try:
            return int(value)
        except ValueError:
            return None
