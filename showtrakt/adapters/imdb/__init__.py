"""
Import des series depuis les datasets publics IMDb.

- TSVParser : lecture en streaming de title.basics.tsv(.gz)
- IMDbShowImporter : telechargement, cache et insertion des series
"""

from showtrakt.adapters.imdb.dataset_importer import IMDbImportStats, IMDbShowImporter
from showtrakt.adapters.imdb.tsv_parser import TSVParser

__all__ = ["TSVParser", "IMDbShowImporter", "IMDbImportStats"]
