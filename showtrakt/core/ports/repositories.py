"""
Interface port pour la base locale.

Definit les operations que l'application appelle sur le stockage des series
et de leurs saisons. L'implementation SQLModel vit dans
infrastructure/persistence/repositories/.
"""

from abc import ABC, abstractmethod

from showtrakt.core.entities.media import Season, Show
from showtrakt.core.ports.api_clients import SeasonInfo


class IShowRepository(ABC):
    """
    Interface de stockage des series et saisons.

    Toutes les operations levent StoreError en cas d'echec de persistance.
    """

    @abstractmethod
    def list_all(self) -> list[Show]:
        """Liste toutes les series, dans l'ordre d'insertion."""
        ...

    @abstractmethod
    def upsert_show(self, show: Show) -> None:
        """Insere ou met a jour une serie (cle : imdb_id)."""
        ...

    @abstractmethod
    def upsert_season(self, season: Season) -> None:
        """Insere ou met a jour une saison (cle : serie + numero)."""
        ...

    @abstractmethod
    def reconcile_seasons(self, show: Show, seasons: list[SeasonInfo]) -> list[Season]:
        """
        Aligne les saisons stockees d'une serie sur les saisons distantes.

        Args :
            show : La serie proprietaire
            seasons : Saisons retournees par l'API, dans leur ordre

        Retourne :
            Les saisons de la serie, dans l'ordre distant, avec les statuts
            utilisateur deja stockes conserves
        """
        ...

    def close(self) -> None:
        """Libere la connexion du store. Sans effet par defaut."""
