"""
Interface port pour le client de metadonnees distant.

Le domaine n'a besoin que d'une consultation detaillee : les metadonnees
etendues d'une serie et la liste de ses saisons. L'implementation concrete
(Trakt) vit dans adapters/api/.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class ShowDetails:
    """
    Metadonnees etendues d'une serie depuis l'API.

    Attributs :
        trakt_id : ID du catalogue Trakt
        title : Titre
        year : Annee de premiere diffusion
        overview : Resume
        network : Chaine de diffusion
        aired_episodes : Nombre d'episodes diffuses
    """

    trakt_id: int
    title: str
    year: Optional[int] = None
    overview: str = ""
    network: str = ""
    aired_episodes: int = 0


@dataclass
class SeasonInfo:
    """
    Description distante d'une saison.

    Attributs :
        number : Numero de saison
        trakt_id : ID Trakt de la saison
        title : Titre de la saison
        episode_count : Nombre d'episodes annonces
        aired_episodes : Nombre d'episodes diffuses
        first_aired : Date de premiere diffusion (ISO 8601)
        overview : Resume de la saison
    """

    number: int
    trakt_id: Optional[int] = None
    title: Optional[str] = None
    episode_count: Optional[int] = None
    aired_episodes: Optional[int] = None
    first_aired: Optional[str] = None
    overview: Optional[str] = None


class IShowDetailsClient(ABC):
    """
    Interface des APIs de metadonnees de series.

    Les implementations convertissent toute erreur de transport ou de
    contenu en ApiError.
    """

    @abstractmethod
    async def get_show_details(
        self, imdb_id: str
    ) -> tuple[ShowDetails, list[SeasonInfo]]:
        """
        Recupere les details d'une serie et ses saisons.

        Args :
            imdb_id : ID IMDb de la serie

        Retourne :
            Tuple (details de la serie, saisons dans l'ordre de l'API)

        Leve :
            ApiError : Si la requete ou la reponse est invalide
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Libere les ressources du client."""
        ...
