"""
Client Trakt API v2 pour les details des series TV.

Implemente IShowDetailsClient : une consultation recupere les metadonnees
etendues d'une serie (par son ID IMDb) puis la liste de ses saisons.

Reference API: https://trakt.docs.apiary.io/
"""

from typing import Any, Optional

import httpx
from loguru import logger

from showtrakt.adapters.api.retry import RateLimitError, request_with_retry
from showtrakt.core.errors import ApiError
from showtrakt.core.ports.api_clients import IShowDetailsClient, SeasonInfo, ShowDetails


class TraktClient(IShowDetailsClient):
    """
    Client Trakt pour la consultation des series.

    Authentification par client id (header trakt-api-key), pas d'OAuth :
    seules les routes publiques sont utilisees.

    Example:
        client = TraktClient(client_id="your-client-id")
        details, seasons = await client.get_show_details("tt0903747")
        await client.close()
    """

    BASE_URL = "https://api.trakt.tv"
    API_VERSION = "2"

    def __init__(
        self,
        client_id: Optional[str],
        base_url: str = BASE_URL,
        max_attempts: int = 5,
    ) -> None:
        """
        Initialise le client Trakt.

        Args:
            client_id: Client id de l'application Trakt (None = client inutilisable)
            base_url: URL de base de l'API
            max_attempts: Tentatives maximum sur reponse 429
        """
        self._client_id = client_id
        self._base_url = base_url
        self._max_attempts = max_attempts
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, cree s'il n'existe pas."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=httpx.Timeout(30.0, connect=10.0),
                headers={
                    "Content-Type": "application/json",
                    "trakt-api-version": self.API_VERSION,
                    "trakt-api-key": self._client_id or "",
                },
            )
        return self._client

    async def get_show_details(
        self, imdb_id: str
    ) -> tuple[ShowDetails, list[SeasonInfo]]:
        """
        Recupere les details d'une serie et ses saisons.

        Args:
            imdb_id: ID IMDb de la serie (Trakt accepte les IDs IMDb comme slug)

        Returns:
            Tuple (ShowDetails, saisons dans l'ordre de l'API)

        Raises:
            ApiError: Client non configure, erreur HTTP/reseau ou reponse invalide
        """
        if not self._client_id:
            raise ApiError("Client id Trakt non configure (SHOWTRAKT_TRAKT_CLIENT_ID)", imdb_id)

        show_data = await self._get_json(f"/shows/{imdb_id}", imdb_id)
        seasons_data = await self._get_json(f"/shows/{imdb_id}/seasons", imdb_id)

        try:
            details = ShowDetails(
                trakt_id=int(show_data["ids"]["trakt"]),
                title=show_data.get("title") or "",
                year=show_data.get("year"),
                overview=show_data.get("overview") or "",
                network=show_data.get("network") or "",
                aired_episodes=int(show_data.get("aired_episodes") or 0),
            )
            seasons = [self._to_season_info(item) for item in seasons_data]
        except (KeyError, TypeError, ValueError) as e:
            raise ApiError(f"Reponse Trakt invalide pour {imdb_id}: {e!r}", imdb_id) from e

        logger.debug(f"Trakt: {imdb_id} -> trakt_id={details.trakt_id}, {len(seasons)} saison(s)")
        return details, seasons

    async def _get_json(self, url: str, imdb_id: str) -> Any:
        """GET ?extended=full et decodage JSON, erreurs converties en ApiError."""
        client = await self._get_client()
        try:
            response = await request_with_retry(
                client,
                "GET",
                url,
                max_attempts=self._max_attempts,
                params={"extended": "full"},
            )
            return response.json()
        except httpx.HTTPStatusError as e:
            raise ApiError(
                f"Trakt a repondu {e.response.status_code} pour {url}", imdb_id
            ) from e
        except RateLimitError as e:
            raise ApiError(f"Trakt: limite de requetes atteinte pour {url}", imdb_id) from e
        except httpx.HTTPError as e:
            raise ApiError(f"Requete Trakt {url} echouee: {e!r}", imdb_id) from e
        except ValueError as e:
            raise ApiError(f"Reponse Trakt non JSON pour {url}", imdb_id) from e

    @staticmethod
    def _to_season_info(item: dict) -> SeasonInfo:
        """Convertit un element de /shows/{id}/seasons en SeasonInfo."""
        ids = item.get("ids") or {}
        return SeasonInfo(
            number=int(item["number"]),
            trakt_id=ids.get("trakt"),
            title=item.get("title"),
            episode_count=item.get("episode_count"),
            aired_episodes=item.get("aired_episodes"),
            first_aired=item.get("first_aired"),
            overview=item.get("overview"),
        )

    async def close(self) -> None:
        """Ferme le client HTTP et libere les ressources."""
        if self._client:
            await self._client.aclose()
            self._client = None
