"""
Relance des requetes Trakt limitees par le serveur (HTTP 429).

Trakt limite le debit par client id; une reponse 429 est relancee avec un
delai exponentiel et du jitter. Les autres erreurs remontent sans relance,
le TraktClient les convertit en ApiError.

Usage:
    response = await request_with_retry(client, "GET", url)
"""

from typing import Optional

import httpx
from loguru import logger
from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)


class RateLimitError(Exception):
    """
    Reponse 429 Too Many Requests.

    Attributes:
        retry_after: Secondes annoncees par le header Retry-After, ou None
                     si le header est absent ou n'est pas un nombre.
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


def _log_retry(state: RetryCallState) -> None:
    error = state.outcome.exception() if state.outcome else None
    logger.warning(
        f"Limite de requetes atteinte (tentative {state.attempt_number}), "
        f"nouvel essai dans {state.next_action.sleep:.1f}s: {error}"
    )


def with_retry(max_attempts: int = 5, max_wait: int = 60):
    """
    Decorateur relancant une coroutine sur RateLimitError.

    Args:
        max_attempts: Nombre maximum de tentatives (defaut: 5)
        max_wait: Delai maximum entre deux tentatives en secondes (defaut: 60)
    """
    return retry(
        retry=retry_if_exception_type(RateLimitError),
        wait=wait_random_exponential(multiplier=1, min=1, max=max_wait),
        stop=stop_after_attempt(max_attempts),
        before_sleep=_log_retry,
        reraise=True,
    )


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    # Le header peut aussi etre une date HTTP, ignoree ici
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 5,
    max_wait: int = 60,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP, relancee tant que le serveur repond 429.

    Args:
        client: Client httpx async
        method: Methode HTTP
        url: URL ou chemin relatif a la base_url du client
        max_attempts: Nombre maximum de tentatives
        max_wait: Delai maximum entre deux tentatives en secondes
        **kwargs: Arguments passes a client.request()

    Raises:
        RateLimitError: Si 429 apres epuisement des tentatives
        httpx.HTTPStatusError: Pour les autres statuts d'erreur
        httpx.HTTPError: Pour les erreurs de transport
    """

    @with_retry(max_attempts=max_attempts, max_wait=max_wait)
    async def _do_request() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            raise RateLimitError(_parse_retry_after(response.headers.get("Retry-After")))
        response.raise_for_status()
        return response

    return await _do_request()
