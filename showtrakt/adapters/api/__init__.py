"""
Client API externe pour les metadonnees des series.

- TraktClient : Details d'une serie et de ses saisons (API Trakt v2)

Infrastructure partagee:
- RateLimitError: Exception pour les erreurs 429
- with_retry: Decorateur avec backoff exponentiel pour gerer le rate limiting
- request_with_retry: Requete httpx relancee uniquement sur 429
"""

from showtrakt.adapters.api.retry import RateLimitError, request_with_retry, with_retry
from showtrakt.adapters.api.trakt_client import TraktClient

__all__ = [
    "TraktClient",
    "RateLimitError",
    "with_retry",
    "request_with_retry",
]
