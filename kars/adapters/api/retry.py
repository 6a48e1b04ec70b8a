"""
Relance avec backoff exponentiel pour les catalogues externes.

Les reponses 429 (rate limiting) et 502/503/504 (catalogue indisponible)
sont relancees avec un delai croissant et du jitter aleatoire. Les autres
erreurs HTTP sont propagees immediatement.

Usage:
    response = await request_with_retry(client, "GET", "/search/movie", params=...)
"""

from typing import Optional

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

RETRYABLE_STATUS = (502, 503, 504)


class RateLimitError(Exception):
    """
    Levee quand le catalogue retourne 429 Too Many Requests.

    Attributes:
        retry_after: Secondes a attendre (header Retry-After), ou None
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


class ServiceUnavailableError(Exception):
    """Levee quand le catalogue repond 502, 503 ou 504."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"Service unavailable (HTTP {status_code})")


def with_retry(max_attempts: int = 4, max_wait: int = 30):
    """
    Decorateur de relance sur RateLimitError et ServiceUnavailableError.

    Args:
        max_attempts: Nombre maximum de tentatives
        max_wait: Delai maximum entre deux tentatives, en secondes
    """
    return retry(
        retry=retry_if_exception_type((RateLimitError, ServiceUnavailableError)),
        wait=wait_random_exponential(multiplier=1, min=1, max=max_wait),
        stop=stop_after_attempt(max_attempts),
        reraise=True,
    )


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 4,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP avec relance automatique.

    Args:
        client: Client httpx async a utiliser
        method: Methode HTTP (GET, POST)
        url: URL (absolue ou relative a base_url)
        max_attempts: Nombre maximum de tentatives
        **kwargs: Arguments passes a client.request()

    Returns:
        httpx.Response en cas de succes

    Raises:
        RateLimitError: 429 apres epuisement des tentatives
        ServiceUnavailableError: 502/503/504 apres epuisement des tentatives
        httpx.HTTPStatusError: Autres erreurs HTTP
    """

    @with_retry(max_attempts=max_attempts)
    async def _do_request() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            raise RateLimitError(_parse_retry_after(response.headers.get("Retry-After")))
        if response.status_code in RETRYABLE_STATUS:
            raise ServiceUnavailableError(response.status_code)
        response.raise_for_status()
        return response

    return await _do_request()
