"""TMDB client for fetching show details and episode credits."""

import logging

import niquests

from apitest.core.config import Settings
from apitest.models.media import Episode, Show, decode_episode, decode_show

logger = logging.getLogger(__name__)


class ApiRequestError(Exception):
    """Domain exception for TMDB request failures (network, timeout, HTTP status)."""

    def __init__(
        self,
        message: str,
        original_exception: Exception = None,
        *,
        url: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.original_exception = original_exception
        self.url = url
        self.status_code = status_code


class TmdbClient:
    """Blocking TMDB client.

    Every call issues exactly one GET request. Nothing is retried or cached.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float,
        session: niquests.Session | None = None,
    ):
        self.base_url = base_url
        self.api_key = api_key
        self.timeout = timeout
        self.session = session if session is not None else niquests.Session(retries=0)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TmdbClient":
        return cls(
            base_url=settings.tmdb_base_url,
            api_key=settings.tmdb_api_key,
            timeout=settings.request_timeout,
        )

    def build_url(self, resource_path: str, resource_id: int | str, *segments) -> str:
        """Build ``base_url + resource_path + "/" + id`` plus any trailing segments.

        The API key is not part of the returned URL; it is sent as a query
        parameter by :meth:`get`.
        """
        url = f"{self.base_url}{resource_path}/{resource_id}"
        for segment in segments:
            url = f"{url}/{segment}"
        return url

    def get(self, resource_path: str, resource_id: int | str, *segments) -> str:
        """GET a resource and return its decoded text body.

        Raises:
            ApiRequestError: on connection failure, timeout or non-2xx status.
        """
        url = self.build_url(resource_path, resource_id, *segments)
        logger.debug("GET %s", url)
        try:
            response = self.session.get(
                url, params={"api_key": self.api_key}, timeout=self.timeout
            )
            response.raise_for_status()
        except niquests.exceptions.RequestException as exc:
            response = getattr(exc, "response", None)
            status_code = getattr(response, "status_code", None)
            logger.error("TMDB request to %s failed: %s", url, exc)
            if status_code is not None:
                message = f"TMDB request to {url} failed with HTTP {status_code}"
            else:
                message = f"TMDB request to {url} failed: {exc}"
            raise ApiRequestError(
                message, exc, url=url, status_code=status_code
            ) from exc

        return response.text or ""

    def get_show(self, show_id: int) -> Show:
        """Fetch and decode TV show details (``tv/{id}``)."""
        return decode_show(self.get("tv", show_id))

    def get_episode_credits(self, show_id: int, season: int, episode: int) -> Episode:
        """Fetch and decode ``tv/{show}/season/{season}/episode/{episode}/credits``."""
        body = self.get(f"tv/{show_id}/season/{season}/episode", episode, "credits")
        return decode_episode(body)

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def __enter__(self) -> "TmdbClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
