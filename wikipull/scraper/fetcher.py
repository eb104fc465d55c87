"""HTTP download primitive shared by every component of the crawl."""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from wikipull.config import Settings, settings as default_settings
from wikipull.errors import FetchError, TransportError


def build_client(settings: Settings | None = None) -> httpx.Client:
    """Return an ``httpx.Client`` configured from *settings*.

    The caller owns the client and must close it (it is a context manager).
    """
    cfg = settings or default_settings
    return httpx.Client(
        headers={"User-Agent": cfg.user_agent},
        timeout=cfg.request_timeout,
        follow_redirects=True,
    )


def _get(
    client: httpx.Client, url: str, params: Mapping[str, str] | None
) -> httpx.Response:
    try:
        response = client.get(url, params=params)
    except httpx.RequestError as exc:
        raise TransportError(url, f"{type(exc).__name__}: {exc}") from exc

    if not response.is_success:
        raise FetchError(url, response.status_code)
    return response


def fetch(
    url: str,
    params: Mapping[str, str] | None = None,
    *,
    client: httpx.Client | None = None,
    settings: Settings | None = None,
) -> httpx.Response:
    """GET *url* once and return the successful response.

    Uses *client* when given, otherwise a short-lived client built from
    *settings*.  Redirects are followed by the transport; nothing is retried.

    Raises:
        FetchError: The server returned a non-2xx status.
        TransportError: The request failed before a response arrived.
    """
    if client is not None:
        return _get(client, url, params)

    with build_client(settings) as own_client:
        response = _get(own_client, url, params)
        # Read the body before the client closes.
        response.read()
    return response


def download(
    url: str,
    params: Mapping[str, str] | None = None,
    *,
    client: httpx.Client | None = None,
    settings: Settings | None = None,
) -> str:
    """Return the body of *url* as text.  See :func:`fetch` for errors."""
    return fetch(url, params, client=client, settings=settings).text


def download_json(
    url: str,
    params: Mapping[str, str] | None = None,
    *,
    client: httpx.Client | None = None,
    settings: Settings | None = None,
) -> Any:
    """Return the body of *url* decoded as JSON.

    Raises:
        ValueError: The body is not valid JSON.
    """
    return fetch(url, params, client=client, settings=settings).json()
