"""Single-shot JSON GET helper shared by the weather providers."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..exceptions import RequestError, ResponseParseError
from ..redaction import sanitize_text


def request_json(
    client: httpx.Client,
    url: str,
    *,
    params: dict[str, str],
    context: str,
    logger: logging.Logger,
) -> Any:
    """GET `url` once and decode the JSON body.

    Redirects are followed. Any non-2xx final status, transport failure or
    unencodable URL raises RequestError; an undecodable body raises
    ResponseParseError.
    """
    logger.debug("Requesting %s from %s", context, url)
    try:
        response = client.get(url, params=params, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        status = exc.response.status_code
        raise RequestError(
            f"Request failed (HTTP {status})",
            status_code=status,
        ) from exc
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as exc:
        # Addresses that cannot be encoded into the query land here too.
        raise RequestError(
            f"Request failed ({type(exc).__name__}: {sanitize_text(str(exc))})"
        ) from exc

    logger.debug("%s responded with HTTP %d", context, response.status_code)
    try:
        return response.json()
    except ValueError as exc:
        raise ResponseParseError(f"Failed to parse {context} response data ({exc})") from exc
