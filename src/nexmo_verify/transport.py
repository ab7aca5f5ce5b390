"""Default blocking transport built on urllib."""

from __future__ import annotations

import http.client
import logging
import urllib.error
import urllib.request

from nexmo_verify.errors import TransportError
from nexmo_verify.signatures import normalize_headers
from nexmo_verify.types import RawResponse

logger = logging.getLogger(__name__)


def urllib_fetcher(
    url: str,
    method: str,
    headers: dict[str, str],
    body: bytes | None,
) -> RawResponse:
    request = urllib.request.Request(url, method=method, headers=headers, data=body)
    try:
        with urllib.request.urlopen(request) as response:
            return RawResponse(
                status=response.status,
                headers=normalize_headers(list(response.headers.items())),
                body=response.read(),
            )
    except urllib.error.HTTPError as error:
        # Error statuses still carry a signed body; the signature check decides.
        logger.debug("%s %s returned HTTP %s", method, url.split("?", 1)[0], error.code)
        try:
            content = error.read()
        except (OSError, http.client.HTTPException) as read_error:
            raise TransportError(f"Failed to read response body: {read_error}") from read_error
        return RawResponse(
            status=error.code,
            headers=normalize_headers(list(error.headers.items()) if error.headers is not None else None),
            body=content,
        )
    except (OSError, http.client.HTTPException) as error:
        raise TransportError(f"Request to {url.split('?', 1)[0]} failed: {error}") from error
