"""Signed client for the Nexmo SDK token and verify search endpoints."""

from __future__ import annotations

import http.client
import logging

from nexmo_verify.errors import SignatureError, TransportError
from nexmo_verify.flow import SearchFlow
from nexmo_verify.responses import decode_search_response, decode_token_response
from nexmo_verify.signatures import response_signature, sign_request, verify_response_signature
from nexmo_verify.transport import urllib_fetcher
from nexmo_verify.types import (
    ClientIdentity,
    Endpoints,
    Fetcher,
    Parameters,
    SearchResponse,
    SignedRequest,
    TokenResponse,
    VerifiedResponse,
)

logger = logging.getLogger(__name__)


class VerifyClient:
    def __init__(
        self,
        app_id: str,
        shared_secret: str,
        *,
        endpoints: Endpoints | None = None,
        fetcher: Fetcher | None = None,
    ):
        if not app_id:
            raise ValueError("app_id is required")
        if not shared_secret:
            raise ValueError("shared_secret is required")

        self._identity = ClientIdentity(app_id=app_id, shared_secret=shared_secret)
        self._endpoints = endpoints or Endpoints()
        self._fetcher = fetcher or urllib_fetcher

    @property
    def identity(self) -> ClientIdentity:
        return self._identity

    @property
    def endpoints(self) -> Endpoints:
        return self._endpoints

    def __repr__(self) -> str:
        return f"VerifyClient(app_id={self._identity.app_id!r}, endpoints={self._endpoints!r})"

    def sign(self, params: Parameters, url: str, now_ts: int | None = None) -> SignedRequest:
        return sign_request(params, self._identity, url, now_ts=now_ts)

    def fetch(self, signed: SignedRequest) -> VerifiedResponse:
        endpoint = signed.url.split("?", 1)[0]
        logger.debug("%s %s", signed.method, endpoint)
        try:
            response = self._fetcher(signed.url, signed.method, dict(signed.headers), None)
        except (OSError, http.client.HTTPException) as error:
            raise TransportError(f"Request to {endpoint} failed: {error}") from error

        logger.debug("%s responded with status %s (%d bytes)", endpoint, response.status, len(response.body))
        try:
            return verify_response_signature(
                response.body,
                response_signature(response.headers),
                self._identity.shared_secret,
            )
        except SignatureError as error:
            logger.warning("Discarding response from %s: %s", endpoint, error)
            raise

    def get_token(self, params: Parameters) -> TokenResponse:
        """Request a short-lived token for ``device_id`` / ``source_ip_address``.

        A non-zero ``result_code`` is returned as data.
        """
        verified = self.fetch(self.sign(params, self._endpoints.token_url))
        return decode_token_response(verified)

    def search(self, params: Parameters) -> SearchResponse:
        """Call the search endpoint with parameters that already carry a ``token``."""
        verified = self.fetch(self.sign(params, self._endpoints.search_url))
        return decode_search_response(verified)

    def verify_search(self, params: Parameters) -> SearchResponse:
        """Look up the verification status of ``number`` for ``device_id``.

        ``params`` takes ``device_id``, ``source_ip_address``, ``number`` and
        optionally ``country``; the service validates completeness. A token is
        requested first; if the service refuses it, ``RemoteRejectionError`` is
        raised and the search is not attempted. The search response is returned
        whatever its ``result_code``.
        """
        return SearchFlow(self).run(params)
