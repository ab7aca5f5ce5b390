"""Two-step verify search: acquire a token, then run the token-scoped search."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from nexmo_verify.errors import RemoteRejectionError
from nexmo_verify.types import Parameters, SearchResponse, TokenResponse

if TYPE_CHECKING:
    from nexmo_verify.client import VerifyClient

logger = logging.getLogger(__name__)

TOKEN_PARAMETERS = ("device_id", "source_ip_address")


class FlowState(str, Enum):
    PENDING = "pending"
    TOKEN_REQUESTED = "token_requested"
    SEARCH_REQUESTED = "search_requested"
    COMPLETED = "completed"
    FAILED = "failed"


def token_parameters(params: Parameters) -> dict[str, str]:
    return {key: str(params.get(key, "")) for key in TOKEN_PARAMETERS}


def search_parameters(params: Parameters, token: str) -> dict[str, str]:
    out = {str(key): str(value) for key, value in params.items()}
    out["token"] = token
    return out


class SearchFlow:
    """Single-use state machine for one verify search.

    TOKEN_REQUESTED moves to SEARCH_REQUESTED only when the token response has
    ``result_code == 0``. Every other outcome ends in FAILED with the error
    raised to the caller.
    """

    def __init__(self, client: VerifyClient):
        self._client = client
        self.state = FlowState.PENDING
        self.token_response: TokenResponse | None = None

    def _request_token(self, params: Parameters) -> TokenResponse:
        self.state = FlowState.TOKEN_REQUESTED
        self.token_response = self._client.get_token(token_parameters(params))
        return self.token_response

    @staticmethod
    def _guard_search(token_response: TokenResponse) -> None:
        if token_response.result_code != 0:
            logger.warning(
                "Token request rejected: result_code=%s message=%r",
                token_response.result_code,
                token_response.result_message,
            )
            raise RemoteRejectionError(
                token_response.result_code,
                token_response.result_message,
                response=token_response,
            )

    def _request_search(self, params: Parameters, token: str) -> SearchResponse:
        self.state = FlowState.SEARCH_REQUESTED
        return self._client.search(search_parameters(params, token))

    def run(self, params: Parameters) -> SearchResponse:
        if self.state is not FlowState.PENDING:
            raise RuntimeError(f"SearchFlow already used (state={self.state.value})")

        try:
            token_response = self._request_token(params)
            self._guard_search(token_response)
            result = self._request_search(params, token_response.token)
        except Exception:
            self.state = FlowState.FAILED
            raise

        self.state = FlowState.COMPLETED
        return result
