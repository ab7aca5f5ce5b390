from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import parse_qsl, urlsplit

import pytest

from nexmo_verify.types import DEFAULT_SEARCH_URL, DEFAULT_TOKEN_URL, RawResponse

APP_ID = "aa6215a6-2c00-4625-85e9-6426bb377027"
SHARED_SECRET = "f3ac8cc9b1ddde5"
DEVICE_ID = "fq_7le_qTzY:APA91bEm38BfOBh4hDEWHyKe0FdNJPpyJ86hX9VX_0Zq6clsrhPm0ZKkI2ZlxTw4DToTFF768rS-"


def sign_body(body: bytes, secret: str = SHARED_SECRET) -> str:
    return hashlib.md5(body + secret.encode("utf-8")).hexdigest()


@dataclass
class CapturedRequest:
    url: str
    method: str
    headers: dict[str, str]
    body: bytes | None

    @property
    def endpoint(self) -> str:
        parts = urlsplit(self.url)
        return f"{parts.scheme}://{parts.netloc}{parts.path}"

    @property
    def params(self) -> dict[str, str]:
        return dict(parse_qsl(urlsplit(self.url).query, keep_blank_values=True))


@dataclass
class FakeService:
    """Fetcher double answering signed JSON bodies per endpoint."""

    secret: str = SHARED_SECRET
    routes: dict[str, RawResponse] = field(default_factory=dict)
    requests: list[CapturedRequest] = field(default_factory=list)

    def respond(
        self,
        url: str,
        payload: Any,
        *,
        status: int = 200,
        signature: str | None = None,
        sign: bool = True,
    ) -> bytes:
        body = payload if isinstance(payload, bytes) else json.dumps(payload, indent=4).encode("utf-8")
        headers = {"content-type": "application/json"}
        if sign:
            headers["x-nexmo-response-signature"] = signature if signature is not None else sign_body(body, self.secret)
        self.routes[url] = RawResponse(status=status, headers=headers, body=body)
        return body

    def __call__(self, url: str, method: str, headers: dict[str, str], body: bytes | None) -> RawResponse:
        captured = CapturedRequest(url=url, method=method, headers=headers, body=body)
        self.requests.append(captured)
        return self.routes[captured.endpoint]

    def requests_to(self, url: str) -> list[CapturedRequest]:
        return [request for request in self.requests if request.endpoint == url]


@pytest.fixture
def service() -> FakeService:
    return FakeService()


def token_ok(token: str = "abc123") -> dict[str, Any]:
    return {"result_code": 0, "result_message": "OK", "timestamp": "1459272734", "token": token}


def token_error() -> dict[str, Any]:
    return {"result_code": 51, "result_message": "Missing source_ip_address", "timestamp": "1459272734"}


def search_ok(user_status: str = "unknown") -> dict[str, Any]:
    return {"result_code": 0, "result_message": "OK", "timestamp": "1459272735", "user_status": user_status}


TOKEN_URL = DEFAULT_TOKEN_URL
SEARCH_URL = DEFAULT_SEARCH_URL
