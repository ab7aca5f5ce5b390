"""Shared datatypes for the Nexmo Verify Python client."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple, Union

# Fixed client identity declared on every request. The service expects the
# values sent by the reference Android SDK; they are not secrets.
OS_FAMILY = "ANDROID"
OS_REVISION = "23"
SDK_REVISION = "1.0"

DEFAULT_TOKEN_URL = "https://api.nexmo.com/sdk/token/json"
DEFAULT_SEARCH_URL = "https://api.nexmo.com/sdk/verify/search/json"


@dataclass(frozen=True)
class ClientIdentity:
    app_id: str
    shared_secret: str = field(repr=False)
    os_family: str = OS_FAMILY
    os_revision: str = OS_REVISION
    sdk_revision: str = SDK_REVISION


@dataclass(frozen=True)
class Endpoints:
    token_url: str = DEFAULT_TOKEN_URL
    search_url: str = DEFAULT_SEARCH_URL


@dataclass(frozen=True)
class SignedRequest:
    url: str
    method: str
    headers: dict[str, str]
    params: dict[str, str]


@dataclass(frozen=True)
class RawResponse:
    status: int
    headers: dict[str, str]
    body: bytes


@dataclass(frozen=True)
class VerifiedResponse:
    body: bytes
    signature_valid: bool


@dataclass(frozen=True)
class TokenResponse:
    result_code: int = 0
    result_message: str = ""
    timestamp: str = ""
    token: str = ""


@dataclass(frozen=True)
class SearchResponse:
    result_code: int = 0
    result_message: str = ""
    timestamp: str = ""
    user_status: str = ""


HeaderInput = Union[Mapping[str, str], Iterable[Tuple[str, str]]]

Parameters = Mapping[str, Any]

Fetcher = Callable[[str, str, Dict[str, str], Optional[bytes]], RawResponse]
