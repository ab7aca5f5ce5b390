"""Request signing and response signature verification for Nexmo SDK endpoints."""

from __future__ import annotations

import hashlib
import hmac
import re
from collections.abc import Mapping
from datetime import datetime, timezone
from urllib.parse import urlencode

from nexmo_verify.errors import InvalidSignatureError, MissingSignatureError
from nexmo_verify.types import (
    ClientIdentity,
    HeaderInput,
    Parameters,
    SignedRequest,
    VerifiedResponse,
)

RESPONSE_SIGNATURE_HEADER = "x-nexmo-response-signature"

_TOKEN_RESERVED_PATTERN = re.compile(r"[&,=]")


def _md5_hex(value: bytes) -> str:
    return hashlib.md5(value).hexdigest()


def normalize_headers(headers: HeaderInput | None) -> dict[str, str]:
    """Lower-case header names; a repeated name keeps its last value."""
    if headers is None:
        return {}
    pairs = headers.items() if isinstance(headers, Mapping) else headers
    return {str(name).lower(): str(value) for name, value in pairs}


def _normalize_body(body: bytes | str | None) -> bytes:
    if body is None:
        return b""
    if isinstance(body, bytes):
        return body
    if isinstance(body, str):
        return body.encode("utf-8")
    raise ValueError("Unsupported body type. Use bytes, str, or None.")


def _canonical_value(key: str, value: str) -> str:
    # '&', ',' and '=' would break the canonical string's own syntax.
    if key == "token":
        return _TOKEN_RESERVED_PATTERN.sub("_", value)
    return value


def canonical_string(params: Parameters) -> str:
    return "".join(
        f"&{key}={_canonical_value(key, str(params[key]))}" for key in sorted(params)
    )


def compute_signature(params: Parameters, shared_secret: str) -> str:
    """Return the lowercase hex MD5 of the canonical parameter string plus secret.

    An empty parameter set signs to the empty string.
    """
    base = canonical_string(params)
    if not base:
        return ""
    return _md5_hex((base + shared_secret).encode("utf-8"))


def build_signed_parameters(
    params: Parameters,
    identity: ClientIdentity,
    now_ts: int | None = None,
) -> dict[str, str]:
    signed = {str(key): str(value) for key, value in params.items()}
    signed.pop("sig", None)

    timestamp = now_ts if now_ts is not None else int(datetime.now(timezone.utc).timestamp())
    signed["app_id"] = identity.app_id
    signed["timestamp"] = str(timestamp)
    signed["sig"] = compute_signature(signed, identity.shared_secret)
    return signed


def encode_query_string(params: Parameters) -> str:
    return urlencode(sorted((key, str(value)) for key, value in params.items()))


def build_request_headers(identity: ClientIdentity) -> dict[str, str]:
    return {
        "Content-Type": "application/x-www-form-urlencoded",
        "Content-Encoding": "UTF-8",
        "X-NEXMO-SDK-OS-FAMILY": identity.os_family,
        "X-NEXMO-SDK-OS-REVISION": identity.os_revision,
        "X-NEXMO-SDK-REVISION": identity.sdk_revision,
    }


def sign_request(
    params: Parameters,
    identity: ClientIdentity,
    url: str,
    now_ts: int | None = None,
) -> SignedRequest:
    signed = build_signed_parameters(params, identity, now_ts=now_ts)
    return SignedRequest(
        url=f"{url}?{encode_query_string(signed)}",
        method="GET",
        headers=build_request_headers(identity),
        params=signed,
    )


def response_signature(headers: HeaderInput | None) -> str | None:
    return normalize_headers(headers).get(RESPONSE_SIGNATURE_HEADER)


def verify_response_signature(
    body: bytes | str | None,
    signature: str | None,
    shared_secret: str,
) -> VerifiedResponse:
    """Check ``signature`` against ``md5(body + shared_secret)``.

    The body is hashed exactly as received. Raises ``MissingSignatureError`` for
    an absent or empty header and ``InvalidSignatureError`` on mismatch.
    """
    if not signature:
        raise MissingSignatureError()

    body_bytes = _normalize_body(body)
    expected = _md5_hex(body_bytes + shared_secret.encode("utf-8"))
    if not hmac.compare_digest(expected.encode("ascii"), signature.encode("utf-8")):
        raise InvalidSignatureError()

    return VerifiedResponse(body=body_bytes, signature_valid=True)
