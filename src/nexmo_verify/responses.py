"""Decoding of authenticated response bodies."""

from __future__ import annotations

import json
from typing import Any, Dict

from nexmo_verify.errors import DecodeError
from nexmo_verify.types import SearchResponse, TokenResponse, VerifiedResponse


def _load_object(verified: VerifiedResponse) -> Dict[str, Any]:
    if not isinstance(verified, VerifiedResponse) or not verified.signature_valid:
        raise DecodeError("Refusing to decode a response whose signature was not validated")

    try:
        raw = json.loads(verified.body.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as error:
        raise DecodeError(f"Response body is not valid JSON: {error}") from error

    if not isinstance(raw, dict):
        raise DecodeError("Response body must be a JSON object")
    return raw


def _int_field(raw: Dict[str, Any], name: str) -> int:
    value: Any = raw.get(name, 0)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"Field '{name}' must be an integer")
    return value


def _str_field(raw: Dict[str, Any], name: str) -> str:
    value: Any = raw.get(name, "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"Field '{name}' must be a string")
    return value


def decode_token_response(verified: VerifiedResponse) -> TokenResponse:
    raw = _load_object(verified)
    return TokenResponse(
        result_code=_int_field(raw, "result_code"),
        result_message=_str_field(raw, "result_message"),
        timestamp=_str_field(raw, "timestamp"),
        token=_str_field(raw, "token"),
    )


def decode_search_response(verified: VerifiedResponse) -> SearchResponse:
    raw = _load_object(verified)
    return SearchResponse(
        result_code=_int_field(raw, "result_code"),
        result_message=_str_field(raw, "result_message"),
        timestamp=_str_field(raw, "timestamp"),
        user_status=_str_field(raw, "user_status"),
    )
