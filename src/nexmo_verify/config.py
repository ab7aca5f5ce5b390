"""Credential and endpoint resolution for command-line use."""

from __future__ import annotations

import os
from dataclasses import dataclass

from nexmo_verify.types import DEFAULT_SEARCH_URL, DEFAULT_TOKEN_URL, Endpoints

ENV_APP_ID = "NEXMO_APP_ID"
ENV_SHARED_SECRET = "NEXMO_SHARED_SECRET"
ENV_TOKEN_URL = "NEXMO_TOKEN_URL"
ENV_SEARCH_URL = "NEXMO_SEARCH_URL"


@dataclass(frozen=True)
class ClientSettings:
    app_id: str
    shared_secret: str
    endpoints: Endpoints


def _resolve(explicit: str | None, env_name: str, default: str | None = None) -> str | None:
    return explicit or os.environ.get(env_name) or default


def resolve_endpoints(token_url: str | None = None, search_url: str | None = None) -> Endpoints:
    return Endpoints(
        token_url=_resolve(token_url, ENV_TOKEN_URL, DEFAULT_TOKEN_URL),
        search_url=_resolve(search_url, ENV_SEARCH_URL, DEFAULT_SEARCH_URL),
    )


def resolve_settings(
    app_id: str | None = None,
    shared_secret: str | None = None,
    token_url: str | None = None,
    search_url: str | None = None,
) -> ClientSettings:
    resolved_app_id = _resolve(app_id, ENV_APP_ID)
    if not resolved_app_id:
        raise ValueError(f"Application id is required. Pass --app-id or set {ENV_APP_ID}.")

    resolved_secret = _resolve(shared_secret, ENV_SHARED_SECRET)
    if not resolved_secret:
        raise ValueError(f"Shared secret is required. Pass --secret or set {ENV_SHARED_SECRET}.")

    return ClientSettings(
        app_id=resolved_app_id,
        shared_secret=resolved_secret,
        endpoints=resolve_endpoints(token_url, search_url),
    )
