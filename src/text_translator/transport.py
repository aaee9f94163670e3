from __future__ import annotations

from typing import Any
from urllib.parse import quote

import requests

from .errors import DecodeError, TransportError


DEFAULT_USER_AGENT = "text-translator/0.1"
DEFAULT_TIMEOUT = 30.0


def redact(message: str, secrets: tuple[str, ...]) -> str:
    for secret in secrets:
        if not secret:
            continue
        for form in {secret, quote(secret, safe=""), quote(secret)}:
            message = message.replace(form, "***")
    return message


def send(
    session: requests.Session | None,
    url: str,
    *,
    provider: str,
    params: dict[str, Any] | None = None,
    data: dict[str, Any] | None = None,
    json: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    secrets: tuple[str, ...] = (),
) -> requests.Response:
    # without an injected session, requests.post opens and closes one per call
    client = session if session is not None else requests
    try:
        return client.post(
            url, params=params, data=data, json=json, headers=headers, timeout=timeout
        )
    except requests.RequestException as exc:
        raise TransportError(provider, redact(str(exc), secrets)) from exc


def decode_json(resp: requests.Response, provider: str) -> dict[str, Any]:
    try:
        payload = resp.json()
    except ValueError as exc:
        raise DecodeError(provider, "body is not valid JSON") from exc
    if not isinstance(payload, dict):
        raise DecodeError(provider, f"expected a JSON object, got {type(payload).__name__}")
    return payload


def error_payload(resp: requests.Response) -> dict[str, Any]:
    # error bodies are best effort; a non-JSON body still yields a ProviderError
    try:
        payload = resp.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}
