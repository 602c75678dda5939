"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y verificación TLS de todos los servicios.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.
"""

from __future__ import annotations

import httpx

from core.config import WatsonSettings


def default_headers(settings: WatsonSettings, *, extra_headers: dict[str, str] | None = None) -> dict[str, str]:
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return headers


def build_client(
    settings: WatsonSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` síncrono con los defaults del SDK."""

    settings = settings or WatsonSettings()
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        verify=not settings.disable_ssl_verification,
        transport=transport,
    )


def build_async_client(
    settings: WatsonSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con los defaults del SDK.

    Por qué un builder:
    - Centraliza timeouts/TLS para que todos los servicios se comporten igual.
    - Las cabeceras van en cada `httpx.Request` preparado, no en el cliente.
    """

    settings = settings or WatsonSettings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        verify=not settings.disable_ssl_verification,
        transport=transport,
    )
