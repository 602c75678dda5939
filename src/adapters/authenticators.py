"""Autenticadores (`httpx.Auth`) para los servicios de IBM Cloud.

Soporta:
- Bearer token gestionado por el usuario.
- API key IAM: se intercambia por un access token y se reutiliza hasta poco
  antes de expirar.
- Usuario/contraseña (`httpx.BasicAuth`).
"""

from __future__ import annotations

import base64
import logging
import time
from typing import Callable, Generator

import httpx

from core.config import WatsonSettings
from core.errors import InvalidArgumentError, raise_for_response

logger = logging.getLogger(__name__)

_IAM_GRANT_TYPE = "urn:ibm:params:oauth:grant-type:apikey"
# Cliente "bx:bx" que usan los SDKs de IBM Cloud para el intercambio de API keys.
_IAM_CLIENT_AUTH = "Basic " + base64.b64encode(b"bx:bx").decode("ascii")


class BearerTokenAuth(httpx.Auth):
    def __init__(self, token: str) -> None:
        if not token:
            raise InvalidArgumentError("bearer token cannot be empty")
        self._token = token

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self._token}"
        yield request


class IamTokenAuth(httpx.Auth):
    """Intercambia una API key por un access token IAM.

    El token se renueva cuando ha consumido el 80% de su vida útil.
    """

    requires_response_body = True

    def __init__(
        self,
        apikey: str,
        *,
        url: str = "https://iam.cloud.ibm.com/identity/token",
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not apikey:
            raise InvalidArgumentError("apikey cannot be empty")
        self._apikey = apikey
        self._url = url
        self._clock = clock
        self._access_token: str | None = None
        self._refresh_at = 0.0

    def _token_is_valid(self) -> bool:
        return self._access_token is not None and self._clock() < self._refresh_at

    def _build_token_request(self) -> httpx.Request:
        return httpx.Request(
            "POST",
            self._url,
            data={
                "grant_type": _IAM_GRANT_TYPE,
                "apikey": self._apikey,
                "response_type": "cloud_iam",
            },
            headers={"Accept": "application/json", "Authorization": _IAM_CLIENT_AUTH},
        )

    def _store_token(self, response: httpx.Response) -> None:
        raise_for_response(response)
        payload = response.json()
        token = payload.get("access_token")
        if not isinstance(token, str) or not token:
            raise InvalidArgumentError("IAM token response did not include an access_token")
        expires_in = payload.get("expires_in")
        now = self._clock()
        lifetime = float(expires_in) if isinstance(expires_in, (int, float)) else 3600.0
        self._access_token = token
        self._refresh_at = now + lifetime * 0.8
        logger.debug("IAM access token refreshed (valid for %.0fs)", lifetime)

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        if not self._token_is_valid():
            token_response = yield self._build_token_request()
            self._store_token(token_response)
        request.headers["Authorization"] = f"Bearer {self._access_token}"
        yield request


def build_auth(settings: WatsonSettings) -> httpx.Auth | None:
    """Elige el autenticador según la configuración.

    Prioridad: `bearer_token` > `apikey` > `username`/`password`. Devuelve
    `None` si no hay credenciales (p.ej. servicios detrás de un proxy propio).
    """

    if settings.bearer_token:
        return BearerTokenAuth(settings.bearer_token)
    if settings.apikey:
        return IamTokenAuth(settings.apikey, url=settings.iam_url)
    if settings.username and settings.password:
        return httpx.BasicAuth(settings.username, settings.password)
    return None
