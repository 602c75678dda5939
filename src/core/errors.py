"""Errores del SDK.

Taxonomía:
- `InvalidArgumentError`: argumentos inválidos detectados antes de tocar la red.
- `ServiceResponseError`: respuesta HTTP no-2xx del servicio (con subclases por status).
- Los fallos de transporte (`httpx.TransportError`) se propagan sin envolver.
"""

from __future__ import annotations

from typing import Any

import httpx


class WatsonError(Exception):
    """Base de todos los errores propios del SDK."""


class InvalidArgumentError(WatsonError, ValueError):
    """Un campo requerido falta, está vacío o tiene un valor fuera del conjunto permitido."""


class ServiceResponseError(WatsonError):
    """El servicio respondió con un status fuera del rango 2xx."""

    def __init__(
        self,
        status_code: int,
        message: str,
        *,
        body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.body = body
        self.headers = headers or {}
        super().__init__(f"Error: {message}, Status code: {status_code}")

    @property
    def transaction_id(self) -> str | None:
        for key, value in self.headers.items():
            if key.lower() == "x-global-transaction-id":
                return value
        return None


class BadRequestError(ServiceResponseError):
    pass


class UnauthorizedError(ServiceResponseError):
    pass


class ForbiddenError(ServiceResponseError):
    pass


class NotFoundError(ServiceResponseError):
    pass


class ConflictError(ServiceResponseError):
    pass


class RequestTooLargeError(ServiceResponseError):
    pass


class UnsupportedMediaTypeError(ServiceResponseError):
    pass


class TooManyRequestsError(ServiceResponseError):
    pass


class InternalServerError(ServiceResponseError):
    pass


class ServiceUnavailableError(ServiceResponseError):
    pass


_STATUS_ERRORS: dict[int, type[ServiceResponseError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    413: RequestTooLargeError,
    415: UnsupportedMediaTypeError,
    429: TooManyRequestsError,
    500: InternalServerError,
    503: ServiceUnavailableError,
}


def _extract_message(payload: Any) -> str | None:
    if not isinstance(payload, dict):
        return None
    for key in ("error", "message", "errorMessage"):
        value = payload.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
        # Algunos servicios anidan {"error": {"message": ...}}.
        if isinstance(value, dict):
            nested = _extract_message(value)
            if nested:
                return nested
    return None


def error_from_response(response: httpx.Response) -> ServiceResponseError:
    """Construye el error tipado correspondiente a una respuesta no-2xx."""

    body: Any
    try:
        body = response.json()
    except ValueError:
        body = response.text or None

    message = _extract_message(body) or response.reason_phrase or "Unknown error"
    error_cls = _STATUS_ERRORS.get(response.status_code, ServiceResponseError)
    return error_cls(
        response.status_code,
        message,
        body=body,
        headers=dict(response.headers),
    )


def raise_for_response(response: httpx.Response) -> None:
    if response.is_success:
        return
    raise error_from_response(response)
