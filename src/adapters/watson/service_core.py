"""Núcleo compartido por los clientes de servicio.

Responsabilidad:
- Construir URLs (segmentos + identificadores escapados), query params,
  cabeceras (incluida la de analytics) y cuerpos JSON/multipart.
- Devolver un `ServiceCall`: handle diferido que se resuelve una sola vez,
  de forma síncrona (`execute`) o asíncrona (`await`).

No hay reintentos ni caché: cada llamada es independiente.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from enum import Enum
from typing import Any, Generic, Mapping, Sequence, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel

from adapters.authenticators import build_auth
from adapters.http_client import build_async_client, build_client, default_headers
from core.config import WatsonSettings
from core.domain.base import default_filename
from core.errors import InvalidArgumentError, error_from_response

logger = logging.getLogger(__name__)

T = TypeVar("T")
OptionsT = TypeVar("OptionsT")

ANALYTICS_HEADER = "X-IBMCloud-SDK-Analytics"


def to_wire(value: Any) -> str:
    """Serializa un valor escalar como string de query/form."""

    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return str(value)


def compact(values: Mapping[str, Any] | None) -> dict[str, str]:
    """Descarta los `None` y serializa el resto con `to_wire`."""

    if not values:
        return {}
    return {key: to_wire(value) for key, value in values.items() if value is not None}


def file_part(
    content: Any,
    *,
    filename: str | None,
    content_type: str | None,
    field_name: str,
) -> tuple[str, Any, str]:
    if isinstance(content, bytearray):
        content = bytes(content)
    return (
        filename or default_filename(content, field_name),
        content,
        content_type or "application/octet-stream",
    )


def require_options(options: OptionsT | None, expected: type, name: str) -> OptionsT:
    if options is None:
        raise InvalidArgumentError(f"{name} cannot be null")
    if not isinstance(options, expected):
        raise InvalidArgumentError(f"{name} must be a {expected.__name__}")
    return options


def json_body(model: BaseModel) -> dict[str, Any]:
    return model.model_dump(mode="json", exclude_none=True)


class ServiceCall(Generic[T]):
    """Petición preparada cuyo resultado se obtiene al despacharla.

    - `call.execute()` usa un `httpx.Client`.
    - `await call` (o `await call.execute_async()`) usa un `httpx.AsyncClient`.

    Se despacha como mucho una vez.
    """

    def __init__(
        self,
        request: httpx.Request,
        response_model: type[T] | None,
        *,
        operation_id: str,
        core: ServiceCore,
    ) -> None:
        self.request = request
        self.operation_id = operation_id
        self._response_model = response_model
        self._core = core
        self._dispatched = False

    def _mark_dispatched(self) -> None:
        if self._dispatched:
            raise RuntimeError(f"{self.operation_id}: service call was already executed")
        self._dispatched = True
        logger.debug(
            "dispatching %s %s (operation_id=%s)",
            self.request.method,
            self.request.url,
            self.operation_id,
        )

    def _convert(self, response: httpx.Response) -> T | None:
        logger.debug("%s -> HTTP %s", self.operation_id, response.status_code)
        if not response.is_success:
            error = error_from_response(response)
            logger.warning("%s failed: %s", self.operation_id, error)
            raise error
        if self._response_model is None or not response.content:
            return None
        return self._response_model.model_validate(response.json())  # type: ignore[attr-defined]

    def execute(self) -> T | None:
        self._mark_dispatched()
        with build_client(self._core.settings, transport=self._core.transport) as client:
            response = client.send(self.request, auth=self._core.auth)
        return self._convert(response)

    async def execute_async(self) -> T | None:
        self._mark_dispatched()
        async with build_async_client(self._core.settings, transport=self._core.async_transport) as client:
            response = await client.send(self.request, auth=self._core.auth)
        return self._convert(response)

    def __await__(self):
        return self.execute_async().__await__()


class ServiceCore:
    """Configuración inmutable de un servicio + helpers de construcción de requests."""

    def __init__(
        self,
        *,
        service_name: str,
        service_version: str,
        default_url: str,
        settings: WatsonSettings | None = None,
        settings_url_field: str | None = None,
        service_url: str | None = None,
        version: str | None = None,
        versioned: bool = True,
        auth: httpx.Auth | None = None,
        transport: httpx.BaseTransport | None = None,
        async_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or WatsonSettings()
        self.service_name = service_name
        self.service_version = service_version
        configured_url = getattr(self.settings, settings_url_field) if settings_url_field else None
        self.service_url = (service_url or configured_url or default_url).rstrip("/")

        self.versioned = versioned
        self.version = version or self.settings.version
        if versioned and not self.version:
            raise InvalidArgumentError("version cannot be null")

        self.auth = auth if auth is not None else build_auth(self.settings)
        self.transport = transport
        if async_transport is None and isinstance(transport, httpx.AsyncBaseTransport):
            async_transport = transport
        self.async_transport = async_transport
        self._timeout = httpx.Timeout(self.settings.http_timeout_seconds)

    def build_url(self, segments: Sequence[str], path_params: Sequence[str] = ()) -> str:
        """Intercala segmentos fijos e identificadores (escapados) en la ruta.

        `build_url(["v1/feedback"], ["fb-1"])` -> `<url>/v1/feedback/fb-1`
        `build_url(["v1/environments", "configurations"], ["env"])`
        -> `<url>/v1/environments/env/configurations`
        """

        parts: list[str] = [self.service_url]
        for index, segment in enumerate(segments):
            parts.append(segment.strip("/"))
            if index < len(path_params):
                parts.append(quote(str(path_params[index]), safe=""))
        return "/".join(parts)

    def analytics_header(self, operation_id: str) -> str:
        return (
            f"service_name={self.service_name};"
            f"service_version={self.service_version};"
            f"operation_id={operation_id}"
        )

    def prepare(
        self,
        method: str,
        url: str,
        *,
        operation_id: str,
        params: Mapping[str, Any] | None = None,
        json: Any = None,
        data: Mapping[str, Any] | None = None,
        files: Mapping[str, tuple[str, Any, str]] | None = None,
    ) -> httpx.Request:
        query: dict[str, str] = {}
        if self.versioned and self.version:
            query["version"] = self.version
        query.update(compact(params))

        headers = default_headers(
            self.settings,
            extra_headers={ANALYTICS_HEADER: self.analytics_header(operation_id)},
        )
        return httpx.Request(
            method,
            url,
            params=query,
            headers=headers,
            json=json,
            data=compact(data) or None,
            files=dict(files) if files else None,
            extensions={"timeout": self._timeout.as_dict()},
        )

    def call(self, request: httpx.Request, response_model: type[T] | None, *, operation_id: str) -> ServiceCall[T]:
        return ServiceCall(request, response_model, operation_id=operation_id, core=self)
