"""Cliente de IBM Watson Discovery (v1): configuraciones de colección."""

from __future__ import annotations

import httpx

from adapters.watson.service_core import ServiceCall, ServiceCore, json_body, require_options
from core.config import WatsonSettings
from core.domain.discovery import Configuration, CreateConfigurationOptions

DEFAULT_SERVICE_URL = "https://gateway.watsonplatform.net/discovery/api"


class DiscoveryV1:
    service_name = "discovery"

    def __init__(
        self,
        version: str | None = None,
        *,
        settings: WatsonSettings | None = None,
        service_url: str | None = None,
        auth: httpx.Auth | None = None,
        transport: httpx.BaseTransport | None = None,
        async_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._core = ServiceCore(
            service_name=self.service_name,
            service_version="v1",
            default_url=DEFAULT_SERVICE_URL,
            settings_url_field="discovery_url",
            settings=settings,
            service_url=service_url,
            version=version,
            auth=auth,
            transport=transport,
            async_transport=async_transport,
        )

    @property
    def service_url(self) -> str:
        return self._core.service_url

    def create_configuration(self, options: CreateConfigurationOptions) -> ServiceCall[Configuration]:
        """Crea una configuración de ingesta en un environment.

        Los objetos anidados (`conversions`, `enrichments`, `source`, ...) se
        envían tal cual, omitiendo los campos en `None`.
        """

        options = require_options(options, CreateConfigurationOptions, "create_configuration options")
        payload = json_body(options)
        payload.pop("environment_id", None)

        request = self._core.prepare(
            "POST",
            self._core.build_url(["v1/environments", "configurations"], [options.environment_id]),
            operation_id="createConfiguration",
            json=payload,
        )
        return self._core.call(request, Configuration, operation_id="createConfiguration")
