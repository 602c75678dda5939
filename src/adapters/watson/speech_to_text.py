"""Cliente de IBM Watson Speech to Text (v1): modelos acústicos personalizados.

Speech to Text no usa fecha de versión en la query.
"""

from __future__ import annotations

import httpx

from adapters.watson.service_core import ServiceCall, ServiceCore, require_options
from core.config import WatsonSettings
from core.domain.speech_to_text import DeleteAcousticModelOptions

DEFAULT_SERVICE_URL = "https://stream.watsonplatform.net/speech-to-text/api"


class SpeechToTextV1:
    service_name = "speech_to_text"

    def __init__(
        self,
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
            settings_url_field="speech_to_text_url",
            settings=settings,
            service_url=service_url,
            versioned=False,
            auth=auth,
            transport=transport,
            async_transport=async_transport,
        )

    @property
    def service_url(self) -> str:
        return self._core.service_url

    def delete_acoustic_model(self, options: DeleteAcousticModelOptions) -> ServiceCall[None]:
        """Elimina un modelo acústico personalizado."""

        options = require_options(options, DeleteAcousticModelOptions, "delete_acoustic_model options")
        request = self._core.prepare(
            "DELETE",
            self._core.build_url(["v1/acoustic_customizations"], [options.customization_id]),
            operation_id="deleteAcousticModel",
        )
        return self._core.call(request, None, operation_id="deleteAcousticModel")
