"""Cliente de IBM Watson Natural Language Understanding (v1)."""

from __future__ import annotations

import httpx

from adapters.watson.service_core import ServiceCall, ServiceCore, json_body, require_options
from core.config import WatsonSettings
from core.domain.natural_language_understanding import AnalysisResults, AnalyzeOptions

DEFAULT_SERVICE_URL = "https://gateway.watsonplatform.net/natural-language-understanding/api"


class NaturalLanguageUnderstandingV1:
    service_name = "natural-language-understanding"

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
            settings_url_field="natural_language_understanding_url",
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

    def analyze(self, options: AnalyzeOptions) -> ServiceCall[AnalysisResults]:
        """Analiza texto, HTML o una URL pública con las features pedidas."""

        options = require_options(options, AnalyzeOptions, "analyze options")
        request = self._core.prepare(
            "POST",
            self._core.build_url(["v1/analyze"]),
            operation_id="analyze",
            json=json_body(options),
        )
        return self._core.call(request, AnalysisResults, operation_id="analyze")
