"""Discovery: configuración de colecciones (opciones y modelos).

Los modelos de `Configuration` se usan en ambos sentidos: como respuesta de
`create_configuration` y como bloques anidados del payload JSON de la petición.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import Field

from core.domain.base import BaseOptions, DataModel, OpenDataModel, RequiredStr


class NormalizationOperation(DataModel):
    """Transformación aplicada al JSON final (`copy`, `move`, `merge`, `remove`, `remove_nulls`)."""

    operation: str | None = None
    source_field: str | None = None
    destination_field: str | None = None


class Conversions(OpenDataModel):
    pdf: dict[str, Any] | None = None
    word: dict[str, Any] | None = None
    html: dict[str, Any] | None = None
    segment: dict[str, Any] | None = None
    json_normalizations: list[NormalizationOperation] | None = None
    image_text_recognition: bool | None = None


class Enrichment(OpenDataModel):
    description: str | None = None
    destination_field: str | None = None
    source_field: str | None = None
    overwrite: bool | None = None
    enrichment: str | None = Field(default=None, description="Nombre del enrichment (p.ej. `natural_language_understanding`).")
    ignore_downstream_errors: bool | None = None
    options: dict[str, Any] | None = None


class SourceSchedule(DataModel):
    enabled: bool | None = None
    time_zone: str | None = None
    frequency: str | None = None


class SourceOptionsFolder(DataModel):
    owner_user_id: str | None = None
    folder_id: str | None = None
    limit: int | None = None


class SourceOptionsObject(DataModel):
    name: str | None = None
    limit: int | None = None


class SourceOptionsSiteColl(DataModel):
    site_collection_path: str | None = None
    limit: int | None = None


class SourceOptionsWebCrawl(DataModel):
    url: str | None = None
    limit_to_starting_hosts: bool | None = None
    crawl_speed: str | None = None
    allow_untrusted_certificate: bool | None = None
    maximum_hops: int | None = None
    request_timeout: int | None = None
    override_robots_txt: bool | None = None
    blacklist: list[str] | None = None


class SourceOptionsBuckets(DataModel):
    name: str | None = None
    limit: int | None = None


class SourceOptions(DataModel):
    """Qué elementos rastrear en el sistema de origen.

    Cada lista solo aplica a un `Source.type`:
    - `folders`: `box`
    - `objects`: `salesforce`
    - `site_collections`: `sharepoint`
    - `urls`: `web_crawl`
    - `buckets` / `crawl_all_buckets`: `cloud_object_store` (mutuamente excluyentes)
    """

    folders: list[SourceOptionsFolder] | None = None
    objects: list[SourceOptionsObject] | None = None
    site_collections: list[SourceOptionsSiteColl] | None = None
    urls: list[SourceOptionsWebCrawl] | None = None
    buckets: list[SourceOptionsBuckets] | None = None
    crawl_all_buckets: bool | None = None


class Source(DataModel):
    type: str | None = None
    credential_id: str | None = None
    schedule: SourceSchedule | None = None
    options: SourceOptions | None = None


class Configuration(DataModel):
    """Configuración de ingesta de una colección."""

    configuration_id: str | None = None
    name: str | None = None
    created: datetime | None = None
    updated: datetime | None = None
    description: str | None = None
    conversions: Conversions | None = None
    enrichments: list[Enrichment] | None = None
    normalizations: list[NormalizationOperation] | None = None
    source: Source | None = None


class CreateConfigurationOptions(BaseOptions):
    """Opciones de `create_configuration`."""

    environment_id: RequiredStr = Field(..., description="ID del environment.")
    name: str | None = None
    description: str | None = None
    conversions: Conversions | None = None
    enrichments: list[Enrichment] | None = None
    normalizations: list[NormalizationOperation] | None = None
    source: Source | None = None

    @classmethod
    def from_configuration(cls, environment_id: str, configuration: Configuration) -> "CreateConfigurationOptions":
        """Crea opciones a partir de una `Configuration` existente (p.ej. para clonarla)."""

        return cls(
            environment_id=environment_id,
            name=configuration.name,
            description=configuration.description,
            conversions=configuration.conversions,
            enrichments=configuration.enrichments,
            normalizations=configuration.normalizations,
            source=configuration.source,
        )
