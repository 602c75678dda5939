"""Natural Language Understanding: análisis de texto (roles semánticos).

Solo se modela en detalle la feature `semantic_roles`; el resto de features
se envían/reciben como diccionarios.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, model_validator

from core.domain.base import BaseOptions, DataModel


class SemanticRolesOptions(DataModel):
    limit: int | None = None
    keywords: bool | None = None
    entities: bool | None = None


class Features(DataModel):
    """Features a analizar; al menos una debe estar presente."""

    semantic_roles: SemanticRolesOptions | None = None
    categories: dict[str, Any] | None = None
    concepts: dict[str, Any] | None = None
    emotion: dict[str, Any] | None = None
    entities: dict[str, Any] | None = None
    keywords: dict[str, Any] | None = None
    metadata: dict[str, Any] | None = None
    relations: dict[str, Any] | None = None
    sentiment: dict[str, Any] | None = None


class AnalyzeOptions(BaseOptions):
    """Opciones de `analyze`. Se debe indicar `text`, `html` o `url`."""

    features: Features
    text: str | None = None
    html: str | None = None
    url: str | None = None
    clean: bool | None = None
    xpath: str | None = None
    fallback_to_raw: bool | None = None
    return_analyzed_text: bool | None = None
    language: str | None = Field(default=None, description="Código ISO 639-1; si falta, el servicio lo detecta.")
    limit_text_characters: int | None = None

    @model_validator(mode="after")
    def _require_input(self) -> "AnalyzeOptions":
        if self.text is None and self.html is None and self.url is None:
            raise ValueError("one of text, html or url is required")
        return self


class SemanticRolesKeyword(DataModel):
    text: str | None = None


class SemanticRolesEntity(DataModel):
    type: str | None = None
    text: str | None = None


class SemanticRolesVerb(DataModel):
    text: str | None = None
    tense: str | None = None


class SemanticRolesResultSubject(DataModel):
    text: str | None = None
    entities: list[SemanticRolesEntity] | None = None
    keywords: list[SemanticRolesKeyword] | None = None


class SemanticRolesResultAction(DataModel):
    text: str | None = None
    normalized: str | None = None
    verb: SemanticRolesVerb | None = None


class SemanticRolesResultObject(DataModel):
    """Objeto extraído de la oración."""

    text: str | None = None
    keywords: list[SemanticRolesKeyword] | None = None


class SemanticRolesResult(DataModel):
    sentence: str | None = None
    subject: SemanticRolesResultSubject | None = None
    action: SemanticRolesResultAction | None = None
    object: SemanticRolesResultObject | None = None


class AnalysisResults(DataModel):
    language: str | None = None
    analyzed_text: str | None = None
    retrieved_url: str | None = None
    usage: dict[str, Any] | None = None
    semantic_roles: list[SemanticRolesResult] | None = None
