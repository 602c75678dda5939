"""Speech to Text: opciones de modelos acústicos personalizados."""

from __future__ import annotations

from pydantic import Field

from core.domain.base import BaseOptions, RequiredStr


class DeleteAcousticModelOptions(BaseOptions):
    customization_id: RequiredStr = Field(
        ...,
        description=(
            "GUID del modelo acústico personalizado. La petición debe hacerse con "
            "credenciales de la instancia dueña del modelo."
        ),
    )
