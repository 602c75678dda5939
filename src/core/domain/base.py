"""Bases compartidas por los modelos de opciones y de respuesta (Pydantic v2).

Reglas:
- Las opciones son inmutables y se validan al construirse; cualquier fallo se
  reporta como `InvalidArgumentError` antes de tocar la red.
- Las respuestas son tolerantes: campos opcionales y claves desconocidas ignoradas.
"""

from __future__ import annotations

import os
from typing import Annotated, Any, Self

from pydantic import BaseModel, BeforeValidator, Field, ValidationError
from pydantic.config import ConfigDict

from core.errors import InvalidArgumentError


def _check_file_content(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return value
    if callable(getattr(value, "read", None)):
        return value
    raise ValueError("file must be bytes or a readable binary stream")


# bytes o un stream binario (`open(path, "rb")`, `io.BytesIO`, ...).
FileContent = Annotated[Any, BeforeValidator(_check_file_content)]

# Campo requerido: ni `None` ni cadena vacía.
RequiredStr = Annotated[str, Field(min_length=1)]


def default_filename(content: Any, fallback: str) -> str:
    """Nombre de archivo para una parte multipart.

    Usa el basename del atributo `name` del stream (p.ej. archivos abiertos con
    `open`) y, si no existe, el nombre del campo.
    """

    name = getattr(content, "name", None)
    if isinstance(name, str) and name and not name.startswith("<"):
        return os.path.basename(name)
    return fallback


class BaseOptions(BaseModel):
    """Contenedor inmutable de parámetros para una operación de la API."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        arbitrary_types_allowed=True,
        protected_namespaces=(),
    )

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise InvalidArgumentError(_format_validation_error(type(self).__name__, exc)) from exc

    def copy_with(self, **changes: Any) -> Self:
        """Devuelve una copia revalidada con `changes` aplicados.

        Sin argumentos produce una instancia igual campo a campo.
        """

        values = {name: getattr(self, name) for name in type(self).model_fields}
        values.update(changes)
        return type(self)(**values)


class DataModel(BaseModel):
    """DTO que refleja el JSON del servicio, sin comportamiento.

    Se usa para respuestas y también para objetos anidados en payloads JSON.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", protected_namespaces=())


class OpenDataModel(DataModel):
    """DTO que conserva las claves no declaradas y las reenvía tal cual en el payload."""

    model_config = ConfigDict(frozen=True, extra="allow", protected_namespaces=())


def _format_validation_error(model_name: str, exc: ValidationError) -> str:
    parts: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or model_name
        if err.get("type") == "missing":
            parts.append(f"{loc} cannot be empty")
        else:
            parts.append(f"{loc}: {err.get('msg')}")
    return f"{model_name}: " + "; ".join(parts)
