"""Opciones de las operaciones de Compare and Comply.

Cada clase agrupa los parámetros de una operación:
- Los requeridos se validan al construir (`InvalidArgumentError`).
- Los opcionales quedan en `None` y no se envían.
- `copy_with(**changes)` deriva una copia modificada.
"""

from __future__ import annotations

from datetime import date

from pydantic import Field

from core.domain.base import BaseOptions, FileContent, RequiredStr
from core.domain.compare_comply.enums import BatchAction, BatchFunction, ModelId


class _SingleFileOptions(BaseOptions):
    file: FileContent = Field(..., description="Documento de entrada (bytes o stream binario).")
    filename: str | None = Field(default=None, description="Nombre del archivo enviado en la parte multipart.")
    file_content_type: str | None = Field(
        default=None,
        description="Content type del archivo; si falta se envía `application/octet-stream`.",
    )
    model_id: ModelId | None = None


class ConvertToHtmlOptions(_SingleFileOptions):
    """Opciones de `convert_to_html`."""


class ClassifyElementsOptions(_SingleFileOptions):
    """Opciones de `classify_elements`."""


class ExtractTablesOptions(_SingleFileOptions):
    """Opciones de `extract_tables`."""


class CompareDocumentsOptions(BaseOptions):
    """Opciones de `compare_documents`. Ambos archivos deben tener el mismo formato."""

    file_1: FileContent
    file_2: FileContent
    file_1_filename: str | None = None
    file_1_content_type: str | None = None
    file_2_filename: str | None = None
    file_2_content_type: str | None = None
    file_1_label: str | None = Field(default=None, description="Etiqueta del primer documento (server default: `file_1`).")
    file_2_label: str | None = Field(default=None, description="Etiqueta del segundo documento (server default: `file_2`).")
    model_id: ModelId | None = None


# --- Feedback ----------------------------------------------------------------


class LocationIn(BaseOptions):
    """Offsets (en caracteres) del elemento dentro del HTML de entrada."""

    begin: int
    end: int


class LabelIn(BaseOptions):
    nature: RequiredStr
    party: RequiredStr


class TypeLabelIn(BaseOptions):
    label: LabelIn
    provenance_ids: list[str] | None = None


class CategoryIn(BaseOptions):
    label: RequiredStr
    provenance_ids: list[str] | None = None


class ShortDocIn(BaseOptions):
    title: str | None = None
    hash: str | None = None


class OriginalLabelsIn(BaseOptions):
    types: list[TypeLabelIn]
    categories: list[CategoryIn]


class UpdatedLabelsIn(BaseOptions):
    types: list[TypeLabelIn]
    categories: list[CategoryIn]


class FeedbackDataInput(BaseOptions):
    """Payload de una corrección de un experto (SME) sobre un elemento."""

    feedback_type: RequiredStr = Field(..., description="Tipo de feedback; hoy el servidor solo acepta `element_classification`.")
    location: LocationIn
    text: RequiredStr
    original_labels: OriginalLabelsIn
    updated_labels: UpdatedLabelsIn
    document: ShortDocIn | None = None
    model_id: str | None = None
    model_version: str | None = None


class AddFeedbackOptions(BaseOptions):
    feedback_data: FeedbackDataInput
    user_id: str | None = None
    comment: str | None = None


class DeleteFeedbackOptions(BaseOptions):
    feedback_id: RequiredStr = Field(..., description="Entrada de feedback a eliminar.")
    model_id: ModelId | None = None


class GetFeedbackOptions(BaseOptions):
    feedback_id: RequiredStr
    model_id: ModelId | None = None


class ListFeedbackOptions(BaseOptions):
    """Filtros de `list_feedback`; todos opcionales."""

    feedback_type: str | None = None
    before: date | None = Field(default=None, description="Solo feedback creado antes de esta fecha.")
    after: date | None = Field(default=None, description="Solo feedback creado después de esta fecha.")
    document_title: str | None = None
    model_id: ModelId | None = None
    model_version: str | None = None
    category_removed: str | None = None
    category_added: str | None = None
    category_not_changed: str | None = None
    type_removed: str | None = None
    type_added: str | None = None
    type_not_changed: str | None = None
    page_limit: int | None = Field(default=None, gt=0)
    cursor: str | None = None
    sort: str | None = Field(default=None, description="Campos de orden separados por coma; prefijo `-` descendente.")
    include_total: bool | None = None


# --- Batches -----------------------------------------------------------------


class CreateBatchOptions(BaseOptions):
    """Opciones de `create_batch`.

    Requiere credenciales de IBM Cloud Object Storage para los buckets de
    entrada y salida (archivos JSON).
    """

    function: BatchFunction
    input_credentials_file: FileContent
    input_bucket_location: RequiredStr
    input_bucket_name: RequiredStr
    output_credentials_file: FileContent
    output_bucket_location: RequiredStr
    output_bucket_name: RequiredStr
    input_credentials_filename: str | None = None
    output_credentials_filename: str | None = None
    model_id: ModelId | None = None


class GetBatchOptions(BaseOptions):
    batch_id: RequiredStr


class ListBatchesOptions(BaseOptions):
    """`list_batches` no admite filtros; se acepta para mantener la firma uniforme."""


class UpdateBatchOptions(BaseOptions):
    batch_id: RequiredStr
    action: BatchAction
    model_id: ModelId | None = None
