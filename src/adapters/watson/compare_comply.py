"""Cliente de IBM Watson Compare and Comply (v1).

Compare and Comply analiza documentos contractuales: conversión a HTML,
clasificación de elementos, extracción de tablas, comparación de documentos,
feedback de expertos y procesamiento por lotes sobre Cloud Object Storage.

Cada método valida sus opciones, prepara la petición y devuelve un
`ServiceCall` que se resuelve con `execute()` o `await`.
"""

from __future__ import annotations

import httpx

from adapters.watson.service_core import (
    ServiceCall,
    ServiceCore,
    file_part,
    json_body,
    require_options,
)
from core.config import WatsonSettings
from core.domain.compare_comply import (
    AddFeedbackOptions,
    BatchStatus,
    Batches,
    ClassifyElementsOptions,
    ClassifyReturn,
    CompareDocumentsOptions,
    CompareReturn,
    ConvertToHtmlOptions,
    CreateBatchOptions,
    DeleteFeedbackOptions,
    ExtractTablesOptions,
    FeedbackList,
    FeedbackReturn,
    GetBatchOptions,
    GetFeedback,
    GetFeedbackOptions,
    HTMLReturn,
    ListBatchesOptions,
    ListFeedbackOptions,
    TableReturn,
    UpdateBatchOptions,
)

DEFAULT_SERVICE_URL = "https://gateway.watsonplatform.net/compare-comply/api"

_CREDENTIALS_CONTENT_TYPE = "application/json"


class CompareComplyV1:
    """Compare and Comply v1.

    Args:
        version: fecha de versión de la API (yyyy-MM-dd). Si falta se toma de
            `WatsonSettings.version`; sin ella el constructor falla.
        settings: configuración compartida (endpoint, credenciales, timeouts).
        service_url: sobrescribe el endpoint por defecto.
        auth: autenticador explícito; por defecto se deriva de `settings`.
        transport / async_transport: transportes httpx (útiles en tests).
    """

    service_name = "compare-comply"

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
            settings_url_field="compare_comply_url",
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

    @property
    def version(self) -> str | None:
        return self._core.version

    # --- Documentos ----------------------------------------------------------

    def _single_file_call(
        self,
        options: ConvertToHtmlOptions | ClassifyElementsOptions | ExtractTablesOptions,
        *,
        path: str,
        operation_id: str,
        response_model: type,
    ) -> ServiceCall:
        request = self._core.prepare(
            "POST",
            self._core.build_url([path]),
            operation_id=operation_id,
            params={"model_id": options.model_id},
            files={
                "file": file_part(
                    options.file,
                    filename=options.filename,
                    content_type=options.file_content_type,
                    field_name="file",
                ),
            },
        )
        return self._core.call(request, response_model, operation_id=operation_id)

    def convert_to_html(self, options: ConvertToHtmlOptions) -> ServiceCall[HTMLReturn]:
        """Convierte un archivo subido a HTML."""

        options = require_options(options, ConvertToHtmlOptions, "convert_to_html options")
        return self._single_file_call(
            options,
            path="v1/html_conversion",
            operation_id="convertToHtml",
            response_model=HTMLReturn,
        )

    def classify_elements(self, options: ClassifyElementsOptions) -> ServiceCall[ClassifyReturn]:
        """Analiza los elementos estructurales y semánticos de un archivo."""

        options = require_options(options, ClassifyElementsOptions, "classify_elements options")
        return self._single_file_call(
            options,
            path="v1/element_classification",
            operation_id="classifyElements",
            response_model=ClassifyReturn,
        )

    def extract_tables(self, options: ExtractTablesOptions) -> ServiceCall[TableReturn]:
        """Extrae y analiza las tablas de un archivo."""

        options = require_options(options, ExtractTablesOptions, "extract_tables options")
        return self._single_file_call(
            options,
            path="v1/tables",
            operation_id="extractTables",
            response_model=TableReturn,
        )

    def compare_documents(self, options: CompareDocumentsOptions) -> ServiceCall[CompareReturn]:
        """Compara dos archivos del mismo formato."""

        options = require_options(options, CompareDocumentsOptions, "compare_documents options")
        request = self._core.prepare(
            "POST",
            self._core.build_url(["v1/comparison"]),
            operation_id="compareDocuments",
            params={
                "file_1_label": options.file_1_label,
                "file_2_label": options.file_2_label,
                "model_id": options.model_id,
            },
            files={
                "file_1": file_part(
                    options.file_1,
                    filename=options.file_1_filename,
                    content_type=options.file_1_content_type,
                    field_name="file_1",
                ),
                "file_2": file_part(
                    options.file_2,
                    filename=options.file_2_filename,
                    content_type=options.file_2_content_type,
                    field_name="file_2",
                ),
            },
        )
        return self._core.call(request, CompareReturn, operation_id="compareDocuments")

    # --- Feedback ------------------------------------------------------------

    def add_feedback(self, options: AddFeedbackOptions) -> ServiceCall[FeedbackReturn]:
        """Añade feedback (etiquetas de un experto) a un documento.

        El feedback no se incorpora de inmediato al modelo; se usa para sugerir
        futuras actualizaciones del entrenamiento.
        """

        options = require_options(options, AddFeedbackOptions, "add_feedback options")
        payload: dict[str, object] = {}
        if options.user_id is not None:
            payload["user_id"] = options.user_id
        if options.comment is not None:
            payload["comment"] = options.comment
        payload["feedback_data"] = json_body(options.feedback_data)

        request = self._core.prepare(
            "POST",
            self._core.build_url(["v1/feedback"]),
            operation_id="addFeedback",
            json=payload,
        )
        return self._core.call(request, FeedbackReturn, operation_id="addFeedback")

    def delete_feedback(self, options: DeleteFeedbackOptions) -> ServiceCall[None]:
        options = require_options(options, DeleteFeedbackOptions, "delete_feedback options")
        request = self._core.prepare(
            "DELETE",
            self._core.build_url(["v1/feedback"], [options.feedback_id]),
            operation_id="deleteFeedback",
            params={"model_id": options.model_id},
        )
        return self._core.call(request, None, operation_id="deleteFeedback")

    def get_feedback(self, options: GetFeedbackOptions) -> ServiceCall[GetFeedback]:
        options = require_options(options, GetFeedbackOptions, "get_feedback options")
        request = self._core.prepare(
            "GET",
            self._core.build_url(["v1/feedback"], [options.feedback_id]),
            operation_id="getFeedback",
            params={"model_id": options.model_id},
        )
        return self._core.call(request, GetFeedback, operation_id="getFeedback")

    def list_feedback(self, options: ListFeedbackOptions | None = None) -> ServiceCall[FeedbackList]:
        """Lista el feedback; sin opciones no aplica ningún filtro."""

        params: dict[str, object] = {}
        if options is not None:
            options = require_options(options, ListFeedbackOptions, "list_feedback options")
            params = {
                "feedback_type": options.feedback_type,
                "before": options.before,
                "after": options.after,
                "document_title": options.document_title,
                "model_id": options.model_id,
                "model_version": options.model_version,
                "category_removed": options.category_removed,
                "category_added": options.category_added,
                "category_not_changed": options.category_not_changed,
                "type_removed": options.type_removed,
                "type_added": options.type_added,
                "type_not_changed": options.type_not_changed,
                "page_limit": options.page_limit,
                "cursor": options.cursor,
                "sort": options.sort,
                "include_total": options.include_total,
            }
        request = self._core.prepare(
            "GET",
            self._core.build_url(["v1/feedback"]),
            operation_id="listFeedback",
            params=params,
        )
        return self._core.call(request, FeedbackList, operation_id="listFeedback")

    # --- Batches -------------------------------------------------------------

    def create_batch(self, options: CreateBatchOptions) -> ServiceCall[BatchStatus]:
        """Envía un batch-processing request sobre buckets de Cloud Object Storage."""

        options = require_options(options, CreateBatchOptions, "create_batch options")
        request = self._core.prepare(
            "POST",
            self._core.build_url(["v1/batches"]),
            operation_id="createBatch",
            params={"function": options.function, "model_id": options.model_id},
            data={
                "input_bucket_location": options.input_bucket_location,
                "input_bucket_name": options.input_bucket_name,
                "output_bucket_location": options.output_bucket_location,
                "output_bucket_name": options.output_bucket_name,
            },
            files={
                "input_credentials_file": file_part(
                    options.input_credentials_file,
                    filename=options.input_credentials_filename,
                    content_type=_CREDENTIALS_CONTENT_TYPE,
                    field_name="input_credentials_file",
                ),
                "output_credentials_file": file_part(
                    options.output_credentials_file,
                    filename=options.output_credentials_filename,
                    content_type=_CREDENTIALS_CONTENT_TYPE,
                    field_name="output_credentials_file",
                ),
            },
        )
        return self._core.call(request, BatchStatus, operation_id="createBatch")

    def get_batch(self, options: GetBatchOptions) -> ServiceCall[BatchStatus]:
        options = require_options(options, GetBatchOptions, "get_batch options")
        request = self._core.prepare(
            "GET",
            self._core.build_url(["v1/batches"], [options.batch_id]),
            operation_id="getBatch",
        )
        return self._core.call(request, BatchStatus, operation_id="getBatch")

    def list_batches(self, options: ListBatchesOptions | None = None) -> ServiceCall[Batches]:
        # ListBatchesOptions no tiene filtros todavía: se valida el tipo y no se envía nada.
        if options is not None:
            require_options(options, ListBatchesOptions, "list_batches options")
        request = self._core.prepare(
            "GET",
            self._core.build_url(["v1/batches"]),
            operation_id="listBatches",
        )
        return self._core.call(request, Batches, operation_id="listBatches")

    def update_batch(self, options: UpdateBatchOptions) -> ServiceCall[BatchStatus]:
        """Re-escanea el bucket de entrada o cancela un batch pendiente/activo."""

        options = require_options(options, UpdateBatchOptions, "update_batch options")
        request = self._core.prepare(
            "PUT",
            self._core.build_url(["v1/batches"], [options.batch_id]),
            operation_id="updateBatch",
            params={"action": options.action, "model_id": options.model_id},
        )
        return self._core.call(request, BatchStatus, operation_id="updateBatch")
