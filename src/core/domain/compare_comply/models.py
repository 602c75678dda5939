"""Modelos de respuesta de Compare and Comply (Pydantic v2).

Notas:
- Los nombres de campo coinciden con las claves JSON del servicio.
- Todo campo es opcional: lo que el servidor no envía queda en `None`.
- Campos con valores cerrados (p.ej. `Parties.importance`) se conservan como
  string; comparar contra `enums.Importance` funciona porque son `str` enums.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from core.domain.base import DataModel


# --- Bloques compartidos -----------------------------------------------------


class Location(DataModel):
    """Offsets (en caracteres) del elemento dentro del HTML de entrada."""

    begin: int | None = None
    end: int | None = None


class Label(DataModel):
    nature: str | None = None
    party: str | None = None


class TypeLabel(DataModel):
    label: Label | None = None
    provenance_ids: list[str] | None = None


class Category(DataModel):
    label: str | None = None
    provenance_ids: list[str] | None = None


class Attribute(DataModel):
    type: str | None = None
    text: str | None = None
    location: Location | None = None


class ShortDoc(DataModel):
    title: str | None = None
    hash: str | None = None


class Document(DataModel):
    title: str | None = None
    html: str | None = None
    hash: str | None = None
    label: str | None = None


class DocInfo(DataModel):
    html: str | None = None
    title: str | None = None
    hash: str | None = None


class Element(DataModel):
    location: Location | None = None
    text: str | None = None
    types: list[TypeLabel] | None = None
    categories: list[Category] | None = None
    attributes: list[Attribute] | None = None


# --- HTML conversion ---------------------------------------------------------


class HTMLReturn(DataModel):
    """Resultado de `/v1/html_conversion`."""

    num_pages: str | None = Field(default=None, description="Número de páginas del documento de entrada.")
    author: str | None = Field(default=None, description="Autor del documento, si se identificó.")
    publication_date: str | None = Field(default=None, description="Fecha de publicación, si se identificó.")
    title: str | None = Field(default=None, description="Título del documento, si se identificó.")
    html: str | None = Field(default=None, description="HTML generado a partir del documento.")


# --- Element classification --------------------------------------------------


class Address(DataModel):
    text: str | None = None
    location: Location | None = None


class Contact(DataModel):
    name: str | None = None
    role: str | None = None


class Mention(DataModel):
    text: str | None = None
    location: Location | None = None


class Parties(DataModel):
    """Una parte del contrato y su rol, con direcciones y contactos si se detectaron."""

    party: str | None = None
    importance: str | None = Field(
        default=None,
        description="Importancia de la parte (ver `Importance`).",
    )
    role: str | None = None
    addresses: list[Address] | None = None
    contacts: list[Contact] | None = None
    mentions: list[Mention] | None = None


class _ExtractedValue(DataModel):
    text: str | None = None
    confidence_level: str | None = None
    location: Location | None = None


class EffectiveDates(_ExtractedValue):
    pass


class ContractAmts(_ExtractedValue):
    pass


class TerminationDates(_ExtractedValue):
    pass


class ContractTypes(_ExtractedValue):
    pass


class ContractTerms(_ExtractedValue):
    pass


class PaymentTerms(_ExtractedValue):
    pass


class ContractCurrencies(_ExtractedValue):
    pass


class ElementLocations(DataModel):
    begin: int | None = None
    end: int | None = None


class SectionTitles(DataModel):
    text: str | None = None
    location: Location | None = None
    level: int | None = None
    element_locations: list[ElementLocations] | None = None


class LeadingSentence(DataModel):
    text: str | None = None
    location: Location | None = None
    element_locations: list[ElementLocations] | None = None


class Paragraphs(DataModel):
    location: Location | None = None


class DocStructure(DataModel):
    section_titles: list[SectionTitles] | None = None
    leading_sentences: list[LeadingSentence] | None = None
    paragraphs: list[Paragraphs] | None = None


# --- Tables ------------------------------------------------------------------


class SectionTitle(DataModel):
    text: str | None = None
    location: Location | None = None


class TableTitle(DataModel):
    text: str | None = None
    location: Location | None = None


class _Cell(DataModel):
    cell_id: str | None = None
    location: Location | None = None
    text: str | None = None
    row_index_begin: int | None = None
    row_index_end: int | None = None
    column_index_begin: int | None = None
    column_index_end: int | None = None


class TableHeaders(_Cell):
    pass


class RowHeaders(_Cell):
    text_normalized: str | None = None


class ColumnHeaders(_Cell):
    text_normalized: str | None = None


class BodyCells(_Cell):
    row_header_ids: list[str] | None = None
    row_header_texts: list[str] | None = None
    row_header_texts_normalized: list[str] | None = None
    column_header_ids: list[str] | None = None
    column_header_texts: list[str] | None = None
    column_header_texts_normalized: list[str] | None = None
    attributes: list[Attribute] | None = None


class Contexts(DataModel):
    text: str | None = None
    location: Location | None = None


class Key(DataModel):
    cell_id: str | None = None
    location: Location | None = None
    text: str | None = None


class Value(DataModel):
    cell_id: str | None = None
    location: Location | None = None
    text: str | None = None


class KeyValuePair(DataModel):
    key: Key | None = None
    value: list[Value] | None = None


class Tables(DataModel):
    location: Location | None = None
    text: str | None = None
    section_title: SectionTitle | None = None
    title: TableTitle | None = None
    table_headers: list[TableHeaders] | None = None
    row_headers: list[RowHeaders] | None = None
    column_headers: list[ColumnHeaders] | None = None
    body_cells: list[BodyCells] | None = None
    contexts: list[Contexts] | None = None
    key_value_pairs: list[KeyValuePair] | None = None


class TableReturn(DataModel):
    """Resultado de `/v1/tables`."""

    document: DocInfo | None = None
    model_id: str | None = None
    model_version: str | None = None
    tables: list[Tables] | None = None


class ClassifyReturn(DataModel):
    """Resultado de `/v1/element_classification`."""

    document: Document | None = None
    model_id: str | None = Field(default=None, description="Modelo de análisis usado.")
    model_version: str | None = Field(default=None, description="Versión del modelo de análisis.")
    elements: list[Element] | None = None
    effective_dates: list[EffectiveDates] | None = None
    contract_amounts: list[ContractAmts] | None = None
    termination_dates: list[TerminationDates] | None = None
    contract_types: list[ContractTypes] | None = None
    contract_terms: list[ContractTerms] | None = None
    payment_terms: list[PaymentTerms] | None = None
    contract_currencies: list[ContractCurrencies] | None = None
    tables: list[Tables] | None = None
    document_structure: DocStructure | None = None
    parties: list[Parties] | None = None


# --- Comparison --------------------------------------------------------------


class ElementPair(DataModel):
    document_label: str | None = None
    text: str | None = None
    location: Location | None = None
    types: list[TypeLabel] | None = None
    categories: list[Category] | None = None
    attributes: list[Attribute] | None = None


class AlignedElement(DataModel):
    element_pair: list[ElementPair] | None = None
    identical_text: bool | None = None
    provenance_ids: list[str] | None = None
    significant_elements: bool | None = None


class UnalignedElement(DataModel):
    document_label: str | None = None
    location: Location | None = None
    text: str | None = None
    types: list[TypeLabel] | None = None
    categories: list[Category] | None = None
    attributes: list[Attribute] | None = None


class CompareReturn(DataModel):
    """Resultado de `/v1/comparison`."""

    model_id: str | None = None
    model_version: str | None = None
    documents: list[Document] | None = None
    aligned_elements: list[AlignedElement] | None = None
    unaligned_elements: list[UnalignedElement] | None = None


# --- Feedback ----------------------------------------------------------------


class OriginalLabelsOut(DataModel):
    types: list[TypeLabel] | None = None
    categories: list[Category] | None = None
    modification: str | None = None


class UpdatedLabelsOut(DataModel):
    types: list[TypeLabel] | None = None
    categories: list[Category] | None = None
    modification: str | None = None


class Pagination(DataModel):
    refresh_cursor: str | None = None
    next_cursor: str | None = None
    refresh_url: str | None = None
    next_url: str | None = None
    total: int | None = None


class FeedbackDataOutput(DataModel):
    feedback_type: str | None = None
    document: ShortDoc | None = None
    model_id: str | None = None
    model_version: str | None = None
    location: Location | None = None
    text: str | None = None
    original_labels: OriginalLabelsOut | None = None
    updated_labels: UpdatedLabelsOut | None = None
    pagination: Pagination | None = None


class FeedbackReturn(DataModel):
    """Acuse de recibo de una entrada de feedback creada."""

    feedback_id: str | None = Field(default=None, description="ID opaco de la entrada.")
    user_id: str | None = None
    comment: str | None = None
    created: datetime | None = None
    feedback_data: FeedbackDataOutput | None = None


class GetFeedback(DataModel):
    feedback_id: str | None = None
    created: datetime | None = None
    comment: str | None = None
    feedback_data: FeedbackDataOutput | None = None


class FeedbackList(DataModel):
    feedback: list[GetFeedback] | None = None


# --- Batches -----------------------------------------------------------------


class DocCounts(DataModel):
    total: int | None = None
    pending: int | None = None
    successful: int | None = None
    failed: int | None = None


class BatchStatus(DataModel):
    """Estado de un batch-processing request."""

    function: str | None = Field(default=None, description="Método ejecutado por el batch (ver `BatchFunction`).")
    input_bucket_location: str | None = None
    input_bucket_name: str | None = None
    output_bucket_location: str | None = None
    output_bucket_name: str | None = None
    batch_id: str | None = None
    document_counts: DocCounts | None = None
    status: str | None = None
    created: datetime | None = None
    updated: datetime | None = None


class Batches(DataModel):
    batches: list[BatchStatus] | None = None
