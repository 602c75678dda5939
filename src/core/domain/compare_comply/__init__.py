"""Compare and Comply: enums, opciones y modelos de respuesta."""

from core.domain.compare_comply.enums import BatchAction, BatchFunction, Importance, ModelId
from core.domain.compare_comply.models import (
    Address,
    AlignedElement,
    Attribute,
    BatchStatus,
    Batches,
    BodyCells,
    Category,
    ClassifyReturn,
    ColumnHeaders,
    CompareReturn,
    Contact,
    DocCounts,
    DocInfo,
    DocStructure,
    Document,
    Element,
    ElementPair,
    FeedbackDataOutput,
    FeedbackList,
    FeedbackReturn,
    GetFeedback,
    HTMLReturn,
    Label,
    Location,
    Pagination,
    Parties,
    RowHeaders,
    ShortDoc,
    TableHeaders,
    TableReturn,
    Tables,
    TypeLabel,
    UnalignedElement,
)
from core.domain.compare_comply.options import (
    AddFeedbackOptions,
    CategoryIn,
    ClassifyElementsOptions,
    CompareDocumentsOptions,
    ConvertToHtmlOptions,
    CreateBatchOptions,
    DeleteFeedbackOptions,
    ExtractTablesOptions,
    FeedbackDataInput,
    GetBatchOptions,
    GetFeedbackOptions,
    LabelIn,
    ListBatchesOptions,
    ListFeedbackOptions,
    LocationIn,
    OriginalLabelsIn,
    ShortDocIn,
    TypeLabelIn,
    UpdateBatchOptions,
    UpdatedLabelsIn,
)

__all__ = [
    "AddFeedbackOptions",
    "Address",
    "AlignedElement",
    "Attribute",
    "BatchAction",
    "BatchFunction",
    "BatchStatus",
    "Batches",
    "BodyCells",
    "Category",
    "CategoryIn",
    "ClassifyElementsOptions",
    "ClassifyReturn",
    "ColumnHeaders",
    "CompareDocumentsOptions",
    "CompareReturn",
    "Contact",
    "ConvertToHtmlOptions",
    "CreateBatchOptions",
    "DeleteFeedbackOptions",
    "DocCounts",
    "DocInfo",
    "DocStructure",
    "Document",
    "Element",
    "ElementPair",
    "ExtractTablesOptions",
    "FeedbackDataInput",
    "FeedbackDataOutput",
    "FeedbackList",
    "FeedbackReturn",
    "GetBatchOptions",
    "GetFeedback",
    "GetFeedbackOptions",
    "HTMLReturn",
    "Importance",
    "Label",
    "LabelIn",
    "ListBatchesOptions",
    "ListFeedbackOptions",
    "Location",
    "LocationIn",
    "ModelId",
    "OriginalLabelsIn",
    "Pagination",
    "Parties",
    "RowHeaders",
    "ShortDoc",
    "ShortDocIn",
    "TableHeaders",
    "TableReturn",
    "Tables",
    "TypeLabel",
    "TypeLabelIn",
    "UnalignedElement",
    "UpdateBatchOptions",
    "UpdatedLabelsIn",
]
