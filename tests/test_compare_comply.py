"""CompareComplyV1: construcción de requests y ejecución contra un transporte falso.

Tests cover:
    - Método, ruta, query (version primero) y cuerpo de cada operación
    - Opcionales ausentes no se envían
    - Opciones nulas o del tipo equivocado -> InvalidArgumentError
    - Decodificación tolerante de respuestas
"""

import io
import json

import pytest

from adapters.watson.compare_comply import DEFAULT_SERVICE_URL, CompareComplyV1
from conftest import API_VERSION, SERVICE_URL
from core.config import WatsonSettings
from core.domain.compare_comply import (
    AddFeedbackOptions,
    BatchAction,
    BatchFunction,
    BatchStatus,
    ClassifyElementsOptions,
    CompareDocumentsOptions,
    ConvertToHtmlOptions,
    CreateBatchOptions,
    DeleteFeedbackOptions,
    ExtractTablesOptions,
    FeedbackList,
    GetBatchOptions,
    GetFeedbackOptions,
    HTMLReturn,
    Importance,
    ListBatchesOptions,
    ListFeedbackOptions,
    ModelId,
    UpdateBatchOptions,
)
from core.errors import InvalidArgumentError


# --- Construcción del cliente ------------------------------------------------


def test_client_requires_version():
    with pytest.raises(InvalidArgumentError, match="version cannot be null"):
        CompareComplyV1(settings=WatsonSettings(_env_file=None))


def test_client_takes_version_from_settings():
    settings = WatsonSettings(_env_file=None, version="2018-12-01")
    service = CompareComplyV1(settings=settings)
    assert service.version == "2018-12-01"
    assert service.service_url == DEFAULT_SERVICE_URL


def test_service_url_trailing_slash_is_stripped(settings):
    service = CompareComplyV1(API_VERSION, settings=settings, service_url="https://cc.example.test/api/")
    assert service.service_url == "https://cc.example.test/api"


# --- Feedback ----------------------------------------------------------------


def test_delete_feedback_request_shape(service, recorder):
    call = service.delete_feedback(DeleteFeedbackOptions(feedback_id="fb-123"))
    request = call.request

    assert request.method == "DELETE"
    assert request.url.path == "/api/v1/feedback/fb-123"
    assert dict(request.url.params) == {"version": API_VERSION}
    assert request.content == b""
    assert recorder.requests == []


def test_delete_feedback_executes_and_returns_none(service, recorder):
    recorder.respond(200, None)
    result = service.delete_feedback(DeleteFeedbackOptions(feedback_id="fb-123")).execute()

    assert result is None
    sent = recorder.last
    assert sent.headers["Authorization"] == "Bearer test-token"
    assert sent.headers["X-IBMCloud-SDK-Analytics"] == (
        "service_name=compare-comply;service_version=v1;operation_id=deleteFeedback"
    )
    assert sent.headers["Accept"] == "application/json"


def test_path_identifiers_are_escaped(service):
    request = service.get_feedback(GetFeedbackOptions(feedback_id="a/b c")).request
    assert request.url.raw_path.startswith(b"/api/v1/feedback/a%2Fb%20c?")


def test_get_feedback_sends_model_id(service):
    request = service.get_feedback(GetFeedbackOptions(feedback_id="fb-1", model_id=ModelId.CONTRACTS)).request
    assert request.method == "GET"
    assert list(request.url.params.keys()) == ["version", "model_id"]
    assert request.url.params["model_id"] == "contracts"


def test_list_feedback_without_options_only_sends_version(service, recorder):
    recorder.respond(200, {"feedback": []})
    call = service.list_feedback(None)

    assert call.request.method == "GET"
    assert str(call.request.url) == f"{SERVICE_URL}/v1/feedback?version={API_VERSION}"
    result = call.execute()
    assert isinstance(result, FeedbackList)
    assert result.feedback == []


def test_list_feedback_serializes_filters(service):
    options = ListFeedbackOptions(
        feedback_type="element_classification",
        before="2018-11-01",
        include_total=True,
        page_limit=25,
        sort="-created",
    )
    params = service.list_feedback(options).request.url.params

    assert list(params.keys())[0] == "version"
    assert params["feedback_type"] == "element_classification"
    assert params["before"] == "2018-11-01"
    assert params["include_total"] == "true"
    assert params["page_limit"] == "25"
    assert params["sort"] == "-created"
    assert "after" not in params
    assert "cursor" not in params


def test_add_feedback_json_body(service):
    options = AddFeedbackOptions(
        user_id="wonder_woman",
        feedback_data={
            "feedback_type": "element_classification",
            "location": {"begin": 241, "end": 237},
            "text": "1. IBM will provide a Senior Managing Consultant / expert resource.",
            "original_labels": {
                "types": [{"label": {"nature": "Obligation", "party": "IBM"}, "provenance_ids": ["85f5981a"]}],
                "categories": [{"label": "Responsibilities"}],
            },
            "updated_labels": {
                "types": [{"label": {"nature": "Obligation", "party": "IBM"}}],
                "categories": [{"label": "Amendments"}],
            },
        },
    )
    request = service.add_feedback(options).request
    body = json.loads(request.content)

    assert request.method == "POST"
    assert request.url.path == "/api/v1/feedback"
    assert request.headers["Content-Type"] == "application/json"
    assert body["user_id"] == "wonder_woman"
    assert "comment" not in body
    data = body["feedback_data"]
    assert data["location"] == {"begin": 241, "end": 237}
    assert data["updated_labels"]["types"] == [{"label": {"nature": "Obligation", "party": "IBM"}}]
    assert "document" not in data


# --- Documentos --------------------------------------------------------------


def test_convert_to_html_multipart(service, recorder):
    recorder.respond(200, {"title": "Contract", "html": "<html></html>", "num_pages": "3", "extra": True})
    options = ConvertToHtmlOptions(file=b"%PDF-1.4", filename="contract.pdf", file_content_type="application/pdf")
    call = service.convert_to_html(options)

    assert call.request.method == "POST"
    assert call.request.url.path == "/api/v1/html_conversion"
    assert dict(call.request.url.params) == {"version": API_VERSION}

    result = call.execute()
    body = recorder.last.content
    assert b'name="file"; filename="contract.pdf"' in body
    assert b"Content-Type: application/pdf" in body
    assert b"%PDF-1.4" in body
    assert isinstance(result, HTMLReturn)
    assert result.num_pages == "3"
    assert result.author is None


def test_file_without_content_type_uses_octet_stream(service):
    stream = io.BytesIO(b"<html/>")
    request = service.classify_elements(ClassifyElementsOptions(file=stream, model_id="contracts")).request
    request.read()

    assert request.url.path == "/api/v1/element_classification"
    assert request.url.params["model_id"] == "contracts"
    assert b"Content-Type: application/octet-stream" in request.content
    assert b'filename="file"' in request.content


def test_extract_tables_path(service):
    request = service.extract_tables(ExtractTablesOptions(file=b"<table/>", model_id=ModelId.TABLES)).request
    assert request.url.path == "/api/v1/tables"
    assert request.url.params["model_id"] == "tables"


def test_compare_documents_sends_both_files_and_labels(service):
    options = CompareDocumentsOptions(
        file_1=b"first",
        file_2=b"second",
        file_1_filename="a.pdf",
        file_2_filename="b.pdf",
        file_1_label="left",
    )
    request = service.compare_documents(options).request
    request.read()

    assert request.url.path == "/api/v1/comparison"
    assert request.url.params["file_1_label"] == "left"
    assert "file_2_label" not in request.url.params
    assert b'name="file_1"; filename="a.pdf"' in request.content
    assert b'name="file_2"; filename="b.pdf"' in request.content


def test_classify_response_keeps_importance_as_string(service, recorder):
    recorder.respond(
        200,
        {
            "model_id": "contracts",
            "parties": [{"party": "IBM", "importance": "Primary", "role": "Vendor"}],
            "document": {"title": "Contract"},
        },
    )
    result = service.classify_elements(ClassifyElementsOptions(file=b"x")).execute()

    party = result.parties[0]
    assert party.importance == Importance.PRIMARY
    assert party.importance == "Primary"
    assert result.elements is None


# --- Batches -----------------------------------------------------------------


def _create_batch_options(**overrides):
    values = {
        "function": BatchFunction.ELEMENT_CLASSIFICATION,
        "input_credentials_file": io.BytesIO(b'{"apikey": "in"}'),
        "input_bucket_location": "us-geo",
        "input_bucket_name": "compare-comply-in",
        "output_credentials_file": io.BytesIO(b'{"apikey": "out"}'),
        "output_bucket_location": "us-geo",
        "output_bucket_name": "compare-comply-out",
    }
    values.update(overrides)
    return CreateBatchOptions(**values)


def test_create_batch_multipart(service, recorder):
    recorder.respond(200, {"batch_id": "b-1", "status": "Pending", "function": "element_classification"})
    call = service.create_batch(_create_batch_options(model_id="contracts"))

    assert call.request.method == "POST"
    assert call.request.url.path == "/api/v1/batches"
    assert list(call.request.url.params.keys()) == ["version", "function", "model_id"]
    assert call.request.url.params["function"] == "element_classification"

    result = call.execute()
    body = recorder.last.content
    assert recorder.last.headers["Content-Type"].startswith("multipart/form-data")
    assert b'name="input_bucket_location"\r\n\r\nus-geo' in body
    assert b'name="output_bucket_name"\r\n\r\ncompare-comply-out' in body
    assert b'name="input_credentials_file"; filename="input_credentials_file"' in body
    assert b"Content-Type: application/json" in body
    assert b'{"apikey": "out"}' in body
    assert isinstance(result, BatchStatus)
    assert result.batch_id == "b-1"


def test_get_batch(service):
    request = service.get_batch(GetBatchOptions(batch_id="b-1")).request
    assert request.method == "GET"
    assert request.url.path == "/api/v1/batches/b-1"


def test_list_batches_accepts_none_or_empty_options(service):
    for options in (None, ListBatchesOptions()):
        request = service.list_batches(options).request
        assert request.method == "GET"
        assert str(request.url) == f"{SERVICE_URL}/v1/batches?version={API_VERSION}"


def test_update_batch_uses_put_with_action(service):
    request = service.update_batch(UpdateBatchOptions(batch_id="b-1", action=BatchAction.CANCEL)).request
    assert request.method == "PUT"
    assert request.url.path == "/api/v1/batches/b-1"
    assert dict(request.url.params) == {"version": API_VERSION, "action": "cancel"}


# --- Validación de argumentos ------------------------------------------------


@pytest.mark.parametrize(
    "method",
    [
        "convert_to_html",
        "classify_elements",
        "extract_tables",
        "compare_documents",
        "add_feedback",
        "delete_feedback",
        "get_feedback",
        "create_batch",
        "get_batch",
        "update_batch",
    ],
)
def test_null_options_are_rejected(service, recorder, method):
    with pytest.raises(InvalidArgumentError, match="cannot be null"):
        getattr(service, method)(None)
    assert recorder.requests == []


def test_wrong_options_type_is_rejected(service):
    with pytest.raises(InvalidArgumentError, match="must be a GetBatchOptions"):
        service.get_batch(UpdateBatchOptions(batch_id="b-1", action="rescan"))
