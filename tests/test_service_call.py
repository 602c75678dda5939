"""ServiceCall / ServiceCore: despacho diferido, síncrono y asíncrono.

Tests cover:
    - Nada se envía hasta `execute()` / `await`
    - Un handle se despacha como mucho una vez
    - Status no-2xx -> errores tipados; fallos de transporte sin envolver
    - Timeout por request y construcción de URLs
"""

import httpx
import pytest

from adapters.watson.service_core import ServiceCore, compact, to_wire
from conftest import API_VERSION
from core.domain.compare_comply import BatchAction, BatchStatus, GetBatchOptions, GetFeedbackOptions, GetFeedback
from core.errors import (
    BadRequestError,
    InvalidArgumentError,
    NotFoundError,
    ServiceResponseError,
    ServiceUnavailableError,
)


def test_execute_decodes_response(service, recorder):
    recorder.respond(200, {"batch_id": "b-1", "document_counts": {"total": 4, "successful": 3}, "unknown_field": 1})
    call = service.get_batch(GetBatchOptions(batch_id="b-1"))
    assert recorder.requests == []

    result = call.execute()

    assert len(recorder.requests) == 1
    assert isinstance(result, BatchStatus)
    assert result.document_counts.total == 4
    assert result.document_counts.failed is None
    assert not hasattr(result, "unknown_field")


def test_call_cannot_be_executed_twice(service, recorder):
    recorder.respond(200, {})
    call = service.get_batch(GetBatchOptions(batch_id="b-1"))
    call.execute()
    with pytest.raises(RuntimeError, match="already executed"):
        call.execute()
    assert len(recorder.requests) == 1


@pytest.mark.asyncio
async def test_await_dispatches_asynchronously(service, recorder):
    recorder.respond(200, {"feedback_id": "fb-1", "created": "2018-11-16T22:57:14.000Z"})
    result = await service.get_feedback(GetFeedbackOptions(feedback_id="fb-1"))

    assert isinstance(result, GetFeedback)
    assert result.feedback_id == "fb-1"
    assert result.created.year == 2018
    assert recorder.last.url.path == "/api/v1/feedback/fb-1"


@pytest.mark.asyncio
async def test_await_then_execute_is_rejected(service, recorder):
    recorder.respond(200, {})
    call = service.get_batch(GetBatchOptions(batch_id="b-1"))
    await call.execute_async()
    with pytest.raises(RuntimeError):
        call.execute()


@pytest.mark.asyncio
async def test_async_errors_are_typed(service, recorder):
    recorder.respond(503, {"error": "Service is down"})
    with pytest.raises(ServiceUnavailableError) as excinfo:
        await service.get_batch(GetBatchOptions(batch_id="b-1"))
    assert excinfo.value.status_code == 503


def test_not_found_maps_to_typed_error(service, recorder):
    recorder.respond(
        404,
        {"code": 404, "error": "Feedback not found"},
        headers={"X-Global-Transaction-Id": "tx-42"},
    )
    with pytest.raises(NotFoundError) as excinfo:
        service.get_feedback(GetFeedbackOptions(feedback_id="missing")).execute()

    error = excinfo.value
    assert isinstance(error, ServiceResponseError)
    assert error.message == "Feedback not found"
    assert error.transaction_id == "tx-42"
    assert str(error) == "Error: Feedback not found, Status code: 404"


def test_error_without_json_body_uses_reason_phrase(service, recorder):
    recorder.handler = lambda request: httpx.Response(400, text="nope")
    with pytest.raises(BadRequestError) as excinfo:
        service.get_batch(GetBatchOptions(batch_id="b-1")).execute()
    assert excinfo.value.message == "Bad Request"
    assert excinfo.value.body == "nope"


def test_unmapped_status_uses_base_error(service, recorder):
    recorder.respond(418, {"message": "teapot"})
    with pytest.raises(ServiceResponseError) as excinfo:
        service.get_batch(GetBatchOptions(batch_id="b-1")).execute()
    assert type(excinfo.value) is ServiceResponseError
    assert excinfo.value.message == "teapot"


def test_transport_errors_propagate_unwrapped(service, recorder):
    def boom(request):
        raise httpx.ConnectError("connection refused", request=request)

    recorder.handler = boom
    with pytest.raises(httpx.ConnectError):
        service.get_batch(GetBatchOptions(batch_id="b-1")).execute()


def test_empty_success_body_returns_none(service, recorder):
    recorder.respond(204, None)
    assert service.get_batch(GetBatchOptions(batch_id="b-1")).execute() is None


def test_request_carries_timeout(settings):
    core = ServiceCore(
        service_name="compare-comply",
        service_version="v1",
        default_url="https://cc.example.test/api",
        settings=settings.model_copy(update={"http_timeout_seconds": 5.0}),
        version=API_VERSION,
    )
    request = core.prepare("GET", core.build_url(["v1/batches"]), operation_id="listBatches")
    assert request.extensions["timeout"]["read"] == 5.0


def test_build_url_interleaves_segments_and_ids(settings):
    core = ServiceCore(
        service_name="discovery",
        service_version="v1",
        default_url="https://disco.example.test/api/",
        settings=settings,
        version=API_VERSION,
    )
    assert core.build_url(["v1/environments", "configurations"], ["env 1"]) == (
        "https://disco.example.test/api/v1/environments/env%201/configurations"
    )
    assert core.analytics_header("createConfiguration") == (
        "service_name=discovery;service_version=v1;operation_id=createConfiguration"
    )


def test_unversioned_core_skips_version_param(settings):
    core = ServiceCore(
        service_name="speech_to_text",
        service_version="v1",
        default_url="https://stt.example.test/api",
        settings=settings,
        versioned=False,
    )
    request = core.prepare("DELETE", core.build_url(["v1/acoustic_customizations"], ["c-1"]), operation_id="x")
    assert "version" not in request.url.params


def test_wire_serialization():
    assert to_wire(True) == "true"
    assert to_wire(False) == "false"
    assert to_wire(BatchAction.RESCAN) == "rescan"
    assert to_wire(25) == "25"
    assert compact({"a": None, "b": "x", "c": False}) == {"b": "x", "c": "false"}
    assert compact(None) == {}


def test_invalid_argument_is_raised_before_network(service, recorder):
    with pytest.raises(InvalidArgumentError):
        service.get_batch(GetBatchOptions(batch_id=""))
    assert recorder.requests == []
