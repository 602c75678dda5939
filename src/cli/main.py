"""CLI principal (Typer).

Expone las operaciones de Compare and Comply como subcomandos y delega la
presentación en `cli.ui_components`. Toda la lógica HTTP vive en `adapters`.
"""

from __future__ import annotations

import logging
from contextlib import ExitStack
from pathlib import Path
from typing import NoReturn, TypeVar

import httpx
import typer
from rich.console import Console

from adapters.watson.compare_comply import CompareComplyV1
from adapters.watson.service_core import ServiceCall
from cli import doctor
from cli.ui_components import (
    build_batches_table,
    build_error_panel,
    build_feedback_table,
    print_model,
)
from core.config import WatsonSettings
from core.domain.compare_comply import (
    BatchAction,
    BatchFunction,
    ClassifyElementsOptions,
    CompareDocumentsOptions,
    ConvertToHtmlOptions,
    CreateBatchOptions,
    DeleteFeedbackOptions,
    ExtractTablesOptions,
    GetBatchOptions,
    GetFeedbackOptions,
    ListFeedbackOptions,
    ModelId,
    UpdateBatchOptions,
)
from core.errors import InvalidArgumentError, ServiceResponseError

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="IBM Watson services from the command line.")
compare_comply_app = typer.Typer(no_args_is_help=True, help="Compare and Comply v1.")
app.add_typer(compare_comply_app, name="compare-comply")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)

DEFAULT_API_VERSION = "2018-10-15"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP activity (DEBUG)."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def _service(api_version: str | None) -> CompareComplyV1:
    settings = WatsonSettings()
    return CompareComplyV1(api_version or settings.version or DEFAULT_API_VERSION, settings=settings)


def _execute(call: ServiceCall[T]) -> T | None:
    try:
        return call.execute()
    except ServiceResponseError as exc:
        _err_console.print(build_error_panel(exc))
        raise typer.Exit(code=1) from exc
    except httpx.TransportError as exc:
        _err_console.print(f"[red]Connection error:[/red] {exc}")
        raise typer.Exit(code=1) from exc


def _fail_invalid(exc: InvalidArgumentError) -> NoReturn:
    _err_console.print(f"[red]Invalid argument:[/red] {exc}")
    raise typer.Exit(code=2) from exc


_API_VERSION = typer.Option(None, "--api-version", help="API version date (yyyy-MM-dd).")
_MODEL_ID = typer.Option(None, "--model-id", help="Analysis model.")


# --- Documentos ---------------------------------------------------------------


@compare_comply_app.command("convert")
def convert(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    content_type: str | None = typer.Option(None, "--content-type"),
    model_id: ModelId | None = _MODEL_ID,
    api_version: str | None = _API_VERSION,
) -> None:
    """Convert a document to HTML."""

    service = _service(api_version)
    with file.open("rb") as handle:
        try:
            options = ConvertToHtmlOptions(file=handle, file_content_type=content_type, model_id=model_id)
        except InvalidArgumentError as exc:
            _fail_invalid(exc)
        result = _execute(service.convert_to_html(options))
    print_model(_console, result)


@compare_comply_app.command("classify")
def classify(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    content_type: str | None = typer.Option(None, "--content-type"),
    model_id: ModelId | None = _MODEL_ID,
    api_version: str | None = _API_VERSION,
) -> None:
    """Classify the elements of a document."""

    service = _service(api_version)
    with file.open("rb") as handle:
        try:
            options = ClassifyElementsOptions(file=handle, file_content_type=content_type, model_id=model_id)
        except InvalidArgumentError as exc:
            _fail_invalid(exc)
        result = _execute(service.classify_elements(options))
    print_model(_console, result)


@compare_comply_app.command("tables")
def tables(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    content_type: str | None = typer.Option(None, "--content-type"),
    model_id: ModelId | None = _MODEL_ID,
    api_version: str | None = _API_VERSION,
) -> None:
    """Extract the tables of a document."""

    service = _service(api_version)
    with file.open("rb") as handle:
        try:
            options = ExtractTablesOptions(file=handle, file_content_type=content_type, model_id=model_id)
        except InvalidArgumentError as exc:
            _fail_invalid(exc)
        result = _execute(service.extract_tables(options))
    print_model(_console, result)


@compare_comply_app.command("compare")
def compare(
    file_1: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    file_2: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True),
    label_1: str | None = typer.Option(None, "--label-1"),
    label_2: str | None = typer.Option(None, "--label-2"),
    model_id: ModelId | None = _MODEL_ID,
    api_version: str | None = _API_VERSION,
) -> None:
    """Compare two documents of the same format."""

    service = _service(api_version)
    with ExitStack() as stack:
        first = stack.enter_context(file_1.open("rb"))
        second = stack.enter_context(file_2.open("rb"))
        try:
            options = CompareDocumentsOptions(
                file_1=first,
                file_2=second,
                file_1_label=label_1,
                file_2_label=label_2,
                model_id=model_id,
            )
        except InvalidArgumentError as exc:
            _fail_invalid(exc)
        result = _execute(service.compare_documents(options))
    print_model(_console, result)


# --- Feedback -----------------------------------------------------------------


@compare_comply_app.command("feedback-list")
def feedback_list(
    feedback_type: str | None = typer.Option(None, "--feedback-type"),
    document_title: str | None = typer.Option(None, "--document-title"),
    before: str | None = typer.Option(None, "--before", help="yyyy-MM-dd"),
    after: str | None = typer.Option(None, "--after", help="yyyy-MM-dd"),
    page_limit: int | None = typer.Option(None, "--page-limit"),
    cursor: str | None = typer.Option(None, "--cursor"),
    sort: str | None = typer.Option(None, "--sort"),
    include_total: bool | None = typer.Option(None, "--include-total/--no-include-total"),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON instead of a table."),
    api_version: str | None = _API_VERSION,
) -> None:
    """List feedback entries (no flags = list everything)."""

    service = _service(api_version)
    filters = {
        "feedback_type": feedback_type,
        "document_title": document_title,
        "before": before,
        "after": after,
        "page_limit": page_limit,
        "cursor": cursor,
        "sort": sort,
        "include_total": include_total,
    }
    options = None
    if any(value is not None for value in filters.values()):
        try:
            options = ListFeedbackOptions(**filters)
        except InvalidArgumentError as exc:
            _fail_invalid(exc)

    result = _execute(service.list_feedback(options))
    if as_json or result is None:
        print_model(_console, result)
    else:
        _console.print(build_feedback_table(result))


@compare_comply_app.command("feedback-get")
def feedback_get(
    feedback_id: str = typer.Argument(...),
    model_id: ModelId | None = _MODEL_ID,
    api_version: str | None = _API_VERSION,
) -> None:
    """Show one feedback entry."""

    service = _service(api_version)
    try:
        options = GetFeedbackOptions(feedback_id=feedback_id, model_id=model_id)
    except InvalidArgumentError as exc:
        _fail_invalid(exc)
    print_model(_console, _execute(service.get_feedback(options)))


@compare_comply_app.command("feedback-delete")
def feedback_delete(
    feedback_id: str = typer.Argument(...),
    model_id: ModelId | None = _MODEL_ID,
    api_version: str | None = _API_VERSION,
) -> None:
    """Delete one feedback entry."""

    service = _service(api_version)
    try:
        options = DeleteFeedbackOptions(feedback_id=feedback_id, model_id=model_id)
    except InvalidArgumentError as exc:
        _fail_invalid(exc)
    print_model(_console, _execute(service.delete_feedback(options)))


# --- Batches ------------------------------------------------------------------


@compare_comply_app.command("batch-list")
def batch_list(
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON instead of a table."),
    api_version: str | None = _API_VERSION,
) -> None:
    """List submitted batch-processing jobs."""

    result = _execute(_service(api_version).list_batches())
    if as_json or result is None:
        print_model(_console, result)
    else:
        _console.print(build_batches_table(result))


@compare_comply_app.command("batch-get")
def batch_get(
    batch_id: str = typer.Argument(...),
    api_version: str | None = _API_VERSION,
) -> None:
    """Show one batch-processing job."""

    service = _service(api_version)
    try:
        options = GetBatchOptions(batch_id=batch_id)
    except InvalidArgumentError as exc:
        _fail_invalid(exc)
    print_model(_console, _execute(service.get_batch(options)))


@compare_comply_app.command("batch-create")
def batch_create(
    function: BatchFunction = typer.Option(..., "--function"),
    input_credentials: Path = typer.Option(..., "--input-credentials", exists=True, dir_okay=False),
    input_bucket_location: str = typer.Option(..., "--input-bucket-location"),
    input_bucket_name: str = typer.Option(..., "--input-bucket-name"),
    output_credentials: Path = typer.Option(..., "--output-credentials", exists=True, dir_okay=False),
    output_bucket_location: str = typer.Option(..., "--output-bucket-location"),
    output_bucket_name: str = typer.Option(..., "--output-bucket-name"),
    model_id: ModelId | None = _MODEL_ID,
    api_version: str | None = _API_VERSION,
) -> None:
    """Submit a batch-processing request over Cloud Object Storage buckets."""

    service = _service(api_version)
    with ExitStack() as stack:
        input_file = stack.enter_context(input_credentials.open("rb"))
        output_file = stack.enter_context(output_credentials.open("rb"))
        try:
            options = CreateBatchOptions(
                function=function,
                input_credentials_file=input_file,
                input_bucket_location=input_bucket_location,
                input_bucket_name=input_bucket_name,
                output_credentials_file=output_file,
                output_bucket_location=output_bucket_location,
                output_bucket_name=output_bucket_name,
                model_id=model_id,
            )
        except InvalidArgumentError as exc:
            _fail_invalid(exc)
        result = _execute(service.create_batch(options))
    print_model(_console, result)


@compare_comply_app.command("batch-update")
def batch_update(
    batch_id: str = typer.Argument(...),
    action: BatchAction = typer.Option(..., "--action"),
    model_id: ModelId | None = _MODEL_ID,
    api_version: str | None = _API_VERSION,
) -> None:
    """Rescan the input bucket of a batch, or cancel it."""

    service = _service(api_version)
    try:
        options = UpdateBatchOptions(batch_id=batch_id, action=action, model_id=model_id)
    except InvalidArgumentError as exc:
        _fail_invalid(exc)
    print_model(_console, _execute(service.update_batch(options)))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
