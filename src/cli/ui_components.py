"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from pydantic import BaseModel
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.compare_comply import Batches, FeedbackList
from core.errors import ServiceResponseError


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (solo modos interactivos)."""

    title = Text("Watson SDK", style="bold cyan")
    subtitle = Text("Compare and Comply • Discovery • NLU • Speech to Text", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_model(console: Console, model: BaseModel | None) -> None:
    """Imprime un DTO como JSON (sin campos vacíos)."""

    if model is None:
        console.print("[green]OK[/green]")
        return
    console.print_json(model.model_dump_json(exclude_none=True))


def build_batches_table(batches: Batches) -> Table:
    table = Table(title="Batches")
    table.add_column("Batch ID", style="cyan", no_wrap=True)
    table.add_column("Function", style="white")
    table.add_column("Status", style="green")
    table.add_column("Docs (ok/failed/pending/total)", style="magenta")
    table.add_column("Updated", style="dim")

    for batch in batches.batches or []:
        counts = batch.document_counts
        docs = "-"
        if counts is not None:
            docs = f"{counts.successful or 0}/{counts.failed or 0}/{counts.pending or 0}/{counts.total or 0}"
        table.add_row(
            batch.batch_id or "-",
            batch.function or "-",
            batch.status or "-",
            docs,
            batch.updated.isoformat() if batch.updated else "-",
        )
    return table


def build_feedback_table(feedback_list: FeedbackList) -> Table:
    table = Table(title="Feedback")
    table.add_column("Feedback ID", style="cyan", no_wrap=True)
    table.add_column("Created", style="dim")
    table.add_column("Type", style="white")
    table.add_column("Document", style="magenta")
    table.add_column("Comment", style="white")

    for entry in feedback_list.feedback or []:
        data = entry.feedback_data
        document = data.document.title if data and data.document else None
        table.add_row(
            entry.feedback_id or "-",
            entry.created.isoformat() if entry.created else "-",
            (data.feedback_type if data else None) or "-",
            document or "-",
            entry.comment or "",
        )
    return table


def build_error_panel(error: ServiceResponseError) -> Panel:
    body = Text()
    body.append(f"{error.message}\n", style="bold")
    body.append(f"HTTP {error.status_code}", style="dim")
    if error.transaction_id:
        body.append(f"\nTransaction: {error.transaction_id}", style="dim")
    return Panel(body, title=Text(type(error).__name__, style="bold red"), border_style="red")
