"""Conjuntos cerrados de valores de Compare and Comply.

El valor de cada miembro es el string exacto que viaja por la red.
"""

from __future__ import annotations

from enum import Enum


class ModelId(str, Enum):
    """Modelo de análisis usado por el servicio.

    Para `/v1/element_classification` y `/v1/comparison` el servidor usa
    `contracts` por defecto; para `/v1/tables`, `tables`.
    """

    CONTRACTS = "contracts"
    TABLES = "tables"


class BatchFunction(str, Enum):
    """Método de Compare and Comply que ejecuta un batch."""

    HTML_CONVERSION = "html_conversion"
    ELEMENT_CLASSIFICATION = "element_classification"
    TABLES = "tables"


class BatchAction(str, Enum):
    """Acción aplicable a un batch pendiente o activo."""

    RESCAN = "rescan"
    CANCEL = "cancel"


class Importance(str, Enum):
    """Importancia de una parte identificada en un contrato."""

    PRIMARY = "Primary"
    UNKNOWN = "Unknown"
