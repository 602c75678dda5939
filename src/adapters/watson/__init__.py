"""Clientes de servicios IBM Watson.

Cada módulo expone una clase por servicio; todas componen `ServiceCore`.
"""

from adapters.watson.compare_comply import CompareComplyV1
from adapters.watson.discovery import DiscoveryV1
from adapters.watson.natural_language_understanding import NaturalLanguageUnderstandingV1
from adapters.watson.service_core import ServiceCall, ServiceCore
from adapters.watson.speech_to_text import SpeechToTextV1

__all__ = [
    "CompareComplyV1",
    "DiscoveryV1",
    "NaturalLanguageUnderstandingV1",
    "ServiceCall",
    "ServiceCore",
    "SpeechToTextV1",
]
