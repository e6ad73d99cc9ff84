from .form_loader import (
    FileRefPayload,
    FormPayload,
    ValuePayload,
    form_from_payload,
    load_form,
    load_form_file,
)
from .in_memory_form_source import InMemoryFormSource

__all__ = [
    "FileRefPayload",
    "FormPayload",
    "ValuePayload",
    "form_from_payload",
    "load_form",
    "load_form_file",
    "InMemoryFormSource",
]
