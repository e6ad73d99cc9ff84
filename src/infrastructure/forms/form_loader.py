"""
Form loader — JSON payload → Form.

Pydantic validates the raw payload (category names, field types) before
anything reaches the core, so the core only ever sees well-typed Values.
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, Field

from src.core.entities.value import FileRef, Form, Value, ValueType

logger = logging.getLogger(__name__)


class FileRefPayload(BaseModel):
    id: str
    name: str = ""
    size: int = 0


class ValuePayload(BaseModel):
    fields: dict[str, str] = {}
    scans: list[FileRefPayload] = []
    selfie: FileRefPayload | None = None


class FormPayload(BaseModel):
    request: list[ValueType]
    values: dict[ValueType, ValuePayload] = {}
    identity_selfie_required: bool | None = Field(
        default=None,
        description="Falls back to Settings.identity_selfie_required_default when omitted.",
    )


def _file_ref(payload: FileRefPayload | None) -> FileRef | None:
    if payload is None:
        return None
    return FileRef(id=payload.id, name=payload.name, size=payload.size)


def form_from_payload(payload: FormPayload, selfie_required_default: bool = False) -> Form:
    """Build the domain Form from an already-validated payload."""
    values = {
        value_type: Value(
            type=value_type,
            fields=dict(value.fields),
            scans=[_file_ref(s) for s in value.scans],
            selfie=_file_ref(value.selfie),
        )
        for value_type, value in payload.values.items()
    }
    selfie_required = payload.identity_selfie_required
    if selfie_required is None:
        selfie_required = selfie_required_default
    return Form(
        request=list(payload.request),
        values=values,
        identity_selfie_required=selfie_required,
    )


def load_form(data: dict, selfie_required_default: bool = False) -> Form:
    """Validate a raw dict and build a Form. Raises pydantic.ValidationError."""
    return form_from_payload(FormPayload.model_validate(data), selfie_required_default)


def load_form_file(path: str | Path, selfie_required_default: bool = False) -> Form:
    """Load a Form from a JSON file."""
    path = Path(path)
    data = json.loads(path.read_text(encoding="utf-8"))
    form = load_form(data, selfie_required_default)
    logger.info(f"Loaded form from {path.name}: {len(form.request)} requested, {len(form.values)} values")
    return form
