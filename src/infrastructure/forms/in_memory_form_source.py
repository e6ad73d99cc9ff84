"""
Adapter: In-Memory Form Source

Holds a Form already resolved in memory (e.g. parsed from a JSON payload)
and serves it to the core through the IFormSource port.
"""

from src.core.entities.value import Form, Value, ValueType
from src.core.errors import ValueNotFoundError
from src.core.interfaces.form_source import IFormSource


class InMemoryFormSource(IFormSource):
    """Form source backed by a Form instance. Values are served, never copied."""

    def __init__(self, form: Form):
        self._form = form

    @property
    def form(self) -> Form:
        return self._form

    def request(self) -> list[ValueType]:
        return list(self._form.request)

    def find_value(self, value_type: ValueType) -> Value:
        value = self._form.values.get(value_type)
        if value is None:
            raise ValueNotFoundError(f"Value type {value_type!r} requested but not provided")
        return value

    def identity_selfie_required(self) -> bool:
        return self._form.identity_selfie_required

    def validate_request(self) -> None:
        """Check every requested category against the value keys, up front."""
        missing = [t.value for t in self._form.request if t not in self._form.values]
        if missing:
            raise ValueNotFoundError(f"Requested value types without values: {', '.join(missing)}")
