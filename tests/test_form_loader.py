import json

import pytest
from pydantic import ValidationError

from src.core.entities.value import Form, ValueType
from src.core.errors import ValueNotFoundError
from src.infrastructure.forms import InMemoryFormSource, load_form, load_form_file

V = ValueType

PAYLOAD = {
    "request": ["PersonalDetails", "Passport", "Phone"],
    "values": {
        "PersonalDetails": {"fields": {"first_name": "Maria"}},
        "Passport": {
            "fields": {"document_no": "BR1234567"},
            "scans": [{"id": "scan-001", "name": "front.jpg", "size": 10}],
            "selfie": {"id": "selfie-001"},
        },
        "Phone": {"fields": {"value": "+1 555 0100"}},
    },
}


def test_load_form():
    form = load_form(PAYLOAD)
    assert form.request == [V.PERSONAL_DETAILS, V.PASSPORT, V.PHONE]
    passport = form.values[V.PASSPORT]
    assert passport.type == V.PASSPORT
    assert passport.scans[0].id == "scan-001"
    assert passport.selfie.id == "selfie-001"
    assert form.values[V.PHONE].selfie is None
    assert form.identity_selfie_required is False


def test_selfie_default_applies_only_when_omitted():
    assert load_form(PAYLOAD, selfie_required_default=True).identity_selfie_required is True
    explicit = dict(PAYLOAD, identity_selfie_required=False)
    assert load_form(explicit, selfie_required_default=True).identity_selfie_required is False


def test_unknown_category_is_rejected():
    with pytest.raises(ValidationError):
        load_form({"request": ["SocialSecurityCard"], "values": {}})


def test_load_form_file(tmp_path):
    path = tmp_path / "form.json"
    path.write_text(json.dumps(PAYLOAD), encoding="utf-8")
    form = load_form_file(path)
    assert len(form.values) == 3


def test_form_source_lookup():
    source = InMemoryFormSource(load_form(PAYLOAD))
    assert source.request() == [V.PERSONAL_DETAILS, V.PASSPORT, V.PHONE]
    assert source.find_value(V.PHONE).fields["value"] == "+1 555 0100"
    assert source.find_value(V.PHONE) is source.find_value(V.PHONE)
    with pytest.raises(ValueNotFoundError):
        source.find_value(V.EMAIL)


def test_validate_request_names_missing_values():
    form = Form(request=[V.EMAIL, V.UTILITY_BILL], values={})
    with pytest.raises(ValueNotFoundError, match="Email, UtilityBill"):
        InMemoryFormSource(form).validate_request()
