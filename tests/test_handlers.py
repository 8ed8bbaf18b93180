from types import SimpleNamespace

import pytest

from rxform.handlers import FormState, extract_event_value, make_numeric_handler, make_phone_handler
from rxform.utils.validation import PERCENTAGE, PRICE, QUANTITY


def test_nested_path_update_keeps_sibling_identity():
    previous = {"stripInfo": {"purchasePrice": "1", "sellingPrice": "2"}, "other": {}}
    form = FormState(previous)
    handler = make_numeric_handler(form.set_state, "stripInfo.purchasePrice", PRICE)

    handler("3.5")

    result = form.value
    assert result["stripInfo"]["purchasePrice"] == "3.5"
    assert result["stripInfo"]["sellingPrice"] == "2"
    assert result["other"] is previous["other"]
    assert result is not previous
    assert result["stripInfo"] is not previous["stripInfo"]
    assert previous["stripInfo"]["purchasePrice"] == "1"


def test_whole_state_replacement_without_path():
    form = FormState("")
    handler = make_numeric_handler(form.set_state, None, QUANTITY.with_overrides(min=1))

    handler("0abc")
    assert form.value == "1"

    handler("25")
    assert form.value == "25"
    assert form.history == ["", "1", "25"]


def test_top_level_key_is_merged():
    previous = {"discountValue": "", "discountType": "percentage"}
    form = FormState(previous)

    make_numeric_handler(form.set_state, "discountValue", PERCENTAGE)("250")

    assert form.value == {"discountValue": "100", "discountType": "percentage"}
    assert previous["discountValue"] == ""


def test_missing_branch_is_created():
    form = FormState({})
    make_numeric_handler(form.set_state, "individualInfo.stock", QUANTITY)("12 strips")
    assert form.value == {"individualInfo": {"stock": "12"}}


def test_set_state_called_once_per_event():
    calls = []
    handler = make_numeric_handler(calls.append, "amount", PRICE)

    handler("12.345")

    assert len(calls) == 1
    updater = calls[0]
    assert callable(updater)
    assert updater({"amount": "1", "note": "x"}) == {"amount": "12.34", "note": "x"}


def test_setter_receives_plain_value_without_path():
    calls = []
    make_numeric_handler(calls.append)("abc")
    assert calls == [""]


def test_handler_accepts_event_objects():
    form = FormState({})
    handler = make_numeric_handler(form.set_state, "customer.creditLimit", {"allowDecimals": True, "maxDecimals": 2})

    handler(SimpleNamespace(target=SimpleNamespace(value="3.333")))
    assert form.value["customer"]["creditLimit"] == "3.33"

    handler({"target": {"value": "7"}})
    assert form.value["customer"]["creditLimit"] == "7"


def test_extract_event_value():
    assert extract_event_value("12") == "12"
    assert extract_event_value(SimpleNamespace(target=SimpleNamespace(value="x"))) == "x"
    assert extract_event_value({"target": {"value": "y"}}) == "y"
    assert extract_event_value({"value": "z"}) == {"value": "z"}


def test_handler_construction_errors():
    with pytest.raises(TypeError):
        make_numeric_handler("not callable")
    with pytest.raises(ValueError):
        make_numeric_handler(lambda value: None, "stripInfo..mrp")
    with pytest.raises(ValueError):
        make_numeric_handler(lambda value: None, "price", {"precision": 2})


def test_phone_handler_nested_path():
    previous = {"supplier": {"name": "Medline", "phone": ""}, "items": []}
    form = FormState(previous)

    make_phone_handler(form.set_state, "supplier.phone")("+91 98765-43210")

    assert form.value["supplier"] == {"name": "Medline", "phone": "+919876543210"}
    assert form.value["items"] is previous["items"]


def test_phone_handler_whole_state():
    form = FormState("")
    make_phone_handler(form.set_state)("call 555-0100")
    assert form.value == "5550100"


def test_form_state_applies_updaters():
    form = FormState()
    assert form.value == {}
    form.set_state(lambda prev: {**prev, "a": 1})
    form.set_state({"b": 2})
    assert form.history == [{}, {"a": 1}, {"b": 2}]
