import json

import pytest

from app.client.product_form import (
    CATEGORIES,
    FormState,
    FormValidationError,
    apply_field_changes,
    apply_removal,
    apply_upload_success,
    build_payload,
    reset_state,
    state_from_product,
    validate_product_form,
)

VALID = {
    "title": "Hand-carved Bowl",
    "description": "Walnut bowl carved by hand",
    "price": "15.00",
    "quantityAvailable": "3",
    "category": "home_decor",
    "images": ["url1"],
}


def errors_for(**overrides):
    with pytest.raises(FormValidationError) as exc:
        validate_product_form({**VALID, **overrides})
    return exc.value.errors


def test_valid_form():
    values = validate_product_form(VALID)
    assert values.price == "15.00"
    assert values.quantity_available == "3"


@pytest.mark.parametrize("title", ["", "a", "Bowl"])
def test_short_title_blocked(title):
    assert errors_for(title=title) == {"title": "Title must be at least 5 characters"}


def test_short_description_blocked():
    assert errors_for(description="x" * 19) == {
        "description": "Description must be at least 20 characters"
    }
    validate_product_form({**VALID, "description": "x" * 20})


@pytest.mark.parametrize("price", ["0", "-3", "abc", "", "nan", "inf", "1_000"])
def test_bad_price_blocked(price):
    assert errors_for(price=price) == {"price": "Price must be a positive number"}


@pytest.mark.parametrize("price", ["12.50", "0.01", " 7 "])
def test_positive_price_accepted(price):
    assert validate_product_form({**VALID, "price": price}).price == price


@pytest.mark.parametrize("quantity", ["-1", "abc", "", "1.5"])
def test_bad_quantity_blocked(quantity):
    assert errors_for(quantityAvailable=quantity) == {
        "quantityAvailable": "Quantity must be a non-negative number"
    }


@pytest.mark.parametrize("quantity", ["0", "10"])
def test_quantity_accepted(quantity):
    validate_product_form({**VALID, "quantityAvailable": quantity})


def test_category_must_be_known():
    assert errors_for(category="") == {"category": "Please select a category"}
    assert errors_for(category="weapons") == {"category": "Please select a category"}
    assert "toys" in CATEGORIES


def test_no_images_blocked():
    assert errors_for(images=[]) == {"images": "At least one image is required"}


def test_all_errors_reported_together():
    errors = errors_for(title="x", price="0", images=[])
    assert set(errors) == {"title", "price", "images"}


def test_upload_success_appends_in_order():
    state = apply_upload_success(reset_state(), "url1", "data1")
    state = apply_upload_success(state, "url2", "data2")

    assert state.image_urls == ("url1", "url2")
    assert state.image_binaries == {"url1": "data1", "url2": "data2"}
    assert state.preview_source("url2") == "data2"
    assert state.preview_source("remote.png") == "remote.png"


def test_transitions_do_not_mutate_input():
    before = apply_upload_success(reset_state(), "url1", "data1")
    apply_upload_success(before, "url2", "data2")
    apply_removal(before, 0)

    assert before.image_urls == ("url1",)
    assert before.image_binaries == {"url1": "data1"}


def test_removal_keeps_others_and_order():
    state = reset_state()
    for i in range(4):
        state = apply_upload_success(state, f"url{i}", f"data{i}")

    state = apply_removal(state, 1)

    assert state.image_urls == ("url0", "url2", "url3")
    assert state.image_binaries == {"url0": "data0", "url2": "data2", "url3": "data3"}


def test_removal_of_image_without_preview():
    state = FormState(image_urls=("remote.png", "url1"), image_binaries={"url1": "data1"})

    state = apply_removal(state, 0)

    assert state.image_urls == ("url1",)
    assert state.image_binaries == {"url1": "data1"}


def test_removal_out_of_range():
    with pytest.raises(IndexError):
        apply_removal(reset_state(), 0)
    with pytest.raises(IndexError):
        apply_removal(apply_upload_success(reset_state(), "u", "d"), -1)


def test_field_changes():
    state = apply_field_changes(reset_state(), title="Hand-carved Bowl", price="9")
    assert state.title == "Hand-carved Bowl"
    assert state.values()["price"] == "9"

    with pytest.raises(ValueError):
        apply_field_changes(state, images=["x"])


def test_state_from_product_decodes_binaries():
    product = {
        "id": 3,
        "title": "Hand-carved Bowl",
        "description": "Walnut bowl carved by hand",
        "price": "15.00",
        "quantityAvailable": 0,
        "category": "home_decor",
        "images": ["url1"],
        "imageBinaries": json.dumps({"url1": "data1"}),
    }

    state = state_from_product(product)

    assert state.quantity_available == "0"
    assert state.image_urls == ("url1",)
    assert state.image_binaries == {"url1": "data1"}
    assert state_from_product({**product, "imageBinaries": {"url1": "x"}}).image_binaries == {"url1": "x"}
    assert state_from_product({**product, "imageBinaries": None}).image_binaries == {}


def test_build_payload():
    values = validate_product_form(VALID)

    payload = build_payload(42, values, {"url1": "data1"})

    assert payload == {
        "sellerId": 42,
        "title": "Hand-carved Bowl",
        "description": "Walnut bowl carved by hand",
        "price": "15.00",
        "quantityAvailable": 3,
        "category": "home_decor",
        "images": ["url1"],
        "imageBinaries": json.dumps({"url1": "data1"}),
    }
