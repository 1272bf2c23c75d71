"""
Unit Tests: Product input models

Validation that runs before anything reaches MongoDB.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from shopcart.exceptions import ProductValidationError
from shopcart.models import ProductCreate, ProductPatch, Review, Seller


def test_create_accepts_full_payload() -> None:
    payload = ProductCreate.model_validate(
        {
            "name": "Vertical Mouse - HP",
            "rate": 99.50,
            "dimension": "5inX2.5inX7in",
            "reviews": [
                {"reviewer": "Alice", "rating": 5},
                {"reviewer": "Bob", "rating": 4},
            ],
            "seller": {
                "seller_name": "TechStore",
                "seller_location": "Canada",
                "seller_rating": 9,
            },
        }
    )

    assert payload.name == "Vertical Mouse - HP"
    assert payload.rate == 99.50
    assert [r.reviewer for r in payload.reviews] == ["Alice", "Bob"]
    assert payload.seller == Seller(
        seller_name="TechStore", seller_location="Canada", seller_rating=9
    )
    assert payload.expiry_date is None


def test_create_requires_name() -> None:
    with pytest.raises(ValidationError) as exc_info:
        ProductCreate.model_validate({"rate": 50})

    assert any(error["loc"] == ("name",) for error in exc_info.value.errors())


def test_create_rejects_empty_name() -> None:
    with pytest.raises(ValidationError):
        ProductCreate(name="")


def test_seller_rating_is_capped_at_ten() -> None:
    assert Seller(seller_rating=10).seller_rating == 10

    with pytest.raises(ValidationError):
        Seller(seller_rating=10.5)


def test_create_drops_unknown_fields() -> None:
    payload = ProductCreate.model_validate({"name": "Keyboard", "color": "black"})

    assert "color" not in payload.model_dump()


def test_create_accepts_stored_expiry_name() -> None:
    expires = datetime(2030, 1, 1, tzinfo=timezone.utc)

    payload = ProductCreate.model_validate({"name": "Keyboard", "expiryDate": expires})

    assert payload.expiry_date == expires


def test_create_rejects_non_numeric_rate() -> None:
    with pytest.raises(ValidationError):
        ProductCreate(name="Keyboard", rate="cheap")


def test_patch_builds_set_document() -> None:
    patch = ProductPatch(rate=99)

    assert patch.to_update() == {"$set": {"rate": 99.0}}


def test_patch_uses_stored_field_names() -> None:
    expires = datetime(2030, 1, 1, tzinfo=timezone.utc)

    update = ProductPatch(expiry_date=expires).to_update()

    assert update == {"$set": {"expiryDate": expires}}


def test_patch_embeds_nested_models_as_documents() -> None:
    patch = ProductPatch(reviews=[Review(reviewer="Carol", rating=3)])

    assert patch.to_update() == {
        "$set": {"reviews": [{"reviewer": "Carol", "rating": 3.0}]}
    }


def test_patch_must_set_a_field() -> None:
    with pytest.raises(ValidationError):
        ProductPatch()


def test_patch_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        ProductPatch.model_validate({"price": 10})


def test_patch_cannot_clear_name() -> None:
    with pytest.raises(ValidationError):
        ProductPatch(name=None)


def test_patch_checks_seller_rating() -> None:
    with pytest.raises(ValidationError):
        ProductPatch.model_validate({"seller": {"seller_rating": 11}})


def test_validation_error_lists_fields() -> None:
    with pytest.raises(ValidationError) as exc_info:
        ProductCreate.model_validate({"rate": "x"})

    error = ProductValidationError.from_pydantic(exc_info.value, "Product")

    fields = {e["field"] for e in error.errors}
    assert {"name", "rate"} <= fields
    assert error.message.startswith("Product validation failed")


@pytest.mark.parametrize(
    "patch",
    [{"reviews": None}, {"expiryDate": None}, {"expiry_date": None}],
)
def test_patch_cannot_null_fields_every_product_needs(patch: dict) -> None:
    with pytest.raises(ValidationError):
        ProductPatch.model_validate(patch)


def test_patch_may_clear_optional_fields() -> None:
    patch = ProductPatch.model_validate({"rate": None, "seller": None})

    assert patch.to_update() == {"$set": {"rate": None, "seller": None}}


def test_patch_may_empty_reviews() -> None:
    assert ProductPatch(reviews=[]).to_update() == {"$set": {"reviews": []}}
