"""
Product MongoDB Schema

Defines the Product document model for the 'products' collection, plus the
input models validated before anything is sent to the store.

Schema Fields:
- _id: ObjectId (MongoDB auto-generated)
- name: Display name (required, not unique)
- rate: Price
- dimension: Free-text size (e.g., "5inX2.5inX7in")
- reviews: Array of embedded {reviewer, rating}, order preserved
- seller: Embedded {seller_name, seller_location, seller_rating <= 10}
- expiryDate: Timestamp, defaults to creation time
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from shopcart.database.base import BaseDocument, utc_now

MAX_SELLER_RATING = 10

# Product fields that a patch may change but never set to null
REQUIRED_STORED_FIELDS = ("name", "reviews", "expiry_date")


class Review(BaseModel):
    """Embedded customer review."""

    reviewer: str | None = None
    rating: float | None = None


class Seller(BaseModel):
    """Embedded seller details."""

    seller_name: str | None = None
    seller_location: str | None = None
    seller_rating: float | None = Field(default=None, le=MAX_SELLER_RATING)


class Product(BaseDocument):
    """Product record stored in the 'products' collection."""

    name: str = Field(min_length=1)
    rate: float | None = None
    dimension: str | None = None
    reviews: list[Review] = Field(default_factory=list)
    seller: Seller | None = None
    expiry_date: datetime = Field(default_factory=utc_now, alias="expiryDate")

    model_config = ConfigDict(populate_by_name=True)

    class Settings(BaseDocument.Settings):
        name = "products"

    def __str__(self) -> str:
        rate = f"{self.rate:.2f}" if self.rate is not None else "n/a"
        return f"{self.name} (rate: {rate}, id: {self.id})"


class ProductCreate(BaseModel):
    """
    Payload accepted by ProductRepository.create().

    Unknown fields are dropped, the same way the store schema ignores paths
    it does not declare.
    """

    name: str = Field(min_length=1)
    rate: float | None = None
    dimension: str | None = None
    reviews: list[Review] = Field(default_factory=list)
    seller: Seller | None = None
    expiry_date: datetime | None = Field(default=None, alias="expiryDate")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_document(self) -> Product:
        """Build the Product document; an unset expiry date gets the default."""
        return Product(**self.model_dump(exclude_none=True))


class ProductPatch(BaseModel):
    """Partial product used by the update operations."""

    name: str | None = Field(default=None, min_length=1)
    rate: float | None = None
    dimension: str | None = None
    reviews: list[Review] | None = None
    seller: Seller | None = None
    expiry_date: datetime | None = Field(default=None, alias="expiryDate")

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    @model_validator(mode="after")
    def check_fields(self) -> "ProductPatch":
        if not self.model_fields_set:
            raise ValueError("patch must set at least one field")
        # Stored documents must keep these fields readable as Product
        for field in REQUIRED_STORED_FIELDS:
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be unset")
        return self

    def to_update(self) -> dict:
        """Return the $set update document using stored field names."""
        return {"$set": self.model_dump(by_alias=True, exclude_unset=True)}
