# =============================================================================
# core/models/record.py - PocketBase Record Schemas
# =============================================================================
# These models describe what PocketBase returns:
# - Record: One record with a guaranteed id and any number of extra fields
# - RecordPage: One page of a list request plus pagination metadata
# - AuthSession: Token + account record from auth-with-password
#
# Records are owned by the backend. We only read snapshots, so every field
# the backend sends is kept and re-emitted as-is, in the order it was sent.
# =============================================================================

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Record(BaseModel):
    """
    A single PocketBase record.

    Only `id` is guaranteed. No field is declared on the model: system
    fields (id, collectionId, collectionName) and user-defined fields
    (title, image, ...) are all stored as extra fields, so they keep the
    order the backend sent them in.

    Example:
        {
            "collectionId": "pbc_1782645",
            "collectionName": "flyers",
            "id": "r8xk2p0q1w3e4t5",
            "title": "Spring Market",
            "image": "spring_market_a1b2c3.png"
        }
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    @model_validator(mode="after")
    def check_id(self) -> "Record":
        record_id = (self.model_extra or {}).get("id")
        if not isinstance(record_id, str) or not record_id:
            raise ValueError("record id must be a non-empty string")
        return self

    @property
    def id(self) -> str:
        return self.model_extra["id"]

    def get(self, field: str, default: Any = None) -> Any:
        """Read any field by its wire name."""
        return (self.model_extra or {}).get(field, default)

    @property
    def collection_id(self) -> str | None:
        return self.get("collectionId")

    @property
    def collection_name(self) -> str | None:
        return self.get("collectionName")

    def to_dict(self) -> dict[str, Any]:
        """All fields, keyed by their wire names, in backend order."""
        return dict(self.model_extra or {})


class RecordPage(BaseModel):
    """
    One page of a collection list request.

    Mirrors the PocketBase list response envelope. `page` is 1-based and a
    page never holds more than `perPage` items. `totalItems` and
    `totalPages` are -1 when the request used skipTotal.
    """

    model_config = ConfigDict(populate_by_name=True)

    page: int = Field(..., ge=1)
    per_page: int = Field(..., ge=1, alias="perPage")
    total_items: int = Field(default=-1, ge=-1, alias="totalItems")
    total_pages: int = Field(default=-1, ge=-1, alias="totalPages")
    items: list[Record] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_page_size(self) -> "RecordPage":
        if len(self.items) > self.per_page:
            raise ValueError(
                f"page holds {len(self.items)} items but perPage is {self.per_page}"
            )
        return self


class AuthSession(BaseModel):
    """
    Result of a successful password login.

    The token is sent as the Authorization header on later requests.
    """

    token: str = Field(..., min_length=1, repr=False)
    record: Record
