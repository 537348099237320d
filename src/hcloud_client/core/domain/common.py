"""Base models and shapes shared by every resource family."""

from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

Labels = dict[str, str]
IdOrName = Union[int, str]


class HCloudModel(BaseModel):
    """Open model: fields the client does not know about are kept as extras."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class RequestModel(BaseModel):
    """Strict model for request bodies: unknown keys are a validation error."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def to_body(self) -> dict[str, object]:
        """JSON body with only the fields the caller actually set."""

        return self.model_dump(mode="json", exclude_unset=True, by_alias=True)


class ResponseModel(BaseModel):
    """Response envelope; unknown top-level keys are dropped."""

    model_config = ConfigDict(extra="ignore")


class PaginationMeta(BaseModel):
    page: int
    per_page: int
    previous_page: int | None = None
    next_page: int | None = None
    last_page: int
    total_entries: int


class ListMeta(BaseModel):
    pagination: PaginationMeta


class ListResponse(ResponseModel):
    meta: ListMeta | None = None


class Price(BaseModel):
    net: str
    gross: str


class LocationPrice(BaseModel):
    location: str
    price_hourly: Price
    price_monthly: Price


class DeleteProtection(BaseModel):
    delete: bool


class Deprecation(BaseModel):
    announced: str
    unavailable_after: str


class DnsPointer(BaseModel):
    ip: str
    dns_ptr: str


class ChangeProtectionRequest(RequestModel):
    delete: bool


class ChangeReverseDnsRequest(RequestModel):
    ip: str = Field(..., min_length=1)
    dns_ptr: str | None
