"""DNS zones and their resource record sets (RRSets).

Zones are addressed by ID or by name; RRSets by `(name, type)` within a zone.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from hcloud_client.core.domain.actions import Action, ActionResource
from hcloud_client.core.domain.common import (
    HCloudModel,
    Labels,
    ListResponse,
    RequestModel,
    ResponseModel,
)

ZoneMode = Literal["primary", "secondary"]
RRSetType = Literal[
    "A", "AAAA", "CAA", "CNAME", "DS", "HINFO", "HTTPS", "MX", "NS", "PTR", "RP", "SOA", "SRV", "SVCB", "TLSA", "TXT"
]


class ZoneProtection(BaseModel):
    delete: bool


class PrimaryNameserver(BaseModel):
    address: str
    port: int | None = None
    tsig_algorithm: str | None = None
    tsig_key: str | None = None


class Zone(HCloudModel):
    id: int | str
    name: str
    created: str
    mode: ZoneMode | None = None
    ttl: int
    labels: Labels
    status: str
    record_count: int | None = None
    protection: ZoneProtection | None = None
    primary_nameservers: list[PrimaryNameserver] | None = None
    authoritative_nameservers: dict[str, object] | None = None
    registrar: str | None = None


class ZoneResponse(ResponseModel):
    zone: Zone


class ListZonesResponse(ListResponse):
    zones: list[Zone]


class CreateZoneRequest(RequestModel):
    name: str = Field(..., min_length=1)
    mode: ZoneMode | None = None
    ttl: int | None = Field(default=None, gt=0)
    labels: Labels | None = None
    primary_nameservers: list[PrimaryNameserver] | None = None
    rrsets: list[dict[str, object]] | None = None
    zonefile: str | None = None


class CreateZoneResponse(ResponseModel):
    zone: Zone
    action: Action | None = None


class UpdateZoneRequest(RequestModel):
    labels: Labels | None = None


class ZoneFileResponse(ResponseModel):
    zonefile: str


class ImportZoneFileRequest(RequestModel):
    zonefile: str = Field(..., min_length=1)


class ChangeTTLRequest(RequestModel):
    ttl: int = Field(..., gt=0)


class ChangePrimaryNameserversRequest(RequestModel):
    primary_nameservers: list[PrimaryNameserver]


class RRSetRecord(BaseModel):
    value: str
    comment: str | None = None


class RRSetProtection(BaseModel):
    change: bool


class RRSet(HCloudModel):
    id: str
    name: str
    type: str
    ttl: int | None
    labels: Labels
    protection: RRSetProtection | None = None
    records: list[RRSetRecord]
    zone: int | str | None = None
    blocking: list[ActionResource] | None = None


class RRSetResponse(ResponseModel):
    rrset: RRSet


class ListRRSetsResponse(ListResponse):
    rrsets: list[RRSet]


class RRSetRecordRequest(RequestModel):
    value: str = Field(..., min_length=1)
    comment: str | None = None


class CreateRRSetRequest(RequestModel):
    name: str = Field(..., min_length=1)
    type: RRSetType
    ttl: int | None = None
    records: list[RRSetRecordRequest]
    labels: Labels | None = None


class CreateRRSetResponse(ResponseModel):
    rrset: RRSet
    action: Action | None = None


class UpdateRRSetRequest(RequestModel):
    labels: Labels | None = None


class ChangeRRSetProtectionRequest(RequestModel):
    change: bool


class ChangeRRSetTTLRequest(RequestModel):
    ttl: int | None


class SetRecordsRequest(RequestModel):
    records: list[RRSetRecordRequest]


class AddRecordsRequest(RequestModel):
    records: list[RRSetRecordRequest]
    ttl: int | None = None


class RemoveRecordsRequest(RequestModel):
    records: list[RRSetRecordRequest]


class UpdateRecordsRequest(RequestModel):
    records: list[RRSetRecordRequest]
