"""`/zones`: DNS zones and their RRSets.

Zones are addressed by ID or name. RRSets live under
`/zones/<zone>/rrsets/<name>/<type>`; `@` names the zone apex.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence, Union

from hcloud_client.adapters.endpoints.base import ActionResourceEndpoint, build_query
from hcloud_client.core.domain.actions import Action, ActionResponse, ListActionsResponse
from hcloud_client.core.domain.common import ChangeProtectionRequest, RequestModel
from hcloud_client.core.domain.dns import (
    AddRecordsRequest,
    ChangePrimaryNameserversRequest,
    ChangeRRSetProtectionRequest,
    ChangeRRSetTTLRequest,
    ChangeTTLRequest,
    CreateRRSetRequest,
    CreateRRSetResponse,
    CreateZoneRequest,
    CreateZoneResponse,
    ImportZoneFileRequest,
    ListRRSetsResponse,
    ListZonesResponse,
    PrimaryNameserver,
    RemoveRecordsRequest,
    RRSet,
    RRSetRecordRequest,
    RRSetResponse,
    SetRecordsRequest,
    UpdateRecordsRequest,
    UpdateRRSetRequest,
    UpdateZoneRequest,
    Zone,
    ZoneFileResponse,
    ZoneResponse,
)

ZoneRef = Union[int, str]
RecordInput = Union[RRSetRecordRequest, Mapping[str, Any]]


class DnsEndpoint(ActionResourceEndpoint):
    path = "/zones"
    resource = "zone"

    # Zones

    async def list_zones(
        self,
        *,
        name: str | None = None,
        mode: str | None = None,
        label_selector: str | None = None,
        sort: str | list[str] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> ListZonesResponse:
        query = build_query(
            {
                "name": name,
                "mode": mode,
                "label_selector": label_selector,
                "sort": sort,
                "page": page,
                "per_page": per_page,
            }
        )
        return await self._list(ListZonesResponse, query)

    async def create_zone(self, params: CreateZoneRequest | Mapping[str, Any]) -> CreateZoneResponse:
        body = self._body(CreateZoneRequest, params, "Create zone request")
        return await self._call("POST", self.path, CreateZoneResponse, body=body, context="Create zone response")

    async def get_zone(self, zone: ZoneRef) -> Zone:
        response = await self._fetch(self._item_path(zone), ZoneResponse)
        return response.zone

    async def update_zone(self, zone: ZoneRef, params: UpdateZoneRequest | Mapping[str, Any]) -> Zone:
        body = self._body(UpdateZoneRequest, params, "Update zone request")
        response = await self._call("PUT", self._item_path(zone), ZoneResponse, body=body, context="Update zone response")
        return response.zone

    async def delete_zone(self, zone: ZoneRef) -> Action | None:
        return await self._delete(self._item_path(zone))

    async def export_zone(self, zone: ZoneRef) -> str:
        """Return the zone in BIND zone file format."""

        response = await self._call(
            "GET", self._item_path(zone, "zonefile"), ZoneFileResponse, context="Export zone response"
        )
        return response.zonefile

    async def import_zone_file(self, zone: ZoneRef, zonefile: str) -> Action:
        """Replace every RRSet of the zone with the content of `zonefile`."""

        return await self._post_action(zone, "import_zonefile", ImportZoneFileRequest, {"zonefile": zonefile})

    async def list_zone_actions(
        self,
        zone: ZoneRef,
        *,
        status: str | list[str] | None = None,
        sort: str | list[str] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> ListActionsResponse:
        return await self.list_actions(zone, status=status, sort=sort, page=page, per_page=per_page)

    async def get_zone_action(self, zone: ZoneRef, action_id: int) -> Action:
        return await self.get_action(zone, action_id)

    async def change_zone_protection(self, zone: ZoneRef, *, delete: bool) -> Action:
        return await self._post_action(zone, "change_protection", ChangeProtectionRequest, {"delete": delete})

    async def change_zone_default_ttl(self, zone: ZoneRef, ttl: int) -> Action:
        return await self._post_action(zone, "change_ttl", ChangeTTLRequest, {"ttl": ttl})

    async def change_zone_primary_nameservers(
        self,
        zone: ZoneRef,
        nameservers: Sequence[PrimaryNameserver | Mapping[str, Any]],
    ) -> Action:
        """Only valid for secondary zones."""

        return await self._post_action(
            zone,
            "change_primary_nameservers",
            ChangePrimaryNameserversRequest,
            {"primary_nameservers": list(nameservers)},
        )

    # RRSets

    def _rrset_path(self, zone: ZoneRef, name: str, rr_type: str, *parts: str) -> str:
        return self._item_path(zone, "rrsets", name, rr_type, *parts)

    async def _rrset_action(
        self,
        zone: ZoneRef,
        name: str,
        rr_type: str,
        command: str,
        request_model: type[RequestModel],
        params: Mapping[str, Any],
    ) -> Action:
        label = command.replace("_", " ").capitalize()
        body = self._body(request_model, params, f"{label} RRSet request")
        response = await self._call(
            "POST",
            self._rrset_path(zone, name, rr_type, "actions", command),
            ActionResponse,
            body=body,
            context=f"{label} RRSet response",
        )
        return response.action

    async def list_rrsets(
        self,
        zone: ZoneRef,
        *,
        name: str | None = None,
        type: str | None = None,
        label_selector: str | None = None,
        sort: str | list[str] | None = None,
        page: int | None = None,
        per_page: int | None = None,
    ) -> ListRRSetsResponse:
        query = build_query(
            {
                "name": name,
                "type": type,
                "label_selector": label_selector,
                "sort": sort,
                "page": page,
                "per_page": per_page,
            }
        )
        return await self._call(
            "GET", self._item_path(zone, "rrsets"), ListRRSetsResponse, params=query, context="List RRSets response"
        )

    async def get_rrset(self, zone: ZoneRef, name: str, rr_type: str) -> RRSet:
        response = await self._call(
            "GET", self._rrset_path(zone, name, rr_type), RRSetResponse, context="Get RRSet response"
        )
        return response.rrset

    async def create_rrset(self, zone: ZoneRef, params: CreateRRSetRequest | Mapping[str, Any]) -> CreateRRSetResponse:
        body = self._body(CreateRRSetRequest, params, "Create RRSet request")
        return await self._call(
            "POST", self._item_path(zone, "rrsets"), CreateRRSetResponse, body=body, context="Create RRSet response"
        )

    async def update_rrset(
        self,
        zone: ZoneRef,
        name: str,
        rr_type: str,
        params: UpdateRRSetRequest | Mapping[str, Any],
    ) -> RRSet:
        body = self._body(UpdateRRSetRequest, params, "Update RRSet request")
        response = await self._call(
            "PUT", self._rrset_path(zone, name, rr_type), RRSetResponse, body=body, context="Update RRSet response"
        )
        return response.rrset

    async def delete_rrset(self, zone: ZoneRef, name: str, rr_type: str) -> Action | None:
        return await self._delete(self._rrset_path(zone, name, rr_type))

    async def change_rrset_protection(self, zone: ZoneRef, name: str, rr_type: str, *, change: bool) -> Action:
        return await self._rrset_action(
            zone, name, rr_type, "change_protection", ChangeRRSetProtectionRequest, {"change": change}
        )

    async def change_rrset_ttl(self, zone: ZoneRef, name: str, rr_type: str, ttl: int | None) -> Action:
        """Set the RRSet TTL; `None` falls back to the zone default."""

        return await self._rrset_action(zone, name, rr_type, "change_ttl", ChangeRRSetTTLRequest, {"ttl": ttl})

    async def set_rrset_records(
        self, zone: ZoneRef, name: str, rr_type: str, records: Sequence[RecordInput]
    ) -> Action:
        return await self._rrset_action(
            zone, name, rr_type, "set_records", SetRecordsRequest, {"records": list(records)}
        )

    async def add_rrset_records(
        self,
        zone: ZoneRef,
        name: str,
        rr_type: str,
        records: Sequence[RecordInput],
        *,
        ttl: int | None = None,
    ) -> Action:
        """Add records, creating the RRSet when it does not exist yet."""

        params: dict[str, Any] = {"records": list(records)}
        if ttl is not None:
            params["ttl"] = ttl
        return await self._rrset_action(zone, name, rr_type, "add_records", AddRecordsRequest, params)

    async def remove_rrset_records(
        self, zone: ZoneRef, name: str, rr_type: str, records: Sequence[RecordInput]
    ) -> Action:
        return await self._rrset_action(
            zone, name, rr_type, "remove_records", RemoveRecordsRequest, {"records": list(records)}
        )

    async def update_rrset_records(
        self, zone: ZoneRef, name: str, rr_type: str, records: Sequence[RecordInput]
    ) -> Action:
        """Update the comments of existing records, matched by value."""

        return await self._rrset_action(
            zone, name, rr_type, "update_records", UpdateRecordsRequest, {"records": list(records)}
        )
